"""Application - main loop orchestrator.

Each frame:
- raylib input is read into an InputSnapshot
- the InputHandler turns it into events
- the Session applies them; any repaint request recomposites the frame
- the Renderer uploads the frame and draws the toolbar
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import os
import sys
import traceback

from .session import Session
from .renderer import Renderer, window_title
from .input_handler import InputHandler, InputSnapshot, MouseState
from .events import Event, OpenRequested
from .rl_compat import rl, init_window, set_window_title
from .config import TARGET_FPS, WINDOW_TITLE, WINDOW_MIN_W, WINDOW_MIN_H
from .logging import log, increment_frame, get_frame, set_quiet


def pick_image_file() -> Optional[str]:
    """Native-ish file picker via tkinter; None when cancelled or unavailable."""
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError as e:
        log(f"[OPEN][ERR] File picker unavailable: {e!r}")
        return None

    root = tkinter.Tk()
    root.withdraw()
    try:
        path = filedialog.askopenfilename(
            title="Open image",
            filetypes=[("Images", "*.jpg *.jpeg *.png *.gif *.webp *.bmp"), ("All files", "*.*")],
        )
    finally:
        root.destroy()
    return path or None


def read_input() -> InputSnapshot:
    """Read this frame's raylib input state."""
    pos = rl.GetMousePosition()
    keys = set()
    key = rl.GetKeyPressed()
    while key:
        keys.add(int(key))
        key = rl.GetKeyPressed()
    return InputSnapshot(
        screen_w=rl.GetScreenWidth(),
        screen_h=rl.GetScreenHeight(),
        keys_pressed=frozenset(keys),
        mouse=MouseState(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            left_released=rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT),
            left_down=rl.IsMouseButtonDown(rl.MOUSE_BUTTON_LEFT),
            wheel=rl.GetMouseWheelMove(),
        ),
    )


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application()
        app.initialize(start_path)
        app.run()
    """

    session: Session = field(default_factory=lambda: Session(picker=pick_image_file))
    renderer: Renderer = field(default_factory=Renderer)
    input_handler: InputHandler = field(default_factory=InputHandler)
    running: bool = False
    _title: str = ""
    _pending: List[Event] = field(default_factory=list)

    def initialize(self, start_path: Optional[str] = None) -> None:
        """Create the window and queue the initial open, if any."""
        log("[INIT] Creating window")
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE | rl.FLAG_VSYNC_HINT)
        init_window(1280, 800, WINDOW_TITLE)
        rl.SetWindowMinSize(WINDOW_MIN_W, WINDOW_MIN_H)
        rl.MaximizeWindow()
        rl.SetExitKey(0)
        rl.SetTargetFPS(TARGET_FPS)
        log(f"[INIT] Window {rl.GetScreenWidth()}x{rl.GetScreenHeight()}")

        if start_path:
            self._pending.append(OpenRequested(start_path))

    def run(self) -> None:
        self.running = True
        log("[APP] Starting main loop")
        try:
            while self.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
        finally:
            self._cleanup()

    def _frame(self) -> None:
        if rl.WindowShouldClose():
            self.running = False
            return

        # Resize goes first so a queued open composites at the right size.
        events = self.input_handler.translate(read_input())
        events.extend(self._pending)
        self._pending.clear()
        if self.input_handler.close_requested:
            self.running = False
            return

        needs_repaint = False
        for event in events:
            if self.session.handle_event(event) is not None:
                needs_repaint = True

        if needs_repaint:
            self.session.repaint()
            self.renderer.upload(self.session.buffer)

        title = window_title(self.session)
        if title != self._title:
            set_window_title(title)
            self._title = title

        self.renderer.draw_frame(self.session, self.input_handler.toolbar)
        increment_frame()

    def _cleanup(self) -> None:
        log("[APP] Starting cleanup")
        self.renderer.release()
        try:
            rl.CloseWindow()
        except Exception as e:
            log(f"[APP][ERR] CloseWindow: {e!r}")
        log(f"[EXIT] frames={get_frame()}")


def parse_args(argv: List[str]) -> Tuple[Optional[str], bool]:
    """Return (start_path or None, quiet)."""
    quiet = False
    start_path = None
    for a in argv:
        if a in ("-q", "--quiet"):
            quiet = True
            continue
        p = os.path.abspath(a)
        if start_path is None and os.path.exists(p):
            start_path = p
        else:
            log(f"[ARGS] Ignoring argument: {a}")
    return start_path, quiet


def main(argv: Optional[List[str]] = None) -> int:
    start_path, quiet = parse_args(sys.argv[1:] if argv is None else argv)
    set_quiet(quiet)
    log(f"[MAIN] Starting, path={start_path}")

    app = Application()
    try:
        app.initialize(start_path)
    except Exception as e:
        log(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
        log(f"[INIT][CRITICAL] Traceback:\n{traceback.format_exc()}")
        return 1
    app.run()
    return 0
