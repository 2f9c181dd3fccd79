"""Renderer - uploads the composited frame and draws the toolbar chrome.

The Renderer only reads state. The frame itself is produced on the CPU by
the compositor; here it is pushed into a texture the size of the viewport
and drawn 1:1 at the window origin.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .session import Session
    from .state import ToolbarState

from .rl_compat import (
    rl, make_color as RL_Color, draw_text as RL_DrawText, measure_text as RL_MeasureText,
    load_rgba_texture, update_texture, is_texture_valid,
)
from .config import (
    WINDOW_TITLE,
    TOOLBAR_FONT_SIZE, TOOLBAR_BG, TOOLBAR_BTN_BG, TOOLBAR_BTN_HOVER_BG,
    TOOLBAR_TEXT, TOOLBAR_ACCENT, TOOLBAR_BTN_SPACING,
    MSG_NO_IMAGE, MSG_DECODE_FAILED,
)
from .state.ui import RESET_BUTTON, Rect, ToolbarLayout, trim_front
from .types import DestinationBuffer
from .logging import log


def window_title(session: "Session") -> str:
    """'cat.jpg (3/12)' while browsing, the bare app name otherwise."""
    info = session.current_title_info()
    return info.format() if info else WINDOW_TITLE


def zoom_label(zoom: float) -> str:
    return f"{zoom:.1f}x"


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer()
        renderer.upload(session.buffer)      # after a repaint
        renderer.draw_frame(session, toolbar)
    """
    texture: Optional[Any] = None
    texture_size: Tuple[int, int] = (0, 0)
    _title_key: Tuple[str, int] = ("", -1)  # (full title, width) the trim was made for
    _title_text: str = ""

    # ═══════════════════════════════════════════════════════════════════════
    # Frame texture
    # ═══════════════════════════════════════════════════════════════════════

    def upload(self, buffer: DestinationBuffer) -> None:
        """Push the buffer to the GPU, recreating the texture on resize."""
        if buffer.width == 0 or buffer.height == 0:
            return
        if self.texture is None or self.texture_size != buffer.size:
            self.release()
            self.texture = load_rgba_texture(buffer.width, buffer.height)
            self.texture_size = buffer.size
            log(f"[TEX] Created {buffer.width}x{buffer.height}")
        update_texture(self.texture, buffer.tobytes())

    def release(self) -> None:
        if self.texture is not None and is_texture_valid(self.texture):
            rl.UnloadTexture(self.texture)
        self.texture = None
        self.texture_size = (0, 0)

    # ═══════════════════════════════════════════════════════════════════════
    # Drawing
    # ═══════════════════════════════════════════════════════════════════════

    def draw_frame(self, session: "Session", toolbar: "ToolbarState") -> None:
        rl.BeginDrawing()
        rl.ClearBackground(RL_Color(0, 0, 0, 255))
        self.draw_image(session)
        self.draw_message(session)
        self.draw_toolbar(session, toolbar)
        rl.EndDrawing()

    def draw_image(self, session: "Session") -> None:
        if self.texture is None or self.texture_size != session.buffer.size:
            return
        rl.DrawTexture(self.texture, 0, 0, RL_Color(255, 255, 255, 255))

    def draw_message(self, session: "Session") -> None:
        """Centered hint when there is nothing to show."""
        if not session.nav.is_active:
            msg = MSG_NO_IMAGE
        elif session.decode_error is not None:
            msg = MSG_DECODE_FAILED
        else:
            return
        w, h = session.buffer.size
        tw = RL_MeasureText(msg, TOOLBAR_FONT_SIZE)
        RL_DrawText(msg, (w - tw) // 2, (h - TOOLBAR_FONT_SIZE) // 2,
                    TOOLBAR_FONT_SIZE, RL_Color(*TOOLBAR_TEXT))

    def draw_toolbar(self, session: "Session", toolbar: "ToolbarState") -> None:
        layout = toolbar.layout
        if layout is None:
            return
        p = layout.panel
        rl.DrawRectangle(p.x, p.y, p.w, p.h, RL_Color(*TOOLBAR_BG))

        for btn, rect in zip(toolbar.buttons, layout.buttons):
            self._draw_button(rect, btn.label, toolbar.hover == btn.id)
            if btn.separator_after:
                sx = rect.x + rect.w + TOOLBAR_BTN_SPACING
                rl.DrawLine(sx, rect.y, sx, rect.y + rect.h, RL_Color(*TOOLBAR_BTN_HOVER_BG))

        self._draw_title(layout.title, window_title(session))
        self._draw_slider(layout, session.current_zoom(), toolbar.dragging_slider)
        self._draw_button(layout.reset, RESET_BUTTON.label, toolbar.hover == RESET_BUTTON.id)

    def _draw_button(self, rect: Rect, label: str, hover: bool) -> None:
        bg = TOOLBAR_BTN_HOVER_BG if hover else TOOLBAR_BTN_BG
        rl.DrawRectangle(rect.x, rect.y, rect.w, rect.h, RL_Color(*bg))
        tw = RL_MeasureText(label, TOOLBAR_FONT_SIZE)
        RL_DrawText(label, rect.x + (rect.w - tw) // 2, rect.y + (rect.h - TOOLBAR_FONT_SIZE) // 2,
                    TOOLBAR_FONT_SIZE, RL_Color(*TOOLBAR_TEXT))

    def _draw_title(self, rect: Rect, title: str) -> None:
        if rect.w <= 0:
            return
        if self._title_key != (title, rect.w):
            self._title_text = trim_front(title, rect.w, lambda t: RL_MeasureText(t, TOOLBAR_FONT_SIZE))
            self._title_key = (title, rect.w)
        RL_DrawText(self._title_text, rect.x, rect.y + (rect.h - TOOLBAR_FONT_SIZE) // 2,
                    TOOLBAR_FONT_SIZE, RL_Color(*TOOLBAR_TEXT))

    def _draw_slider(self, layout: ToolbarLayout, zoom: float, active: bool) -> None:
        s = layout.slider
        cy = s.y + s.h // 2
        rl.DrawRectangle(s.x, cy - 2, s.w, 4, RL_Color(*TOOLBAR_BTN_BG))
        kx = layout.slider_x_for(zoom)
        rl.DrawRectangle(s.x, cy - 2, kx - s.x, 4, RL_Color(*TOOLBAR_ACCENT))
        knob = TOOLBAR_ACCENT if active else TOOLBAR_TEXT
        rl.DrawCircle(kx, cy, 7, RL_Color(*knob))
        label = zoom_label(zoom)
        tw = RL_MeasureText(label, TOOLBAR_FONT_SIZE - 4)
        RL_DrawText(label, s.x + s.w - tw, s.y - 2, TOOLBAR_FONT_SIZE - 4, RL_Color(*TOOLBAR_TEXT))
