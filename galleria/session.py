"""Session - single owner of navigation state, the frame buffer and the compositor.

Handlers get the session passed in; there is no module-level state.

Usage:
    session = Session(decoder=decode_image)
    session.handle_event(Resize(800, 600))
    if session.handle_event(OpenRequested("/photos/cat.jpg")):
        session.repaint()
"""

from __future__ import annotations
from typing import Callable, Optional

from .compositor import Compositor
from .decoder import decode_image
from .errors import DecodeFailure, GalleriaError
from .events import (
    Event, Next, Previous, ZoomDelta, ZoomAbsolute, ResetZoom, Resize, OpenRequested,
)
from .image_utils import collect_for_path
from .state import NavigationState, Decoder
from .types import DestinationBuffer, RepaintRequest, TitleInfo
from .logging import log


Picker = Callable[[], Optional[str]]


class Session:
    """Owns everything the event loop mutates."""

    def __init__(
        self,
        decoder: Decoder = decode_image,
        picker: Optional[Picker] = None,
        width: int = 0,
        height: int = 0,
    ):
        self.nav = NavigationState(decoder=decoder)
        self.buffer = DestinationBuffer(width, height)
        self.compositor = Compositor()
        self.picker = picker
        self.last_error: Optional[GalleriaError] = None

    # ═══════════════════════════════════════════════════════════════════════
    # Event dispatch
    # ═══════════════════════════════════════════════════════════════════════

    def handle_event(self, event: Event) -> Optional[RepaintRequest]:
        """Apply one event. Returns a RepaintRequest if the frame is stale."""
        if isinstance(event, Next):
            if self.nav.advance():
                return RepaintRequest("next")
            return None

        if isinstance(event, Previous):
            if self.nav.retreat():
                return RepaintRequest("previous")
            return None

        if isinstance(event, ZoomDelta):
            if self.nav.apply_zoom_delta(event.multiplier):
                log(f"[ZOOM] x{event.multiplier:.3f} -> {self.nav.zoom:.3f}")
                return RepaintRequest("zoom")
            return None

        if isinstance(event, ZoomAbsolute):
            if self.nav.set_zoom_absolute(event.value):
                log(f"[ZOOM] set -> {self.nav.zoom:.3f}")
                return RepaintRequest("zoom")
            return None

        if isinstance(event, ResetZoom):
            if self.nav.reset_zoom():
                log("[ZOOM] reset")
                return RepaintRequest("zoom")
            return None

        if isinstance(event, Resize):
            if self.buffer.resize(event.width, event.height):
                log(f"[RESIZE] {self.buffer.width}x{self.buffer.height}")
                return RepaintRequest("resize")
            return None

        if isinstance(event, OpenRequested):
            path = event.path
            if path is None:
                path = self.picker() if self.picker else None
                if not path:
                    log("[OPEN] Cancelled")
                    return None
            if self.open_path(path):
                return RepaintRequest("open")
            return None

        log(f"[EVENT] Ignored {event!r}")
        return None

    # ═══════════════════════════════════════════════════════════════════════
    # Operations
    # ═══════════════════════════════════════════════════════════════════════

    def open_path(self, path: str) -> bool:
        """Open a file (selecting it) or folder. Failures leave state intact."""
        try:
            images, selected = collect_for_path(path)
            self.nav.load_collection(images, selected)
        except GalleriaError as e:
            self.last_error = e
            log(f"[OPEN][ERR] {e}")
            return False
        self.last_error = None
        return True

    def repaint(self) -> None:
        """Composite the resident image into the buffer at the current zoom."""
        self.compositor.composite(self.nav.image, self.buffer, self.nav.zoom)

    def current_zoom(self) -> float:
        return self.nav.current_zoom()

    def current_title_info(self) -> Optional[TitleInfo]:
        return self.nav.current_title_info()

    @property
    def decode_error(self) -> Optional[DecodeFailure]:
        return self.nav.decode_error


def handle_event(session: Session, event: Event) -> Optional[RepaintRequest]:
    """Functional entry point; same as ``session.handle_event(event)``."""
    return session.handle_event(event)
