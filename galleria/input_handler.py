"""Input Handler - maps a per-frame input snapshot to session events.

The shell reads raylib once per frame into an InputSnapshot; everything after
that is plain data, so bindings are testable without a window.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, List

from .config import (
    KEY_NEXT_IMAGE, KEY_PREV_IMAGE,
    KEY_ZOOM_IN, KEY_ZOOM_IN_KP, KEY_ZOOM_OUT, KEY_ZOOM_OUT_KP,
    KEY_RESET_ZOOM, KEY_OPEN, KEY_CLOSE,
    ZOOM_STEP_IN, ZOOM_STEP_OUT,
)
from .events import (
    Event, Next, Previous, ZoomDelta, ZoomAbsolute, ResetZoom, Resize, OpenRequested,
)
from .state import WindowState, ToolbarState, ToolbarButtonId


@dataclass
class MouseState:
    """Current mouse state snapshot."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False
    left_released: bool = False
    left_down: bool = False
    wheel: float = 0.0


@dataclass
class InputSnapshot:
    """Everything the handler needs from one frame of raw input."""
    screen_w: int = 0
    screen_h: int = 0
    keys_pressed: FrozenSet[int] = frozenset()
    mouse: MouseState = field(default_factory=MouseState)


def wheel_multiplier(wheel: float) -> float:
    """Zoom multiplier for a wheel movement; one notch = one key press."""
    if wheel > 0:
        return ZOOM_STEP_IN ** wheel
    if wheel < 0:
        return ZOOM_STEP_OUT ** (-wheel)
    return 1.0


_BUTTON_EVENTS = {
    ToolbarButtonId.OPEN: OpenRequested,
    ToolbarButtonId.PREV: Previous,
    ToolbarButtonId.NEXT: Next,
    ToolbarButtonId.RESET_ZOOM: ResetZoom,
}


@dataclass
class InputHandler:
    """Turns input snapshots into events, tracking window size and toolbar drag."""

    window: WindowState = field(default_factory=WindowState)
    toolbar: ToolbarState = field(default_factory=ToolbarState)
    close_requested: bool = False

    # Key bindings (can be customized)
    key_next: List[int] = field(default_factory=lambda: [KEY_NEXT_IMAGE])
    key_prev: List[int] = field(default_factory=lambda: [KEY_PREV_IMAGE])
    key_zoom_in: List[int] = field(default_factory=lambda: [KEY_ZOOM_IN, KEY_ZOOM_IN_KP])
    key_zoom_out: List[int] = field(default_factory=lambda: [KEY_ZOOM_OUT, KEY_ZOOM_OUT_KP])
    key_reset_zoom: List[int] = field(default_factory=lambda: [KEY_RESET_ZOOM])
    key_open: List[int] = field(default_factory=lambda: [KEY_OPEN])
    key_close: List[int] = field(default_factory=lambda: [KEY_CLOSE])

    def translate(self, snap: InputSnapshot) -> List[Event]:
        """Events for this frame, in the order they should be applied."""
        events: List[Event] = []

        if self.window.update(snap.screen_w, snap.screen_h) or self.toolbar.layout is None:
            self.toolbar.relayout(snap.screen_w, snap.screen_h)
            vw, vh = self.window.viewport_size
            events.append(Resize(vw, vh))

        events.extend(self._keyboard(snap.keys_pressed))
        events.extend(self._mouse(snap.mouse))
        return events

    def _keyboard(self, keys: FrozenSet[int]) -> List[Event]:
        def pressed(bindings: List[int]) -> bool:
            return any(k in keys for k in bindings)

        events: List[Event] = []
        if pressed(self.key_close):
            self.close_requested = True
        if pressed(self.key_open):
            events.append(OpenRequested())
        if pressed(self.key_next):
            events.append(Next())
        if pressed(self.key_prev):
            events.append(Previous())
        if pressed(self.key_zoom_in):
            events.append(ZoomDelta(ZOOM_STEP_IN))
        if pressed(self.key_zoom_out):
            events.append(ZoomDelta(ZOOM_STEP_OUT))
        if pressed(self.key_reset_zoom):
            events.append(ResetZoom())
        return events

    def _mouse(self, mouse: MouseState) -> List[Event]:
        toolbar = self.toolbar
        events: List[Event] = []
        toolbar.hover = toolbar.button_at(mouse.x, mouse.y)

        if toolbar.dragging_slider:
            if mouse.left_down and toolbar.layout is not None:
                events.append(ZoomAbsolute(toolbar.layout.slider_value_at(mouse.x)))
            if mouse.left_released or not mouse.left_down:
                toolbar.dragging_slider = False
            return events

        if mouse.left_pressed:
            if toolbar.hover is not None:
                events.append(_BUTTON_EVENTS[toolbar.hover]())
            elif toolbar.is_over_slider(mouse.x, mouse.y) and toolbar.layout is not None:
                toolbar.dragging_slider = True
                events.append(ZoomAbsolute(toolbar.layout.slider_value_at(mouse.x)))

        if mouse.wheel != 0.0 and not toolbar.is_over_panel(mouse.x, mouse.y):
            events.append(ZoomDelta(wheel_multiplier(mouse.wheel)))
        return events
