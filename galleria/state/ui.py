"""UI state - bottom toolbar layout, hover and slider drag."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Optional
from enum import IntEnum

from ..config import (
    TOOLBAR_HEIGHT, TOOLBAR_PADDING, TOOLBAR_BTN_W, TOOLBAR_BTN_H, TOOLBAR_BTN_SPACING,
    TOOLBAR_SLIDER_W, TOOLBAR_RESET_W,
    ZOOM_MIN, ZOOM_MAX, ZOOM_SLIDER_STEP,
)
from ..math_utils import clamp, snap


class Rect(NamedTuple):
    x: int
    y: int
    w: int
    h: int

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h


class ToolbarButtonId(IntEnum):
    """Identifiers for toolbar buttons."""
    OPEN = 0
    PREV = 1
    NEXT = 2
    RESET_ZOOM = 3


@dataclass
class ToolbarButton:
    """A toolbar button."""
    id: ToolbarButtonId
    label: str
    separator_after: bool = False


# Left cluster, in draw order. Reset sits at the far right after the slider.
DEFAULT_TOOLBAR_BUTTONS: List[ToolbarButton] = [
    ToolbarButton(ToolbarButtonId.OPEN, "Open", separator_after=True),
    ToolbarButton(ToolbarButtonId.PREV, "< Prev"),
    ToolbarButton(ToolbarButtonId.NEXT, "Next >", separator_after=True),
]
RESET_BUTTON = ToolbarButton(ToolbarButtonId.RESET_ZOOM, "R")


def trim_front(text: str, max_w: int, measure: Callable[[str], int]) -> str:
    """Longest suffix of text whose measured width fits in max_w.

    Width only shrinks as characters are dropped from the front, so the cut
    point is found by bisection in O(log n) measure calls.
    """
    lo, hi = 0, len(text)
    while lo < hi:
        mid = (lo + hi) // 2
        if measure(text[mid:]) <= max_w:
            hi = mid
        else:
            lo = mid + 1
    return text[lo:]


@dataclass
class ToolbarLayout:
    """Pixel rectangles of every toolbar element for one screen size."""
    panel: Rect
    buttons: List[Rect]
    title: Rect
    slider: Rect
    reset: Rect

    @classmethod
    def compute(cls, screen_w: int, screen_h: int,
                buttons: Optional[List[ToolbarButton]] = None) -> ToolbarLayout:
        buttons = DEFAULT_TOOLBAR_BUTTONS if buttons is None else buttons
        top = screen_h - TOOLBAR_HEIGHT
        btn_y = top + (TOOLBAR_HEIGHT - TOOLBAR_BTN_H) // 2

        rects = []
        x = TOOLBAR_PADDING
        for btn in buttons:
            rects.append(Rect(x, btn_y, TOOLBAR_BTN_W, TOOLBAR_BTN_H))
            x += TOOLBAR_BTN_W + TOOLBAR_BTN_SPACING
            if btn.separator_after:
                x += TOOLBAR_BTN_SPACING

        reset_x = screen_w - TOOLBAR_PADDING - TOOLBAR_RESET_W
        slider_x = reset_x - TOOLBAR_BTN_SPACING - TOOLBAR_SLIDER_W
        title_w = max(0, slider_x - TOOLBAR_BTN_SPACING - x)

        return cls(
            panel=Rect(0, top, screen_w, TOOLBAR_HEIGHT),
            buttons=rects,
            title=Rect(x, btn_y, title_w, TOOLBAR_BTN_H),
            slider=Rect(slider_x, btn_y, TOOLBAR_SLIDER_W, TOOLBAR_BTN_H),
            reset=Rect(reset_x, btn_y, TOOLBAR_RESET_W, TOOLBAR_BTN_H),
        )

    def slider_value_at(self, px: float) -> float:
        """Zoom value for an x position on the slider, snapped to the slider step."""
        if self.slider.w <= 0:
            return ZOOM_MIN
        t = clamp((px - self.slider.x) / self.slider.w, 0.0, 1.0)
        value = snap(ZOOM_MIN + t * (ZOOM_MAX - ZOOM_MIN), ZOOM_SLIDER_STEP)
        return clamp(value, ZOOM_MIN, ZOOM_MAX)

    def slider_x_for(self, value: float) -> int:
        """Knob x position for a zoom value."""
        t = (clamp(value, ZOOM_MIN, ZOOM_MAX) - ZOOM_MIN) / (ZOOM_MAX - ZOOM_MIN)
        return self.slider.x + int(t * self.slider.w)


@dataclass
class ToolbarState:
    """State for the bottom toolbar."""
    buttons: List[ToolbarButton] = field(default_factory=lambda: list(DEFAULT_TOOLBAR_BUTTONS))
    layout: Optional[ToolbarLayout] = None
    hover: Optional[ToolbarButtonId] = None
    dragging_slider: bool = False

    def relayout(self, screen_w: int, screen_h: int) -> ToolbarLayout:
        self.layout = ToolbarLayout.compute(screen_w, screen_h, self.buttons)
        return self.layout

    def button_at(self, px: float, py: float) -> Optional[ToolbarButtonId]:
        """Button under the point, or None."""
        if self.layout is None:
            return None
        for btn, rect in zip(self.buttons, self.layout.buttons):
            if rect.contains(px, py):
                return btn.id
        if self.layout.reset.contains(px, py):
            return RESET_BUTTON.id
        return None

    def is_over_slider(self, px: float, py: float) -> bool:
        return self.layout is not None and self.layout.slider.contains(px, py)

    def is_over_panel(self, px: float, py: float) -> bool:
        return self.layout is not None and self.layout.panel.contains(px, py)
