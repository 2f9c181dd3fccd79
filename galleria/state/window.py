"""Window state - screen dimensions and the viewport carved out of them."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import TOOLBAR_HEIGHT


@dataclass
class WindowState:
    """Window-related state."""
    screen_w: int = 0
    screen_h: int = 0
    toolbar_h: int = TOOLBAR_HEIGHT

    @property
    def viewport_size(self) -> Tuple[int, int]:
        """Area above the bottom toolbar that the image is composited into."""
        return (max(0, self.screen_w), max(0, self.screen_h - self.toolbar_h))

    def update(self, screen_w: int, screen_h: int) -> bool:
        """Record new screen dimensions. Returns True if they changed."""
        if (screen_w, screen_h) == (self.screen_w, self.screen_h):
            return False
        self.screen_w, self.screen_h = screen_w, screen_h
        return True
