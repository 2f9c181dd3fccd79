"""Core data types for Galleria."""

from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np

from .config import BACKGROUND_RGBA


def _rgba_array(width: int, height: int) -> np.ndarray:
    return np.zeros((max(0, height), max(0, width), 4), dtype=np.uint8)


@dataclass
class DecodedImage:
    """Tightly packed RGBA samples, row-major, top to bottom."""
    pixels: np.ndarray  # shape (h, w, 4), uint8
    path: str = ""

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(f"expected (h, w, 4) RGBA array, got {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"expected uint8 samples, got {self.pixels.dtype}")

    @property
    def w(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def h(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.w == 0 or self.h == 0

    @classmethod
    def empty(cls) -> DecodedImage:
        """Zero-size placeholder; composites to a plain background frame."""
        return cls(pixels=_rgba_array(0, 0))


class DestinationBuffer:
    """Mutable RGBA frame owned by the presentation layer.

    Dimensions may change between repaints; resizing reallocates and keeps
    no content.
    """

    def __init__(self, width: int = 0, height: int = 0):
        self._pixels = _rgba_array(width, height)

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def resize(self, width: int, height: int) -> bool:
        """Reallocate for new dimensions. Returns True if the size changed."""
        width, height = max(0, int(width)), max(0, int(height))
        if (width, height) == self.size:
            return False
        self._pixels = _rgba_array(width, height)
        return True

    def clear(self, rgba: Tuple[int, int, int, int] = BACKGROUND_RGBA) -> None:
        self._pixels[...] = rgba

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self._pixels[y, x]
        return (int(r), int(g), int(b), int(a))

    def tobytes(self) -> bytes:
        return self._pixels.tobytes()


@dataclass(frozen=True)
class Placement:
    """Where and how large the image lands in the destination buffer."""
    base_scale: float = 0.0
    scale: float = 0.0
    scaled_w: int = 0
    scaled_h: int = 0
    offset_x: int = 0
    offset_y: int = 0
    visible_w: int = 0  # scaled extent clipped to the buffer
    visible_h: int = 0

    @property
    def is_empty(self) -> bool:
        return self.visible_w <= 0 or self.visible_h <= 0


class TitleInfo(NamedTuple):
    """Chrome text for the current image."""
    filename: str
    position: int  # 1-based
    total: int

    def format(self) -> str:
        return f"{self.filename} ({self.position}/{self.total})"


@dataclass(frozen=True)
class RepaintRequest:
    """Returned by the session when the frame needs recompositing."""
    reason: str
