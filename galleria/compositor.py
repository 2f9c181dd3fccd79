"""Viewport compositor - paints the resident image into the destination buffer.

Fit-to-viewport, zoom, centering and clipping with nearest-neighbour sampling.
The per-pixel copy is one numpy gather through a flat index table that is
kept between calls, so repainting an unchanged geometry allocates nothing new
and the work never exceeds the destination size.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from .config import BACKGROUND_RGBA
from .types import DecodedImage, DestinationBuffer, Placement
from .view_math import compute_placement, sample_indices
from .logging import log


# (img_w, img_h, screen_w, screen_h, scale)
_GeometryKey = Tuple[int, int, int, int, float]


@dataclass
class _Scratch:
    """Flat source indices and the output frame for one geometry."""
    key: Optional[_GeometryKey] = None
    placement: Placement = field(default_factory=Placement)
    flat: np.ndarray = field(default_factory=lambda: np.zeros((0, 0), dtype=np.intp))  # (visible_h, visible_w)
    out_frame: Optional[np.ndarray] = None  # (visible_h, visible_w, 4)


class Compositor:
    """Paints a DecodedImage into a DestinationBuffer at a zoom factor."""

    def __init__(self, background: Tuple[int, int, int, int] = BACKGROUND_RGBA):
        self.background = background
        self._scratch = _Scratch()
        self.last_placement: Placement = Placement()

    def composite(self, image: Optional[DecodedImage], dest: DestinationBuffer, zoom: float) -> None:
        """Repaint dest. Every input, degenerate or not, is a defined result."""
        dest.clear(self.background)

        if image is None or image.is_empty or dest.width == 0 or dest.height == 0:
            self.last_placement = Placement()
            return

        scratch = self._prepare(image.w, image.h, dest.width, dest.height, zoom)
        placement = scratch.placement
        self.last_placement = placement
        if placement.is_empty:
            return

        # (h, w, 4) -> (h * w, 4); no copy for the contiguous arrays the decoder returns
        samples = image.pixels.reshape(-1, 4)
        np.take(samples, scratch.flat, axis=0, out=scratch.out_frame, mode="clip")

        x0, y0 = placement.offset_x, placement.offset_y
        dest.pixels[y0:y0 + placement.visible_h, x0:x0 + placement.visible_w] = scratch.out_frame

    def _prepare(self, img_w: int, img_h: int, screen_w: int, screen_h: int, zoom: float) -> _Scratch:
        """Return scratch for this geometry, rebuilding it only on change."""
        placement = compute_placement(img_w, img_h, screen_w, screen_h, zoom)
        key = (img_w, img_h, screen_w, screen_h, placement.scale)
        scratch = self._scratch
        if scratch.key == key:
            return scratch

        cols, rows = sample_indices(placement, img_w, img_h)
        scratch.key = key
        scratch.placement = placement
        scratch.flat = rows[:, None] * img_w + cols[None, :]
        if placement.is_empty:
            scratch.out_frame = None
        else:
            scratch.out_frame = np.empty((placement.visible_h, placement.visible_w, 4), dtype=np.uint8)
        log(f"[COMPOSE] geometry img={img_w}x{img_h} dst={screen_w}x{screen_h} "
            f"scale={placement.scale:.4f} scaled={placement.scaled_w}x{placement.scaled_h} "
            f"off=({placement.offset_x},{placement.offset_y})")
        return scratch


def composite(image: Optional[DecodedImage], dest: DestinationBuffer, zoom: float) -> Placement:
    """One-shot compositing without a persistent scratch cache."""
    compositor = Compositor()
    compositor.composite(image, dest, zoom)
    return compositor.last_placement
