"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations
from typing import Tuple

import numpy as np

from .types import Placement
from .math_utils import trunc_int


def compute_fit_scale(img_w: int, img_h: int, screen_w: int, screen_h: int) -> float:
    """Compute scale at which the binding dimension exactly touches the screen edge.

    Args:
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        screen_w: Destination width in pixels.
        screen_h: Destination height in pixels.

    Returns:
        Fit scale, or 0.0 when any dimension is zero.
    """
    if img_w <= 0 or img_h <= 0 or screen_w <= 0 or screen_h <= 0:
        return 0.0
    return min(screen_w / img_w, screen_h / img_h)


def center_offset(screen_extent: int, scaled_extent: int) -> int:
    """Centering offset along one axis, floored at zero.

    Computed signed first so an over-zoomed image anchors at the origin
    instead of going negative.
    """
    return max(0, trunc_int((screen_extent - scaled_extent) / 2.0))


def compute_placement(
    img_w: int,
    img_h: int,
    screen_w: int,
    screen_h: int,
    zoom: float
) -> Placement:
    """Compute scale, scaled extents, centering offsets and visible extents.

    Args:
        img_w: Image width in pixels.
        img_h: Image height in pixels.
        screen_w: Destination width in pixels.
        screen_h: Destination height in pixels.
        zoom: Multiplier on top of the fit scale.

    Returns:
        Placement; an all-zero Placement when there is nothing to draw.
    """
    if img_w <= 0 or img_h <= 0 or screen_w <= 0 or screen_h <= 0:
        return Placement()

    base_scale = compute_fit_scale(img_w, img_h, screen_w, screen_h)
    scale = base_scale * zoom
    if not scale > 0.0:
        return Placement(base_scale=base_scale, scale=scale)

    scaled_w = trunc_int(img_w * scale)
    scaled_h = trunc_int(img_h * scale)
    offset_x = center_offset(screen_w, scaled_w)
    offset_y = center_offset(screen_h, scaled_h)

    return Placement(
        base_scale=base_scale,
        scale=scale,
        scaled_w=scaled_w,
        scaled_h=scaled_h,
        offset_x=offset_x,
        offset_y=offset_y,
        visible_w=max(0, min(scaled_w, screen_w - offset_x)),
        visible_h=max(0, min(scaled_h, screen_h - offset_y)),
    )


def source_indices(count: int, scale: float, src_extent: int) -> np.ndarray:
    """Nearest-neighbour source index for destination coordinates 0..count-1.

    floor(x / scale), clamped to [0, src_extent - 1] to absorb rounding that
    would otherwise select one sample past the last row or column.
    """
    if count <= 0 or src_extent <= 0:
        return np.zeros(0, dtype=np.intp)
    idx = np.floor(np.arange(count, dtype=np.float64) / scale).astype(np.intp)
    np.clip(idx, 0, src_extent - 1, out=idx)
    return idx


def sample_indices(placement: Placement, img_w: int, img_h: int) -> Tuple[np.ndarray, np.ndarray]:
    """Source column and row vectors for the visible part of a placement."""
    cols = source_indices(placement.visible_w, placement.scale, img_w)
    rows = source_indices(placement.visible_h, placement.scale, img_h)
    return cols, rows
