"""View state - zoom factor relative to fit-to-viewport."""

from __future__ import annotations
import math
from dataclasses import dataclass

from ..config import ZOOM_MIN, ZOOM_MAX, ZOOM_DEFAULT
from ..math_utils import clamp


@dataclass
class ViewState:
    """Zoom multiplier on top of the fit scale; 1.0 is an exact fit."""
    zoom: float = ZOOM_DEFAULT

    def apply_zoom_delta(self, multiplier: float) -> bool:
        """Multiply zoom, clamped to [ZOOM_MIN, ZOOM_MAX].

        Multiplicative so each wheel notch feels the same at any zoom level.
        A NaN multiplier is ignored. Returns True if zoom changed.
        """
        if math.isnan(multiplier):
            return False
        return self._set(self.zoom * multiplier)

    def set_zoom_absolute(self, value: float) -> bool:
        """Assign zoom directly (slider drag), clamped. NaN is ignored."""
        if math.isnan(value):
            return False
        return self._set(value)

    def reset_zoom(self) -> bool:
        return self._set(ZOOM_DEFAULT)

    def _set(self, value: float) -> bool:
        new_zoom = clamp(float(value), ZOOM_MIN, ZOOM_MAX)
        changed = new_zoom != self.zoom
        self.zoom = new_zoom
        return changed
