"""Events consumed by the session.

Input of any kind (keyboard, wheel, toolbar clicks, window resizes) is turned
into one of these before it touches state, so the state machine can be driven
without a window system.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Next:
    """Show the next image, wrapping to the first."""


@dataclass(frozen=True)
class Previous:
    """Show the previous image, wrapping to the last."""


@dataclass(frozen=True)
class ZoomDelta:
    """Multiply zoom; ~1.1 / ~0.9 per wheel notch or key press."""
    multiplier: float


@dataclass(frozen=True)
class ZoomAbsolute:
    """Set zoom directly (slider)."""
    value: float


@dataclass(frozen=True)
class ResetZoom:
    """Back to fit-to-viewport."""


@dataclass(frozen=True)
class Resize:
    """The viewport now has these dimensions."""
    width: int
    height: int


@dataclass(frozen=True)
class OpenRequested:
    """Open a file or folder; with no path, ask the picker."""
    path: Optional[str] = None


Event = Union[Next, Previous, ZoomDelta, ZoomAbsolute, ResetZoom, Resize, OpenRequested]
