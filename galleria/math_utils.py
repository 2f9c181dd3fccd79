"""Pure math utilities - no external dependencies."""

from __future__ import annotations
import math


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def wrap_index(i: int, n: int) -> int:
    """Wrap i into [0, n). n must be positive."""
    return (i % n + n) % n


def trunc_int(v: float) -> int:
    """Round toward zero. Pixel extents and offsets never round to nearest."""
    return int(math.trunc(v))


def snap(v: float, step: float) -> float:
    """Snap v to the nearest multiple of step."""
    if step <= 0.0:
        return v
    return round(v / step) * step
