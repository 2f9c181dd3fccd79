"""Raylib compatibility layer - abstracts differences between raylibpy and python-raylib."""

from __future__ import annotations
import ctypes
from typing import Any

# Try to import raylib
try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"


def make_color(r: int, g: int, b: int, a: int = 255) -> Any:
    """Create a raylib Color compatible with the current binding."""
    ctor = getattr(rl, "Color", None)
    if ctor:
        try:
            return ctor(int(r), int(g), int(b), int(a))
        except TypeError:
            pass
    if hasattr(rl, 'ffi'):
        c = rl.ffi.new("Color *")
        c[0].r, c[0].g, c[0].b, c[0].a = int(r), int(g), int(b), int(a)
        return c[0]
    return (int(r), int(g), int(b), int(a))


def _text_arg(text: str) -> Any:
    return text.encode('utf-8') if RL_VERSION == "python-raylib" else text


def init_window(w: int, h: int, title: str) -> None:
    try:
        rl.InitWindow(w, h, title)
    except TypeError:
        rl.InitWindow(w, h, title.encode('utf-8'))


def set_window_title(title: str) -> None:
    try:
        rl.SetWindowTitle(_text_arg(title))
    except TypeError:
        rl.SetWindowTitle(title)


def draw_text(text: str, x: int, y: int, size: int, color: Any) -> None:
    """Draw text with encoding fallback."""
    try:
        rl.DrawText(_text_arg(text), x, y, size, color)
    except TypeError:
        rl.DrawText(text, x, y, size, color)


def measure_text(text: str, size: int) -> int:
    """Measure text width with encoding fallback."""
    try:
        return rl.MeasureText(_text_arg(text), size)
    except TypeError:
        return rl.MeasureText(text, size)


def load_rgba_texture(w: int, h: int) -> Any:
    """Create a GPU texture of w x h RGBA8 texels (contents undefined)."""
    img = rl.GenImageColor(max(1, w), max(1, h), make_color(0, 0, 0, 255))
    try:
        return rl.LoadTextureFromImage(img)
    finally:
        rl.UnloadImage(img)


def update_texture(tex: Any, data: bytes) -> None:
    """Upload a packed RGBA buffer covering the whole texture."""
    if hasattr(rl, 'ffi'):
        rl.UpdateTexture(tex, rl.ffi.from_buffer(data))
        return
    buf = ctypes.create_string_buffer(data, len(data))
    rl.UpdateTexture(tex, ctypes.cast(buf, ctypes.c_void_p))


def is_texture_valid(tex: Any) -> bool:
    """Check if texture is valid and loaded."""
    return (getattr(tex, "id", 0) or 0) > 0


__all__ = [
    'rl',
    'RL_VERSION',
    'make_color',
    'init_window',
    'set_window_title',
    'draw_text',
    'measure_text',
    'load_rgba_texture',
    'update_texture',
    'is_texture_valid',
]
