"""State management submodules for Galleria."""

from .window import WindowState
from .images import ImageListState
from .view import ViewState
from .navigation import NavigationState, Decoder
from .ui import ToolbarState, ToolbarLayout, ToolbarButtonId

__all__ = [
    'WindowState',
    'ImageListState',
    'ViewState',
    'NavigationState',
    'Decoder',
    'ToolbarState',
    'ToolbarLayout',
    'ToolbarButtonId',
]
