"""Navigation state - which image, at what zoom, and its decoded pixels."""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from .images import ImageListState
from .view import ViewState
from ..errors import DecodeFailure
from ..types import DecodedImage, TitleInfo
from ..logging import log


Decoder = Callable[[str], DecodedImage]


@dataclass
class NavigationState:
    """
    Image list + zoom + the single resident decoded image.

    Every transition that changes the current image resets zoom to 1.0 and
    decodes the new image synchronously. A failed decode does not undo the
    transition; the resident image becomes the empty placeholder instead and
    ``decode_error`` records why.
    """
    decoder: Decoder
    images: ImageListState = field(default_factory=ImageListState)
    view: ViewState = field(default_factory=ViewState)
    image: DecodedImage = field(default_factory=DecodedImage.empty)
    decode_error: Optional[DecodeFailure] = None

    @property
    def is_active(self) -> bool:
        return self.images.is_active

    @property
    def position(self) -> int:
        return self.images.index

    @property
    def zoom(self) -> float:
        return self.view.zoom

    # ═══════════════════════════════════════════════════════════════════════
    # Navigation
    # ═══════════════════════════════════════════════════════════════════════

    def load_collection(self, new_list: Sequence[str], selected: Optional[str] = None) -> None:
        """Replace the collection; raises EmptyCollection with state untouched."""
        index = self.images.load(new_list, selected)
        log(f"[NAV] Loaded {self.images.count} images, start={index}")
        self.view.reset_zoom()
        self._decode_current()

    def advance(self) -> bool:
        if not self.images.advance():
            return False
        log(f"[NAV] Next -> {self.images.index}")
        self.view.reset_zoom()
        self._decode_current()
        return True

    def retreat(self) -> bool:
        if not self.images.retreat():
            return False
        log(f"[NAV] Prev -> {self.images.index}")
        self.view.reset_zoom()
        self._decode_current()
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # Zoom
    # ═══════════════════════════════════════════════════════════════════════

    def apply_zoom_delta(self, multiplier: float) -> bool:
        return self.view.apply_zoom_delta(multiplier)

    def set_zoom_absolute(self, value: float) -> bool:
        return self.view.set_zoom_absolute(value)

    def reset_zoom(self) -> bool:
        return self.view.reset_zoom()

    # ═══════════════════════════════════════════════════════════════════════
    # Queries
    # ═══════════════════════════════════════════════════════════════════════

    def current_zoom(self) -> float:
        return self.view.zoom

    def current_title_info(self) -> Optional[TitleInfo]:
        return self.images.title_info()

    # ═══════════════════════════════════════════════════════════════════════
    # Decoding
    # ═══════════════════════════════════════════════════════════════════════

    def _decode_current(self) -> None:
        path = self.images.current_path
        if path is None:
            return
        # Drop the old buffer before decoding so only one image is ever resident.
        self.image = DecodedImage.empty()
        try:
            self.image = self.decoder(path)
            self.decode_error = None
            log(f"[LOAD] {os.path.basename(path)} {self.image.w}x{self.image.h}")
        except DecodeFailure as e:
            self.decode_error = e
            log(f"[LOAD][ERR] {e}")
