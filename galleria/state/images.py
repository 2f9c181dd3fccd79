"""Image list state - current folder's images and the position within it."""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..errors import EmptyCollection
from ..math_utils import wrap_index
from ..types import TitleInfo


@dataclass
class ImageListState:
    """Ordered, unique image identifiers and the current index."""
    images: List[str] = field(default_factory=list)
    index: int = 0

    @property
    def count(self) -> int:
        """Total number of images."""
        return len(self.images)

    @property
    def is_active(self) -> bool:
        return len(self.images) > 0

    @property
    def current_path(self) -> Optional[str]:
        """Get current image path or None."""
        if 0 <= self.index < len(self.images):
            return self.images[self.index]
        return None

    def load(self, images: Sequence[str], selected: Optional[str] = None) -> int:
        """Replace the collection wholesale and select an entry.

        Raises EmptyCollection (leaving state untouched) if images is empty.
        Returns the new index: that of ``selected`` if present, else 0.
        """
        unique = sorted(set(images))
        if not unique:
            raise EmptyCollection()
        try:
            index = unique.index(selected) if selected is not None else 0
        except ValueError:
            index = 0
        self.images = unique
        self.index = index
        return index

    def advance(self) -> bool:
        """Step forward, wrapping from the last image to the first."""
        n = len(self.images)
        if n == 0:
            return False
        self.index = wrap_index(self.index + 1, n)
        return True

    def retreat(self) -> bool:
        """Step back, wrapping from the first image to the last."""
        n = len(self.images)
        if n == 0:
            return False
        self.index = wrap_index(self.index - 1, n)
        return True

    def title_info(self) -> Optional[TitleInfo]:
        path = self.current_path
        if path is None:
            return None
        return TitleInfo(os.path.basename(path), self.index + 1, len(self.images))
