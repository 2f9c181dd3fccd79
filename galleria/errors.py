"""Recoverable failures raised by the browsing core.

None of these is fatal: the session catches them, logs them and keeps the
previous navigation state.
"""

from __future__ import annotations
from typing import Optional


class GalleriaError(Exception):
    """Base class for all browsing errors."""


class EmptyCollection(GalleriaError):
    """No file in the chosen folder has a recognised image extension."""

    def __init__(self, folder: Optional[str] = None):
        self.folder = folder
        where = f" in {folder}" if folder else ""
        super().__init__(f"no supported images found{where}")


class DirectoryUnreadable(GalleriaError):
    """Listing the folder failed (permissions, ejected volume, dead share)."""

    def __init__(self, folder: str, reason: Optional[BaseException] = None):
        self.folder = folder
        self.reason = reason
        super().__init__(f"cannot read folder {folder}: {reason!r}")


class DecodeFailure(GalleriaError):
    """The decoder could not produce pixel data for an identifier."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot decode {path}: {reason}")
