"""Image utilities - listing, filtering, file size checks."""

from __future__ import annotations
import os
from typing import Optional, Tuple, List

from .config import IMG_EXTS
from .errors import DirectoryUnreadable, EmptyCollection


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension (case-insensitive)."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in IMG_EXTS


def get_file_size_mb(filepath: str) -> float:
    """Get file size in megabytes."""
    try:
        return os.path.getsize(filepath) / (1024 * 1024)
    except OSError:
        return 0.0


def list_images(dirpath: str) -> List[str]:
    """List all supported image files in directory, sorted by path.

    Args:
        dirpath: Directory path to scan.

    Returns:
        List of full paths to image files (possibly empty).

    Raises:
        DirectoryUnreadable: if the directory cannot be listed.
    """
    try:
        names = os.listdir(dirpath)
    except OSError as e:
        raise DirectoryUnreadable(dirpath, e) from e

    result = []
    for name in names:
        path = os.path.join(dirpath, name)
        if is_supported_image(name) and os.path.isfile(path):
            result.append(path)
    result.sort()
    return result


def collect_for_path(path: str) -> Tuple[List[str], Optional[str]]:
    """Resolve a file or folder argument into (images, selected).

    A file selects itself within its parent folder; a folder selects nothing
    (the caller starts at index 0).

    Raises:
        DirectoryUnreadable: if the folder cannot be listed.
        EmptyCollection: if the folder holds no supported images.
    """
    path = os.path.abspath(path)
    if os.path.isdir(path):
        dirpath, selected = path, None
    else:
        dirpath, selected = os.path.dirname(path), path

    images = list_images(dirpath)
    if not images:
        raise EmptyCollection(dirpath)
    return images, selected
