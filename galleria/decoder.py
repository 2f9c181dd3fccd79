"""Image decoding - encoded file on disk to packed RGBA samples."""

from __future__ import annotations
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from .config import MAX_FILE_SIZE_MB
from .errors import DecodeFailure
from .image_utils import get_file_size_mb
from .types import DecodedImage


def decode_image(path: str) -> DecodedImage:
    """Decode the first frame of an image file to RGBA.

    Raises:
        DecodeFailure: missing, oversized, unreadable or corrupt file.
    """
    if not os.path.isfile(path):
        raise DecodeFailure(path, "not a file")

    size_mb = get_file_size_mb(path)
    if size_mb > MAX_FILE_SIZE_MB:
        raise DecodeFailure(path, f"file too large: {size_mb:.1f}MB")

    try:
        with Image.open(path) as img:
            img.seek(0)
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise DecodeFailure(path, str(e)) from e
    except (OSError, ValueError, EOFError) as e:
        raise DecodeFailure(path, repr(e)) from e

    pixels = np.ascontiguousarray(np.asarray(rgba, dtype=np.uint8))
    if pixels.ndim != 3 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise DecodeFailure(path, "empty image")
    return DecodedImage(pixels=pixels, path=path)
