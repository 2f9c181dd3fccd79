import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Allow importing galleria from repository root
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from galleria.logging import get_logger  # noqa: E402
from galleria.types import DecodedImage  # noqa: E402


@pytest.fixture(autouse=True)
def _quiet_logger():
    logger = get_logger()
    logger.quiet = True
    yield
    logger.quiet = False


def gradient_image(w: int, h: int, path: str = "") -> DecodedImage:
    """Every pixel distinct: R = x, G = y, B = (x + y) % 256, A = 255."""
    ys, xs = np.mgrid[0:h, 0:w]
    px = np.empty((h, w, 4), dtype=np.uint8)
    px[..., 0] = xs % 256
    px[..., 1] = ys % 256
    px[..., 2] = (xs + ys) % 256
    px[..., 3] = 255
    return DecodedImage(pixels=px, path=path)


def write_image(path: Path, size=(4, 3), color=(255, 0, 0, 255), fmt=None) -> Path:
    Image.new("RGBA", size, color).convert("RGB" if fmt == "JPEG" else "RGBA").save(path, format=fmt)
    return path


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """b.png, a.PNG, c.jpg, notes.txt and a sub-directory named d.png."""
    write_image(tmp_path / "b.png")
    write_image(tmp_path / "a.PNG", size=(2, 2))
    write_image(tmp_path / "c.jpg", fmt="JPEG")
    (tmp_path / "notes.txt").write_text("not an image", encoding="utf-8")
    (tmp_path / "d.png").mkdir()
    return tmp_path


@pytest.fixture
def gradient():
    return gradient_image


class FakeDecoder:
    """Records decode calls; fails for paths listed in ``broken``."""

    def __init__(self, broken=()):
        self.broken = set(broken)
        self.calls = []

    def __call__(self, path: str) -> DecodedImage:
        from galleria.errors import DecodeFailure

        self.calls.append(path)
        if path in self.broken:
            raise DecodeFailure(path, "corrupt")
        return gradient_image(8, 4, path=path)


@pytest.fixture
def fake_decoder():
    return FakeDecoder()
