import os
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from galleria.decoder import decode_image
from galleria.errors import DecodeFailure, DirectoryUnreadable, EmptyCollection
from galleria.image_utils import collect_for_path, is_supported_image, list_images


@pytest.mark.parametrize("name, ok", [
    ("a.jpg", True), ("a.JPEG", True), ("a.Png", True), ("a.gif", True),
    ("a.webp", True), ("a.BMP", True), ("a.tiff", False), ("a", False), ("png", False),
])
def test_is_supported_image(name, ok):
    assert is_supported_image(name) is ok


def test_list_images_filters_and_sorts(image_dir: Path):
    images = list_images(str(image_dir))
    names = [os.path.basename(p) for p in images]
    # plain code-point order: upper-case sorts first
    assert names == ["a.PNG", "b.png", "c.jpg"]
    assert all(os.path.isabs(p) or p.startswith(str(image_dir)) for p in images)


def test_list_images_missing_dir(tmp_path: Path):
    with pytest.raises(DirectoryUnreadable) as exc:
        list_images(str(tmp_path / "nope"))
    assert exc.value.folder.endswith("nope")


def test_collect_for_file_selects_it(image_dir: Path):
    images, selected = collect_for_path(str(image_dir / "b.png"))
    assert selected == str(image_dir / "b.png")
    assert selected in images


def test_collect_for_dir_selects_nothing(image_dir: Path):
    images, selected = collect_for_path(str(image_dir))
    assert selected is None
    assert len(images) == 3


def test_collect_for_empty_dir(tmp_path: Path):
    (tmp_path / "readme.md").write_text("x", encoding="utf-8")
    with pytest.raises(EmptyCollection):
        collect_for_path(str(tmp_path))


# ─── Decoder ──────────────────────────────────────────────────────────────

def test_decode_png_rgba(tmp_path: Path):
    path = tmp_path / "x.png"
    img = Image.new("RGBA", (3, 2), (0, 0, 0, 0))
    img.putpixel((2, 1), (1, 2, 3, 4))
    img.save(path)

    decoded = decode_image(str(path))
    assert (decoded.w, decoded.h) == (3, 2)
    assert decoded.pixels.dtype == np.uint8
    assert decoded.pixels.shape == (2, 3, 4)
    assert tuple(decoded.pixels[1, 2]) == (1, 2, 3, 4)
    assert decoded.path == str(path)


def test_decode_rgb_gets_opaque_alpha(tmp_path: Path):
    path = tmp_path / "x.bmp"
    Image.new("RGB", (2, 2), (9, 8, 7)).save(path)
    decoded = decode_image(str(path))
    assert tuple(decoded.pixels[0, 0]) == (9, 8, 7, 255)


def test_decode_gif_first_frame(tmp_path: Path):
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (4, 4), c) for c in ((255, 0, 0), (0, 0, 255))]
    frames[0].save(path, save_all=True, append_images=frames[1:])
    decoded = decode_image(str(path))
    r, g, b, a = decoded.pixels[0, 0]
    assert r > 200 and b < 50 and a == 255


def test_decode_corrupt_file(tmp_path: Path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(DecodeFailure) as exc:
        decode_image(str(path))
    assert exc.value.path == str(path)


def test_decode_missing_file(tmp_path: Path):
    with pytest.raises(DecodeFailure):
        decode_image(str(tmp_path / "gone.png"))


def test_decode_too_large(tmp_path: Path, monkeypatch):
    path = tmp_path / "x.png"
    Image.new("RGB", (2, 2)).save(path)
    monkeypatch.setattr("galleria.decoder.MAX_FILE_SIZE_MB", 0)
    with pytest.raises(DecodeFailure, match="too large"):
        decode_image(str(path))
