import numpy as np
import pytest

from galleria.compositor import Compositor, composite
from galleria.types import DecodedImage, DestinationBuffer, Placement
from galleria.view_math import (
    compute_fit_scale, compute_placement, sample_indices, source_indices, center_offset,
)

BLACK = (0, 0, 0, 255)


def _stale(w, h):
    """A buffer full of junk that must not survive a composite."""
    buf = DestinationBuffer(w, h)
    buf.pixels[...] = (200, 100, 50, 7)
    return buf


def _all_background(buf):
    return bool(np.all(buf.pixels == np.array(BLACK, dtype=np.uint8)))


# ─── Placement math ───────────────────────────────────────────────────────

def test_fit_scale_binding_dimension():
    assert compute_fit_scale(100, 50, 400, 400) == 4.0
    assert compute_fit_scale(50, 100, 400, 400) == 4.0
    assert compute_fit_scale(800, 600, 400, 400) == 0.5


def test_fit_scale_zero_dims():
    assert compute_fit_scale(0, 10, 10, 10) == 0.0
    assert compute_fit_scale(10, 10, 10, 0) == 0.0


def test_placement_letterbox():
    p = compute_placement(100, 50, 400, 400, 1.0)
    assert p.base_scale == 4.0
    assert p.scale == 4.0
    assert (p.scaled_w, p.scaled_h) == (400, 200)
    assert (p.offset_x, p.offset_y) == (0, 100)
    assert (p.visible_w, p.visible_h) == (400, 200)


def test_placement_over_zoom_anchors_at_origin():
    p = compute_placement(10, 10, 100, 100, 5.0)
    assert (p.scaled_w, p.scaled_h) == (500, 500)
    assert (p.offset_x, p.offset_y) == (0, 0)
    assert (p.visible_w, p.visible_h) == (100, 100)


def test_placement_truncates_extents():
    # 3 * (10/3) * 1.0 is just under or at 10; never rounds up past the exact size
    p = compute_placement(3, 7, 10, 100, 1.0)
    assert p.scaled_w <= 10
    assert p.scaled_w == int(3 * p.scale)
    assert p.scaled_h == int(7 * p.scale)


def test_placement_zoomed_out_centers():
    p = compute_placement(100, 100, 200, 200, 0.5)
    assert (p.scaled_w, p.scaled_h) == (100, 100)
    assert (p.offset_x, p.offset_y) == (50, 50)


def test_center_offset_odd_margin_truncates():
    assert center_offset(101, 50) == 25
    assert center_offset(50, 101) == 0


def test_placement_degenerate():
    assert compute_placement(0, 5, 10, 10, 1.0) == Placement()
    assert compute_placement(5, 5, 0, 10, 1.0).is_empty


def test_source_indices_clamped():
    idx = source_indices(10, 0.999999, 10)
    assert idx.max() == 9
    assert idx.min() == 0
    assert list(source_indices(6, 2.0, 3)) == [0, 0, 1, 1, 2, 2]
    assert len(source_indices(0, 1.0, 3)) == 0


# ─── Compositing ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("iw, ih, fw, fh", [
    (0, 10, 20, 20), (10, 0, 20, 20), (10, 10, 0, 20), (10, 10, 20, 0), (0, 0, 0, 0),
])
def test_degenerate_inputs_only_clear(gradient, iw, ih, fw, fh):
    image = gradient(iw, ih) if iw and ih else DecodedImage(np.zeros((ih, iw, 4), np.uint8))
    buf = _stale(fw, fh)
    placement = composite(image, buf, 1.0)
    assert placement.is_empty
    assert _all_background(buf)


def test_none_image_clears(gradient):
    buf = _stale(5, 5)
    Compositor().composite(None, buf, 1.0)
    assert _all_background(buf)


def test_letterbox_bars_and_content(gradient):
    image = gradient(100, 50)
    buf = _stale(400, 400)
    composite(image, buf, 1.0)

    assert np.all(buf.pixels[:100] == BLACK)
    assert np.all(buf.pixels[300:] == BLACK)
    band = buf.pixels[100:300]
    assert np.all(band[..., 3] == 255)
    # 4x nearest neighbour: dest (x, y) shows source (x // 4, y // 4)
    assert buf.pixel(0, 100) == (0, 0, 0, 255)
    assert buf.pixel(7, 100) == (1, 0, 1, 255)
    assert buf.pixel(399, 299) == (99, 49, 148, 255)


def test_pillarbox(gradient):
    image = gradient(50, 100)
    buf = _stale(400, 400)
    composite(image, buf, 1.0)
    assert np.all(buf.pixels[:, :100] == BLACK)
    assert np.all(buf.pixels[:, 300:] == BLACK)
    assert buf.pixel(100, 0)[:2] == (0, 0)


def test_identity_scale_copies_exactly(gradient):
    image = gradient(37, 23)
    buf = _stale(37, 23)
    composite(image, buf, 1.0)
    assert np.array_equal(buf.pixels, image.pixels)


def test_identity_via_inverse_zoom(gradient):
    # base scale 2.0; zoom 0.5 gives scale 1.0 exactly
    image = gradient(40, 30)
    buf = _stale(80, 60)
    placement = composite(image, buf, 0.5)
    assert placement.scale == 1.0
    x, y = placement.offset_x, placement.offset_y
    assert (x, y) == (20, 15)
    assert np.array_equal(buf.pixels[y:y + 30, x:x + 40], image.pixels)


def test_high_zoom_clips_inside_bounds(gradient):
    image = gradient(10, 10)
    buf = _stale(100, 100)
    placement = composite(image, buf, 5.0)

    assert placement.visible_w <= buf.width - placement.offset_x
    assert placement.visible_h <= buf.height - placement.offset_y
    cols, rows = sample_indices(placement, image.w, image.h)
    assert cols.min() >= 0 and cols.max() < image.w
    assert rows.min() >= 0 and rows.max() < image.h
    # scale 50: the whole 100x100 buffer shows the top-left 2x2 source block
    assert buf.pixel(0, 0)[:2] == (0, 0)
    assert buf.pixel(49, 49)[:2] == (0, 0)
    assert buf.pixel(50, 50)[:2] == (1, 1)
    assert buf.pixel(99, 99)[:2] == (1, 1)


def test_alpha_is_copied_verbatim():
    px = np.zeros((2, 2, 4), dtype=np.uint8)
    px[...] = (10, 20, 30, 0)
    buf = _stale(2, 2)
    composite(DecodedImage(px), buf, 1.0)
    assert buf.pixel(1, 1) == (10, 20, 30, 0)


def test_min_zoom_small_image(gradient):
    image = gradient(10, 10)
    buf = _stale(10, 10)
    placement = composite(image, buf, 0.1)
    assert (placement.scaled_w, placement.scaled_h) == (1, 1)
    assert (placement.offset_x, placement.offset_y) == (4, 4)
    assert buf.pixel(4, 4) == (0, 0, 0, 255)
    assert int(np.count_nonzero(np.any(buf.pixels != BLACK, axis=2))) == 0


def test_scratch_reused_for_same_geometry(gradient):
    comp = Compositor()
    buf = DestinationBuffer(64, 48)
    comp.composite(gradient(20, 10), buf, 1.5)
    frame = comp._scratch.out_frame
    comp.composite(gradient(20, 10), buf, 1.5)
    assert comp._scratch.out_frame is frame

    buf.resize(32, 32)
    comp.composite(gradient(20, 10), buf, 1.5)
    assert comp._scratch.out_frame is not frame


def test_resize_then_repaint_recenters(gradient):
    comp = Compositor()
    image = gradient(10, 10)
    buf = DestinationBuffer(100, 50)
    comp.composite(image, buf, 1.0)
    assert (comp.last_placement.offset_x, comp.last_placement.offset_y) == (25, 0)
    buf.resize(50, 100)
    comp.composite(image, buf, 1.0)
    assert (comp.last_placement.offset_x, comp.last_placement.offset_y) == (0, 25)


def test_wide_source_work_bounded_by_destination():
    # 4000x1000 into 200x100: scale 0.05, only 200x50 samples are gathered
    rng = np.random.default_rng(0)
    image = DecodedImage(rng.integers(0, 256, size=(1000, 4000, 4), dtype=np.uint8))
    buf = _stale(200, 100)
    comp = Compositor()
    comp.composite(image, buf, 1.0)

    p = comp.last_placement
    scratch = comp._scratch
    assert (p.visible_w, p.visible_h) == (200, 50)
    assert scratch.flat.shape == (p.visible_h, p.visible_w)
    assert scratch.out_frame.shape == (p.visible_h, p.visible_w, 4)
    assert scratch.flat.size <= buf.width * buf.height

    cols, rows = sample_indices(p, image.w, image.h)
    y0, x0 = p.offset_y, p.offset_x
    window = buf.pixels[y0:y0 + p.visible_h, x0:x0 + p.visible_w]
    assert np.array_equal(window, image.pixels[np.ix_(rows, cols)])
    assert np.all(buf.pixels[:y0] == BLACK)
