from __future__ import annotations

import numpy as np
import pytest

from palette.colormap import ColorMap
from perlinxd.engine import PerlinND
from viz.frame import (
    AnimationSettings,
    NoiseAnimator,
    frame_coordinates,
    normalize_sample,
    render_frame,
)


def _gray() -> ColorMap:
    return ColorMap([0x000000, 0xFFFFFF])


def test_normalize_sample_kinds() -> None:
    v = np.array([-1.0, 0.0, 1.0, -0.5])
    assert np.allclose(normalize_sample(v), [0.0, 0.5, 1.0, 0.25])
    assert np.allclose(normalize_sample(v, kind="cellular"), [1.0, 0.0, 1.0, 0.5])
    with pytest.raises(ValueError):
        normalize_sample(v, kind="simplex")


@pytest.mark.parametrize("dims", [2, 3, 4])
def test_render_frame_shape_and_deterministic(dims: int) -> None:
    engine = PerlinND(seed=0, dimensions=dims)
    cmap = _gray()
    a = render_frame(engine, cmap, width=32, height=24, detail=0.1, z=0.5)
    b = render_frame(engine, cmap, width=32, height=24, detail=0.1, z=0.5)
    assert a.shape == (24, 32, 3)
    assert a.dtype == np.uint8
    assert np.array_equal(a, b)


def test_render_frame_matches_per_pixel_lookup() -> None:
    engine = PerlinND(seed=4, dimensions=3)
    cmap = ColorMap([0x000033, 0xFF4500, 0xFFFFE0], interpolator="cosine")
    frame = render_frame(engine, cmap, width=9, height=7, detail=0.37, z=1.25)
    for y in range(7):
        for x in range(9):
            n = engine.noise(x * 0.37, y * 0.37, 1.25)
            expected = cmap.get_color_at((n + 1.0) / 2.0).as_tuple()
            assert tuple(frame[y, x].tolist()) == expected


def test_frame_coordinates_time_axis() -> None:
    e2 = PerlinND(dimensions=2)
    e4 = PerlinND(dimensions=4)
    c2 = frame_coordinates(e2, width=4, height=3, detail=0.5, z=2.0)
    c4 = frame_coordinates(e4, width=4, height=3, detail=0.5, z=2.0)
    assert len(c2) == 2
    assert np.allclose(c2[0][0], [2.0, 2.5, 3.0, 3.5])
    assert len(c4) == 4
    assert np.all(c4[2] == 2.0)
    assert np.all(c4[3] == 0.0)
    with pytest.raises(ValueError):
        frame_coordinates(e2, width=0, height=3, detail=1.0, z=0.0)


def test_animator_advances_time() -> None:
    settings = AnimationSettings(width=16, height=16, speed=0.25, detail=0.1)
    anim = NoiseAnimator(PerlinND(seed=1, dimensions=3), _gray(), settings=settings)
    f0 = anim.next_frame()
    assert anim.z == 0.25
    f1 = anim.next_frame()
    assert anim.z == 0.5
    assert f0.shape == f1.shape == (16, 16, 3)
    assert not np.array_equal(f0, f1)

    frames = list(anim.frames(3))
    assert len(frames) == 3
    assert anim.z == 1.25


def test_animator_frame_interval() -> None:
    anim = NoiseAnimator(PerlinND(), _gray())
    assert anim.frame_interval_ms == 20
    with pytest.raises(ValueError):
        NoiseAnimator(PerlinND(), _gray(), settings=AnimationSettings(fps=0))
    with pytest.raises(ValueError):
        NoiseAnimator(PerlinND(), _gray(), settings=AnimationSettings(kind="value"))


def test_animator_zoom_bounds() -> None:
    anim = NoiseAnimator(PerlinND(), _gray())
    anim.zoom_in()
    assert anim.detail == pytest.approx(1.0 - 1.0 / 16.0)
    assert anim.sensitivity == pytest.approx(16.1)

    for _ in range(500):
        anim.zoom_in()
    assert anim.detail >= anim.settings.min_detail
    assert anim.sensitivity == pytest.approx(18.0)

    for _ in range(2000):
        anim.zoom_out()
    assert anim.detail <= anim.settings.max_detail
    assert anim.detail == pytest.approx(10.0)
    assert anim.sensitivity == pytest.approx(2.0)


def test_animator_color_resolution_delegates() -> None:
    cmap = _gray()
    anim = NoiseAnimator(PerlinND(), cmap)
    anim.decrease_color_resolution()
    assert cmap.resolution == 128
    anim.increase_color_resolution()
    assert cmap.resolution == 256
    anim.set_color_resolution(8)
    assert cmap.resolution == 8
