import pytest

from palette.convert import Color
from palette.presets import DEFAULT_THEME
from palette.interpolators import (
    COSINE,
    LINEAR_HSL,
    LINEAR_RGB,
    ColorInterpolator,
    EmptyColorSequenceError,
    get_interpolator,
    segment,
)

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)

ALL = [LINEAR_RGB, COSINE, LINEAR_HSL]
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


def test_segment_selection():
    assert segment(0.0, 3) == (0, 0.0)
    assert segment(0.25, 3) == (0, 0.5)
    assert segment(0.5, 3) == (1, 0.0)
    assert segment(1.0, 3) == (1, 1.0)
    assert segment(7.0, 3) == (1, 1.0)
    assert segment(-2.0, 3) == (0, 0.0)


@pytest.mark.parametrize("interp", ALL)
def test_empty_sequence_rejected(interp):
    with pytest.raises(EmptyColorSequenceError):
        interp.interpolate(0.5, [])


@pytest.mark.parametrize("interp", ALL)
def test_single_color_returned_unchanged(interp):
    for w in (-1.0, 0.0, 0.3, 1.0, 4.0):
        assert interp.interpolate(w, [GREEN]) == GREEN


@pytest.mark.parametrize("interp", ALL)
def test_endpoints_exact(interp):
    assert interp.interpolate(0.0, [RED, BLUE]) == RED
    assert interp.interpolate(1.0, [RED, BLUE]) == BLUE
    assert interp.interpolate(-3.0, [RED, BLUE]) == RED
    assert interp.interpolate(3.0, [RED, BLUE]) == BLUE


@pytest.mark.parametrize("interp", ALL)
def test_three_stop_midpoint_is_middle_stop(interp):
    assert interp.interpolate(0.5, [RED, GREEN, BLUE]) == GREEN


def test_linear_rgb_midpoint():
    assert LINEAR_RGB.interpolate(0.5, [RED, BLUE]) == Color(127, 0, 127)


def test_strategies_diverge_inside_a_segment():
    linear = LINEAR_RGB.interpolate(0.25, [RED, BLUE])
    cosine = COSINE.interpolate(0.25, [RED, BLUE])
    assert linear == Color(191, 0, 63)
    assert cosine != linear
    # Eased blend stays closer to the starting stop.
    assert cosine.r > linear.r

    hsl = LINEAR_HSL.interpolate(0.5, [RED, BLUE])
    assert hsl != LINEAR_RGB.interpolate(0.5, [RED, BLUE])


def test_hsl_hue_takes_the_long_way():
    # Red (0 deg) to blue (240 deg) passes through green (120 deg).
    assert LINEAR_HSL.interpolate(0.5, [RED, BLUE]) == GREEN


def test_get_interpolator_by_name():
    assert get_interpolator("linear") is LINEAR_RGB
    assert get_interpolator("cosine") is COSINE
    assert get_interpolator("hsl") is LINEAR_HSL
    with pytest.raises(ValueError):
        get_interpolator("oklab")


def test_interpolator_is_callable():
    assert LINEAR_RGB(1.0, [RED, BLUE]) == BLUE


@pytest.mark.parametrize("interp", ALL)
def test_every_stop_reproduced_at_its_boundary(interp):
    stops = DEFAULT_THEME.stops()
    last = len(stops) - 1
    for k, stop in enumerate(stops):
        assert interp.interpolate(k / last, stops) == stop

    stops = [WHITE, BLACK, WHITE, Color(10, 200, 255), WHITE]
    assert interp.interpolate(0.75, stops) == Color(10, 200, 255)


def test_hsl_keeps_non_primary_stop():
    magenta = Color(230, 0, 139)
    assert LINEAR_HSL.interpolate(0.0, [magenta, magenta]) == magenta
    assert LINEAR_HSL.interpolate(0.5, [magenta, magenta]) == magenta


def test_interpolator_base_is_abstract():
    with pytest.raises(TypeError):
        ColorInterpolator()
