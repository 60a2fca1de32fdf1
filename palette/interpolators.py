from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Sequence

from .convert import Color, clamp, clamp01, hsl_to_rgb, rgb_to_hsl


class EmptyColorSequenceError(ValueError):
    """Raised when a gradient is requested over zero colors."""


def segment(weight: float, count: int) -> tuple[int, float]:
    """Pick the stop pair for `weight` and the weight local to that pair.

    The weight is clamped to [0, 1]. Past the last boundary the local weight
    is forced to 1 so weight 1.0 lands exactly on the last stop.
    """

    weight = clamp01(weight)
    seg_len = 1.0 / (count - 1)
    index = int(weight / seg_len)
    local = (weight - index * seg_len) / seg_len
    if index >= count - 1:
        index = count - 2
        local = 1.0
    return index, local


def _mix_rgb(c1: Color, c2: Color, t: float) -> Color:
    return Color(
        clamp(int(c1.r * (1.0 - t) + c2.r * t)),
        clamp(int(c1.g * (1.0 - t) + c2.g * t)),
        clamp(int(c1.b * (1.0 - t) + c2.b * t)),
    )


class ColorInterpolator(ABC):
    """Blend along an ordered sequence of stops from a single weight."""

    name = ""

    def interpolate(self, weight: float, colors: Sequence[Color]) -> Color:
        if len(colors) == 0:
            raise EmptyColorSequenceError("at least one color must be provided")
        if len(colors) == 1:
            return colors[0]

        index, local = segment(weight, len(colors))
        return self.blend(colors[index], colors[index + 1], local)

    @abstractmethod
    def blend(self, c1: Color, c2: Color, t: float) -> Color:  # pragma: no cover
        ...

    def __call__(self, weight: float, colors: Sequence[Color]) -> Color:
        return self.interpolate(weight, colors)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class LinearRGB(ColorInterpolator):
    name = "linear"

    def blend(self, c1: Color, c2: Color, t: float) -> Color:
        return _mix_rgb(c1, c2, t)


class CosineRGB(ColorInterpolator):
    """Linear RGB blend with a cosine ease in and out of every stop."""

    name = "cosine"

    def blend(self, c1: Color, c2: Color, t: float) -> Color:
        return _mix_rgb(c1, c2, (1.0 - math.cos(t * math.pi)) / 2.0)


class LinearHSL(ColorInterpolator):
    """Blend hue, saturation and lightness independently.

    Hue is blended as a plain number, so red (0) to magenta (300) sweeps
    through green and blue rather than taking the short way round.
    """

    name = "hsl"

    def blend(self, c1: Color, c2: Color, t: float) -> Color:
        h1, s1, l1 = rgb_to_hsl(c1)
        h2, s2, l2 = rgb_to_hsl(c2)
        return hsl_to_rgb(
            h1 + (h2 - h1) * t,
            s1 + (s2 - s1) * t,
            l1 + (l2 - l1) * t,
        )


LINEAR_RGB = LinearRGB()
COSINE = CosineRGB()
LINEAR_HSL = LinearHSL()

INTERPOLATORS: dict[str, ColorInterpolator] = {
    LINEAR_RGB.name: LINEAR_RGB,
    COSINE.name: COSINE,
    LINEAR_HSL.name: LINEAR_HSL,
}


def get_interpolator(name: str) -> ColorInterpolator:
    name = str(name)
    interp = INTERPOLATORS.get(name)
    if interp is None:
        raise ValueError(f"unknown interpolator: {name}")
    return interp
