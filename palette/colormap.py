from __future__ import annotations

import logging
import math
from typing import Iterable

import numpy as np

from .convert import Color, ColorLike, clamp01, to_colors
from .interpolators import (
    LINEAR_RGB,
    ColorInterpolator,
    EmptyColorSequenceError,
    get_interpolator,
)

logger = logging.getLogger(__name__)

COLOR_MAP_SIZE = 256
LAST_INDEX = COLOR_MAP_SIZE - 1


def _round_half_up(x):
    return np.floor(x + 0.5)


class ColorMap:
    """A 256-entry color lookup table built once from a list of stops.

    `resolution` controls how many of the 256 precomputed entries a lookup can
    reach. Lowering it posterizes the output without rebuilding the table.
    """

    def __init__(
        self,
        colors: Iterable[ColorLike],
        *,
        interpolator: ColorInterpolator | str = LINEAR_RGB,
    ):
        stops = to_colors(colors)
        if not stops:
            raise EmptyColorSequenceError("at least one color must be provided")
        if isinstance(interpolator, str):
            interpolator = get_interpolator(interpolator)

        self.interpolator = interpolator
        self.stops = tuple(stops)
        self.cache = tuple(
            interpolator.interpolate(i / LAST_INDEX, self.stops)
            for i in range(COLOR_MAP_SIZE)
        )

        lut = np.array([c.as_tuple() for c in self.cache], dtype=np.uint8)
        lut.setflags(write=False)
        self.lut = lut

        self._color_count = len(self.stops)
        self._resolution = COLOR_MAP_SIZE
        logger.debug(
            "ColorMap built: %d stops, interpolator=%r",
            self._color_count,
            self.interpolator,
        )

    @classmethod
    def from_hex(
        cls,
        *values: int,
        interpolator: ColorInterpolator | str = LINEAR_RGB,
    ) -> ColorMap:
        return cls(values, interpolator=interpolator)

    @property
    def color_count(self) -> int:
        return self._color_count

    @property
    def resolution(self) -> int:
        return self._resolution

    def _index(self, weight: float) -> int:
        last = self._resolution - 1
        if last <= 0:
            return 0
        scaled = math.floor(clamp01(weight) * last + 0.5)
        return int(math.floor(scaled / last * LAST_INDEX + 0.5))

    def get_color_at(self, weight: float) -> Color:
        return self.cache[self._index(weight)]

    def lookup(self, weights: np.ndarray) -> np.ndarray:
        """Vectorized `get_color_at`: returns uint8 RGB with a trailing axis of 3."""
        w = np.nan_to_num(
            np.asarray(weights, dtype=np.float64), nan=0.0, posinf=1.0, neginf=0.0
        )
        w = np.clip(w, 0.0, 1.0)

        last = self._resolution - 1
        if last <= 0:
            idx = np.zeros(w.shape, dtype=np.intp)
        else:
            scaled = _round_half_up(w * last)
            idx = _round_half_up(scaled / last * LAST_INDEX).astype(np.intp)
        return self.lut[idx]

    def set_resolution(self, resolution: int) -> None:
        # Bounded by the table size only; the stop-count floor applies to the
        # step-wise increase/decrease below.
        self._resolution = max(0, min(COLOR_MAP_SIZE, int(resolution)))
        logger.debug("ColorMap resolution set to %d", self._resolution)

    def increase_resolution(self) -> None:
        self._resolution = min(COLOR_MAP_SIZE, self._resolution * 2)
        logger.debug("ColorMap resolution increased to %d", self._resolution)

    def decrease_resolution(self) -> None:
        self._resolution = max(self._color_count, self._resolution // 2)
        logger.debug("ColorMap resolution decreased to %d", self._resolution)
