from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral
from typing import Iterable

MAX_CHANNEL = 255
MAX_HEX = 0xFFFFFF


def clamp(value: int) -> int:
    return max(0, min(MAX_CHANNEL, int(value)))


def clamp_hex(value: int) -> int:
    return max(0, min(MAX_HEX, int(value)))


def clamp01(value: float) -> float:
    value = float(value)
    # NaN falls to 0 along with negatives.
    if not value > 0.0:
        return 0.0
    return min(1.0, value)


@dataclass(frozen=True)
class Color:
    """An opaque 8-bit-per-channel RGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        # Out-of-range channels saturate.
        object.__setattr__(self, "r", clamp(self.r))
        object.__setattr__(self, "g", clamp(self.g))
        object.__setattr__(self, "b", clamp(self.b))

    @classmethod
    def from_hex(cls, value: int) -> Color:
        v = clamp_hex(value)
        return cls((v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> Color:
        return cls(int(r), int(g), int(b))

    @property
    def hex(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


ColorLike = Color | int | tuple


def hex_to_color(value: int) -> Color:
    return Color.from_hex(value)


def to_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    if isinstance(value, Integral) and not isinstance(value, bool):
        return Color.from_hex(value)
    if isinstance(value, (tuple, list)) and len(value) == 3:
        r, g, b = value
        return Color.from_rgb(r, g, b)
    raise ValueError(f"cannot interpret {value!r} as a color")


def to_colors(values: Iterable[ColorLike]) -> list[Color]:
    return [to_color(v) for v in values]


def rgb_to_hsl(color: Color) -> tuple[float, float, float]:
    """Convert to (hue in [0, 360), saturation in [0, 1], lightness in [0, 1])."""
    r = color.r / 255.0
    g = color.g / 255.0
    b = color.b / 255.0

    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin

    if delta == 0:
        h = 0.0
    elif cmax == r:
        h = (60.0 * ((g - b) / delta) + 360.0) % 360.0
    elif cmax == g:
        h = (60.0 * ((b - r) / delta) + 120.0) % 360.0
    else:
        h = (60.0 * ((r - g) / delta) + 240.0) % 360.0

    l = (cmax + cmin) / 2.0
    s = 0.0 if delta == 0 else delta / (1.0 - abs(2.0 * l - 1.0))
    return h, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> Color:
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
    m = l - c / 2.0

    if 0.0 <= h < 60.0:
        r, g, b = c, x, 0.0
    elif 60.0 <= h < 120.0:
        r, g, b = x, c, 0.0
    elif 120.0 <= h < 180.0:
        r, g, b = 0.0, c, x
    elif 180.0 <= h < 240.0:
        r, g, b = 0.0, x, c
    elif 240.0 <= h < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    # Round to nearest so a stop survives the trip through HSL unchanged.
    return Color(
        clamp(math.floor((r + m) * 255.0 + 0.5)),
        clamp(math.floor((g + m) * 255.0 + 0.5)),
        clamp(math.floor((b + m) * 255.0 + 0.5)),
    )
