"""Named color stop sequences.

To add a preset, append a tuple of packed 0xRRGGBB stops to PRESETS.
"""

from __future__ import annotations

from dataclasses import dataclass

from .colormap import ColorMap
from .convert import Color
from .interpolators import LINEAR_RGB, ColorInterpolator


@dataclass(frozen=True)
class Theme:
    primary: Color = Color.from_hex(0xE6C600)
    secondary: Color = Color.from_hex(0xE6008B)
    tertiary: Color = Color.from_hex(0x00D9F5)
    dark: Color = Color.from_hex(0x282B28)
    light: Color = Color.from_hex(0xFFFFFF)

    def stops(self) -> tuple[Color, ...]:
        return (self.dark, self.primary, self.secondary, self.tertiary, self.light)


DEFAULT_THEME = Theme()

PRESETS: dict[str, tuple[int, ...]] = {
    "grayscale": (0x000000, 0xFFFFFF),
    "theme": tuple(c.hex for c in DEFAULT_THEME.stops()),
    "fire": (0x000000, 0x8B0000, 0xFF4500, 0xFFD700, 0xFFFFE0),
    "ocean": (0x000033, 0x0047AB, 0x00CED1, 0xF0FFFF),
}


def preset_colormap(
    name: str,
    *,
    interpolator: ColorInterpolator | str = LINEAR_RGB,
) -> ColorMap:
    name = str(name)
    stops = PRESETS.get(name)
    if stops is None:
        raise ValueError(f"unknown preset: {name}")
    return ColorMap(stops, interpolator=interpolator)
