from .colormap import COLOR_MAP_SIZE, ColorMap
from .convert import Color, clamp, clamp_hex, hsl_to_rgb, rgb_to_hsl, to_colors
from .interpolators import (
    COSINE,
    LINEAR_HSL,
    LINEAR_RGB,
    EmptyColorSequenceError,
    get_interpolator,
)
from .presets import DEFAULT_THEME, PRESETS, Theme, preset_colormap

__all__ = [
    "COLOR_MAP_SIZE",
    "COSINE",
    "Color",
    "ColorMap",
    "DEFAULT_THEME",
    "EmptyColorSequenceError",
    "LINEAR_HSL",
    "LINEAR_RGB",
    "PRESETS",
    "Theme",
    "clamp",
    "clamp_hex",
    "get_interpolator",
    "hsl_to_rgb",
    "preset_colormap",
    "rgb_to_hsl",
    "to_colors",
]
