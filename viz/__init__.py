from .export import array_to_png_bytes, frames_to_gif_bytes, rgb_to_png_bytes
from .frame import AnimationSettings, NoiseAnimator, normalize_sample, render_frame

__all__ = [
    "AnimationSettings",
    "NoiseAnimator",
    "array_to_png_bytes",
    "frames_to_gif_bytes",
    "normalize_sample",
    "render_frame",
    "rgb_to_png_bytes",
]
