from .core import GRAD2, GRAD3, GRAD4, build_gradients, build_permutation, fade, lerp
from .engine import InvalidDimensionError, PerlinND

__all__ = [
    "GRAD2",
    "GRAD3",
    "GRAD4",
    "InvalidDimensionError",
    "PerlinND",
    "build_gradients",
    "build_permutation",
    "fade",
    "lerp",
]
