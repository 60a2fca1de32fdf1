from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from palette.colormap import ColorMap
from perlinxd.engine import PerlinND

logger = logging.getLogger(__name__)

NOISE_KINDS = ("gradient", "cellular")


@dataclass(frozen=True)
class AnimationSettings:
    width: int = 250
    height: int = 250
    fps: int = 50
    speed: float = 1.0
    detail: float = 1.0
    sensitivity: float = 16.0
    min_sensitivity: float = 2.0
    max_sensitivity: float = 18.0
    min_detail: float = 0.01
    max_detail: float = 10.0
    kind: str = "gradient"


def normalize_sample(values: np.ndarray, *, kind: str = "gradient") -> np.ndarray:
    """Map raw noise to a color-map weight.

    Gradient noise is centred on zero and is shifted into [0, 1]; cellular
    distance noise can come back negative and is folded instead.
    """

    values = np.asarray(values, dtype=np.float64)
    kind = str(kind)
    if kind == "gradient":
        return (values + 1.0) / 2.0
    if kind == "cellular":
        return np.abs(values)
    raise ValueError(f"unknown noise kind: {kind}")


def frame_coordinates(
    engine: PerlinND,
    *,
    width: int,
    height: int,
    detail: float,
    z: float,
) -> list[np.ndarray]:
    width = int(width)
    height = int(height)
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")

    detail = float(detail)
    z = float(z)
    xs = np.arange(width, dtype=np.float64) * detail
    ys = np.arange(height, dtype=np.float64) * detail
    xg, yg = np.meshgrid(xs, ys)

    if engine.dimensions == 2:
        # No spare axis for time, so drift across the plane instead.
        return [xg + z, yg]
    coords = [xg, yg, np.full_like(xg, z)]
    if engine.dimensions == 4:
        coords.append(np.zeros_like(xg))
    return coords


def render_frame(
    engine: PerlinND,
    colormap: ColorMap,
    *,
    width: int,
    height: int,
    detail: float = 1.0,
    z: float = 0.0,
    kind: str = "gradient",
) -> np.ndarray:
    """Evaluate one noise slice and color it. Returns an (H, W, 3) uint8 array."""
    coords = frame_coordinates(engine, width=width, height=height, detail=detail, z=z)
    weights = normalize_sample(engine.noise_array(*coords), kind=kind)
    return colormap.lookup(weights)


class NoiseAnimator:
    """Frame-by-frame state for an animated noise view.

    Each frame samples the next slice along the time axis. The zoom steps
    shrink or grow the detail factor by a fraction that itself adapts, so
    repeated steps in one direction accelerate.
    """

    def __init__(
        self,
        engine: PerlinND,
        colormap: ColorMap,
        *,
        settings: AnimationSettings | None = None,
    ):
        self.engine = engine
        self.colormap = colormap
        self.settings = settings if settings is not None else AnimationSettings()
        if self.settings.fps <= 0:
            raise ValueError("fps must be > 0")
        if self.settings.kind not in NOISE_KINDS:
            raise ValueError(f"unknown noise kind: {self.settings.kind}")

        self.z = 0.0
        self.speed = float(self.settings.speed)
        self.detail = float(self.settings.detail)
        self.sensitivity = float(self.settings.sensitivity)

    @property
    def frame_interval_ms(self) -> int:
        return 1000 // int(self.settings.fps)

    def next_frame(self) -> np.ndarray:
        frame = render_frame(
            self.engine,
            self.colormap,
            width=self.settings.width,
            height=self.settings.height,
            detail=self.detail,
            z=self.z,
            kind=self.settings.kind,
        )
        self.z += self.speed
        return frame

    def frames(self, count: int) -> Iterator[np.ndarray]:
        for _ in range(max(int(count), 0)):
            yield self.next_frame()

    def zoom_in(self) -> None:
        s = self.settings
        self.detail = max(s.min_detail, self.detail - self.detail / self.sensitivity)
        self.sensitivity = min(s.max_sensitivity, self.sensitivity + 0.1)
        logger.debug("zoom in: detail=%.4f sensitivity=%.2f", self.detail, self.sensitivity)

    def zoom_out(self) -> None:
        s = self.settings
        self.detail = min(s.max_detail, self.detail + self.detail / self.sensitivity)
        self.sensitivity = max(s.min_sensitivity, self.sensitivity - 0.1)
        logger.debug("zoom out: detail=%.4f sensitivity=%.2f", self.detail, self.sensitivity)

    def increase_color_resolution(self) -> None:
        self.colormap.increase_resolution()

    def decrease_color_resolution(self) -> None:
        self.colormap.decrease_resolution()

    def set_color_resolution(self, resolution: int) -> None:
        self.colormap.set_resolution(resolution)
