from __future__ import annotations

import io
from typing import Iterable

import numpy as np
from PIL import Image


def array_to_png_bytes(z: np.ndarray) -> bytes:
    """Convert a 2D array to an 8-bit grayscale PNG.

    Values are min/max normalized to [0, 255]. Degenerate (constant) arrays
    become all zeros.
    """

    z = np.asarray(z, dtype=np.float64)
    if z.ndim != 2:
        raise ValueError("expected a 2D array")

    zmin = float(np.min(z))
    zmax = float(np.max(z))
    if zmax == zmin:
        img = np.zeros(z.shape, dtype=np.uint8)
    else:
        zn = (z - zmin) / (zmax - zmin)
        img = np.clip(zn * 255.0, 0.0, 255.0).astype(np.uint8)

    out = io.BytesIO()
    Image.fromarray(img).save(out, format="PNG")
    return out.getvalue()


def _rgb_image(rgb: np.ndarray) -> Image.Image:
    rgb = np.asarray(rgb)
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError("expected an HxWx3 array")
    return Image.fromarray(rgb.astype(np.uint8))


def rgb_to_png_bytes(rgb: np.ndarray) -> bytes:
    out = io.BytesIO()
    _rgb_image(rgb).save(out, format="PNG")
    return out.getvalue()


def frames_to_gif_bytes(frames: Iterable[np.ndarray], *, fps: int = 50) -> bytes:
    images = [_rgb_image(f) for f in frames]
    if not images:
        raise ValueError("at least one frame is required")

    fps = max(int(fps), 1)
    out = io.BytesIO()
    images[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=max(1000 // fps, 1),
        loop=0,
    )
    return out.getvalue()
