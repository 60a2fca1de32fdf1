from __future__ import annotations

import logging
import time

import numpy as np

from palette.colormap import ColorMap
from palette.interpolators import LINEAR_RGB
from perlinxd.engine import PerlinND
from viz.frame import render_frame


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    print(f"{label}: {ms:.2f} ms")
    return ms


def main() -> None:
    """Quick CPU benchmark.

    Intended targets (laptop-class CPU):
    - 250x250 frame, 3D noise + color lookup: < ~20ms (50 fps budget)
    - 10k scalar noise calls: a rough per-pixel cost for the scalar path
    """

    logging.basicConfig(level=logging.INFO)

    cmap = ColorMap((0x000000, 0xFFFFFF), interpolator=LINEAR_RGB)

    for dims in (2, 3, 4):
        engine = PerlinND(seed=0, dimensions=dims)
        _timeit(
            f"Frame 250x250 ({dims}D, vectorized)",
            lambda: render_frame(
                engine, cmap, width=250, height=250, detail=0.05, z=1.5
            ),
        )

    engine = PerlinND(seed=0, dimensions=3)
    pts = np.random.default_rng(0).uniform(-64.0, 64.0, size=(10_000, 3)).tolist()

    def run_scalar() -> None:
        for x, y, z in pts:
            engine.noise(x, y, z)

    _timeit("Scalar noise x10k (3D)", run_scalar)
    _timeit(
        "Color lookup x62500 (scalar)",
        lambda: [cmap.get_color_at(i / 62500.0) for i in range(62500)],
    )


if __name__ == "__main__":
    main()
