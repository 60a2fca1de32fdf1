from __future__ import annotations

import logging
import sys
from pathlib import Path


def main() -> None:
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))

    from palette.interpolators import COSINE, LINEAR_HSL, LINEAR_RGB
    from palette.presets import preset_colormap
    from perlinxd.engine import PerlinND
    from viz.export import array_to_png_bytes, frames_to_gif_bytes, rgb_to_png_bytes
    from viz.frame import AnimationSettings, NoiseAnimator, frame_coordinates, render_frame

    logging.basicConfig(level=logging.INFO)
    log = logging.getLogger("generate_readme_assets")

    out_dir = root / "assets"
    out_dir.mkdir(parents=True, exist_ok=True)

    engine = PerlinND(seed=0, dimensions=3)

    raw = engine.noise_array(
        *frame_coordinates(engine, width=256, height=256, detail=0.03, z=0.0)
    )
    (out_dir / "noise_raw.png").write_bytes(array_to_png_bytes(raw))

    for interp in (LINEAR_RGB, COSINE, LINEAR_HSL):
        cmap = preset_colormap("theme", interpolator=interp)
        rgb = render_frame(engine, cmap, width=256, height=256, detail=0.03)
        path = out_dir / f"theme_{interp.name}.png"
        path.write_bytes(rgb_to_png_bytes(rgb))
        log.info("wrote %s", path)

    # Posterized variant: same table, fewer reachable entries.
    cmap = preset_colormap("fire")
    cmap.set_resolution(8)
    rgb = render_frame(engine, cmap, width=256, height=256, detail=0.03)
    (out_dir / "fire_posterized.png").write_bytes(rgb_to_png_bytes(rgb))

    settings = AnimationSettings(width=160, height=160, speed=0.05, detail=0.04)
    anim = NoiseAnimator(engine, preset_colormap("ocean"), settings=settings)
    gif = frames_to_gif_bytes(anim.frames(40), fps=settings.fps)
    path = out_dir / "ocean.gif"
    path.write_bytes(gif)
    log.info("wrote %s", path)


if __name__ == "__main__":
    main()
