#!/usr/bin/env python3
from __future__ import annotations
import argparse

from radarchart.config import build_config_from_yaml
from radarchart.core.registry import SURFACE
from radarchart.renderer import RadarChartRenderer
import radarchart.surface  # noqa: F401  # registers built-in surfaces


def render(config_path: str, out: str | None, *, width: float = 400.0, height: float = 400.0,
           dpr: float = 1.0, surface: str = "matplotlib", background=None, debug: bool = False):
    cfg = build_config_from_yaml(config_path)
    target = SURFACE.create(surface, width=width, height=height,
                            device_pixel_ratio=dpr, background=background)
    chart = RadarChartRenderer(target, cfg, debug=debug)
    chart.draw()
    if out:
        if not hasattr(target, "save"):
            raise ValueError(f"Surface '{surface}' cannot be saved to a file")
        target.save(out)
        print(f"[Info] Wrote {out} ({target.backing_size[0]}x{target.backing_size[1]}px)")
    return chart


def main(argv=None):
    ap = argparse.ArgumentParser(description="Render a radar chart from a YAML config")
    ap.add_argument("--config", required=True, help="Path to YAML chart options (labels, data, maxValue, ...)")
    ap.add_argument("--out", default="radar.png", help="Output image path")
    ap.add_argument("--width", type=float, default=400.0, help="Display width in logical px")
    ap.add_argument("--height", type=float, default=400.0, help="Display height in logical px")
    ap.add_argument("--dpr", type=float, default=1.0, help="Device pixel ratio")
    ap.add_argument("--surface", default="matplotlib", choices=SURFACE.available())
    ap.add_argument("--background", default=None, help="Background colour, transparent if omitted")
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args(argv)

    render(args.config, args.out, width=args.width, height=args.height, dpr=args.dpr,
           surface=args.surface, background=args.background, debug=args.debug)


if __name__ == "__main__":
    main()
