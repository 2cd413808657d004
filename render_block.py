"""
Starsets renderer — block JSON in, planet-sky SVG/PNG out.

Usage:
  python render_block.py block.json                          # prints SVG to terminal
  python render_block.py block.json -o sky.svg               # saves SVG
  python render_block.py block.json -o sky.svg --png sky.png # also rasterizes
  python render_block.py block.json --mod2 0.9 --attributes traits.json
"""

import argparse
import json
import logging
import sys

from starsets.engine.pipeline import render
from starsets.exceptions import StarsetsError
from starsets.models.block import load_block
from starsets.models.modifiers import PRESET, CanvasSize, Modifiers
from starsets.render.svg_backend import scene_to_svg

logger = logging.getLogger("render_block")


def main():
    parser = argparse.ArgumentParser(description="Render a block into an Other Worlds' Starsets scene")
    parser.add_argument("input", help="Block JSON file (ethers.js getBlockWithTransactions dump)")
    parser.add_argument("-o", "--output", help="Output SVG file")
    parser.add_argument("--png", help="Also rasterize to this PNG file")
    parser.add_argument("--attributes", help="Write NFT attributes JSON to this file")
    parser.add_argument("--width", type=int, default=500)
    parser.add_argument("--height", type=int, default=500)
    parser.add_argument("--mod1", type=float, default=PRESET.mod1, help="Ring spread")
    parser.add_argument("--mod2", type=float, default=PRESET.mod2, help="Palette")
    parser.add_argument("--mod3", type=float, default=PRESET.mod3, help="Moons")
    parser.add_argument("--background", default=PRESET.background)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    modifiers = Modifiers(
        mod1=args.mod1,
        mod2=args.mod2,
        mod3=args.mod3,
        color1=PRESET.color1,
        background=args.background,
    )

    try:
        block = load_block(args.input)
        result = render(block, modifiers, CanvasSize(width=args.width, height=args.height))
    except (OSError, ValueError, StarsetsError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    svg = scene_to_svg(result.scene)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
        print(f"Saved: {args.output}")
    else:
        print(svg)

    if args.png:
        from starsets.render.raster import render_png

        with open(args.png, "wb") as f:
            f.write(render_png(result.scene))
        print(f"Saved: {args.png}")

    if args.attributes:
        with open(args.attributes, "w", encoding="utf-8") as f:
            json.dump(result.metadata(), f, indent=2)
        print(f"Saved: {args.attributes}")

    for attr in result.attributes:
        logger.info("%s: %s", attr.trait_type, attr.value)


if __name__ == "__main__":
    main()
