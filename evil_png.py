#!/usr/bin/env python3

import argparse
import logging
import os
import sys

from proto_pals import STRATEGIES, gen_design, round_palette_size
from shared import gen_palette, pal2tr
from tiles import make_image


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate an image whose tiles defeat a palette packing strategy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python evil_png.py any_fit evil.png
  python evil_png.py -s 16 -T 8 best_fusion evil.png
        """,
    )
    parser.add_argument(
        "strategy",
        choices=list(STRATEGIES),
        help="Strategy to defeat. Either `any_fit` or `best_fusion`.",
    )
    parser.add_argument("out_path", help="Where to write the image to.")
    parser.add_argument(
        "-s",
        "--palette-size",
        type=int,
        default=4,
        help="How large your colour palettes are. Defaults to 4 (2bpp).",
    )
    parser.add_argument(
        "-T",
        "--tile-size",
        type=int,
        default=8,
        help="How large your tiles are (they are assumed to be square). Defaults to 8.",
    )
    parser.add_argument(
        "-p", "--palette-out", help="Also write the colours as a .tr palette file."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Enable verbose mode. Can be specified multiple times.",
    )
    args = parser.parse_args(argv)

    if args.verbose >= 2:
        logging.basicConfig(level=logging.DEBUG)
    elif args.verbose == 1:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    if args.palette_size < 0:
        parser.error(f"palette size must not be negative: {args.palette_size}")
    if args.tile_size <= 0:
        parser.error(f"tile size must be positive: {args.tile_size}")

    palette_size = round_palette_size(args.palette_size)
    try:
        proto_palettes, nb_colors = gen_design(args.strategy, palette_size)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not proto_palettes:
        logging.warning(f"palette size {palette_size}: no tiles, not writing {args.out_path}")
        return 0

    pal = gen_palette(nb_colors)
    image = make_image(args.tile_size, proto_palettes, pal)

    try:
        image.save(args.out_path, "PNG")
    except OSError as e:
        print(f'Failed to write image to "{args.out_path}": {e}', file=sys.stderr)
        return 1

    if args.palette_out:
        try:
            pal2tr(pal, args.palette_out)
        except OSError as e:
            print(
                f'Failed to write palette to "{args.palette_out}": {e}', file=sys.stderr
            )
            return 1

    logging.info(
        f"wrote {os.path.getsize(args.out_path)} bytes to {args.out_path} "
        f"({len(proto_palettes)} tiles)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
