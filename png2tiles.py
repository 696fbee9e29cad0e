#!/usr/bin/env python3

import argparse
import logging
import sys

import numpy as np
from PIL import Image
from PIL.Image import Image as PILImage


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="List the colour indices used by each tile of a paletted PNG"
    )
    parser.add_argument("file", help="The PNG file to inspect.")
    parser.add_argument(
        "-T", "--tile-size", type=int, default=8, help="Tile size in pixels."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose mode."
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        with Image.open(args.file) as img:
            tiles = split_tiles(img, args.tile_size)
    except (OSError, ValueError) as e:
        print(f"Error reading {args.file}: {e}", file=sys.stderr)
        return 1

    for i, colors in enumerate(tiles):
        print(f"{i}: {' '.join(str(c) for c in colors)}")
    print(f"{len(tiles)} tiles, {len(set(map(tuple, tiles)))} distinct colour sets")
    return 0


# Tiles are stacked vertically: the image is one tile wide
def split_tiles(image: PILImage, tile_size: int) -> list[list[int]]:
    """Return the sorted colour indices used by each tile, top to bottom."""
    if image.mode != "P":
        raise ValueError(f"Expected a paletted image, got mode {image.mode}")
    width, height = image.size
    if tile_size <= 0 or width != tile_size or height % tile_size != 0:
        raise ValueError(
            f"Image is {width}x{height}, not a column of {tile_size}x{tile_size} tiles"
        )

    pixels = np.asarray(image, dtype=np.uint8)
    blocks = pixels.reshape(height // tile_size, tile_size * tile_size)
    logging.info(f"{len(blocks)} tiles of {tile_size}x{tile_size}")

    return [np.unique(block).tolist() for block in blocks]


if __name__ == "__main__":
    sys.exit(main())
