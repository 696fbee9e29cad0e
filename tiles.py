import logging
from typing import List

from PIL import Image
from PIL.Image import Image as PILImage

from shared import pal_to_bytes


def gen_tiles(tile_size: int, proto_palettes: List[List[int]]) -> bytes:
    """Generates tiles that contain the specified colours and none else.

    Tiles are stacked vertically, so the buffer is `tile_size` pixels wide and
    `tile_size * len(proto_palettes)` pixels high, one byte per pixel.
    """
    pixels = bytearray(tile_size * tile_size * len(proto_palettes))

    for i, tile in enumerate(proto_palettes):
        for y in range(tile_size):
            dest_y = i * tile_size + y
            for x in range(tile_size):
                # Wrap around the proto-palette once the tile outgrows it
                pixels[dest_y * tile_size + x] = tile[(x + y * tile_size) % len(tile)]

    logging.debug(f"{len(proto_palettes)} tiles, {len(pixels)} bytes")
    return bytes(pixels)


def make_image(
    tile_size: int, proto_palettes: List[List[int]], pal: list[tuple[int, int, int]]
) -> PILImage:
    width = tile_size
    height = tile_size * len(proto_palettes)

    image = Image.frombytes("P", (width, height), gen_tiles(tile_size, proto_palettes))
    image.putpalette(pal_to_bytes(pal))
    image.info["transparency"] = 0

    logging.info(f"image: w: {width}, h: {height}, colors: {len(pal)}")
    return image
