"""Tests for tile assembly and the PNG round trip."""
import pytest
from PIL import Image

from png2tiles import split_tiles
from proto_pals import defeat_any_fit, defeat_best_fusion
from shared import gen_palette
from tiles import gen_tiles, make_image


def test_gen_tiles_wraps_proto_palette():
    pixels = gen_tiles(2, [[7, 8, 9]])
    assert pixels == bytes([7, 8, 9, 7])


def test_gen_tiles_stacks_vertically():
    pixels = gen_tiles(2, [[1], [2, 3]])
    assert pixels == bytes([1, 1, 1, 1, 2, 3, 2, 3])


def test_gen_tiles_tile_size_one():
    proto_palettes, _ = defeat_best_fusion(4)
    pixels = gen_tiles(1, proto_palettes)
    assert len(pixels) == len(proto_palettes)
    assert list(pixels) == [p[0] for p in proto_palettes]


def test_gen_tiles_empty():
    assert gen_tiles(8, []) == b""


def test_gen_tiles_is_deterministic():
    proto_palettes, _ = defeat_any_fit(6)
    assert gen_tiles(8, proto_palettes) == gen_tiles(8, proto_palettes)


def test_make_image():
    proto_palettes, nb_colors = defeat_best_fusion(4)
    pal = gen_palette(nb_colors)
    image = make_image(8, proto_palettes, pal)

    assert image.mode == "P"
    assert image.size == (8, 8 * len(proto_palettes))
    assert image.info["transparency"] == 0
    assert image.getpalette()[: 3 * nb_colors] == [c for rgb in pal for c in rgb]


@pytest.mark.parametrize(
    "generator, palette_size, tile_size",
    [
        (defeat_any_fit, 2, 8),
        (defeat_any_fit, 6, 4),
        (defeat_best_fusion, 4, 8),
        (defeat_best_fusion, 10, 3),
        (defeat_best_fusion, 6, 1),
    ],
)
def test_png_round_trip(tmp_path, generator, palette_size, tile_size):
    proto_palettes, nb_colors = generator(palette_size)
    out = tmp_path / "evil.png"
    make_image(tile_size, proto_palettes, gen_palette(nb_colors)).save(out, "PNG")

    with Image.open(out) as img:
        assert img.size == (tile_size, tile_size * len(proto_palettes))
        tiles = split_tiles(img, tile_size)

    assert len(tiles) == len(proto_palettes)
    for colors, proto_palette in zip(tiles, proto_palettes):
        assert set(colors) <= set(proto_palette)
        if tile_size * tile_size >= len(proto_palette):
            assert set(colors) == set(proto_palette)


def test_split_tiles_rejects_bad_images():
    with pytest.raises(ValueError, match="paletted"):
        split_tiles(Image.new("RGB", (8, 16)), 8)
    with pytest.raises(ValueError, match="column"):
        split_tiles(Image.new("P", (8, 12)), 8)
    with pytest.raises(ValueError, match="column"):
        split_tiles(Image.new("P", (16, 16)), 8)
