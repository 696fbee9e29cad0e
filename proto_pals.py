from collections import namedtuple
from itertools import combinations
from math import comb
from typing import List
import logging

# A design is what the packer under test gets fed: the colours each tile may
# use ("proto-palettes"), in emission order, plus the size of the colour table.
Design = namedtuple("Design", ["proto_palettes", "nb_colors"])

MAX_COLORS = 256


def check_palette_size(palette_size: int, nb_colors: int) -> None:
    if palette_size % 2 != 0:
        raise ValueError(f"Palette size must be even for this strategy! ({palette_size})")
    if nb_colors > MAX_COLORS:
        raise ValueError(
            f"Only color indices up to {MAX_COLORS} are supported! "
            f"(palette size {palette_size} needs {nb_colors} colors)"
        )


# Strategy (section 3.1.2 of the palette packing paper):
#
# 1. Divide the colours into two palette-sized disjoint sets (even and odd indices).
# 2. Only ever give a tile colours from one of the sets, and feed the
#    proto-palettes to the packer alternatingly.
#
# The image can be displayed with just the two sets, but a greedy packer ends up
# building N palettes, each made of one proto-palette from each set.
def defeat_any_fit(palette_size: int) -> Design:
    nb_colors = palette_size * 2
    check_palette_size(palette_size, nb_colors)
    if palette_size == 0:
        return Design([], 0)

    nb_colors_per_tile = palette_size // 2
    proto_palettes: List[List[int]] = []
    for combination in combinations(range(palette_size), nb_colors_per_tile):
        evens = [index * 2 for index in combination]
        odds = [index * 2 + 1 for index in combination]
        proto_palettes.append(evens)
        proto_palettes.append(odds)

    expected = 2 * comb(palette_size, nb_colors_per_tile)
    assert len(proto_palettes) == expected, f"{len(proto_palettes)} != {expected}"

    logging.info(f"any_fit: {len(proto_palettes)} proto-palettes, {nb_colors} colors")
    return Design(proto_palettes, nb_colors)


def nb_best_fusion_tiles(palette_size: int) -> int:
    return palette_size * 2 + (palette_size // 2) * (palette_size - 2)


# Strategy (section 3.2.2 of the palette packing paper):
#
# 0. Let N = palette_size and A = 0..N the input alphabet.
# 1. Build the N proto-palettes of N-1 colours (the (N-1)-combinations of A).
# 2. For each disjoint pair of those, take their intersection (N-2 colours) and
#    add one of the two lock colours N and N+1 to it.
# 3. Alternate one proto-palette from step 1 with one from step 2.
# 4. Emit every (N-3)-subset of each intersection with both lock colours.
#
# The image can be displayed using one palette containing all of A, and one per
# intersection with both lock colours added.
def defeat_best_fusion(palette_size: int) -> Design:
    nb_colors = palette_size + 2
    check_palette_size(palette_size, nb_colors)
    if palette_size == 0:
        return Design([], nb_colors)

    a = nb_colors - 2
    b = nb_colors - 1

    t0 = list(combinations(range(palette_size), palette_size - 1))
    assert len(t0) == palette_size, f"{len(t0)} != {palette_size}"

    proto_palettes: List[List[int]] = []
    for i in range(palette_size // 2):
        first = t0[i * 2]
        second = t0[i * 2 + 1]

        intersection = [color for color in first if color in second]
        assert len(intersection) == palette_size - 2, intersection

        # These two fill up one palette...
        proto_palettes.append(list(first))
        proto_palettes.append(intersection + [a])
        # ...and these two another one.
        proto_palettes.append(list(second))
        proto_palettes.append(intersection + [b])

        # Both lock colours, so none of these can join the palettes above.
        if palette_size >= 3:
            rest = list(combinations(intersection, palette_size - 3))
            assert len(rest) == palette_size - 2, rest
            proto_palettes.extend(list(subpal) + [a, b] for subpal in rest)

    expected = nb_best_fusion_tiles(palette_size)
    assert len(proto_palettes) == expected, f"{len(proto_palettes)} != {expected}"
    for proto_palette in proto_palettes:
        assert len(proto_palette) == palette_size - 1, proto_palette
        assert len(set(proto_palette)) == len(proto_palette), proto_palette

    logging.info(
        f"best_fusion: {len(proto_palettes)} proto-palettes, {nb_colors} colors"
    )
    return Design(proto_palettes, nb_colors)


STRATEGIES = {
    "any_fit": defeat_any_fit,
    "best_fusion": defeat_best_fusion,
}


def gen_design(strategy: str, palette_size: int) -> Design:
    """Run the named strategy for an (already even) palette size."""
    if strategy not in STRATEGIES:
        raise ValueError(f'Unknown strategy "{strategy}"')
    return STRATEGIES[strategy](palette_size)


def round_palette_size(palette_size: int) -> int:
    """Round down to the nearest even number."""
    rounded = palette_size & ~1
    if rounded != palette_size:
        logging.warning(f"palette size {palette_size} rounded down to {rounded}")
    return rounded
