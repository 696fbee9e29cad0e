import colorsys
import struct


def gen_palette(nb_colors: int) -> list[tuple[int, int, int]]:
    """One colour per index: hue steps every two indices, lightness alternates."""
    pal = []
    for i in range(nb_colors):
        hue = (i // 2) / (nb_colors // 2)
        # Alternate between darker and brighter colours.
        lightness = 0.25 if i % 2 == 0 else 0.75
        rgb = colorsys.hls_to_rgb(hue, lightness, 1.0)
        pal.append(tuple(round(c * 255) for c in rgb))
    return pal


def pal_to_bytes(pal: list[tuple[int, int, int]]) -> bytes:
    return b"".join([struct.pack("<BBB", *p) for p in pal])


def pal2tpal(pal: bytes) -> list[tuple[int, int, int]]:
    """Convert a bytes pal to a list of tuples pal"""
    return [struct.unpack("<BBB", pal[i : i + 3]) for i in range(0, len(pal), 3)]


# format "pal# - val1 val2 val3"
def pal2tr(pal: list[tuple[int, int, int]], tr_file: str) -> None:
    with open(tr_file, "w") as f:
        for i, rgb in enumerate(pal):
            f.write(f"{i} - {' '.join([str(x) for x in rgb])}\n")


def tr2pal(pal_file: str, default_color=(0, 0, 0)) -> bytes:
    """Parse .tr palette files into bytes"""
    pal = [default_color] * 256

    nb_colors = 0
    with open(pal_file, "r") as read_pal:
        for line in read_pal:
            line = line.replace("-", " ")
            temp = line.strip().split()
            if not temp:
                continue
            pal_num = int(temp[0])
            pal[pal_num] = tuple(int(x) for x in temp[1:4])
            nb_colors = max(nb_colors, pal_num + 1)

    return pal_to_bytes(pal[:nb_colors])
