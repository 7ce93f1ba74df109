"""Loading of XPM wall textures into flat, square pixel buffers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .errors import MLX_IMG, CubError

_QUOTED = re.compile(r'"((?:[^"\\]|\\.)*)"')
_CONTEXT_KEYS = {"c", "m", "s", "g", "g4"}
_NAMED_COLOURS = {
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
}


@dataclass
class Texture:
    """An image as a row-major list of ``0xRRGGBB`` colours."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` and row ``y``."""
        return self.pixels[y * self.width + x]


def _parse_colour(spec: str) -> int:
    value = spec.strip()
    lowered = value.lower()
    if lowered == "none":
        return 0
    if lowered in _NAMED_COLOURS:
        return _NAMED_COLOURS[lowered]
    if value.startswith("#"):
        digits = value[1:]
        if digits and len(digits) % 3 == 0:
            try:
                int(digits, 16)
            except ValueError:
                pass
            else:
                width = len(digits) // 3
                channels = [int(digits[i * width : i * width + 2].ljust(2, digits[i * width]), 16)
                            for i in range(3)]
                return (channels[0] << 16) | (channels[1] << 8) | channels[2]
    raise CubError(MLX_IMG)


def _colour_spec(tokens: list[str]) -> str:
    specs: dict[str, list[str]] = {}
    current: str | None = None
    for token in tokens:
        if token in _CONTEXT_KEYS and (current is None or specs[current]):
            current = token
            specs[current] = []
        elif current is not None:
            specs[current].append(token)
    if not specs:
        raise CubError(MLX_IMG)
    chosen = specs.get("c") or next(iter(specs.values()))
    if not chosen:
        raise CubError(MLX_IMG)
    return " ".join(chosen)


def parse_xpm(text: str) -> Texture:
    """Parse the text of an XPM image; raise CubError when it is malformed."""
    strings = _QUOTED.findall(text)
    if not strings:
        raise CubError(MLX_IMG)
    try:
        width, height, ncolors, cpp = (int(v) for v in strings[0].split()[:4])
    except ValueError as exc:
        raise CubError(MLX_IMG) from exc
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise CubError(MLX_IMG)
    colour_lines = strings[1 : 1 + ncolors]
    rows = strings[1 + ncolors : 1 + ncolors + height]
    if len(colour_lines) != ncolors or len(rows) != height:
        raise CubError(MLX_IMG)
    palette = {}
    for line in colour_lines:
        key = line[:cpp]
        palette[key] = _parse_colour(_colour_spec(line[cpp:].split()))
    pixels = []
    for row in rows:
        if len(row) < width * cpp:
            raise CubError(MLX_IMG)
        for x in range(width):
            key = row[x * cpp : (x + 1) * cpp]
            if key not in palette:
                raise CubError(MLX_IMG)
            pixels.append(palette[key])
    return Texture(width, height, pixels)


def load_xpm(path: str) -> Texture:
    """Read and parse the XPM file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError(MLX_IMG) from exc
    return parse_xpm(text)


def _square(texture: Texture) -> Texture:
    size = texture.height
    count = size * size
    pixels = texture.pixels[:count]
    pixels.extend([0] * (count - len(pixels)))
    return Texture(size, size, pixels)


def load_textures(scene) -> list[Texture]:
    """Load the scene's wall textures in north, south, east, west order.

    Each is cut to a square whose side is the image height, taking the
    first side-squared pixels of the image in row-major order.
    """
    paths = (scene.north, scene.south, scene.east, scene.west)
    return [_square(load_xpm(path)) for path in paths]