"""Reading of a scene description: wall textures, colours and the map grid."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .errors import (
    INV_CEILING,
    INV_FLOOR,
    INV_FLOOR_CEILING,
    INV_MAP,
    INV_PLAYER_POS,
    INV_RGB,
    INV_TEXTURE,
    MAP_LAST_ELEM,
    MAP_MISSING,
    MAP_NO_WALLS,
    MAP_TOO_SMALL,
    MISS_COLOR,
    MISS_TEXTURE,
    WRONG_CHAR,
    CubError,
)
from .files import check_file, read_lines
from .mapcheck import (
    check_horizontal,
    check_last_char,
    check_map_walls,
    check_vertical,
    find_longest_line,
    is_whitespace,
    vertical_check,
)

RGB = tuple[int, int, int]

_BLANKS = " \t\r\v\f"
_WHITESPACE = " \t\r\n\v\f"
_PLAYER_CHARS = "NSEW"
_CELL_CHARS = "10NSEW"
_WALL_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_PATH = re.compile(r"[^ \t\n]*")


@dataclass
class Scene:
    """Everything a scene file describes, filled in as it is parsed."""

    lines: list[str] = field(default_factory=list)
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: RGB | None = None
    ceiling: RGB | None = None
    hex_floor: int = 0
    hex_ceiling: int = 0
    grid: list[str] | None = None
    height: int = 0
    width: int = 0
    end_of_map: int = 0
    player_dir: str | None = None
    player_x: float = 0.0
    player_y: float = 0.0


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _isprint(c: str) -> bool:
    return bool(c) and 32 <= ord(c) <= 126


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def parse_rgb(text: str) -> RGB:
    """Parse three comma separated components; raise ValueError if malformed.

    Empty pieces between commas are ignored. Range checking is left to
    :func:`validate_textures`.
    """
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise ValueError(f"expected three colour components in {text!r}")
    values = []
    for part in parts:
        value = _atoi(part)
        if value == -1 or not any(ch in string.digits for ch in part):
            raise ValueError(f"invalid colour component {part!r}")
        values.append(value)
    return (values[0], values[1], values[2])


def rgb_to_hex(rgb: Sequence[int]) -> int:
    """Pack red, green and blue into a ``0xRRGGBB`` integer."""
    r, g, b = rgb
    return ((r & 0xFF) << 16) + ((g & 0xFF) << 8) + (b & 0xFF)


def texture_path(line: str, start: int) -> str | None:
    """Return the single path found in ``line`` from ``start`` on.

    Blanks around the path are ignored; anything else after it makes the
    result ``None``.
    """
    rest = line[start:].lstrip(" \t")
    path = _PATH.match(rest).group()
    tail = rest[len(path):].lstrip(" \t")
    if tail and tail[0] != "\n":
        return None
    return path


def _fill_spaces(row: str) -> str:
    start = len(row) - len(row.lstrip(_BLANKS))
    last = ord(row[-1]) if row else 0
    cells = list(row)
    for index in range(start + 1, len(cells)):
        if cells[index] == " " and index != last:
            cells[index] = "1"
    return "".join(cells)


def build_map(scene: Scene, lines: Sequence[str], start: int) -> list[str]:
    """Cut the map out of ``lines`` from ``start``, check it and store it.

    Raises :class:`CubError` when the map is not closed or holds bad cells.
    """
    end = start
    while end < len(lines) and lines[end].lstrip(_BLANKS)[:1] == "1":
        end += 1
    scene.end_of_map = end
    scene.height = end - start
    scene.width = find_longest_line(lines, start)
    grid = [line.split("\n", 1)[0] for line in lines[start:end]]
    if not (
        check_vertical(grid, scene.height, scene.width)
        and check_horizontal(grid)
        and check_last_char(grid)
        and vertical_check(grid, scene.height)
    ):
        raise CubError(INV_MAP)
    scene.grid = [_fill_spaces(row) for row in grid]
    return scene.grid


def _first_token(line: str) -> int | None:
    for index, c in enumerate(line):
        if 33 <= ord(c) <= 126:
            return index
    return None


def _read_wall_texture(scene: Scene, line: str, pos: int) -> None:
    if _isprint(_at(line, pos + 2)):
        raise CubError(INV_TEXTURE)
    attr = _WALL_KEYS.get(line[pos : pos + 2])
    if attr is None or getattr(scene, attr) is not None:
        raise CubError(INV_TEXTURE)
    setattr(scene, attr, texture_path(line, pos + 2))


def _read_colour(scene: Scene, line: str, pos: int) -> None:
    if _isprint(_at(line, pos + 1)):
        raise CubError(INV_FLOOR_CEILING)
    kind = line[pos]
    rest = line[pos + 1 :]
    if kind == "C" and scene.ceiling is None:
        try:
            scene.ceiling = parse_rgb(rest)
        except ValueError as exc:
            raise CubError(INV_CEILING) from exc
    elif kind == "F" and scene.floor is None:
        try:
            scene.floor = parse_rgb(rest)
        except ValueError as exc:
            raise CubError(INV_FLOOR) from exc
    else:
        raise CubError(INV_FLOOR_CEILING)


def parse_scene(lines: Iterable[str]) -> Scene:
    """Read texture, colour and map entries; the map ends the parsing."""
    scene = Scene(lines=list(lines))
    for index, line in enumerate(scene.lines):
        pos = _first_token(line)
        if pos is None:
            continue
        c = line[pos]
        if c in string.digits:
            build_map(scene, scene.lines, index)
            break
        if _isprint(_at(line, pos + 1)):
            _read_wall_texture(scene, line, pos)
        else:
            _read_colour(scene, line, pos)
    return scene


def _check_elements(scene: Scene) -> None:
    scene.player_dir = None
    for row in scene.grid:
        for c in row:
            if c in _BLANKS:
                continue
            if c not in _CELL_CHARS:
                raise CubError(WRONG_CHAR)
            if c in _PLAYER_CHARS:
                if scene.player_dir is not None:
                    raise CubError(WRONG_CHAR)
                scene.player_dir = c


def _place_player(scene: Scene) -> None:
    if scene.player_dir is None:
        raise CubError(WRONG_CHAR)
    grid = scene.grid
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if c in _PLAYER_CHARS:
                scene.player_x = x + 0.5
                scene.player_y = y + 0.5
                grid[y] = row[:x] + "0" + row[x + 1 :]
                row = grid[y]
    i, j = int(scene.player_y), int(scene.player_x)

    def row_at(k: int) -> str:
        return grid[k] if 0 <= k < len(grid) else ""

    above, here, below = row_at(i - 1), row_at(i), row_at(i + 1)
    if (
        len(above) < j
        or len(below) < j
        or is_whitespace(_at(here, j - 1))
        or is_whitespace(_at(here, j + 1))
        or is_whitespace(_at(above, j))
        or is_whitespace(_at(below, j))
    ):
        raise CubError(INV_PLAYER_POS)


def validate_map(scene: Scene) -> None:
    """Check the parsed map and place the player; raise CubError on failure."""
    if scene.grid is None:
        raise CubError(MAP_MISSING)
    if scene.height < 3:
        raise CubError(MAP_TOO_SMALL)
    if not check_map_walls(scene.grid, scene.height):
        raise CubError(MAP_NO_WALLS)
    _check_elements(scene)
    _place_player(scene)
    trailing = scene.lines[scene.end_of_map :]
    if any(c not in _WHITESPACE for line in trailing for c in line):
        raise CubError(MAP_LAST_ELEM)


def validate_textures(scene: Scene) -> None:
    """Check texture files and colours, then compute the packed colours."""
    walls = (scene.north, scene.south, scene.west, scene.east)
    if any(path is None for path in walls):
        raise CubError(MISS_TEXTURE)
    if scene.floor is None or scene.ceiling is None:
        raise CubError(MISS_COLOR)
    for path in walls:
        check_file(path, False)
    for rgb in (scene.floor, scene.ceiling):
        if any(value < 0 or value > 255 for value in rgb):
            raise CubError(INV_RGB)
    scene.hex_ceiling = rgb_to_hex(scene.ceiling)
    scene.hex_floor = rgb_to_hex(scene.floor)


def load_scene(path: str) -> Scene:
    """Read and fully validate the ``.cub`` scene file at ``path``."""
    check_file(path, True)
    scene = parse_scene(read_lines(path))
    validate_map(scene)
    validate_textures(scene)
    return scene