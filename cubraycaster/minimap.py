"""The overhead minimap: a window of the grid around the player, as pixels."""

from __future__ import annotations

from collections.abc import Sequence

MINIMAP_DISTANCE = 4
MINIMAP_SIZE = 2 * MINIMAP_DISTANCE + 1
MINIMAP_SQUARE = 128
MINIMAP_TILE = MINIMAP_SQUARE // (2 * MINIMAP_DISTANCE)
MINIMAP_IMAGE = MINIMAP_SQUARE + MINIMAP_TILE

MINIMAP_BLACK = 0x090909
MINIMAP_PLAYER = 0xF30408
MINIMAP_WALL = 0x1BF50C
MINIMAP_FLOOR = 0x0F7908

_BORDER = 5
_TILE_COLOURS = {
    "P": MINIMAP_PLAYER,
    "1": MINIMAP_WALL,
    "0": MINIMAP_FLOOR,
    " ": MINIMAP_BLACK,
}


def minimap_origin(map_size: int, pos: int, distance: int, size: int) -> int:
    """Return the first map index shown along one axis."""
    if pos > distance and map_size - pos > distance + 1:
        return pos - distance
    if pos > distance and map_size - pos <= distance + 1:
        return map_size - size
    return 0


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if not 0 <= y < len(grid):
        return ""
    row = grid[y]
    return row[x] if 0 <= x < len(row) else ""


def build_minimap(
    grid: Sequence[str], width: int, height: int, player_x: float, player_y: float
) -> list[str]:
    """Return the visible tiles as rows of ``P``, ``1`` and ``0`` characters.

    A row stops at the first cell that is off the map or neither wall nor
    floor.
    """
    px, py = int(player_x), int(player_y)
    ox = max(0, minimap_origin(width, px, MINIMAP_DISTANCE, MINIMAP_SIZE))
    oy = max(0, minimap_origin(height, py, MINIMAP_DISTANCE, MINIMAP_SIZE))
    rows = []
    for y in range(min(MINIMAP_SIZE, height)):
        my = y + oy
        chars = []
        for x in range(min(MINIMAP_SIZE, width)):
            mx = x + ox
            if my >= height or mx >= width:
                break
            if (mx, my) == (px, py):
                chars.append("P")
                continue
            cell = _cell(grid, mx, my)
            if cell not in ("1", "0"):
                break
            chars.append(cell)
        rows.append("".join(chars))
    return rows


def render_minimap(tiles: Sequence[str]) -> list[list[int]]:
    """Draw the tiles and a black border into a square image of colours."""
    image = [[0] * MINIMAP_IMAGE for _ in range(MINIMAP_IMAGE)]
    for y, row in enumerate(tiles[:MINIMAP_SIZE]):
        for x, tile in enumerate(row[:MINIMAP_SIZE]):
            colour = _TILE_COLOURS.get(tile)
            if colour is None:
                continue
            left = x * MINIMAP_TILE
            for line in image[y * MINIMAP_TILE : (y + 1) * MINIMAP_TILE]:
                line[left : left + MINIMAP_TILE] = [colour] * MINIMAP_TILE
    limit = MINIMAP_IMAGE - _BORDER
    for y, line in enumerate(image):
        for x in range(MINIMAP_IMAGE):
            if x < _BORDER or x > limit or y < _BORDER or y > limit:
                line[x] = MINIMAP_BLACK
    return image