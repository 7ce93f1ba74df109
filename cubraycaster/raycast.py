"""Ray casting through the grid and composition of one frame of pixels."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from .player import Player

_SHADE_MASK = 8355711


@dataclass
class Ray:
    """State of one screen column's ray, from setup to the wall it hits."""

    camera_x: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    sidedist_x: float = 0.0
    sidedist_y: float = 0.0
    deltadist_x: float = 0.0
    deltadist_y: float = 0.0
    wall_dist: float = 0.0
    wall_x: float = 0.0
    side: int = 0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0


def _delta(direction: float) -> float:
    return math.inf if direction == 0 else abs(1 / direction)


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    if not 0 <= y < len(grid):
        return ""
    row = grid[y]
    return row[x] if 0 <= x < len(row) else ""


def _init_steps(ray: Ray, player: Player) -> None:
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.sidedist_x = (player.x - ray.map_x) * ray.deltadist_x
    else:
        ray.step_x = 1
        ray.sidedist_x = (ray.map_x + 1.0 - player.x) * ray.deltadist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.sidedist_y = (player.y - ray.map_y) * ray.deltadist_y
    else:
        ray.step_y = 1
        ray.sidedist_y = (ray.map_y + 1.0 - player.y) * ray.deltadist_y


def _walk(ray: Ray, grid: Sequence[str], width: int, height: int) -> None:
    while True:
        if ray.sidedist_x < ray.sidedist_y:
            ray.sidedist_x += ray.deltadist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.sidedist_y += ray.deltadist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if (
            ray.map_y < 0.25
            or ray.map_x < 0.25
            or ray.map_y > height - 0.25
            or ray.map_x > width - 1.25
        ):
            return
        if _cell(grid, ray.map_x, ray.map_y) > "0":
            return


def _measure(ray: Ray, player: Player, screen_height: int) -> None:
    if ray.side == 0:
        ray.wall_dist = ray.sidedist_x - ray.deltadist_x
    else:
        ray.wall_dist = ray.sidedist_y - ray.deltadist_y
    if ray.wall_dist > 0:
        ray.line_height = int(screen_height / ray.wall_dist)
    else:
        ray.line_height = screen_height
    half_screen = screen_height // 2
    ray.draw_start = max(-(ray.line_height // 2) + half_screen, 0)
    ray.draw_end = min(ray.line_height // 2 + half_screen, screen_height - 1)
    if ray.side == 0:
        wall_x = player.y + ray.wall_dist * ray.dir_y
    else:
        wall_x = player.x + ray.wall_dist * ray.dir_x
    ray.wall_x = wall_x - math.floor(wall_x) if math.isfinite(wall_x) else 0.0


def cast_ray(
    player: Player,
    grid: Sequence[str],
    width: int,
    height: int,
    column: int,
    screen_width: int,
    screen_height: int,
) -> Ray:
    """Cast the ray for screen ``column`` and measure the wall slice it sees."""
    camera_x = 2 * column / screen_width - 1
    ray = Ray(
        camera_x=camera_x,
        dir_x=player.dir_x + player.plane_x * camera_x,
        dir_y=player.dir_y + player.plane_y * camera_x,
        map_x=int(player.x),
        map_y=int(player.y),
    )
    ray.deltadist_x = _delta(ray.dir_x)
    ray.deltadist_y = _delta(ray.dir_y)
    _init_steps(ray, player)
    _walk(ray, grid, width, height)
    _measure(ray, player, screen_height)
    return ray


def texture_index(ray: Ray) -> int:
    """Pick the wall texture: 0 north, 1 south, 2 east, 3 west."""
    if ray.side == 0:
        return 3 if ray.dir_x < 0 else 2
    return 1 if ray.dir_y > 0 else 0


def _pixels(texture):
    return getattr(texture, "pixels", texture)


def draw_column(
    frame: Sequence[MutableSequence[int]],
    ray: Ray,
    textures: Sequence,
    column: int,
    screen_height: int,
    tex_size: int,
) -> None:
    """Paint the textured wall slice of ``ray`` into ``frame`` at ``column``.

    Each texture is a flat, row-major sequence of ``tex_size`` squared colours.
    North and east walls are drawn darker; colours of zero are not drawn.
    """
    index = texture_index(ray)
    pixels = _pixels(textures[index])
    tex_x = int(ray.wall_x * tex_size)
    if (ray.side == 0 and ray.dir_x < 0) or (ray.side == 1 and ray.dir_y > 0):
        tex_x = tex_size - tex_x - 1
    if ray.line_height <= 0:
        return
    step = tex_size / ray.line_height
    pos = (ray.draw_start - screen_height // 2 + ray.line_height // 2) * step
    for y in range(ray.draw_start, ray.draw_end):
        tex_y = int(pos) & (tex_size - 1)
        pos += step
        color = pixels[tex_size * tex_y + tex_x]
        if index in (0, 2):
            color = (color >> 1) & _SHADE_MASK
        if color > 0:
            frame[y][column] = color


def render_frame(
    player: Player,
    grid: Sequence[str],
    width: int,
    height: int,
    textures: Sequence,
    ceiling: int,
    floor: int,
    screen_width: int,
    screen_height: int,
) -> list[list[int]]:
    """Render one frame as rows of ``0xRRGGBB`` colours.

    Walls come from the textures, the upper half is ceiling and the lower
    half floor; the bottom row is left at zero.
    """
    tex_size = math.isqrt(len(_pixels(textures[0])))
    walls = [[0] * screen_width for _ in range(screen_height)]
    for column in range(screen_width):
        ray = cast_ray(player, grid, width, height, column, screen_width, screen_height)
        draw_column(walls, ray, textures, column, screen_height, tex_size)
    half = screen_height // 2
    frame = []
    for y, row in enumerate(walls):
        if y < half:
            background = ceiling
        elif y < screen_height - 1:
            background = floor
        else:
            background = 0
        frame.append([color if color > 0 else background for color in row])
    return frame