import pytest

from cubraycaster.minimap import (
    MINIMAP_BLACK,
    MINIMAP_DISTANCE,
    MINIMAP_FLOOR,
    MINIMAP_IMAGE,
    MINIMAP_PLAYER,
    MINIMAP_SIZE,
    MINIMAP_TILE,
    MINIMAP_WALL,
    build_minimap,
    minimap_origin,
    render_minimap,
)

GRID = [
    "111111",
    "100001",
    "10N001",
    "100001",
    "111111",
]


def test_origin_near_start_is_zero():
    assert minimap_origin(30, MINIMAP_DISTANCE, MINIMAP_DISTANCE, MINIMAP_SIZE) == 0


@pytest.mark.parametrize("pos", range(5, 29))
def test_origin_keeps_player_in_window(pos):
    origin = minimap_origin(30, pos, MINIMAP_DISTANCE, MINIMAP_SIZE)
    assert origin <= pos < origin + MINIMAP_SIZE
    assert origin + MINIMAP_SIZE <= 30


def test_origin_centres_in_middle():
    assert minimap_origin(30, 15, MINIMAP_DISTANCE, MINIMAP_SIZE) == 15 - MINIMAP_DISTANCE


def test_build_minimap_small_grid():
    tiles = build_minimap(GRID, 6, 5, 2.5, 2.5)
    assert tiles == ["111111", "100001", "10P001", "100001", "111111"]


def test_build_minimap_stops_at_non_cells():
    grid = ["1111", "1 01", "1N01", "1111"]
    tiles = build_minimap(grid, 4, 4, 1.5, 2.5)
    assert tiles[1] == "1"
    assert sum(row.count("P") for row in tiles) == 1


def test_build_minimap_large_grid_window():
    grid = ["1" * 20] + ["1" + "0" * 18 + "1" for _ in range(18)] + ["1" * 20]
    tiles = build_minimap(grid, 20, 20, 10.5, 10.5)
    assert len(tiles) == MINIMAP_SIZE
    assert all(len(row) == MINIMAP_SIZE for row in tiles)
    assert tiles[MINIMAP_DISTANCE][MINIMAP_DISTANCE] == "P"


def test_render_minimap_colours_and_border():
    image = render_minimap(["10", "P1"])
    assert len(image) == MINIMAP_IMAGE
    assert all(len(row) == MINIMAP_IMAGE for row in image)
    centre = MINIMAP_TILE + MINIMAP_TILE // 2
    assert image[centre][centre] == MINIMAP_WALL
    assert image[centre][MINIMAP_TILE // 2 + MINIMAP_TILE] == MINIMAP_WALL
    assert image[MINIMAP_TILE // 2 + MINIMAP_TILE][centre - MINIMAP_TILE] == MINIMAP_PLAYER
    assert image[MINIMAP_TILE // 2][centre] == MINIMAP_FLOOR
    assert image[0][0] == MINIMAP_BLACK
    assert image[MINIMAP_IMAGE - 1][MINIMAP_IMAGE // 2] == MINIMAP_BLACK
    assert image[MINIMAP_IMAGE // 2][MINIMAP_IMAGE // 2] == 0