import math

import pytest

from cubraycaster.player import MOVE_SPEED, Player, spawn_player

GRID = [
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
]


def test_spawn_north_vectors():
    player = spawn_player(2.5, 2.5, "N")
    assert (player.dir_x, player.dir_y) == (0.0, -1.0)
    assert (player.plane_x, player.plane_y) == (0.66, 0.0)
    assert (player.x, player.y) == (2.5, 2.5)


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("S", (0.0, 1.0, -0.66, 0.0)),
        ("W", (-1.0, 0.0, 0.0, -0.66)),
        ("E", (1.0, 0.0, 0.0, 0.66)),
    ],
)
def test_spawn_other_directions(direction, expected):
    player = spawn_player(1.5, 1.5, direction)
    assert (player.dir_x, player.dir_y, player.plane_x, player.plane_y) == expected


def test_spawn_unknown_direction_leaves_vectors_zero():
    player = spawn_player(1.5, 1.5, "X")
    assert (player.dir_x, player.dir_y, player.plane_x, player.plane_y) == (
        0.0,
        0.0,
        0.0,
        0.0,
    )


def test_rotate_preserves_lengths():
    player = spawn_player(2.5, 2.5, "E")
    assert player.rotate(1) is True
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)
    assert player.dir_y > 0


def test_rotate_back_and_forth_restores():
    player = spawn_player(2.5, 2.5, "N")
    player.rotate(1)
    player.rotate(-1)
    assert player.dir_x == pytest.approx(0.0, abs=1e-12)
    assert player.dir_y == pytest.approx(-1.0)
    assert player.plane_x == pytest.approx(0.66)


def test_try_move_onto_floor():
    player = Player(x=2.5, y=2.5)
    assert player.try_move(GRID, 3.2, 1.7) is True
    assert (player.x, player.y) == (3.2, 1.7)


def test_try_move_into_wall_blocked():
    player = Player(x=1.5, y=1.5)
    assert player.try_move(GRID, 0.5, 0.5) is False
    assert (player.x, player.y) == (1.5, 1.5)


def test_try_move_slides_along_wall():
    player = Player(x=1.5, y=1.5)
    assert player.try_move(GRID, 0.9, 2.2) is True
    assert (player.x, player.y) == (1.5, 2.2)


def test_step_forward():
    player = spawn_player(2.5, 2.5, "N")
    player.move_y = 1
    assert player.step(GRID) == 1
    assert player.y == pytest.approx(2.5 - MOVE_SPEED)
    assert player.x == 2.5


def test_step_backward_then_forward_returns():
    player = spawn_player(2.5, 2.5, "E")
    player.move_y = -1
    player.step(GRID)
    player.move_y = 1
    player.step(GRID)
    assert player.x == pytest.approx(2.5)
    assert player.y == pytest.approx(2.5)


def test_strafe_is_perpendicular_to_view():
    player = spawn_player(2.5, 2.5, "N")
    player.move_x = 1
    player.step(GRID)
    assert player.y == pytest.approx(2.5)
    assert player.x == pytest.approx(2.5 + MOVE_SPEED)


def test_step_counts_rotation():
    player = spawn_player(2.5, 2.5, "N")
    player.rot = -1
    assert player.step(GRID) == 1
    assert player.dir_x < 0


def test_step_without_input_changes_nothing():
    player = spawn_player(2.5, 2.5, "S")
    assert player.step(GRID) == 0
    assert (player.x, player.y) == (2.5, 2.5)