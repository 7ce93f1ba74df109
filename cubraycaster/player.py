"""The player: spawn orientation, rotation and movement through the grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

MOVE_SPEED = 0.04
ROT_SPEED = 0.03
PLANE_LENGTH = 0.66

# direction -> (dir_x, dir_y, plane_x, plane_y)
_SPAWN_VECTORS = {
    "N": (0.0, -1.0, PLANE_LENGTH, 0.0),
    "S": (0.0, 1.0, -PLANE_LENGTH, 0.0),
    "W": (-1.0, 0.0, 0.0, -PLANE_LENGTH),
    "E": (1.0, 0.0, 0.0, PLANE_LENGTH),
}


def _is_floor(grid: Sequence[str], x: float, y: float) -> bool:
    row, col = int(y), int(x)
    if not 0 <= row < len(grid):
        return False
    line = grid[row]
    return 0 <= col < len(line) and line[col] == "0"


@dataclass
class Player:
    """Position, view direction, camera plane and the current input state."""

    x: float
    y: float
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    move_x: int = 0
    move_y: int = 0
    rot: int = 0

    def rotate(self, direction: float) -> bool:
        """Turn the view by ``direction`` rotation steps; always reports a change."""
        angle = ROT_SPEED * direction
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )
        return True

    def try_move(self, grid: Sequence[str], new_x: float, new_y: float) -> bool:
        """Move to the new position axis by axis, only onto floor cells.

        Returns whether either coordinate changed.
        """
        moved = False
        if _is_floor(grid, new_x, self.y):
            self.x = new_x
            moved = True
        if _is_floor(grid, self.x, new_y):
            self.y = new_y
            moved = True
        return moved

    def step(self, grid: Sequence[str]) -> int:
        """Apply the current movement and rotation input once.

        Returns how many of the moves and rotations took effect.
        """
        changes = 0
        dx, dy = self.dir_x * MOVE_SPEED, self.dir_y * MOVE_SPEED
        if self.move_y == 1:
            changes += self.try_move(grid, self.x + dx, self.y + dy)
        if self.move_y == -1:
            changes += self.try_move(grid, self.x - dx, self.y - dy)
        if self.move_x == -1:
            changes += self.try_move(grid, self.x + dy, self.y - dx)
        if self.move_x == 1:
            changes += self.try_move(grid, self.x - dy, self.y + dx)
        if self.rot != 0:
            changes += self.rotate(self.rot)
        return changes


def spawn_player(x: float, y: float, direction: str) -> Player:
    """Create a player at ``(x, y)`` facing ``N``, ``S``, ``E`` or ``W``.

    An unknown direction leaves the view and camera vectors at zero.
    """
    dir_x, dir_y, plane_x, plane_y = _SPAWN_VECTORS.get(
        direction, (0.0, 0.0, 0.0, 0.0)
    )
    return Player(
        x=x, y=y, dir_x=dir_x, dir_y=dir_y, plane_x=plane_x, plane_y=plane_y
    )