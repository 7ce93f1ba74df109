"""Error type and message texts used across the scene loader and the game."""

from __future__ import annotations

INV_USAGE = "cub3d <pathtomap.cub>"
FILE_DIR = "file is a directory"
INV_EXTENSION = "Not a .cub file"
INV_XPM = "Not an .xpm file"
ERR_MALLOC = "Error in allocating memory"

INV_FLOOR_CEILING = "Invalid floor or ceiling RGB colors"
INV_FLOOR = "Invalid floor RGB color"
INV_CEILING = "Invalid ceiling RGB color"

INV_MAP = "Invalid Map"
MAP_MISSING = "Missing map"
MAP_NO_WALLS = "Map is not surrounded by walls"
MAP_TOO_SMALL = "Map is not at least 3 lines high"
MAP_LAST_ELEM = "Map is not the last element in file"
WRONG_CHAR = "Wrong char in map"
INV_PLAYER_POS = "Invalid player position"

MISS_TEXTURE = "Missing Textures"
INV_TEXTURE = "Invalid Textures"
INV_RGB = "Invalid RGB value"
MISS_COLOR = "Missing Color"

ERROR_MLX = "Error mlx init"
ERROR_WIN = "Error mlx window"
MLX_IMG = "Error mlx img"


def format_message(context: str | None, message: str | None) -> str:
    """Build the ``ERROR[: context][: message]`` text shown to the user."""
    parts = ["ERROR"]
    if context:
        parts.append(context)
    if message:
        parts.append(message)
    return ": ".join(parts)


class CubError(Exception):
    """Raised when a scene file, its textures or the game setup is invalid."""

    def __init__(self, message: str | None = None, context: str | None = None):
        self.message = message
        self.context = context
        super().__init__(format_message(context, message))

    def __str__(self) -> str:
        return format_message(self.context, self.message)