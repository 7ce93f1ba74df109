"""Checks on paths given to the program and reading of scene files."""

from __future__ import annotations

import os

from .errors import FILE_DIR, INV_EXTENSION, INV_XPM, CubError


def check_file(path: str, is_scene: bool) -> str:
    """Check that ``path`` is a readable file with the right extension.

    With ``is_scene`` true the file must end in ``.cub``, otherwise in
    ``.xpm``. Returns the path; raises :class:`CubError` otherwise.
    """
    if os.path.isdir(path):
        raise CubError(FILE_DIR, context=path)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError(exc.strerror or str(exc), context=path) from exc
    if is_scene and path[-4:] != ".cub":
        raise CubError(INV_EXTENSION)
    if not is_scene and path[-4:] != ".xpm":
        raise CubError(INV_XPM)
    return path


def read_lines(path: str) -> list[str]:
    """Return the lines of ``path``, each keeping its trailing newline."""
    try:
        with open(
            path, encoding="utf-8", errors="surrogateescape", newline="\n"
        ) as handle:
            return list(handle)
    except OSError as exc:
        raise CubError(exc.strerror or str(exc), context=path) from exc