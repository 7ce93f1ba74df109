"""Checks that a map grid is closed by walls and uses only allowed characters.

A grid is a list of row strings. Reading past the end of a row yields the
empty string, which stands for an absent cell. Every check returns ``True``
when the grid passes.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_WHITESPACE = " \t\r\n\v\f"
_LEADING_BLANKS = " \t\r\v\f"
_MAP_CHARS = "10NSEW "
_EDGE_CHARS = "1 "
_SPACE_RUN = re.compile(r" +")


def _at(row: str, x: int) -> str:
    return row[x] if 0 <= x < len(row) else ""


def check_char(c: str, valid: str) -> bool:
    """Return whether the single character ``c`` is one of ``valid``."""
    return bool(c) and c in valid


def is_whitespace(c: str) -> bool:
    """Return whether ``c`` is a whitespace character."""
    return bool(c) and c in _WHITESPACE


def find_longest_line(lines: Sequence[str], start: int) -> int:
    """Return the length of the longest line from index ``start`` on."""
    return max((len(line) for line in lines[start:]), default=0)


def check_line(line: str) -> bool:
    """Check one row: allowed characters, wall edges, spaces bounded by walls."""
    if not line:
        return False
    if not all(check_char(c, _MAP_CHARS) for c in line):
        return False
    if not check_char(line[0], _EDGE_CHARS) or not check_char(line[-1], _EDGE_CHARS):
        return False
    for run in _SPACE_RUN.finditer(line):
        if run.start() > 0 and line[run.start() - 1] != "1":
            return False
        if run.end() < len(line) and line[run.end()] != "1":
            return False
    return True


def check_horizontal(grid: Sequence[str]) -> bool:
    """Check every row of the grid with :func:`check_line`."""
    return all(check_line(row) for row in grid)


def _check_column(grid: Sequence[str], height: int, x: int) -> bool:
    column = [_at(grid[y], x) for y in range(height)]
    y = 0
    while y < height and check_char(column[y], _MAP_CHARS):
        if column[y] == " ":
            if y > 0 and column[y - 1] != "1":
                return False
            while y < height and column[y] == " ":
                y += 1
            if y < height and column[y] == "":
                return True
            if y < height and column[y] != "1":
                return False
        if y < height:
            y += 1
    if y > 0 and not check_char(column[y - 1], _EDGE_CHARS):
        return False
    return True


def check_vertical(grid: Sequence[str], height: int, width: int) -> bool:
    """Check each of the ``width`` columns over the first ``height`` rows."""
    return all(_check_column(grid, height, x) for x in range(width))


def check_last_char(grid: Sequence[str]) -> bool:
    """Check that each row, ignoring trailing spaces, ends in a wall."""
    for row in grid:
        trimmed = row.rstrip(" ")
        if not trimmed or trimmed[-1] != "1":
            return False
    return True


def vertical_check(grid: Sequence[str], height: int) -> bool:
    """Check that no inner floor cell has a gap directly above or below."""
    for y in range(1, height - 1):
        above, row, below = grid[y - 1], grid[y], grid[y + 1]
        for x, cell in enumerate(row[1:], start=1):
            if cell != "0":
                continue
            if _at(above, x) in ("", " ") or _at(below, x) in ("", " "):
                return False
    return True


def _check_wall_row(grid: Sequence[str], index: int) -> bool:
    if index >= len(grid) or not grid[index]:
        return False
    body = grid[index].lstrip(_LEADING_BLANKS)
    return all(check_char(c, _EDGE_CHARS) for c in body)


def check_map_walls(grid: Sequence[str], height: int) -> bool:
    """Check the first and last rows are walls and inner rows end in a wall."""
    if not _check_wall_row(grid, 0):
        return False
    for row in grid[1 : height - 1]:
        if not row or row[-1] != "1":
            return False
    return _check_wall_row(grid, max(height - 1, 1))