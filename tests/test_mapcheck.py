import pytest

from cubraycaster.mapcheck import (
    check_char,
    check_horizontal,
    check_last_char,
    check_line,
    check_map_walls,
    check_vertical,
    find_longest_line,
    is_whitespace,
    vertical_check,
)

VALID = [
    "111111",
    "100001",
    "10N001",
    "111111",
]


def test_check_char():
    assert check_char("1", "1 ")
    assert check_char(" ", "1 ")
    assert not check_char("0", "1 ")
    assert not check_char("", "1 ")


@pytest.mark.parametrize("c", [" ", "\t", "\r", "\n", "\v", "\f"])
def test_is_whitespace_true(c):
    assert is_whitespace(c)


@pytest.mark.parametrize("c", ["1", "a", ""])
def test_is_whitespace_false(c):
    assert not is_whitespace(c)


def test_find_longest_line():
    lines = ["NO x\n", "11\n", "1111\n", "1\n"]
    assert find_longest_line(lines, 1) == len(lines[2])
    assert find_longest_line(lines, 0) == len(lines[0])


def test_check_line_valid_rows():
    assert check_line("111111")
    assert check_line("10N001")
    assert check_line("  1111")
    assert check_line("11 11")
    assert check_line("1111  ")


def test_check_line_invalid_rows():
    assert not check_line("011")
    assert not check_line("110")
    assert not check_line("1 01")
    assert not check_line("10 1")
    assert not check_line("1X1")
    assert not check_line("")


def test_check_horizontal():
    assert check_horizontal(VALID)
    assert not check_horizontal(["1111", "1 01", "1111"])


def test_check_vertical_valid():
    assert check_vertical(VALID, len(VALID), len(VALID[0]) + 1)


def test_check_vertical_open_bottom():
    grid = ["111", "101", "101"]
    assert not check_vertical(grid, 3, 3)


def test_check_vertical_space_below_floor():
    grid = ["111", "101", "1 1", "111"]
    assert not check_vertical(grid, 4, 3)


def test_check_vertical_space_then_short_row():
    grid = ["1 1", "1 ", "1"]
    assert check_vertical(grid, 3, 3)


def test_check_vertical_space_bounded_by_walls():
    grid = ["1111", "1 01", "1111"]
    assert check_vertical(grid, 3, 4)


def test_check_last_char():
    assert check_last_char(["1111  ", "11"])
    assert not check_last_char(["1110"])
    assert not check_last_char(["   "])
    assert not check_last_char([""])


def test_vertical_check():
    assert vertical_check(["1111", "1001", "1111"], 3)
    assert not vertical_check(["1111", "1001", "11 1"], 3)
    assert not vertical_check(["11111", "100001", "11111"], 3)


def test_check_map_walls_valid():
    assert check_map_walls(VALID, len(VALID))
    assert check_map_walls(["  111", "1N1", "  111"], 3)


def test_check_map_walls_invalid():
    assert not check_map_walls(["101", "1N1", "111"], 3)
    assert not check_map_walls(["111", "1N0", "111"], 3)
    assert not check_map_walls(["111", "1N1", "101"], 3)
    assert not check_map_walls([], 0)
    assert not check_map_walls(["111"], 1)