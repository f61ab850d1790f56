import pytest

from fdfwave.fdfmap import (
    MapError,
    Point,
    grid_size,
    parse_color,
    parse_row,
    read_grid,
)


def test_parse_color_without_comma_uses_base():
    assert parse_color("10", 0x123456) == 0x123456


def test_parse_color_hex_lower_and_upper():
    assert parse_color("10,0xff", 0) == 0xFF
    assert parse_color("10,0XFF0000", 0) == 0xFF0000


def test_parse_color_decimal_after_comma():
    assert parse_color("3,255", 0) == 255


def test_parse_color_ignores_trailing_newline():
    assert parse_color("1,0xFFFFFF\n", 0) == 0xFFFFFF


def test_parse_row_heights_and_colors():
    row = parse_row("0 1 -2,0xff\n", 7)
    assert [p.z for p in row] == [0, 1, -2]
    assert [p.color for p in row] == [7, 7, 0xFF]


def test_parse_row_multiple_spaces_and_newline_token():
    row = parse_row("  4   5 \n", 1)
    assert [p.z for p in row] == [4, 5]


def test_parse_row_blank_line_is_empty():
    assert parse_row("\n", 1) == []


def test_read_grid(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("0 0 0\n0 10,0xFF 0\n0 0 0\n")
    grid = read_grid(path, 3)
    assert grid_size(grid) == (3, 3)
    assert grid[1][1] == Point(10, 0xFF)
    assert grid[0][0] == Point(0, 3)


def test_read_grid_last_line_without_newline(tmp_path):
    path = tmp_path / "m.fdf"
    path.write_text("1 2\n3 4")
    grid = read_grid(path, 0)
    assert [[p.z for p in row] for row in grid] == [[1, 2], [3, 4]]


def test_read_grid_extension_anywhere_in_name(tmp_path):
    path = tmp_path / "map.fdf.txt"
    path.write_text("1\n")
    assert [[p.z for p in row] for row in read_grid(path, 0)] == [[1]]


def test_read_grid_missing_file(tmp_path):
    with pytest.raises(MapError, match="does not exist"):
        read_grid(tmp_path / "absent.fdf")


def test_read_grid_directory(tmp_path):
    directory = tmp_path / "dir.fdf"
    directory.mkdir()
    with pytest.raises(MapError, match="directory"):
        read_grid(directory)


def test_read_grid_wrong_extension(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("1 2\n")
    with pytest.raises(MapError, match="invalid"):
        read_grid(path)


def test_read_grid_empty_row(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("1 2\n\n3 4\n")
    with pytest.raises(MapError, match="empty"):
        read_grid(path)


def test_read_grid_empty_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("")
    with pytest.raises(MapError):
        read_grid(path)


def test_grid_size_empty():
    with pytest.raises(MapError):
        grid_size([])