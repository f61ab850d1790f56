import pytest

from fdfwave.xpm import (
    XpmError,
    color_key,
    parse_xpm,
    quoted_lines,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = [
    "2 2 2 1",
    "a c #112233",
    "b c None",
    "ab",
    "ba",
]

XPM_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1",
"x c #0000FF",
". c red",
"x."
}; // end
"""


def test_sample_pixels():
    image = xpm_to_image(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0x112233
    assert image.get_pixel(1, 1) == 0x112233


def test_none_becomes_transparent():
    image = xpm_to_image(SAMPLE)
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000


def test_big_endian_layout():
    image = xpm_to_image(["1 1 1 1", "a c #112233", "a"], big_endian=True)
    assert image.row(0)[:4] == bytes([0x00, 0x11, 0x22, 0x33])


def test_file_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(XPM_FILE, encoding="latin-1")
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0x0000FF
    assert image.get_pixel(1, 0) == 0xFF0000


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_strip_comments_keeps_length_and_quotes():
    text = '"a" /* gone */ "/* kept */" // tail\n"b"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "gone" not in stripped
    assert "tail" not in stripped
    assert list(quoted_lines(stripped)) == ["a", "/* kept */", "b"]


def test_quoted_lines_drops_unterminated():
    assert list(quoted_lines('x "one" y "two" "open')) == ["one", "two"]


def test_color_key_distinguishes_order():
    assert color_key("ab") != color_key("ba")
    assert color_key("") == 0


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x000002


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x000001


def test_unknown_key_is_black():
    image = parse_xpm(["1 1 1 1", "a c #123456", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a m #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["2 1 1 1", "a c #000000", "a"],
    ],
)
def test_malformed_data(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)