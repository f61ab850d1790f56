import pytest

from fdfwave.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
        ("none", -1),
    ],
)
def test_single_word_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow") == 0xFFFAFA
    assert lookup_color("NoNe") == -1


def test_two_words_are_joined_with_a_space():
    assert lookup_color("ghost", "white") == 0xF8F8FF
    assert lookup_color("ghost", "white") == lookup_color("ghostwhite")


def test_duplicate_names_take_first_entry():
    assert lookup_color("dark", "slate") == 0x2F4F4F
    assert lookup_color("light", "goldenrod") == 0xFAFAD2


def test_unknown_name_gives_zero():
    assert lookup_color("nosuchcolour") == 0
    assert lookup_color("snow", "storm") == 0


def test_empty_end_is_ignored():
    assert lookup_color("snow", "") == lookup_color("snow")
    assert lookup_color("snow", None) == lookup_color("snow")


def test_hex_spec():
    assert lookup_color("#ff0000") == 0xFF0000
    assert lookup_color("#FFFAFA") == lookup_color("snow")


def test_hex_spec_ignores_end():
    assert lookup_color("#00ff00", "ignored") == 0x00FF00


def test_hex_spec_with_prefix_and_trailing_garbage():
    assert lookup_color("#0xff8000") == 0xFF8000
    assert lookup_color("#12g") == 0x12


def test_hex_spec_without_digits_gives_zero():
    assert lookup_color("#") == 0
    assert lookup_color("#zz") == 0


def test_overlong_joined_name_does_not_match():
    long_name = "snow" + " " * 70
    assert lookup_color(long_name, "x") == 0