import pytest

from fdfwave.textscan import find, find_unquoted, split_words


def test_split_on_spaces_and_tabs():
    assert split_words("  a\tbb  c ") == ["a", "bb", "c"]


def test_split_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_empty_text():
    assert split_words("") == []
    assert split_words(" \t ") == []


def test_split_stops_at_nul():
    assert split_words("one two\0three") == ["one", "two"]


def test_find_matches_str_index():
    text = "hello world"
    assert find(text, "world", len(text)) == text.index("world")


def test_find_missing_needle():
    assert find("abc", "z", 3) == -1


def test_find_needle_longer_than_length():
    assert find("abcdef", "abcd", 3) == -1


def test_find_stops_at_nul():
    assert find("ab\0cd", "cd", 10) == -1


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "", 3)
    with pytest.raises(ValueError):
        find_unquoted("abc", "", 3)


def test_find_unquoted_skips_quoted_match():
    text = '"ab" ab'
    assert find(text, "ab", len(text)) == text.index("ab")
    assert find_unquoted(text, "ab", len(text)) == text.rindex("ab")


def test_find_unquoted_only_quoted_matches():
    text = 'x "/* y */" z'
    assert find_unquoted(text, "/*", len(text)) == -1


def test_find_unquoted_plain_text_agrees_with_find():
    text = "abc /* comment */"
    assert find_unquoted(text, "/*", len(text)) == find(text, "/*", len(text))