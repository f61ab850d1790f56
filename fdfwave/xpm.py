"""Reader for XPM images, from files or from in-memory string arrays."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from fdfwave.colors import lookup_color
from fdfwave.image import Image
from fdfwave.textscan import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data is malformed or incomplete."""


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    Comments are replaced by spaces, so the text keeps its length.
    """
    size = len(text)
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while (begin := find_unquoted(text, opener, size)) != -1:
            end = find(text[begin + 2:], closer, size - begin - 2)
            span = min(end + extra, size - begin)
            text = text[:begin] + " " * span + text[begin + span:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        stop = text.find('"', start + 1)
        if stop == -1:
            return
        yield text[start + 1:stop]
        pos = stop + 1


def color_key(chars: str) -> int:
    """Pack the characters naming a colour into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[int, int]:
    # One- and two-character keys are looked up directly, so the last
    # definition wins; longer keys keep the first definition.
    last_wins = cpp <= 2
    table: dict[int, int] = {}
    for _ in range(count):
        line = _next_line(lines, "colour definitions")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = lookup_color(words[index + 1], end)
        key = color_key(line[:cpp])
        if last_wins:
            table[key] = rgb
        else:
            table.setdefault(key, rgb)
    return table


def parse_xpm(lines: Iterable[str], big_endian: bool = False) -> Image:
    """Build a 32-bit image from the XPM strings in ``lines``."""
    source = iter(lines)
    fields = split_words(_next_line(source, "header"))
    if len(fields) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(field) for field in fields[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(fields[:4])}")

    table = _read_colors(source, ncolors, cpp)
    image = Image(width, height, 32, big_endian)
    for y in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width * cpp} characters")
        for x in range(width):
            color = table.get(color_key(line[x * cpp:(x + 1) * cpp]), 0)
            image.put_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def xpm_file_to_image(path: str | Path, big_endian: bool = False) -> Image:
    """Read an XPM file and return its image."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)), big_endian)


def xpm_to_image(data: Iterable[str], big_endian: bool = False) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(data, big_endian)