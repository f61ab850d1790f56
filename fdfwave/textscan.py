"""Small text scanning helpers used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(_until_nul(text)) if word]


def find(text: str, needle: str, length: int) -> int:
    """Return the index of ``needle`` in ``text``, or -1.

    A needle longer than ``length`` is never found; the scan stops at the
    first NUL character.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > length:
        return -1
    return _until_nul(text).find(needle)


def find_unquoted(text: str, needle: str, length: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > length:
        return -1
    text = _until_nul(text)
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1