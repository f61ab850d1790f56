"""Reading of .fdf height maps into a grid of coloured points."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import takewhile
from pathlib import Path

DEFAULT_BASE_COLOR = 0xFFFFFF

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class MapError(ValueError):
    """Raised when a map file cannot be read or holds no usable grid."""


@dataclass
class Point:
    """One grid point: its height and its 0xRRGGBB colour."""

    z: float
    color: int


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def parse_color(token: str, base_color: int = DEFAULT_BASE_COLOR) -> int:
    """Return the colour given after a comma in ``token``.

    Without a comma the point gets ``base_color``. A non-zero decimal
    number after the comma is taken as is; otherwise the hexadecimal
    digits after the first ``x`` are read, other characters skipped.
    """
    _, comma, spec = token.partition(",")
    if not comma:
        return base_color
    decimal = _atoi(spec)
    if decimal:
        return decimal
    marker = re.search(r"[xX]", spec)
    if marker is None:
        return 0
    value = 0
    for char in spec[marker.end():]:
        if char in _HEX_DIGITS:
            value = _to_int32(16 * value + int(char, 16))
    return value


def parse_row(line: str, base_color: int = DEFAULT_BASE_COLOR) -> list[Point]:
    """Parse one map line of space-separated ``z[,color]`` tokens."""
    tokens = (token for token in line.split(" ") if token)
    return [
        Point(_atoi(token), parse_color(token, base_color))
        for token in takewhile(lambda token: not token.startswith("\n"), tokens)
    ]


def read_grid(path: str | Path, base_color: int = DEFAULT_BASE_COLOR) -> list[list[Point]]:
    """Read an .fdf file into a list of rows of points."""
    path = Path(path)
    if path.is_dir():
        raise MapError(f'"{path}" is a directory, not a map')
    try:
        handle = path.open("rb")
    except OSError as exc:
        raise MapError(f'the file "{path}" does not exist') from exc
    with handle:
        if ".fdf" not in str(path):
            raise MapError(f'the file "{path}" type is invalid')
        grid = []
        for raw in handle:
            row = parse_row(raw.decode("latin-1"), base_color)
            if not row:
                raise MapError("grid is empty")
            grid.append(row)
    if not grid:
        raise MapError("grid is empty")
    return grid


def grid_size(grid: list[list[Point]]) -> tuple[int, int]:
    """Return (width, height) of a grid, the width taken from its first row."""
    if not grid or not grid[0]:
        raise MapError("grid is empty")
    return len(grid[0]), len(grid)