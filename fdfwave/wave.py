"""Finite-difference solution of the 2D wave equation over a height grid.

Z_tt = c^2 (Z_xx + Z_yy) with Neumann boundaries (zero slope at the
edges), started from the map heights with zero initial velocity.
"""

from __future__ import annotations

import math

from fdfwave.fdfmap import Point, grid_size

Field = list[list[float]]


def height_color(z: float) -> int:
    """Colour for a height: bright green at 0, lime to orange above, teal to blue below."""
    red, green, blue = 0, 0xFF, 0x80
    dif = math.tanh(0.05 * z)  # equals 2 / (1 + exp(-0.1 z)) - 1
    if z > 0:
        blue = 0
        green = int(0x80 + 0x7F * (1 - dif))
        red = int(0x80 + 0x7F * dif)
    elif z < 0:
        red = 0
        green = int(0x80 * (1 + dif))
        blue = int(0x80 + 0x7F * -dif)
    return (red << 16) + (green << 8) + blue


def _pair(i: int, n: int) -> tuple[int, int] | None:
    """Neighbour indices of ``i``, reflected at the edges; None for a single cell."""
    if n == 1:
        return None
    if i == 0:
        return 1, 1
    if i == n - 1:
        return n - 2, n - 2
    return i - 1, i + 1


class WaveSimulation:
    """Leapfrog time stepping of the wave equation on a rectangular grid."""

    def __init__(self, grid: list[list[Point]], stability: float) -> None:
        self.width, self.height = grid_size(grid)
        if any(len(row) != self.width for row in grid):
            raise ValueError("all grid rows must have the same length")
        self.stability = stability
        self._now: Field = [[float(point.z) for point in row] for row in grid]
        sx, sy = self._coefficients(stability / 2)
        self._next: Field = [
            [
                sx * ax + sy * ay + (1 - 2 * sx - 2 * sy) * self._now[y][x]
                for x, (ax, ay) in enumerate(self._row_sums(self._now, y))
            ]
            for y in range(self.height)
        ]

    def _coefficients(self, scale: float) -> tuple[float, float]:
        w, h = self.width, self.height
        sx = scale * (1 + (h == 1)) * (w != 1)
        sy = scale * (1 + (w == 1)) * (h != 1)
        return sx, sy

    def _row_sums(self, field: Field, y: int) -> list[tuple[float, float]]:
        """Reflected neighbour sums along x and along y for each cell of row ``y``."""
        ys = _pair(y, self.height)
        sums = []
        for x in range(self.width):
            xs = _pair(x, self.width)
            along_x = field[y][xs[0]] + field[y][xs[1]] if xs else 0.0
            along_y = field[ys[0]][x] + field[ys[1]][x] if ys else 0.0
            sums.append((along_x, along_y))
        return sums

    def step(self, grid: list[list[Point]]) -> None:
        """Write the current heights and colours into ``grid``, then advance one step."""
        if grid_size(grid) != (self.width, self.height) or any(
            len(row) != self.width for row in grid
        ):
            raise ValueError("grid does not match the simulation size")
        for points, values in zip(grid, self._now):
            for point, z in zip(points, values):
                point.z = z
                point.color = height_color(z)
        self._now, previous = self._next, self._now
        sx, sy = self._coefficients(self.stability)
        self._next = [
            [
                2 * (1 - sx - sy) * self._now[y][x] - previous[y][x] + sx * ax + sy * ay
                for x, (ax, ay) in enumerate(self._row_sums(self._now, y))
            ]
            for y in range(self.height)
        ]

    def heights(self) -> Field:
        """Return a copy of the heights at the current time."""
        return [row.copy() for row in self._now]