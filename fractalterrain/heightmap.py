"""Height map generation with the diamond-square algorithm."""

from __future__ import annotations

import enum
import random
from typing import Protocol

Grid = list[list[float]]


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1) from ``random()``."""

    def random(self) -> float: ...


class SmoothLevel(enum.Enum):
    """How strongly the interior of a height map is smoothed."""

    OFF = 0
    MEDIUM = 1
    HARD = 2


def _is_valid_size(size: int) -> bool:
    """True when ``size`` has the form 2**n + 1 with n >= 0."""
    return size >= 2 and (size - 1) & (size - 2) == 0


def _hard_average(grid: Grid, x: int, y: int) -> float:
    # The diagonal neighbours (x-1, y-1) and (x+1, y+1) are counted twice
    # and the other diagonal is left out.
    return (
        grid[x - 1][y]
        + grid[x][y - 1]
        + grid[x + 1][y]
        + grid[x][y + 1]
        + grid[x - 1][y - 1]
        + grid[x - 1][y - 1]
        + grid[x + 1][y + 1]
        + grid[x + 1][y + 1]
    ) / 8.0


def _medium_average(grid: Grid, x: int, y: int) -> float:
    return (grid[x - 1][y] + grid[x][y - 1] + grid[x + 1][y] + grid[x][y + 1]) / 4.0


def smooth(heightmap: Grid, level: SmoothLevel) -> Grid:
    """Return a smoothed copy of a square height map.

    Interior points are replaced in row order by the average of their
    neighbours, so later points see the already smoothed values. The
    border is left as it is.
    """
    result = [list(row) for row in heightmap]
    if level is SmoothLevel.OFF:
        return result
    average = _medium_average if level is SmoothLevel.MEDIUM else _hard_average
    n = len(result)
    for i in range(1, n - 1):
        for j in range(1, n - 1):
            result[i][j] = average(result, i, j)
    return result


class DiamondSquare:
    """Generator of square height maps of side 2**n + 1."""

    def __init__(
        self,
        size: int,
        spread: float,
        divisor: float,
        smooth_level: SmoothLevel = SmoothLevel.HARD,
        rng: RandomSource | None = None,
    ) -> None:
        if not _is_valid_size(size):
            raise ValueError(f"size must be 2**n + 1, got {size}")
        if divisor == 0:
            raise ValueError("divisor must not be zero")
        self.size = size
        self.spread = spread
        self.divisor = divisor
        self.smooth_level = smooth_level
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def _jitter(self, spread: float) -> float:
        return self.rng.random() * spread - spread / 2.0

    def _diamond(self, grid: Grid, x: int, y: int, half: int, spread: float) -> float:
        n = len(grid)
        points = []
        if x - half > 0:
            points.append(grid[x - half][y])
        if y - half > 0:
            points.append(grid[x][y - half])
        if x + half < n:
            points.append(grid[x + half][y])
        if y + half < n:
            points.append(grid[x][y + half])
        return sum(points) / len(points) + self._jitter(spread)

    def heightmap(self, seed: float = 0.0) -> Grid:
        """Generate a height map; the corners start at random fractions of ``seed``."""
        n = self.size
        last = n - 1
        draw = self.rng.random
        grid: Grid = [[0.0] * n for _ in range(n)]

        grid[0][0] = draw() * seed
        grid[last][0] = draw() * seed
        grid[0][last] = draw() * seed
        grid[last][last] = draw() * seed

        step = last
        spread = self.spread
        while step > 1:
            half = step >> 1

            for x in range(0, last, step):
                for y in range(0, last, step):
                    mean = (
                        grid[x][y]
                        + grid[x + step][y]
                        + grid[x][y + step]
                        + grid[x + step][y + step]
                    ) / 4.0
                    grid[x + half][y + half] = mean + self._jitter(spread)

            for x in range(0, last, step):
                for y in range(0, last, step):
                    grid[x + half][y] = self._diamond(grid, x + half, y, half, spread)
                    grid[x][y + half] = self._diamond(grid, x, y + half, half, spread)

            spread /= self.divisor
            step = half

        if self.smooth_level is not SmoothLevel.OFF:
            grid = smooth(grid, self.smooth_level)
        return grid