"""Terrain meshes built from height maps, and soil height levels."""

from __future__ import annotations

import enum
from collections.abc import Mapping, Sequence
from typing import Protocol

import numpy as np

from fractalterrain.triangle import Triangle

# Smallest positive single-precision float. The highest point of a map is
# never taken below it, so an all-negative map gets a glacier level near 0.
_FLOAT_TINY = float(np.finfo(np.float32).tiny)


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1) from ``random()``."""

    def random(self) -> float: ...


class SoilType(enum.Enum):
    """Kinds of ground, from the lowest to the highest."""

    WATER = 0
    STEPPE = 1
    FOREST = 2
    MOUNTAIN = 3
    GLACIER = 4


def height_levels(
    heightmap: Sequence[Sequence[float]], water_percent: float
) -> dict[SoilType, float]:
    """Upper height of each soil type for a height map.

    ``water_percent`` is the share of the height range, from the lowest
    point up, that lies under water.
    """
    if not 0.0 <= water_percent <= 1.0:
        raise ValueError(f"water_percent must lie in [0, 1], got {water_percent}")
    values = [value for row in heightmap for value in row]
    if not values:
        raise ValueError("height map is empty")
    low = min(values)
    high = max(_FLOAT_TINY, max(values))
    height = high - low

    water = low + height * water_percent
    steppe = water + height * 0.1
    forest = steppe + height * 0.3
    mountain = forest + height * 0.2
    return {
        SoilType.WATER: water,
        SoilType.STEPPE: steppe,
        SoilType.FOREST: forest,
        SoilType.MOUNTAIN: mountain,
        SoilType.GLACIER: high,
    }


def build_triangles(heightmap: Sequence[Sequence[float]], length: float) -> list[Triangle]:
    """Two triangles for every grid cell, shaded by their slope.

    Grid point (row j, column i) lies at x = i * length, z = j * length.
    """
    grid = np.asarray(heightmap, dtype=float)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError("height map must be a square grid")
    size = grid.shape[0]
    triangles: list[Triangle] = []
    for j in range(size - 1):
        for i in range(size - 1):
            x0, x1 = i * length, (i + 1) * length
            z0, z1 = j * length, (j + 1) * length
            corner = (x0, grid[j][i], z0)
            far = (x1, grid[j + 1][i + 1], z1)
            triangles.append(Triangle(corner, far, (x1, grid[j][i + 1], z0)))
            triangles.append(Triangle(corner, (x0, grid[j + 1][i], z1), far))
    for triangle in triangles:
        triangle.recalc_color()
    return triangles


class Terrain:
    """A triangle mesh of a height map with flat vertex, colour and normal buffers."""

    def __init__(
        self,
        heightmap: Sequence[Sequence[float]],
        length: float,
        rng: RandomSource | None = None,
    ) -> None:
        self.rng = rng
        self.triangles = build_triangles(heightmap, length)
        self.vertex_buffer = np.empty((0, 3))
        self.color_buffer = np.empty((0, 3))
        self.normal_buffer = np.empty((0, 3))
        self.reset_buffers()

    def reset_buffers(self) -> None:
        """Rebuild the per-vertex buffers from the triangles."""
        if not self.triangles:
            self.vertex_buffer = np.empty((0, 3))
            self.color_buffer = np.empty((0, 3))
            self.normal_buffer = np.empty((0, 3))
            return
        self.vertex_buffer = np.array(
            [corner for t in self.triangles for corner in (t.a, t.b, t.c)]
        )
        self.color_buffer = np.repeat(np.array([t.color for t in self.triangles]), 3, axis=0)
        self.normal_buffer = np.repeat(np.array([t.normal() for t in self.triangles]), 3, axis=0)

    def setup_colors(self, levels: Mapping[SoilType, float]) -> None:
        """Colour each triangle by the soil band its first corner falls in."""
        water = levels[SoilType.WATER]
        steppe = levels[SoilType.STEPPE]
        forest = levels[SoilType.FOREST]
        mountain = levels[SoilType.MOUNTAIN]
        glacier = levels[SoilType.GLACIER]
        for triangle in self.triangles:
            y = float(triangle.a[1])
            if y == water:
                triangle.set_water(self.rng)
            if water < y < steppe:
                triangle.set_beach(self.rng)
            elif y < water:
                triangle.set_mountain(self.rng)
            elif steppe < y < forest:
                triangle.set_forest(self.rng)
            elif forest < y < mountain:
                triangle.set_mountain(self.rng)
            elif mountain < y < glacier:
                triangle.set_glacier(self.rng)
            else:
                triangle.set_glacier(self.rng)
        self.reset_buffers()