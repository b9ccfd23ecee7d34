"""The landscape scene: generation parameters, terrain, water and lighting state."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

import numpy as np

from fractalterrain.heightmap import DiamondSquare, RandomSource, SmoothLevel
from fractalterrain.terrain import SoilType, Terrain, height_levels

WATER_OFFSET = 10.0
"""Height the water plane is drawn above the water level."""

Point3 = tuple[float, float, float]


def water_triangles(extent: float, level: float) -> list[tuple[Point3, Point3, Point3]]:
    """Two triangles covering the square [0, extent] x [0, extent] of the water plane."""
    y = level + WATER_OFFSET
    return [
        ((0.0, y, 0.0), (extent, y, extent), (0.0, y, extent)),
        ((0.0, y, 0.0), (extent, y, 0.0), (extent, y, extent)),
    ]


@dataclass
class TerrainParams:
    """Settings for generating a landscape."""

    size_n: int = 8
    spread: float = 600.0
    divisor: float = 2.0
    smooth_level: SmoothLevel = SmoothLevel.HARD
    seed: float = 0.0
    water_percent: float = 0.3
    length: float = 5.0

    def __post_init__(self) -> None:
        if self.size_n < 1:
            raise ValueError(f"size_n must be at least 1, got {self.size_n}")

    @property
    def grid_size(self) -> int:
        """Side of the height map, 2**size_n + 1."""
        return (1 << self.size_n) + 1

    @property
    def extent(self) -> float:
        """World-space side of the landscape."""
        return self.grid_size * self.length


@dataclass
class Scene:
    """A generated terrain together with the display settings around it."""

    params: TerrainParams = field(default_factory=TerrainParams)
    rng: RandomSource | None = None
    wireframe: bool = False
    light_enabled: bool = True
    show_menu: bool = False
    light_position: np.ndarray = field(default_factory=lambda: np.zeros(4))
    light_ambient: np.ndarray = field(default_factory=lambda: np.zeros(4))
    light_specular: np.ndarray = field(default_factory=lambda: np.zeros(4))
    light_diffuse: np.ndarray = field(default_factory=lambda: np.zeros(4))
    water_color: np.ndarray = field(default_factory=lambda: np.zeros(4))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    water_level: float = 0.0

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()
        self.levels: dict[SoilType, float] = {}
        self.heightmap: list[list[float]] = []
        self.terrain: Terrain
        self.regenerate()

    def regenerate(self) -> None:
        """Generate a new height map and terrain from the current parameters."""
        p = self.params
        generator = DiamondSquare(p.grid_size, p.spread, p.divisor, p.smooth_level, self.rng)
        self.heightmap = generator.heightmap(p.seed)
        self.levels = height_levels(self.heightmap, p.water_percent)
        self.water_level = self.levels[SoilType.WATER]
        self.terrain = Terrain(self.heightmap, p.length, self.rng)
        self.terrain.setup_colors(self.levels)

    def water_triangles(self) -> list[tuple[Point3, Point3, Point3]]:
        """The water plane over the whole landscape at the current water level."""
        return water_triangles(self.params.extent, self.water_level)

    def model_matrix(self) -> np.ndarray:
        """Scaling matrix applied to the terrain."""
        return np.diag([*np.asarray(self.scale, dtype=float), 1.0])