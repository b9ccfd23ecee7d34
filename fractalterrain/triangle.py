"""Coloured terrain triangles."""

from __future__ import annotations

import random
from typing import Protocol

import numpy as np

_UP = np.array([0.0, 1.0, 0.0])


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1) from ``random()``."""

    def random(self) -> float: ...


class Triangle:
    """A triangle of three 3D points with an RGB colour."""

    __slots__ = ("a", "b", "c", "color")

    def __init__(self, a=(0.0, 0.0, 0.0), b=(0.0, 0.0, 0.0), c=(0.0, 0.0, 0.0)) -> None:
        self.a = np.array(a, dtype=float)
        self.b = np.array(b, dtype=float)
        self.c = np.array(c, dtype=float)
        self.color = np.zeros(3)

    def __repr__(self) -> str:
        return f"Triangle(a={self.a.tolist()}, b={self.b.tolist()}, c={self.c.tolist()})"

    def _tint(self, base: tuple[float, float, float], rng: RandomSource | None) -> None:
        source = rng if rng is not None else random
        self.color = np.array([channel + source.random() * 0.1 for channel in base])

    def set_water(self, rng: RandomSource | None = None) -> None:
        """Colour the triangle as water."""
        self._tint((0.28, 0.48, 0.78), rng)

    def set_beach(self, rng: RandomSource | None = None) -> None:
        """Colour the triangle as beach."""
        self._tint((0.15, 0.24, 0.0), rng)

    def set_forest(self, rng: RandomSource | None = None) -> None:
        """Colour the triangle as forest."""
        self._tint((0.05, 0.2, 0.0), rng)

    def set_mountain(self, rng: RandomSource | None = None) -> None:
        """Colour the triangle as mountain rock."""
        self._tint((0.4, 0.4, 0.4), rng)

    def set_glacier(self, rng: RandomSource | None = None) -> None:
        """Colour the triangle as glacier ice."""
        self._tint((0.95, 0.95, 0.95), rng)

    def normal(self) -> np.ndarray:
        """Unit normal of (b - a) x (c - a); NaN for a degenerate triangle."""
        direction = np.cross(self.b - self.a, self.c - self.a)
        with np.errstate(divide="ignore", invalid="ignore"):
            return direction / np.linalg.norm(direction)

    def recalc_color(self) -> None:
        """Shade the triangle grey by how much it faces upward."""
        self.color = np.full(3, abs(float(np.dot(_UP, self.normal())) * 0.5))