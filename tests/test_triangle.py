import random

import numpy as np
import pytest

from fractalterrain.triangle import Triangle


class ConstantRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


class SequenceRng:
    def __init__(self, values):
        self.values = iter(values)

    def random(self):
        return next(self.values)


def test_vertices_are_stored_as_arrays():
    tri = Triangle((1, 2, 3), (4, 5, 6), (7, 8, 9))
    assert tri.a.tolist() == [1.0, 2.0, 3.0]
    assert tri.b.tolist() == [4.0, 5.0, 6.0]
    assert tri.c.tolist() == [7.0, 8.0, 9.0]


def test_default_triangle_is_at_origin():
    tri = Triangle()
    assert tri.a.tolist() == tri.b.tolist() == tri.c.tolist() == [0.0, 0.0, 0.0]


def test_normal_is_unit_and_orthogonal():
    tri = Triangle((0.5, 1.0, -2.0), (3.0, 2.0, 1.0), (-1.0, 4.0, 0.0))
    n = tri.normal()
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.dot(n, tri.b - tri.a) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(n, tri.c - tri.a) == pytest.approx(0.0, abs=1e-12)


def test_normal_orientation_flips_with_winding():
    tri = Triangle((0, 0, 0), (1, 0, 0), (0, 0, 1))
    flipped = Triangle((0, 0, 0), (0, 0, 1), (1, 0, 0))
    assert np.allclose(tri.normal(), -flipped.normal())


def test_degenerate_normal_is_nan():
    assert np.isnan(Triangle().normal()).all()


def test_recalc_color_flat_triangle():
    tri = Triangle((0, 0, 0), (1, 0, 0), (0, 0, 1))
    tri.recalc_color()
    assert tri.color.tolist() == [0.5, 0.5, 0.5]


def test_recalc_color_vertical_triangle_is_black():
    tri = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
    tri.recalc_color()
    assert np.allclose(tri.color, 0.0)


@pytest.mark.parametrize(
    "method, base",
    [
        ("set_water", (0.28, 0.48, 0.78)),
        ("set_beach", (0.15, 0.24, 0.0)),
        ("set_forest", (0.05, 0.2, 0.0)),
        ("set_mountain", (0.4, 0.4, 0.4)),
        ("set_glacier", (0.95, 0.95, 0.95)),
    ],
)
def test_soil_colours_base_and_range(method, base):
    tri = Triangle()
    getattr(tri, method)(ConstantRng(0.0))
    assert np.allclose(tri.color, base)
    getattr(tri, method)(ConstantRng(0.999))
    assert np.all(tri.color >= np.array(base))
    assert np.all(tri.color < np.array(base) + 0.1)


def test_colour_draws_are_per_channel_in_order():
    tri = Triangle()
    tri.set_mountain(SequenceRng([0.0, 0.5, 1.0]))
    assert tri.color[0] < tri.color[1] < tri.color[2]
    assert tri.color[0] == pytest.approx(0.4)


def test_seeded_rng_is_reproducible_and_in_range():
    first = Triangle()
    second = Triangle()
    first.set_glacier(random.Random(7))
    second.set_glacier(random.Random(7))
    assert first.color.tolist() == second.color.tolist()
    assert np.all(first.color >= 0.95)
    assert np.all(first.color < 1.05)