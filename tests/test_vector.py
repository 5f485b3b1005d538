import math
import random

import numpy as np
import pytest

from pathtracer.core import utils
from pathtracer.core.vector import Color, Point3, Vector3


def test_arithmetic():
    a = Vector3(1, 2, 3)
    b = Vector3(4, 5, 6)
    assert tuple(a + b) == (5, 7, 9)
    assert tuple(b - a) == (3, 3, 3)
    assert tuple(a * 2) == (2, 4, 6)
    assert tuple(2 * a) == (2, 4, 6)
    assert tuple(a * b) == (4, 10, 18)
    assert tuple(b / 2) == (2, 2.5, 3)
    assert tuple(-a) == (-1, -2, -3)


def test_dot_cross_and_length():
    x = Vector3(1, 0, 0)
    y = Vector3(0, 1, 0)
    assert x.dot(y) == 0
    assert tuple(x.cross(y)) == (0, 0, 1)
    assert Vector3(3, 4, 0).length() == 5
    assert Vector3(3, 4, 0).length_squared() == 25


def test_normalize_zero_vector_stays_zero():
    assert tuple(Vector3(0, 0, 0).normalize()) == (0, 0, 0)
    assert Vector3(0, 0, 2).normalize().length() == pytest.approx(1.0)


def test_indexing_and_axis():
    v = Vector3(7, 8, 9)
    assert (v[0], v[1], v[2]) == (7, 8, 9)
    assert v.axis('y') == 8
    with pytest.raises(IndexError):
        v[3]


def test_near_zero():
    assert Vector3(1e-9, -1e-9, 0).near_zero()
    assert not Vector3(1e-9, 1e-3, 0).near_zero()


def test_aliases_share_representation():
    assert Point3 is Vector3
    assert Color is Vector3


def test_reflect():
    r = utils.reflect(Vector3(1, -1, 0), Vector3(0, 1, 0))
    assert tuple(r) == (1, 1, 0)


def test_refract_with_unit_ratio_passes_straight_through():
    d = utils.refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1.0)
    assert d.x == pytest.approx(0.0)
    assert d.y == pytest.approx(-1.0)
    assert d.z == pytest.approx(0.0)


def test_random_samplers_stay_in_their_domains():
    for _ in range(200):
        assert utils.random_in_unit_sphere().length() < 1.0
        assert utils.random_unit_vector().length() == pytest.approx(1.0)
        disk = utils.random_in_unit_disk()
        assert disk.z == 0 and disk.length() < 1.0
        assert 2.0 <= utils.random_double(2.0, 3.0) < 3.0


def test_seeded_stream_is_reproducible():
    utils.seed_rng("abc")
    first = [utils.random_double() for _ in range(5)]
    utils.seed_rng("abc")
    assert [utils.random_double() for _ in range(5)] == first


def test_degrees_and_clamp():
    assert utils.degrees_to_radians(180) == pytest.approx(math.pi)
    assert utils.clamp(5, 0, 1) == 1
    assert utils.clamp(-5, 0, 1) == 0
    assert utils.clamp(0.5, 0, 1) == 0.5


def test_numpy_scalars_scale_vectors():
    v = Point3(1, 2, 3)
    assert tuple(v * np.int64(2)) == (2, 4, 6)
    assert tuple(v * np.float64(0.5)) == (0.5, 1.0, 1.5)
    assert tuple(v * Vector3(2, 0, 1)) == (2, 0, 3)


def test_swap_rng_returns_previous_stream():
    mine = random.Random(7)
    previous = utils.swap_rng(mine)
    try:
        assert utils.rng() is mine
    finally:
        utils.swap_rng(previous)
    assert utils.rng() is previous
