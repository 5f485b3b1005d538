import numpy as np
import pytest

from pathtracer.core.vector import Point3
from pathtracer.materials.perlin import POINT_COUNT, Perlin


@pytest.fixture(scope="module")
def perlin():
    return Perlin(seed=7)


def _points(count=200):
    g = np.random.default_rng(3)
    for x, y, z in g.uniform(-20, 20, size=(count, 3)):
        yield Point3(x, y, z)


def test_tables_shape_and_contents(perlin):
    assert perlin.ranvec.shape == (POINT_COUNT, 3)
    assert np.allclose(np.linalg.norm(perlin.ranvec, axis=1), 1.0)
    for perm in (perlin.perm_x, perlin.perm_y, perlin.perm_z):
        assert sorted(perm.tolist()) == list(range(POINT_COUNT))


def test_tables_are_read_only(perlin):
    with pytest.raises(ValueError):
        perlin.perm_x[0] = 1
    with pytest.raises(ValueError):
        perlin.ranvec[0, 0] = 0.0


def test_noise_is_bounded(perlin):
    for p in _points():
        assert -1.0 <= perlin.noise(p) <= 1.0


def test_noise_vanishes_on_lattice(perlin):
    for p in (Point3(0, 0, 0), Point3(3, -5, 7), Point3(255, 256, -1)):
        assert perlin.noise(p) == pytest.approx(0.0, abs=1e-12)


def test_noise_is_continuous(perlin):
    p = Point3(1.3, 2.6, -0.4)
    q = Point3(1.3 + 1e-6, 2.6, -0.4)
    assert abs(perlin.noise(p) - perlin.noise(q)) < 1e-4


def test_turbulence_is_non_negative(perlin):
    for p in _points():
        assert perlin.turb(p) >= 0.0
    assert perlin.turb(Point3(0.5, 0.5, 0.5), depth=1) == pytest.approx(
        abs(perlin.noise(Point3(0.5, 0.5, 0.5))))


def test_same_seed_same_field(perlin):
    other = Perlin(seed=7)
    for p in _points(20):
        assert other.noise(p) == perlin.noise(p)
    assert not np.array_equal(Perlin(seed=8).perm_x, perlin.perm_x)


def test_permutations_follow_the_seed(perlin):
    other = Perlin(seed=7)
    for mine, theirs in ((perlin.perm_x, other.perm_x), (perlin.perm_y, other.perm_y),
                         (perlin.perm_z, other.perm_z)):
        assert mine.dtype == np.int64
        assert np.array_equal(mine, theirs)
    assert not np.array_equal(perlin.perm_x, perlin.perm_y)
