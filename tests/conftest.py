import random

import pytest

from pathtracer.core.utils import seed_rng
from pathtracer.core.vector import Color, Point3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def _seeded_rng():
    """Every test starts from the same sampling stream."""
    seed_rng(1234)


@pytest.fixture
def grey():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def sphere_field(grey):
    """Forty small spheres scattered through a 20-unit cube."""
    g = random.Random(99)
    world = HittableList()
    for _ in range(40):
        center = Point3(g.uniform(-10, 10), g.uniform(-10, 10), g.uniform(-10, 10))
        world.add(Sphere(center, g.uniform(0.3, 1.5), grey))
    return world

