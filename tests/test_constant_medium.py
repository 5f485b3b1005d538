import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.isotropic import Isotropic

INF = float('inf')


def _fog(density):
    boundary = Sphere(Point3(0, 0, 0), 1000, Dielectric(1.5))
    return ConstantMedium(boundary, density, Color(1, 1, 1))


def _scatter_count(medium, t_max, trials=1000):
    ray = Ray(Point3(0, 0, 0), Vector3(1, 0, 0))
    return sum(1 for _ in range(trials) if medium.hit(ray, 0.001, t_max) is not None)


def test_thin_medium_barely_scatters_short_segments():
    assert _scatter_count(_fog(1e-4), t_max=1.0) <= 5


def test_dense_medium_scatters_almost_every_ray():
    assert _scatter_count(_fog(1.0), t_max=10.0) >= 990


def test_scatter_event_is_volumetric():
    medium = _fog(5.0)
    ray = Ray(Point3(0, 0, 0), Vector3(2, 0, 0))
    rec = medium.hit(ray, 0.001, 5.0)
    assert rec is not None
    assert 0.001 <= rec.t <= 5.0
    assert tuple(rec.p) == pytest.approx(tuple(ray.at(rec.t)))
    assert isinstance(rec.material, Isotropic)
    assert rec.front_face
    assert rec.normal.length() == pytest.approx(1.0)


def test_ray_missing_boundary_passes():
    medium = ConstantMedium(Sphere(Point3(0, 0, -10), 1, Dielectric(1.5)), 10.0, Color(1, 1, 1))
    assert medium.hit(Ray(Point3(0, 0, 0), Vector3(0, 1, 0)), 0.001, INF) is None


def test_boundary_behind_interval_passes():
    medium = ConstantMedium(Sphere(Point3(0, 0, -10), 1, Dielectric(1.5)), 10.0, Color(1, 1, 1))
    assert medium.hit(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), 0.001, 5.0) is None


def test_bounding_box_is_boundary_box():
    medium = _fog(1.0)
    box = medium.bounding_box(0, 1)
    assert tuple(box.minimum) == (-1000, -1000, -1000)
    assert tuple(box.maximum) == (1000, 1000, 1000)
