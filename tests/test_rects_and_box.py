import random

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Point3, Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.rect import PAD, XYRect, XZRect, YZRect

INF = float('inf')


def test_xy_rect_hit_and_uv(grey):
    rect = XYRect(0, 1, 0, 1, -1, grey)
    rec = rect.hit(Ray(Point3(0, 0, 0), Vector3(0.5, 0.5, -1)), 0.001, INF)
    assert rec.t == pytest.approx(1.0)
    assert tuple(rec.p) == pytest.approx((0.5, 0.5, -1))
    assert (rec.u, rec.v) == pytest.approx((0.5, 0.5))
    assert rec.front_face
    assert tuple(rec.normal) == (0, 0, 1)


def test_rect_outside_bounds_or_range_misses(grey):
    rect = XYRect(0, 1, 0, 1, -1, grey)
    assert rect.hit(Ray(Point3(0, 0, 0), Vector3(2, 0.5, -1)), 0.001, INF) is None
    assert rect.hit(Ray(Point3(0, 0, 0), Vector3(0.5, 0.5, -1)), 0.001, 0.5) is None


def test_ray_parallel_to_rect_misses(grey):
    rect = XYRect(0, 1, 0, 1, -1, grey)
    assert rect.hit(Ray(Point3(0, 0, -1), Vector3(1, 0, 0)), 0.001, INF) is None


@pytest.mark.parametrize("rect, ray, normal", [
    (XZRect(0, 1, 0, 1, 2, None), Ray(Point3(0.5, 5, 0.5), Vector3(0, -1, 0)), (0, 1, 0)),
    (XZRect(0, 1, 0, 1, 2, None), Ray(Point3(0.5, -5, 0.5), Vector3(0, 1, 0)), (0, -1, 0)),
    (YZRect(0, 1, 0, 1, 3, None), Ray(Point3(9, 0.5, 0.5), Vector3(-1, 0, 0)), (1, 0, 0)),
    (YZRect(0, 1, 0, 1, 3, None), Ray(Point3(-9, 0.5, 0.5), Vector3(1, 0, 0)), (-1, 0, 0)),
])
def test_rect_normals_face_the_ray(rect, ray, normal):
    rec = rect.hit(ray, 0.001, INF)
    assert tuple(rec.normal) == normal
    assert rec.normal.dot(-ray.direction) > 0


def test_flipped_rect_reverses_outward_side(grey):
    rect = XYRect(0, 1, 0, 1, 0, grey, flip=True)
    rec = rect.hit(Ray(Point3(0.5, 0.5, 5), Vector3(0, 0, -1)), 0.001, INF)
    assert not rec.front_face
    assert tuple(rec.normal) == (0, 0, 1)


def test_rect_boxes_are_padded_on_flat_axis():
    box = XZRect(0, 2, 3, 4, 5, None).bounding_box(0, 1)
    assert tuple(box.minimum) == pytest.approx((0, 5 - PAD, 3))
    assert tuple(box.maximum) == pytest.approx((2, 5 + PAD, 4))
    box = YZRect(0, 2, 3, 4, 5, None).bounding_box(0, 1)
    assert box.minimum.x < box.maximum.x


def test_box_hits_nearest_face_from_outside(grey):
    box = Box(Point3(0, 0, 0), Point3(1, 1, 1), grey)
    rec = box.hit(Ray(Point3(0.5, 0.5, 5), Vector3(0, 0, -1)), 0.001, INF)
    assert rec.t == pytest.approx(4.0)
    assert rec.front_face
    assert tuple(rec.normal) == (0, 0, 1)


def test_box_faces_are_outward(grey):
    box = Box(Point3(0, 0, 0), Point3(1, 1, 1), grey)
    g = random.Random(11)
    for _ in range(200):
        origin = Point3(g.uniform(-3, 4), g.uniform(-3, 4), g.uniform(-3, 4))
        inside = all(0 < c < 1 for c in origin)
        target = Point3(g.uniform(0.1, 0.9), g.uniform(0.1, 0.9), g.uniform(0.1, 0.9))
        ray = Ray(origin, target - origin)
        rec = box.hit(ray, 0.001, INF)
        if rec is None:
            continue
        assert rec.front_face != inside
        assert rec.normal.dot(-ray.direction) >= 0


def test_box_bounding_box(grey):
    box = Box(Point3(-1, -2, -3), Point3(1, 2, 3), grey).bounding_box(0, 1)
    assert tuple(box.minimum) == (-1, -2, -3)
    assert tuple(box.maximum) == (1, 2, 3)
    assert len(Box(Point3(0, 0, 0), Point3(1, 1, 1), grey).sides) == 6
