# geometry/transform.py
import math
from typing import Optional
from pathtracer.core.vector import Point3, Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import degrees_to_radians
from pathtracer.geometry.hittable import Hittable, HitRecord

def _outward(rec: HitRecord) -> Vector3:
    return rec.normal if rec.front_face else -rec.normal

def _world_record(rec: HitRecord, ray: Ray, p: Point3, outward_normal: Vector3) -> HitRecord:
    out = HitRecord(p=p, t=rec.t, material=rec.material, u=rec.u, v=rec.v)
    out.set_face_normal(ray, outward_normal)
    return out

class Translate(Hittable):
    """Moves a child hittable by a fixed offset."""
    def __init__(self, hittable: Hittable, offset: Vector3):
        self.hittable = hittable
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.hittable.hit(moved, t_min, t_max)
        if rec is None:
            return None
        return _world_record(rec, ray, rec.p + self.offset, _outward(rec))

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        box = self.hittable.bounding_box(time0, time1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

class RotateY(Hittable):
    """
    Rotates a child hittable about the Y axis by ``angle`` degrees. The
    world-space box encloses all eight rotated corners of the child box.
    """
    def __init__(self, hittable: Hittable, angle: float):
        self.hittable = hittable
        self.angle = angle
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

        box = hittable.bounding_box(0.0, 1.0)
        if box is None:
            self.box = None
            return
        inf = float('inf')
        lo = [inf, inf, inf]
        hi = [-inf, -inf, -inf]
        for corner in box.corners():
            rotated = self._to_world(corner)
            for c in range(3):
                lo[c] = min(lo[c], rotated[c])
                hi[c] = max(hi[c], rotated[c])
        self.box = AABB(Point3(*lo), Point3(*hi))

    def _to_local(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x - self.sin_theta * v.z,
                       v.y,
                       self.sin_theta * v.x + self.cos_theta * v.z)

    def _to_world(self, v: Vector3) -> Vector3:
        return Vector3(self.cos_theta * v.x + self.sin_theta * v.z,
                       v.y,
                       -self.sin_theta * v.x + self.cos_theta * v.z)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated = Ray(self._to_local(ray.origin), self._to_local(ray.direction), ray.time)
        rec = self.hittable.hit(rotated, t_min, t_max)
        if rec is None:
            return None
        return _world_record(rec, ray, self._to_world(rec.p), self._to_world(_outward(rec)))

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        return self.box
