# geometry/rect.py
from typing import Optional
from pathtracer.core.vector import Point3, Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

# Half-thickness given to the flat axis of a rectangle's bounding box.
PAD = 1e-4

_UNIT = {'x': Vector3(1, 0, 0), 'y': Vector3(0, 1, 0), 'z': Vector3(0, 0, 1)}

class AxisRect(Hittable):
    """
    Rectangle lying in the plane ``k_axis = k``, spanning [a0, a1] along
    a_axis and [b0, b1] along b_axis. The outward normal is +k_axis,
    or -k_axis when ``flip`` is set.
    """
    a_axis = 'x'
    b_axis = 'y'
    k_axis = 'z'

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material,
                 flip: bool = False):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        self.flip = flip
        normal = _UNIT[self.k_axis]
        self.outward_normal = -normal if flip else normal

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = getattr(ray.direction, self.k_axis)
        if d == 0:
            return None
        t = (self.k - getattr(ray.origin, self.k_axis)) / d
        if t < t_min or t > t_max:
            return None

        a = getattr(ray.origin, self.a_axis) + t * getattr(ray.direction, self.a_axis)
        b = getattr(ray.origin, self.b_axis) + t * getattr(ray.direction, self.b_axis)
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord(t=t, p=ray.at(t), material=self.material,
                        u=(a - self.a0) / (self.a1 - self.a0),
                        v=(b - self.b0) / (self.b1 - self.b0))
        rec.set_face_normal(ray, self.outward_normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        # Pad the flat axis so the box keeps a non-zero volume.
        lo = {self.a_axis: self.a0, self.b_axis: self.b0, self.k_axis: self.k - PAD}
        hi = {self.a_axis: self.a1, self.b_axis: self.b1, self.k_axis: self.k + PAD}
        return AABB(Point3(lo['x'], lo['y'], lo['z']), Point3(hi['x'], hi['y'], hi['z']))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, {self.b1}, "
                f"k={self.k})")

class XYRect(AxisRect):
    a_axis, b_axis, k_axis = 'x', 'y', 'z'

class XZRect(AxisRect):
    a_axis, b_axis, k_axis = 'x', 'z', 'y'

class YZRect(AxisRect):
    a_axis, b_axis, k_axis = 'y', 'z', 'x'
