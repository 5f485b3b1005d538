# geometry/bvh.py
import logging
import random
from typing import List, Optional, Sequence
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.utils import rng as thread_rng
from pathtracer.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

_AXES = ('x', 'y', 'z')

def _box_of(obj: Hittable, time0: float, time1: float) -> AABB:
    box = obj.bounding_box(time0, time1)
    if box is None:
        raise ValueError(f"No bounding box in BVHNode constructor for {obj!r}")
    return box

class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy node. Each node splits its objects
    at the median along a randomly chosen axis, ordered by the minimum of
    their boxes. A single object is stored in both children.
    """
    def __init__(self, objects: Sequence[Hittable], start: int, end: int,
                 time0: float = 0.0, time1: float = 1.0,
                 rng: Optional[random.Random] = None):
        rng = rng or thread_rng()
        axis = _AXES[rng.randint(0, 2)]

        def key(obj):
            return getattr(_box_of(obj, time0, time1).minimum, axis)

        object_span = end - start
        if object_span <= 0:
            raise ValueError("BVHNode needs at least one object")

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            a, b = objects[start], objects[start + 1]
            if key(a) < key(b):
                self.left, self.right = a, b
            else:
                self.left, self.right = b, a
        else:
            # Sort a copy so the caller's sequence is left untouched.
            ordered: List[Hittable] = sorted(objects[start:end], key=key)
            mid = object_span // 2
            self.left = BVHNode(ordered, 0, mid, time0, time1, rng)
            self.right = BVHNode(ordered, mid, object_span, time0, time1, rng)

        self.box = AABB.surrounding_box(_box_of(self.left, time0, time1),
                                        _box_of(self.right, time0, time1))

    @classmethod
    def from_list(cls, hittables, time0: float = 0.0, time1: float = 1.0,
                  rng: Optional[random.Random] = None) -> "BVHNode":
        objects = list(hittables)
        node = cls(objects, 0, len(objects), time0, time1, rng)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("BVH over %d objects, depth %d", len(objects), node.depth())
        return node

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)

        # Update t_max for right branch if we hit something on the left
        if hit_left is not None:
            t_max = hit_left.t

        if self.right is self.left:
            return hit_left
        hit_right = self.right.hit(ray, t_min, t_max)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 0.0) -> AABB:
        return self.box
