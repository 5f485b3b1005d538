# geometry/world.py
from typing import Iterable, List, Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    A list of Hittable objects. Nearest-hit search is a linear scan unless
    build_bvh() has been called, after which a BVH over the members is used.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []
        self.bvh_root = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0, rng=None):
        # Imported here: bvh depends on this module.
        from pathtracer.geometry.bvh import BVHNode
        if len(self.objects) == 0:
            self.bvh_root = None
            return None
        self.bvh_root = BVHNode.from_list(self, time0, time1, rng=rng)
        return self.bvh_root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        if not self.objects:
            return None
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box(time0, time1)
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box
