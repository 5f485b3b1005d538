# materials/material.py
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3
from pathtracer.geometry.hittable import HitRecord

BLACK = Color(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Emissive materials also override emitted().
    """
    def __init__(self):
        self.texture = None

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """Light emitted at the hit point; black for non-emissive materials."""
        return BLACK

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.texture!r})"
