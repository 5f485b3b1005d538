# materials/dielectric.py
import math
from typing import Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import reflect, refract, rng
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material

class Dielectric(Material):
    """Clear refractive material (glass, water). Never absorbs."""
    def __init__(self, ref_idx: float):
        super().__init__()
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ni_over_nt = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, ni_over_nt) > rng().random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return Ray(rec.p, direction, ray_in.time), attenuation

def schlick(cos_theta: float, ref_idx: float) -> float:
    """Schlick's approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
