# materials/isotropic.py
from typing import Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class Isotropic(Material):
    """Phase function of a participating medium: scatters uniformly in all directions."""
    def __init__(self, albedo: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        scattered = Ray(rec.p, random_in_unit_sphere(), ray_in.time)
        return scattered, self.texture.value(rec.u, rec.v, rec.p)
