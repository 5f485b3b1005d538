# materials/lambertian.py
from typing import Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.core.utils import random_unit_vector
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector()

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return scattered, attenuation
