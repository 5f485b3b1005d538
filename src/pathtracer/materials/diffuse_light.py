# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color, Point3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Color, Texture]):
        super().__init__()
        self.texture = as_texture(emit)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Tuple[Ray, Color]]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """
        Return the emitted radiance.

        Args:
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Point3): The hit point.

        Returns:
            Color: The emission color from the texture.
        """
        return self.texture.value(u, v, p)
