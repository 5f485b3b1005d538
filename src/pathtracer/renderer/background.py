# renderer/background.py
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color

class SkyGradient:
    """
    Background that blends from ``horizon`` (looking down) to ``zenith``
    (looking up) by the height of the unit ray direction. Usable anywhere
    a flat background color is accepted.
    """
    def __init__(self, horizon: Color = None, zenith: Color = None):
        self.horizon = horizon if horizon is not None else Color(1.0, 1.0, 1.0)
        self.zenith = zenith if zenith is not None else Color(0.5, 0.7, 1.0)

    def __call__(self, ray: Ray) -> Color:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.y + 1.0)
        return self.horizon * (1.0 - t) + self.zenith * t
