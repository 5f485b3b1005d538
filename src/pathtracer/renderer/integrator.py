# renderer/integrator.py
from typing import Callable, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable

# Lower bound on hit distance; avoids re-hitting the surface a ray leaves from.
T_MIN = 0.001
INFINITY = float('inf')

Background = Union[Color, Callable[[Ray], Color]]

def background_color(background: Background, ray: Ray) -> Color:
    if callable(background):
        return background(ray)
    return background

def ray_color(ray: Ray, background: Background, world: Hittable, depth: int) -> Color:
    """
    Radiance arriving along ``ray``: emission at the nearest hit plus the
    attenuated radiance of the scattered ray, truncated after ``depth``
    bounces. Misses return the background.
    """
    if depth <= 0:
        return Color(0.0, 0.0, 0.0)

    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background_color(background, ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    result = rec.material.scatter(ray, rec)
    if result is None:
        return emitted

    scattered, attenuation = result
    return emitted + attenuation * ray_color(scattered, background, world, depth - 1)
