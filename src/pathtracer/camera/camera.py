# camera/camera.py
import math
from pathtracer.core.vector import Point3, Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import degrees_to_radians, random_double, random_in_unit_disk

class Camera:
    """
    Thin-lens camera. Rays start on a lens disk of radius aperture/2, aim at
    the viewport placed at focus_dist, and carry a time sampled uniformly
    from the shutter interval [time0, time1].
    """
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = degrees_to_radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.look_from
        # Scale by focus distance
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float) -> Ray:
        """Generates a ray through viewport coordinates (s, t) in [0, 1]²."""
        rd = random_in_unit_disk() * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        if self.time1 > self.time0:
            time = random_double(self.time0, self.time1)
        else:
            time = self.time0
        return Ray(ray_origin, ray_direction, time)
