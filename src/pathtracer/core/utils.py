# core/utils.py
import math
import random
import threading
from typing import Optional
from pathtracer.core.vector import Vector3

_local = threading.local()

def rng() -> random.Random:
    """
    Returns the random generator owned by the calling thread.
    Workers never share a stream, so samples stay uncorrelated.
    """
    generator = getattr(_local, "rng", None)
    if generator is None:
        generator = random.Random()
        _local.rng = generator
    return generator

def seed_rng(seed) -> None:
    """Reseed the calling thread's generator."""
    rng().seed(seed)

def swap_rng(generator: Optional[random.Random]) -> Optional[random.Random]:
    """
    Install ``generator`` as the calling thread's stream and return the
    previous one (None if the thread had not drawn yet).
    """
    previous = getattr(_local, "rng", None)
    _local.rng = generator
    return previous

def random_double(lo: float = 0.0, hi: float = 1.0) -> float:
    return lo + (hi - lo) * rng().random()

def random_vector(lo: float = 0.0, hi: float = 1.0,
                  generator: Optional[random.Random] = None) -> Vector3:
    g = generator or rng()
    return Vector3(g.uniform(lo, hi), g.uniform(lo, hi), g.uniform(lo, hi))

def random_in_unit_sphere() -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    g = rng()
    while True:
        p = Vector3(g.uniform(-1, 1),
                    g.uniform(-1, 1),
                    g.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector() -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere()
        if not p.near_zero():
            return p.normalize()

def random_in_unit_disk() -> Vector3:
    """Random point in the z=0 unit disk, for lens sampling."""
    g = rng()
    while True:
        p = Vector3(g.uniform(-1, 1), g.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts unit vector uv through a surface with normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x
