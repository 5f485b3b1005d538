# materials/perlin.py
import math
from typing import Optional
import numpy as np
from numba import njit
from pathtracer.core.vector import Point3

POINT_COUNT = 256

@njit(cache=True)
def _noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing of the interpolation weights.
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = (perm_x[(i + di) & 255]
                       ^ perm_y[(j + dj) & 255]
                       ^ perm_z[(k + dk) & 255])
                gx = ranvec[idx, 0]
                gy = ranvec[idx, 1]
                gz = ranvec[idx, 2]
                dot = gx * (u - di) + gy * (v - dj) + gz * (w - dk)
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * dot)
    return accum

@njit(cache=True)
def _turb(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)

def _generate_perm(generator: np.random.Generator) -> np.ndarray:
    return generator.permutation(POINT_COUNT).astype(np.int64)

class Perlin:
    """
    Gradient noise over a 256-entry table of random unit vectors, hashed
    by three independent permutations. The tables are read-only once built.
    """
    def __init__(self, seed: Optional[int] = None):
        generator = np.random.default_rng(seed)
        vectors = generator.uniform(-1.0, 1.0, size=(POINT_COUNT, 3))
        lengths = np.linalg.norm(vectors, axis=1, keepdims=True)
        # Redraw the (astronomically rare) zero-length vector.
        while np.any(lengths == 0):
            zero = lengths[:, 0] == 0
            vectors[zero] = generator.uniform(-1.0, 1.0, size=(int(zero.sum()), 3))
            lengths = np.linalg.norm(vectors, axis=1, keepdims=True)
        self.ranvec = vectors / lengths
        self.perm_x = _generate_perm(generator)
        self.perm_y = _generate_perm(generator)
        self.perm_z = _generate_perm(generator)
        for table in (self.ranvec, self.perm_x, self.perm_y, self.perm_z):
            table.setflags(write=False)

    def noise(self, p: Point3) -> float:
        return float(_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                            float(p.x), float(p.y), float(p.z)))

    def turb(self, p: Point3, depth: int = 7) -> float:
        """Sum of ``depth`` octaves at halving amplitude, absolute value."""
        return float(_turb(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                           float(p.x), float(p.y), float(p.z), int(depth)))
