# renderer/raytracer.py
import logging
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Optional
import numpy as np
from pathtracer.camera.camera import Camera
from pathtracer.core.utils import swap_rng
from pathtracer.core.vector import Color
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import Background, ray_color

logger = logging.getLogger(__name__)

def render_pixel(world: Hittable, camera: Camera, background: Background,
                 image_width: int, image_height: int, pixel_x: int, pixel_y: int,
                 samples_per_pixel: int, max_depth: int, seed: int = 0) -> Color:
    """
    Average linear radiance of one pixel. ``pixel_y`` counts rows from the
    bottom of the image. Sampling draws from a private generator seeded
    from (seed, pixel_x, pixel_y), so results do not depend on scheduling
    and the calling thread's own stream is left untouched.
    """
    g = random.Random(f"{seed}:{pixel_x}:{pixel_y}")
    previous = swap_rng(g)
    r = gr = b = 0.0
    try:
        for _ in range(samples_per_pixel):
            u = (pixel_x + g.random()) / max(image_width - 1, 1)
            v = (pixel_y + g.random()) / max(image_height - 1, 1)
            c = ray_color(camera.get_ray(u, v), background, world, max_depth)
            r += c.x
            gr += c.y
            b += c.z
    finally:
        swap_rng(previous)
    scale = 1.0 / samples_per_pixel
    return Color(r * scale, gr * scale, b * scale)

# Scene state held by each worker process; set once by _init_worker.
_worker_scene = None

def _init_worker(scene_args):
    global _worker_scene
    _worker_scene = scene_args

def _render_row(j: int) -> np.ndarray:
    return _render_row_with(_worker_scene, j)

def _render_row_with(scene_args, j: int) -> np.ndarray:
    world, camera, background, width, height, spp, max_depth, seed = scene_args
    row = np.empty((width, 3), dtype=np.float64)
    for i in range(width):
        c = render_pixel(world, camera, background, width, height, i, j,
                         spp, max_depth, seed)
        row[i] = (c.x, c.y, c.z)
    return row

class Renderer:
    """
    Renders whole images by evaluating render_pixel for every pixel. Rows
    are spread over a process pool when more than one worker is requested;
    each worker receives its own copy of the (read-only) scene.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 16,
                 max_depth: int = 50, workers: Optional[int] = 1, seed: int = 0):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel <= 0:
            raise ValueError("samples_per_pixel must be positive")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.seed = seed

    def render(self, world: Hittable, camera: Camera, background: Background) -> np.ndarray:
        """
        Returns a (height, width, 3) float64 image of linear radiance, top row first.
        """
        scene_args = (world, camera, background, self.width, self.height,
                      self.samples_per_pixel, self.max_depth, self.seed)
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        rows = range(self.height)
        start = time.perf_counter()
        logger.info("Rendering %dx%d, %d spp, depth %d, %d worker(s)",
                    self.width, self.height, self.samples_per_pixel,
                    self.max_depth, self.workers)

        if self.workers <= 1:
            results = (_render_row_with(scene_args, j) for j in rows)
            self._collect(image, results, start)
        else:
            chunksize = max(1, self.height // (self.workers * 4))
            with ProcessPoolExecutor(max_workers=self.workers,
                                     initializer=_init_worker,
                                     initargs=(scene_args,)) as executor:
                self._collect(image, executor.map(_render_row, rows, chunksize=chunksize), start)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return image

    def _collect(self, image: np.ndarray, results, start: float) -> None:
        step = max(1, self.height // 10)
        for j, row in enumerate(results):
            # Row j counts from the bottom; the image is stored top row first.
            image[self.height - 1 - j] = row
            if (j + 1) % step == 0:
                logger.debug("%d/%d rows done (%.1fs)", j + 1, self.height,
                             time.perf_counter() - start)
