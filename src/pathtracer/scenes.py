# scenes.py
"""
Demo scenes. Each builder returns a fully constructed world; ``get`` wraps
it with the camera, background and default render parameters.
"""
import random
from dataclasses import dataclass
from typing import Dict, Optional
from pathtracer.camera.camera import Camera
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Color, Point3, Vector3
from pathtracer.geometry.box import Box
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.constant_medium import ConstantMedium
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.rect import XYRect, XZRect, YZRect
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.transform import RotateY, Translate
from pathtracer.geometry.world import HittableList
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import (ColorPresets, DielectricPresets, LightPresets,
                                          MetalPresets, TexturePresets)
from pathtracer.materials.textures import ImageTexture
from pathtracer.renderer.integrator import Background

SKY = Color(0.70, 0.80, 1.00)
BLACK = Color(0.0, 0.0, 0.0)

@dataclass
class Scene:
    name: str
    world: Hittable
    camera: Camera
    background: Background
    aspect_ratio: float
    image_width: int
    samples_per_pixel: int
    max_depth: int

def _random_spheres(g: random.Random, moving: bool) -> HittableList:
    world = HittableList()
    if moving:
        ground = Lambertian(TexturePresets.checkerboard())
    else:
        ground = Lambertian(ColorPresets.GROUND)
    world.add(Sphere(Point3(0, -1000, 0), 1000, ground))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = g.random()
            center = Point3(a + 0.9 * g.random(), 0.2, b + 0.9 * g.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                # diffuse
                albedo = random_vector(0, 1, g) * random_vector(0, 1, g)
                if moving:
                    center2 = center + Vector3(0, g.uniform(0, 0.5), 0)
                    world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
                else:
                    world.add(Sphere(center, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = random_vector(0.5, 1, g)
                world.add(Sphere(center, 0.2, Metal(albedo, g.uniform(0, 0.5))))
            else:
                # glass
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))

    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.bronze()))

    return HittableList([BVHNode.from_list(world, 0.0, 1.0, rng=g)])

def random_scene(g: random.Random) -> HittableList:
    return _random_spheres(g, moving=False)

def random_moving_scene(g: random.Random) -> HittableList:
    return _random_spheres(g, moving=True)

def two_spheres(g: random.Random) -> HittableList:
    checker = Lambertian(TexturePresets.checkerboard())
    return HittableList([
        Sphere(Point3(0, -10, 0), 10, checker),
        Sphere(Point3(0, 10, 0), 10, checker),
    ])

def two_perlin_spheres(g: random.Random) -> HittableList:
    marble = Lambertian(TexturePresets.marble(4.0, 'z', seed=g.getrandbits(32)))
    return HittableList([
        Sphere(Point3(0, -1000, 0), 1000, marble),
        Sphere(Point3(0, 2, 0), 2, marble),
    ])

def earth(g: random.Random) -> HittableList:
    # Image decoding lives outside the renderer; the placeholder shows cyan.
    return HittableList([Sphere(Point3(0, 0, 0), 2, Lambertian(ImageTexture()))])

def simple_light(g: random.Random) -> HittableList:
    marble = Lambertian(TexturePresets.marble(4.0, 'z', seed=g.getrandbits(32)))
    return HittableList([
        Sphere(Point3(0, -1000, 0), 1000, marble),
        Sphere(Point3(0, 2, 0), 2, marble),
        XYRect(3, 5, 1, 3, -2, LightPresets.white(4.0)),
    ])

def _cornell_walls(light: DiffuseLight, light_rect) -> HittableList:
    red = ColorPresets.matte(ColorPresets.CORNELL_RED)
    white = ColorPresets.matte(ColorPresets.CORNELL_WHITE)
    green = ColorPresets.matte(ColorPresets.CORNELL_GREEN)
    x0, x1, z0, z1 = light_rect
    return HittableList([
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        XZRect(x0, x1, z0, z1, 554, light),
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
    ])

def _cornell_blocks():
    white = ColorPresets.matte(ColorPresets.CORNELL_WHITE)
    tall = Translate(RotateY(Box(Point3(0, 0, 0), Point3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    short = Translate(RotateY(Box(Point3(0, 0, 0), Point3(165, 165, 165), white), -18),
                      Vector3(130, 0, 65))
    return tall, short

def cornell_box(g: random.Random) -> HittableList:
    world = _cornell_walls(LightPresets.white(15.0), (213, 343, 227, 332))
    for block in _cornell_blocks():
        world.add(block)
    return world

def cornell_smoke(g: random.Random) -> HittableList:
    world = _cornell_walls(LightPresets.white(7.0), (113, 443, 127, 432))
    tall, short = _cornell_blocks()
    world.add(ConstantMedium(tall, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Color(1, 1, 1)))
    return world

def final_scene(g: random.Random) -> HittableList:
    boxes1 = HittableList()
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = g.uniform(1, 101)
            boxes1.add(Box(Point3(x0, 0.0, z0), Point3(x0 + w, y1, z0 + w), ground))

    boxes2 = HittableList()
    white = Lambertian(Color(0.73, 0.73, 0.73))
    for _ in range(1000):
        boxes2.add(Sphere(random_vector(0, 165, g), 10, white))

    center1 = Point3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    boundary = Sphere(Point3(360, 150, 145), 70, Dielectric(1.5))

    return HittableList([
        BVHNode.from_list(boxes1, 0.0, 1.0, rng=g),
        XZRect(123, 423, 147, 412, 554, LightPresets.white(7.0)),
        MovingSphere(center1, center2, 0.0, 1.0, 50, Lambertian(Color(0.7, 0.3, 0.1))),
        Sphere(Point3(260, 150, 45), 50, Dielectric(1.5)),
        Sphere(Point3(0, 150, 145), 50, MetalPresets.brushed_steel()),
        boundary,
        ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)),
        ConstantMedium(Sphere(Point3(0, 0, 0), 5000, Dielectric(1.5)), 0.0001, Color(1, 1, 1)),
        # Stand-in for the image-textured globe.
        Sphere(Point3(400, 200, 400), 100, MetalPresets.bronze()),
        Sphere(Point3(220, 280, 300), 80,
               Lambertian(TexturePresets.marble(0.1, 'x', seed=g.getrandbits(32)))),
        Translate(RotateY(BVHNode.from_list(boxes2, 0.0, 1.0, rng=g), 15),
                  Vector3(-100, 270, 395)),
    ])

# name -> (builder, look_from, look_at, vfov, aperture, background,
#          aspect_ratio, image_width, samples_per_pixel)
_SCENES: Dict[str, tuple] = {
    "random": (random_scene, Point3(13, 2, 3), Point3(0, 0, 0), 20.0, 0.1, SKY, 3 / 2, 1200, 500),
    "random_moving": (random_moving_scene, Point3(13, 2, 3), Point3(0, 0, 0), 20.0, 0.1, SKY,
                      16 / 9, 600, 200),
    "two_spheres": (two_spheres, Point3(13, 2, 3), Point3(0, 0, 0), 20.0, 0.0, SKY, 16 / 9, 400, 100),
    "two_perlin_spheres": (two_perlin_spheres, Point3(13, 2, 3), Point3(0, 0, 0), 20.0, 0.0, SKY,
                           16 / 9, 400, 100),
    "earth": (earth, Point3(13, 2, 3), Point3(0, 0, 0), 20.0, 0.0, SKY, 16 / 9, 400, 100),
    "simple_light": (simple_light, Point3(26, 3, 6), Point3(0, 2, 0), 20.0, 0.0, BLACK,
                     16 / 9, 400, 400),
    "cornell_box": (cornell_box, Point3(278, 278, -800), Point3(278, 278, 0), 40.0, 0.0, BLACK,
                    1.0, 600, 400),
    "cornell_smoke": (cornell_smoke, Point3(278, 278, -800), Point3(278, 278, 0), 40.0, 0.0, BLACK,
                      1.0, 600, 200),
    "final": (final_scene, Point3(478, 278, -600), Point3(278, 278, 0), 40.0, 0.0, BLACK,
              1.0, 800, 10000),
}

SCENE_NAMES = tuple(_SCENES)

def get(name: str, seed: int = 0, aspect_ratio: Optional[float] = None) -> Scene:
    """Build the named demo scene. Raises ValueError for unknown names."""
    try:
        builder, look_from, look_at, vfov, aperture, background, default_aspect, \
            image_width, samples = _SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}; choose from {', '.join(SCENE_NAMES)}") from None

    aspect = aspect_ratio if aspect_ratio is not None else default_aspect
    world = builder(random.Random(seed))
    camera = Camera(look_from, look_at, Vector3(0, 1, 0), vfov, aspect,
                    aperture=aperture, focus_dist=10.0, time0=0.0, time1=1.0)
    return Scene(name, world, camera, background, aspect, image_width, samples, 50)
