"""
Demo scenes. Each builder returns a SceneSetup whose world already has its
BVH built and whose camera matches the scene's aspect ratio.
"""

import random
from typing import Callable, Dict, NamedTuple
import numpy as np
from pathtracer.config import DEFAULT_ASPECT_RATIO, EARTH_TEXTURE
from pathtracer.core.vector import Vector3, Color
from pathtracer.camera.camera import Camera
from pathtracer.geometry import (
    Block, ConstantMedium, HittableList, MovingSphere, RotateY, Sphere,
    Translate, XYRect, XZRect, YZRect,
)
from pathtracer.materials import (
    CheckerTexture, Dielectric, DiffuseLight, ImageTexture, Lambertian, Metal, NoiseTexture,
    Perlin,
)
from pathtracer.renderer.estimator import sky_gradient

class SceneSetup(NamedTuple):
    world: HittableList
    camera: Camera
    background: object
    aspect_ratio: float

def _checker() -> CheckerTexture:
    return CheckerTexture(Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9), 10.0)

def _noise(rng: random.Random) -> NoiseTexture:
    return NoiseTexture(4.0, Perlin(np.random.default_rng(rng.getrandbits(64))))

def _default_camera(aspect_ratio: float, aperture: float = 0.0, time1: float = 0.0) -> Camera:
    return Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), Vector3(0, 1, 0), 20.0,
                  aspect_ratio, aperture, 10.0, 0.0, time1)

def random_scene(rng: random.Random) -> SceneSetup:
    """Checkered ground covered in small random spheres plus three large ones."""
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(_checker())))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = (Color(rng.random(), rng.random(), rng.random()) *
                          Color(rng.random(), rng.random(), rng.random()))
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Color(rng.uniform(0.5, 1), rng.uniform(0.5, 1), rng.uniform(0.5, 1))
                world.add(Sphere(center, 0.2, Metal(albedo, rng.uniform(0, 0.5))))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    world.build_bvh(0.0, 1.0, rng)
    camera = _default_camera(DEFAULT_ASPECT_RATIO, aperture=0.1, time1=1.0)
    return SceneSetup(world, camera, sky_gradient, DEFAULT_ASPECT_RATIO)

def two_spheres(rng: random.Random) -> SceneSetup:
    material = Lambertian(_checker())
    world = HittableList([
        Sphere(Vector3(0, -10, 0), 10, material),
        Sphere(Vector3(0, 10, 0), 10, material),
    ])
    world.build_bvh(0.0, 1.0, rng)
    return SceneSetup(world, _default_camera(DEFAULT_ASPECT_RATIO), sky_gradient,
                      DEFAULT_ASPECT_RATIO)

def two_perlin_spheres(rng: random.Random) -> SceneSetup:
    material = Lambertian(_noise(rng))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, material),
        Sphere(Vector3(0, 2, 0), 2, material),
    ])
    world.build_bvh(0.0, 1.0, rng)
    return SceneSetup(world, _default_camera(DEFAULT_ASPECT_RATIO), sky_gradient,
                      DEFAULT_ASPECT_RATIO)

def earth(rng: random.Random, texture_path: str = EARTH_TEXTURE) -> SceneSetup:
    """A globe wrapped in the image at `texture_path`."""
    globe = Sphere(Vector3(0, 0, 0), 2.0, Lambertian(ImageTexture(texture_path)))
    world = HittableList([globe])
    world.build_bvh(0.0, 1.0, rng)
    return SceneSetup(world, _default_camera(DEFAULT_ASPECT_RATIO), Color(0.7, 0.8, 1.0),
                      DEFAULT_ASPECT_RATIO)

def simple_light(rng: random.Random) -> SceneSetup:
    """Perlin spheres lit only by a rectangular area light."""
    material = Lambertian(_noise(rng))
    world = HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, material),
        Sphere(Vector3(0, 2, 0), 2, material),
        XYRect(3, 5, 1, 3, -2, DiffuseLight(Color(4, 4, 4))),
    ])
    world.build_bvh(0.0, 1.0, rng)
    camera = Camera(Vector3(26, 3, 6), Vector3(0, 2, 0), Vector3(0, 1, 0), 20.0,
                    DEFAULT_ASPECT_RATIO)
    return SceneSetup(world, camera, Color(0, 0, 0), DEFAULT_ASPECT_RATIO)

def _cornell_walls(light) -> HittableList:
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    return HittableList([
        YZRect(0, 555, 0, 555, 555, green),
        YZRect(0, 555, 0, 555, 0, red),
        light,
        XZRect(0, 555, 0, 555, 0, white),
        XZRect(0, 555, 0, 555, 555, white),
        XYRect(0, 555, 0, 555, 555, white),
    ])

def _cornell_blocks():
    white = Lambertian(Color(0.73, 0.73, 0.73))
    tall = Translate(RotateY(Block(Vector3(0, 0, 0), Vector3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    short = Translate(RotateY(Block(Vector3(0, 0, 0), Vector3(165, 165, 165), white), -18),
                      Vector3(130, 0, 65))
    return tall, short

def _cornell_camera() -> Camera:
    return Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), Vector3(0, 1, 0), 40.0, 1.0)

def cornell_box(rng: random.Random) -> SceneSetup:
    world = _cornell_walls(XZRect(213, 343, 227, 332, 554, DiffuseLight(Color(15, 15, 15))))
    for block in _cornell_blocks():
        world.add(block)
    world.build_bvh(0.0, 1.0, rng)
    return SceneSetup(world, _cornell_camera(), Color(0, 0, 0), 1.0)

def cornell_smoke(rng: random.Random) -> SceneSetup:
    """Cornell box whose two blocks are filled with dark and light smoke."""
    world = _cornell_walls(XZRect(113, 443, 127, 432, 554, DiffuseLight(Color(7, 7, 7))))
    tall, short = _cornell_blocks()
    world.add(ConstantMedium(tall, 0.01, Color(0, 0, 0)))
    world.add(ConstantMedium(short, 0.01, Color(1, 1, 1)))
    world.build_bvh(0.0, 1.0, rng)
    return SceneSetup(world, _cornell_camera(), Color(0, 0, 0), 1.0)

SCENES: Dict[str, Callable[..., SceneSetup]] = {
    'random': random_scene,
    'two-spheres': two_spheres,
    'two-perlin-spheres': two_perlin_spheres,
    'earth': earth,
    'simple-light': simple_light,
    'cornell-box': cornell_box,
    'cornell-smoke': cornell_smoke,
}

def build_scene(name: str, seed=None, **options) -> SceneSetup:
    """
    Build the named scene; `seed` makes the random layout reproducible.
    Extra keyword options go to the builder (`texture_path` for earth).
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"unknown scene {name!r}; choose from {', '.join(SCENES)}") from None
    return builder(random.Random(seed), **options)
