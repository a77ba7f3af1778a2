"""
pathtracer: a Monte-Carlo path tracer with a BVH-accelerated scene,
recursive radiance estimation and a multi-threaded sample-parallel renderer.
"""

from pathtracer.core import Vector3, Color, Ray, AABB
from pathtracer.geometry import BVHNode, HittableList, Hittable, HitRecord
from pathtracer.camera import Camera
from pathtracer.renderer import Renderer, render, ray_color, write_image

__version__ = "0.1.0"

__all__ = [
    "Vector3", "Color", "Ray", "AABB",
    "BVHNode", "HittableList", "Hittable", "HitRecord",
    "Camera", "Renderer", "render", "ray_color", "write_image",
]
