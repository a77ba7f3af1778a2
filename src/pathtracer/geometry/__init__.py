"""
Geometric primitives, instancing wrappers and the BVH that accelerates
ray queries over them.
"""

from pathtracer.geometry.hittable import HitRecord, Hittable
from pathtracer.geometry.sphere import Sphere, MovingSphere, get_sphere_uv
from pathtracer.geometry.aarect import XYRect, XZRect, YZRect
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.world import HittableList
from pathtracer.geometry.block import Block
from pathtracer.geometry.transform import Translate, RotateX, RotateY, RotateZ
from pathtracer.geometry.constant_medium import ConstantMedium

__all__ = [
    "HitRecord", "Hittable",
    "Sphere", "MovingSphere", "get_sphere_uv",
    "XYRect", "XZRect", "YZRect",
    "BVHNode", "HittableList", "Block",
    "Translate", "RotateX", "RotateY", "RotateZ",
    "ConstantMedium",
]
