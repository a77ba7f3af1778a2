"""Vector math, rays, bounding boxes and the numba kernels they run on."""

from pathtracer.core.vector import Vector3, Color
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB

__all__ = ["Vector3", "Color", "Ray", "AABB"]
