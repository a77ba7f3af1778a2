# geometry/hittable.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB

class HitRecord:
    """
    Result of a successful intersection: point, ray parameter, surface
    coordinates, material, and a normal that always opposes the ray.
    """
    __slots__ = ("p", "normal", "t", "u", "v", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0.0, u: float = 0.0, v: float = 0.0,
                 front_face: bool = True, material=None):
        self.p = p
        self.normal = normal
        self.t = t
        self.u = u
        self.v = v
        self.front_face = front_face  # ray arrived from the outward side
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """Store `outward_normal`, flipped if needed to face against `ray`."""
        self.front_face = outward_normal.dot(ray.direction) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")

class Hittable:
    """
    Anything a ray can intersect.

    hit() reports only intersections with t strictly inside
    (t_min, t_max) and returns None otherwise. bounding_box() always
    returns a concrete box; moving objects return the box covering the
    whole [time0, time1] interval.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError(f"{type(self).__name__} does not implement hit()")

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        raise NotImplementedError(f"{type(self).__name__} does not implement bounding_box()")
