# geometry/transform.py
import math
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

class Translate(Hittable):
    """
    Wrapper that moves the wrapped object by `offset`. The ray is moved into
    object space instead of moving the object.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        moved_r = Ray(ray.origin - self.offset, ray.direction, ray.time)
        rec = self.object.hit(moved_r, t_min, t_max)
        if rec is None:
            return None
        # Translation leaves directions alone, so the normal and front_face
        # computed in object space still hold.
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        box = self.object.bounding_box(time0, time1)
        return AABB(box.minimum + self.offset, box.maximum + self.offset)

class Rotate(Hittable):
    """
    Wrapper rotating the wrapped object by `angle` degrees within the plane
    of axes (axis_a, axis_b); the remaining axis is the rotation axis.
    """
    axis_a = 0
    axis_b = 2

    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        radians = math.radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.box = self._rotated_box(obj.bounding_box(0.0, 1.0))

    def _to_world(self, v: Vector3) -> Vector3:
        c = list(v)
        a, b = c[self.axis_a], c[self.axis_b]
        c[self.axis_a] = self.cos_theta * a + self.sin_theta * b
        c[self.axis_b] = -self.sin_theta * a + self.cos_theta * b
        return Vector3(*c)

    def _to_object(self, v: Vector3) -> Vector3:
        c = list(v)
        a, b = c[self.axis_a], c[self.axis_b]
        c[self.axis_a] = self.cos_theta * a - self.sin_theta * b
        c[self.axis_b] = self.sin_theta * a + self.cos_theta * b
        return Vector3(*c)

    def _rotated_box(self, box: AABB) -> AABB:
        lo = [math.inf, math.inf, math.inf]
        hi = [-math.inf, -math.inf, -math.inf]
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    corner = Vector3(
                        i * box.maximum.x + (1 - i) * box.minimum.x,
                        j * box.maximum.y + (1 - j) * box.minimum.y,
                        k * box.maximum.z + (1 - k) * box.minimum.z,
                    )
                    for axis, value in enumerate(self._to_world(corner)):
                        lo[axis] = min(lo[axis], value)
                        hi[axis] = max(hi[axis], value)
        return AABB(Vector3(*lo), Vector3(*hi))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rotated_r = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        rec = self.object.hit(rotated_r, t_min, t_max)
        if rec is None:
            return None
        # Rotation preserves angles, so the object-space normal still faces
        # against the ray once rotated back.
        rec.p = self._to_world(rec.p)
        rec.normal = self._to_world(rec.normal)
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box

class RotateX(Rotate):
    """Rotation about the x axis."""
    axis_a, axis_b = 1, 2

class RotateY(Rotate):
    """Rotation about the y axis."""
    axis_a, axis_b = 0, 2

class RotateZ(Rotate):
    """Rotation about the z axis."""
    axis_a, axis_b = 0, 1
