# geometry/aarect.py
from typing import Optional
from pathtracer.config import RECT_PADDING
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord

class AxisAlignedRect(Hittable):
    """
    Rectangle lying in the plane `axis = k`, spanning [a0, a1) along
    `axis_a` and [b0, b1) along `axis_b`. The outward normal is +axis.
    """
    axis = 2
    axis_a = 0
    axis_b = 1

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0:
            # Parallel to the plane.
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t <= t_min or t >= t_max:
            return None

        a = ray.origin[self.axis_a] + t * ray.direction[self.axis_a]
        b = ray.origin[self.axis_b] + t * ray.direction[self.axis_b]
        if not (self.a0 <= a < self.a1 and self.b0 <= b < self.b1):
            return None

        rec = HitRecord()
        rec.t = t
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self._outward_normal())
        rec.material = self.material
        return rec

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        # The box must have non-zero width on every axis, so pad the
        # plane's own axis a small amount.
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        lo[self.axis_a], hi[self.axis_a] = self.a0, self.a1
        lo[self.axis_b], hi[self.axis_b] = self.b0, self.b1
        lo[self.axis], hi[self.axis] = self.k - RECT_PADDING, self.k + RECT_PADDING
        return AABB(Vector3(*lo), Vector3(*hi))

    def _outward_normal(self) -> Vector3:
        n = [0.0, 0.0, 0.0]
        n[self.axis] = 1.0
        return Vector3(*n)

class XYRect(AxisAlignedRect):
    """Rectangle in the plane z = k."""
    axis, axis_a, axis_b = 2, 0, 1

    def __init__(self, x0: float, x1: float, y0: float, y1: float, k: float, material):
        super().__init__(x0, x1, y0, y1, k, material)

class XZRect(AxisAlignedRect):
    """Rectangle in the plane y = k."""
    axis, axis_a, axis_b = 1, 0, 2

    def __init__(self, x0: float, x1: float, z0: float, z1: float, k: float, material):
        super().__init__(x0, x1, z0, z1, k, material)

class YZRect(AxisAlignedRect):
    """Rectangle in the plane x = k."""
    axis, axis_a, axis_b = 0, 1, 2

    def __init__(self, y0: float, y1: float, z0: float, z1: float, k: float, material):
        super().__init__(y0, y1, z0, z1, k, material)
