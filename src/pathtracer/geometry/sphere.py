# geometry/sphere.py
import math
from typing import Optional, Tuple
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.kernels import sphere_root
from pathtracer.geometry.hittable import Hittable, HitRecord

def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Texture coordinates of a point p on the unit sphere centred at the origin.
    u: angle around the Y axis from X=-1, in [0, 1].
    v: angle from Y=-1 to Y=+1, in [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

def _hit_sphere(ray: Ray, center: Vector3, radius: float, material,
                t_min: float, t_max: float) -> Optional[HitRecord]:
    oc = ray.origin - center
    a = ray.direction.length_squared()
    half_b = ray.direction.dot(oc)
    c = oc.dot(oc) - radius * radius

    # Nearest root that lies in the acceptable range, nan if none.
    root = sphere_root(a, half_b, c, t_min, t_max)
    if math.isnan(root):
        return None

    p = ray.at(root)
    outward = (p - center) / radius
    u, v = get_sphere_uv(outward)
    rec = HitRecord(p=p, t=root, u=u, v=v, material=material)
    rec.set_face_normal(ray, outward)
    return rec

class Sphere(Hittable):
    """Stationary sphere."""
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(ray, self.center, self.radius, self.material, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        r = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - r, self.center + r)

class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1
    at time1. Rays see the sphere at the position given by their own time.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * ((time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return _hit_sphere(ray, self.center(ray.time), self.radius, self.material, t_min, t_max)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        r = Vector3(self.radius, self.radius, self.radius)
        c0 = self.center(time0)
        c1 = self.center(time1)
        return AABB.surrounding_box(AABB(c0 - r, c0 + r), AABB(c1 - r, c1 + r))
