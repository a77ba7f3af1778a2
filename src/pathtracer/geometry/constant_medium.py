# geometry/constant_medium.py
import math
from typing import Optional
from pathtracer.config import MEDIUM_EXIT_OFFSET
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.core.utils import thread_rng
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.materials.isotropic import Isotropic

class ConstantMedium(Hittable):
    """
    Participating medium of constant density filling a convex boundary
    (smoke, fog). Rays passing through scatter at an exponentially
    distributed distance.
    """
    def __init__(self, boundary: Hittable, density: float, albedo):
        if density <= 0:
            raise ValueError(f"medium density must be positive, got {density}")
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, -math.inf, math.inf)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, rec1.t + MEDIUM_EXIT_OFFSET, math.inf)
        if rec2 is None:
            return None

        t1 = max(rec1.t, t_min)
        t2 = min(rec2.t, t_max)
        if t1 >= t2:
            return None
        t1 = max(t1, 0.0)

        ray_length = ray.direction.length()
        distance_inside_boundary = (t2 - t1) * ray_length
        # 1 - random() lies in (0, 1], keeping log() finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - thread_rng().random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t1 + hit_distance / ray_length
        # A zero draw lands exactly on t1, which may be t_min itself.
        if not t_min < t < t_max:
            return None
        # Normal, face and surface coordinates are arbitrary inside a volume.
        return HitRecord(p=ray.at(t), normal=Vector3(1.0, 0.0, 0.0), t=t,
                         u=0.0, v=0.0, front_face=True, material=self.phase_function)

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.boundary.bounding_box(time0, time1)
