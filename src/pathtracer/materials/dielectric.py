# materials/dielectric.py
import math
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.materials.material import Material

WHITE = Vector3(1.0, 1.0, 1.0)

class Dielectric(Material):
    """
    Transparent material with index of refraction `ref_idx`. Each path
    either reflects or refracts, chosen with Schlick's reflectance.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Ray, Vector3]]:
        # Back-face hits are leaving the material.
        ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_dir = ray_in.direction.normalize()
        cos_theta = min(-unit_dir.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        if ratio * sin_theta > 1.0 or schlick(cos_theta, ratio) > rng.random():
            direction = reflect(unit_dir, rec.normal)
        else:
            direction = refract(unit_dir, rec.normal, ratio)

        return Ray(rec.p, direction, ray_in.time), WHITE
