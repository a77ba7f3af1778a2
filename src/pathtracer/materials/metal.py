# materials/metal.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import reflect, random_in_unit_sphere
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    `fuzz` in [0, 1] blurs the reflection.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.albedo = as_texture(albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Ray, Vector3]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected + random_in_unit_sphere(rng) * self.fuzz
        scattered = Ray(rec.p, direction, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo.value(rec.u, rec.v, rec.p)

        # Fuzz pushed the reflection below the surface.
        return None
