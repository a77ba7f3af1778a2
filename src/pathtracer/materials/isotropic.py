# materials/isotropic.py
from typing import Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_in_unit_sphere
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class Isotropic(Material):
    """Phase function of a participating medium: scatters in any direction."""
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.albedo = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> Tuple[Ray, Vector3]:
        scattered = Ray(rec.p, random_in_unit_sphere(rng), ray_in.time)
        return scattered, self.albedo.value(rec.u, rec.v, rec.p)
