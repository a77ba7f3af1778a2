# materials/lambertian.py
from typing import Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.core.utils import random_unit_vector
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Ideal diffuse reflector. Bounce directions follow a cosine-weighted
    distribution around the normal; the albedo may be a color or a texture.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        self.albedo = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec, rng) -> Tuple[Ray, Vector3]:
        direction = rec.normal + random_unit_vector(rng)

        # The sample can cancel the normal almost exactly.
        if direction.near_zero():
            direction = rec.normal

        return Ray(rec.p, direction, ray_in.time), self.albedo.value(rec.u, rec.v, rec.p)
