# materials/diffuse_light.py
from typing import Optional, Tuple, Union
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material
from pathtracer.materials.textures import Texture, as_texture

class DiffuseLight(Material):
    """
    Area light. Ends every path that reaches it and contributes the
    radiance of its texture at the hit point.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        self.emit = as_texture(emit)

    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Ray, Vector3]]:
        return None

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.emit.value(u, v, p)
