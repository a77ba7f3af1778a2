"""Materials (scatter / emission models) and the textures they sample."""

from pathtracer.materials.material import Material
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.diffuse_light import DiffuseLight
from pathtracer.materials.isotropic import Isotropic
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.textures import (
    Texture,
    SolidTexture,
    CheckerTexture,
    NoiseTexture,
    ImageTexture,
    as_texture,
)

__all__ = [
    "Material", "Lambertian", "Metal", "Dielectric", "DiffuseLight", "Isotropic",
    "Perlin", "Texture", "SolidTexture", "CheckerTexture", "NoiseTexture",
    "ImageTexture", "as_texture",
]
