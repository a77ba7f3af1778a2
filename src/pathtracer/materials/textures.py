# materials/textures.py
import logging
import math
import os
from typing import Union
import numpy as np
from PIL import Image
from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin

logger = logging.getLogger(__name__)

class Texture:
    """Color lookup by surface coordinates and hit point."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color of the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """The same color everywhere."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidTexture; textures pass through."""
    if isinstance(albedo, Texture):
        return albedo
    if not isinstance(albedo, Vector3):
        raise TypeError(f"expected a Vector3 or Texture, got {type(albedo).__name__}")
    return SolidTexture(albedo)

class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(scale*x)*sin(scale*y)*sin(scale*z)
    picks between the odd and even textures.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture],
                 scale: Union[float, Vector3] = 10.0):
        self.odd = as_texture(odd)
        self.even = as_texture(even)
        if not isinstance(scale, Vector3):
            scale = Vector3(scale, scale, scale)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale.x * p.x) *
                 math.sin(self.scale.y * p.y) *
                 math.sin(self.scale.z * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class NoiseTexture(Texture):
    """Marble-like texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, perlin: Perlin = None):
        self.scale = scale
        self.noise = perlin if perlin is not None else Perlin()

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return Vector3(1.0, 1.0, 1.0) * (0.5 * (1.0 + math.sin(self.scale * p.z + 10.0 * self.noise.turb(p))))

class ImageTexture(Texture):
    """
    Bitmap texture sampled with nearest-pixel lookup. v = 1 is the top row
    of the image.
    """
    # Returned when the image holds no pixels, to make the problem visible.
    DEBUG_COLOR = Vector3(0.0, 1.0, 1.0)

    def __init__(self, image_path: str):
        if not os.path.isfile(image_path):
            raise FileNotFoundError(f"no image at {image_path}")
        with Image.open(image_path) as img:
            self.data = np.asarray(img.convert("RGB"), dtype=np.float64) / 255.0
        self.height, self.width = self.data.shape[:2]
        logger.debug("Loaded texture %s (%dx%d)", image_path, self.width, self.height)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        if self.data.size == 0:
            return self.DEBUG_COLOR

        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)

        col = min(int(u * self.width), self.width - 1)
        row = min(int(v * self.height), self.height - 1)
        r, g, b = self.data[row, col]
        return Vector3(float(r), float(g), float(b))
