# materials/material.py
from typing import Optional, Tuple
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

BLACK = Vector3(0.0, 0.0, 0.0)

class Material:
    """
    Surface response model. Instances are shared by many objects and by
    all render threads, so they hold no mutable state and draw every
    random number from the `rng` they are given.
    """
    def scatter(self, ray_in: Ray, rec, rng) -> Optional[Tuple[Ray, Vector3]]:
        """
        Continue the path at `rec`: returns (scattered ray, attenuation),
        or None when the path is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Vector3:
        return BLACK
