# materials/perlin.py
import numpy as np
from pathtracer.core.vector import Vector3
from pathtracer.core.kernels import perlin_noise, perlin_turbulence

POINT_COUNT = 256

class Perlin:
    """
    Lattice noise generator: a table of random floats indexed through three
    random permutations, trilinearly interpolated between lattice points.
    The tables are built once and only read afterwards.
    """
    def __init__(self, rng: np.random.Generator = None):
        if rng is None:
            rng = np.random.default_rng()
        self.ranfloat = rng.random(POINT_COUNT)
        self.perm_x = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_y = rng.permutation(POINT_COUNT).astype(np.int64)
        self.perm_z = rng.permutation(POINT_COUNT).astype(np.int64)

    def noise(self, p: Vector3) -> float:
        return perlin_noise(float(p.x), float(p.y), float(p.z),
                            self.ranfloat, self.perm_x, self.perm_y, self.perm_z)

    def turb(self, p: Vector3, depth: int = 7) -> float:
        return perlin_turbulence(float(p.x), float(p.y), float(p.z),
                                 self.ranfloat, self.perm_x, self.perm_y, self.perm_z,
                                 depth)
