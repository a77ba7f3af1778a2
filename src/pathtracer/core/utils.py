# core/utils.py
import math
import random
import threading
from pathtracer.core.vector import Vector3

_local = threading.local()

def thread_rng() -> random.Random:
    """
    Returns the random generator owned by the calling thread. Used by code
    whose signature cannot carry an explicit generator (volume sampling).
    """
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng

def seed_thread_rng(seed=None) -> random.Random:
    """Replaces the calling thread's generator with a freshly seeded one."""
    _local.rng = random.Random(seed)
    return _local.rng

def random_in_unit_sphere(rng) -> Vector3:
    """Uniform point inside the unit ball, by rejection sampling."""
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """Uniform direction on the unit sphere."""
    return random_in_unit_sphere(rng).normalize()

def random_in_unit_disk(rng) -> Vector3:
    """Random point in the z=0 unit disk, used for the lens aperture."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.dot(p) < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """Mirror v about the plane with unit normal n."""
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """Snell refraction of the unit vector uv through a surface with normal n."""
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def schlick(cosine: float, ref_idx: float) -> float:
    # Schlick's approximation for reflectance.
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
