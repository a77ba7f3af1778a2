# core/kernels.py

import math
from numba import njit

# error_model="numpy" gives IEEE semantics for division by zero (±inf / nan)
# instead of raising ZeroDivisionError, which the slab test relies on.

@njit(nogil=True, error_model="numpy")
def slab_hit(ox, oy, oz, dx, dy, dz,
             min_x, min_y, min_z, max_x, max_y, max_z,
             t_min, t_max):
    """Ray / axis-aligned box slab test on plain scalars."""
    origin = (float(ox), float(oy), float(oz))
    direction = (float(dx), float(dy), float(dz))
    box_min = (float(min_x), float(min_y), float(min_z))
    box_max = (float(max_x), float(max_y), float(max_z))
    t_min = float(t_min)
    t_max = float(t_max)
    for i in range(3):
        invD = 1.0 / direction[i]
        t0 = (box_min[i] - origin[i]) * invD
        t1 = (box_max[i] - origin[i]) * invD
        if invD < 0.0:
            t0, t1 = t1, t0
        t_min = t0 if t0 > t_min else t_min
        t_max = t1 if t1 < t_max else t_max
        if t_max <= t_min:
            return False
    return True

@njit(nogil=True, error_model="numpy")
def sphere_root(a, half_b, c, t_min, t_max):
    """
    Nearest root of a*t^2 + 2*half_b*t + c = 0 strictly inside (t_min, t_max).
    Returns nan when there is none.
    """
    discriminant = half_b * half_b - a * c
    if discriminant < 0.0:
        return math.nan

    sqrtd = math.sqrt(discriminant)
    root = (-half_b - sqrtd) / a
    if root <= t_min or root >= t_max:
        root = (-half_b + sqrtd) / a
        if root <= t_min or root >= t_max:
            return math.nan
    return root

@njit(nogil=True)
def perlin_noise(px, py, pz, ranfloat, perm_x, perm_y, perm_z):
    """Trilinearly interpolated lattice noise in [0, 1)."""
    fpx = math.floor(px)
    fpy = math.floor(py)
    fpz = math.floor(pz)

    u = px - fpx
    v = py - fpy
    w = pz - fpz

    i = int(fpx)
    j = int(fpy)
    k = int(fpz)
    mask = ranfloat.shape[0] - 1

    accum = 0.0
    for di in range(2):
        xterm = perm_x[(i + di) & mask]
        iterm = di * u + (1 - di) * (1.0 - u)
        for dj in range(2):
            yterm = perm_y[(j + dj) & mask]
            jterm = dj * v + (1 - dj) * (1.0 - v)
            for dk in range(2):
                zterm = perm_z[(k + dk) & mask]
                kterm = dk * w + (1 - dk) * (1.0 - w)
                accum += iterm * jterm * kterm * ranfloat[xterm ^ yterm ^ zterm]
    return accum

@njit(nogil=True)
def perlin_turbulence(px, py, pz, ranfloat, perm_x, perm_y, perm_z, depth):
    """Sum of `depth` noise octaves, doubling frequency and halving weight."""
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * perlin_noise(px, py, pz, ranfloat, perm_x, perm_y, perm_z)
        weight *= 0.5
        px *= 2.0
        py *= 2.0
        pz *= 2.0
    return abs(accum)
