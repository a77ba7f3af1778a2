# renderer/estimator.py
import math
from typing import Callable, Union
from pathtracer.config import T_MIN
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, Color

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)

Background = Union[Color, Callable[[Ray], Color]]

def sky_gradient(ray: Ray) -> Color:
    """Blue-to-white vertical gradient based on the ray's direction."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def resolve_background(background: Background, ray: Ray) -> Color:
    if isinstance(background, Vector3):
        return background
    return background(ray)

def ray_color(ray: Ray, world, background: Background, depth: int, rng) -> Color:
    """
    Monte-Carlo estimate of the radiance arriving along `ray`.

    Follows one scattered path per call until it escapes to the background,
    hits a non-scattering material, or the depth budget runs out. Running out
    of depth returns black, which slightly darkens deep paths.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return resolve_background(background, ray)

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    scattered, attenuation = scatter
    return emitted + attenuation * ray_color(scattered, world, background, depth - 1, rng)
