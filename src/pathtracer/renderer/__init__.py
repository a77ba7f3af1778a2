"""Radiance estimation, the multi-threaded renderer and image output."""

from pathtracer.renderer.estimator import ray_color, sky_gradient, resolve_background
from pathtracer.renderer.parallel import Renderer, render, render_worker, split_samples
from pathtracer.renderer.output import to_rgb8, reinhard_tone_mapping, write_image

__all__ = [
    "ray_color", "sky_gradient", "resolve_background",
    "Renderer", "render", "render_worker", "split_samples",
    "to_rgb8", "reinhard_tone_mapping", "write_image",
]
