# camera/camera.py
import math
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk

class Camera:
    """
    Look-at camera with a thin lens for depth of field and a shutter
    interval [time0, time1] for motion blur. The camera is never changed
    after construction, so render threads can share one instance.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.position = look_from
        self.vfov = vfov  # degrees, vertical
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

        # w points backwards, away from the scene.
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Viewport placed on the focus plane.
        half_height = math.tan(math.radians(vfov) / 2) * focus_dist
        half_width = aspect_ratio * half_height
        self.horizontal = self.u * (2.0 * half_width)
        self.vertical = self.v * (2.0 * half_height)
        self.lower_left_corner = (look_from - self.u * half_width - self.v * half_height
                                  - self.w * focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Ray through viewport point (s, t), both in [0, 1] from the lower-left
        corner, leaving a random lens point at a random shutter time.
        """
        if self.time1 > self.time0:
            time = rng.uniform(self.time0, self.time1)
        else:
            time = self.time0

        origin = self.position
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            origin = origin + self.u * rd.x + self.v * rd.y

        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        return Ray(origin, target - origin, time)
