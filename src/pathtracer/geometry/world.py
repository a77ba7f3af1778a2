# geometry/world.py
import logging
from typing import Optional, List
from pathtracer.core.ray import Ray
from pathtracer.core.aabb import AABB
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.bvh import BVHNode

logger = logging.getLogger(__name__)

class HittableList(Hittable):
    """
    A list of Hittable objects. Once build_bvh() has been called, queries go
    through the BVH and the list must no longer be modified.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.bvh_root = None  # top-level BVH node

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, time0: float = 0.0, time1: float = 1.0, rng=None):
        if not self.objects:
            raise ValueError("cannot build a BVH over an empty object list")
        self.bvh_root = BVHNode(list(self.objects), 0, len(self.objects), time0, time1, rng)
        logger.info("Built BVH over %d objects (depth %d, %d nodes)",
                    len(self.objects), self.bvh_root.depth(), self.bvh_root.node_count())
        return self.bvh_root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        closest = None
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest.t if closest is not None else t_max)
            if rec is not None:
                closest = rec
        return closest

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> Optional[AABB]:
        box = None
        for obj in self.objects:
            box = AABB.surrounding_box(box, obj.bounding_box(time0, time1))
        return box
