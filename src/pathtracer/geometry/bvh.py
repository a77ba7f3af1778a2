# geometry/bvh.py
import math
import random
from typing import Optional
from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord

def _box_min_key(axis: int, time0: float, time1: float):
    """Sort key on the minimum corner of an object's box along one axis."""
    def key(obj) -> float:
        value = obj.bounding_box(time0, time1).axis_min(axis)
        if math.isnan(value):
            raise ValueError(f"unexpected NaN in bounding box {'xyz'[axis]}")
        return value
    return key

class BVHNode(Hittable):
    """
    Node of a bounding volume hierarchy built over objects[start:end].

    Every node has two children, each either a primitive or another
    BVHNode. A node over a single object is a leaf whose children are
    both that object. The slice of `objects` is reordered in place.
    """
    def __init__(self, objects: list, start: int, end: int,
                 time0: float = 0.0, time1: float = 1.0, rng=None):
        object_span = end - start
        if object_span <= 0:
            raise ValueError("cannot build a BVH node over an empty object list")
        if rng is None:
            rng = random

        # Split axis is chosen at random rather than by a cost heuristic.
        axis = rng.randint(0, 2)
        key = _box_min_key(axis, time0, time1)

        if object_span == 1:
            self.left = self.right = objects[start]
            self.is_leaf = True
            self.object = objects[start]
        elif object_span == 2:
            left, right = objects[start], objects[start + 1]
            if key(left) > key(right):
                left, right = right, left
            self.left = left
            self.right = right
            self.is_leaf = False
            self.object = None
        else:
            objects[start:end] = sorted(objects[start:end], key=key)
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, time0, time1, rng)
            self.right = BVHNode(objects, mid, end, time0, time1, rng)
            self.is_leaf = False
            self.object = None

        self.box = AABB.surrounding_box(self.left.bounding_box(time0, time1),
                                        self.right.bounding_box(time0, time1))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        if self.is_leaf:
            return self.object.hit(ray, t_min, t_max)

        hit_left = self.left.hit(ray, t_min, t_max)

        # The right subtree only needs to beat the closest hit found so far.
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)
        return hit_right if hit_right is not None else hit_left

    def bounding_box(self, time0: float = 0.0, time1: float = 1.0) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of BVH levels below and including this node."""
        children = [c for c in (self.left, self.right) if isinstance(c, BVHNode)]
        if self.is_leaf or not children:
            return 1
        return 1 + max(c.depth() for c in children)

    def node_count(self) -> int:
        count = 1
        if not self.is_leaf:
            for child in (self.left, self.right):
                if isinstance(child, BVHNode):
                    count += child.node_count()
        return count
