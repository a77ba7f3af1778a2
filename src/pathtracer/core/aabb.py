# core/aabb.py
from typing import Optional
from pathtracer.core.vector import Vector3
from pathtracer.core.kernels import slab_hit

class AABB:
    """
    Axis-aligned bounding box. Boxes are never mutated; larger boxes are
    built with surrounding_box().
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, narrow the [t_min, t_max] interval.
        # A zero direction component produces +-inf which the min/max
        # narrowing absorbs.
        o = ray.origin
        d = ray.direction
        lo = self.minimum
        hi = self.maximum
        return slab_hit(o.x, o.y, o.z, d.x, d.y, d.z,
                        lo.x, lo.y, lo.z, hi.x, hi.y, hi.z,
                        t_min, t_max)

    def axis_min(self, axis: int) -> float:
        return self.minimum[axis]

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.minimum == other.minimum and self.maximum == other.maximum

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

    @staticmethod
    def surrounding_box(box0: Optional["AABB"], box1: Optional["AABB"]) -> Optional["AABB"]:
        """
        Smallest box containing both inputs. A missing box is the identity,
        so an empty accumulation can be folded with the first real box.
        """
        if box0 is None:
            return box1
        if box1 is None:
            return box0
        return AABB(
            Vector3(*(min(a, b) for a, b in zip(box0.minimum, box1.minimum))),
            Vector3(*(max(a, b) for a, b in zip(box0.maximum, box1.maximum))),
        )
