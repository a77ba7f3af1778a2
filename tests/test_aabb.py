"""Unit tests for axis-aligned bounding boxes."""

import math
from pathtracer.core.aabb import AABB
from pathtracer.core.vector import Vector3
from pathtracer.core.ray import Ray


def unit_box():
    return AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))


class TestSurroundingBox:
    """Union of boxes."""

    def test_union(self):
        box0 = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        box1 = AABB(Vector3(0, 0, 0), Vector3(2, 2, 2))
        assert AABB.surrounding_box(box0, box1) == AABB(Vector3(-1, -1, -1), Vector3(2, 2, 2))

    def test_union_is_symmetric(self):
        box0 = AABB(Vector3(-3, 0, 1), Vector3(0, 1, 2))
        box1 = AABB(Vector3(0, -2, 0), Vector3(1, 0.5, 5))
        assert AABB.surrounding_box(box0, box1) == AABB.surrounding_box(box1, box0)

    def test_none_is_identity(self):
        box = unit_box()
        assert AABB.surrounding_box(None, box) is box
        assert AABB.surrounding_box(box, None) is box
        assert AABB.surrounding_box(None, None) is None


class TestSlabHit:
    """Ray / box overlap test."""

    def test_ray_through_box(self):
        r = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert unit_box().hit(r, 0.001, math.inf)

    def test_ray_missing_box(self):
        r = Ray(Vector3(5, 5, -5), Vector3(0, 0, 1))
        assert not unit_box().hit(r, 0.001, math.inf)

    def test_box_behind_ray(self):
        r = Ray(Vector3(0, 0, 5), Vector3(0, 0, 1))
        assert not unit_box().hit(r, 0.001, math.inf)

    def test_range_ends_before_box(self):
        r = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not unit_box().hit(r, 0.001, 3.0)

    def test_zero_direction_component_inside_slab(self):
        # Direction has no x or y part; the origin lies within those slabs.
        r = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        assert unit_box().hit(r, 0.001, math.inf)

    def test_zero_direction_component_outside_slab(self):
        r = Ray(Vector3(2.0, 0.5, -5), Vector3(0, 0, 1))
        assert not unit_box().hit(r, 0.001, math.inf)

    def test_origin_inside_box(self):
        r = Ray(Vector3(0, 0, 0), Vector3(1, 1, 1))
        assert unit_box().hit(r, 0.001, math.inf)


class TestBoxHelpers:
    def test_axis_min(self):
        box = AABB(Vector3(0, -2, 5), Vector3(1, 2, 6))
        assert [box.axis_min(axis) for axis in range(3)] == [0, -2, 5]

    def test_equality(self):
        assert unit_box() == unit_box()
        assert unit_box() != AABB(Vector3(-1, -1, -1), Vector3(1, 1, 2))
