"""Unit tests for the bounding volume hierarchy.

The BVH must return exactly what a linear closest-hit scan over the same
objects returns, for every ray and t range.
"""

import math
import random
import pytest
from pathtracer.core.vector import Vector3, Color
from pathtracer.core.ray import Ray
from pathtracer.geometry import (
    BVHNode, HittableList, Sphere, MovingSphere, XYRect, XZRect, Block, Translate, RotateY,
)
from pathtracer.materials import Lambertian


def random_objects(rng, count):
    objects = []
    for i in range(count):
        # Own material per object, so a hit on the wrong primitive shows up.
        material = Lambertian(Color(rng.random(), rng.random(), rng.random()))
        center = Vector3(rng.uniform(-8, 8), rng.uniform(-8, 8), rng.uniform(-8, 8))
        kind = i % 4
        if kind == 0:
            objects.append(Sphere(center, rng.uniform(0.2, 2.0), material))
        elif kind == 1:
            objects.append(MovingSphere(center, center + Vector3(0, 1, 0), 0.0, 1.0,
                                        rng.uniform(0.2, 1.0), material))
        elif kind == 2:
            objects.append(XZRect(center.x, center.x + 2, center.z, center.z + 3, center.y,
                                  material))
        else:
            objects.append(Translate(RotateY(Block(Vector3(0, 0, 0), Vector3(1, 2, 1),
                                                   material), rng.uniform(0, 90)), center))
    return objects


def assert_same_hit(bvh_rec, scan_rec):
    if scan_rec is None:
        assert bvh_rec is None
    else:
        assert bvh_rec is not None
        assert bvh_rec.t == pytest.approx(scan_rec.t)
        assert bvh_rec.material is scan_rec.material


class TestBVHAgainstLinearScan:
    """Closest-hit results match brute force."""

    @pytest.mark.parametrize("count", [1, 2, 3, 17, 64])
    def test_random_rays(self, count, random_ray):
        rng = random.Random(count)
        objects = random_objects(rng, count)
        scan = HittableList(objects)
        bvh = BVHNode(list(objects), 0, count, 0.0, 1.0, rng)
        for _ in range(300):
            base = random_ray(rng, spread=12.0)
            ray = Ray(base.origin, base.direction, rng.random())
            t_min = rng.choice([0.001, 0.5, 3.0])
            t_max = rng.choice([math.inf, 5.0, 20.0])
            assert_same_hit(bvh.hit(ray, t_min, t_max), scan.hit(ray, t_min, t_max))

    def test_rays_aimed_at_objects(self):
        rng = random.Random(7)
        objects = [Sphere(Vector3(x, 0, z), 0.4, Lambertian(Color(1, 1, 1)))
                   for x in range(-5, 6) for z in range(-5, 6)]
        scan = HittableList(objects)
        bvh = BVHNode(list(objects), 0, len(objects), 0.0, 1.0, rng)
        for obj in objects:
            ray = Ray(Vector3(0, 10, 0), obj.center - Vector3(0, 10, 0))
            scan_rec = scan.hit(ray, 0.001, math.inf)
            assert scan_rec is not None
            assert_same_hit(bvh.hit(ray, 0.001, math.inf), scan_rec)

    def test_world_uses_bvh(self, random_ray):
        rng = random.Random(3)
        world = HittableList(random_objects(rng, 20))
        scan = HittableList(world.objects)
        world.build_bvh(0.0, 1.0, rng)
        assert world.bvh_root is not None
        for _ in range(200):
            ray = random_ray(rng)
            assert_same_hit(world.hit(ray, 0.001, math.inf), scan.hit(ray, 0.001, math.inf))


class TestBVHStructure:
    def test_single_object_leaf(self, grey):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, grey)
        node = BVHNode([sphere], 0, 1)
        assert node.is_leaf
        assert node.left is sphere and node.right is sphere
        assert node.bounding_box() == sphere.bounding_box()
        assert node.depth() == 1

    def test_two_objects_ordered_by_box_min(self, grey, fixed_rng):
        # fixed_rng picks the y axis.
        high = Sphere(Vector3(0, 5, 0), 1.0, grey)
        low = Sphere(Vector3(0, 0, 0), 1.0, grey)
        node = BVHNode([high, low], 0, 2, 0.0, 1.0, fixed_rng)
        assert node.left is low
        assert node.right is high
        assert not node.is_leaf

    def test_box_encloses_children(self, rng):
        objects = random_objects(rng, 30)
        node = BVHNode(list(objects), 0, len(objects), 0.0, 1.0, rng)
        box = node.bounding_box()
        for obj in objects:
            child = obj.bounding_box(0.0, 1.0)
            for axis in range(3):
                assert box.minimum[axis] <= child.minimum[axis]
                assert box.maximum[axis] >= child.maximum[axis]

    def test_node_count_and_depth(self, grey, rng):
        objects = [Sphere(Vector3(i, 0, 0), 0.1, grey) for i in range(8)]
        node = BVHNode(objects, 0, 8, 0.0, 1.0, rng)
        # Median splits over 8 objects give 4 + 2 + 1 internal nodes.
        assert node.node_count() == 7
        assert node.depth() == 3

    def test_sorts_slice_in_place(self, grey):
        objects = [Sphere(Vector3(i, i, i), 0.1, grey) for i in (3, 1, 2, 0)]
        BVHNode(objects, 0, 4, 0.0, 1.0, random.Random(0))
        assert [o.center.x for o in objects] == [0, 1, 2, 3]


class TestBVHErrors:
    def test_empty_list(self):
        with pytest.raises(ValueError):
            BVHNode([], 0, 0)

    def test_empty_world(self):
        with pytest.raises(ValueError):
            HittableList().build_bvh()

    def test_nan_bounding_box(self, grey):
        nan = float("nan")
        objects = [Sphere(Vector3(0, 0, 0), 1.0, grey),
                   Sphere(Vector3(nan, nan, nan), 1.0, grey),
                   Sphere(Vector3(2, 2, 2), 1.0, grey)]
        with pytest.raises(ValueError, match="NaN"):
            BVHNode(objects, 0, 3, 0.0, 1.0, random.Random(0))
