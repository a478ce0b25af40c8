"""Unit tests for HittableList, the brute-force aggregate."""

import math

import pytest

from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval
from rtcore.core.ray import Ray
from rtcore.core.vector import Vector3
from rtcore.geometry.sphere import Sphere
from rtcore.geometry.world import HittableList

RAY_T = Interval(0.001, math.inf)


class TestNearestHit:
    """Only strictly closer candidates replace the current best."""

    def test_empty_list_never_hits(self):
        world = HittableList()
        assert world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), RAY_T) is None

    @pytest.mark.parametrize("reverse", [False, True])
    def test_nearest_hit_independent_of_order(self, gray, reverse):
        near = Sphere(Vector3(0, 0, -2), 0.5, gray)
        far = Sphere(Vector3(0, 0, -5), 0.5, gray)
        objects = [far, near] if reverse else [near, far]
        rec = HittableList(objects).hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), RAY_T)
        assert rec is not None
        assert rec.t == pytest.approx(1.5)

    def test_respects_interval(self, gray):
        world = HittableList([Sphere(Vector3(0, 0, -2), 0.5, gray)])
        assert world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), Interval(0.001, 1.0)) is None

    def test_material_of_nearest_object(self, palette):
        world = HittableList([
            Sphere(Vector3(0, 0, -5), 0.5, palette["metal"]),
            Sphere(Vector3(0, 0, -2), 0.5, palette["glass"]),
        ])
        rec = world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), RAY_T)
        assert rec.material is palette["glass"]


class TestBoundingBox:
    """The aggregate box grows as members are added."""

    def test_empty_box(self):
        assert HittableList().bounding_box() == AABB()

    def test_incremental_union(self, gray):
        world = HittableList()
        world.add(Sphere(Vector3(0, 0, 0), 1.0, gray))
        assert world.bounding_box() == AABB.from_points(Vector3(-1, -1, -1), Vector3(1, 1, 1))
        world.add(Sphere(Vector3(5, 0, 0), 1.0, gray))
        assert world.bounding_box() == AABB.from_points(Vector3(-1, -1, -1), Vector3(6, 1, 1))
        assert len(world) == 2

    def test_clear(self, gray):
        world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, gray)])
        world.clear()
        assert len(world) == 0
        assert world.bounding_box() == AABB()
