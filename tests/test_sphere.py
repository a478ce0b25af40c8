"""Unit tests for the Sphere primitive.

Tests cover:
- The canonical hit in front of the camera
- Hits from inside (back face)
- Misses, tangents and interval clipping (open interval semantics)
- Surface (u, v) mapping
- Moving spheres and their bounding boxes
"""

import math

import numpy as np
import pytest

from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval
from rtcore.core.ray import Ray
from rtcore.core.vector import Vector3
from rtcore.geometry.sphere import Sphere


class TestBasicHit:
    """Stationary sphere intersection."""

    def test_canonical_hit(self, gray):
        sphere = Sphere(Vector3(0, 0, -1), 0.5, gray)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        rec = sphere.hit(ray, Interval(0.001, math.inf))

        assert rec is not None
        assert rec.t == pytest.approx(0.5)
        assert rec.p.is_close(Vector3(0, 0, -0.5))
        assert rec.normal.is_close(Vector3(0, 0, 1))
        assert rec.front_face is True
        assert rec.material is gray

    def test_hit_from_inside_flips_normal(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, gray)
        ray = Ray(Vector3(0, 0, 0), Vector3(1, 0, 0))
        rec = sphere.hit(ray, Interval(0.001, math.inf))

        assert rec is not None
        assert rec.t == pytest.approx(1.0)
        assert rec.front_face is False
        # Normal always opposes the incoming ray.
        assert rec.normal.is_close(Vector3(-1, 0, 0))

    def test_miss(self, gray):
        sphere = Sphere(Vector3(0, 0, -1), 0.5, gray)
        ray = Ray(Vector3(0, 2, 0), Vector3(0, 0, -1))
        assert sphere.hit(ray, Interval(0.001, math.inf)) is None

    def test_sphere_behind_ray(self, gray):
        sphere = Sphere(Vector3(0, 0, 1), 0.5, gray)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert sphere.hit(ray, Interval(0.001, math.inf)) is None

    def test_far_root_used_when_near_root_clipped(self, gray):
        sphere = Sphere(Vector3(0, 0, -1), 0.5, gray)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        rec = sphere.hit(ray, Interval(0.75, math.inf))
        assert rec is not None
        assert rec.t == pytest.approx(1.5)

    def test_root_on_interval_bound_is_rejected(self, gray):
        sphere = Sphere(Vector3(0, 0, -1), 0.5, gray)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        # Both roots (0.5 and 1.5) sit exactly on the bounds.
        assert sphere.hit(ray, Interval(0.5, 1.5)) is None

    def test_zero_direction_is_no_hit(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, gray)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 0))
        assert sphere.hit(ray, Interval(0.001, math.inf)) is None

    def test_negative_radius_clamps_to_zero(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), -1.0, gray)
        assert sphere.radius == 0.0


class TestOpenInterval:
    """Any reported t lies strictly inside the query interval."""

    def test_random_rays_respect_interval(self, gray, rng):
        sphere = Sphere(Vector3(0.2, -0.1, -2), 1.0, gray)
        for _ in range(200):
            origin = Vector3(*rng.uniform(-3, 3, 3))
            direction = Vector3(*rng.uniform(-1, 1, 3))
            t0, t1 = sorted(rng.uniform(-2, 6, 2))
            ray_t = Interval(float(t0), float(t1))
            rec = sphere.hit(Ray(origin, direction), ray_t)
            if rec is not None:
                assert t0 < rec.t < t1


class TestUV:
    """Surface coordinates derived from the outward normal."""

    @pytest.mark.parametrize(
        "point, expected",
        [
            (Vector3(1, 0, 0), (0.5, 0.5)),
            (Vector3(0, 1, 0), (0.5, 1.0)),
            (Vector3(0, -1, 0), (0.5, 0.0)),
            (Vector3(-1, 0, 0), (0.0, 0.5)),
            (Vector3(0, 0, 1), (0.25, 0.5)),
            (Vector3(0, 0, -1), (0.75, 0.5)),
        ],
    )
    def test_known_points(self, point, expected):
        u, v = Sphere.get_sphere_uv(point)
        # u wraps at -X, where 0 and 1 are the same meridian.
        assert u % 1.0 == pytest.approx(expected[0] % 1.0)
        assert v == pytest.approx(expected[1])

    def test_hit_record_carries_uv(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), 2.0, gray)
        ray = Ray(Vector3(5, 0, 0), Vector3(-1, 0, 0))
        rec = sphere.hit(ray, Interval(0.001, math.inf))
        assert rec.u == pytest.approx(0.5)
        assert rec.v == pytest.approx(0.5)


class TestMovingSphere:
    """Center interpolated by ray time."""

    def test_center_at(self, gray):
        sphere = Sphere.moving(Vector3(0, 0, 0), Vector3(2, 0, 0), 0.5, gray)
        assert sphere.center_at(0.0).is_close(Vector3(0, 0, 0))
        assert sphere.center_at(0.5).is_close(Vector3(1, 0, 0))
        assert sphere.center_at(1.0).is_close(Vector3(2, 0, 0))

    def test_hit_depends_on_time(self, gray):
        sphere = Sphere.moving(Vector3(0, 0, -2), Vector3(4, 0, -2), 0.5, gray)
        ray_t = Interval(0.001, math.inf)
        assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1), 0.0), ray_t) is not None
        assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1), 1.0), ray_t) is None
        assert sphere.hit(Ray(Vector3(4, 0, 0), Vector3(0, 0, -1), 1.0), ray_t) is not None

    def test_bounding_box_covers_both_ends(self, gray):
        sphere = Sphere.moving(Vector3(0, 0, 0), Vector3(4, 1, 0), 1.0, gray)
        expected = AABB.from_points(Vector3(-1, -1, -1), Vector3(5, 2, 1))
        assert sphere.bounding_box() == expected

    def test_stationary_bounding_box(self, gray):
        sphere = Sphere(Vector3(1, 2, 3), 0.5, gray)
        expected = AABB.from_points(Vector3(0.5, 1.5, 2.5), Vector3(1.5, 2.5, 3.5))
        assert sphere.bounding_box() == expected
