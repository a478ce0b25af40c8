"""Unit tests for Vector3, Ray and the random sampling helpers."""

import math

import numpy as np
import pytest

import rtcore
from rtcore.core import utils
from rtcore.core.ray import Ray
from rtcore.core.vector import Vector3


class TestVector3:

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert b / 2 == Vector3(2, 2.5, 3)

    def test_numpy_scalars_scale(self):
        v = Vector3(1, 2, 3)
        assert v * np.int64(2) == Vector3(2, 4, 6)
        assert v * np.float32(0.5) == Vector3(0.5, 1.0, 1.5)

    def test_products(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert Vector3(3, 4, 0).length() == 5

    def test_normalize_zero_vector(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_indexing(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        assert list(v) == [7, 8, 9]
        with pytest.raises(IndexError):
            v[3]

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-3, 0, 0).near_zero()


class TestRay:

    def test_at(self):
        ray = Ray(Vector3(1, 1, 1), Vector3(0, 0, -2), time=0.5)
        assert ray.at(0.5) == Vector3(1, 1, 0)
        assert ray.time == 0.5


class TestSampling:

    def test_random_int_is_inclusive(self, rng):
        values = {utils.random_int(rng, 0, 2) for _ in range(200)}
        assert values == {0, 1, 2}

    def test_random_double_range(self, rng):
        for _ in range(100):
            assert 2.0 <= utils.random_double(rng, 2.0, 3.0) < 3.0

    def test_random_unit_vector(self, rng):
        for _ in range(100):
            assert utils.random_unit_vector(rng).length() == pytest.approx(1.0)

    def test_random_in_unit_sphere(self, rng):
        for _ in range(100):
            assert utils.random_in_unit_sphere(rng).length_squared() < 1.0

    def test_seed_makes_default_generator_reproducible(self):
        utils.seed(123)
        first = [utils.random_double() for _ in range(5)]
        utils.seed(123)
        second = [utils.random_double() for _ in range(5)]
        assert first == second

    def test_explicit_generator_is_used(self):
        a = utils.random_double(np.random.default_rng(5))
        b = utils.random_double(np.random.default_rng(5))
        assert a == b


class TestReflectRefract:

    def test_reflect(self):
        assert utils.reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)

    def test_refract_at_normal_incidence(self):
        out = utils.refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1.0 / 1.5)
        assert out.is_close(Vector3(0, -1, 0))

    def test_degrees_to_radians(self):
        assert utils.degrees_to_radians(180.0) == pytest.approx(math.pi)


def test_package_exports():
    assert rtcore.__version__
    for name in ("Interval", "AABB", "Ray", "Sphere", "Quad", "BVHNode", "build_index",
                 "ConstantMedium", "Lambertian", "Dielectric"):
        assert hasattr(rtcore, name)
