"""Pytest configuration for rtcore tests.

Shared fixtures: a seeded random generator (so BVH shapes and scatter
directions are reproducible) and a small palette of materials.
"""

import numpy as np
import pytest

from rtcore.core.vector import Color
from rtcore.materials import Dielectric, DiffuseLight, Lambertian, Metal


@pytest.fixture
def rng():
    """A freshly seeded generator for each test."""
    return np.random.default_rng(42)


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def palette():
    """One material of each surface kind."""
    return {
        "diffuse": Lambertian(Color(0.8, 0.3, 0.3)),
        "metal": Metal(Color(0.8, 0.8, 0.8), 0.2),
        "glass": Dielectric(1.5),
        "light": DiffuseLight(Color(4.0, 4.0, 4.0)),
    }
