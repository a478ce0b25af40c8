# rtcore/core/utils.py
import math
from typing import Optional

import numpy as np

from rtcore.config import DEFAULT_SEED
from rtcore.core.vector import Vector3

_default_rng = np.random.default_rng(DEFAULT_SEED)


def get_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """
    Returns rng if given, otherwise the process-wide default generator.
    """
    return _default_rng if rng is None else rng


def seed(value: int) -> None:
    """
    Re-seeds the process-wide default generator.
    """
    global _default_rng
    _default_rng = np.random.default_rng(value)


def random_double(rng: Optional[np.random.Generator] = None,
                  lo: float = 0.0, hi: float = 1.0) -> float:
    """
    Uniform float in [lo, hi).
    """
    return lo + (hi - lo) * float(get_rng(rng).random())


def random_int(rng: Optional[np.random.Generator], lo: int, hi: int) -> int:
    """
    Uniform integer in [lo, hi], both ends included.
    """
    return int(get_rng(rng).integers(lo, hi + 1))


def random_vector(rng: Optional[np.random.Generator] = None,
                  lo: float = 0.0, hi: float = 1.0) -> Vector3:
    x, y, z = get_rng(rng).uniform(lo, hi, 3)
    return Vector3(float(x), float(y), float(z))


def random_in_unit_sphere(rng: Optional[np.random.Generator] = None) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    rng = get_rng(rng)
    while True:
        p = random_vector(rng, -1.0, 1.0)
        # Points extremely close to the centre would blow up on normalization.
        if 1e-160 < p.length_squared() < 1.0:
            return p


def random_unit_vector(rng: Optional[np.random.Generator] = None) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Snell refraction of the unit vector uv through a surface with normal n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0
