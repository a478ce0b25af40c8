# rtcore/materials/perlin.py
import logging
import math
from typing import Optional

import numpy as np

from rtcore.config import DEFAULT_PERLIN_POINTS, TURBULENCE_DEPTH
from rtcore.core.utils import get_rng, random_vector
from rtcore.core.vector import Point3, Vector3

logger = logging.getLogger(__name__)


class Perlin:
    """
    Gradient noise over a lattice of random unit vectors.
    """
    def __init__(self, point_count: int = DEFAULT_PERLIN_POINTS,
                 rng: Optional[np.random.Generator] = None):
        rng = get_rng(rng)
        self.point_count = point_count
        self.ranvec = [random_vector(rng, -1.0, 1.0).normalize() for _ in range(point_count)]
        # Initialize permutation tables
        self.perm_x = rng.permutation(point_count).tolist()
        self.perm_y = rng.permutation(point_count).tolist()
        self.perm_z = rng.permutation(point_count).tolist()
        logger.debug("Perlin lattice initialized with %d points", point_count)

    def noise(self, p: Point3) -> float:
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz

        i, j, k = int(fx), int(fy), int(fz)
        n = self.point_count

        # Hash coordinates of the 8 cube corners
        c = [[[self.ranvec[(self.perm_x[(i + di) % n] ^
                            self.perm_y[(j + dj) % n] ^
                            self.perm_z[(k + dk) % n]) % n]
               for dk in range(2)]
              for dj in range(2)]
             for di in range(2)]

        return self._trilinear_interp(c, u, v, w)

    def turb(self, p: Point3, depth: int = TURBULENCE_DEPTH) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2.0
        return abs(accum)

    @staticmethod
    def _trilinear_interp(c, u: float, v: float, w: float) -> float:
        # Hermite smoothing of the fractional parts
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)
        accum = 0.0
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    weight_v = Vector3(u - i, v - j, w - k)
                    accum += ((i * uu + (1 - i) * (1 - uu)) *
                              (j * vv + (1 - j) * (1 - vv)) *
                              (k * ww + (1 - k) * (1 - ww)) *
                              c[i][j][k].dot(weight_v))
        return accum
