# rtcore/geometry/constant_medium.py
import math
from typing import Optional, Union

import numpy as np

from rtcore.config import INFINITY, MEDIUM_EXIT_OFFSET
from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval, UNIVERSE
from rtcore.core.ray import Ray
from rtcore.core.utils import get_rng
from rtcore.core.vector import Color, Vector3
from rtcore.geometry.hittable import Hittable, HitRecord
from rtcore.materials.isotropic import Isotropic
from rtcore.materials.textures import Texture


class ConstantMedium(Hittable):
    """
    Homogeneous fog or smoke filling a closed boundary object.

    A ray crossing the medium scatters after an exponentially distributed
    free path; the hit it reports has no surface, so its normal is zero and
    its material is the isotropic phase function.
    """
    def __init__(self, boundary: Hittable, density: float,
                 albedo: Union[Color, Texture],
                 rng: Optional[np.random.Generator] = None):
        if density <= 0:
            raise ValueError(f"Medium density must be positive, got {density}")
        self.boundary = boundary
        self.neg_inv_density = -1.0 / density
        self.phase_function = Isotropic(albedo)
        self.rng = rng

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        rec1 = self.boundary.hit(ray, UNIVERSE)
        if rec1 is None:
            return None
        rec2 = self.boundary.hit(ray, Interval(rec1.t + MEDIUM_EXIT_OFFSET, INFINITY))
        if rec2 is None:
            return None

        t_enter = max(rec1.t, ray_t.min)
        t_exit = min(rec2.t, ray_t.max)
        if t_enter >= t_exit:
            return None
        if t_enter < 0:
            t_enter = 0.0

        ray_length = ray.direction.length()
        distance_inside_boundary = (t_exit - t_enter) * ray_length
        # 1 - U lies in (0, 1], so the logarithm stays finite.
        hit_distance = self.neg_inv_density * math.log(1.0 - get_rng(self.rng).random())
        if hit_distance > distance_inside_boundary:
            return None

        t = t_enter + hit_distance / ray_length
        return HitRecord(
            p=ray.at(t),
            normal=Vector3(0.0, 0.0, 0.0),  # no surface inside a medium
            t=t,
            front_face=True,
            material=self.phase_function,
        )

    def bounding_box(self) -> AABB:
        return self.boundary.bounding_box()
