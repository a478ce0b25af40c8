# rtcore/materials/dielectric.py
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

import numpy as np

from rtcore.core.ray import Ray
from rtcore.core.utils import random_double, reflect, refract
from rtcore.core.vector import Color
from rtcore.materials.material import Material, Scatter

if TYPE_CHECKING:
    from rtcore.geometry.hittable import HitRecord


def reflectance(cosine: float, ref_idx: float) -> float:
    """
    Schlick's approximation of the reflectance of a dielectric interface.
    """
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)


class Dielectric(Material):
    """
    Clear refractive material (glass, water) with refractive index ir.
    """
    def __init__(self, ir: float):
        if ir <= 0:
            raise ValueError(f"Refractive index must be positive, got {ir}")
        super().__init__()
        self.ir = ir

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: Optional[np.random.Generator] = None) -> Scatter:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ir if rec.front_face else self.ir

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        if refraction_ratio == 1.0:
            # Index-matched interface: nothing to reflect off, nothing bends.
            return Scatter(attenuation, Ray(rec.p, unit_direction, ray_in.time))

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, refraction_ratio) > random_double(rng):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return Scatter(attenuation, Ray(rec.p, direction, ray_in.time))
