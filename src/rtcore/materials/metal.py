# rtcore/materials/metal.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from rtcore.core.ray import Ray
from rtcore.core.utils import random_unit_vector, reflect
from rtcore.core.vector import Vector3
from rtcore.materials.material import Material, Scatter, as_texture
from rtcore.materials.textures import Texture

if TYPE_CHECKING:
    from rtcore.geometry.hittable import HitRecord


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    fuzz in [0, 1] controls how far reflections stray from the mirror direction.
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        if fuzz < 0:
            raise ValueError(f"Metal fuzz must be non-negative, got {fuzz}")
        super().__init__(as_texture(albedo))
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: Optional[np.random.Generator] = None) -> Optional[Scatter]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if self.fuzz > 0:
            reflected = reflected + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, reflected, ray_in.time)

        # Absorb the ray if the fuzz pushed it below the surface.
        if scattered.direction.dot(rec.normal) <= 0:
            return None
        return Scatter(self.texture.value(rec.u, rec.v, rec.p), scattered)
