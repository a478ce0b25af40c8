# rtcore/materials/isotropic.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from rtcore.core.ray import Ray
from rtcore.core.utils import random_unit_vector
from rtcore.core.vector import Vector3
from rtcore.materials.material import Material, Scatter, as_texture
from rtcore.materials.textures import Texture

if TYPE_CHECKING:
    from rtcore.geometry.hittable import HitRecord


class Isotropic(Material):
    """
    Phase function of a participating medium: scatters uniformly in all directions.
    """
    def __init__(self, albedo: Union[Vector3, Texture]):
        super().__init__(as_texture(albedo))

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: Optional[np.random.Generator] = None) -> Scatter:
        scattered = Ray(rec.p, random_unit_vector(rng), ray_in.time)
        return Scatter(self.texture.value(rec.u, rec.v, rec.p), scattered)
