# rtcore/materials/lambertian.py
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


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        # Store either a solid color or a texture.
        super().__init__(as_texture(albedo))

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: Optional[np.random.Generator] = None) -> Scatter:
        """
        Scatter a ray according to a Lambertian reflection model.
        Always scatters.
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction, ray_in.time)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return Scatter(attenuation, scattered)
