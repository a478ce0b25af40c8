# rtcore/materials/diffuse_light.py
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from rtcore.core.ray import Ray
from rtcore.core.vector import Color, Point3, Vector3
from rtcore.materials.material import Material, Scatter, as_texture
from rtcore.materials.textures import Texture

if TYPE_CHECKING:
    from rtcore.geometry.hittable import HitRecord


class DiffuseLight(Material):
    """
    Emissive material that provides constant radiance with optional texture support.

    The texture can be used to create patterns in the emitted light.
    """
    def __init__(self, emit: Union[Vector3, Texture]):
        super().__init__(as_texture(emit))

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: Optional[np.random.Generator] = None) -> Optional[Scatter]:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """
        Return the emitted radiance.

        Args:
            u (float): The horizontal texture coordinate.
            v (float): The vertical texture coordinate.
            p (Point3): The hit point.

        Returns:
            Color: The emission color from the texture.
        """
        return self.texture.value(u, v, p)
