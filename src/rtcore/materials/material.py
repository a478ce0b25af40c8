# rtcore/materials/material.py
from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, Optional, Union

import numpy as np

from rtcore.core.ray import Ray
from rtcore.core.vector import Color, Point3, Vector3
from rtcore.materials.textures import Texture, SolidTexture

if TYPE_CHECKING:
    from rtcore.geometry.hittable import HitRecord


class Scatter(NamedTuple):
    """
    Outcome of a successful scatter: how much light the bounce keeps and
    where the path continues.
    """
    attenuation: Color
    scattered: Ray


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """
    Wraps a plain color in a SolidTexture; textures pass through unchanged.
    """
    if isinstance(albedo, Vector3):
        return SolidTexture(albedo)
    return albedo


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials can have textures for their properties.
    """
    def __init__(self, texture: Optional[Texture] = None):
        self.texture = texture

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: Optional[np.random.Generator] = None) -> Optional[Scatter]:
        """
        Computes the attenuation and the scattered ray.
        Returns None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Point3) -> Color:
        """
        Light emitted at the hit point; black for everything but lights.
        """
        return Color(0.0, 0.0, 0.0)

    def get_texture_color(self, u: float, v: float, p: Point3) -> Optional[Color]:
        """
        Get the color from the texture at the given surface coordinates.
        If no texture is set, returns None.
        """
        if self.texture is None:
            return None
        return self.texture.value(u, v, p)
