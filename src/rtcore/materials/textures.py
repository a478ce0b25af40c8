# rtcore/materials/textures.py
import math
from typing import Optional, Union

import numpy as np

from rtcore.config import (
    DEFAULT_PERLIN_POINTS,
    MISSING_TEXTURE_COLOR,
    OUT_OF_RANGE_TEXTURE_COLOR,
    TURBULENCE_DEPTH,
)
from rtcore.core.interval import Interval
from rtcore.core.vector import Color, Point3, Vector3
from rtcore.materials.perlin import Perlin

_UNIT = Interval(0.0, 1.0)


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Point3) -> Color:
        """Sample the texture at surface coordinates (u, v) and point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Point3) -> Color:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern: space is cut into cubes of side `scale`, and
    neighbouring cubes alternate between the even and odd textures.
    """
    def __init__(self, scale: float, even: Union[Vector3, Texture], odd: Union[Vector3, Texture]):
        self.inv_scale = 1.0 / scale
        self.even = even if isinstance(even, Texture) else SolidTexture(even)
        self.odd = odd if isinstance(odd, Texture) else SolidTexture(odd)

    def value(self, u: float, v: float, p: Point3) -> Color:
        x = math.floor(self.inv_scale * p.x)
        y = math.floor(self.inv_scale * p.y)
        z = math.floor(self.inv_scale * p.z)
        is_even = (x + y + z) % 2 == 0
        return self.even.value(u, v, p) if is_even else self.odd.value(u, v, p)


class ImageTexture(Texture):
    """
    A texture backed by an RGB image, looked up by (u, v) with edge clamping.

    Lookups never fail: an image without pixels answers cyan and a lookup
    with undefined (NaN) coordinates answers magenta.
    """
    def __init__(self, pixels: np.ndarray):
        pixels = np.asarray(pixels)
        if pixels.size == 0:
            self.data = np.zeros((0, 0, 3), dtype=np.uint8)
        else:
            if pixels.ndim == 2:
                pixels = pixels[:, :, np.newaxis]
            if pixels.shape[2] < 3:
                # Grayscale (with or without alpha): replicate the luminance.
                self.data = np.repeat(pixels[:, :, :1], 3, axis=2)
            else:
                self.data = pixels[:, :, :3]
        self.height = self.data.shape[0]
        self.width = self.data.shape[1]

    @classmethod
    def from_file(cls, image_path: str) -> "ImageTexture":
        # Imported here: texture_loader builds ImageTexture instances.
        from rtcore.materials.texture_loader import load_image
        return cls(load_image(image_path))

    def value(self, u: float, v: float, p: Point3) -> Color:
        if self.height <= 0 or self.width <= 0:
            return Color(*MISSING_TEXTURE_COLOR)
        if math.isnan(u) or math.isnan(v):
            return Color(*OUT_OF_RANGE_TEXTURE_COLOR)

        # Clamp input texture coordinates to [0,1] x [1,0]
        u = _UNIT.clamp(u)
        v = 1.0 - _UNIT.clamp(v)  # Flip V to image coordinates

        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        pixel = self.data[j, i]
        color_scale = 1.0 / 255.0
        return Color(color_scale * float(pixel[0]),
                     color_scale * float(pixel[1]),
                     color_scale * float(pixel[2]))


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, point_count: int = DEFAULT_PERLIN_POINTS,
                 rng: Optional[np.random.Generator] = None):
        self.noise = Perlin(point_count, rng)
        self.scale = scale

    def value(self, u: float, v: float, p: Point3) -> Color:
        s = p * self.scale
        # Phase-shift a sine along z by the turbulence to get the veins.
        shade = 0.5 * (1.0 + math.sin(s.z + 10.0 * self.noise.turb(s, TURBULENCE_DEPTH)))
        return Color(1.0, 1.0, 1.0) * shade
