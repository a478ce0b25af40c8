# rtcore/materials/__init__.py
from rtcore.materials.textures import (
    Texture,
    SolidTexture,
    CheckerTexture,
    ImageTexture,
    NoiseTexture,
)
from rtcore.materials.perlin import Perlin
from rtcore.materials.material import Material, Scatter
from rtcore.materials.lambertian import Lambertian
from rtcore.materials.metal import Metal
from rtcore.materials.dielectric import Dielectric
from rtcore.materials.diffuse_light import DiffuseLight
from rtcore.materials.isotropic import Isotropic
from rtcore.materials.texture_loader import load_image, load_texture, create_image_material

__all__ = [
    "Texture",
    "SolidTexture",
    "CheckerTexture",
    "ImageTexture",
    "NoiseTexture",
    "Perlin",
    "Material",
    "Scatter",
    "Lambertian",
    "Metal",
    "Dielectric",
    "DiffuseLight",
    "Isotropic",
    "load_image",
    "load_texture",
    "create_image_material",
]
