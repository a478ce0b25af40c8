# rtcore/__init__.py
"""
Ray-scene intersection core: bounding volume hierarchy, geometry and
material scattering for a recursive ray tracer.

Typical use from an integrator:

    world = build_index(objects)
    rec = world.hit(ray, Interval(0.001, INFINITY))
    if rec is not None:
        result = rec.material.scatter(ray, rec)
"""
from rtcore.config import INFINITY
from rtcore.core import AABB, Color, Interval, Point3, Ray, Vector3
from rtcore.geometry import (
    BVHNode,
    ConstantMedium,
    HitRecord,
    Hittable,
    HittableList,
    Quad,
    RotateY,
    Sphere,
    Translate,
    box_volume,
    build_index,
)
from rtcore.materials import (
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    ImageTexture,
    Isotropic,
    Lambertian,
    Material,
    Metal,
    NoiseTexture,
    Scatter,
    SolidTexture,
    Texture,
)

__version__ = "0.1.0"

__all__ = [
    "INFINITY",
    "AABB",
    "Color",
    "Interval",
    "Point3",
    "Ray",
    "Vector3",
    "BVHNode",
    "ConstantMedium",
    "HitRecord",
    "Hittable",
    "HittableList",
    "Quad",
    "RotateY",
    "Sphere",
    "Translate",
    "box_volume",
    "build_index",
    "CheckerTexture",
    "Dielectric",
    "DiffuseLight",
    "ImageTexture",
    "Isotropic",
    "Lambertian",
    "Material",
    "Metal",
    "NoiseTexture",
    "Scatter",
    "SolidTexture",
    "Texture",
]
