# rtcore/geometry/__init__.py
"""
Hittable geometry: primitives, instancing transforms, participating media
and the aggregates (plain list and BVH) that combine them.
"""
from rtcore.geometry.hittable import Hittable, HitRecord
from rtcore.geometry.world import HittableList
from rtcore.geometry.sphere import Sphere
from rtcore.geometry.quad import Quad, box_volume
from rtcore.geometry.transform import Translate, RotateY
from rtcore.geometry.constant_medium import ConstantMedium
from rtcore.geometry.bvh import BVHNode, build_index

__all__ = [
    "Hittable",
    "HitRecord",
    "HittableList",
    "Sphere",
    "Quad",
    "box_volume",
    "Translate",
    "RotateY",
    "ConstantMedium",
    "BVHNode",
    "build_index",
]
