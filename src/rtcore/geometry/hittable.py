# rtcore/geometry/hittable.py
from typing import Optional

from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval
from rtcore.core.ray import Ray
from rtcore.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "u", "v", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, u: float = 0.0, v: float = 0.0,
                 front_face: bool = True, material=None):
        self.p = p              # Intersection point
        self.normal = normal    # Unit surface normal, opposing the ray
        self.t = t              # Ray parameter at intersection
        self.u = u              # Surface coordinates for texture lookup
        self.v = v
        self.front_face = front_face  # Whether the hit was on the outside
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal is assumed to have unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"u={self.u}, v={self.v}, front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
