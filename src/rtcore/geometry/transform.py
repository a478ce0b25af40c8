# rtcore/geometry/transform.py
"""
Instancing wrappers that move a hittable without touching its geometry.

Both transforms work by mapping the incoming ray into the object's own
space, delegating the query, and mapping the resulting hit back out.
"""
import math
from typing import Optional

from rtcore.config import INFINITY
from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval
from rtcore.core.ray import Ray
from rtcore.core.utils import degrees_to_radians
from rtcore.core.vector import Point3, Vector3
from rtcore.geometry.hittable import Hittable, HitRecord


class Translate(Hittable):
    """
    Rigid offset of a wrapped object.
    """
    def __init__(self, obj: Hittable, offset: Vector3):
        self.object = obj
        self.offset = offset
        self.bbox = obj.bounding_box() + offset

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Move the ray backwards by the offset
        offset_ray = Ray(ray.origin - self.offset, ray.direction, ray.time)

        rec = self.object.hit(offset_ray, ray_t)
        if rec is None:
            return None

        # Move the intersection point forwards by the offset
        rec.p = rec.p + self.offset
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox


class RotateY(Hittable):
    """
    Rotation of a wrapped object about the Y axis by a fixed angle in degrees.
    """
    def __init__(self, obj: Hittable, angle: float):
        self.object = obj
        self.angle = angle
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)
        self.bbox = self._rotated_bounding_box(obj.bounding_box())

    def _rotated_bounding_box(self, box: AABB) -> AABB:
        lo = Point3(INFINITY, INFINITY, INFINITY)
        hi = Point3(-INFINITY, -INFINITY, -INFINITY)

        for i in range(2):
            for j in range(2):
                for k in range(2):
                    x = box.x.max if i else box.x.min
                    y = box.y.max if j else box.y.min
                    z = box.z.max if k else box.z.min
                    corner = self.to_world(Vector3(x, y, z))
                    lo = Point3(min(lo.x, corner.x), min(lo.y, corner.y), min(lo.z, corner.z))
                    hi = Point3(max(hi.x, corner.x), max(hi.y, corner.y), max(hi.z, corner.z))

        return AABB.from_points(lo, hi)

    def to_object(self, v: Vector3) -> Vector3:
        return Vector3(
            self.cos_theta * v.x - self.sin_theta * v.z,
            v.y,
            self.sin_theta * v.x + self.cos_theta * v.z
        )

    def to_world(self, v: Vector3) -> Vector3:
        return Vector3(
            self.cos_theta * v.x + self.sin_theta * v.z,
            v.y,
            -self.sin_theta * v.x + self.cos_theta * v.z
        )

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Change the ray from world space to object space
        rotated = Ray(self.to_object(ray.origin), self.to_object(ray.direction), ray.time)

        rec = self.object.hit(rotated, ray_t)
        if rec is None:
            return None

        # Change the intersection point and normal back to world space
        rec.p = self.to_world(rec.p)
        rec.normal = self.to_world(rec.normal)
        return rec

    def bounding_box(self) -> AABB:
        return self.bbox
