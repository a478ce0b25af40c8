# rtcore/geometry/sphere.py
import math
from typing import Optional, Tuple

from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval
from rtcore.core.ray import Ray
from rtcore.core.vector import Point3, Vector3
from rtcore.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A moving sphere travels linearly from its center at time 0 to
    center + center_vec at time 1; use Sphere.moving() to build one.
    """
    def __init__(self, center: Point3, radius: float, material,
                 center_vec: Vector3 = None):
        self.center = center
        self.radius = max(0.0, radius)
        self.material = material
        self.center_vec = center_vec
        self.is_moving = center_vec is not None

        rvec = Vector3(self.radius, self.radius, self.radius)
        box = AABB.from_points(center - rvec, center + rvec)
        if self.is_moving:
            end = center + center_vec
            box = AABB.surrounding_box(box, AABB.from_points(end - rvec, end + rvec))
        self.bbox = box

    @classmethod
    def moving(cls, center1: Point3, center2: Point3, radius: float, material) -> "Sphere":
        return cls(center1, radius, material, center_vec=center2 - center1)

    def center_at(self, time: float) -> Point3:
        if not self.is_moving:
            return self.center
        return self.center + self.center_vec * time

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        center = self.center_at(ray.time)
        oc = ray.origin - center
        a = ray.direction.length_squared()
        if a == 0.0:
            return None
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        # Find the nearest root that lies in the acceptable range.
        root = (-half_b - sqrtd) / a
        if not ray_t.surrounds(root):
            root = (-half_b + sqrtd) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        if self.radius > 0:
            outward_normal = (rec.p - center) / self.radius
        else:
            outward_normal = -ray.direction.normalize()
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = self.get_sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    @staticmethod
    def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
        # p: a point on the unit sphere centered at the origin.
        # u: angle around the Y axis from X=-1, mapped to [0,1].
        # v: angle from Y=-1 to Y=+1, mapped to [0,1].
        theta = math.acos(max(-1.0, min(1.0, -p.y)))
        phi = math.atan2(-p.z, p.x) + math.pi
        return phi / (2 * math.pi), theta / math.pi

    def bounding_box(self) -> AABB:
        return self.bbox
