# rtcore/geometry/quad.py
from typing import Optional, Tuple

from rtcore.config import PARALLEL_EPSILON
from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval
from rtcore.core.ray import Ray
from rtcore.core.vector import Point3, Vector3
from rtcore.geometry.hittable import Hittable, HitRecord
from rtcore.geometry.world import HittableList

_UNIT = Interval(0.0, 1.0)


class Quad(Hittable):
    """
    Planar parallelogram with corners q, q+u, q+v and q+u+v.

    The plane normal follows the right-hand rule on (u, v). Hits report the
    planar coordinates (alpha, beta) of the hit point as texture (u, v).
    """
    def __init__(self, q: Point3, u: Vector3, v: Vector3, material):
        self.q = q
        self.u = u
        self.v = v
        self.material = material

        n = u.cross(v)
        nn = n.length_squared()
        # Parallel edges span no area; such a quad never reports a hit.
        self.degenerate = nn == 0.0
        self.normal = n.normalize()
        self.d = self.normal.dot(q)
        self.w = n / nn if not self.degenerate else Vector3(0, 0, 0)

        self.bbox = self._compute_bounding_box()

    def _compute_bounding_box(self) -> AABB:
        q, u, v = self.q, self.u, self.v
        diagonal1 = AABB.from_points(q, q + u + v)
        diagonal2 = AABB.from_points(q + u, q + v)
        return AABB.surrounding_box(diagonal1, diagonal2).pad()

    def bounding_box(self) -> AABB:
        return self.bbox

    @staticmethod
    def is_interior(a: float, b: float) -> bool:
        """
        Whether planar coordinates (a, b) fall inside the unit square.
        """
        return _UNIT.contains(a) and _UNIT.contains(b)

    def planar_coordinates(self, point: Point3) -> Tuple[float, float]:
        planar = point - self.q
        alpha = self.w.dot(planar.cross(self.v))
        beta = self.w.dot(self.u.cross(planar))
        return alpha, beta

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if self.degenerate:
            return None

        denom = self.normal.dot(ray.direction)
        # No hit if the ray is parallel to the plane.
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.d - self.normal.dot(ray.origin)) / denom
        if not ray_t.surrounds(t):
            return None

        intersection = ray.at(t)
        alpha, beta = self.planar_coordinates(intersection)
        if not self.is_interior(alpha, beta):
            return None

        rec = HitRecord(p=intersection, t=t, u=alpha, v=beta, material=self.material)
        rec.set_face_normal(ray, self.normal)
        return rec


def box_volume(a: Point3, b: Point3, material) -> HittableList:
    """
    Returns the six sides of the box spanned by opposite corners a and b.
    """
    sides = HittableList()

    lo = Point3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))
    hi = Point3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))

    dx = Vector3(hi.x - lo.x, 0, 0)
    dy = Vector3(0, hi.y - lo.y, 0)
    dz = Vector3(0, 0, hi.z - lo.z)

    sides.add(Quad(Point3(lo.x, lo.y, hi.z), dx, dy, material))   # front
    sides.add(Quad(Point3(hi.x, lo.y, hi.z), -dz, dy, material))  # right
    sides.add(Quad(Point3(hi.x, lo.y, lo.z), -dx, dy, material))  # back
    sides.add(Quad(Point3(lo.x, lo.y, lo.z), dz, dy, material))   # left
    sides.add(Quad(Point3(lo.x, hi.y, hi.z), dx, -dz, material))  # top
    sides.add(Quad(Point3(lo.x, lo.y, lo.z), dx, dz, material))   # bottom

    return sides
