# rtcore/geometry/world.py
from typing import Iterable, List, Optional

from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval
from rtcore.core.ray import Ray
from rtcore.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An unordered collection of Hittable objects, queried by brute force.
    The bounding box grows as objects are added.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = []
        self.bbox = AABB()
        for obj in objects or ():
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bbox = AABB.surrounding_box(self.bbox, obj.bounding_box())

    def clear(self):
        self.objects.clear()
        self.bbox = AABB()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            # Each candidate must beat the closest hit found so far.
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.bbox
