# rtcore/geometry/bvh.py
import functools
import logging
from typing import Iterable, List, Optional

import numpy as np

from rtcore.core.aabb import AABB
from rtcore.core.interval import Interval
from rtcore.core.ray import Ray
from rtcore.core.utils import get_rng, random_int
from rtcore.geometry.hittable import Hittable, HitRecord
from rtcore.geometry.world import HittableList

logger = logging.getLogger(__name__)


def box_compare(a: Hittable, b: Hittable, axis: int) -> int:
    """
    Orders two hittables by the lower bound of their boxes on one axis.

    Returns -1, 0 or 1. Any comparison involving NaN counts as equal, so a
    stable sort keeps such objects in their input order.
    """
    a_min = a.bounding_box().axis_interval(axis).min
    b_min = b.bounding_box().axis_interval(axis).min
    if a_min < b_min:
        return -1
    if a_min > b_min:
        return 1
    return 0


class BVHNode(Hittable):
    """
    Node of a bounding volume hierarchy over objects[start:end].

    The tree is strictly binary: a node over a single object stores that
    object as both children. The split axis is picked at random per node
    and objects[start:end] is sorted in place along it.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int,
                 rng: Optional[np.random.Generator] = None):
        rng = get_rng(rng)
        axis = random_int(rng, 0, 2)
        object_span = end - start

        if object_span == 1:
            self.left = self.right = objects[start]
            self.box = objects[start].bounding_box()
            return

        if object_span == 2:
            first, second = objects[start], objects[start + 1]
            # Ties keep the input order.
            if box_compare(first, second, axis) > 0:
                first, second = second, first
            self.left = first
            self.right = second
        else:
            key = functools.cmp_to_key(lambda a, b: box_compare(a, b, axis))
            objects[start:end] = sorted(objects[start:end], key=key)

            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        if not self.box.hit(ray, ray_t):
            return None

        hit_left = self.left.hit(ray, ray_t)
        # A leaf aliases one object on both sides; query it only once.
        if self.right is self.left:
            return hit_left

        # A left hit caps how far the right subtree may look.
        right_max = hit_left.t if hit_left is not None else ray_t.max
        hit_right = self.right.hit(ray, Interval(ray_t.min, right_max))

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        left = self.left.depth() if isinstance(self.left, BVHNode) else 0
        right = self.right.depth() if isinstance(self.right, BVHNode) else 0
        return 1 + max(left, right)


def build_index(objects: Iterable[Hittable],
                rng: Optional[np.random.Generator] = None) -> Hittable:
    """
    Builds a BVH over objects and returns its root.

    objects may be any iterable of hittables, including a HittableList; it is
    copied first, so the caller's ordering is left alone. An empty input
    yields an empty HittableList, which never reports a hit.
    """
    items = list(objects)
    if not items:
        logger.debug("build_index called with no objects; returning an empty list")
        return HittableList()

    root = BVHNode(items, 0, len(items), rng)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built BVH over %d objects (depth %d)", len(items), root.depth())
    return root
