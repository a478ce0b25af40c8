# rtcore/core/aabb.py
import math

from rtcore.config import AABB_PAD_DELTA
from rtcore.core.interval import Interval, EMPTY as EMPTY_INTERVAL, UNIVERSE as UNIVERSE_INTERVAL
from rtcore.core.vector import Vector3


class AABB:
    """
    Axis-aligned bounding box stored as one Interval per axis.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: Interval = None, y: Interval = None, z: Interval = None):
        # Missing axes are empty, so a default AABB bounds nothing.
        self.x = x if x is not None else Interval()
        self.y = y if y is not None else Interval()
        self.z = z if z is not None else Interval()

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3) -> "AABB":
        """
        Box spanned by two corners; the corners need not be ordered.
        """
        return cls(
            Interval(min(a.x, b.x), max(a.x, b.x)),
            Interval(min(a.y, b.y), max(a.y, b.y)),
            Interval(min(a.z, b.z), max(a.z, b.z))
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return AABB(
            Interval.union(box0.x, box1.x),
            Interval.union(box0.y, box1.y),
            Interval.union(box0.z, box1.z)
        )

    @property
    def minimum(self) -> Vector3:
        return Vector3(self.x.min, self.y.min, self.z.min)

    @property
    def maximum(self) -> Vector3:
        return Vector3(self.x.max, self.y.max, self.z.max)

    def axis_interval(self, n: int) -> Interval:
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        return self.x

    def pad(self, delta: float = AABB_PAD_DELTA) -> "AABB":
        """
        Returns a box with no axis thinner than delta.
        """
        x = self.x if self.x.size() >= delta else self.x.expand(delta)
        y = self.y if self.y.size() >= delta else self.y.expand(delta)
        z = self.z if self.z.size() >= delta else self.z.expand(delta)
        return AABB(x, y, z)

    def hit(self, ray, ray_t: Interval) -> bool:
        # Slab method: narrow [t_min, t_max] axis by axis, bail out as soon
        # as it is empty. ray_t itself is left untouched.
        t_min = ray_t.min
        t_max = ray_t.max
        origin = ray.origin
        direction = ray.direction
        for axis in range(3):
            ax = self.axis_interval(axis)
            d = direction[axis]
            inv_d = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            orig = origin[axis]

            t0 = (ax.min - orig) * inv_d
            t1 = (ax.max - orig) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0

            if t0 > t_min:
                t_min = t0
            if t1 < t_max:
                t_max = t1
            if t_max <= t_min:
                return False
        return True

    def __add__(self, offset: Vector3) -> "AABB":
        return AABB(self.x + offset.x, self.y + offset.y, self.z + offset.z)

    def __radd__(self, offset: Vector3) -> "AABB":
        return self.__add__(offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self) -> str:
        return f"AABB({self.x!r}, {self.y!r}, {self.z!r})"


EMPTY = AABB(EMPTY_INTERVAL, EMPTY_INTERVAL, EMPTY_INTERVAL)
UNIVERSE = AABB(UNIVERSE_INTERVAL, UNIVERSE_INTERVAL, UNIVERSE_INTERVAL)
