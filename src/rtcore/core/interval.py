# rtcore/core/interval.py
from rtcore.config import INFINITY


class Interval:
    """
    A closed range [min, max] of real numbers.

    Used both for the valid parameter range of a ray and for the extent of a
    bounding box along one axis. An interval with min > max is empty; it is
    never inverted, every query simply answers as an empty range would.
    """
    __slots__ = ("min", "max")

    def __init__(self, lo: float = INFINITY, hi: float = -INFINITY):
        # Default is the empty interval.
        self.min = lo
        self.max = hi

    def size(self) -> float:
        return self.max - self.min

    def is_empty(self) -> bool:
        return not self.min <= self.max

    def contains(self, x: float) -> bool:
        """Inclusive membership test."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """Exclusive membership test; rejects roots lying on either bound."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        assert self.min <= self.max, f"clamp on an empty interval {self!r}"
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> "Interval":
        """
        Grows the interval by delta in total, half on each side.
        """
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    @staticmethod
    def union(a: "Interval", b: "Interval") -> "Interval":
        """
        Smallest interval containing both a and b.
        """
        return Interval(min(a.min, b.min), max(a.max, b.max))

    def __add__(self, displacement: float) -> "Interval":
        return Interval(self.min + displacement, self.max + displacement)

    def __radd__(self, displacement: float) -> "Interval":
        return self.__add__(displacement)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __hash__(self):
        return hash((self.min, self.max))

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


EMPTY = Interval(INFINITY, -INFINITY)
UNIVERSE = Interval(-INFINITY, INFINITY)
