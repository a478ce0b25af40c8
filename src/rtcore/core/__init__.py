# rtcore/core/__init__.py
from rtcore.core.vector import Vector3, Point3, Color
from rtcore.core.interval import Interval
from rtcore.core.aabb import AABB
from rtcore.core.ray import Ray

__all__ = ["Vector3", "Point3", "Color", "Interval", "AABB", "Ray"]
