# rtcore/config.py
"""
Numeric tolerances and defaults shared by the intersection engine.

The default random seed can be overridden with the ``RTCORE_SEED``
environment variable; everything else is a plain module constant.
"""
import math
import os

INFINITY = math.inf

# Minimum thickness of a bounding box axis (planar primitives).
AABB_PAD_DELTA = 0.0001

# |n . d| below this counts as a ray parallel to a plane.
PARALLEL_EPSILON = 1e-8

# Per-component threshold for a vector to count as zero.
NEAR_ZERO_EPSILON = 1e-8

# Gap between the entry and exit queries of a participating medium.
MEDIUM_EXIT_OFFSET = 0.0001

DEFAULT_SEED = int(os.environ.get("RTCORE_SEED", "42"))

DEFAULT_PERLIN_POINTS = 256
TURBULENCE_DEPTH = 7

# Image texture sentinels: cyan for an image without pixels, magenta for a
# lookup with undefined (NaN) coordinates.
MISSING_TEXTURE_COLOR = (0.0, 1.0, 1.0)
OUT_OF_RANGE_TEXTURE_COLOR = (1.0, 0.0, 1.0)
