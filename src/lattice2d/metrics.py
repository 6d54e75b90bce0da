"""Scalar distance metrics on 2D points.

Every metric takes either a single point (distance to the origin) or two
points. Manhattan and Chebyshev distances only subtract, take absolute
values and compare, so they stay exact for ints and Fractions.
"""

import math

import numpy as np


def _deltas(point, other=None):
    """Coordinate differences between two points, or the point itself."""
    if other is None:
        return point[0], point[1]
    return other[0] - point[0], other[1] - point[1]


def euclidean_distance(point, other=None) -> float:
    """Calculate Euclidean distance to the origin or between two points."""
    dx, dy = _deltas(point, other)
    return math.hypot(dx, dy)


distance = euclidean_distance


def manhattan_distance(point, other=None):
    """Sum of absolute coordinate differences."""
    dx, dy = _deltas(point, other)
    return abs(dx) + abs(dy)


def chebyshev_distance(point, other=None):
    """Largest absolute coordinate difference."""
    dx, dy = _deltas(point, other)
    return max(abs(dx), abs(dy))


def minkowski_distance(point, other=None, r=None) -> np.float64:
    """Minkowski distance of order ``r``: ``(|dx|^r + |dy|^r) ** (1/r)``.

    Call as ``minkowski_distance(point, r)`` for the distance to the origin
    or ``minkowski_distance(point, other, r)`` for two points.

    ``r`` must be positive. For ``r <= 0`` the result is whatever IEEE
    arithmetic gives (``inf`` or ``nan``) rather than an exception.
    Coordinates are converted to float64, so ints beyond the float range
    raise ``OverflowError``.
    """
    if r is None and other is not None and np.ndim(other) == 0:
        other, r = None, other
    if r is None:
        raise TypeError("minkowski_distance() missing the order argument 'r'")
    dx, dy = _deltas(point, other)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        total = np.power(np.abs(np.float64(dx)), r) + np.power(np.abs(np.float64(dy)), r)
        return np.power(total, np.divide(1.0, r))
