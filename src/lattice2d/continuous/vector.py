"""Two-component Euclidean vectors as plain ``(x1, x2)`` tuples."""

import math


def magnitude(vector: tuple[float, float]) -> float:
    """Length of the vector."""
    return math.hypot(vector[0], vector[1])


def polar_angle(vector: tuple[float, float]) -> float:
    """Angle in radians from the x1 axis toward the x2 axis, in ``(-pi, pi]``."""
    return math.atan2(vector[1], vector[0])


def component_x1(length: float, angle: float) -> float:
    """x1 component of a vector given in polar form."""
    return length * math.cos(angle)


def component_x2(length: float, angle: float) -> float:
    """x2 component of a vector given in polar form."""
    return length * math.sin(angle)


def cartesian_to_polar(vector: tuple[float, float]) -> tuple[float, float]:
    """Convert ``(x1, x2)`` to ``(magnitude, angle)``."""
    return magnitude(vector), polar_angle(vector)


def polar_to_cartesian(length: float, angle: float) -> tuple[float, float]:
    """Convert ``(magnitude, angle)`` to ``(x1, x2)``."""
    return component_x1(length, angle), component_x2(length, angle)


def normalized(vector: tuple[float, float]) -> tuple[float, float]:
    """Unit vector with the same direction.

    The zero vector has no direction and is returned unchanged.
    """
    length = magnitude(vector)
    if length == 0:
        return vector
    return vector[0] / length, vector[1] / length


def distance(vector1: tuple[float, float], vector2: tuple[float, float]) -> float:
    """Euclidean distance between the tips of two vectors."""
    return math.hypot(vector1[0] - vector2[0], vector1[1] - vector2[1])


def direction(vector1, vector2):
    """Vector pointing from ``vector1`` to ``vector2``."""
    return vector2[0] - vector1[0], vector2[1] - vector1[1]


def normal1(vector):
    """First normal, rotated a quarter turn counter-clockwise: ``(-x2, x1)``."""
    return -vector[1], vector[0]


def normal2(vector):
    """Second normal, rotated a quarter turn clockwise: ``(x2, -x1)``."""
    return vector[1], -vector[0]
