"""Lines, rays and segments in the plane.

Lines use the general form ``a*x + b*y + c = 0`` and are passed around as
``(a, b, c)`` tuples.
"""

import math
from collections.abc import Iterable, Iterator

from lattice2d.continuous import vector

PLAIN_TEXT_EQUATION = "a*x + b*y + c = 0"

X_AXIS = (0, 1, 0)
Y_AXIS = (-1, 0, 0)


def from_two_points(point1, point2) -> tuple[float, float, float]:
    """General form of the line through two points."""
    normal = vector.normal1(vector.direction(point1, point2))
    c = -normal[0] * point1[0] - normal[1] * point1[1]
    return normal[0], normal[1], c


def from_slope_and_y_intercept(slope: float, y_intercept: float) -> tuple[float, float, float]:
    """General form of ``y = slope * x + y_intercept``."""
    return -slope, 1, -y_intercept


def slope_from_general_form(line) -> float:
    a, b, _ = line
    return -a / b


def slope_from_angle(angle: float) -> float:
    """Slope of a line at ``angle`` radians from the x axis.

    A vertical line (exactly pi/2) has infinite slope.
    """
    if angle == math.pi / 2:
        return math.inf
    return math.tan(angle)


def x_intercept(line) -> float:
    """x coordinate where the line crosses the x axis."""
    a, _, c = line
    return -c / a


def y_intercept(line) -> float:
    """y coordinate where the line crosses the y axis."""
    _, b, c = line
    return -c / b


def normal_line_slope(line) -> float:
    """Slope of any line perpendicular to ``line``."""
    a, b, _ = line
    return b / a


def normal_line(line) -> tuple[float, float, float]:
    """General form of a line perpendicular to ``line``."""
    a, b, c = line
    return b, -a, c


def ray_points(
    angle: float,
    step: float,
    count: int,
    origin: tuple[float, float] = (0.0, 0.0),
) -> Iterator[tuple[float, float]]:
    """Yield ``count`` points spaced ``step`` apart along a ray.

    The origin itself is not yielded; the first point is one step out.
    """
    for i in range(1, count + 1):
        dx, dy = vector.polar_to_cartesian(i * step, angle)
        yield origin[0] + dx, origin[1] + dy


def segment_length(point1, point2) -> float:
    return vector.distance(point1, point2)


def segment_slope(point1, point2) -> float:
    """Rise over run between two points."""
    return (point2[1] - point1[1]) / (point2[0] - point1[0])


def segment_points(point1, point2, count: int) -> Iterator[tuple[float, float]]:
    """Yield ``count`` evenly spaced interior points of a segment.

    The segment is split into ``count + 1`` equal parts; the endpoints are
    not yielded.
    """
    x_step = (point2[0] - point1[0]) / (count + 1)
    y_step = (point2[1] - point1[1]) / (count + 1)
    for i in range(1, count + 1):
        yield point1[0] + i * x_step, point1[1] + i * y_step


def parallel_point(point1, point2, seed_point) -> tuple[float, float]:
    """End point of the segment from ``seed_point`` parallel to ``point1 -> point2``."""
    return (
        seed_point[0] + point2[0] - point1[0],
        seed_point[1] + point2[1] - point1[1],
    )


def parallels(
    base_point,
    direction,
    seed_direction,
    params: Iterable[tuple[float, float]],
) -> Iterator[tuple[tuple[float, float], tuple[float, float]]]:
    """Yield segments parallel to ``direction``, offset along ``seed_direction``.

    Args:
        base_point: Point the offsets are measured from.
        direction: Direction of every generated segment.
        seed_direction: Direction in which successive segments are offset.
        params: ``(distance, length)`` pairs, one per segment.

    Yields:
        ``(start, end)`` point pairs.
    """
    dx, dy = vector.normalized(direction)
    sx, sy = vector.normalized(seed_direction)
    for offset, length in params:
        start = (base_point[0] + sx * offset, base_point[1] + sy * offset)
        end = (start[0] + dx * length, start[1] + dy * length)
        yield start, end
