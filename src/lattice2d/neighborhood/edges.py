"""Straight-edge walks shared by the ring enumerators.

An edge is a run of lattice points ``origin + d * step`` for ``d`` in
``[first, last]``, where each step component is -1, 0 or +1. Clipping an
edge to a box intersects that index range with the range each axis allows,
so a clipped edge is always a contiguous slice of the unclipped one.
"""

import logging
from collections.abc import Iterator
from typing import NamedTuple

from lattice2d.neighborhood.types import BoundingBox, LatticePoint

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    """One straight side of a ring perimeter."""

    origin: LatticePoint
    step: tuple[int, int]
    first: int
    last: int


def _axis_limits(origin: int, step: int, low: int, high: int, first: int, last: int) -> tuple[int, int]:
    """Narrow ``[first, last]`` so that ``origin + d * step`` stays in ``[low, high]``."""
    if step == 0:
        # Fixed coordinate: the whole edge is either in or out.
        if low <= origin <= high:
            return first, last
        return 1, 0
    if step > 0:
        return max(first, low - origin), min(last, high - origin)
    return max(first, origin - high), min(last, origin - low)


def index_range(edge: Edge, box: BoundingBox | None = None) -> range:
    """Return the step indices of ``edge`` that survive clipping to ``box``."""
    first, last = edge.first, edge.last
    if box is not None:
        first, last = _axis_limits(
            edge.origin.x, edge.step[0], box.bottom_limit.x, box.top_limit.x, first, last
        )
        first, last = _axis_limits(
            edge.origin.y, edge.step[1], box.bottom_limit.y, box.top_limit.y, first, last
        )
    return range(first, last + 1)


def walk(edge: Edge, box: BoundingBox | None = None) -> Iterator[LatticePoint]:
    """Yield the points of an edge in step order, optionally clipped."""
    indices = index_range(edge, box)
    if box is not None and not indices and edge.first <= edge.last:
        logger.debug("Edge from %s step %s clipped out by %s", edge.origin, edge.step, box)
    ox, oy = edge.origin
    sx, sy = edge.step
    for d in indices:
        yield LatticePoint(ox + d * sx, oy + d * sy)
