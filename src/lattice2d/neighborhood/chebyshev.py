"""Chebyshev (chessboard) rings on the integer lattice."""

import logging
from collections.abc import Iterator

from lattice2d.neighborhood.edges import Edge, walk
from lattice2d.neighborhood.types import BoundingBox, LatticePoint, as_box

logger = logging.getLogger(__name__)


def _square_edges(cx: int, cy: int, distance: int) -> list[Edge]:
    min_x, max_x = cx - distance, cx + distance
    min_y, max_y = cy - distance, cy + distance
    side = 2 * distance
    return [
        # bottom, left to right
        Edge(LatticePoint(min_x, min_y), (1, 0), 0, side),
        # right, bottom to top, corners excluded
        Edge(LatticePoint(max_x, min_y), (0, 1), 1, side - 1),
        # top, right to left
        Edge(LatticePoint(max_x, max_y), (-1, 0), 0, side),
        # left, top to bottom, corners excluded
        Edge(LatticePoint(min_x, max_y), (0, -1), 1, side - 1),
    ]


def chebyshev_ring_exact(
    center: tuple[int, int],
    distance: int,
    box: BoundingBox | None = None,
) -> Iterator[LatticePoint]:
    """Yield the perimeter of the square of side ``2 * distance + 1``.

    The walk starts at the bottom-left corner and goes counter-clockwise:
    bottom edge left to right, right edge upward, top edge right to left,
    left edge downward. Side edges skip the corners already emitted by the
    horizontal ones, so the ring holds ``8 * distance`` points.

    A distance of 0 yields the center alone (or nothing when a box excludes
    it). Negative distances yield nothing.

    With a box, an edge whose fixed coordinate falls outside the box is
    dropped entirely; otherwise its varying coordinate is clamped to the box.
    """
    if distance < 0:
        return

    box = as_box(box)
    if distance == 0:
        if box is None or box.contains(center):
            yield LatticePoint(*center)
        else:
            logger.debug("Chebyshev ring center %s lies outside %s", center, box)
        return

    cx, cy = center
    for edge in _square_edges(cx, cy, distance):
        yield from walk(edge, box)
