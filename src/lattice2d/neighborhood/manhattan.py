"""Manhattan (taxicab) neighborhoods on the integer lattice.

The ring at distance D is the diamond with vertices ``(cx+D, cy)``,
``(cx, cy+D)``, ``(cx-D, cy)`` and ``(cx, cy-D)``. It is walked
counter-clockwise starting at the bottom vertex, so consecutive points are
always diagonal neighbours:

1. bottom-right edge, ``(cx, cy-D)`` to ``(cx+D, cy)``, D+1 points
2. top-right edge toward ``(cx, cy+D)``, D-1 points (no shared vertices)
3. top-left edge, ``(cx, cy+D)`` to ``(cx-D, cy)``, D+1 points
4. bottom-left edge back toward the start, D-1 points

A distance below 1 gives an empty ring; the center is never part of it.
"""

import logging
from collections.abc import Iterator

from lattice2d.neighborhood.edges import Edge, walk
from lattice2d.neighborhood.types import BoundingBox, LatticePoint, as_box

logger = logging.getLogger(__name__)


def _diamond_edges(cx: int, cy: int, distance: int) -> list[Edge]:
    return [
        Edge(LatticePoint(cx, cy - distance), (1, 1), 0, distance),
        Edge(LatticePoint(cx + distance, cy), (-1, 1), 1, distance - 1),
        Edge(LatticePoint(cx, cy + distance), (-1, -1), 0, distance),
        Edge(LatticePoint(cx - distance, cy), (1, -1), 1, distance - 1),
    ]


def manhattan_ring_exact(
    center: tuple[int, int],
    distance: int,
    box: BoundingBox | None = None,
) -> Iterator[LatticePoint]:
    """Yield every lattice point at exactly ``distance`` from ``center``.

    Args:
        center: Center of the ring.
        distance: Manhattan radius. Values below 1 yield nothing.
        box: Optional inclusive clip region. Each edge is clipped on its own,
            so the surviving points keep the unclipped order.

    Yields:
        4 * distance points when unclipped, none repeated.
    """
    if distance < 1:
        return

    cx, cy = center
    box = as_box(box)
    for edge in _diamond_edges(cx, cy, distance):
        yield from walk(edge, box)


def manhattan_disk_up_to(
    center: tuple[int, int],
    distance: int,
    box: BoundingBox | None = None,
) -> Iterator[LatticePoint]:
    """Yield every lattice point within ``distance`` of ``center``, center included.

    Points come column by column: x ascending, and y ascending within a
    column. With a box, both axes are clamped to the box limits.
    Distances below 1 yield nothing.
    """
    if distance < 1:
        return

    cx, cy = center
    box = as_box(box)
    min_x, max_x = cx - distance, cx + distance
    if box is not None:
        min_x = max(min_x, box.bottom_limit.x)
        max_x = min(max_x, box.top_limit.x)
        if min_x > max_x:
            logger.debug("Manhattan disk at %s r=%s lies outside %s", center, distance, box)

    for x in range(min_x, max_x + 1):
        reach = distance - abs(x - cx)
        min_y, max_y = cy - reach, cy + reach
        if box is not None:
            min_y = max(min_y, box.bottom_limit.y)
            max_y = min(max_y, box.top_limit.y)
        for y in range(min_y, max_y + 1):
            yield LatticePoint(x, y)


def square_up_to(
    center: tuple[int, int],
    distance: int,
    box: BoundingBox | None = None,
) -> Iterator[LatticePoint]:
    """Yield every point of the square ``[cx-D, cx+D] x [cy-D, cy+D]``.

    This is the bounding square of the Manhattan disk, without filtering by
    Manhattan distance. Same ordering and clamping as ``manhattan_disk_up_to``.
    """
    if distance < 1:
        return

    cx, cy = center
    box = as_box(box)
    min_x, max_x = cx - distance, cx + distance
    min_y, max_y = cy - distance, cy + distance
    if box is not None:
        min_x = max(min_x, box.bottom_limit.x)
        max_x = min(max_x, box.top_limit.x)
        min_y = max(min_y, box.bottom_limit.y)
        max_y = min(max_y, box.top_limit.y)

    for x in range(min_x, max_x + 1):
        for y in range(min_y, max_y + 1):
            yield LatticePoint(x, y)
