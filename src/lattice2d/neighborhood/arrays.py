"""numpy views of lattice enumerations for grid consumers."""

from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from lattice2d.neighborhood.types import BoundingBox, as_box


def to_array(points: Iterable[tuple[int, int]]) -> NDArray[np.int64]:
    """Collect points into an ``(n, 2)`` integer array, preserving order."""
    coords = np.array(list(points), dtype=np.int64)
    if coords.size == 0:
        return np.empty((0, 2), dtype=np.int64)
    return coords.reshape(-1, 2)


def neighborhood_mask(
    points: Iterable[tuple[int, int]],
    box: BoundingBox,
) -> NDArray[np.bool_]:
    """Rasterize points into a boolean grid covering ``box``.

    The grid has shape ``(box.height, box.width)`` and is indexed
    ``[y - bottom.y, x - bottom.x]``. Points outside the box are ignored.
    """
    box = as_box(box)
    mask = np.zeros((box.height, box.width), dtype=bool)
    coords = to_array(points)
    if coords.shape[0] == 0 or mask.size == 0:
        return mask

    cols = coords[:, 0] - box.bottom_limit.x
    rows = coords[:, 1] - box.bottom_limit.y
    inside = (cols >= 0) & (cols < box.width) & (rows >= 0) & (rows < box.height)
    mask[rows[inside], cols[inside]] = True
    return mask
