"""2D lattice neighborhoods, distance metrics and vector/line helpers."""

from lattice2d.metrics import (
    chebyshev_distance,
    distance,
    euclidean_distance,
    manhattan_distance,
    minkowski_distance,
)
from lattice2d.neighborhood import (
    BoundingBox,
    LatticePoint,
    chebyshev_ring_exact,
    manhattan_disk_up_to,
    manhattan_ring_exact,
    neighborhood_mask,
    square_up_to,
    to_array,
)

__version__ = "0.1.0"
__all__ = [
    "BoundingBox",
    "LatticePoint",
    "chebyshev_distance",
    "chebyshev_ring_exact",
    "distance",
    "euclidean_distance",
    "manhattan_disk_up_to",
    "manhattan_distance",
    "manhattan_ring_exact",
    "minkowski_distance",
    "neighborhood_mask",
    "square_up_to",
    "to_array",
]
