"""Lattice neighborhood enumeration - Manhattan and Chebyshev rings and disks."""

from lattice2d.neighborhood.arrays import neighborhood_mask, to_array
from lattice2d.neighborhood.chebyshev import chebyshev_ring_exact
from lattice2d.neighborhood.manhattan import (
    manhattan_disk_up_to,
    manhattan_ring_exact,
    square_up_to,
)
from lattice2d.neighborhood.types import BoundingBox, LatticePoint

__all__ = [
    "BoundingBox",
    "LatticePoint",
    "chebyshev_ring_exact",
    "manhattan_disk_up_to",
    "manhattan_ring_exact",
    "neighborhood_mask",
    "square_up_to",
    "to_array",
]
