"""Tests for numpy views of enumerations."""

import numpy as np

from lattice2d.neighborhood import (
    BoundingBox,
    chebyshev_ring_exact,
    manhattan_disk_up_to,
    neighborhood_mask,
    to_array,
)


class TestToArray:
    def test_preserves_order(self):
        coords = to_array(chebyshev_ring_exact((1, 1), 2))
        assert coords.shape == (16, 2)
        assert coords.dtype == np.int64
        assert coords[0].tolist() == [-1, -1]
        assert coords[15].tolist() == [-1, 0]

    def test_empty(self):
        coords = to_array([])
        assert coords.shape == (0, 2)


class TestNeighborhoodMask:
    def test_chebyshev_ring_mask(self):
        box = BoundingBox.from_bounds(0, 0, 2, 2)
        mask = neighborhood_mask(chebyshev_ring_exact((1, 1), 1), box)
        expected = np.ones((3, 3), dtype=bool)
        expected[1, 1] = False
        np.testing.assert_array_equal(mask, expected)

    def test_indexed_by_row_then_column(self):
        box = BoundingBox.from_bounds(10, 20, 13, 21)
        mask = neighborhood_mask([(13, 20)], box)
        assert mask.shape == (2, 4)
        assert mask[0, 3]
        assert mask.sum() == 1

    def test_points_outside_box_ignored(self):
        box = BoundingBox.from_bounds(0, 0, 1, 1)
        mask = neighborhood_mask(manhattan_disk_up_to((0, 0), 3), box)
        assert mask.all()

    def test_inverted_box_gives_empty_mask(self):
        box = BoundingBox.from_bounds(3, 3, 0, 0)
        mask = neighborhood_mask([(1, 1)], box)
        assert mask.size == 0
