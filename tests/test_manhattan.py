"""Tests for Manhattan rings, disks and bounding squares."""

import itertools

import pytest

from lattice2d.metrics import manhattan_distance
from lattice2d.neighborhood import (
    BoundingBox,
    LatticePoint,
    manhattan_disk_up_to,
    manhattan_ring_exact,
    square_up_to,
)

CENTERS = [(0, 0), (1, 1), (-3, 7)]


class TestManhattanRing:
    def test_walk_order_distance_two(self):
        """Ring walks counter-clockwise from the bottom vertex."""
        ring = list(manhattan_ring_exact((0, 0), 2))
        assert ring == [
            (0, -2), (1, -1), (2, 0),
            (1, 1),
            (0, 2), (-1, 1), (-2, 0),
            (-1, -1),
        ]

    def test_distance_one_is_four_neighbours(self):
        assert list(manhattan_ring_exact((5, 5), 1)) == [(5, 4), (6, 5), (5, 6), (4, 5)]

    @pytest.mark.parametrize("center", CENTERS)
    @pytest.mark.parametrize("d", [1, 2, 3, 7])
    def test_count_distinct_and_exact_distance(self, center, d):
        ring = list(manhattan_ring_exact(center, d))
        assert len(ring) == 4 * d
        assert len(set(ring)) == len(ring)
        assert all(manhattan_distance(center, p) == d for p in ring)

    @pytest.mark.parametrize("d", [1, 3, 6])
    def test_consecutive_points_are_diagonal_neighbours(self, d):
        ring = list(manhattan_ring_exact((0, 0), d))
        for a, b in zip(ring, ring[1:] + ring[:1]):
            assert abs(a.x - b.x) == 1 and abs(a.y - b.y) == 1

    @pytest.mark.parametrize("d", [0, -1, -5])
    def test_distance_below_one_is_empty(self, d):
        assert list(manhattan_ring_exact((0, 0), d)) == []

    def test_rings_partition_the_plane(self):
        seen = set()
        for d in range(1, 6):
            ring = set(manhattan_ring_exact((2, -1), d))
            assert not ring & seen
            seen |= ring

    def test_yields_lattice_points(self):
        assert all(isinstance(p, LatticePoint) for p in manhattan_ring_exact((0, 0), 3))

    def test_restartable(self):
        assert list(manhattan_ring_exact((4, 2), 5)) == list(manhattan_ring_exact((4, 2), 5))


class TestManhattanRingClipped:
    def test_box_in_first_quadrant(self, unit_box):
        assert list(manhattan_ring_exact((0, 0), 2, unit_box)) == [(2, 0), (1, 1), (0, 2)]

    @pytest.mark.parametrize("center", [(0, 0), (1, 1), (25, 25), (-4, 2)])
    @pytest.mark.parametrize("d", [1, 2, 3, 5])
    def test_matches_filtered_unclipped_ring(self, clip_boxes, center, d):
        """Clipping keeps exactly the ring points in the box, in ring order."""
        for box in clip_boxes:
            expected = [p for p in manhattan_ring_exact(center, d) if box.contains(p)]
            assert list(manhattan_ring_exact(center, d, box)) == expected

    def test_accepts_limit_pair(self):
        ring = list(manhattan_ring_exact((0, 0), 2, ((0, 0), (5, 5))))
        assert ring == [(2, 0), (1, 1), (0, 2)]

    def test_inverted_box_is_empty(self):
        box = BoundingBox.from_bounds(5, 5, -5, -5)
        assert list(manhattan_ring_exact((0, 0), 2, box)) == []

    def test_zero_distance_is_empty_even_inside_box(self, unit_box):
        assert list(manhattan_ring_exact((1, 1), 0, unit_box)) == []


class TestManhattanDisk:
    def test_distance_one_order(self):
        """Disk is emitted column by column, y ascending."""
        assert list(manhattan_disk_up_to((0, 0), 1)) == [
            (-1, 0),
            (0, -1), (0, 0), (0, 1),
            (1, 0),
        ]

    @pytest.mark.parametrize("center", CENTERS)
    @pytest.mark.parametrize("d", [1, 2, 4])
    def test_contains_exactly_the_manhattan_ball(self, center, d):
        disk = list(manhattan_disk_up_to(center, d))
        assert len(disk) == 2 * d * d + 2 * d + 1
        assert len(set(disk)) == len(disk)
        assert center in disk
        assert all(manhattan_distance(center, p) <= d for p in disk)

    def test_disk_is_union_of_center_and_rings(self):
        disk = set(manhattan_disk_up_to((1, 2), 4))
        rings = {(1, 2)}
        for d in range(1, 5):
            rings |= set(manhattan_ring_exact((1, 2), d))
        assert disk == rings

    @pytest.mark.parametrize("d", [0, -2])
    def test_distance_below_one_is_empty(self, d):
        assert list(manhattan_disk_up_to((0, 0), d)) == []

    def test_clipped_matches_filtered(self, clip_boxes):
        for box in clip_boxes:
            expected = [p for p in manhattan_disk_up_to((1, 1), 3) if box.contains(p)]
            assert list(manhattan_disk_up_to((1, 1), 3, box)) == expected

    def test_clipped_clamps_upper_y_to_box_y(self):
        """The upper y bound comes from the box's top y.

        An earlier formulation clamped it with the box's top x instead; with
        top x = 1 that would have dropped (0, 2).
        """
        box = BoundingBox.from_bounds(-5, -5, 1, 5)
        disk = list(manhattan_disk_up_to((0, 0), 2, box))
        assert (0, 2) in disk
        assert (-1, 1) in disk
        assert (2, 0) not in disk


class TestSquareUpTo:
    def test_distance_one_order(self):
        assert list(square_up_to((0, 0), 1)) == [
            (x, y) for x in (-1, 0, 1) for y in (-1, 0, 1)
        ]

    @pytest.mark.parametrize("d", [1, 2, 5])
    def test_count(self, d):
        assert len(list(square_up_to((3, 3), d))) == (2 * d + 1) ** 2

    def test_not_filtered_by_manhattan_distance(self):
        assert (2, 2) in set(square_up_to((0, 0), 2))
        assert (2, 2) not in set(manhattan_disk_up_to((0, 0), 2))

    def test_clipped(self, unit_box):
        assert list(square_up_to((0, 0), 1, unit_box)) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_clipped_matches_filtered(self, clip_boxes):
        for box in clip_boxes:
            expected = [p for p in square_up_to((0, 0), 3) if box.contains(p)]
            assert list(square_up_to((0, 0), 3, box)) == expected

    def test_distance_below_one_is_empty(self):
        assert list(square_up_to((0, 0), 0)) == []


def test_enumerators_are_lazy():
    """Pulling a few points from a huge ring does not build the whole ring."""
    head = list(itertools.islice(manhattan_ring_exact((0, 0), 10**12), 3))
    assert head == [(0, -(10**12)), (1, 1 - 10**12), (2, 2 - 10**12)]
