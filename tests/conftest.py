"""Pytest configuration and fixtures for lattice2d tests."""

import pytest

from lattice2d.neighborhood import BoundingBox


@pytest.fixture
def unit_box():
    """Box covering the square from the origin to (5, 5)."""
    return BoundingBox.from_bounds(0, 0, 5, 5)


@pytest.fixture
def clip_boxes():
    """Boxes that cut rings in different ways, including degenerate ones."""
    return [
        BoundingBox.from_bounds(0, 0, 5, 5),
        BoundingBox.from_bounds(-10, -10, 10, 1),
        BoundingBox.from_bounds(-1, -3, 1, 3),
        BoundingBox.from_bounds(2, 2, 2, 2),
        BoundingBox.from_bounds(20, 20, 30, 30),  # disjoint
        BoundingBox.from_bounds(3, 3, -3, -3),  # inverted
        BoundingBox.from_bounds(-100, -100, 100, 100),
    ]
