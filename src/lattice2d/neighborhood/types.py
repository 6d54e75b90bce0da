"""Value types for lattice neighborhood enumeration."""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


class LatticePoint(NamedTuple):
    """A point on the integer lattice."""

    x: int
    y: int


class BoundingBox(BaseModel):
    """An axis-aligned, inclusive clip region.

    ``bottom_limit <= top_limit`` on both axes is up to the caller. An
    inverted box is not rejected; it simply clips everything away.
    """

    model_config = ConfigDict(frozen=True)

    bottom_limit: LatticePoint
    top_limit: LatticePoint

    @classmethod
    def from_limits(
        cls,
        bottom_limit: tuple[int, int],
        top_limit: tuple[int, int],
    ) -> "BoundingBox":
        """Create a box from its two corner points."""
        return cls(bottom_limit=bottom_limit, top_limit=top_limit)

    @classmethod
    def from_bounds(cls, min_x: int, min_y: int, max_x: int, max_y: int) -> "BoundingBox":
        """Create a box from scalar bounds."""
        return cls(bottom_limit=(min_x, min_y), top_limit=(max_x, max_y))

    @property
    def is_empty(self) -> bool:
        """True when the limits are inverted on either axis."""
        return (
            self.bottom_limit.x > self.top_limit.x
            or self.bottom_limit.y > self.top_limit.y
        )

    @property
    def width(self) -> int:
        """Number of lattice columns covered (0 for an inverted box)."""
        return max(0, self.top_limit.x - self.bottom_limit.x + 1)

    @property
    def height(self) -> int:
        """Number of lattice rows covered (0 for an inverted box)."""
        return max(0, self.top_limit.y - self.bottom_limit.y + 1)

    def contains(self, point: tuple[int, int]) -> bool:
        """Check whether a point lies inside the box, edges included."""
        x, y = point
        return (
            self.bottom_limit.x <= x <= self.top_limit.x
            and self.bottom_limit.y <= y <= self.top_limit.y
        )


def as_box(box: "BoundingBox | tuple | None") -> BoundingBox | None:
    """Accept a BoundingBox or a ``(bottom_limit, top_limit)`` pair."""
    if box is None or isinstance(box, BoundingBox):
        return box
    bottom_limit, top_limit = box
    return BoundingBox.from_limits(bottom_limit, top_limit)
