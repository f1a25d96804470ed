"""Plane geometry value types used by shapes and the drag logic."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """Surface coordinate."""

    x: float
    y: float

    def offset_from(self, origin: Point) -> Point:
        """Return the component-wise vector ``self - origin``."""
        return Point(self.x - origin.x, self.y - origin.y)

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Size:
    """Width and height. Negative values are stored as given."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Bbox:
    """Axis-aligned box ``[x, x + width] x [y, y + height]``."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_parts(cls, position: Point, size: Size) -> Bbox:
        return cls(position.x, position.y, size.width, size.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains_point(self, point: Point) -> bool:
        """Return whether the point lies in the closed box."""
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def is_within(self, other: Bbox) -> bool:
        """Return whether this box is a (possibly equal) subset of ``other``.

        Edges are inclusive, so equal boxes are within each other and a
        zero-size box is within any box covering its point.
        """
        return (
            self.x >= other.x
            and self.y >= other.y
            and self.right <= other.right
            and self.bottom <= other.bottom
        )
