"""Core geometric types for elbow arrow routing.

This module defines the fundamental geometric value types used by the router:
- Point: A 2D coordinate (also used as a direction vector)
- BoundingBox: An axis-aligned rectangle around a bindable shape
- Heading: Enum for the four axis-aligned unit directions
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D canvas space.

    Immutable and hashable for use in sets/dicts. Whether a point is in an
    arrow's local space or in world space is decided by the caller; the two
    are never mixed without going through the coordinate transforms.

    Attributes:
        x: X coordinate in canvas units
        y: Y coordinate in canvas units (grows downward)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


# Directions share the point representation
Vector = Point

Segment = tuple[Point, Point]

ZERO_VECTOR = Vector(0.0, 0.0)
UNIT_X = Vector(1.0, 0.0)


class Heading(Enum):
    """Side of a shape an arrow departs from or arrives at.

    Values are unit vectors in screen coordinates, where y grows downward.
    """

    UP = (0.0, -1.0)
    RIGHT = (1.0, 0.0)
    DOWN = (0.0, 1.0)
    LEFT = (-1.0, 0.0)

    @property
    def vector(self) -> Vector:
        """Unit vector pointing in this heading's direction."""
        return Vector(*self.value)

    @property
    def is_horizontal(self) -> bool:
        """True for LEFT and RIGHT."""
        return self.value[1] == 0.0


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned rectangle ``(min_x, min_y, max_x, max_y)``.

    Always axis-aligned, even when the shape it was computed from is rotated.

    Attributes:
        min_x: Left edge
        min_y: Top edge
        max_x: Right edge
        max_y: Bottom edge
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        """Horizontal extent of the box."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Vertical extent of the box."""
        return self.max_y - self.min_y

    @property
    def midpoint(self) -> Point:
        """Centre of the box."""
        return Point(
            self.min_x + self.width / 2,
            self.min_y + self.height / 2,
        )

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Corners in clockwise order starting at the top-left.

        Returns:
            Tuple of (top_left, top_right, bottom_right, bottom_left)
        """
        return (
            Point(self.min_x, self.min_y),
            Point(self.max_x, self.min_y),
            Point(self.max_x, self.max_y),
            Point(self.min_x, self.max_y),
        )

    def edges(self) -> Iterator[Segment]:
        """Iterate over the four sides: top, right, bottom, left.

        Each side is directed clockwise. Callers that pick the "first" hit
        rely on this enumeration order.

        Yields:
            Segments for the top, right, bottom and left sides
        """
        top_left, top_right, bottom_right, bottom_left = self.corners
        yield (top_left, top_right)
        yield (top_right, bottom_right)
        yield (bottom_right, bottom_left)
        yield (bottom_left, top_left)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @classmethod
    def from_points(cls, points: list[Point]) -> "BoundingBox":
        """Smallest box containing all given points.

        Args:
            points: Non-empty list of points

        Returns:
            BoundingBox enclosing every point

        Raises:
            ValueError: If points is empty
        """
        if not points:
            raise ValueError("Cannot compute bounding box of no points")

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))
