"""Geometric operations for elbow arrow routing.

This module provides the vector and segment algebra the router is built on:
- Vector arithmetic (add, scale, normalize, rotate, perpendicular, dot)
- Distances and point equality
- Point-in-triangle and point-in-box containment
- Finite line segment intersection
- Dominant-axis heading of a vector
- Arrow local/world coordinate transforms

All functions are pure, stateless, and designed for use in parallel processing.
"""

import math

from elbowroute.domain import ZERO_VECTOR, Arrow, BoundingBox, Heading, Point, Vector


def add_vectors(a: Vector, b: Vector) -> Vector:
    """Component-wise sum of two vectors."""
    return Vector(a.x + b.x, a.y + b.y)


def scale_vector(v: Vector, scalar: float) -> Vector:
    """Multiply a vector by a scalar."""
    return Vector(v.x * scalar, v.y * scalar)


def point_to_vector(p: Point, origin: Point = ZERO_VECTOR) -> Vector:
    """Vector from origin to p."""
    return Vector(p.x - origin.x, p.y - origin.y)


def dot_product(a: Vector, b: Vector) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def distance_sq(a: Point, b: Point) -> float:
    """Squared Euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def normalize(v: Vector) -> Vector:
    """Scale a vector to unit length.

    A zero-length vector has no direction; it normalizes to the zero vector
    instead of dividing by zero.

    Args:
        v: Vector to normalize

    Returns:
        Unit vector with the same direction, or the zero vector

    Examples:
        >>> normalize(Vector(0.0, 5.0))
        Point(x=0.0, y=1.0)
        >>> normalize(Vector(0.0, 0.0))
        Point(x=0.0, y=0.0)
    """
    length = math.hypot(v.x, v.y)
    if length == 0:
        return ZERO_VECTOR
    return Vector(v.x / length, v.y / length)


def rotate_vector(v: Vector, angle: float) -> Vector:
    """Rotate a vector around the origin.

    Args:
        v: Vector to rotate
        angle: Rotation in radians (clockwise on screen, y grows downward)

    Returns:
        Rotated vector
    """
    cos = math.cos(angle)
    sin = math.sin(angle)
    return Vector(v.x * cos - v.y * sin, v.x * sin + v.y * cos)


def rotate_point(p: Point, center: Point, angle: float) -> Point:
    """Rotate a point around a center point."""
    return add_vectors(center, rotate_vector(point_to_vector(p, center), angle))


def perpendicular(v: Vector) -> Vector:
    """Rotate a vector by exactly a quarter turn: ``(x, y) -> (-y, x)``.

    Unlike ``rotate_vector(v, math.pi / 2)`` this introduces no rounding, so
    axis tests on the result can use exact comparisons.

    Examples:
        >>> perpendicular(Vector(1.0, 0.0))
        Point(x=-0.0, y=1.0)
    """
    return Vector(-v.y, v.x)


def points_equal(a: Point, b: Point, tolerance: float = 0.0) -> bool:
    """Check whether two points coincide within a tolerance.

    Args:
        a: First point
        b: Second point
        tolerance: Maximum per-coordinate difference (0 = exact)

    Returns:
        True if both coordinates differ by at most the tolerance
    """
    return abs(a.x - b.x) <= tolerance and abs(a.y - b.y) <= tolerance


def _sign(p1: Point, p2: Point, p3: Point) -> float:
    return (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)


def point_in_triangle(point: Point, a: Point, b: Point, c: Point) -> bool:
    """Determine if a point is inside a triangle, edges included.

    Computes which side of each edge the point lies on; the point is inside
    unless it is strictly on both sides of some pair of edges.

    Args:
        point: The point to test
        a: First triangle vertex
        b: Second triangle vertex
        c: Third triangle vertex

    Returns:
        True if point is inside or on the boundary of the triangle

    Examples:
        >>> point_in_triangle(Point(1, 1), Point(0, 0), Point(4, 0), Point(0, 4))
        True
        >>> point_in_triangle(Point(3, 3), Point(0, 0), Point(4, 0), Point(0, 4))
        False
    """
    d1 = _sign(point, a, b)
    d2 = _sign(point, b, c)
    d3 = _sign(point, c, a)

    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0

    return not (has_neg and has_pos)


def point_in_box(point: Point, box: BoundingBox) -> bool:
    """Determine if a point is inside a bounding box, edges included."""
    return box.min_x <= point.x <= box.max_x and box.min_y <= point.y <= box.max_y


def segments_intersect_at(
    a: tuple[Point, Point],
    b: tuple[Point, Point],
) -> Point | None:
    """Find the intersection point of two finite line segments.

    Uses parametric line equations to find intersection. Returns None if the
    segments are parallel (including zero-length ones) or if the crossing
    lies outside either segment.

    Args:
        a: First segment as (start, end)
        b: Second segment as (start, end)

    Returns:
        Point at intersection if segments intersect, None otherwise

    Examples:
        >>> segments_intersect_at(
        ...     (Point(0.0, 0.0), Point(2.0, 2.0)),
        ...     (Point(0.0, 2.0), Point(2.0, 0.0)),
        ... )
        Point(x=1.0, y=1.0)
    """
    (x1, y1), (x2, y2) = a[0].to_tuple(), a[1].to_tuple()
    (x3, y3), (x4, y4) = b[0].to_tuple(), b[1].to_tuple()

    # Calculate denominator for parametric equations
    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Lines are parallel or coincident
    if abs(denom) < 1e-10:
        return None

    # Calculate parametric values for intersection
    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    # Check if intersection is within both segments
    if 0 <= t <= 1 and 0 <= u <= 1:
        return Point(x1 + t * (x2 - x1), y1 + t * (y2 - y1))

    return None  # Intersection outside segments


def vector_to_heading(v: Vector) -> Heading:
    """Snap a vector to the heading of its dominant axis.

    On a diagonal the vector snaps to LEFT when x is negative and to UP
    otherwise. The zero vector maps to LEFT.

    Args:
        v: Any vector

    Returns:
        The closest of the four axis-aligned headings
    """
    abs_x = abs(v.x)
    abs_y = abs(v.y)

    if v.x > abs_y:
        return Heading.RIGHT
    if v.x <= -abs_y:
        return Heading.LEFT
    if v.y > abs_x:
        return Heading.DOWN
    return Heading.UP


def scale_up(p: Point, origin: Point, factor: float) -> Point:
    """Push a point away from an origin by a factor of its distance."""
    return add_vectors(origin, scale_vector(point_to_vector(p, origin), factor))


def to_world_space(arrow: Arrow, local_point: Point) -> Point:
    """Convert a point in an arrow's local frame to world coordinates."""
    return Point(arrow.x + local_point.x, arrow.y + local_point.y)


def to_local_space(arrow: Arrow, world_point: Point) -> Point:
    """Convert a world point into an arrow's local frame.

    Exact inverse of ``to_world_space`` up to floating point rounding.
    """
    return Point(world_point.x - arrow.x, world_point.y - arrow.y)
