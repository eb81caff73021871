"""Axis-aligned bounds of bindable shapes.

Rotated shapes still get an axis-aligned box: the smallest one enclosing the
rotated outline. This is the conservative obstacle the router avoids.
"""

import math

from elbowroute.core.geometry import rotate_point
from elbowroute.domain import BoundingBox, Point, SceneSnapshot, Shape, ShapeType


def _normalized_frame(shape: Shape) -> tuple[float, float, float, float]:
    """Return (x1, y1, x2, y2) of the unrotated shape with x1 <= x2, y1 <= y2."""
    x1, x2 = sorted((shape.x, shape.x + shape.width))
    y1, y2 = sorted((shape.y, shape.y + shape.height))
    return x1, y1, x2, y2


def _outline_points(shape: Shape, x1: float, y1: float, x2: float, y2: float) -> list[Point]:
    """Points whose rotated hull gives the shape's extent."""
    if shape.type == ShapeType.DIAMOND:
        mid_x = (x1 + x2) / 2
        mid_y = (y1 + y2) / 2
        return [
            Point(mid_x, y1),
            Point(x2, mid_y),
            Point(mid_x, y2),
            Point(x1, mid_y),
        ]
    return [Point(x1, y1), Point(x2, y1), Point(x2, y2), Point(x1, y2)]


def element_bounds(shape: Shape, snapshot: SceneSnapshot | None = None) -> BoundingBox:  # noqa: ARG001
    """Calculate the axis-aligned bounding box of a shape.

    Rectangles and other box-like shapes rotate their corners about the
    centre, diamonds rotate their side midpoints, and ellipses use the closed
    form extents of a rotated ellipse.

    Args:
        shape: Shape to bound
        snapshot: Scene the shape belongs to (reserved for container-relative
            shapes, unused by the supported types)

    Returns:
        Axis-aligned BoundingBox enclosing the (possibly rotated) shape

    Examples:
        >>> element_bounds(Shape("a", ShapeType.RECTANGLE, 0, 0, 40, 40))
        BoundingBox(min_x=0, min_y=0, max_x=40, max_y=40)
    """
    x1, y1, x2, y2 = _normalized_frame(shape)

    if shape.angle == 0:
        return BoundingBox(x1, y1, x2, y2)

    cx = (x1 + x2) / 2
    cy = (y1 + y2) / 2

    if shape.type == ShapeType.ELLIPSE:
        a = (x2 - x1) / 2
        b = (y2 - y1) / 2
        cos = math.cos(shape.angle)
        sin = math.sin(shape.angle)
        half_w = math.sqrt((a * cos) ** 2 + (b * sin) ** 2)
        half_h = math.sqrt((a * sin) ** 2 + (b * cos) ** 2)
        return BoundingBox(cx - half_w, cy - half_h, cx + half_w, cy + half_h)

    center = Point(cx, cy)
    rotated = [
        rotate_point(p, center, shape.angle)
        for p in _outline_points(shape, x1, y1, x2, y2)
    ]
    return BoundingBox.from_points(rotated)
