"""Heading resolution for bound arrow endpoints.

A bound endpoint leaves (or enters) its shape through one of the four sides
of the shape's bounding box. The box is split into four triangles, each
spanned by two adjacent corners and the box midpoint, and the side is the one
whose triangle contains the attachment point.

The triangles are tested in a fixed order: top, right, bottom. A point in
none of them is assigned LEFT without testing the left triangle. Points on a
shared diagonal therefore always resolve to the earlier side.
"""

from elbowroute.core.geometry import point_in_triangle, scale_up
from elbowroute.domain import BoundingBox, Heading, Point

DEFAULT_TRIANGLE_SCALE = 2.0


def heading_for_point(
    box: BoundingBox,
    point: Point,
    triangle_scale: float = DEFAULT_TRIANGLE_SCALE,
) -> Heading:
    """Find which side of a box a point is attached to.

    Args:
        box: Bounding box of the bound shape
        point: World-space attachment point
        triangle_scale: Factor pushing the triangle corners away from the
            midpoint, so points slightly outside the box still classify

    Returns:
        Heading of the side the point belongs to
    """
    mid = box.midpoint
    top_left, top_right, bottom_right, bottom_left = (
        scale_up(corner, mid, triangle_scale) for corner in box.corners
    )

    if point_in_triangle(point, top_left, top_right, mid):
        return Heading.UP
    if point_in_triangle(point, top_right, bottom_right, mid):
        return Heading.RIGHT
    if point_in_triangle(point, bottom_right, bottom_left, mid):
        return Heading.DOWN
    return Heading.LEFT


def resolve_headings(
    start_box: BoundingBox | None,
    end_box: BoundingBox | None,
    start_point: Point,
    end_point: Point,
    triangle_scale: float = DEFAULT_TRIANGLE_SCALE,
) -> tuple[Heading | None, Heading | None]:
    """Headings for both ends of an arrow.

    Args:
        start_box: Box of the shape bound at the start, or None
        end_box: Box of the shape bound at the end, or None
        start_point: World-space start attachment point
        end_point: World-space end attachment point
        triangle_scale: See heading_for_point

    Returns:
        Tuple of (start_heading, end_heading); None for an unbound end
    """
    start_heading = (
        heading_for_point(start_box, start_point, triangle_scale)
        if start_box is not None
        else None
    )
    end_heading = (
        heading_for_point(end_box, end_point, triangle_scale)
        if end_box is not None
        else None
    )
    return start_heading, end_heading
