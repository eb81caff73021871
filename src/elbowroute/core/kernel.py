"""Step kernel: grow an orthogonal path by one joint point.

Each call looks at the frontier of the path built so far and the first point
still to reach, and proposes the next joint:

1. Take an L-turn toward the target. After a horizontal segment (or before
   any segment exists) the path turns vertical and moves to the target's
   row; after a vertical segment it turns horizontal and moves to the
   target's column. If the frontier already sits on that row or column the
   turn is empty, so the path keeps going straight toward the target.
2. Clip the move against the obstacle boxes: if it crosses an edge, advance
   along the previous direction by the distance to the nearest crossing
   instead.
3. Break the opposing-heading stalemate: if the proposed point lines up with
   the target on one axis but the target lies behind its final approach,
   the turn is pushed out by a fixed offset.
"""

import math
from collections.abc import Sequence

from elbowroute.config.settings import DEADLOCK_NUDGE
from elbowroute.core.geometry import (
    add_vectors,
    distance_sq,
    dot_product,
    normalize,
    perpendicular,
    point_to_vector,
    points_equal,
    scale_vector,
    segments_intersect_at,
)
from elbowroute.core.observer import NullObserver, RouteObserver
from elbowroute.domain import UNIT_X, ZERO_VECTOR, BoundingBox, Point, Vector


def resolve_intersections(
    start: Point,
    next_point: Point,
    bounding_boxes: Sequence[BoundingBox],
    start_vector: Vector,
    tolerance: float = 0.0,
    observer: RouteObserver | None = None,
) -> Point:
    """Stop a move at the nearest obstacle edge it would cross.

    Args:
        start: Current frontier point
        next_point: Proposed next point
        bounding_boxes: Obstacle boxes
        start_vector: Unit direction of the last committed segment
        tolerance: Coordinate tolerance for point equality
        observer: Receives every crossing found (yellow)

    Returns:
        ``start`` advanced along ``start_vector`` by the distance to the
        nearest crossing, or ``next_point`` unchanged when the move crosses
        nothing or the nearest crossing is ``start`` itself
    """
    observer = observer or NullObserver()

    nearest: Point | None = None
    nearest_dist = math.inf
    for box in bounding_boxes:
        for edge in box.edges():
            hit = segments_intersect_at((start, next_point), edge)
            if hit is None:
                continue
            observer.point(hit, "yellow")
            dist = distance_sq(start, hit)
            if dist < nearest_dist:
                nearest, nearest_dist = hit, dist

    if nearest is None or points_equal(nearest, start, tolerance):
        return next_point

    return add_vectors(start, scale_vector(start_vector, math.sqrt(nearest_dist)))


def kernel(
    points: Sequence[Point],
    target: Sequence[Point],
    bounding_boxes: Sequence[BoundingBox],
    deadlock_nudge: float = DEADLOCK_NUDGE,
    tolerance: float = 0.0,
    observer: RouteObserver | None = None,
) -> Point:
    """Compute the next joint point of an orthogonal path.

    Args:
        points: Path so far; the last point is the frontier
        target: Remaining fixed points; the first is the point to reach and
            the segment from it to the second gives the final approach
        bounding_boxes: Obstacle boxes
        deadlock_nudge: Offset used to break an opposing-heading stalemate
        tolerance: Coordinate tolerance for point equality
        observer: Diagnostic observer

    Returns:
        The next frontier point
    """
    observer = observer or NullObserver()

    start = points[-1]
    end = target[0]

    # The first move has no previous direction
    start_vector = (
        ZERO_VECTOR
        if len(points) < 2
        else normalize(point_to_vector(start, points[-2]))
    )
    end_vector = (
        ZERO_VECTOR
        if len(target) < 2
        else normalize(point_to_vector(target[1], end))
    )

    start_normal = perpendicular(start_vector)
    turn_vertical = dot_product(UNIT_X, start_normal) == 0

    if turn_vertical:
        next_point = Point(start.x, end.y)
        straight = Point(end.x, start.y)
    else:
        next_point = Point(end.x, start.y)
        straight = Point(start.x, end.y)

    if points_equal(next_point, start, tolerance):
        next_point = straight

    next_point = resolve_intersections(
        start, next_point, bounding_boxes, start_vector, tolerance, observer
    )

    next_end_vector = normalize(point_to_vector(end, next_point))
    next_end_dot = dot_product(next_end_vector, end_vector)
    aligned_x = abs(end.x - next_point.x) <= tolerance
    aligned_y = abs(end.y - next_point.y) <= tolerance

    if math.isclose(next_end_dot, -1.0) and aligned_x != aligned_y:
        observer.point(next_point, "red")
        next_point = (
            Point(start.x, end.y + deadlock_nudge)
            if turn_vertical
            else Point(end.x + deadlock_nudge, start.y)
        )

    return next_point
