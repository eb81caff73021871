"""Segment assembly: run the step kernel until the path meets its target."""

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from elbowroute.config.settings import DEADLOCK_NUDGE, STEP_COUNT_LIMIT
from elbowroute.core.geometry import points_equal
from elbowroute.core.kernel import kernel
from elbowroute.core.observer import NullObserver, RouteObserver
from elbowroute.domain import BoundingBox, Point

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SegmentResult:
    """Outcome of one assembly run.

    Attributes:
        points: Start points, the joints found, then the target points
        steps: Number of joint points the kernel contributed
        converged: False if the step ceiling stopped the search
    """

    points: tuple[Point, ...]
    steps: int
    converged: bool


def calculate_segment(
    start: Sequence[Point],
    end: Sequence[Point],
    bounding_boxes: Sequence[BoundingBox],
    step_count_limit: int = STEP_COUNT_LIMIT,
    deadlock_nudge: float = DEADLOCK_NUDGE,
    tolerance: float = 0.0,
    observer: RouteObserver | None = None,
) -> SegmentResult:
    """Grow an orthogonal path from the start points to the end points.

    If the last start point already coincides with ``end[0]`` the two are
    merged and no kernel call is made. Otherwise the kernel is called
    repeatedly, each new point extending the path, until it produces
    ``end[0]`` or ``step_count_limit`` calls have been made. Hitting the
    ceiling logs a warning and still returns the partial path joined to the
    end points.

    Args:
        start: Fixed leading points (attachment point and its stub)
        end: Fixed trailing points (stub and attachment point)
        bounding_boxes: Obstacle boxes
        step_count_limit: Maximum number of kernel calls
        deadlock_nudge: Passed to the kernel
        tolerance: Coordinate tolerance for point equality
        observer: Diagnostic observer

    Returns:
        SegmentResult with the full path
    """
    observer = observer or NullObserver()

    path: tuple[Point, ...] = tuple(start)

    # Both stubs already meet; joining them would repeat the point
    if points_equal(path[-1], end[0], tolerance):
        return SegmentResult(points=(*path, *end[1:]), steps=0, converged=True)

    converged = False

    for _ in range(step_count_limit):
        next_point = kernel(
            path,
            end,
            bounding_boxes,
            deadlock_nudge=deadlock_nudge,
            tolerance=tolerance,
            observer=observer,
        )
        if points_equal(end[0], next_point, tolerance):
            converged = True
            break
        path = (*path, next_point)

    steps = len(path) - len(start)

    if not converged:
        logger.warning(
            "Elbow arrow routing step count limit reached",
            steps=steps,
            limit=step_count_limit,
            points=[p.to_tuple() for p in path],
        )
        observer.segments(list(zip(path, path[1:], strict=False)), "red")

    for point in path[len(start):]:
        observer.point(point, "orange")

    return SegmentResult(points=(*path, *end), steps=steps, converged=converged)
