"""Elbow arrow routing entry point.

Turns an arrow's last two raw points into an orthogonal path:

1. Convert the two points to world space.
2. Resolve the bound shapes' boxes and the side each end attaches to.
3. Build a stub at each end that clears its shape by a fixed offset. A free
   end takes its stub direction from the straight line between the points.
4. Run the step kernel from the start stub to the end stub, avoiding both
   boxes.
5. Convert the path back to the arrow's local space.

Routing is recomputed from scratch on every call and never raises for
geometric conditions; the worst case is an imperfect path.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from elbowroute.config import RoutingConfig
from elbowroute.core.assembly import calculate_segment
from elbowroute.core.extension import extend_segment_to_bounding_box_edge
from elbowroute.core.geometry import (
    add_vectors,
    point_to_vector,
    scale_vector,
    to_local_space,
    to_world_space,
    vector_to_heading,
)
from elbowroute.core.heading import resolve_headings
from elbowroute.core.obstacles import collect_obstacles, get_start_end_bounds
from elbowroute.core.observer import NullObserver, RouteObserver
from elbowroute.domain import Arrow, BoundingBox, Heading, Point, SceneSnapshot

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RouteResult:
    """Full outcome of routing one arrow.

    Attributes:
        points: New local-space path
        world_points: The same path in world space
        start_heading: Side of the start shape, None if unbound
        end_heading: Side of the end shape, None if unbound
        steps: Joint points found by the step kernel
        converged: False if the step ceiling was hit
    """

    points: tuple[Point, ...]
    world_points: tuple[Point, ...]
    start_heading: Heading | None = None
    end_heading: Heading | None = None
    steps: int = 0
    converged: bool = True

    @property
    def joint_count(self) -> int:
        """Number of interior vertices of the path."""
        return max(len(self.points) - 2, 0)


class ElbowRouter:
    """Computes orthogonal paths for elbow arrows.

    Stateless apart from its configuration and observer, so one instance
    can route any number of arrows.

    Example:
        router = ElbowRouter(RoutingConfig())
        points = router.route(arrow, snapshot)
    """

    def __init__(
        self,
        config: RoutingConfig | None = None,
        observer: RouteObserver | None = None,
    ) -> None:
        """Initialize the router.

        Args:
            config: Routing constants (defaults apply if None)
            observer: Diagnostic observer (no-op if None)
        """
        self.config = config or RoutingConfig()
        self.observer = observer or NullObserver()

    def route(self, arrow: Arrow, snapshot: SceneSnapshot) -> tuple[Point, ...]:
        """Compute the new local-space path of an arrow.

        Args:
            arrow: Arrow to route
            snapshot: Shapes of the scene for this call

        Returns:
            Local-space points; the raw points unchanged if there are
            fewer than two of them
        """
        return self.route_detailed(arrow, snapshot).points

    def route_detailed(self, arrow: Arrow, snapshot: SceneSnapshot) -> RouteResult:
        """Compute the path of an arrow along with routing diagnostics.

        Args:
            arrow: Arrow to route
            snapshot: Shapes of the scene for this call

        Returns:
            RouteResult for the arrow
        """
        if len(arrow.points) < 2:
            # Arrow still being drawn
            return RouteResult(
                points=tuple(arrow.points),
                world_points=tuple(to_world_space(arrow, p) for p in arrow.points),
            )

        self.observer.clear()

        first_point = to_world_space(arrow, arrow.points[-2])
        target = to_world_space(arrow, arrow.points[-1])

        bounds = get_start_end_bounds(arrow, snapshot)
        avoid_bounds = collect_obstacles(bounds)
        for box in avoid_bounds:
            self.observer.segments(list(box.edges()), "green")

        start_heading, end_heading = resolve_headings(
            bounds[0],
            bounds[1],
            first_point,
            target,
            self.config.heading_triangle_scale,
        )

        start_points = [
            first_point,
            self._start_stub(first_point, target, start_heading, avoid_bounds),
        ]
        end_points = [
            self._end_stub(first_point, target, end_heading, avoid_bounds),
            target,
        ]

        segment = calculate_segment(
            start_points,
            end_points,
            avoid_bounds,
            step_count_limit=self.config.step_count_limit,
            deadlock_nudge=self.config.deadlock_nudge,
            tolerance=self.config.point_tolerance,
            observer=self.observer,
        )

        logger.debug(
            "Arrow routed",
            arrow=arrow.id,
            start_heading=start_heading.name if start_heading else None,
            end_heading=end_heading.name if end_heading else None,
            steps=segment.steps,
            converged=segment.converged,
        )

        return RouteResult(
            points=tuple(to_local_space(arrow, p) for p in segment.points),
            world_points=segment.points,
            start_heading=start_heading,
            end_heading=end_heading,
            steps=segment.steps,
            converged=segment.converged,
        )

    def _start_stub(
        self,
        first_point: Point,
        target: Point,
        heading: Heading | None,
        avoid_bounds: Sequence[BoundingBox],
    ) -> Point:
        """Point where the search starts, clear of the start shape."""
        offset = self.config.min_self_box_offset

        if heading is None:
            free_heading = vector_to_heading(point_to_vector(target, first_point))
            return add_vectors(first_point, scale_vector(free_heading.vector, offset))

        boundary = extend_segment_to_bounding_box_edge(
            (first_point, add_vectors(first_point, heading.vector)),
            True,
            list(avoid_bounds),
        )
        return add_vectors(boundary, scale_vector(heading.vector, offset))

    def _end_stub(
        self,
        first_point: Point,
        target: Point,
        heading: Heading | None,
        avoid_bounds: Sequence[BoundingBox],
    ) -> Point:
        """Point where the search ends, clear of the end shape."""
        offset = self.config.min_self_box_offset

        if heading is None:
            free_heading = vector_to_heading(point_to_vector(target, first_point))
            return add_vectors(target, scale_vector(free_heading.vector, -offset))

        boundary = extend_segment_to_bounding_box_edge(
            (add_vectors(target, heading.vector), target),
            False,
            list(avoid_bounds),
        )
        return add_vectors(boundary, scale_vector(heading.vector, offset))


def route_elbow_arrow(
    arrow: Arrow,
    snapshot: SceneSnapshot,
    config: RoutingConfig | None = None,
    observer: RouteObserver | None = None,
) -> tuple[Point, ...]:
    """Compute the orthogonal joint points of an elbow arrow.

    Convenience wrapper around ElbowRouter for one-off calls.

    Args:
        arrow: Arrow to route
        snapshot: Shapes of the scene for this call
        config: Routing constants (defaults apply if None)
        observer: Diagnostic observer (no-op if None)

    Returns:
        New local-space points of the arrow
    """
    return ElbowRouter(config=config, observer=observer).route(arrow, snapshot)
