"""Core routing algorithms for elbowroute.

This module contains the core algorithms for:

- Geometry operations (vector algebra, containment, segment intersection)
- Shape bounds (rotation-aware, axis-aligned)
- Heading resolution (which side of a shape an arrow leaves from)
- Boundary extension (pushing stubs out of their shape's box)
- Orthogonal path search (step kernel and segment assembly)
- Scene processing (routing every elbow arrow of a scene)

All routing services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects beyond logging and the observer hook)

Key functions:
- route_elbow_arrow: Route one arrow against a scene snapshot
- element_bounds: Axis-aligned bounds of a shape
- heading_for_point: Side of a box an attachment point belongs to
- extend_segment_to_bounding_box_edge: Where a stub leaves its box
- kernel: Next joint point of a path
- calculate_segment: Run the kernel to convergence

Key classes:
- ElbowRouter: Router bound to a configuration and observer
- RouteResult: Routed path with diagnostics
- SceneProcessor: Routes all elbow arrows of a scene file
- RecordingObserver: Observer keeping every diagnostic report
"""

from elbowroute.core.assembly import SegmentResult, calculate_segment
from elbowroute.core.bounds import element_bounds
from elbowroute.core.extension import extend_segment_to_bounding_box_edge
from elbowroute.core.heading import heading_for_point, resolve_headings
from elbowroute.core.kernel import kernel, resolve_intersections
from elbowroute.core.obstacles import collect_obstacles, get_start_end_bounds
from elbowroute.core.observer import NullObserver, RecordingObserver, RouteObserver
from elbowroute.core.processor import SceneProcessor, route_arrow_payload
from elbowroute.core.router import ElbowRouter, RouteResult, route_elbow_arrow

__all__ = [
    # Router classes
    "ElbowRouter",
    "RouteResult",
    # Observer classes
    "NullObserver",
    "RecordingObserver",
    "RouteObserver",
    # Processor classes
    "SceneProcessor",
    "SegmentResult",
    # Routing functions
    "calculate_segment",
    "collect_obstacles",
    "element_bounds",
    "extend_segment_to_bounding_box_edge",
    "get_start_end_bounds",
    "heading_for_point",
    "kernel",
    "resolve_headings",
    "resolve_intersections",
    "route_arrow_payload",
    "route_elbow_arrow",
]
