"""Obstacle extraction: bound shapes to bounding boxes.

Resolves an arrow's start and end bindings against the scene snapshot. A
binding to a shape that is not in the snapshot degrades to "unbound" for that
side; it is not an error.
"""

from elbowroute.core.bounds import element_bounds
from elbowroute.domain import Arrow, BoundingBox, SceneSnapshot


def get_start_end_bounds(
    arrow: Arrow,
    snapshot: SceneSnapshot,
) -> tuple[BoundingBox | None, BoundingBox | None]:
    """Bounding boxes of the shapes bound to each end of an arrow.

    Args:
        arrow: Arrow whose bindings to resolve
        snapshot: Shapes of the scene for this call

    Returns:
        Tuple of (start_box, end_box); a side is None when it is unbound or
        its shape is missing
    """
    start_shape = snapshot.resolve(arrow.start_binding)
    end_shape = snapshot.resolve(arrow.end_binding)

    return (
        element_bounds(start_shape, snapshot) if start_shape is not None else None,
        element_bounds(end_shape, snapshot) if end_shape is not None else None,
    )


def collect_obstacles(
    bounds: tuple[BoundingBox | None, BoundingBox | None],
) -> list[BoundingBox]:
    """Drop the absent sides, keeping start before end."""
    return [box for box in bounds if box is not None]
