"""Boundary extension: push an attachment point out to its box edge."""

from elbowroute.core.geometry import (
    add_vectors,
    normalize,
    point_in_box,
    point_to_vector,
    scale_vector,
    segments_intersect_at,
)
from elbowroute.domain import BoundingBox, Point, Segment


def extend_segment_to_bounding_box_edge(
    segment: Segment,
    segment_is_start: bool,
    bounding_boxes: list[BoundingBox],
) -> Point:
    """Find where an outward stub leaves the boxes containing its attachment.

    The stub runs from the attachment point one unit along the heading. For
    a start stub the attachment point is ``segment[0]``; for an end stub it
    is ``segment[1]`` and the segment points back toward it.

    A ray of length ``min_dist`` is cast from the attachment point along
    the heading, where ``min_dist`` is the largest width (horizontal stub) or
    height (vertical stub) among the containing boxes, long enough to leave
    every one of them. The ray is tested against the edges of each
    containing box in box order, then edge order (top, right, bottom, left),
    and the first hit is returned. That is the first hit found, not
    necessarily the nearest one.

    Args:
        segment: Two-point stub (attachment point and heading offset)
        segment_is_start: True if ``segment[0]`` is the attachment point
        bounding_boxes: Obstacle boxes of both endpoints

    Returns:
        Boundary point, or the attachment point itself if no box contains it
    """
    attach, other = (segment[0], segment[1]) if segment_is_start else (segment[1], segment[0])
    direction = normalize(point_to_vector(other, attach))

    containing = [box for box in bounding_boxes if point_in_box(attach, box)]
    if not containing:
        return attach

    is_horizontal = direction.y == 0
    min_dist = max(box.width if is_horizontal else box.height for box in containing)

    ray: Segment = (attach, add_vectors(attach, scale_vector(direction, min_dist)))

    for box in containing:
        for edge in box.edges():
            hit = segments_intersect_at(ray, edge)
            if hit is not None:
                return hit

    return attach
