"""Conversion between scene JSON elements and domain models.

Scene files use Excalidraw element dictionaries. This module maps the fields
the router needs onto Arrow and Shape models and writes routed points back,
leaving every other field of an element untouched.
"""

from typing import Any

from elbowroute.domain import Arrow, Binding, Point, Shape, ShapeType

BINDABLE_TYPES = frozenset(t.value for t in ShapeType)


def _binding_from_element(data: dict[str, Any] | None) -> Binding | None:
    if not data or "elementId" not in data:
        return None
    return Binding(element_id=str(data["elementId"]))


def is_arrow_element(element: dict[str, Any]) -> bool:
    """Check whether an element dict is an arrow."""
    return element.get("type") == "arrow"


def is_bindable_element(element: dict[str, Any]) -> bool:
    """Check whether an element dict is a shape arrows can bind to."""
    return element.get("type") in BINDABLE_TYPES


def element_to_arrow(element: dict[str, Any]) -> Arrow:
    """Convert an arrow element dict to an Arrow.

    Args:
        element: Excalidraw arrow element

    Returns:
        Arrow domain model

    Raises:
        KeyError: If the element has no id
        ValueError: If a point is not an [x, y] pair
    """
    points = []
    for raw in element.get("points", []):
        if len(raw) != 2:
            raise ValueError(f"Expected [x, y] point, got {raw!r}")
        points.append(Point(float(raw[0]), float(raw[1])))

    return Arrow(
        id=str(element["id"]),
        x=float(element.get("x", 0.0)),
        y=float(element.get("y", 0.0)),
        points=tuple(points),
        start_binding=_binding_from_element(element.get("startBinding")),
        end_binding=_binding_from_element(element.get("endBinding")),
        elbowed=bool(element.get("elbowed", False)),
        is_deleted=bool(element.get("isDeleted", False)),
    )


def element_to_shape(element: dict[str, Any]) -> Shape | None:
    """Convert a bindable element dict to a Shape.

    Args:
        element: Excalidraw element of any type

    Returns:
        Shape domain model, or None if the element is not bindable
    """
    if not is_bindable_element(element):
        return None

    return Shape(
        id=str(element["id"]),
        type=ShapeType(element["type"]),
        x=float(element.get("x", 0.0)),
        y=float(element.get("y", 0.0)),
        width=float(element.get("width", 0.0)),
        height=float(element.get("height", 0.0)),
        angle=float(element.get("angle", 0.0)),
        is_deleted=bool(element.get("isDeleted", False)),
    )


def apply_arrow_points(element: dict[str, Any], points: tuple[Point, ...]) -> dict[str, Any]:
    """Return a copy of an arrow element with new local points.

    ``width`` and ``height`` are refreshed to the extent of the new points,
    as Excalidraw expects for linear elements.

    Args:
        element: Original arrow element
        points: New local-space points

    Returns:
        Updated element dict (the original is not modified)
    """
    updated = dict(element)
    updated["points"] = [[p.x, p.y] for p in points]

    if points:
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        updated["width"] = max(xs) - min(xs)
        updated["height"] = max(ys) - min(ys)

    return updated
