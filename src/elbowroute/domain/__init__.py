"""Domain models for elbowroute.

This module contains the core domain models representing points, boxes,
headings, shapes and arrows. All models are designed to be:

- Immutable (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of the scene file format

Key classes:
- Point: A 2D point, also used as a direction vector
- BoundingBox: Axis-aligned box around a bindable shape
- Heading: One of the four axis-aligned directions
- Shape: A bindable shape element
- Arrow: An arrow element with local-space points and bindings
- SceneSnapshot: Read-only id-to-shape lookup for one routing call
"""

from elbowroute.domain.element import Arrow, Binding, SceneSnapshot, Shape, ShapeType
from elbowroute.domain.primitives import (
    UNIT_X,
    ZERO_VECTOR,
    BoundingBox,
    Heading,
    Point,
    Segment,
    Vector,
)

__all__: list[str] = [
    # Enums
    "Heading",
    "ShapeType",
    # Core types
    "Point",
    "Vector",
    "Segment",
    "BoundingBox",
    "Shape",
    "Binding",
    "Arrow",
    "SceneSnapshot",
    # Constants
    "UNIT_X",
    "ZERO_VECTOR",
]
