"""Scene element models: shapes, arrows and their bindings.

This module defines the element domain models the router reads. Elements are
owned by the surrounding document; the router only ever sees them through a
call-scoped SceneSnapshot and never mutates or retains them.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from elbowroute.domain.primitives import Point


class ShapeType(str, Enum):
    """Bindable shape types.

    Anything that is not a diamond or an ellipse is bounded like a rectangle.
    """

    RECTANGLE = "rectangle"
    DIAMOND = "diamond"
    ELLIPSE = "ellipse"
    TEXT = "text"
    IMAGE = "image"
    FRAME = "frame"
    EMBEDDABLE = "embeddable"
    IFRAME = "iframe"


@dataclass(frozen=True)
class Shape:
    """A shape an arrow endpoint may be bound to.

    Attributes:
        id: Element identifier
        type: Shape type (controls how bounds are computed)
        x: Left edge of the unrotated shape
        y: Top edge of the unrotated shape
        width: Unrotated width
        height: Unrotated height
        angle: Rotation around the shape centre in radians
        is_deleted: Deleted shapes are invisible to the router
    """

    id: str
    type: ShapeType
    x: float
    y: float
    width: float
    height: float
    angle: float = 0.0
    is_deleted: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the shape
        """
        return {
            "id": self.id,
            "type": self.type.value,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "angle": self.angle,
            "is_deleted": self.is_deleted,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shape":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a shape

        Returns:
            Shape instance
        """
        return cls(
            id=data["id"],
            type=ShapeType(data["type"]),
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            angle=data.get("angle", 0.0),
            is_deleted=data.get("is_deleted", False),
        )


@dataclass(frozen=True)
class Binding:
    """Reference from an arrow endpoint to the shape it is attached to.

    Only the identifier is stored; resolving it is the snapshot's job.

    Attributes:
        element_id: Identifier of the bound shape
    """

    element_id: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"element_id": self.element_id}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Binding | None":
        """Deserialize from dictionary, passing None through."""
        if data is None:
            return None
        return cls(element_id=data["element_id"])


@dataclass(frozen=True)
class Arrow:
    """An arrow element with points in its own local space.

    Local point ``p`` lives at world position ``(x + p.x, y + p.y)``.

    Attributes:
        id: Element identifier
        x: World x of the local-space origin
        y: World y of the local-space origin
        points: Raw local-space points, 0..N of them
        start_binding: Optional binding of the first endpoint
        end_binding: Optional binding of the last endpoint
        elbowed: Whether the arrow is drawn with orthogonal routing
        is_deleted: Deleted arrows are skipped by batch processing
    """

    id: str
    x: float
    y: float
    points: tuple[Point, ...] = ()
    start_binding: Binding | None = None
    end_binding: Binding | None = None
    elbowed: bool = True
    is_deleted: bool = False

    def with_points(self, points: Iterable[Point]) -> "Arrow":
        """Return a copy of this arrow with replaced points."""
        return Arrow(
            id=self.id,
            x=self.x,
            y=self.y,
            points=tuple(points),
            start_binding=self.start_binding,
            end_binding=self.end_binding,
            elbowed=self.elbowed,
            is_deleted=self.is_deleted,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the arrow
        """
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "points": [p.to_dict() for p in self.points],
            "start_binding": self.start_binding.to_dict() if self.start_binding else None,
            "end_binding": self.end_binding.to_dict() if self.end_binding else None,
            "elbowed": self.elbowed,
            "is_deleted": self.is_deleted,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Arrow":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an arrow

        Returns:
            Arrow instance
        """
        return cls(
            id=data["id"],
            x=data["x"],
            y=data["y"],
            points=tuple(Point.from_dict(p) for p in data["points"]),
            start_binding=Binding.from_dict(data.get("start_binding")),
            end_binding=Binding.from_dict(data.get("end_binding")),
            elbowed=data.get("elbowed", True),
            is_deleted=data.get("is_deleted", False),
        )


@dataclass(frozen=True)
class SceneSnapshot(Mapping[str, Shape]):
    """Read-only view of the bindable shapes in a scene.

    Taken once when routing starts and valid for that call only. Deleted
    shapes are dropped on construction, so a binding to one resolves to
    nothing, exactly like a binding to a missing shape.
    """

    _shapes: Mapping[str, Shape] = field(default_factory=dict)

    @classmethod
    def from_shapes(cls, shapes: Iterable[Shape]) -> "SceneSnapshot":
        """Build a snapshot from shapes, skipping deleted ones."""
        return cls({shape.id: shape for shape in shapes if not shape.is_deleted})

    def __getitem__(self, element_id: str) -> Shape:
        return self._shapes[element_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def resolve(self, binding: Binding | None) -> Shape | None:
        """Look up the shape a binding points at.

        Args:
            binding: Binding to resolve, may be None

        Returns:
            The bound shape, or None if unbound or the shape is missing
        """
        if binding is None:
            return None
        return self._shapes.get(binding.element_id)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"shapes": [shape.to_dict() for shape in self._shapes.values()]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SceneSnapshot":
        """Deserialize from dictionary."""
        return cls.from_shapes(Shape.from_dict(s) for s in data["shapes"])
