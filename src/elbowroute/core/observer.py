"""Diagnostic observers for the routing pipeline.

The router reports what it is doing (obstacle edges, clipping hits, nudged
candidates, final joint points) to an observer passed in by the caller.
Nothing is drawn or stored globally; the default observer ignores all calls.

Usage:
    >>> observer = RecordingObserver()
    >>> route_elbow_arrow(arrow, snapshot, observer=observer)
    >>> [e.point for e in observer.points("orange")]
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from elbowroute.domain import Point, Segment


class RouteObserver(Protocol):
    """Protocol for objects receiving routing diagnostics."""

    def clear(self) -> None:
        """Called once when a new routing call starts."""
        ...

    def point(self, point: Point, color: str = "red") -> None:
        """Report a point of interest."""
        ...

    def segments(self, segments: Sequence[Segment], color: str = "green") -> None:
        """Report a group of segments."""
        ...


class NullObserver:
    """Observer that ignores every report."""

    def clear(self) -> None:
        pass

    def point(self, point: Point, color: str = "red") -> None:
        pass

    def segments(self, segments: Sequence[Segment], color: str = "green") -> None:
        pass


@dataclass
class ObserverEvent:
    """
    Record of a single diagnostic report.

    Attributes:
        kind: "point" or "segments"
        color: Color tag the router attached to the report
        point: Reported point (for "point" events)
        segments: Reported segments (for "segments" events)
    """

    kind: str
    color: str
    point: Point | None = None
    segments: tuple[Segment, ...] = ()


@dataclass
class RecordingObserver:
    """Observer that keeps every report since the last clear().

    Useful for debugging a route and for asserting on intermediate
    decisions in tests.
    """

    events: list[ObserverEvent] = field(default_factory=list)
    clear_count: int = 0

    def clear(self) -> None:
        self.events.clear()
        self.clear_count += 1

    def point(self, point: Point, color: str = "red") -> None:
        self.events.append(ObserverEvent(kind="point", color=color, point=point))

    def segments(self, segments: Sequence[Segment], color: str = "green") -> None:
        self.events.append(
            ObserverEvent(kind="segments", color=color, segments=tuple(segments))
        )

    def points(self, color: str | None = None) -> list[ObserverEvent]:
        """Point events, optionally filtered by color."""
        return [
            e for e in self.events
            if e.kind == "point" and (color is None or e.color == color)
        ]
