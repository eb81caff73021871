"""Tests for the step kernel and intersection clipping."""

from elbowroute.core.kernel import kernel, resolve_intersections
from elbowroute.core.observer import RecordingObserver
from elbowroute.domain import BoundingBox, Point


class TestResolveIntersections:
    """Tests for resolve_intersections function."""

    def test_no_crossing_keeps_candidate(self) -> None:
        """A move that crosses no edge is kept as proposed."""
        box = BoundingBox(0, 0, 40, 40)
        result = resolve_intersections(Point(70, 20), Point(170, 20), [box], Point(1, 0))
        assert result == Point(170, 20)

    def test_stops_at_nearest_crossing(self) -> None:
        """The move is cut at the closest edge among all boxes."""
        box = BoundingBox(200, 0, 240, 40)
        observer = RecordingObserver()

        result = resolve_intersections(
            Point(70, 20), Point(270, 20), [box], Point(1, 0), observer=observer
        )

        assert result == Point(200, 20)
        assert {e.point for e in observer.points("yellow")} == {
            Point(200, 20),
            Point(240, 20),
        }

    def test_crossing_at_start_ignored(self) -> None:
        """A hit on the frontier itself does not stop the move."""
        box = BoundingBox(0, 0, 40, 40)
        result = resolve_intersections(Point(40, 20), Point(100, 20), [box], Point(1, 0))
        assert result == Point(100, 20)


class TestKernel:
    """Tests for kernel function."""

    def test_first_move_turns_vertical(self) -> None:
        """Without a previous direction the path first moves to the target's row."""
        assert kernel([Point(0, 0)], [Point(50, 80)], []) == Point(0, 80)

    def test_after_horizontal_turns_vertical(self) -> None:
        result = kernel([Point(0, 0), Point(30, 0)], [Point(70, 50), Point(100, 50)], [])
        assert result == Point(30, 50)

    def test_after_vertical_turns_horizontal(self) -> None:
        result = kernel(
            [Point(0, 0), Point(30, 0), Point(30, 50)],
            [Point(70, 50), Point(100, 50)],
            [],
        )
        assert result == Point(70, 50)

    def test_aligned_target_goes_straight(self) -> None:
        """An empty turn becomes a straight move toward the target."""
        result = kernel([Point(40, 20), Point(70, 20)], [Point(170, 20), Point(200, 20)], [])
        assert result == Point(170, 20)

    def test_deadlock_nudged(self) -> None:
        """A target approached from behind pushes the turn out once."""
        observer = RecordingObserver()
        boxes = [BoundingBox(0, 0, 40, 40), BoundingBox(200, 0, 240, 40)]

        result = kernel(
            [Point(40, 20), Point(70, 20)],
            [Point(270, 20), Point(240, 20)],
            boxes,
            observer=observer,
        )

        assert result == Point(70, 60)
        red = observer.points("red")
        assert len(red) == 1
        assert red[0].point == Point(200, 20)

    def test_custom_nudge(self) -> None:
        boxes = [BoundingBox(0, 0, 40, 40), BoundingBox(200, 0, 240, 40)]
        result = kernel(
            [Point(40, 20), Point(70, 20)],
            [Point(270, 20), Point(240, 20)],
            boxes,
            deadlock_nudge=15.0,
        )
        assert result == Point(70, 35)
