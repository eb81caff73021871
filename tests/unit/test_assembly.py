"""Tests for segment assembly."""

from unittest.mock import patch

from elbowroute.core.assembly import calculate_segment
from elbowroute.core.observer import RecordingObserver
from elbowroute.domain import BoundingBox, Point

FACING_BOXES = [BoundingBox(0, 0, 40, 40), BoundingBox(200, 0, 240, 40)]


def _is_orthogonal(points: tuple[Point, ...]) -> bool:
    return all(a.x == b.x or a.y == b.y for a, b in zip(points, points[1:], strict=False))


class TestCalculateSegment:
    """Tests for calculate_segment function."""

    def test_single_turn(self) -> None:
        """Offset free ends meet after one joint."""
        result = calculate_segment(
            [Point(0, 0), Point(30, 0)],
            [Point(70, 50), Point(100, 50)],
            [],
        )

        assert result.converged
        assert result.steps == 1
        assert result.points == (
            Point(0, 0),
            Point(30, 0),
            Point(30, 50),
            Point(70, 50),
            Point(100, 50),
        )

    def test_straight_path_has_no_steps(self) -> None:
        result = calculate_segment(
            [Point(40, 20), Point(70, 20)],
            [Point(170, 20), Point(200, 20)],
            FACING_BOXES,
        )

        assert result.converged
        assert result.steps == 0
        assert result.points == (Point(40, 20), Point(70, 20), Point(170, 20), Point(200, 20))

    def test_deadlock_route(self) -> None:
        """Both stubs pointing right route around the end shape."""
        observer = RecordingObserver()
        result = calculate_segment(
            [Point(40, 20), Point(70, 20)],
            [Point(270, 20), Point(240, 20)],
            FACING_BOXES,
            observer=observer,
        )

        assert result.converged
        assert result.steps == 2
        assert result.points == (
            Point(40, 20),
            Point(70, 20),
            Point(70, 60),
            Point(270, 60),
            Point(270, 20),
            Point(240, 20),
        )
        assert _is_orthogonal(result.points)
        assert len(observer.points("red")) == 1
        assert [e.point for e in observer.points("orange")] == [Point(70, 60), Point(270, 60)]

    def test_step_limit_reached(self) -> None:
        """Hitting the ceiling returns the partial path joined to the end."""
        observer = RecordingObserver()
        result = calculate_segment(
            [Point(40, 20), Point(70, 20)],
            [Point(270, 20), Point(240, 20)],
            FACING_BOXES,
            step_count_limit=1,
            observer=observer,
        )

        assert not result.converged
        assert result.steps == 1
        assert result.points == (
            Point(40, 20),
            Point(70, 20),
            Point(70, 60),
            Point(270, 20),
            Point(240, 20),
        )
        red_segments = [e for e in observer.events if e.kind == "segments" and e.color == "red"]
        assert len(red_segments) == 1

    def test_length_bounded_by_step_limit(self) -> None:
        for limit in (1, 2, 5):
            result = calculate_segment(
                [Point(40, 20), Point(70, 20)],
                [Point(270, 20), Point(240, 20)],
                FACING_BOXES,
                step_count_limit=limit,
            )
            assert len(result.points) <= limit + 4

    def test_step_limit_logs_warning(self) -> None:
        """Hitting the ceiling is reported with the step count and limit."""
        with patch("elbowroute.core.assembly.logger") as mock_logger:
            calculate_segment(
                [Point(40, 20), Point(70, 20)],
                [Point(270, 20), Point(240, 20)],
                FACING_BOXES,
                step_count_limit=1,
            )

        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("Elbow arrow routing step count limit reached",)
        assert kwargs["steps"] == 1
        assert kwargs["limit"] == 1
        assert kwargs["points"] == [(40, 20), (70, 20), (70, 60)]

    def test_converged_route_logs_nothing(self) -> None:
        with patch("elbowroute.core.assembly.logger") as mock_logger:
            calculate_segment(
                [Point(40, 20), Point(70, 20)],
                [Point(270, 20), Point(240, 20)],
                FACING_BOXES,
            )

        mock_logger.warning.assert_not_called()

    def test_coincident_stubs_merged(self) -> None:
        """Stubs that already meet are joined without repeating the point."""
        box = BoundingBox(0, 0, 40, 40)
        result = calculate_segment(
            [Point(20, 20), Point(20, -30)],
            [Point(20, -30), Point(20, 20)],
            [box],
        )

        assert result.converged
        assert result.steps == 0
        assert result.points == (Point(20, 20), Point(20, -30), Point(20, 20))

    def test_coincident_stubs_within_tolerance(self) -> None:
        result = calculate_segment(
            [Point(0, 0), Point(0, -30)],
            [Point(0, -30.0000001), Point(0, 0)],
            [],
            tolerance=1e-6,
        )

        assert result.points == (Point(0, 0), Point(0, -30), Point(0, 0))
