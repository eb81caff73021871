"""Scene processing orchestration for elbow arrow routing.

This module routes every elbow arrow of a scene file against one snapshot of
the scene's shapes, optionally fanning arrows out to worker processes.

Key components:
- route_arrow_payload: Top-level picklable function for parallel execution
- SceneProcessor: Main orchestrator class for scene processing
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from elbowroute.config import ElbowRouteSettings, RoutingConfig
from elbowroute.core.router import ElbowRouter
from elbowroute.domain import Arrow, Point, SceneSnapshot
from elbowroute.exceptions import ArrowRoutingError, ProcessingCancelledError
from elbowroute.io import SceneReader, SceneWriter
from elbowroute.utils import RoutingLogger, RoutingStats, configure_logging

ProgressCallback = Callable[[int, int, str, bool], None]


def route_arrow_payload(
    arrow_dict: dict[str, Any],
    snapshot_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Route a single serialized arrow.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the arrow and snapshot, routes, and returns the result.

    Args:
        arrow_dict: Serialized arrow (from Arrow.to_dict())
        snapshot_dict: Serialized snapshot (from SceneSnapshot.to_dict())
        config_dict: Serialized routing configuration

    Returns:
        Dictionary containing either:
        - Success: {"arrow_id": str, "points": list, "joints": int,
          "converged": bool, "duration_ms": float}
        - Error: {"error": str, "arrow_id": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        arrow = Arrow.from_dict(arrow_dict)
        snapshot = SceneSnapshot.from_dict(snapshot_dict)
        router = ElbowRouter(config=RoutingConfig(**config_dict))

        result = router.route_detailed(arrow, snapshot)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "arrow_id": arrow.id,
            "points": [p.to_dict() for p in result.points],
            "joints": result.joint_count,
            "converged": result.converged,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        # Capture full traceback for debugging
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "arrow_id": arrow_dict.get("id", "unknown"),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class SceneProcessor:
    """Orchestrates elbow arrow routing for a scene file.

    Manages the complete workflow:
    1. Load scene file
    2. Select arrows requiring routing (non-deleted elbow arrows)
    3. Route arrows, in-process or in worker processes
    4. Collect results and update statistics
    5. Save the updated scene

    Example:
        settings = ElbowRouteSettings()
        processor = SceneProcessor(settings)
        stats = processor.process(
            scene_path=Path("diagram.excalidraw"),
            output_path=Path("diagram-routed.excalidraw"),
        )
    """

    def __init__(self, config: ElbowRouteSettings) -> None:
        """Initialize scene processor with configuration.

        Args:
            config: Settings containing routing, processing and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=config.logging.quiet,
        )
        self.routing_logger = RoutingLogger(self.logger)

    def select_arrows(self, arrows: list[Arrow], stats: RoutingStats) -> list[Arrow]:
        """Filter the arrows that should be routed.

        Args:
            arrows: All arrows of the scene
            stats: Statistics object to update with skips

        Returns:
            Arrows to route, in scene order
        """
        selected: list[Arrow] = []

        for arrow in arrows:
            if arrow.is_deleted:
                reason = "deleted arrow"
            elif self.config.processing.skip_non_elbow and not arrow.elbowed:
                reason = "not an elbow arrow"
            elif len(arrow.points) < 2:
                reason = "fewer than two points"
            else:
                selected.append(arrow)
                continue

            stats.skipped_count += 1
            self.routing_logger.log_arrow_skipped(arrow.id, reason)

        return selected

    def process(
        self,
        scene_path: Path,
        output_path: Path | None = None,
        max_workers: int | None = None,
        progress_callback: ProgressCallback | None = None,
        dry_run: bool = False,
    ) -> RoutingStats:
        """Route all elbow arrows of a scene file.

        Args:
            scene_path: Path to input scene file
            output_path: Path for output scene (auto-generated if None)
            max_workers: Maximum worker processes (None = use config)
            progress_callback: Optional callback(completed, total, arrow_id, success)
                for progress updates
            dry_run: Route but do not write the output file

        Returns:
            RoutingStats with counts, timing, and error details

        Raises:
            FileNotFoundError: If scene file does not exist
            SceneFormatError: If the scene file is not a valid document
            ProcessingCancelledError: If processing is cancelled by user
        """
        stats = RoutingStats()
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        if output_path is None:
            output_path = SceneWriter.get_routed_path(scene_path)

        self.logger.info(
            "Starting scene processing",
            input=str(scene_path),
            output=str(output_path),
            max_workers=max_workers,
            dry_run=dry_run,
        )

        reader = SceneReader(scene_path)
        reader.load()

        try:
            snapshot = reader.snapshot()
            arrows = self.select_arrows(list(reader.iter_arrows()), stats)

            self.logger.info(
                "Scene loaded",
                elements=reader.element_count,
                shapes=len(snapshot),
                to_route=len(arrows),
                skipped=stats.skipped_count,
            )

            routed: dict[str, tuple[Point, ...]] = {}
            if arrows:
                routed = self._route_arrows(
                    arrows=arrows,
                    snapshot=snapshot,
                    max_workers=max_workers,
                    stats=stats,
                    progress_callback=progress_callback,
                )
            else:
                self.logger.info("No arrows to route")

            if not dry_run:
                self._save_scene(reader.document, output_path, routed)

        finally:
            reader.close()

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            routed=stats.routed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            non_converged=stats.non_converged_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _route_arrows(
        self,
        arrows: list[Arrow],
        snapshot: SceneSnapshot,
        max_workers: int | None,
        stats: RoutingStats,
        progress_callback: ProgressCallback | None = None,
    ) -> dict[str, tuple[Point, ...]]:
        """Route arrows and collect their new points.

        Args:
            arrows: Arrows to route
            snapshot: Shape snapshot shared by all arrows
            max_workers: 1 routes in-process, anything else uses worker processes
            stats: Statistics object to update
            progress_callback: Optional progress callback

        Returns:
            Dictionary mapping arrow ids to new local-space points

        Raises:
            ProcessingCancelledError: On KeyboardInterrupt, with the number of
                arrows finished and still pending
        """
        snapshot_dict = snapshot.to_dict()
        config_dict = self.config.routing.model_dump()
        total = len(arrows)
        routed: dict[str, tuple[Point, ...]] = {}

        if max_workers == 1:
            for completed, arrow in enumerate(arrows, start=1):
                self.routing_logger.log_arrow_start(arrow.id)
                try:
                    result = route_arrow_payload(arrow.to_dict(), snapshot_dict, config_dict)
                except KeyboardInterrupt:
                    self.logger.info("Cancellation requested by user")
                    raise ProcessingCancelledError(completed - 1, total - completed + 1) from None
                success = self._collect_result(arrow.id, result, stats, routed)
                if progress_callback is not None:
                    progress_callback(completed, total, arrow.id, success)
            return routed

        self.logger.info(
            "Starting parallel routing",
            arrow_count=total,
            max_workers=max_workers,
        )

        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for arrow in arrows:
                future = executor.submit(
                    route_arrow_payload,
                    arrow.to_dict(),
                    snapshot_dict,
                    config_dict,
                )
                pending_futures[future] = arrow.id

            try:
                for future in as_completed(pending_futures):
                    arrow_id = pending_futures.pop(future)
                    success = False

                    try:
                        result = future.result()
                        success = self._collect_result(arrow_id, result, stats, routed)
                    except Exception as e:
                        # Executor-level error
                        self.routing_logger.log_arrow_error(
                            arrow_id=arrow_id,
                            error=e,
                            traceback=traceback.format_exc(),
                        )
                        stats.error_count += 1
                        stats.errors.append((arrow_id, str(e)))

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, arrow_id, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()
                executor.shutdown(wait=True, cancel_futures=True)
                raise ProcessingCancelledError(completed, total - completed) from None

        return routed

    def _collect_result(
        self,
        arrow_id: str,
        result: dict[str, Any],
        stats: RoutingStats,
        routed: dict[str, tuple[Point, ...]],
    ) -> bool:
        """Record one routing result; returns True on success."""
        if "error" in result:
            self.routing_logger.log_arrow_error(
                arrow_id=result["arrow_id"],
                error=ArrowRoutingError(result["arrow_id"], result["error"]),
                traceback=result.get("traceback"),
            )
            stats.error_count += 1
            stats.errors.append((arrow_id, result["error"]))
            return False

        routed[arrow_id] = tuple(Point.from_dict(p) for p in result["points"])

        duration_ms = result.get("duration_ms", 0.0)
        self.routing_logger.log_arrow_routed(
            arrow_id=arrow_id,
            joints=result["joints"],
            converged=result["converged"],
            duration_ms=duration_ms,
        )
        stats.routed_count += 1
        stats.joints_added += result["joints"]
        stats.arrow_timings_ms.append(duration_ms)
        if not result["converged"]:
            stats.non_converged_count += 1
        return True

    def _save_scene(
        self,
        document: dict[str, Any],
        output_path: Path,
        routed: dict[str, tuple[Point, ...]],
    ) -> None:
        """Save the scene with routed arrows to output path.

        Args:
            document: Loaded scene document
            output_path: Path to save the scene
            routed: New points per arrow id
        """
        writer = SceneWriter(document, output_path)

        for arrow_id, points in routed.items():
            writer.update_arrow(arrow_id, points)

        writer.save()

        self.logger.info(
            "Scene saved",
            output=str(output_path),
            updated_arrows=len(routed),
        )
