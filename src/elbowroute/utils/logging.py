"""Logging utilities for elbowroute."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class RoutingStats:
    """Statistics from a scene processing run."""

    routed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    non_converged_count: int = 0
    joints_added: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    arrow_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_arrow_time_ms(self) -> float | None:
        """Average routing time per arrow, None if nothing was routed."""
        if not self.arrow_timings_ms:
            return None
        return sum(self.arrow_timings_ms) / len(self.arrow_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by an earlier call
    for handler in [h for h in root_logger.handlers if getattr(h, "_elbowroute", False)]:
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._elbowroute = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._elbowroute = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("elbowroute")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
        started=datetime.now().isoformat(timespec="seconds"),
    )

    return logger


class RoutingLogger:
    """Logger for tracking routing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RoutingStats()

    def log_arrow_start(self, arrow_id: str) -> None:
        """Log start of arrow routing."""
        self._logger.debug("Routing arrow", arrow=arrow_id)

    def log_arrow_routed(
        self,
        arrow_id: str,
        joints: int,
        converged: bool,
        duration_ms: float,
    ) -> None:
        """Log successful arrow routing."""
        self._logger.info(
            "Arrow routed",
            arrow=arrow_id,
            joints=joints,
            converged=converged,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.routed_count += 1
        self._stats.joints_added += joints
        self._stats.arrow_timings_ms.append(duration_ms)
        if not converged:
            self._stats.non_converged_count += 1

    def log_arrow_skipped(self, arrow_id: str, reason: str) -> None:
        """Log skipped arrow."""
        self._logger.debug("Arrow skipped", arrow=arrow_id, reason=reason)
        self._stats.skipped_count += 1

    def log_arrow_error(
        self,
        arrow_id: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log arrow routing error."""
        self._logger.error(
            "Arrow routing failed",
            arrow=arrow_id,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((arrow_id, str(error)))

    @property
    def stats(self) -> RoutingStats:
        """Get current routing statistics."""
        return self._stats
