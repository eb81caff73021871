"""Configuration settings for elbowroute."""

from pathlib import Path

from pydantic import BaseModel, Field

# Defaults of the routing constants
STEP_COUNT_LIMIT = 50
MIN_SELF_BOX_OFFSET = 30.0
DEADLOCK_NUDGE = 40.0


class RoutingConfig(BaseModel):
    """Configuration for orthogonal arrow routing.

    Distances are in canvas units.
    """

    step_count_limit: int = Field(
        default=STEP_COUNT_LIMIT,
        ge=1,
        le=1000,
        description="Hard ceiling on step kernel iterations per arrow",
    )
    min_self_box_offset: float = Field(
        default=MIN_SELF_BOX_OFFSET,
        ge=0.0,
        le=500.0,
        description="Clearance added beyond a bound shape's box before the search starts",
    )
    deadlock_nudge: float = Field(
        default=DEADLOCK_NUDGE,
        ge=0.0,
        le=500.0,
        description="Offset applied to break an opposing-heading stalemate",
    )
    heading_triangle_scale: float = Field(
        default=2.0,
        ge=1.0,
        le=10.0,
        description="How far heading triangle corners are pushed out from the box midpoint",
    )
    point_tolerance: float = Field(
        default=1e-6,
        ge=0.0,
        le=1.0,
        description="Coordinate tolerance for point equality",
    )


class ProcessingConfig(BaseModel):
    """Configuration for scene processing."""

    max_workers: int | None = Field(
        default=1,
        description="Max worker processes (1 = route in-process, None = auto)",
    )
    skip_non_elbow: bool = Field(
        default=True,
        description="Leave arrows without the elbowed flag untouched",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Suppress console output except errors",
    )


class ElbowRouteSettings(BaseModel):
    """Main application settings."""

    routing: RoutingConfig = Field(default_factory=RoutingConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ElbowRouteSettings:
    """Get default application settings."""
    return ElbowRouteSettings()
