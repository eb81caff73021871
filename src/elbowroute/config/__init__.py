"""Configuration management for elbowroute.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RoutingConfig: Routing constants and tolerances
- ProcessingConfig: Scene processing settings
- LoggingConfig: Logging settings
- ElbowRouteSettings: Main application settings
"""

from elbowroute.config.settings import (
    DEADLOCK_NUDGE,
    MIN_SELF_BOX_OFFSET,
    STEP_COUNT_LIMIT,
    ElbowRouteSettings,
    LoggingConfig,
    ProcessingConfig,
    RoutingConfig,
    get_default_settings,
)

__all__ = [
    "DEADLOCK_NUDGE",
    "MIN_SELF_BOX_OFFSET",
    "STEP_COUNT_LIMIT",
    "ElbowRouteSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "RoutingConfig",
    "get_default_settings",
]
