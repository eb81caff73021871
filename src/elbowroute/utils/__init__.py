"""Utility functions for elbowroute.

This module provides utility functions including:

- Logging setup and configuration
- Routing statistics
"""

from elbowroute.utils.logging import (
    RoutingLogger,
    RoutingStats,
    configure_logging,
)

__all__ = [
    "RoutingLogger",
    "RoutingStats",
    "configure_logging",
]
