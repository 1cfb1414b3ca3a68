"""Utility functions for shapegeom.

This module provides utility functions including:

- Logging setup and configuration
- Query statistics for the command-line front end
"""

from shapegeom.utils.logging import (
    QueryLogger,
    QueryStats,
    configure_logging,
)

__all__ = [
    "QueryLogger",
    "QueryStats",
    "configure_logging",
]
