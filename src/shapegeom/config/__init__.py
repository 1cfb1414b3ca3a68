"""Configuration management for shapegeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Hit-test tolerances
- ResizeConfig: Resize parameters and modifiers
- LoggingConfig: Logging settings
- ShapeGeomSettings: Main application settings
"""

from shapegeom.config.settings import (
    GeometryConfig,
    LoggingConfig,
    ResizeConfig,
    ShapeGeomSettings,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "ResizeConfig",
    "ShapeGeomSettings",
    "get_default_settings",
]
