"""Configuration settings for ShapeGeom."""

from pathlib import Path

from pydantic import BaseModel, Field

from shapegeom.core.numeric import ARC_HIT_DELTA, LINE_HIT_DELTA
from shapegeom.domain.resize import ResizeModifiers


class GeometryConfig(BaseModel):
    """Tolerances used by hit-testing queries.

    All values are in pixels of the diagram's coordinate space. The
    defaults are the kernel's built-in tolerances.
    """

    line_hit_delta: float = Field(
        default=LINE_HIT_DELTA,
        ge=0.0,
        le=50.0,
        description="Maximum distance of a point still lying on a line",
    )
    arc_hit_delta: float = Field(
        default=ARC_HIT_DELTA,
        ge=0.0,
        le=50.0,
        description="Maximum distance of a point still lying on an arc",
    )


class ResizeConfig(BaseModel):
    """Configuration for resizing rectangles with the mouse."""

    center_pos_factor_x: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Relative horizontal position of a shape's center",
    )
    center_pos_factor_y: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Relative vertical position of a shape's center",
    )
    align_div_factor_x: int = Field(
        default=2,
        ge=1,
        description="Horizontal movements are snapped to multiples of this value",
    )
    align_div_factor_y: int = Field(
        default=2,
        ge=1,
        description="Vertical movements are snapped to multiples of this value",
    )
    maintain_aspect: bool = Field(
        default=False,
        description="Keep the width/height ratio while resizing",
    )
    mirrored_resize: bool = Field(
        default=False,
        description="Move opposing edges together so the center stays in place",
    )

    def modifiers(self) -> ResizeModifiers:
        """Build the modifier flags selected by this configuration."""
        result = ResizeModifiers.NONE
        if self.maintain_aspect:
            result |= ResizeModifiers.MAINTAIN_ASPECT
        if self.mirrored_resize:
            result |= ResizeModifiers.MIRRORED_RESIZE
        return result


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging if not set)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ShapeGeomSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    resize: ResizeConfig = Field(default_factory=ResizeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapeGeomSettings:
    """Get default application settings."""
    return ShapeGeomSettings()
