"""Domain models for shapegeom.

This module contains the immutable value types the geometry kernel
consumes and produces. All models are:

- Immutable (frozen dataclasses)
- Copied by value, without identity
- Free of any rendering or UI dependency

Key classes:
- Point, PointF: integer and floating point coordinates
- Size, SizeF: extents
- Rectangle, RectangleF: axis-aligned rectangles
- ResizeModifiers, ResizeHandle: resize parameters
- ResizeResult, ArrowMove: resize outcomes
"""

from shapegeom.domain.primitives import (
    INVALID_COORDINATE,
    INVALID_POINT,
    INVALID_POINTF,
    INVALID_RECTANGLE,
    INVALID_RECTANGLEF,
    INVALID_SIZE,
    INVALID_SIZEF,
    Point,
    PointF,
    PointT,
    Rectangle,
    RectangleF,
    Size,
    SizeF,
    make_point,
)
from shapegeom.domain.resize import ArrowMove, ResizeHandle, ResizeModifiers, ResizeResult

__all__: list[str] = [
    # Sentinels
    "INVALID_COORDINATE",
    "INVALID_POINT",
    "INVALID_POINTF",
    "INVALID_RECTANGLE",
    "INVALID_RECTANGLEF",
    "INVALID_SIZE",
    "INVALID_SIZEF",
    # Value types
    "Point",
    "PointF",
    "PointT",
    "Size",
    "SizeF",
    "Rectangle",
    "RectangleF",
    "make_point",
    # Resize types
    "ResizeModifiers",
    "ResizeHandle",
    "ResizeResult",
    "ArrowMove",
]
