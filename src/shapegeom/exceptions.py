"""Exception hierarchy for ShapeGeom.

Geometric "no result" outcomes (parallel lines, missing intersections,
degenerate input) are returned as ``None`` and never raised. Exceptions are
reserved for programmer errors and malformed command-line input.
"""

from typing import Any


class ShapeGeomError(Exception):
    """Base exception for all ShapeGeom errors."""

    pass


class GeometryError(ShapeGeomError):
    """Errors raised by the geometry kernel."""

    pass


class InvalidArgumentError(GeometryError, ValueError):
    """An argument is outside the domain of the called function."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid argument '{name}': {reason}")


class InvalidGeometryError(GeometryError, ValueError):
    """A point, size or rectangle assumed valid is not (debug builds only)."""

    def __init__(self, value: Any, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid geometry {value!r}: {reason}")


class InputError(ShapeGeomError):
    """Errors related to command-line input."""

    pass


class PointParseError(InputError):
    """Text could not be parsed as a point."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse point '{text}': {reason}")
