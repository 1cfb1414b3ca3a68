"""Value types for 2D geometry.

This module defines the immutable value types the kernel works on:
- Point / PointF: integer and floating point coordinates
- Size / SizeF: non-negative extents
- Rectangle / RectangleF: an origin plus a size

Integer and floating variants share their behaviour through small mixins.
Kernel functions accept either point type and return the same type they
were given; ``PointT`` is the type variable used for that.

The ``INVALID_*`` constants are the sentinel values used by callers that
still encode "no result" in-band. Kernel functions return ``None`` instead;
see ``shapegeom.core.numeric.to_sentinel`` for the conversion.
"""

import math
from dataclasses import dataclass
from typing import Any, TypeVar


class _PointMixin:
    """Behaviour shared by Point and PointF."""

    __slots__ = ()

    x: Any
    y: Any

    def to_tuple(self) -> tuple[Any, Any]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance of the called class
        """
        return cls(data["x"], data["y"])

    def offset(self, dx, dy):
        """Return a copy moved by (dx, dy)."""
        return type(self)(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class Point(_PointMixin):
    """A point with integer coordinates.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: int
    y: int

    def to_pointf(self) -> "PointF":
        """Convert to a floating point copy."""
        return PointF(float(self.x), float(self.y))


@dataclass(frozen=True, slots=True)
class PointF(_PointMixin):
    """A point with floating point coordinates.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def round(self) -> Point:
        """Round both coordinates to the nearest integer (half to even)."""
        return Point(round(self.x), round(self.y))


PointT = TypeVar("PointT", Point, PointF)


def make_point(kind: type[PointT], x: float, y: float) -> PointT:
    """Build a point of the given type, rounding for integer points.

    Args:
        kind: Point or PointF
        x: X coordinate
        y: Y coordinate

    Returns:
        Instance of ``kind``
    """
    if kind is Point:
        return Point(round(x), round(y))
    return PointF(float(x), float(y))


@dataclass(frozen=True, slots=True)
class Size:
    """An integer extent."""

    width: int
    height: int

    def to_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True, slots=True)
class SizeF:
    """A floating point extent."""

    width: float
    height: float

    def to_tuple(self) -> tuple[float, float]:
        return (self.width, self.height)


class _RectangleMixin:
    """Behaviour shared by Rectangle and RectangleF."""

    __slots__ = ()

    x: Any
    y: Any
    width: Any
    height: Any

    _point_type: type = PointF
    _size_type: type = SizeF

    @property
    def left(self):
        return self.x

    @property
    def top(self):
        return self.y

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def location(self):
        """Top-left corner."""
        return self._point_type(self.x, self.y)

    @property
    def size(self):
        return self._size_type(self.width, self.height)

    def is_empty(self) -> bool:
        """Check whether the rectangle has no area."""
        return self.width <= 0 or self.height <= 0

    def corners(self) -> tuple[Any, Any, Any, Any]:
        """Return the corners as (top_left, top_right, bottom_right, bottom_left)."""
        make = self._point_type
        return (
            make(self.left, self.top),
            make(self.right, self.top),
            make(self.right, self.bottom),
            make(self.left, self.bottom),
        )

    def offset(self, dx, dy):
        """Return a copy moved by (dx, dy)."""
        return type(self)(self.x + dx, self.y + dy, self.width, self.height)

    def to_tuple(self) -> tuple[Any, Any, Any, Any]:
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Deserialize from dictionary."""
        return cls(data["x"], data["y"], data["width"], data["height"])

    @classmethod
    def from_ltrb(cls, left, top, right, bottom):
        """Build a rectangle from its edge coordinates."""
        return cls(left, top, right - left, bottom - top)


@dataclass(frozen=True, slots=True)
class Rectangle(_RectangleMixin):
    """An integer rectangle, origin at the top-left corner.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent (>= 0 when valid)
        height: Vertical extent (>= 0 when valid)
    """

    x: int
    y: int
    width: int
    height: int

    _point_type = Point
    _size_type = Size

    def to_rectanglef(self) -> "RectangleF":
        return RectangleF(float(self.x), float(self.y), float(self.width), float(self.height))


@dataclass(frozen=True, slots=True)
class RectangleF(_RectangleMixin):
    """A floating point rectangle, origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    _point_type = PointF
    _size_type = SizeF

    def to_rectangle(self) -> Rectangle:
        """Return the smallest integer rectangle enclosing this one."""
        left = math.floor(self.x)
        top = math.floor(self.y)
        return Rectangle(
            left,
            top,
            math.ceil(self.x + self.width) - left,
            math.ceil(self.y + self.height) - top,
        )


# Sentinels
INVALID_COORDINATE = -(2**31)
INVALID_POINT = Point(INVALID_COORDINATE, INVALID_COORDINATE)
INVALID_POINTF = PointF(float(INVALID_COORDINATE), float(INVALID_COORDINATE))
INVALID_SIZE = Size(-1, -1)
INVALID_SIZEF = SizeF(-1.0, -1.0)
INVALID_RECTANGLE = Rectangle(0, 0, -1, -1)
INVALID_RECTANGLEF = RectangleF(0.0, 0.0, -1.0, -1.0)
