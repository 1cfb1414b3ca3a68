"""Numeric model of the geometry kernel.

This module provides the foundation every other kernel module builds on:
- Tolerance constants and tolerant comparison
- Rounding helpers (half to even, half away from zero, exact integer division)
- 32-bit range checks used to narrow integer results
- Validity predicates for coordinates, sizes, points and rectangles
- Debug assertions and conversion between ``None`` and sentinel values

Integer arithmetic relies on Python's unbounded ``int``, so products such as
cross products never overflow. Results are narrowed back to 32-bit points
only when they fit.
"""

import math
from typing import Any, TypeVar

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
    Rectangle,
    RectangleF,
    Size,
    SizeF,
)
from shapegeom.exceptions import InvalidGeometryError

T = TypeVar("T")

EQUALITY_DELTA_DOUBLE = 1e-6
EQUALITY_DELTA_FLOAT = 1e-6
RADIANS_FACTOR = math.pi / 180.0

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Default hit-test tolerances
LINE_HIT_DELTA = 0.5
ARC_HIT_DELTA = 0.1
ARC_RECTANGLE_DELTA = 0.01
NEAREST_SEGMENT_DELTA = 0.75

_SENTINELS: dict[type, Any] = {
    Point: INVALID_POINT,
    PointF: INVALID_POINTF,
    Size: INVALID_SIZE,
    SizeF: INVALID_SIZEF,
    Rectangle: INVALID_RECTANGLE,
    RectangleF: INVALID_RECTANGLEF,
}


def equals(a: float, b: float, delta: float = EQUALITY_DELTA_DOUBLE) -> bool:
    """Compare two numbers within a tolerance.

    The relation is not transitive near the tolerance boundary.

    Args:
        a: First value
        b: Second value
        delta: Maximum difference (exclusive) still considered equal

    Returns:
        True if ``|a - b| < delta``

    Examples:
        >>> equals(1.0, 1.0 + 1e-9)
        True
        >>> equals(1.0, 1.001)
        False
    """
    return abs(a - b) < delta


def tolerance_for(point: Point | PointF) -> float:
    """Return the comparison tolerance matching a point type (0 for integers)."""
    return 0.0 if isinstance(point, Point) else EQUALITY_DELTA_FLOAT


def signum(value: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_div(numerator: int, denominator: int) -> int:
    """Divide two integers exactly and round the quotient half to even.

    Args:
        numerator: Dividend
        denominator: Divisor, must not be zero

    Returns:
        The rounded quotient

    Examples:
        >>> round_div(7, 2)
        4
        >>> round_div(5, 2)
        2
        >>> round_div(-540, -72)
        8
    """
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    quotient, remainder = divmod(numerator, denominator)
    twice = 2 * remainder
    if twice > denominator or (twice == denominator and quotient % 2 == 1):
        quotient += 1
    return quotient


def fits_int32(value: float) -> bool:
    """Check whether a value is finite and inside the 32-bit integer range."""
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return INT32_MIN <= value <= INT32_MAX


def narrow_point(x: float, y: float) -> Point | None:
    """Round a coordinate pair to an integer point if it fits 32 bits.

    Returns:
        The rounded point, or None when a coordinate is out of range
    """
    if not (fits_int32(x) and fits_int32(y)):
        return None
    point = Point(round(x), round(y))
    if not (fits_int32(point.x) and fits_int32(point.y)):
        return None
    return point


def greatest_common_factor(a: int, b: int) -> int:
    """Return the greatest common factor of two integers (always >= 0)."""
    return math.gcd(a, b)


def is_valid_coordinate(value: float) -> bool:
    """Check that a coordinate is finite and above the invalid sentinel."""
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value > INVALID_COORDINATE


def is_valid_size(value: float) -> bool:
    """Check that an extent is finite and not negative."""
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value >= 0


def is_valid(value: Any) -> bool:
    """Check validity of a point, size or rectangle.

    A point is valid when both coordinates are valid. A size is valid when
    both extents are valid. A rectangle is valid when its location and its
    size are valid.

    Args:
        value: Point, PointF, Size, SizeF, Rectangle or RectangleF

    Returns:
        True if the value is valid, False otherwise (including None)

    Examples:
        >>> is_valid(Point(3, 4))
        True
        >>> is_valid(INVALID_POINT)
        False
    """
    if isinstance(value, (Point, PointF)):
        return is_valid_coordinate(value.x) and is_valid_coordinate(value.y)
    if isinstance(value, (Size, SizeF)):
        return is_valid_size(value.width) and is_valid_size(value.height)
    if isinstance(value, (Rectangle, RectangleF)):
        return (
            is_valid_coordinate(value.x)
            and is_valid_coordinate(value.y)
            and is_valid_size(value.width)
            and is_valid_size(value.height)
        )
    return False


def assert_is_valid(*values: Any) -> None:
    """Raise if any value is not a valid point, size or rectangle.

    Kernel functions call this inside ``if __debug__:`` blocks, so the check
    disappears when Python runs with ``-O``.

    Raises:
        InvalidGeometryError: If a value is invalid
    """
    for value in values:
        if not is_valid(value):
            raise InvalidGeometryError(value, "expected a valid point, size or rectangle")


def to_sentinel(value: T | None, kind: type[T]) -> T:
    """Replace ``None`` with the invalid sentinel of ``kind``.

    Args:
        value: Optional kernel result
        kind: Point, PointF, Size, SizeF, Rectangle or RectangleF

    Returns:
        ``value`` itself, or the sentinel when ``value`` is None
    """
    if value is not None:
        return value
    return _SENTINELS[kind]


def from_sentinel(value: T) -> T | None:
    """Replace an invalid value (sentinel or otherwise) with ``None``."""
    return value if is_valid(value) else None


def calc_relative_quadrant(point: Point | PointF, origin: Point | PointF) -> int:
    """Return the quadrant (1-4) ``point`` lies in relative to ``origin``.

    Quadrants are numbered counter-clockwise starting at the positive x axis.
    A point on an axis belongs to the quadrant following it counter-clockwise;
    a point equal to the origin is in quadrant 1.
    """
    dx = point.x - origin.x
    dy = point.y - origin.y
    if dy >= 0 and dx > 0:
        return 1
    if dy > 0 and dx <= 0:
        return 2
    if dy <= 0 and dx < 0:
        return 3
    if dy < 0 and dx >= 0:
        return 4
    return 1
