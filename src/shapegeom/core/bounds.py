"""Rectangle centers, unions and bounding rectangles.

Bounding rectangles are always integer rectangles. Floating point input is
widened outwards (floor for the top-left corner, ceiling for the
bottom-right corner) unless the caller asks for the inner rectangle.
"""

import math
from collections.abc import Iterable, Sequence

from shapegeom.core.numeric import RADIANS_FACTOR, assert_is_valid, is_valid
from shapegeom.core.rotation import rotate_point
from shapegeom.domain.primitives import Point, PointF, Rectangle, RectangleF
from shapegeom.exceptions import InvalidArgumentError

POINTS_PER_INCH = 72


def rectangle_center(rect: Rectangle | RectangleF) -> PointF:
    """Center of a rectangle.

    Examples:
        >>> rectangle_center(Rectangle(10, 20, 4, 6))
        PointF(x=12.0, y=23.0)
    """
    return PointF(rect.x + rect.width / 2, rect.y + rect.height / 2)


def unite_rectangles(
    a: Rectangle | RectangleF | None, b: Rectangle | RectangleF | None
) -> Rectangle | None:
    """Smallest integer rectangle enclosing both rectangles.

    An invalid or missing rectangle is ignored, so the union of a valid and
    an invalid rectangle is the valid one (widened to integers).

    Returns:
        The union, or None if neither rectangle is valid
    """
    a_ok = a is not None and is_valid(a)
    b_ok = b is not None and is_valid(b)
    if not a_ok and not b_ok:
        return None
    if not b_ok:
        return a.to_rectangle() if isinstance(a, RectangleF) else a
    if not a_ok:
        return b.to_rectangle() if isinstance(b, RectangleF) else b
    left = min(math.floor(a.left), math.floor(b.left))
    top = min(math.floor(a.top), math.floor(b.top))
    right = max(math.ceil(a.right), math.ceil(b.right))
    bottom = max(math.ceil(a.bottom), math.ceil(b.bottom))
    return Rectangle.from_ltrb(left, top, right, bottom)


def unite_with_rectangle(rect: Rectangle, p: Point) -> Rectangle:
    """Grow a rectangle so that it includes a point.

    Examples:
        >>> unite_with_rectangle(Rectangle(0, 0, 10, 10), Point(-5, 20))
        Rectangle(x=-5, y=0, width=15, height=20)
    """
    if __debug__:
        assert_is_valid(rect, p)
    return include_rectangle_point(rect, p)


def include_rectangle_point(rect: Rectangle, p: Point) -> Rectangle:
    """Like ``unite_with_rectangle`` but without validating its input."""
    return Rectangle.from_ltrb(
        min(rect.left, p.x),
        min(rect.top, p.y),
        max(rect.right, p.x),
        max(rect.bottom, p.y),
    )


def calc_bounding_rectangle(
    points: Iterable[Point | PointF],
    rotation_center: Point | PointF | None = None,
    angle_deg: float = 0.0,
    floor: bool = False,
) -> Rectangle | None:
    """Axis-aligned bounding rectangle of a set of points.

    Args:
        points: Points to enclose
        rotation_center: Center to rotate the points around first
        angle_deg: Rotation angle in degrees; ignored without a center
        floor: Round floating point extremes inwards instead of outwards

    Returns:
        The bounding rectangle, or None for an empty point set

    Raises:
        InvalidArgumentError: If ``points`` is None
    """
    if points is None:
        raise InvalidArgumentError("points", "must not be None")
    left = top = math.inf
    right = bottom = -math.inf
    for p in points:
        if rotation_center is not None and angle_deg != 0:
            p = rotate_point(rotation_center, angle_deg, p)
        left = min(left, p.x)
        top = min(top, p.y)
        right = max(right, p.x)
        bottom = max(bottom, p.y)
    if left == math.inf:
        return None
    if floor:
        return Rectangle.from_ltrb(math.ceil(left), math.ceil(top), math.floor(right), math.floor(bottom))
    return Rectangle.from_ltrb(math.floor(left), math.floor(top), math.ceil(right), math.ceil(bottom))


def calc_bounding_rectangle_ellipse(
    center: Point | PointF, width: float, height: float, angle_deg: float
) -> Rectangle:
    """Bounding rectangle of an ellipse rotated around its center.

    The horizontal and vertical extremes of the parametric ellipse

        x = a·cos(t)·cos(phi) - b·sin(t)·sin(phi)
        y = b·sin(t)·cos(phi) + a·cos(t)·sin(phi)

    lie at ``tan(t) = -b·tan(phi)/a`` and ``tan(t) = b·cot(phi)/a``.

    Examples:
        >>> calc_bounding_rectangle_ellipse(Point(0, 0), 20, 10, 90)
        Rectangle(x=-5, y=-10, width=10, height=20)
    """
    a = width / 2
    b = height / 2
    phi = angle_deg * RADIANS_FACTOR
    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    # atan2 keeps the cot(phi) form finite for phi == 0
    t1 = round(math.atan2(-b * sin_phi, a * cos_phi), 7)
    t2 = round(math.atan2(b * cos_phi, a * sin_phi), 7)

    dx = max(
        abs(a * math.cos(t) * cos_phi - b * math.sin(t) * sin_phi) for t in (t1, t2)
    )
    dy = max(
        abs(b * math.sin(t) * cos_phi + a * math.cos(t) * sin_phi) for t in (t1, t2)
    )
    left = math.floor(center.x - dx)
    top = math.floor(center.y - dy)
    return Rectangle(left, top, math.ceil(center.x + dx) - left, math.ceil(center.y + dy) - top)


def calc_scale_factors(
    src_width: float, src_height: float, dst_width: float, dst_height: float
) -> tuple[float, float]:
    """Horizontal and vertical factors scaling a source size to a destination size.

    A zero source extent is treated as 1.
    """
    return (
        dst_width / (src_width if src_width != 0 else 1),
        dst_height / (src_height if src_height != 0 else 1),
    )


def calc_scale_factor(
    src_width: float,
    src_height: float,
    dst_width: float,
    dst_height: float,
    minimum: bool = True,
) -> float:
    """Uniform scale factor fitting a source size into a destination size.

    With ``minimum`` the source fits completely into the destination;
    otherwise it covers the destination completely.

    Examples:
        >>> calc_scale_factor(100, 50, 200, 200)
        2.0
        >>> calc_scale_factor(100, 50, 200, 200, minimum=False)
        4.0
    """
    scale_x, scale_y = calc_scale_factors(src_width, src_height, dst_width, dst_height)
    return min(scale_x, scale_y) if minimum else max(scale_x, scale_y)


def calc_polygon_balance_point(points: Sequence[Point | PointF]) -> Point | PointF:
    """Arithmetic mean of a polygon's vertices.

    Integer input is rounded to the nearest integer point.

    Raises:
        InvalidArgumentError: If ``points`` is None or empty
    """
    if not points:
        raise InvalidArgumentError("points", "a polygon needs at least one point")
    count = len(points)
    x = sum(p.x for p in points) / count
    y = sum(p.y for p in points) / count
    if isinstance(points[0], Point):
        return Point(round(x), round(y))
    return PointF(x, y)


def point_to_pixel(size_in_points: float, dpi: float) -> int:
    """Convert a size in typographic points to whole pixels, rounding up."""
    return math.ceil(size_in_points / POINTS_PER_INCH * dpi)


def pixel_to_point(size_in_pixels: int, dpi: float) -> float:
    """Convert a size in pixels to typographic points."""
    return size_in_pixels * POINTS_PER_INCH / dpi
