"""Angles, unit conversions and rotation.

Angles come in three units: radians (for trigonometry), degrees, and tenths
of a degree (the unit diagram shapes persist and show in the UI). Each
conversion is a plain scalar function; nothing mixes units implicitly.

Every rotation computes its sine and cosine locally. No transform object is
kept between calls, so all functions are safe to use from several threads.
"""

import math

from shapegeom.core.numeric import RADIANS_FACTOR, assert_is_valid, round_half_away
from shapegeom.domain.primitives import Point, PointF, PointT, Rectangle, RectangleF, make_point


def degrees_to_radians(angle: float) -> float:
    return angle * RADIANS_FACTOR


def radians_to_degrees(angle: float) -> float:
    return angle / RADIANS_FACTOR


def tenths_of_degree_to_degrees(angle: int) -> float:
    return angle / 10.0


def tenths_of_degree_to_radians(angle: int) -> float:
    return angle * RADIANS_FACTOR / 10.0


def degrees_to_tenths_of_degree(angle: float) -> int:
    """Convert degrees to tenths of a degree, rounding halves away from zero.

    Examples:
        >>> degrees_to_tenths_of_degree(4.25)
        43
        >>> degrees_to_tenths_of_degree(-4.25)
        -43
    """
    return round_half_away(angle * 10)


def radians_to_tenths_of_degree(angle: float) -> int:
    """Convert radians to tenths of a degree, rounding halves away from zero."""
    return round_half_away(angle / (RADIANS_FACTOR / 10.0))


def angle(p0: Point | PointF, p1: Point | PointF) -> float:
    """Angle in radians of the vector from ``p0`` to ``p1``, in (-pi, pi]."""
    return math.atan2(p1.y - p0.y, p1.x - p0.x)


def angle3(p0: Point | PointF, p1: Point | PointF, p2: Point | PointF) -> float:
    """Angle in radians between the vectors p0->p1 and p0->p2."""
    return math.atan2(p1.x - p0.x, p1.y - p0.y) - math.atan2(p2.x - p0.x, p2.y - p0.y)


def rotate_point(center: Point | PointF, angle_deg: float, p: PointT) -> PointT:
    """Rotate a point around a center.

    Integer points are rounded to the nearest integer after rotation.

    Args:
        center: Center of rotation
        angle_deg: Rotation angle in degrees (clockwise on a y-down screen)
        p: Point to rotate

    Returns:
        Rotated point, of the same type as ``p``

    Examples:
        >>> rotate_point(Point(0, 0), 90, Point(1, 0))
        Point(x=0, y=1)
    """
    if __debug__:
        assert_is_valid(center, p)
    radians = angle_deg * RADIANS_FACTOR
    cos = math.cos(radians)
    sin = math.sin(radians)
    x = p.x - center.x
    y = p.y - center.y
    return make_point(
        type(p),
        center.x + x * cos - y * sin,
        center.y + x * sin + y * cos,
    )


def rotate_line(
    center: Point | PointF, angle_deg: float, a1: PointT, a2: PointT
) -> tuple[PointT, PointT]:
    """Rotate both points of a line around a center."""
    return (rotate_point(center, angle_deg, a1), rotate_point(center, angle_deg, a2))


def rotate_rectangle(
    rectangle: Rectangle | RectangleF, center: Point | PointF, angle_deg: float
) -> tuple:
    """Rotate the corners of a rectangle around a center.

    Returns:
        Tuple of (top_left, top_right, bottom_right, bottom_left). Integer
        rectangles give integer points.
    """
    return tuple(rotate_point(center, angle_deg, corner) for corner in rectangle.corners())


def transform_rectangle(
    caption_center: Point,
    angle_tenths: int,
    bounds: Rectangle,
    rotation_center: Point | None = None,
) -> tuple[Point, Point, Point, Point]:
    """Place rectangle bounds given relative to a caption center, then rotate them.

    Args:
        caption_center: Origin the bounds are relative to
        angle_tenths: Rotation angle in tenths of a degree
        bounds: Bounds relative to ``caption_center``
        rotation_center: Center of rotation (defaults to ``caption_center``)

    Returns:
        Tuple of (top_left, top_right, bottom_right, bottom_left)
    """
    moved = bounds.offset(caption_center.x, caption_center.y)
    center = caption_center if rotation_center is None else rotation_center
    return rotate_rectangle(moved, center, tenths_of_degree_to_degrees(angle_tenths))
