"""Line and line segment formulas.

Lines are given in two-point form: two distinct points the line passes
through. A segment uses the same two points as its end points. This module
provides:
- Slope form and points at a distance along a line or direction
- Perpendicular lines, perpendicular bisectors and dropped feet
- Line/line, segment/segment and line/segment intersection points
- Clipping a ray against an axis-aligned box
- The circumscribed circle of three points

Integer intersections are computed exactly with Python integers and rounded
once at the end, so large coordinates never overflow. The coefficient
(``ax + by + c = 0``) functions at the bottom are kept for compatibility and
emit a ``DeprecationWarning``.
"""

import math
import warnings

from shapegeom.core.numeric import (
    assert_is_valid,
    equals,
    fits_int32,
    narrow_point,
    round_div,
    tolerance_for,
)
from shapegeom.domain.primitives import Point, PointF, PointT, make_point


def _divide(kind: type, numerator: float, denominator: float) -> float:
    if kind is Point:
        return round_div(numerator, denominator)
    return numerator / denominator


def _finish(kind: type[PointT], x: float, y: float) -> PointT | None:
    """Narrow an intersection result to the caller's point type."""
    if kind is Point:
        return narrow_point(x, y)
    if not (fits_int32(x) and fits_int32(y)):
        return None
    return PointF(float(x), float(y))


def is_point_in_box(
    p: Point | PointF,
    b1: Point | PointF,
    b2: Point | PointF,
    delta: float = 0.0,
) -> bool:
    """Check if a point lies in the closed box spanned by two corners.

    The corners may be given in any order.
    """
    return (
        min(b1.x, b2.x) - delta <= p.x <= max(b1.x, b2.x) + delta
        and min(b1.y, b2.y) - delta <= p.y <= max(b1.y, b2.y) + delta
    )


def calc_line(a1: Point | PointF, a2: Point | PointF) -> tuple[float, float]:
    """Calculate slope ``m`` and y-intercept ``c`` of the line ``y = mx + c``.

    A vertical line has an infinite slope; its sign follows the direction
    from ``a2`` to ``a1``.

    Returns:
        Tuple of (m, c)

    Examples:
        >>> calc_line(Point(0, 1), Point(2, 5))
        (2.0, 1.0)
    """
    m1 = a1.y - a2.y
    m2 = a1.x - a2.x
    if m2 != 0:
        m = m1 / m2
    else:
        m = -math.inf if m1 < 0 else math.inf
    c = a1.y - m * a1.x
    return (m, c)


def calc_point(origin: PointT, angle_deg: float, distance: float) -> PointT:
    """Return the point at ``distance`` from ``origin`` in direction ``angle_deg``."""
    angle = math.radians(angle_deg)
    x = origin.x + distance * math.cos(angle)
    y = origin.y + distance * math.sin(angle)
    return make_point(type(origin), x, y)


def calc_point_on_line(start: PointT, end: PointT, distance: float) -> PointT:
    """Return the point at ``distance`` from ``start`` towards ``end``.

    The distance may exceed the segment length or be negative. When ``start``
    and ``end`` coincide, ``start`` is returned.

    Examples:
        >>> calc_point_on_line(Point(-2, -4), Point(2, -4), 100)
        Point(x=98, y=-4)
    """
    length = math.hypot(end.x - start.x, end.y - start.y)
    if equals(length, 0):
        return start
    t = distance / length
    x = start.x + (end.x - start.x) * t
    y = start.y + (end.y - start.y) * t
    return make_point(type(start), x, y)


def calc_perpendicular_line(a1: PointT, a2: PointT) -> tuple[PointT, PointT]:
    """Calculate a perpendicular to the line a1-a2 through ``a1``.

    The returned points lie on either side of ``a1`` at half the distance
    between ``a1`` and ``a2``.

    Returns:
        Two points defining the perpendicular
    """
    kind = type(a1)
    dx = (a2.x - a1.x) / 2
    dy = (a2.y - a1.y) / 2
    if kind is Point:
        dx, dy = round(dx), round(dy)
    return (
        make_point(kind, a1.x + dy, a1.y - dx),
        make_point(kind, a1.x - dy, a1.y + dx),
    )


def calc_perpendicular_line_through(a1: PointT, a2: PointT, p: PointT) -> PointT:
    """Return a second point of the perpendicular to a1-a2 passing through ``p``.

    Examples:
        >>> calc_perpendicular_line_through(Point(0, 0), Point(4, 0), Point(1, 1))
        Point(x=1, y=5)
    """
    dx = a2.x - a1.x
    dy = a2.y - a1.y
    return type(p)(p.x - dy, p.y + dx)


def calc_perpendicular_bisector(a1: PointT, a2: PointT) -> tuple[PointT, PointT]:
    """Calculate the perpendicular bisector of the segment a1-a2.

    Returns:
        Two points on the bisector, symmetric about the segment's midpoint
    """
    kind = type(a1)
    dx = (a2.x - a1.x) / 2
    dy = (a2.y - a1.y) / 2
    return (
        make_point(kind, a1.x + dx - dy, a1.y + dx + dy),
        make_point(kind, a2.x - dx + dy, a2.y - dx - dy),
    )


def calc_dropped_perpendicular_foot(p: PointT, a1: PointT, a2: PointT) -> PointT | None:
    """Drop a perpendicular from ``p`` onto the line a1-a2 and return its foot.

    Returns:
        The foot point, ``a1`` if the line is degenerate, or None if the
        result is not representable

    Examples:
        >>> calc_dropped_perpendicular_foot(Point(8, 2), Point(-5, 1), Point(1, 7))
        Point(x=2, y=8)
    """
    if a1 == a2:
        return a1
    to = calc_perpendicular_line_through(a1, a2, p)
    return intersect_lines(p, to, a1, a2)


def intersect_lines(a1: PointT, a2: PointT, b1: PointT, b2: PointT) -> PointT | None:
    """Calculate the intersection point of two infinite lines.

    Vertical lines are handled by direct substitution; the general case
    solves the two-point forms without converting to coefficients.

    Args:
        a1: First point of line A
        a2: Second point of line A
        b1: First point of line B
        b2: Second point of line B

    Returns:
        Intersection point, or None for parallel or degenerate lines

    Examples:
        >>> intersect_lines(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))
        Point(x=5, y=5)
    """
    if __debug__:
        assert_is_valid(a1, a2, b1, b2)
    if a1 == a2 or b1 == b2:
        return None
    kind = type(a1)

    dxa = a2.x - a1.x
    dya = a2.y - a1.y
    dxb = b2.x - b1.x
    dyb = b2.y - b1.y

    if dxa == 0 and dxb == 0:
        return None
    if dxa == 0:
        x = a1.x
        y = _divide(kind, dyb * (x - b1.x), dxb) + b1.y
        return _finish(kind, x, y)
    if dxb == 0:
        x = b1.x
        y = _divide(kind, dya * (x - a1.x), dxa) + a1.y
        return _finish(kind, x, y)

    denominator = dya * dxb - dyb * dxa
    if denominator == 0:
        return None
    x_numerator = (
        (b1.y - a1.y) * dxa * dxb
        - b1.x * dyb * dxa
        + a1.x * dya * dxb
    )
    y_numerator = (
        -b1.y * dxb * dya
        + dyb * dya * b1.x
        + a1.y * dxa * dyb
        - dya * dyb * a1.x
    )
    x = _divide(kind, x_numerator, denominator)
    y = _divide(kind, y_numerator, -denominator)
    return _finish(kind, x, y)


def intersect_line_segments(a1: PointT, a2: PointT, b1: PointT, b2: PointT) -> PointT | None:
    """Calculate the intersection point of two line segments.

    Returns:
        Intersection point lying on both segments, or None

    Examples:
        >>> intersect_line_segments(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))
        Point(x=5, y=5)
    """
    if isinstance(a1, Point):
        result = intersect_lines(a1, a2, b1, b2)
        if result is not None and is_point_in_box(result, a1, a2) and is_point_in_box(result, b1, b2):
            return result
        return None

    if __debug__:
        assert_is_valid(a1, a2, b1, b2)
    x21 = a2.x - a1.x
    y21 = a2.y - a1.y
    x43 = b2.x - b1.x
    y43 = b2.y - b1.y
    x13 = a1.x - b1.x
    y13 = a1.y - b1.y
    d = y43 * x21 - x43 * y21
    if d == 0:
        return None
    u2 = (x21 * y13 - y21 * x13) / d
    u1 = (x43 * y13 - y43 * x13) / d
    if 0 <= u1 <= 1 and 0 <= u2 <= 1:
        return PointF(a1.x + x21 * u1, a1.y + y21 * u1)
    return None


def line_intersects_with_line(
    a1: Point | PointF, a2: Point | PointF, b1: Point | PointF, b2: Point | PointF
) -> bool:
    """Check whether the segments a1-a2 and b1-b2 intersect.

    Colinear segments intersect when they overlap.

    Examples:
        >>> line_intersects_with_line(Point(0, 0), Point(1, 1), Point(0, 1), Point(1, 0))
        True
    """
    v1x = a2.x - a1.x
    v1y = a2.y - a1.y
    v2x = b2.x - b1.x
    v2y = b2.y - b1.y
    det = v1y * v2x - v1x * v2y
    wx = b1.x - a1.x
    wy = b1.y - a1.y
    if equals(det, 0):
        if not equals(wx * v1y - wy * v1x, 0):
            return False
        return (
            min(a1.x, a2.x) <= max(b1.x, b2.x)
            and min(b1.x, b2.x) <= max(a1.x, a2.x)
            and min(a1.y, a2.y) <= max(b1.y, b2.y)
            and min(b1.y, b2.y) <= max(a1.y, a2.y)
        )
    s = (wy * v2x - wx * v2y) / det
    t = (wy * v1x - wx * v1y) / det
    return 0 <= s <= 1 and 0 <= t <= 1


def intersect_line_with_line_segment(
    a1: PointT, a2: PointT, b1: PointT, b2: PointT
) -> PointT | None:
    """Intersect the infinite line a1-a2 with the segment b1-b2."""
    result = intersect_lines(a1, a2, b1, b2)
    if result is not None and is_point_in_box(result, b1, b2, tolerance_for(result)):
        return result
    return None


def intersect_line_with_rectangle(
    a1: PointT, a2: PointT, r1: PointT, r2: PointT
) -> PointT | None:
    """Clip the ray from ``a1`` through ``a2`` against an axis-aligned box.

    When ``a1`` is outside the box, the entry point on the side facing
    ``a1`` is returned. When both points are inside, the ray is extended
    beyond ``a2`` and the exit point is returned.

    Args:
        a1: Start of the ray
        a2: Point giving the direction of the ray
        r1: Top-left corner of the box
        r2: Bottom-right corner of the box

    Returns:
        Point on the box outline, or None
    """
    if a1 == a2:
        return None
    kind = type(a1)
    left = (r1, type(r1)(r1.x, r2.y))
    right = (type(r1)(r2.x, r1.y), r2)
    top = (r1, type(r1)(r2.x, r1.y))
    bottom = (type(r1)(r1.x, r2.y), r2)

    def clip(*sides):
        for s1, s2 in sides:
            result = intersect_line_with_line_segment(a1, a2, s1, s2)
            if result is not None:
                return result
        return None

    if a1.y <= r1.y:
        if a2.y <= r1.y:
            return None
        if a1.x <= r1.x:
            return clip(left, top)
        if a1.x >= r2.x:
            return clip(right, top)
        return clip(top)
    if a1.y >= r2.y:
        if a2.y >= r2.y:
            return None
        if a1.x <= r1.x:
            return clip(left, bottom)
        if a1.x >= r2.x:
            return clip(bottom, right)
        return clip(bottom)
    if a1.x <= r1.x:
        return clip(left)
    if a1.x >= r2.x:
        return clip(right)
    if a2.y <= r1.y or a2.y >= r2.y or a2.x <= r1.x or a2.x >= r2.x:
        return intersect_line_with_rectangle(a2, a1, r1, r2)

    # Both points inside: extend the ray past a2 to a point outside the box
    if abs(a2.x - a1.x) >= abs(a2.y - a1.y):
        if a2.x >= a1.x:
            new_x = a1.x + r2.x - r1.x
        else:
            new_x = a1.x + r1.x - r2.x
        new_y = a2.y + _divide(kind, (new_x - a2.x) * (a1.y - a2.y), a1.x - a2.x)
    else:
        if a2.y >= a1.y:
            new_y = a1.y + r2.y - r1.y
        else:
            new_y = a1.y + r1.y - r2.y
        new_x = a2.x + _divide(kind, (new_y - a2.y) * (a1.x - a2.x), a1.y - a2.y)
    return intersect_line_with_rectangle(kind(new_x, new_y), a2, r1, r2)


def calc_circum_circle(
    start: Point | PointF, radius_pt: Point | PointF, end: Point | PointF
) -> tuple[PointF, float] | None:
    """Calculate the circle passing through three points.

    The center is the intersection of the perpendicular bisectors of the
    chords start/radius_pt and end/radius_pt.

    Args:
        start: First point on the circle (start of an arc)
        radius_pt: Second point on the circle (a point on an arc)
        end: Third point on the circle (end of an arc)

    Returns:
        Tuple of (center, radius), or None for colinear points

    Examples:
        >>> calc_circum_circle(PointF(0, 0), PointF(2, 0), PointF(1, 1))
        (PointF(x=1.0, y=0.0), 1.0)
    """
    s = PointF(float(start.x), float(start.y))
    r = PointF(float(radius_pt.x), float(radius_pt.y))
    e = PointF(float(end.x), float(end.y))
    b1 = calc_perpendicular_bisector(s, r)
    b2 = calc_perpendicular_bisector(e, r)
    center = intersect_lines(b1[0], b1[1], b2[0], b2[1])
    if center is None:
        return None
    return (center, math.hypot(r.x - center.x, r.y - center.y))


# Coefficient form (ax + by + c = 0)


def _warn_coefficient_form(name: str) -> None:
    warnings.warn(
        f"{name} uses the coefficient line form; use the two-point functions instead",
        DeprecationWarning,
        stacklevel=3,
    )


def calc_line_coefficients(a1: Point | PointF, a2: Point | PointF) -> tuple[float, float, float]:
    """Calculate coefficients (a, b, c) of the line ``ax + by + c = 0`` through two points.

    Deprecated: coefficients grow quadratically with the coordinates.
    """
    _warn_coefficient_form("calc_line_coefficients")
    a = a2.y - a1.y
    b = a2.x - a1.x
    c = a * a1.x - b * a1.y
    if c > 0:
        b = -b
        c = -c
    else:
        a = -a
    return (a, b, c)


def calc_perpendicular_line_coefficients(
    a1: Point | PointF, a2: Point | PointF
) -> tuple[float, float, float]:
    """Coefficients of the perpendicular to a1-a2 through ``a1``.

    Deprecated: coefficients grow quadratically with the coordinates.
    """
    _warn_coefficient_form("calc_perpendicular_line_coefficients")
    a = a1.x - a2.x
    b = a1.y - a2.y
    c = -a * a1.x - b * a1.y
    return (a, b, c)


def translate_line(a: float, b: float, c: float, p: Point | PointF) -> tuple[float, float, float]:
    """Move the line ``ax + by + c = 0`` so that it passes through ``p``.

    Deprecated: coefficients grow quadratically with the coordinates.
    """
    _warn_coefficient_form("translate_line")
    return (a, b, -(a * p.x + b * p.y))


def intersect_lines_coefficients(
    a1: float, b1: float, c1: float, a2: float, b2: float, c2: float
) -> Point | PointF | None:
    """Intersect two lines given in coefficient form.

    Integer coefficients produce a rounded integer point.

    Deprecated: coefficients grow quadratically with the coordinates.
    """
    _warn_coefficient_form("intersect_lines_coefficients")
    det = a1 * b2 - a2 * b1
    if equals(det, 0):
        return None
    x_numerator = b2 * -c1 - b1 * -c2
    y_numerator = a1 * -c2 - a2 * -c1
    if all(isinstance(v, int) for v in (a1, b1, c1, a2, b2, c2)):
        return _finish(Point, round_div(x_numerator, det), round_div(y_numerator, det))
    return _finish(PointF, x_numerator / det, y_numerator / det)
