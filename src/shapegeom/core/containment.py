"""Containment predicates.

All predicates are closed: a point on the boundary of a shape is contained.
``rectangle_contains_point`` can be made open with ``with_bounds=False``.

Integer input is evaluated exactly. Floating input compares cross products
against a small tolerance on both sides, so points on an edge are not lost
to rounding noise.
"""

import math
from collections.abc import Sequence

from shapegeom.core.distance import distance_point_line, distance_point_point
from shapegeom.core.lines import calc_circum_circle, is_point_in_box
from shapegeom.core.numeric import (
    ARC_HIT_DELTA,
    LINE_HIT_DELTA,
    assert_is_valid,
    tolerance_for,
)
from shapegeom.core.rotation import angle, rotate_point
from shapegeom.core.vectors import cross_product3
from shapegeom.domain.primitives import Point, PointF, Rectangle, RectangleF
from shapegeom.exceptions import InvalidArgumentError


def _signs_agree(values: Sequence[float], delta: float) -> bool:
    has_negative = any(v < -delta for v in values)
    has_positive = any(v > delta for v in values)
    return not (has_negative and has_positive)


def is_point_in_rect(p: Point | PointF, p1: Point | PointF, p2: Point | PointF) -> bool:
    """Check if ``p`` lies in the closed box spanned by two arbitrary corners."""
    return is_point_in_box(p, p1, p2)


def rectangle_contains_point(
    rect: Rectangle | RectangleF,
    p: Point | PointF,
    angle_deg: float = 0.0,
    with_bounds: bool = True,
) -> bool:
    """Check if a (possibly rotated) rectangle contains a point.

    A rotated rectangle is tested by rotating the point backwards around the
    rectangle's center and testing it against the unrotated rectangle.

    Args:
        rect: Rectangle before rotation
        p: Query point
        angle_deg: Rotation of the rectangle around its center, in degrees
        with_bounds: Whether points on the outline count as contained

    Returns:
        True if the point is inside

    Examples:
        >>> rectangle_contains_point(Rectangle(0, 0, 10, 10), Point(10, 10))
        True
        >>> rectangle_contains_point(Rectangle(0, 0, 10, 10), Point(10, 10), with_bounds=False)
        False
    """
    if __debug__:
        assert_is_valid(rect, p)
    if angle_deg != 0 and angle_deg % 180 != 0:
        center = PointF(rect.x + rect.width / 2, rect.y + rect.height / 2)
        p = rotate_point(center, -angle_deg, PointF(float(p.x), float(p.y)))
    if with_bounds:
        return rect.left <= p.x <= rect.right and rect.top <= p.y <= rect.bottom
    return rect.left < p.x < rect.right and rect.top < p.y < rect.bottom


def rectangle_contains_rectangle(
    outer: Rectangle | RectangleF, inner: Rectangle | RectangleF
) -> bool:
    """Check if ``inner`` lies completely inside ``outer`` (outlines may touch).

    Raises:
        InvalidArgumentError: If either rectangle has a negative size
    """
    for name, rect in (("outer", outer), ("inner", inner)):
        if rect.width < 0 or rect.height < 0:
            raise InvalidArgumentError(name, f"negative size {rect.width}x{rect.height}")
    return (
        outer.left <= inner.left
        and outer.top <= inner.top
        and inner.right <= outer.right
        and inner.bottom <= outer.bottom
    )


def triangle_contains_point(
    a: Point | PointF, b: Point | PointF, c: Point | PointF, p: Point | PointF
) -> bool:
    """Check if a triangle contains a point.

    The vertices may be given in either winding order.

    Examples:
        >>> triangle_contains_point(Point(0, 0), Point(10, 0), Point(0, 10), Point(2, 2))
        True
        >>> triangle_contains_point(Point(0, 0), Point(10, 0), Point(0, 10), Point(8, 8))
        False
    """
    if p == a or p == b or p == c:
        return True
    values = (cross_product3(a, b, p), cross_product3(b, c, p), cross_product3(c, a, p))
    return _signs_agree(values, tolerance_for(p))


def quadrangle_contains_point(
    a: Point | PointF,
    b: Point | PointF,
    c: Point | PointF,
    d: Point | PointF,
    p: Point | PointF,
) -> bool:
    """Check if a convex quadrangle contains a point.

    The vertices must be given in order around the outline; which vertex
    comes first and the winding direction do not matter.
    """
    if p in (a, b, c, d):
        return True
    values = (
        cross_product3(a, b, p),
        cross_product3(b, c, p),
        cross_product3(c, d, p),
        cross_product3(d, a, p),
    )
    return _signs_agree(values, tolerance_for(p))


def _require_points(points: Sequence | None, name: str = "points") -> Sequence:
    if points is None:
        raise InvalidArgumentError(name, "must not be None")
    return points


def polygon_is_convex(points: Sequence[Point | PointF]) -> bool:
    """Check whether the polygon given by its ordered vertices is convex.

    Raises:
        InvalidArgumentError: If ``points`` is None or empty
    """
    _require_points(points)
    if len(points) == 0:
        raise InvalidArgumentError("points", "a polygon needs at least one point")
    n = len(points) - 1
    convex = 0
    ai = math.atan2(points[n].x - points[0].x, points[n].y - points[0].y)
    for i in range(n):
        a = points[i]
        b = points[i + 1]
        aj = math.atan2(a.x - b.x, a.y - b.y)
        if ai - aj < 0:
            convex += 1
        ai = aj
    return convex == 1 or convex == n - 1


def convex_polygon_contains_point(points: Sequence[Point | PointF], p: Point | PointF) -> bool:
    """Check if a convex polygon contains a point.

    The point must not lie on opposite sides of two edges; points on an
    edge are contained. Either winding order works and a repeated closing
    vertex is ignored.

    Raises:
        InvalidArgumentError: If ``points`` is None or empty

    Examples:
        >>> square = [Point(0, 10), Point(10, 10), Point(10, 0), Point(0, 0)]
        >>> convex_polygon_contains_point(square, Point(5, 0))
        True
    """
    _require_points(points)
    if len(points) == 0:
        raise InvalidArgumentError("points", "a polygon needs at least one point")
    if p in points:
        return True
    n = len(points) - 1
    if n > 0 and points[0] == points[n]:
        n -= 1
    values = [cross_product3(points[i], points[i + 1], p) for i in range(n)]
    values.append(cross_product3(points[n], points[0], p))
    return _signs_agree(values, tolerance_for(p))


def polygon_contains_point(points: Sequence[Point | PointF], p: Point | PointF) -> bool:
    """Check if an arbitrary (possibly concave) polygon contains a point.

    Casts a horizontal ray from the point past the polygon's right edge and
    counts the edges it crosses; an odd count means inside. Each edge is
    half-open in y, so a ray through a vertex counts only one of the two
    edges meeting there. Points on an edge are always contained.

    Raises:
        InvalidArgumentError: If ``points`` is None

    Examples:
        >>> diamond = [Point(5, 0), Point(10, 5), Point(5, 10), Point(0, 5)]
        >>> polygon_contains_point(diamond, Point(4, 2))
        True
    """
    _require_points(points)
    count = len(points)
    if count == 0:
        return False
    if count == 1:
        return points[0].x == p.x and points[0].y == p.y

    inside = False
    j = count - 1
    for i in range(count):
        a = points[j]
        b = points[i]
        if distance_point_line(p, a, b, True) == 0:
            return True
        if (a.y > p.y) != (b.y > p.y):
            # Crossing lies to the right of p
            side = (b.x - a.x) * (p.y - a.y) - (p.x - a.x) * (b.y - a.y)
            if (side > 0) == (b.y > a.y):
                inside = not inside
        j = i
    return inside


def line_contains_point(
    a1: Point | PointF,
    a2: Point | PointF,
    is_segment: bool,
    p: Point | PointF,
    delta: float = LINE_HIT_DELTA,
) -> bool:
    """Check if a line or segment passes within ``delta`` of a point."""
    return abs(distance_point_line(p, a1, a2, is_segment)) <= delta


def circle_contains_point(
    center: Point | PointF, radius: float, p: Point | PointF, delta: float | None = None
) -> bool:
    """Check if a disc (with a tolerance margin) contains a point.

    Without ``delta`` the margin is the comparison tolerance of the point
    type, so float points on the outline stay inside.
    """
    if delta is None:
        delta = tolerance_for(p)
    return distance_point_point(center, p) <= radius + delta


def circle_outline_contains_point(
    center: Point | PointF, radius: float, p: Point | PointF, delta: float
) -> bool:
    """Check if a point lies within ``delta`` of a circle's outline."""
    distance = distance_point_point(center, p)
    return radius - delta <= distance <= radius + delta


def ellipse_contains_point(
    center: Point | PointF,
    width: float,
    height: float,
    angle_deg: float,
    p: Point | PointF,
) -> bool:
    """Check if a (possibly rotated) ellipse contains a point.

    Args:
        center: Center of the ellipse
        width: Horizontal diameter before rotation
        height: Vertical diameter before rotation
        angle_deg: Rotation around the center, in degrees
        p: Query point

    Returns:
        True if ``x²/a² + y²/b² <= 1`` in the ellipse's own frame
    """
    q = PointF(float(p.x), float(p.y))
    if angle_deg != 0:
        q = rotate_point(center, -angle_deg, q)
    rx = width / 2
    ry = height / 2
    x0 = q.x - center.x
    y0 = q.y - center.y
    if rx <= 0 or ry <= 0:
        # Degenerate ellipse
        return abs(x0) <= max(rx, 0) and abs(y0) <= max(ry, 0)
    return (x0 * x0) / (rx * rx) + (y0 * y0) / (ry * ry) <= 1


def _normalized_angle(center: Point | PointF, p: Point | PointF) -> float:
    result = angle(center, p)
    if result < 0:
        result += 2 * math.pi
    return result


def arc_contains_point_on_circle(
    start: Point | PointF,
    radius_pt: Point | PointF,
    end: Point | PointF,
    center: Point | PointF,
    radius: float,
    p: Point | PointF,
    delta: float = ARC_HIT_DELTA,
) -> bool:
    """Check if an arc with known center and radius contains a point.

    The point must lie on the arc's circle (within ``delta``). The radius
    point then decides which of the two arcs between start and end is meant.
    """
    if not circle_outline_contains_point(center, radius, p, delta):
        return False
    s = _normalized_angle(center, start)
    r = _normalized_angle(center, radius_pt)
    e = _normalized_angle(center, end)
    a = _normalized_angle(center, p)
    if s <= r <= e:
        return s <= a <= e
    if e <= r <= s:
        return e <= a <= s
    # Radius point outside the start/end interval: the arc wraps around 0
    if s < e:
        return not (s < a < e)
    if e < s:
        return not (e < a < s)
    return False


def arc_contains_point(
    start: Point | PointF,
    radius_pt: Point | PointF,
    end: Point | PointF,
    p: Point | PointF,
    delta: float = ARC_HIT_DELTA,
) -> bool:
    """Check if the arc through start, radius point and end contains a point.

    Colinear defining points describe a straight segment from start to end.

    Examples:
        >>> arc_contains_point(PointF(0, 0), PointF(1, 1), PointF(2, 0), PointF(1, -1))
        False
        >>> arc_contains_point(PointF(0, 0), PointF(1, 1), PointF(2, 0), PointF(1, 1))
        True
    """
    circle = calc_circum_circle(start, radius_pt, end)
    if circle is None:
        return line_contains_point(start, end, True, p, delta)
    center, radius = circle
    return arc_contains_point_on_circle(start, radius_pt, end, center, radius, p, delta)
