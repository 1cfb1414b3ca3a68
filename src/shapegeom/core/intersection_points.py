"""Intersection point calculators for curved and composite shapes.

Every calculator is a generator yielding zero, one or two points (more for
polygons). Intermediate results are computed in floating point; points are
rounded to integers only when yielded, and only when the caller passed
integer points.

Line-with-line calculators live in ``shapegeom.core.lines``.
"""

import math
from collections.abc import Iterator, Sequence

from shapegeom.core.containment import arc_contains_point_on_circle
from shapegeom.core.distance import get_nearest_point
from shapegeom.core.lines import (
    calc_circum_circle,
    intersect_line_segments,
    intersect_line_with_line_segment,
)
from shapegeom.core.numeric import ARC_HIT_DELTA, equals
from shapegeom.core.rotation import rotate_point
from shapegeom.domain.primitives import Point, PointF, PointT, Rectangle, RectangleF, make_point


def _to_f(p: Point | PointF) -> PointF:
    return PointF(float(p.x), float(p.y))


def _solve_quadratic_form(
    a1: PointF, a2: PointF, center: PointF, rrx: float, rry: float, is_segment: bool
) -> Iterator[PointF]:
    """Intersect the line a1-a2 with the axis-aligned ellipse ``x²/rrx + y²/rry = 1``."""
    x21 = a2.x - a1.x
    y21 = a2.y - a1.y
    x10 = a1.x - center.x
    y10 = a1.y - center.y
    a = x21 * x21 / rrx + y21 * y21 / rry
    b = x21 * x10 / rrx + y21 * y10 / rry
    c = x10 * x10 / rrx + y10 * y10 / rry
    if a == 0:
        return
    d = b * b - a * (c - 1)
    if d < 0:
        return
    root = math.sqrt(d)
    params = ((-b - root) / a,) if d == 0 else ((-b - root) / a, (-b + root) / a)
    for u in params:
        if math.isnan(u):
            continue
        if not is_segment or 0 <= u <= 1:
            yield PointF(a1.x + x21 * u, a1.y + y21 * u)


def get_all_circle_line_intersections(
    center: Point | PointF,
    radius: float,
    a1: PointT,
    a2: PointT,
    is_segment: bool,
) -> Iterator[PointT]:
    """Yield the intersections of a circle with a line or segment.

    Args:
        center: Circle center
        radius: Circle radius
        a1: First point of the line
        a2: Second point of the line
        is_segment: Restrict results to the segment a1-a2

    Yields:
        Up to two points, of the same type as ``a1``
    """
    if a1 == a2 or radius <= 0:
        return
    rr = radius * radius
    kind = type(a1)
    for p in _solve_quadratic_form(_to_f(a1), _to_f(a2), _to_f(center), rr, rr, is_segment):
        yield make_point(kind, p.x, p.y)


def intersect_circle_with_line(
    center: Point | PointF,
    radius: float,
    a1: PointT,
    a2: PointT,
    is_segment: bool,
) -> PointT | None:
    """Return the intersection of a circle and a line that is nearest to ``a1``."""
    return get_nearest_point(a1, get_all_circle_line_intersections(center, radius, a1, a2, is_segment))


def intersect_circles(
    center1: PointT, radius1: float, center2: Point | PointF, radius2: float
) -> Iterator[PointT]:
    """Yield the intersection points of two circles.

    The radical line of both circles is substituted into the first circle's
    equation.

    Yields:
        Nothing for concentric or separate circles, one point for touching
        circles, two points otherwise. Points have the type of ``center1``.

    Examples:
        >>> list(intersect_circles(Point(0, 0), 5, Point(8, 0), 5))
        [Point(x=4, y=3), Point(x=4, y=-3)]
    """
    kind = type(center1)
    a1 = 2.0 * center1.x
    b1 = 2.0 * center1.y
    c1 = radius1 * radius1 - center1.x * center1.x - center1.y * center1.y
    a2 = 2.0 * center2.x
    b2 = 2.0 * center2.y
    c2 = radius2 * radius2 - center2.x * center2.x - center2.y * center2.y

    if a2 - a1 == 0 and b2 - b1 == 0:
        return
    solve_for_y = abs(a2 - a1) >= abs(b2 - b1)
    if solve_for_y:
        d = (c1 - c2) / (a2 - a1)
        e = (b1 - b2) / (a2 - a1)
        f = (2 * d * e - b1 - a1 * e) / (2 * e * e + 2)
        discriminant = f * f - (d * d - a1 * d - c1) / (e * e + 1)
    else:
        d = (c1 - c2) / (b2 - b1)
        e = (a1 - a2) / (b2 - b1)
        f = (2 * d * e - a1 - b1 * e) / (2 * e * e + 2)
        discriminant = f * f - (d * d - b1 * d - c1) / (e * e + 1)

    if equals(discriminant, 0):
        roots = (0.0,)
    elif discriminant < 0:
        return
    else:
        root = math.sqrt(discriminant)
        roots = (root, -root)

    for root in roots:
        t = root - f
        if solve_for_y:
            yield make_point(kind, d + e * t, t)
        else:
            yield make_point(kind, t, d + e * t)


def intersect_circle_arc(
    center: PointT,
    radius: float,
    start: Point | PointF,
    radius_pt: Point | PointF,
    end: Point | PointF,
) -> Iterator[PointT]:
    """Yield the intersection points of a circle and a three-point arc."""
    circle = calc_circum_circle(start, radius_pt, end)
    if circle is None:
        return
    arc_center, arc_radius = circle
    kind = type(center)
    for p in intersect_circles(_to_f(center), radius, arc_center, arc_radius):
        if arc_contains_point_on_circle(start, radius_pt, end, arc_center, arc_radius, p, ARC_HIT_DELTA):
            yield make_point(kind, p.x, p.y)


def intersect_arc_line(
    start: Point | PointF,
    radius_pt: Point | PointF,
    end: Point | PointF,
    a1: PointT,
    a2: PointT,
    is_segment: bool,
) -> Iterator[PointT]:
    """Yield the intersection points of a three-point arc and a line."""
    circle = calc_circum_circle(start, radius_pt, end)
    if circle is None:
        return
    center, radius = circle
    kind = type(a1)
    for p in get_all_circle_line_intersections(center, radius, _to_f(a1), _to_f(a2), is_segment):
        if arc_contains_point_on_circle(start, radius_pt, end, center, radius, p, ARC_HIT_DELTA):
            yield make_point(kind, p.x, p.y)


def intersect_polygon_line(
    points: Sequence[PointT], a1: PointT, a2: PointT, is_segment: bool
) -> Iterator[PointT]:
    """Yield the intersections of a polygon outline with a line.

    The closing edge from the last to the first point is included unless the
    polygon already repeats its first point at the end.
    """
    edges = [(points[i], points[i + 1]) for i in range(len(points) - 1)]
    if len(points) > 2 and points[0] != points[-1]:
        edges.append((points[-1], points[0]))
    for p1, p2 in edges:
        if is_segment:
            result = intersect_line_segments(a1, a2, p1, p2)
        else:
            result = intersect_line_with_line_segment(a1, a2, p1, p2)
        if result is not None:
            yield result


def intersect_ellipse_line(
    center: Point | PointF,
    width: float,
    height: float,
    angle_deg: float,
    a1: PointT,
    a2: PointT,
    is_segment: bool,
) -> Iterator[PointT]:
    """Yield the intersections of a (possibly rotated) ellipse and a line.

    The line is rotated into the ellipse's frame, intersected with the
    axis-aligned ellipse, and the results are rotated back.
    """
    rx = width / 2
    ry = height / 2
    if rx <= 0 or ry <= 0:
        return
    c = _to_f(center)
    p1 = _to_f(a1)
    p2 = _to_f(a2)
    if angle_deg != 0:
        p1 = rotate_point(c, -angle_deg, p1)
        p2 = rotate_point(c, -angle_deg, p2)
    kind = type(a1)
    for p in _solve_quadratic_form(p1, p2, c, rx * rx, ry * ry, is_segment):
        if angle_deg != 0:
            p = rotate_point(c, angle_deg, p)
        yield make_point(kind, p.x, p.y)


def intersect_rectangle_line(
    rect: Rectangle | RectangleF,
    angle_deg: float,
    a1: PointT,
    a2: PointT,
    is_segment: bool,
) -> Iterator[PointT]:
    """Yield the intersections of a rectangle rotated around its center and a line.

    Args:
        rect: Rectangle before rotation
        angle_deg: Rotation around the rectangle's center, in degrees
        a1: First point of the line
        a2: Second point of the line
        is_segment: Restrict results to the segment a1-a2
    """
    center = PointF(rect.x + rect.width / 2, rect.y + rect.height / 2)
    kind = type(a1)
    corners = [make_point(kind, *rotate_point(center, angle_deg, _to_f(c)).to_tuple()) for c in rect.corners()]
    for i, p1 in enumerate(corners):
        p2 = corners[(i + 1) % 4]
        if is_segment:
            result = intersect_line_segments(a1, a2, p1, p2)
        else:
            result = intersect_line_with_line_segment(a1, a2, p1, p2)
        if result is not None:
            yield result
