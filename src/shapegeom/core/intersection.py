"""Boolean intersection tests between shapes.

These tests run inside hit-testing loops. Where a closed-form test exists
(distance to a line against a radius, the discriminant of a quadratic) it
is used directly instead of enumerating intersection points.

Rotated shapes are handled by rotating the other operand backwards around
the shape's center; the rotation is computed per call.
"""

import math
from collections.abc import Sequence

from shapegeom.core.containment import (
    arc_contains_point_on_circle,
    ellipse_contains_point,
    polygon_contains_point,
    rectangle_contains_point,
)
from shapegeom.core.distance import distance_point_line, distance_point_point
from shapegeom.core.intersection_points import (
    get_all_circle_line_intersections,
    intersect_arc_line,
    intersect_circle_arc,
)
from shapegeom.core.lines import (
    calc_circum_circle,
    intersect_line_segments,
    intersect_line_with_line_segment,
    line_intersects_with_line,
)
from shapegeom.core.numeric import ARC_RECTANGLE_DELTA
from shapegeom.core.rotation import rotate_point
from shapegeom.domain.primitives import Point, PointF, Rectangle, RectangleF


def _to_f(p: Point | PointF) -> PointF:
    return PointF(float(p.x), float(p.y))


def _rect_center(rect: Rectangle | RectangleF) -> PointF:
    return PointF(rect.x + rect.width / 2, rect.y + rect.height / 2)


def _closed_edges(points: Sequence) -> list[tuple]:
    count = len(points)
    return [(points[i], points[(i + 1) % count]) for i in range(count)]


def line_intersects_with_line_segment(
    a1: Point | PointF, a2: Point | PointF, b1: Point | PointF, b2: Point | PointF
) -> bool:
    """Check whether the infinite line a1-a2 crosses the segment b1-b2."""
    return intersect_line_with_line_segment(a1, a2, b1, b2) is not None


def line_segment_intersects_with_line_segment(
    a1: Point | PointF, a2: Point | PointF, b1: Point | PointF, b2: Point | PointF
) -> bool:
    """Check whether two segments share a unique intersection point.

    Unlike ``line_intersects_with_line``, overlapping colinear segments do
    not count, so a True result always has a matching
    ``intersect_line_segments`` point.
    """
    return intersect_line_segments(a1, a2, b1, b2) is not None


def rectangle_intersects_with_rectangle(
    r1: Rectangle | RectangleF, r2: Rectangle | RectangleF
) -> bool:
    """Check whether two axis-aligned rectangles overlap or touch."""
    return r2.left <= r1.right and r1.left <= r2.right and r2.top <= r1.bottom and r1.top <= r2.bottom


def rectangle_intersects_with_line(
    rect: Rectangle | RectangleF,
    a1: Point | PointF,
    a2: Point | PointF,
    is_segment: bool,
    angle_deg: float = 0.0,
) -> bool:
    """Check whether a (possibly rotated) rectangle intersects a line or segment.

    A segment lying completely inside the rectangle counts as intersecting.

    Args:
        rect: Rectangle before rotation
        a1: First point of the line
        a2: Second point of the line
        is_segment: Treat a1-a2 as a finite segment
        angle_deg: Rotation of the rectangle around its center, in degrees
    """
    if angle_deg != 0 and angle_deg % 180 != 0:
        center = _rect_center(rect)
        a1 = rotate_point(center, -angle_deg, _to_f(a1))
        a2 = rotate_point(center, -angle_deg, _to_f(a2))
        rect = RectangleF(float(rect.x), float(rect.y), float(rect.width), float(rect.height))

    if rectangle_contains_point(rect, a1) or rectangle_contains_point(rect, a2):
        return True
    if is_segment and (
        (a1.x < rect.left and a2.x < rect.left)
        or (a1.x > rect.right and a2.x > rect.right)
        or (a1.y < rect.top and a2.y < rect.top)
        or (a1.y > rect.bottom and a2.y > rect.bottom)
    ):
        return False

    tl, tr, br, bl = rect.corners()
    for s1, s2 in ((tl, tr), (tr, br), (bl, br), (tl, bl)):
        if is_segment:
            if line_intersects_with_line(a1, a2, s1, s2):
                return True
        elif line_intersects_with_line_segment(a1, a2, s1, s2):
            return True
    return False


def circle_intersects_with_line(
    center: Point | PointF,
    radius: float,
    a1: Point | PointF,
    a2: Point | PointF,
    is_segment: bool,
) -> bool:
    """Check whether a disc touches a line or segment."""
    return abs(distance_point_line(center, a1, a2, is_segment)) <= radius


def circle_intersects_with_circle(
    center1: Point | PointF, radius1: float, center2: Point | PointF, radius2: float
) -> bool:
    """Check whether two discs overlap or touch."""
    return distance_point_point(center1, center2) <= radius1 + radius2


def circle_intersects_with_rectangle(
    rect: Rectangle | RectangleF,
    center: Point | PointF,
    radius: float,
    angle_deg: float = 0.0,
) -> bool:
    """Check whether a disc and a (possibly rotated) rectangle overlap.

    The rectangle is moved so that the circle's center becomes the origin;
    the region of the rectangle relative to the origin (beside, above,
    below or diagonal) selects the edge or corner to measure against.
    """
    if angle_deg != 0 and angle_deg % 180 != 0:
        center = rotate_point(_rect_center(rect), -angle_deg, _to_f(center))
    left = rect.left - center.x
    top = rect.top - center.y
    right = left + rect.width
    bottom = top + rect.height
    rr = radius * radius

    if right < 0:
        if bottom < 0:
            return right * right + bottom * bottom < rr
        if top > 0:
            return right * right + top * top < rr
        return abs(right) < radius
    if left > 0:
        if bottom < 0:
            return left * left + bottom * bottom < rr
        if top > 0:
            return left * left + top * top < rr
        return left < radius
    if bottom < 0:
        return abs(bottom) < radius
    if top > 0:
        return top < radius
    return True


def ellipse_intersects_with_line(
    center: Point | PointF,
    width: float,
    height: float,
    angle_deg: float,
    a1: Point | PointF,
    a2: Point | PointF,
    is_segment: bool,
) -> bool:
    """Check whether the outline of a (possibly rotated) ellipse meets a line.

    Solves ``x²/a² + y²/b² = 1`` along the line; for a segment, a root must
    fall inside the parameter range [0, 1].
    """
    rx = width / 2
    ry = height / 2
    if rx <= 0 or ry <= 0:
        return False
    c = _to_f(center)
    p1 = _to_f(a1)
    p2 = _to_f(a2)
    if angle_deg != 0:
        p1 = rotate_point(c, -angle_deg, p1)
        p2 = rotate_point(c, -angle_deg, p2)
    rrx = rx * rx
    rry = ry * ry
    x21 = p2.x - p1.x
    y21 = p2.y - p1.y
    x10 = p1.x - c.x
    y10 = p1.y - c.y
    a = x21 * x21 / rrx + y21 * y21 / rry
    b = x21 * x10 / rrx + y21 * y10 / rry
    cc = x10 * x10 / rrx + y10 * y10 / rry
    if a == 0:
        return False
    d = b * b - a * (cc - 1)
    if d < 0:
        return False
    if not is_segment:
        return True
    root = math.sqrt(d)
    u1 = (-b - root) / a
    u2 = (-b + root) / a
    return 0 <= u1 <= 1 or 0 <= u2 <= 1


def polygon_intersects_with_ellipse(
    points: Sequence[Point | PointF],
    center: Point | PointF,
    width: float,
    height: float,
    angle_deg: float,
) -> bool:
    """Check whether a polygon and a (possibly rotated) ellipse overlap.

    Tests every edge (including the closing one) against the outline, then
    falls back to containment for a polygon inside the ellipse or an
    ellipse inside the polygon.
    """
    if not points:
        return False
    for p1, p2 in _closed_edges(points):
        if ellipse_intersects_with_line(center, width, height, angle_deg, p1, p2, True):
            return True
    if ellipse_contains_point(center, width, height, angle_deg, points[0]):
        return True
    return polygon_contains_point(points, center)


def ellipse_intersects_with_rectangle(
    center: Point | PointF,
    width: float,
    height: float,
    angle_deg: float,
    rect: Rectangle | RectangleF,
) -> bool:
    """Check whether a (possibly rotated) ellipse and an axis-aligned rectangle overlap."""
    corners = rect.corners()
    for corner in corners:
        if ellipse_contains_point(center, width, height, angle_deg, corner):
            return True

    c = _to_f(center)
    extremes = [
        PointF(c.x - width / 2, c.y),
        PointF(c.x + width / 2, c.y),
        PointF(c.x, c.y - height / 2),
        PointF(c.x, c.y + height / 2),
    ]
    if angle_deg % 180 != 0:
        extremes = [rotate_point(c, angle_deg, p) for p in extremes]
    if any(rectangle_contains_point(rect, p) for p in extremes):
        return True
    return polygon_intersects_with_ellipse(corners, center, width, height, angle_deg)


def polygon_intersects_with_rectangle(
    points: Sequence[Point | PointF], rect: Rectangle | RectangleF
) -> bool:
    """Check whether a polygon and an axis-aligned rectangle overlap.

    An edge with an end point inside the rectangle, or crossing it, is
    enough. Otherwise the rectangle overlaps only if it lies completely
    inside the polygon.
    """
    if not points:
        return False
    for p1, p2 in _closed_edges(points):
        if rectangle_contains_point(rect, p1) or rectangle_contains_point(rect, p2):
            return True
        if rectangle_intersects_with_line(rect, p1, p2, True):
            return True
    return polygon_contains_point(points, rect.corners()[0])


def arc_intersects_with_line(
    start: Point | PointF,
    radius_pt: Point | PointF,
    end: Point | PointF,
    a1: Point | PointF,
    a2: Point | PointF,
    is_segment: bool,
) -> bool:
    """Check whether a three-point arc meets a line or segment."""
    return next(intersect_arc_line(start, radius_pt, end, a1, a2, is_segment), None) is not None


def arc_intersects_with_circle(
    start: Point | PointF,
    radius_pt: Point | PointF,
    end: Point | PointF,
    center: Point | PointF,
    radius: float,
) -> bool:
    """Check whether a three-point arc meets a circle's outline."""
    return next(intersect_circle_arc(center, radius, start, radius_pt, end), None) is not None


def arc_intersects_with_rectangle(
    start: Point | PointF,
    radius_pt: Point | PointF,
    end: Point | PointF,
    rect: Rectangle | RectangleF,
    angle_deg: float = 0.0,
) -> bool:
    """Check whether a three-point arc touches a (possibly rotated) rectangle.

    True if one of the arc's defining points lies inside the rectangle, or
    if the arc crosses one of the rectangle's sides.
    """
    if angle_deg != 0 and angle_deg % 180 != 0:
        center = _rect_center(rect)
        start, radius_pt, end = (rotate_point(center, -angle_deg, _to_f(p)) for p in (start, radius_pt, end))

    if any(rectangle_contains_point(rect, p) for p in (start, radius_pt, end)):
        return True
    circle = calc_circum_circle(start, radius_pt, end)
    if circle is None:
        return rectangle_intersects_with_line(rect, start, end, True)
    arc_center, arc_radius = circle

    tl, tr, br, bl = (_to_f(p) for p in rect.corners())
    for s1, s2 in ((tl, tr), (tr, br), (br, bl), (bl, tl)):
        for p in get_all_circle_line_intersections(arc_center, arc_radius, s1, s2, True):
            if arc_contains_point_on_circle(
                start, radius_pt, end, arc_center, arc_radius, p, ARC_RECTANGLE_DELTA
            ):
                return True
    return False
