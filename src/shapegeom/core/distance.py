"""Distance and nearest-point queries.

Hit-testing uses these to decide whether the cursor is close enough to a
line or point, and connector routing uses them to pick the closest
candidate point on a target shape.
"""

import math
from collections.abc import Iterable

from shapegeom.core.lines import calc_perpendicular_line_through, intersect_lines
from shapegeom.core.numeric import NEAREST_SEGMENT_DELTA, assert_is_valid, equals
from shapegeom.core.rotation import angle3
from shapegeom.core.vectors import cross_product3, dot_product3
from shapegeom.domain.primitives import Point, PointF, PointT


def distance_point_point(a: Point | PointF, b: Point | PointF) -> float:
    """Euclidean distance between two points.

    Examples:
        >>> distance_point_point(Point(0, 0), Point(3, 4))
        5.0
    """
    if __debug__:
        assert_is_valid(a, b)
    return math.hypot(b.x - a.x, b.y - a.y)


def distance_point_point_fast(a: Point, b: Point) -> int:
    """Approximate distance using an octagonal norm.

    Avoids the square root at the cost of an error of a few percent. Use it
    only for rough comparisons, never where the exact distance matters.

    Examples:
        >>> distance_point_point_fast(Point(0, 0), Point(3, 4))
        5
    """
    dx = abs(int(b.x) - int(a.x))
    dy = abs(int(b.y) - int(a.y))
    hi = max(dx, dy)
    lo = min(dx, dy)
    return (
        (hi << 8) + (hi << 3) - (hi << 4) - (hi << 1)
        + (lo << 7) - (lo << 5) + (lo << 3) - (lo << 1)
    ) >> 8


def distance_point_line(
    p: Point | PointF,
    a1: Point | PointF,
    a2: Point | PointF,
    is_segment: bool,
) -> float:
    """Distance between a point and a line or line segment.

    For an infinite line the result is signed: its sign tells which side of
    the line a1-a2 the point lies on. For a segment the result is unsigned
    and, when the perpendicular foot falls outside the segment, equals the
    distance to the nearer end point.

    Args:
        p: Query point
        a1: First point of the line
        a2: Second point of the line
        is_segment: Treat a1-a2 as a finite segment

    Returns:
        Distance as described above

    Examples:
        >>> distance_point_line(Point(-8, 3), Point(-4, 0), Point(4, 0), False)
        3.0
        >>> distance_point_line(Point(-8, 3), Point(-4, 0), Point(4, 0), True)
        5.0
    """
    if __debug__:
        assert_is_valid(p, a1, a2)
    if p == a1 or p == a2:
        return 0.0
    length = math.hypot(a2.x - a1.x, a2.y - a1.y)
    if equals(length, 0):
        return distance_point_point(a1, p)
    if is_segment:
        if dot_product3(a1, a2, p) > 0:
            return distance_point_point(a2, p)
        if dot_product3(a2, a1, p) > 0:
            return distance_point_point(a1, p)
        return abs(cross_product3(a1, a2, p) / length)
    return cross_product3(a1, a2, p) / length


def distance_point_line_sin(p: Point | PointF, a1: Point | PointF, a2: Point | PointF) -> float:
    """Signed distance between a point and an infinite line, via the sine rule."""
    return distance_point_point(p, a1) * math.sin(angle3(a1, p, a2))


def get_nearest_point(p: Point | PointF, points: Iterable[PointT]) -> PointT | None:
    """Return the point of ``points`` closest to ``p``.

    Ties go to the point encountered first.

    Returns:
        Nearest point, or None if ``points`` is empty
    """
    result = None
    best = math.inf
    for candidate in points:
        d = distance_point_point(p, candidate)
        if d < best:
            best = d
            result = candidate
    return result


def get_furthest_point(p: Point | PointF, points: Iterable[PointT]) -> PointT | None:
    """Return the point of ``points`` furthest from ``p`` (first one on ties)."""
    result = None
    best = -math.inf
    for candidate in points:
        d = distance_point_point(p, candidate)
        if d > best:
            best = d
            result = candidate
    return result


def is_nearer(p: Point | PointF, original: Point | PointF, compared: Point | PointF) -> bool:
    """Check if ``compared`` is strictly nearer to ``p`` than ``original``."""
    return distance_point_point(p, compared) < distance_point_point(p, original)


def is_farther(p: Point | PointF, original: Point | PointF, compared: Point | PointF) -> bool:
    """Check if ``compared`` is strictly farther from ``p`` than ``original``."""
    return distance_point_point(p, compared) > distance_point_point(p, original)


def calc_nearest_point_of_line_segment(a: PointT, b: PointT, p: PointT) -> PointT:
    """Return the point of the segment a-b closest to ``p``.

    The perpendicular foot of ``p`` is used when it lies on the segment,
    otherwise the nearer end point.

    Examples:
        >>> calc_nearest_point_of_line_segment(Point(1, 1), Point(7, 7), Point(2, 8))
        Point(x=5, y=5)
    """
    foot = intersect_lines(p, calc_perpendicular_line_through(a, b, p), a, b)
    if foot is None or abs(distance_point_line(foot, a, b, True)) > NEAREST_SEGMENT_DELTA:
        reference = p if foot is None else foot
        return get_nearest_point(reference, (a, b))
    return foot
