"""Normal vectors and tangents.

Connector routing uses these to leave a shape perpendicular to its outline:
a normal vector is returned as the point ``length`` away from the outline,
so that the caller can draw the line from the outline point to it.
"""

import logging
from collections.abc import Iterator

from shapegeom.core.containment import arc_contains_point_on_circle, triangle_contains_point
from shapegeom.core.distance import distance_point_line, distance_point_point
from shapegeom.core.intersection_points import intersect_circles
from shapegeom.core.lines import calc_circum_circle, calc_point_on_line
from shapegeom.core.numeric import ARC_HIT_DELTA
from shapegeom.core.vectors import midpoint
from shapegeom.domain.primitives import Point, PointF, PointT, Rectangle, RectangleF, make_point

logger = logging.getLogger(__name__)


def calc_normal_vector_of_line(a1: PointT, a2: PointT, foot: PointT, length: float) -> PointT:
    """End point of the normal of line a1-a2 starting at ``foot``.

    The normal is the line's direction turned by -90 degrees (to the left on
    a y-down screen) and scaled to ``length``.

    Examples:
        >>> calc_normal_vector_of_line(Point(-2, -4), Point(2, -4), Point(0, -4), 100)
        Point(x=0, y=-104)
    """
    end = calc_point_on_line(a1, a2, length)
    dx = end.x - a1.x
    dy = end.y - a1.y
    return make_point(type(foot), foot.x + dy, foot.y - dx)


def calc_normal_vector_of_rectangle(
    rect: Rectangle | RectangleF, p: PointT, length: float
) -> PointT:
    """End point of the outward normal of a rectangle at the side nearest to ``p``.

    The rectangle is split into four triangles by its corners and center;
    the triangle containing ``p`` selects the side. Corners belong to the
    top and bottom sides. Points outside the rectangle are returned as
    they are.
    """
    if not (rect.left <= p.x <= rect.right and rect.top <= p.y <= rect.bottom):
        return p
    tl, tr, br, bl = rect.corners()
    if isinstance(rect, Rectangle):
        center = Point(rect.x + rect.width // 2, rect.y + rect.height // 2)
    else:
        center = PointF(rect.x + rect.width / 2, rect.y + rect.height / 2)

    kind = type(p)
    if triangle_contains_point(tl, tr, center, p):
        return make_point(kind, p.x, rect.top - length)
    if triangle_contains_point(bl, br, center, p):
        return make_point(kind, p.x, rect.bottom + length)
    if triangle_contains_point(tr, br, center, p):
        return make_point(kind, rect.right + length, p.y)
    if triangle_contains_point(tl, bl, center, p):
        return make_point(kind, rect.left - length, p.y)
    logger.debug("No side of %s found for %s, returning the point", rect, p)
    return p


def calc_normal_vector_of_circle(
    center: Point | PointF, radius: float, p: PointT, length: float
) -> PointT:
    """End point of the outward normal of a circle on the ray from its center through ``p``.

    Points outside the circle and the center itself are returned as they are.

    Examples:
        >>> calc_normal_vector_of_circle(Point(0, 0), 10, Point(5, 0), 100)
        Point(x=110, y=0)
    """
    distance = distance_point_point(center, p)
    if distance > radius:
        return p
    if distance == 0:
        logger.debug("Normal vector of circle at %s undefined at its center", center)
        return p
    scale = (radius + length) / distance
    return make_point(
        type(p),
        center.x + (p.x - center.x) * scale,
        center.y + (p.y - center.y) * scale,
    )


def _thales_circle(center: PointF, p: Point | PointF) -> tuple[PointF, float]:
    """Circle over the diameter center-p; it meets a circle around ``center`` at the tangent points."""
    mid = midpoint(center, PointF(float(p.x), float(p.y)))
    return mid, distance_point_point(center, p) / 2


def calc_circle_tangent_through_point(
    center: Point | PointF, radius: float, p: PointT
) -> Iterator[PointT]:
    """Yield the points where the tangents through ``p`` touch a circle.

    Yields nothing if ``p`` lies inside the circle.

    Examples:
        >>> [(round(t.x, 3), round(t.y, 3)) for t in calc_circle_tangent_through_point(PointF(0, 0), 5, PointF(10, 0))]
        [(2.5, 4.33), (2.5, -4.33)]
    """
    c = PointF(float(center.x), float(center.y))
    mid, thales_radius = _thales_circle(c, p)
    kind = type(p)
    for t in intersect_circles(c, radius, mid, thales_radius):
        yield make_point(kind, t.x, t.y)


def calc_arc_tangent_through_point(
    start: Point | PointF,
    radius_pt: Point | PointF,
    end: Point | PointF,
    p: PointT,
) -> Iterator[PointT]:
    """Yield the points where the tangents through ``p`` touch a three-point arc.

    A tangent point outside the arc is replaced by the arc's end point that
    is nearer to it. Colinear defining points describe no circle and yield
    nothing.
    """
    circle = calc_circum_circle(start, radius_pt, end)
    if circle is None:
        return
    center, radius = circle
    mid, thales_radius = _thales_circle(center, p)
    kind = type(p)
    for t in intersect_circles(center, radius, mid, thales_radius):
        if arc_contains_point_on_circle(start, radius_pt, end, center, radius, t, ARC_HIT_DELTA):
            yield make_point(kind, t.x, t.y)
            continue
        start_distance = distance_point_point(t, start)
        end_distance = distance_point_point(t, end)
        if start_distance == end_distance:
            # Both end points equally near: take the one nearer to the tangent
            start_distance = distance_point_line(start, t, p, True)
            end_distance = distance_point_line(end, t, p, True)
        if start_distance < end_distance:
            yield make_point(kind, start.x, start.y)
        elif end_distance < start_distance:
            yield make_point(kind, end.x, end.y)
