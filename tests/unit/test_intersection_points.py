"""Tests for intersection point calculators."""

import pytest

from shapegeom.core.distance import distance_point_point
from shapegeom.core.intersection_points import (
    get_all_circle_line_intersections,
    intersect_arc_line,
    intersect_circle_arc,
    intersect_circle_with_line,
    intersect_circles,
    intersect_ellipse_line,
    intersect_polygon_line,
    intersect_rectangle_line,
)
from shapegeom.domain import Point, PointF, Rectangle

ARC = (PointF(0, 0), PointF(10, 10), PointF(20, 0))


class TestCircleLine:
    """Tests for circle/line intersections."""

    def test_line_through_center(self) -> None:
        points = list(get_all_circle_line_intersections(Point(0, 0), 5, Point(-10, 0), Point(10, 0), False))
        assert points == [Point(-5, 0), Point(5, 0)]

    def test_segment_keeps_points_on_segment(self) -> None:
        points = list(get_all_circle_line_intersections(Point(0, 0), 5, Point(0, 0), Point(10, 0), True))
        assert points == [Point(5, 0)]

    def test_tangent_gives_one_point(self) -> None:
        points = list(get_all_circle_line_intersections(Point(0, 0), 5, Point(-10, 5), Point(10, 5), False))
        assert points == [Point(0, 5)]

    def test_missing_line(self) -> None:
        assert list(get_all_circle_line_intersections(Point(0, 0), 5, Point(-10, 6), Point(10, 6), False)) == []

    def test_degenerate_input(self) -> None:
        assert list(get_all_circle_line_intersections(Point(0, 0), 5, Point(1, 1), Point(1, 1), False)) == []
        assert list(get_all_circle_line_intersections(Point(0, 0), 0, Point(-1, 0), Point(1, 0), False)) == []

    def test_nearest_to_first_point(self) -> None:
        assert intersect_circle_with_line(Point(0, 0), 5, Point(-10, 0), Point(10, 0), False) == Point(-5, 0)
        assert intersect_circle_with_line(Point(0, 0), 5, Point(10, 0), Point(-10, 0), False) == Point(5, 0)

    def test_no_intersection_gives_none(self) -> None:
        assert intersect_circle_with_line(Point(0, 0), 5, Point(-10, 6), Point(10, 6), False) is None


class TestCircles:
    """Tests for circle/circle intersections."""

    def test_two_points(self) -> None:
        assert list(intersect_circles(Point(0, 0), 5, Point(8, 0), 5)) == [Point(4, 3), Point(4, -3)]

    def test_touching(self) -> None:
        assert list(intersect_circles(Point(0, 0), 5, Point(10, 0), 5)) == [Point(5, 0)]

    def test_separate(self) -> None:
        assert list(intersect_circles(Point(0, 0), 5, Point(20, 0), 5)) == []

    def test_concentric(self) -> None:
        assert list(intersect_circles(Point(0, 0), 5, Point(0, 0), 3)) == []

    def test_points_lie_on_both_circles(self) -> None:
        c1, r1, c2, r2 = PointF(1.5, -2.0), 7.0, PointF(4.0, 6.5), 5.5
        points = list(intersect_circles(c1, r1, c2, r2))
        assert len(points) == 2
        for p in points:
            assert distance_point_point(c1, p) == pytest.approx(r1)
            assert distance_point_point(c2, p) == pytest.approx(r2)


class TestArcs:
    """Tests for arc intersections."""

    def test_arc_with_line(self) -> None:
        points = list(intersect_arc_line(*ARC, PointF(10, -5), PointF(10, 20), False))
        assert len(points) == 1
        assert points[0].x == pytest.approx(10.0)
        assert points[0].y == pytest.approx(10.0)

    def test_arc_with_circle(self) -> None:
        points = list(intersect_circle_arc(PointF(10, 15), 6, *ARC))
        assert len(points) == 2
        assert all(p.y > 0 for p in points)

    def test_colinear_arc_has_no_circle(self) -> None:
        assert list(intersect_arc_line(PointF(0, 0), PointF(1, 0), PointF(2, 0), PointF(1, -1), PointF(1, 1), False)) == []


class TestShapes:
    """Tests for ellipse, rectangle and polygon intersections."""

    def test_ellipse_line(self) -> None:
        points = list(intersect_ellipse_line(Point(0, 0), 20, 10, 0, Point(-20, 0), Point(20, 0), False))
        assert points == [Point(-10, 0), Point(10, 0)]

    def test_rotated_ellipse_line(self) -> None:
        points = list(intersect_ellipse_line(Point(0, 0), 20, 10, 90, Point(0, -20), Point(0, 20), False))
        assert points == [Point(0, -10), Point(0, 10)]

    def test_degenerate_ellipse(self) -> None:
        assert list(intersect_ellipse_line(Point(0, 0), 0, 10, 0, Point(-20, 0), Point(20, 0), False)) == []

    def test_rectangle_line(self) -> None:
        points = list(intersect_rectangle_line(Rectangle(0, 0, 10, 10), 0, Point(-5, 5), Point(15, 5), True))
        assert points == [Point(10, 5), Point(0, 5)]

    def test_rectangle_segment_inside(self) -> None:
        assert list(intersect_rectangle_line(Rectangle(0, 0, 10, 10), 0, Point(2, 5), Point(8, 5), True)) == []

    def test_polygon_line(self) -> None:
        triangle = [PointF(0, 0), PointF(10, 0), PointF(5, 10)]
        points = list(intersect_polygon_line(triangle, PointF(-5, 5), PointF(15, 5), True))
        assert points == [PointF(7.5, 5.0), PointF(2.5, 5.0)]
