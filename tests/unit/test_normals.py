"""Tests for normal vectors and tangents."""

import pytest

from shapegeom.core.normals import (
    calc_arc_tangent_through_point,
    calc_circle_tangent_through_point,
    calc_normal_vector_of_circle,
    calc_normal_vector_of_line,
    calc_normal_vector_of_rectangle,
)
from shapegeom.domain import Point, PointF, Rectangle

RECT = Rectangle(-2, -4, 20, 10)

# Upper half of the circle around (10, 0) with radius 10
ARC = (PointF(0, 0), PointF(10, 10), PointF(20, 0))


class TestLineNormal:
    """Tests for normals of lines."""

    @pytest.mark.parametrize(
        ("a1", "a2", "foot", "expected"),
        [
            (Point(-2, -4), Point(2, -4), Point(0, -4), Point(0, -104)),
            (Point(-5, -12), Point(-5, -14), Point(-5, 100), Point(-105, 100)),
            (Point(0, 8), Point(6, 0), Point(3, 4), Point(-77, -56)),
        ],
    )
    def test_normal(self, a1, a2, foot, expected) -> None:
        assert calc_normal_vector_of_line(a1, a2, foot, 100) == expected

    def test_float_normal_keeps_type(self) -> None:
        result = calc_normal_vector_of_line(PointF(0, 0), PointF(10, 0), PointF(5, 0), 2.5)
        assert isinstance(result, PointF)
        assert result.x == pytest.approx(5.0)
        assert result.y == pytest.approx(-2.5)


class TestRectangleNormal:
    """Tests for outward normals of rectangles."""

    @pytest.mark.parametrize(
        ("p", "expected"),
        [
            # On the sides
            (Point(-2, 0), Point(-102, 0)),
            (Point(0, -4), Point(0, -104)),
            (Point(16, 0), Point(118, 0)),
            (Point(0, 6), Point(0, 106)),
            # Inside
            (Point(0, 0), Point(-102, 0)),
            (Point(0, -3), Point(0, -104)),
            (Point(15, 0), Point(118, 0)),
            (Point(0, 5), Point(0, 106)),
        ],
    )
    def test_side_nearest_to_point(self, p, expected) -> None:
        assert calc_normal_vector_of_rectangle(RECT, p, 100) == expected

    @pytest.mark.parametrize(
        ("corner", "expected"),
        [
            (Point(-2, -4), Point(-2, -104)),
            (Point(18, -4), Point(18, -104)),
            (Point(-2, 6), Point(-2, 106)),
            (Point(18, 6), Point(18, 106)),
        ],
    )
    def test_corners_belong_to_top_and_bottom(self, corner, expected) -> None:
        assert calc_normal_vector_of_rectangle(RECT, corner, 100) == expected

    def test_point_outside_is_returned(self) -> None:
        assert calc_normal_vector_of_rectangle(RECT, Point(50, 50), 100) == Point(50, 50)


class TestCircleNormal:
    """Tests for outward normals of circles."""

    def test_normal(self) -> None:
        assert calc_normal_vector_of_circle(Point(0, 0), 10, Point(5, 0), 100) == Point(110, 0)

    def test_normal_on_outline(self) -> None:
        assert calc_normal_vector_of_circle(Point(0, 0), 10, Point(0, -10), 5) == Point(0, -15)

    def test_outside_and_center_are_returned(self) -> None:
        assert calc_normal_vector_of_circle(Point(0, 0), 10, Point(20, 0), 100) == Point(20, 0)
        assert calc_normal_vector_of_circle(Point(0, 0), 10, Point(0, 0), 100) == Point(0, 0)


class TestTangents:
    """Tests for tangent points through an outside point."""

    def test_circle_tangent_points(self) -> None:
        points = list(calc_circle_tangent_through_point(PointF(0, 0), 5, PointF(10, 0)))
        assert [(round(p.x, 3), round(p.y, 3)) for p in points] == [(2.5, 4.33), (2.5, -4.33)]

    def test_tangent_points_are_perpendicular_to_radius(self) -> None:
        p = PointF(3.0, -7.5)
        for t in calc_circle_tangent_through_point(PointF(1, 1), 4, p):
            radius = (t.x - 1, t.y - 1)
            tangent = (p.x - t.x, p.y - t.y)
            assert radius[0] * tangent[0] + radius[1] * tangent[1] == pytest.approx(0.0, abs=1e-6)

    def test_point_inside_circle(self) -> None:
        assert list(calc_circle_tangent_through_point(PointF(0, 0), 5, PointF(1, 0))) == []

    def test_arc_tangent_points_on_arc(self) -> None:
        points = list(calc_arc_tangent_through_point(*ARC, PointF(10, 20)))
        assert len(points) == 2
        assert all(p.y == pytest.approx(5.0) for p in points)

    def test_arc_tangent_points_off_arc_snap_to_ends(self) -> None:
        """Test that tangent points on the missing half become the arc's end points."""
        points = list(calc_arc_tangent_through_point(*ARC, PointF(10, -20)))
        assert set(points) == {PointF(0, 0), PointF(20, 0)}

    def test_colinear_arc(self) -> None:
        assert list(calc_arc_tangent_through_point(PointF(0, 0), PointF(1, 0), PointF(2, 0), PointF(1, 5))) == []
