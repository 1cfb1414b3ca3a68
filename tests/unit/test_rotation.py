"""Tests for angle conversion and rotation."""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from shapegeom.core.rotation import (
    angle,
    angle3,
    degrees_to_radians,
    degrees_to_tenths_of_degree,
    radians_to_degrees,
    radians_to_tenths_of_degree,
    rotate_line,
    rotate_point,
    rotate_rectangle,
    tenths_of_degree_to_degrees,
    tenths_of_degree_to_radians,
    transform_rectangle,
)
from shapegeom.domain import Point, PointF, Rectangle


class TestConversions:
    """Tests for unit conversions."""

    def test_degrees_and_radians(self) -> None:
        assert degrees_to_radians(180) == pytest.approx(math.pi)
        assert radians_to_degrees(math.pi) == pytest.approx(180)

    def test_tenths_of_degree(self) -> None:
        assert tenths_of_degree_to_degrees(900) == 90.0
        assert tenths_of_degree_to_radians(1800) == pytest.approx(math.pi)

    def test_to_tenths_rounds_half_away_from_zero(self) -> None:
        assert degrees_to_tenths_of_degree(4.25) == 43
        assert degrees_to_tenths_of_degree(-4.25) == -43
        assert degrees_to_tenths_of_degree(90) == 900

    def test_radians_to_tenths(self) -> None:
        assert radians_to_tenths_of_degree(math.pi) == 1800

    def test_angle(self) -> None:
        assert angle(Point(0, 0), Point(0, 1)) == pytest.approx(math.pi / 2)
        assert angle(Point(0, 0), Point(-1, 0)) == pytest.approx(math.pi)

    def test_angle_between_vectors(self) -> None:
        assert angle3(Point(0, 0), Point(1, 0), Point(0, 1)) == pytest.approx(math.pi / 2)
        assert angle3(Point(0, 0), Point(0, 1), Point(1, 0)) == pytest.approx(-math.pi / 2)


class TestRotatePoint:
    """Tests for rotating points."""

    def test_quarter_turn(self) -> None:
        assert rotate_point(Point(0, 0), 90, Point(1, 0)) == Point(0, 1)

    def test_around_other_center(self) -> None:
        assert rotate_point(Point(10, 10), 180, Point(15, 10)) == Point(5, 10)

    def test_full_turn(self) -> None:
        assert rotate_point(Point(3, -2), 360, Point(7, 9)) == Point(7, 9)

    def test_float_keeps_precision(self) -> None:
        result = rotate_point(PointF(0, 0), 45, PointF(1, 0))
        assert result.x == pytest.approx(math.sqrt(0.5))
        assert result.y == pytest.approx(math.sqrt(0.5))

    @pytest.mark.parametrize("angle_deg", [0, 17.5, 90, 133, -271, 725])
    @pytest.mark.parametrize("center", [PointF(0, 0), PointF(-12.5, 40.0)])
    def test_round_trip(self, angle_deg: float, center: PointF) -> None:
        """Test that rotating back restores the point."""
        p = PointF(23.75, -8.5)
        back = rotate_point(center, -angle_deg, rotate_point(center, angle_deg, p))
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)

    def test_concurrent_rotations_are_independent(self) -> None:
        """Test that rotations running in parallel do not share state."""
        angles = list(range(0, 360, 5)) * 4

        def rotate(angle_deg: int) -> PointF:
            return rotate_point(PointF(0, 0), angle_deg, PointF(100, 0))

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(rotate, angles))
        for angle_deg, result in zip(angles, results):
            assert result.x == pytest.approx(100 * math.cos(math.radians(angle_deg)), abs=1e-9)
            assert result.y == pytest.approx(100 * math.sin(math.radians(angle_deg)), abs=1e-9)


class TestRotateShapes:
    """Tests for rotating lines and rectangles."""

    def test_rotate_line(self) -> None:
        assert rotate_line(Point(0, 0), 90, Point(1, 0), Point(2, 0)) == (Point(0, 1), Point(0, 2))

    def test_rotate_rectangle(self) -> None:
        corners = rotate_rectangle(Rectangle(0, 0, 10, 10), Point(5, 5), 90)
        assert corners == (Point(10, 0), Point(10, 10), Point(0, 10), Point(0, 0))

    def test_transform_rectangle(self) -> None:
        """Test that a square around the caption center keeps its corner set."""
        corners = transform_rectangle(Point(10, 10), 900, Rectangle(-5, -5, 10, 10))
        assert set(corners) == {Point(5, 5), Point(15, 5), Point(15, 15), Point(5, 15)}
