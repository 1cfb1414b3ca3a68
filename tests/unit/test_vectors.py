"""Tests for vector algebra helpers."""

import pytest

from shapegeom.core.vectors import (
    BEZIER_STEPS,
    bezier_point,
    cross_product,
    cross_product3,
    dot_product,
    dot_product3,
    dot_product4,
    linear_interpolation,
    midpoint,
    solve_linear_2x2,
)
from shapegeom.domain import Point, PointF


class TestProducts:
    """Tests for dot and cross products."""

    def test_dot_product(self) -> None:
        assert dot_product(Point(1, 2), Point(3, 4)) == 11

    def test_dot_product3_measures_ab_against_bc(self) -> None:
        """Test that the product is positive when the path continues forward."""
        assert dot_product3(Point(0, 0), Point(2, 0), Point(4, 1)) == 4
        assert dot_product3(Point(0, 0), Point(2, 0), Point(1, 5)) < 0

    def test_dot_product4(self) -> None:
        assert dot_product4(Point(0, 0), Point(1, 0), Point(5, 5), Point(5, 8)) == 0

    def test_cross_product(self) -> None:
        assert cross_product(Point(1, 0), Point(0, 1)) == 1

    def test_cross_product3_sign_selects_side(self) -> None:
        """Test that the sign tells on which side of AB the point lies."""
        assert cross_product3(Point(0, 0), Point(4, 0), Point(0, 3)) == 12
        assert cross_product3(Point(0, 0), Point(4, 0), Point(0, -3)) == -12
        assert cross_product3(Point(0, 0), Point(4, 0), Point(8, 0)) == 0

    def test_products_do_not_overflow(self) -> None:
        """Test that products of large integer coordinates stay exact."""
        big = 2**31 - 1
        assert cross_product(Point(big, big), Point(-big, big)) == 2 * big * big


class TestInterpolation:
    """Tests for interpolation and midpoints."""

    def test_linear_interpolation_float(self) -> None:
        assert linear_interpolation(PointF(0, 0), PointF(10, 20), 0.25) == PointF(2.5, 5.0)

    def test_linear_interpolation_extrapolates(self) -> None:
        assert linear_interpolation(Point(0, 0), Point(10, 0), 1.5) == Point(15, 0)

    def test_midpoint_integer_rounds(self) -> None:
        assert midpoint(Point(0, 0), Point(3, 4)) == Point(2, 2)


class TestSolveLinear:
    """Tests for 2x2 linear systems."""

    def test_identity(self) -> None:
        assert solve_linear_2x2(1, 0, 0, 1, -3, -4) == (3.0, 4.0)

    def test_general_system(self) -> None:
        """Test x + y = 3, x - y = 1."""
        x, y = solve_linear_2x2(1, 1, 1, -1, -3, -1)
        assert x == pytest.approx(2.0)
        assert y == pytest.approx(1.0)

    def test_singular_matrix(self) -> None:
        assert solve_linear_2x2(1, 2, 2, 4, 1, 1) is None


class TestBezier:
    """Tests for cubic Bezier evaluation."""

    def test_end_points(self) -> None:
        """Test that step 0 gives the last point and the final step the first."""
        a, b, c, d = Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0)
        assert bezier_point(a, b, c, d, 0) == d
        assert bezier_point(a, b, c, d, BEZIER_STEPS) == a

    def test_midpoint_of_symmetric_curve(self) -> None:
        a, b, c, d = PointF(0, 0), PointF(0, 8), PointF(8, 8), PointF(8, 0)
        mid = bezier_point(a, b, c, d, BEZIER_STEPS / 2)
        assert mid.x == pytest.approx(4.0)
        assert mid.y == pytest.approx(6.0)
