"""Tests for domain models to verify they work correctly."""

import pytest

from shapegeom.domain import (
    INVALID_POINT,
    INVALID_RECTANGLE,
    ArrowMove,
    Point,
    PointF,
    Rectangle,
    RectangleF,
    ResizeHandle,
    ResizeModifiers,
    ResizeResult,
    Size,
    make_point,
)


class TestPoint:
    """Tests for Point and PointF classes."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100, 200)
        assert p.x == 100
        assert p.y == 200

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100, 200).to_tuple() == (100, 200)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = PointF(1.5, -2.5)
        p2 = PointF.from_dict(p1.to_dict())
        assert p2 == p1
        assert isinstance(p2, PointF)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100, 200)
        with pytest.raises(AttributeError):
            p.x = 300  # type: ignore

    def test_points_compare_by_value(self) -> None:
        """Test that equal coordinates give equal, hashable points."""
        assert Point(1, 2) == Point(1, 2)
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    def test_offset_keeps_type(self) -> None:
        """Test that offset returns the same point type."""
        assert Point(1, 2).offset(3, 4) == Point(4, 6)
        assert PointF(1.0, 2.0).offset(0.5, 0.5) == PointF(1.5, 2.5)

    def test_conversions(self) -> None:
        """Test conversion between integer and floating points."""
        assert Point(3, 4).to_pointf() == PointF(3.0, 4.0)
        assert PointF(2.5, 3.5).round() == Point(2, 4)

    def test_make_point_rounds_integers(self) -> None:
        """Test that make_point rounds only for integer points."""
        assert make_point(Point, 2.6, -1.4) == Point(3, -1)
        assert make_point(PointF, 2.6, -1.4) == PointF(2.6, -1.4)


class TestRectangle:
    """Tests for Rectangle class."""

    def test_edges(self) -> None:
        """Test derived edge coordinates."""
        rect = Rectangle(-2, -4, 20, 10)
        assert rect.left == -2
        assert rect.top == -4
        assert rect.right == 18
        assert rect.bottom == 6

    def test_corners_order(self) -> None:
        """Test that corners run clockwise from the top-left."""
        assert Rectangle(0, 0, 10, 5).corners() == (
            Point(0, 0),
            Point(10, 0),
            Point(10, 5),
            Point(0, 5),
        )

    def test_corners_follow_rectangle_type(self) -> None:
        """Test that floating rectangles give floating corners."""
        assert all(isinstance(c, PointF) for c in RectangleF(0, 0, 1, 1).corners())

    def test_from_ltrb(self) -> None:
        """Test building a rectangle from its edges."""
        assert Rectangle.from_ltrb(1, 2, 11, 7) == Rectangle(1, 2, 10, 5)

    def test_location_and_size(self) -> None:
        """Test location and size accessors."""
        rect = Rectangle(1, 2, 3, 4)
        assert rect.location == Point(1, 2)
        assert rect.size == Size(3, 4)

    def test_is_empty(self) -> None:
        """Test empty detection."""
        assert Rectangle(0, 0, 0, 10).is_empty()
        assert not Rectangle(0, 0, 1, 1).is_empty()

    def test_to_rectangle_widens_outwards(self) -> None:
        """Test that conversion to integers encloses the floating rectangle."""
        assert RectangleF(0.5, 0.5, 2.0, 2.0).to_rectangle() == Rectangle(0, 0, 3, 3)

    def test_serialization(self) -> None:
        """Test rectangle serialization and deserialization."""
        rect = Rectangle(1, 2, 3, 4)
        assert Rectangle.from_dict(rect.to_dict()) == rect


class TestSentinels:
    """Tests for the invalid sentinel values."""

    def test_invalid_point_uses_min_coordinate(self) -> None:
        assert INVALID_POINT == Point(-(2**31), -(2**31))

    def test_invalid_rectangle_has_negative_size(self) -> None:
        assert INVALID_RECTANGLE.width < 0
        assert INVALID_RECTANGLE.height < 0


class TestResizeTypes:
    """Tests for resize enums and results."""

    def test_handle_corner_detection(self) -> None:
        """Test that only the four corners are corners."""
        corners = {h for h in ResizeHandle if h.is_corner}
        assert corners == {
            ResizeHandle.TOP_LEFT,
            ResizeHandle.TOP_RIGHT,
            ResizeHandle.BOTTOM_LEFT,
            ResizeHandle.BOTTOM_RIGHT,
        }

    def test_handle_from_value(self) -> None:
        assert ResizeHandle("bottom-right") is ResizeHandle.BOTTOM_RIGHT

    def test_modifiers_combine(self) -> None:
        """Test that modifiers work as flags."""
        both = ResizeModifiers.MAINTAIN_ASPECT | ResizeModifiers.MIRRORED_RESIZE
        assert ResizeModifiers.MAINTAIN_ASPECT in both
        assert ResizeModifiers.MIRRORED_RESIZE in both
        assert ResizeModifiers.MIRRORED_RESIZE not in ResizeModifiers.NONE

    def test_result_center_offset(self) -> None:
        result = ResizeResult(success=True, center_offset_x=5, center_offset_y=-3, width=10, height=20)
        assert result.center_offset == Point(5, -3)

    def test_arrow_move_immutable(self) -> None:
        move = ArrowMove(unchanged=True, center_offset_x=0, center_offset_y=0, angle_tenths=0, width=10)
        with pytest.raises(AttributeError):
            move.width = 20  # type: ignore
