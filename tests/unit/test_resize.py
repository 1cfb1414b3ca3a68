"""Tests for resize geometry of rotated rectangles."""

import pytest

from shapegeom.core.resize import (
    align_movement,
    get_min_values,
    maintain_aspect_ratio,
    move_arrow_point,
    move_rectangle_corner,
    move_rectangle_edge,
    transform_mouse_movement,
)
from shapegeom.domain import ArrowMove, Point, ResizeHandle, ResizeModifiers, ResizeResult
from shapegeom.exceptions import InvalidArgumentError

NO_ROTATION = (1.0, 0.0)  # cos, sin
QUARTER_TURN = (0.0, 1.0)


class TestMouseMovement:
    """Tests for transforming and aligning raw movements."""

    def test_unrotated(self) -> None:
        assert transform_mouse_movement(10, 6, 0) == (10.0, 6.0, 0.0, 1.0)

    def test_quarter_turn(self) -> None:
        dx, dy, sin, cos = transform_mouse_movement(10, 0, 900)
        assert dx == pytest.approx(0.0, abs=1e-9)
        assert dy == pytest.approx(-10.0)
        assert sin == pytest.approx(1.0)
        assert cos == pytest.approx(0.0, abs=1e-9)

    def test_align_truncates_to_divisor(self) -> None:
        assert align_movement(ResizeModifiers.NONE, 2, 2, 5.0, 4.0) == (False, 4.0, 4.0)

    def test_align_keeps_aligned_movement(self) -> None:
        assert align_movement(ResizeModifiers.NONE, 2, 2, 6.0, -4.0) == (True, 6.0, -4.0)

    def test_align_truncates_towards_zero(self) -> None:
        assert align_movement(ResizeModifiers.NONE, 2, 2, -5.0, 0.0) == (False, -4.0, 0.0)

    def test_mirrored_resize_is_not_aligned(self) -> None:
        assert align_movement(ResizeModifiers.MIRRORED_RESIZE, 2, 2, 5.0, 3.0) == (True, 5.0, 3.0)


class TestMaintainAspectRatio:
    """Tests for correcting corner movements to the aspect ratio."""

    def test_width_driven(self) -> None:
        assert maintain_aspect_ratio(100, 50, 1, 1, 10, 10) == (False, 10, 5.0)

    def test_already_proportional(self) -> None:
        assert maintain_aspect_ratio(100, 50, 1, 1, 10, 5) == (True, 10, 5.0)

    def test_height_driven(self) -> None:
        assert maintain_aspect_ratio(100, 50, 1, 1, 20, 5) == (False, 10.0, 5)

    def test_shrinking_top_left(self) -> None:
        """Test that the smaller candidate wins when a top-left corner shrinks."""
        assert maintain_aspect_ratio(100, 50, -1, -1, 10, 10) == (False, 20.0, 10)

    def test_invalid_grow_direction(self) -> None:
        with pytest.raises(InvalidArgumentError):
            maintain_aspect_ratio(100, 50, 0, 1, 10, 10)

    def test_zero_height(self) -> None:
        with pytest.raises(InvalidArgumentError):
            maintain_aspect_ratio(100, 0, 1, 1, 10, 10)

    def test_min_values(self) -> None:
        assert get_min_values(100, 50, ResizeModifiers.NONE) == (0, 0)
        assert get_min_values(100, 50, ResizeModifiers.MAINTAIN_ASPECT) == (2, 1)


class TestMoveRectangleCorner:
    """Tests for dragging corners."""

    def test_bottom_right(self) -> None:
        result = move_rectangle_corner(ResizeHandle.BOTTOM_RIGHT, 100, 50, 10, 6, *NO_ROTATION)
        assert result == ResizeResult(success=True, center_offset_x=5, center_offset_y=3, width=110, height=56)

    def test_top_left_shrinks(self) -> None:
        result = move_rectangle_corner(ResizeHandle.TOP_LEFT, 100, 50, 10, 6, *NO_ROTATION)
        assert result == ResizeResult(success=True, center_offset_x=5, center_offset_y=3, width=90, height=44)

    def test_top_right(self) -> None:
        result = move_rectangle_corner(ResizeHandle.TOP_RIGHT, 100, 50, 10, -6, *NO_ROTATION)
        assert (result.width, result.height) == (110, 56)
        assert result.center_offset == Point(5, -3)

    def test_movement_is_aligned(self) -> None:
        result = move_rectangle_corner(ResizeHandle.BOTTOM_RIGHT, 100, 50, 5, 4, *NO_ROTATION)
        assert (result.width, result.height) == (104, 54)
        assert result.center_offset == Point(2, 2)

    def test_rotated_center_offset(self) -> None:
        """Test that the center offset is rotated back into screen space."""
        result = move_rectangle_corner(ResizeHandle.BOTTOM_RIGHT, 100, 50, 10, 6, *QUARTER_TURN)
        assert (result.width, result.height) == (110, 56)
        assert result.center_offset == Point(-3, 5)

    def test_clamped_to_minimum(self) -> None:
        result = move_rectangle_corner(ResizeHandle.BOTTOM_RIGHT, 100, 50, -120, 0, *NO_ROTATION)
        assert result == ResizeResult(success=False, center_offset_x=-50, center_offset_y=0, width=0, height=50)

    def test_custom_minimum(self) -> None:
        result = move_rectangle_corner(
            ResizeHandle.BOTTOM_RIGHT, 100, 50, -120, 0, *NO_ROTATION, min_width=20
        )
        assert result == ResizeResult(success=False, center_offset_x=-40, center_offset_y=0, width=20, height=50)

    def test_mirrored_keeps_center(self) -> None:
        result = move_rectangle_corner(
            ResizeHandle.BOTTOM_RIGHT, 100, 50, 10, 6, *NO_ROTATION, ResizeModifiers.MIRRORED_RESIZE
        )
        assert result == ResizeResult(success=True, center_offset_x=0, center_offset_y=0, width=120, height=62)

    def test_maintain_aspect(self) -> None:
        result = move_rectangle_corner(
            ResizeHandle.BOTTOM_RIGHT, 100, 50, 12, 20, *NO_ROTATION, ResizeModifiers.MAINTAIN_ASPECT
        )
        assert result == ResizeResult(success=False, center_offset_x=6, center_offset_y=3, width=112, height=56)

    def test_center_position_factor(self) -> None:
        """Test that an off-center center moves by its share of the delta."""
        right = move_rectangle_corner(
            ResizeHandle.BOTTOM_RIGHT, 100, 50, 8, 0, *NO_ROTATION, center_pos_factor_x=0.25
        )
        left = move_rectangle_corner(
            ResizeHandle.TOP_LEFT, 100, 50, 8, 0, *NO_ROTATION, center_pos_factor_x=0.25
        )
        assert right.center_offset == Point(2, 0)
        assert left.center_offset == Point(6, 0)

    def test_edge_handle_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            move_rectangle_corner(ResizeHandle.RIGHT, 100, 50, 10, 6, *NO_ROTATION)


class TestMoveRectangleEdge:
    """Tests for dragging edges."""

    def test_right_edge_ignores_vertical_movement(self) -> None:
        result = move_rectangle_edge(ResizeHandle.RIGHT, 100, 50, 10, 6, *NO_ROTATION)
        assert result == ResizeResult(success=True, center_offset_x=5, center_offset_y=0, width=110, height=50)

    def test_left_edge(self) -> None:
        result = move_rectangle_edge(ResizeHandle.LEFT, 100, 50, 10, 0, *NO_ROTATION)
        assert result == ResizeResult(success=True, center_offset_x=5, center_offset_y=0, width=90, height=50)

    def test_top_edge(self) -> None:
        result = move_rectangle_edge(ResizeHandle.TOP, 100, 50, 0, -10, *NO_ROTATION)
        assert result == ResizeResult(success=True, center_offset_x=0, center_offset_y=-5, width=100, height=60)

    def test_maintain_aspect_follows_width(self) -> None:
        result = move_rectangle_edge(
            ResizeHandle.RIGHT, 100, 50, 20, 0, *NO_ROTATION, ResizeModifiers.MAINTAIN_ASPECT
        )
        assert (result.width, result.height) == (120, 60)

    def test_maintain_aspect_follows_height(self) -> None:
        result = move_rectangle_edge(
            ResizeHandle.BOTTOM, 100, 50, 0, 10, *NO_ROTATION, ResizeModifiers.MAINTAIN_ASPECT
        )
        assert (result.width, result.height) == (120, 60)
        assert result.center_offset == Point(0, 5)

    def test_corner_handle_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            move_rectangle_edge(ResizeHandle.TOP_LEFT, 100, 50, 10, 6, *NO_ROTATION)


class TestMoveArrowPoint:
    """Tests for dragging an end point of an arrow."""

    def test_drag_changes_angle_and_length(self) -> None:
        result = move_arrow_point(Point(50, 0), Point(100, 0), Point(0, 0), 0, 0.5, 0, 100)
        assert result == ArrowMove(unchanged=False, center_offset_x=0, center_offset_y=50, angle_tenths=450, width=141)

    def test_no_movement(self) -> None:
        result = move_arrow_point(Point(50, 0), Point(100, 0), Point(0, 0), 300, 0.5, 0, 0)
        assert result == ArrowMove(unchanged=True, center_offset_x=0, center_offset_y=0, angle_tenths=300, width=100)
