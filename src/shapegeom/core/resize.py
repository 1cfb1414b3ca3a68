"""Resize geometry for rotated rectangles.

A resize starts with a raw mouse delta in screen coordinates. The delta is
rotated into the shape's own frame (``transform_mouse_movement``), then one
of the ``move_rectangle_*`` functions turns it into a new width and height
plus the offset the caller has to apply to the shape's center so that the
opposite edge stays in place.

Resizing is controlled by ``ResizeModifiers``:
- Without MIRRORED_RESIZE only the dragged edge moves; the center moves by
  a share of the delta.
- With MIRRORED_RESIZE both opposing edges move; the center stays put.
- With MAINTAIN_ASPECT the delta is corrected first so that the result
  keeps the original width/height ratio.
"""

import logging
import math

from shapegeom.core.distance import distance_point_point
from shapegeom.core.rotation import (
    angle,
    degrees_to_tenths_of_degree,
    radians_to_degrees,
    tenths_of_degree_to_radians,
)
from shapegeom.core.vectors import linear_interpolation
from shapegeom.domain.primitives import Point
from shapegeom.domain.resize import ArrowMove, ResizeHandle, ResizeModifiers, ResizeResult
from shapegeom.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_CENTER_POS_FACTOR = 0.5
DEFAULT_DIV_FACTOR = 2

# Grow direction of width and height per handle (0: extent is not dragged)
_HANDLE_DIRECTIONS: dict[ResizeHandle, tuple[int, int]] = {
    ResizeHandle.TOP_LEFT: (-1, -1),
    ResizeHandle.TOP: (0, -1),
    ResizeHandle.TOP_RIGHT: (1, -1),
    ResizeHandle.RIGHT: (1, 0),
    ResizeHandle.BOTTOM_RIGHT: (1, 1),
    ResizeHandle.BOTTOM: (0, 1),
    ResizeHandle.BOTTOM_LEFT: (-1, 1),
    ResizeHandle.LEFT: (-1, 0),
}


def transform_mouse_movement(
    delta_x: int, delta_y: int, angle_tenths: int
) -> tuple[float, float, float, float]:
    """Rotate a mouse movement into the frame of a shape rotated by ``angle_tenths``.

    Returns:
        Tuple of (delta_x, delta_y, sin, cos). The sine and cosine of the
        shape's angle are returned so that callers can pass them on to the
        ``move_rectangle_*`` functions.

    Examples:
        >>> dx, dy, sin, cos = transform_mouse_movement(10, 0, 900)
        >>> round(dx, 6), round(dy, 6)
        (0.0, -10.0)
    """
    radians = tenths_of_degree_to_radians(angle_tenths)
    cos = math.cos(radians)
    sin = math.sin(radians)
    return (delta_x * cos + delta_y * sin, delta_y * cos - delta_x * sin, sin, cos)


def align_movement(
    modifiers: ResizeModifiers,
    div_factor_x: int,
    div_factor_y: int,
    delta_x: float,
    delta_y: float,
) -> tuple[bool, float, float]:
    """Snap a movement to multiples of the given divisors.

    Keeps the shape's center on whole pixels when only one edge moves.
    Mirrored resizes move both edges and are never snapped.

    Returns:
        Tuple of (aligned, delta_x, delta_y). ``aligned`` is False if a delta
        had a remainder that was cut off; the truncated deltas are returned
        either way.

    Examples:
        >>> align_movement(ResizeModifiers.NONE, 2, 2, 5.0, 4.0)
        (False, 4.0, 4.0)
    """
    if ResizeModifiers.MIRRORED_RESIZE in modifiers:
        return True, delta_x, delta_y
    aligned = True
    remainder = math.fmod(delta_x, div_factor_x)
    if remainder != 0:
        delta_x -= remainder
        aligned = False
    remainder = math.fmod(delta_y, div_factor_y)
    if remainder != 0:
        delta_y -= remainder
        aligned = False
    return aligned, delta_x, delta_y


def _aspect_ratio(width: float, height: float) -> float:
    if width == 0:
        raise InvalidArgumentError("width", "must not be zero when maintaining the aspect ratio")
    if height == 0:
        raise InvalidArgumentError("height", "must not be zero when maintaining the aspect ratio")
    return width / height


def maintain_aspect_ratio(
    width: float,
    height: float,
    grow_direction_x: int,
    grow_direction_y: int,
    delta_x: float,
    delta_y: float,
) -> tuple[bool, float, float]:
    """Correct a corner movement so that the rectangle keeps its aspect ratio.

    Two candidate rectangles are built, one driven by the horizontal delta
    and one by the vertical delta. The smaller one wins and the other delta
    is recomputed from it.

    Args:
        width: Current width
        height: Current height
        grow_direction_x: 1 if a positive delta_x grows the width, -1 otherwise
        grow_direction_y: 1 if a positive delta_y grows the height, -1 otherwise
        delta_x: Horizontal movement in the shape's frame
        delta_y: Vertical movement in the shape's frame

    Returns:
        Tuple of (unchanged, delta_x, delta_y). ``unchanged`` is False when a
        delta had to be corrected. If neither candidate encloses the other
        the deltas are returned as they are and ``unchanged`` is False.

    Raises:
        InvalidArgumentError: On a zero width or height, or a grow direction
            other than 1 or -1
    """
    ratio = _aspect_ratio(width, height)
    for name, direction in (("grow_direction_x", grow_direction_x), ("grow_direction_y", grow_direction_y)):
        if direction not in (1, -1):
            raise InvalidArgumentError(name, f"has to be 1 or -1, got {direction}")

    width_from_x = round(width + delta_x * grow_direction_x)
    height_from_x = round(width_from_x / ratio)
    height_from_y = round(height + delta_y * grow_direction_y)
    width_from_y = round(height_from_y * ratio)

    if width_from_x <= width_from_y and height_from_x <= height_from_y:
        new_delta_y = (width_from_x / ratio - height) * grow_direction_y
        return delta_y == new_delta_y, delta_x, new_delta_y
    if width_from_y <= width_from_x and height_from_y <= height_from_x:
        new_delta_x = (height_from_y * ratio - width) * grow_direction_x
        return delta_x == new_delta_x, new_delta_x, delta_y
    logger.debug(
        "Aspect ratio undefined for %sx%s moved by (%s, %s), keeping deltas",
        width, height, delta_x, delta_y
    )
    return False, delta_x, delta_y


def get_min_values(width: int, height: int, modifiers: ResizeModifiers) -> tuple[int, int]:
    """Minimum (width, height) a rectangle may shrink to.

    Without MAINTAIN_ASPECT a rectangle may collapse to zero. With it, the
    height stays at least 1 and the width keeps the matching ratio.
    """
    if ResizeModifiers.MAINTAIN_ASPECT in modifiers:
        ratio = _aspect_ratio(width, height)
        return round(ratio), 1
    return 0, 0


def _resize_extent(
    extent: int, delta: float, grow: int, minimum: int, mirrored: bool
) -> tuple[bool, int, float]:
    """Apply a delta to one extent, clamping at ``minimum``.

    Returns (ok, new_extent, delta). When clamped, the delta is reduced to
    the movement that actually happened.
    """
    change = delta + delta if mirrored else delta
    if extent + grow * change >= minimum:
        return True, extent + grow * round(change), delta
    if not mirrored:
        delta = grow * (minimum - extent)
    return False, minimum, delta


def _move_rectangle(
    handle: ResizeHandle,
    width: int,
    height: int,
    delta_x: float,
    delta_y: float,
    cos_angle: float,
    sin_angle: float,
    modifiers: ResizeModifiers,
    min_width: int | None,
    min_height: int | None,
    center_pos_factor_x: float,
    center_pos_factor_y: float,
    div_factor_x: int,
    div_factor_y: int,
) -> ResizeResult:
    grow_x, grow_y = _HANDLE_DIRECTIONS[handle]
    maintain_aspect = ResizeModifiers.MAINTAIN_ASPECT in modifiers
    mirrored = ResizeModifiers.MIRRORED_RESIZE in modifiers
    if min_width is None or min_height is None:
        default_width, default_height = get_min_values(width, height, modifiers)
        min_width = default_width if min_width is None else min_width
        min_height = default_height if min_height is None else min_height

    success = True
    if maintain_aspect and handle.is_corner:
        success, delta_x, delta_y = maintain_aspect_ratio(width, height, grow_x, grow_y, delta_x, delta_y)
    _, delta_x, delta_y = align_movement(modifiers, div_factor_x, div_factor_y, delta_x, delta_y)

    new_width = width
    new_height = height
    if grow_x:
        ok, new_width, delta_x = _resize_extent(width, delta_x, grow_x, min_width, mirrored)
        success = success and ok
    if grow_y:
        ok, new_height, delta_y = _resize_extent(height, delta_y, grow_y, min_height, mirrored)
        success = success and ok

    offset_x = offset_y = 0
    if not mirrored:
        # The center sits at factor * extent from the top-left corner
        factor_x = center_pos_factor_x if grow_x > 0 else 1 - center_pos_factor_x
        factor_y = center_pos_factor_y if grow_y > 0 else 1 - center_pos_factor_y
        move_x = delta_x * factor_x if grow_x else 0.0
        move_y = delta_y * factor_y if grow_y else 0.0
        offset_x = round(move_x * cos_angle - move_y * sin_angle)
        offset_y = round(move_x * sin_angle + move_y * cos_angle)

    if maintain_aspect and not handle.is_corner:
        ratio = _aspect_ratio(width, height)
        if grow_x:
            new_height = round(new_width / ratio)
        else:
            new_width = round(new_height * ratio)

    return ResizeResult(
        success=success,
        center_offset_x=offset_x,
        center_offset_y=offset_y,
        width=new_width,
        height=new_height,
    )


def move_rectangle_corner(
    handle: ResizeHandle,
    width: int,
    height: int,
    delta_x: float,
    delta_y: float,
    cos_angle: float,
    sin_angle: float,
    modifiers: ResizeModifiers = ResizeModifiers.NONE,
    *,
    min_width: int | None = None,
    min_height: int | None = None,
    center_pos_factor_x: float = DEFAULT_CENTER_POS_FACTOR,
    center_pos_factor_y: float = DEFAULT_CENTER_POS_FACTOR,
    div_factor_x: int = DEFAULT_DIV_FACTOR,
    div_factor_y: int = DEFAULT_DIV_FACTOR,
) -> ResizeResult:
    """Drag one corner of a (possibly rotated) rectangle.

    Args:
        handle: The dragged corner
        width: Current width
        height: Current height
        delta_x: Horizontal movement in the shape's frame
        delta_y: Vertical movement in the shape's frame
        cos_angle: Cosine of the shape's rotation
        sin_angle: Sine of the shape's rotation
        modifiers: Aspect ratio and mirroring flags
        min_width: Smallest allowed width (default from ``get_min_values``)
        min_height: Smallest allowed height (default from ``get_min_values``)
        center_pos_factor_x: Relative horizontal position of the center
        center_pos_factor_y: Relative vertical position of the center
        div_factor_x: Horizontal movements are snapped to multiples of this
        div_factor_y: Vertical movements are snapped to multiples of this

    Returns:
        New dimensions and the offset to apply to the shape's center.
        ``success`` is False if the delta was corrected for the aspect ratio
        or clamped to the minimum size.

    Raises:
        InvalidArgumentError: If ``handle`` is an edge

    Examples:
        >>> move_rectangle_corner(ResizeHandle.BOTTOM_RIGHT, 100, 50, 10, 6, 1.0, 0.0)
        ResizeResult(success=True, center_offset_x=5, center_offset_y=3, width=110, height=56)
    """
    if not handle.is_corner:
        raise InvalidArgumentError("handle", f"{handle.value} is not a corner")
    return _move_rectangle(
        handle, width, height, delta_x, delta_y, cos_angle, sin_angle, modifiers,
        min_width, min_height, center_pos_factor_x, center_pos_factor_y, div_factor_x, div_factor_y,
    )


def move_rectangle_edge(
    handle: ResizeHandle,
    width: int,
    height: int,
    delta_x: float,
    delta_y: float,
    cos_angle: float,
    sin_angle: float,
    modifiers: ResizeModifiers = ResizeModifiers.NONE,
    *,
    min_width: int | None = None,
    min_height: int | None = None,
    center_pos_factor_x: float = DEFAULT_CENTER_POS_FACTOR,
    center_pos_factor_y: float = DEFAULT_CENTER_POS_FACTOR,
    div_factor_x: int = DEFAULT_DIV_FACTOR,
    div_factor_y: int = DEFAULT_DIV_FACTOR,
) -> ResizeResult:
    """Drag one edge of a (possibly rotated) rectangle.

    Only the delta across the edge is used. With MAINTAIN_ASPECT the other
    extent follows the dragged one.

    Arguments and result are those of ``move_rectangle_corner``.

    Raises:
        InvalidArgumentError: If ``handle`` is a corner
    """
    if handle.is_corner:
        raise InvalidArgumentError("handle", f"{handle.value} is not an edge")
    return _move_rectangle(
        handle, width, height, delta_x, delta_y, cos_angle, sin_angle, modifiers,
        min_width, min_height, center_pos_factor_x, center_pos_factor_y, div_factor_x, div_factor_y,
    )


def move_arrow_point(
    center: Point,
    moved_point: Point,
    fixed_point: Point,
    angle_tenths: int,
    center_pos_factor_x: float,
    delta_x: int,
    delta_y: int,
) -> ArrowMove:
    """Drag one end point of an arrow-like shape while the other end stays fixed.

    The shape is described by its center, rotation and width (its length).
    Moving an end point changes all three.

    Args:
        center: Current center of the shape
        moved_point: Current position of the dragged end point
        fixed_point: Position of the end point that stays in place
        angle_tenths: Current rotation in tenths of a degree
        center_pos_factor_x: Relative position of the center between the
            fixed (0) and the moved (1) end point
        delta_x: Horizontal mouse movement
        delta_y: Vertical mouse movement
    """
    new_point = moved_point.offset(delta_x, delta_y)

    new_center = linear_interpolation(fixed_point.to_pointf(), new_point.to_pointf(), center_pos_factor_x)
    offset_x = round(new_center.x - center.x)
    offset_y = round(new_center.y - center.y)

    new_angle = (360 + radians_to_degrees(angle(fixed_point, new_point))) % 360
    old_angle = (360 + radians_to_degrees(angle(fixed_point, moved_point))) % 360

    return ArrowMove(
        unchanged=new_point == moved_point,
        center_offset_x=offset_x,
        center_offset_y=offset_y,
        angle_tenths=angle_tenths + degrees_to_tenths_of_degree(new_angle - old_angle),
        width=round(distance_point_point(fixed_point, new_point)),
    )
