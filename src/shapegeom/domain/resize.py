"""Types used by the resize geometry of rotated rectangles.

- ResizeModifiers: flags controlling aspect ratio and mirroring
- ResizeHandle: which corner or edge of a rectangle is dragged
- ResizeResult: new dimensions plus the compensating center offset
- ArrowMove: result of dragging one end point of an arrow
"""

from dataclasses import dataclass
from enum import Enum, Flag, auto

from shapegeom.domain.primitives import Point


class ResizeModifiers(Flag):
    """Modifiers applied while resizing a shape.

    - MAINTAIN_ASPECT: keep the width/height ratio of the shape
    - MIRRORED_RESIZE: apply the movement to both opposing edges so that
      the center stays in place
    """

    NONE = 0
    MAINTAIN_ASPECT = auto()
    MIRRORED_RESIZE = auto()


class ResizeHandle(Enum):
    """Grab handle of a rectangle being resized."""

    TOP_LEFT = "top-left"
    TOP = "top"
    TOP_RIGHT = "top-right"
    RIGHT = "right"
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM = "bottom"
    BOTTOM_LEFT = "bottom-left"
    LEFT = "left"

    @property
    def is_corner(self) -> bool:
        return "-" in self.value


@dataclass(frozen=True, slots=True)
class ResizeResult:
    """Outcome of moving a corner or an edge of a rectangle.

    Attributes:
        success: False when the movement was corrected for the aspect ratio
            or clamped to the minimum size
        center_offset_x: Horizontal offset to apply to the shape's center
        center_offset_y: Vertical offset to apply to the shape's center
        width: New width
        height: New height
    """

    success: bool
    center_offset_x: int
    center_offset_y: int
    width: int
    height: int

    @property
    def center_offset(self) -> Point:
        return Point(self.center_offset_x, self.center_offset_y)


@dataclass(frozen=True, slots=True)
class ArrowMove:
    """Outcome of dragging one end point of an arrow-like shape.

    Attributes:
        unchanged: True when the drag did not move the point
        center_offset_x: Horizontal offset to apply to the shape's center
        center_offset_y: Vertical offset to apply to the shape's center
        angle_tenths: New rotation angle in tenths of a degree
        width: New length of the arrow
    """

    unchanged: bool
    center_offset_x: int
    center_offset_y: int
    angle_tenths: int
    width: int
