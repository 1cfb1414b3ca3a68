"""Parsing of command-line geometry arguments."""

from shapegeom.core.numeric import fits_int32, is_valid_coordinate
from shapegeom.domain import Point, PointF
from shapegeom.exceptions import PointParseError


def _parse_coordinate(text: str, part: str) -> int | float:
    try:
        return int(part)
    except ValueError:
        pass
    try:
        return float(part)
    except ValueError:
        raise PointParseError(text, f"'{part.strip()}' is not a number") from None


def parse_point(text: str) -> Point | PointF:
    """Parse ``"x,y"`` into a point.

    Two integer literals give a ``Point``; any decimal gives a ``PointF``.

    Raises:
        PointParseError: If the text is not two valid coordinates

    Examples:
        >>> parse_point("3,4")
        Point(x=3, y=4)
        >>> parse_point("1.5, 2")
        PointF(x=1.5, y=2.0)
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise PointParseError(text, "expected two comma-separated coordinates")
    x, y = (_parse_coordinate(text, part) for part in parts)
    for value in (x, y):
        if not is_valid_coordinate(value):
            raise PointParseError(text, f"{value} is not a valid coordinate")
    if isinstance(x, int) and isinstance(y, int):
        if not (fits_int32(x) and fits_int32(y)):
            raise PointParseError(text, "coordinates exceed the 32-bit range")
        return Point(x, y)
    return PointF(float(x), float(y))


def parse_points(*texts: str) -> list[Point | PointF]:
    """Parse several points, promoting all of them to ``PointF`` if one is fractional."""
    points = [parse_point(text) for text in texts]
    if any(isinstance(p, PointF) for p in points):
        return [PointF(float(p.x), float(p.y)) for p in points]
    return points
