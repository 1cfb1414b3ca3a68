"""Vector algebra on points.

Points double as vectors here. Dot and cross products of integer points are
exact (Python integers do not overflow); floating points are computed in
double precision.
"""

from shapegeom.core.numeric import equals
from shapegeom.domain.primitives import Point, PointF, PointT, make_point


def dot_product(a: Point | PointF, b: Point | PointF) -> float:
    """Dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def dot_product3(a: Point | PointF, b: Point | PointF, c: Point | PointF) -> float:
    """Dot product of the vectors AB and BC.

    Positive when the path A -> B -> C keeps going forward at B.

    Examples:
        >>> dot_product3(Point(0, 0), Point(2, 0), Point(4, 1))
        4
    """
    return (b.x - a.x) * (c.x - b.x) + (b.y - a.y) * (c.y - b.y)


def dot_product4(
    a: Point | PointF, b: Point | PointF, c: Point | PointF, d: Point | PointF
) -> float:
    """Dot product of the vectors AB and CD."""
    return (b.x - a.x) * (d.x - c.x) + (b.y - a.y) * (d.y - c.y)


def cross_product(a: Point | PointF, b: Point | PointF) -> float:
    """Scalar (z) component of the cross product of two vectors."""
    return a.x * b.y - a.y * b.x


def cross_product3(a: Point | PointF, b: Point | PointF, c: Point | PointF) -> float:
    """Cross product of the vectors AB and AC.

    The value is twice the signed area of the triangle ABC. Its sign tells
    on which side of the line AB the point C lies.

    Examples:
        >>> cross_product3(Point(0, 0), Point(4, 0), Point(0, 3))
        12
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def linear_interpolation(a: PointT, b: PointT, t: float) -> PointT:
    """Interpolate between two points.

    Args:
        a: Start point (t = 0)
        b: End point (t = 1)
        t: Interpolation parameter, not clamped

    Returns:
        Point of the same type as ``a``. Integer points add the rounded
        offset to ``a``.
    """
    dx = (b.x - a.x) * t
    dy = (b.y - a.y) * t
    if isinstance(a, Point):
        return Point(a.x + round(dx), a.y + round(dy))
    return PointF(a.x + dx, a.y + dy)


def midpoint(a: PointT, b: PointT) -> PointT:
    return linear_interpolation(a, b, 0.5)


def solve_linear_2x2(
    a11: float,
    a12: float,
    a21: float,
    a22: float,
    b1: float,
    b2: float,
) -> tuple[float, float] | None:
    """Solve the system ``A @ (x, y) + b = 0`` for a 2x2 matrix A.

    Args:
        a11: Row 1, column 1
        a12: Row 1, column 2
        a21: Row 2, column 1
        a22: Row 2, column 2
        b1: Constant of row 1
        b2: Constant of row 2

    Returns:
        The solution (x, y), or None when the determinant is (close to) zero

    Examples:
        >>> solve_linear_2x2(1, 0, 0, 1, -3, -4)
        (3.0, 4.0)
    """
    det = a11 * a22 - a12 * a21
    if equals(det, 0):
        return None
    x = (b2 * a12 - b1 * a22) / det
    y = (b1 * a21 - b2 * a11) / det
    return (x, y)


BEZIER_STEPS = 200


def bezier_point(a: PointT, b: PointT, c: PointT, d: PointT, step: float) -> PointT:
    """Evaluate a cubic Bezier curve sampled in ``BEZIER_STEPS`` steps.

    Args:
        a: End point reached at step 200
        b: Control point next to ``a``
        c: Control point next to ``d``
        d: End point at step 0
        step: Position along the curve, 0 to 200

    Returns:
        Point on the curve, of the same type as ``a``
    """
    s = step / BEZIER_STEPS
    t = 1.0 - s
    wa = s**3
    wb = 3.0 * s * s * t
    wc = 3.0 * s * t * t
    wd = t**3
    x = a.x * wa + b.x * wb + c.x * wc + d.x * wd
    y = a.y * wa + b.y * wb + c.y * wc + d.y * wd
    return make_point(type(a), x, y)
