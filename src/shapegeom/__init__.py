"""ShapeGeom - 2D geometry kernel for diagram editors.

ShapeGeom is a library of pure functions over points, rectangles, lines,
circles, ellipses, arcs and polygons. Diagram tools use it for hit-testing,
connector routing, rotation and resizing of shapes.

Example:
    >>> from shapegeom.core import distance_point_point, rectangle_contains_point
    >>> from shapegeom.domain import Point, Rectangle
    >>> distance_point_point(Point(0, 0), Point(3, 4))
    5.0
    >>> rectangle_contains_point(Rectangle(0, 0, 10, 10), Point(10, 10))
    True

A small command-line front end is installed as ``shapegeom``.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
