"""Geometry kernel of shapegeom.

This module contains the kernel functions for:

- Numeric model (tolerances, rounding, validity)
- Vector algebra and line construction
- Containment, intersection and distance queries
- Rotation, bounding rectangles and resize geometry

All functions are:
- Pure (no side effects, no shared state)
- Safe to call from several threads
- Generic over integer and floating point input; results follow the
  type of the input points

Key functions:
- distance_point_point: Euclidean distance between two points
- distance_point_line: Distance from a point to a line or segment
- intersect_lines: Intersection point of two infinite lines
- intersect_line_segments: Intersection point of two segments
- line_intersects_with_line: Test whether two segments meet
- rectangle_contains_point: Closed containment test for rotated rectangles
- polygon_contains_point: Ray-casting containment test
- arc_contains_point: Containment test for three-point arcs
- calc_circum_circle: Circle through three points
- rotate_point: Rotate a point around a center
- calc_bounding_rectangle: Bounding rectangle of (rotated) points
- move_rectangle_corner: Resize a rotated rectangle by one corner
"""

from shapegeom.core.bounds import (
    calc_bounding_rectangle,
    calc_bounding_rectangle_ellipse,
    calc_polygon_balance_point,
    rectangle_center,
    unite_rectangles,
)
from shapegeom.core.containment import (
    arc_contains_point,
    circle_contains_point,
    convex_polygon_contains_point,
    ellipse_contains_point,
    line_contains_point,
    polygon_contains_point,
    quadrangle_contains_point,
    rectangle_contains_point,
    triangle_contains_point,
)
from shapegeom.core.distance import (
    distance_point_line,
    distance_point_point,
    distance_point_point_fast,
    get_nearest_point,
)
from shapegeom.core.intersection import (
    arc_intersects_with_rectangle,
    circle_intersects_with_circle,
    circle_intersects_with_line,
    circle_intersects_with_rectangle,
    ellipse_intersects_with_line,
    line_segment_intersects_with_line_segment,
    polygon_intersects_with_rectangle,
    rectangle_intersects_with_line,
)
from shapegeom.core.intersection_points import (
    intersect_circle_with_line,
    intersect_circles,
    intersect_ellipse_line,
    intersect_rectangle_line,
)
from shapegeom.core.lines import (
    calc_circum_circle,
    calc_dropped_perpendicular_foot,
    intersect_line_segments,
    intersect_lines,
    line_intersects_with_line,
)
from shapegeom.core.normals import calc_normal_vector_of_circle, calc_normal_vector_of_rectangle
from shapegeom.core.numeric import equals, is_valid
from shapegeom.core.resize import move_arrow_point, move_rectangle_corner, move_rectangle_edge
from shapegeom.core.rotation import rotate_point, rotate_rectangle
from shapegeom.core.vectors import cross_product, dot_product

__all__ = [
    # Containment
    "arc_contains_point",
    # Intersection tests
    "arc_intersects_with_rectangle",
    # Bounds
    "calc_bounding_rectangle",
    "calc_bounding_rectangle_ellipse",
    # Lines
    "calc_circum_circle",
    "calc_dropped_perpendicular_foot",
    # Normals
    "calc_normal_vector_of_circle",
    "calc_normal_vector_of_rectangle",
    "calc_polygon_balance_point",
    "circle_contains_point",
    "circle_intersects_with_circle",
    "circle_intersects_with_line",
    "circle_intersects_with_rectangle",
    "convex_polygon_contains_point",
    # Vectors
    "cross_product",
    # Distance
    "distance_point_line",
    "distance_point_point",
    "distance_point_point_fast",
    "dot_product",
    "ellipse_contains_point",
    "ellipse_intersects_with_line",
    # Numeric model
    "equals",
    "get_nearest_point",
    # Intersection points
    "intersect_circle_with_line",
    "intersect_circles",
    "intersect_ellipse_line",
    "intersect_line_segments",
    "intersect_lines",
    "intersect_rectangle_line",
    "is_valid",
    "line_contains_point",
    "line_intersects_with_line",
    "line_segment_intersects_with_line_segment",
    # Resize
    "move_arrow_point",
    "move_rectangle_corner",
    "move_rectangle_edge",
    "polygon_contains_point",
    "polygon_intersects_with_rectangle",
    "quadrangle_contains_point",
    "rectangle_center",
    "rectangle_contains_point",
    "rectangle_intersects_with_line",
    # Rotation
    "rotate_point",
    "rotate_rectangle",
    "triangle_contains_point",
    "unite_rectangles",
]
