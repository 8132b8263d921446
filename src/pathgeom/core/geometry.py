"""Geometric predicates for triangulation and export.

This module provides the small numeric helpers shared by the triangulator
and the exporter:
- Signed area calculation (shoelace formula)
- Orientation test (2D cross product sign)
- Point-in-triangle testing via three edge-sign tests

All functions are pure and stateless.
"""

from collections.abc import Iterable, Sequence

from pathgeom.domain import Point, Triangle


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def orientation(a: Point, b: Point, c: Point) -> float:
    """Twice the signed area of triangle (a, b, c).

    Positive when c lies to the left of the directed line a->b (the corner
    turns counter-clockwise), negative when it lies to the right and zero
    when the three points are collinear.

    Examples:
        >>> orientation(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0))
        1.0
    """
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def triangle_signed_area(a: Point, b: Point, c: Point) -> float:
    """Signed area of triangle (a, b, c), positive when counter-clockwise."""
    return orientation(a, b, c) / 2.0


def is_convex_corner(prev: Point, corner: Point, next_: Point, epsilon: float = 0.0) -> bool:
    """Check whether a boundary corner turns counter-clockwise.

    Reflex and collinear corners are not convex.

    Args:
        prev: Previous boundary vertex
        corner: The corner vertex
        next_: Next boundary vertex
        epsilon: Twice-area the corner must exceed

    Returns:
        True if the corner is strictly convex
    """
    return orientation(prev, corner, next_) > epsilon


def point_in_triangle(point: Point, a: Point, b: Point, c: Point) -> bool:
    """Determine if a point lies inside or on the boundary of a triangle.

    The point is tested against each triangle edge with the same cross
    product used by the orientation test. It is inside when no two edge
    signs disagree. A point whose three edge signs are all zero only occurs
    for a zero-area triangle and is reported as outside.

    Args:
        point: The point to test
        a: First triangle corner
        b: Second triangle corner
        c: Third triangle corner

    Returns:
        True if the point is inside or on an edge of the triangle

    Examples:
        >>> tri = (Point(0.0, 0.0), Point(2.0, 0.0), Point(0.0, 2.0))
        >>> point_in_triangle(Point(0.5, 0.5), *tri)
        True
        >>> point_in_triangle(Point(2.0, 2.0), *tri)
        False
    """
    d1 = orientation(a, b, point)
    d2 = orientation(b, c, point)
    d3 = orientation(c, a, point)

    if d1 == 0.0 and d2 == 0.0 and d3 == 0.0:
        return False

    has_neg = d1 < 0.0 or d2 < 0.0 or d3 < 0.0
    has_pos = d1 > 0.0 or d2 > 0.0 or d3 > 0.0

    return not (has_neg and has_pos)


def triangles_area(vertices: Sequence[Point], triangles: Iterable[Triangle]) -> float:
    """Sum the signed areas of indexed triangles.

    Args:
        vertices: Vertex array the triangles index into
        triangles: Triangles to measure

    Returns:
        Total signed area, equal to the polygon area for a valid triangulation
    """
    return sum(
        triangle_signed_area(vertices[t.a], vertices[t.b], vertices[t.c]) for t in triangles
    )
