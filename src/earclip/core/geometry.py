"""Geometric primitives for ear clipping.

This module provides the core mathematical utilities for:
- Signed area calculation (shoelace formula)
- Winding value (turn direction) at a vertex
- Signed triangle area
- Point-in-triangle testing (sign-consistent barycentric test)

All functions are pure, stateless, and designed for use in parallel processing.
"""

from collections.abc import Sequence

from earclip.domain import Point


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


def winding_value(a: Point, b: Point, c: Point) -> float:
    """Cross product of the edges meeting at b, (b - a) x (c - b).

    Positive when the path a -> b -> c turns left, negative when it turns
    right and zero when the three points are collinear.

    Args:
        a: Previous vertex
        b: Vertex being measured
        c: Next vertex

    Returns:
        Signed cross product

    Examples:
        >>> winding_value(Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0))
        1.0
    """
    return (b.x - a.x) * (c.y - b.y) - (c.x - b.x) * (b.y - a.y)


def triangle_signed_area(a: Point, b: Point, c: Point) -> float:
    """Signed area of triangle abc (positive when counter-clockwise)."""
    return 0.5 * (-b.y * c.x + a.y * (-b.x + c.x) + a.x * (b.y - c.y) + b.x * c.y)


def triangle_contains(a: Point, b: Point, c: Point, point: Point) -> bool:
    """Determine if a point lies inside triangle abc.

    Uses barycentric coordinates scaled by the sign of the triangle area so
    the test works for both windings. Points on the triangle's edges count
    as inside. A point equal to one of the corners never does.

    Args:
        a: First triangle corner
        b: Second triangle corner
        c: Third triangle corner
        point: The point to test

    Returns:
        True if point is inside or on the boundary of the triangle

    Examples:
        >>> a, b, c = Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 4.0)
        >>> triangle_contains(a, b, c, Point(1.0, 1.0))
        True
        >>> triangle_contains(a, b, c, Point(4.0, 0.0))  # Corner
        False
    """
    if point in (a, b, c):
        return False

    area = triangle_signed_area(a, b, c)
    sign = -1.0 if area < 0.0 else 1.0

    s = (a.y * c.x - a.x * c.y + (c.y - a.y) * point.x + (a.x - c.x) * point.y) * sign
    t = (a.x * b.y - a.y * b.x + (a.y - b.y) * point.x + (b.x - a.x) * point.y) * sign

    return s >= 0.0 and t >= 0.0 and (s + t) <= 2.0 * area * sign
