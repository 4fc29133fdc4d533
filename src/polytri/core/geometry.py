"""Geometric predicates for hole joining and ear clipping.

This module provides the small set of primitives both algorithms are built on:
- Cyclic index arithmetic
- Reflex angle test (sign of the 2D cross product)
- Point-in-triangle test with inclusive edges
- Signed area (shoelace formula) and triangle-list area checks

All functions are pure, stateless, and designed for use in parallel processing.
"""

from collections.abc import Sequence

from polytri.domain import Point


def cyclic(i: int, n: int) -> int:
    """Wrap index ``i`` into ``[0, n)``, including negative values."""
    return (i % n + n) % n


def is_reflex(a: Point, b: Point, c: Point) -> bool:
    """Check if the angle at ``b`` along ``a -> b -> c`` is reflex.

    An angle of exactly pi is considered convex, so collinear vertices can
    still be clipped as (zero-area) ears.

    Args:
        a: Previous vertex
        b: Vertex whose angle is tested
        c: Next vertex

    Returns:
        True if the path turns clockwise at ``b``

    Examples:
        >>> is_reflex(Point(0, 1), Point(1, 0), Point(2, 1))
        False
        >>> is_reflex(Point(0, 0), Point(0, 3), Point(2, 3))
        True
    """
    return (b.x - a.x) * (c.y - b.y) - (c.x - b.x) * (b.y - a.y) < 0


def is_inside_triangle(a: Point, b: Point, c: Point, p: Point) -> bool:
    """Check if ``p`` lies inside the counter-clockwise triangle ``[a, b, c]``.

    Points on the edges count as inside.

    Args:
        a: First triangle vertex
        b: Second triangle vertex
        c: Third triangle vertex
        p: Point to test

    Returns:
        True if ``p`` is inside or on the boundary of the triangle
    """
    return (
        (c.x - p.x) * (a.y - p.y) - (a.x - p.x) * (c.y - p.y) >= 0
        and (a.x - p.x) * (b.y - p.y) - (b.x - p.x) * (a.y - p.y) >= 0
        and (b.x - p.x) * (c.y - p.y) - (c.x - p.x) * (b.y - p.y) >= 0
    )


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area, positive for counter-clockwise rings. Returns 0.0 for
        fewer than three points.

    Examples:
        >>> signed_area([Point(2, 2), Point(11, 2), Point(9, 7), Point(4, 10)])
        45.5
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


def triangles_area(coords: Sequence[float]) -> float:
    """Sum the signed areas of a flat triangle list.

    Args:
        coords: Six floats per triangle, (x, y) for each vertex

    Returns:
        Total signed area
    """
    total = 0.0
    for i in range(0, len(coords) - 5, 6):
        ax, ay, bx, by, cx, cy = coords[i : i + 6]
        total += ((bx - ax) * (cy - ay) - (cx - ax) * (by - ay)) / 2.0
    return total


def deviation(
    outer: Sequence[Point],
    holes: Sequence[Sequence[Point]],
    coords: Sequence[float],
) -> tuple[float, float, float]:
    """Compare the polygon area with the area covered by its triangles.

    Args:
        outer: Outer boundary
        holes: Hole boundaries
        coords: Flat triangle list produced for the polygon

    Returns:
        Tuple of (expected_area, triangulated_area, relative_deviation). The
        deviation is absolute when the expected area is zero.
    """
    expected = abs(signed_area(outer)) - sum(abs(signed_area(h)) for h in holes)
    actual = triangles_area(coords)

    if expected == 0:
        return expected, actual, abs(actual)

    return expected, actual, abs((expected - actual) / expected)
