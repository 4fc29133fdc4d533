"""Ear clipping triangulation.

Triangulates a simple counter-clockwise polygon in O(n^2) time. Vertices are
kept in a circular doubly-linked list stored as an index arena: slot ``i``
holds the input point ``i`` and its ``prev`` / ``next`` neighbours are slot
indices, so unlinking a vertex is two assignments.
"""

from collections.abc import Sequence

from polytri.core.geometry import is_inside_triangle, is_reflex, signed_area
from polytri.domain import Point
from polytri.exceptions import StuckTriangulationError, TooFewVerticesError


class VertexRing:
    """Circular doubly-linked list of polygon vertices addressed by index."""

    def __init__(self, points: Sequence[Point]) -> None:
        n = len(points)
        self.points = list(points)
        self.prev = [(i - 1) % n for i in range(n)]
        self.next = [(i + 1) % n for i in range(n)]
        self.size = n

    def remove(self, i: int) -> None:
        """Unlink slot ``i`` from its neighbours."""
        p, n = self.prev[i], self.next[i]
        self.next[p] = n
        self.prev[n] = p
        self.size -= 1

    def is_reflex_at(self, i: int) -> bool:
        """Check if the remaining polygon has a reflex angle at slot ``i``."""
        return is_reflex(self.points[self.prev[i]], self.points[i], self.points[self.next[i]])

    def is_ear(self, i: int) -> bool:
        """Check if slot ``i`` is an ear of the remaining polygon.

        A convex vertex is an ear unless some reflex vertex lies inside the
        triangle formed with its neighbours.
        """
        pts = self.points
        a, b, c = pts[self.prev[i]], pts[i], pts[self.next[i]]
        if is_reflex(a, b, c):
            return False

        stop = self.prev[i]
        r = self.next[self.next[i]]
        while r != stop:
            if is_inside_triangle(a, b, c, pts[r]) and self.is_reflex_at(r):
                return False
            r = self.next[r]
        return True


class EarClipper:
    """Triangulates simple polygons by repeatedly clipping ears.

    Example:
        clipper = EarClipper()
        coords = clipper.triangulate([Point(0, 0), Point(3, 0), Point(4, 4)])
        # [4.0, 4.0, 0.0, 0.0, 3.0, 0.0]
    """

    def triangulate(self, points: Sequence[Point]) -> list[float]:
        """Triangulate a counter-clockwise simple polygon.

        Degenerate ears (zero or negative area, produced by collinear or
        repeated points) are clipped without being emitted, so the result may
        hold fewer than ``n - 2`` triangles.

        Args:
            points: Polygon boundary, counter-clockwise, without a closing
                duplicate of the first point

        Returns:
            Flat list of triangle coordinates, six floats per triangle

        Raises:
            TooFewVerticesError: If fewer than three points are given
            StuckTriangulationError: If a full pass finds no ear, which
                happens for self-intersecting input
        """
        n = len(points)
        if n < 3:
            raise TooFewVerticesError(n)

        ring = VertexRing(points)
        pts = ring.points
        triangles: list[float] = []

        ear = 0
        stop = ear

        while ring.prev[ear] != ring.next[ear]:
            prev = ring.prev[ear]
            next_ = ring.next[ear]

            if ring.is_ear(ear):
                a, b, c = pts[prev], pts[ear], pts[next_]
                if signed_area([a, b, c]) > 0:
                    triangles.extend((a.x, a.y, b.x, b.y, c.x, c.y))

                ring.remove(ear)
                ear = next_
                stop = ear
                continue

            ear = next_

            if ear == stop:
                raise StuckTriangulationError(ring.size)

        return triangles


def triangulate(points: Sequence[Point]) -> list[float]:
    """Triangulate a simple polygon (see EarClipper.triangulate)."""
    return EarClipper().triangulate(points)
