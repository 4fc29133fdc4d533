"""Hole elimination by bridge splicing.

This module provides the HoleJoiner class which turns an outer boundary and
its holes into a single simple boundary. Each hole is connected to the
boundary built so far with a zero-width bridge that is traversed twice.
"""

import math
from collections.abc import Sequence

from polytri.core.geometry import cyclic
from polytri.core.visibility import VisibilityResolver
from polytri.domain import Point
from polytri.exceptions import EmptyInputError


def max_x(points: Sequence[Point]) -> float:
    """Largest X coordinate of a ring."""
    return max((p.x for p in points), default=-math.inf)


def sort_holes_by_max_x(holes: Sequence[Sequence[Point]]) -> list[Sequence[Point]]:
    """Order holes by ascending rightmost extent.

    The sort is stable, so holes with equal max X keep their input order.
    Bridges are cast to the right, which means a hole joined later can only
    hit bridges of holes lying further left.
    """
    keys = [max_x(h) for h in holes]
    order = sorted(range(len(holes)), key=lambda i: keys[i])
    return [holes[i] for i in order]


def splice_hole(
    outer: Sequence[Point],
    hole: Sequence[Point],
    m_index: int,
    visible_index: int,
) -> list[Point]:
    """Insert ``hole`` into ``outer`` through the bridge ``[V, M]``.

    The result walks the outer boundary up to ``V``, goes around the whole
    hole starting and ending at ``M``, then returns to ``V`` and continues
    along the outer boundary.

    Args:
        outer: Boundary receiving the hole
        hole: Hole boundary
        m_index: Index of the bridge vertex in the hole
        visible_index: Index of the bridge vertex in the outer boundary

    Returns:
        New boundary with ``len(outer) + len(hole) + 2`` points
    """
    n = len(hole)
    result: list[Point] = list(outer[: visible_index + 1])
    result.extend(hole[cyclic(m_index + i, n)] for i in range(n))
    result.append(hole[m_index])
    result.append(outer[visible_index])
    result.extend(outer[visible_index + 1 :])
    return result


class HoleJoiner:
    """Removes holes by joining them with the outer boundary.

    Example:
        joiner = HoleJoiner()
        boundary = joiner.join([outer, hole_a, hole_b])
    """

    def __init__(self, resolver: VisibilityResolver | None = None) -> None:
        """Initialize the joiner.

        Args:
            resolver: Visibility search to use (default: VisibilityResolver())
        """
        self.resolver = resolver or VisibilityResolver()

    def join(self, boundaries: Sequence[Sequence[Point]]) -> list[Point]:
        """Join holes into the outer boundary.

        Args:
            boundaries: Outer boundary first (counter-clockwise), then holes
                (clockwise)

        Returns:
            Single boundary suitable for ear clipping. With a single input
            boundary that boundary is returned unchanged.

        Raises:
            EmptyInputError: If ``boundaries`` is empty
            IntersectionUnresolvableError: If bridging meets degenerate edges
            NoVisibleVertexError: If a hole cannot be bridged
        """
        if len(boundaries) == 0:
            raise EmptyInputError()

        if len(boundaries) == 1:
            return boundaries[0]

        current: list[Point] = list(boundaries[0])
        for hole in sort_holes_by_max_x(boundaries[1:]):
            result = self.resolver.resolve(current, hole)
            current = splice_hole(current, hole, result.m_index, result.visible_index)

        return current


def join_holes(boundaries: Sequence[Sequence[Point]]) -> list[Point]:
    """Join holes into the outer boundary (see HoleJoiner.join)."""
    return HoleJoiner().join(boundaries)
