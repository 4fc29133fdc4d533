"""Mutual visibility between a hole and its outer boundary.

To splice a hole into the outer boundary we need a hole vertex ``M`` and an
outer vertex ``V`` such that the segment ``[M, V]`` crosses no edge. The
search follows the classical ray casting approach:

1. ``M`` is the hole vertex with the largest X coordinate.
2. A ray ``M + t * (1, 0)`` is cast and the closest crossed outer edge gives
   the point ``K``.
3. If ``K`` is an outer vertex, it is visible from ``M``.
4. Otherwise ``P``, the endpoint of the crossed edge with the larger X, is
   visible unless outer vertices fall inside triangle ``[M, K, P]``.
5. In that case one of the reflex vertices inside the triangle is picked.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from polytri.core.geometry import cyclic, is_inside_triangle, is_reflex
from polytri.domain import Point
from polytri.exceptions import IntersectionUnresolvableError, NoVisibleVertexError


@dataclass(frozen=True)
class RayHit:
    """Closest crossing of the visibility ray with an outer edge.

    Attributes:
        k: Crossing point on the ray
        k1: Index of the edge's first endpoint
        k2: Index of the edge's second endpoint
    """

    k: Point
    k1: int
    k2: int


@dataclass(frozen=True)
class VisibilityResult:
    """Pair of mutually visible vertices.

    Attributes:
        m_index: Index of ``M`` in the hole
        visible_index: Index of the visible vertex in the outer boundary
    """

    m_index: int
    visible_index: int


def rightmost_index(points: Sequence[Point]) -> int:
    """Index of the vertex with the largest X, first one on ties."""
    best = 0
    for i in range(1, len(points)):
        if points[i].x > points[best].x:
            best = i
    return best


def find_k(m: Point, outer: Sequence[Point]) -> RayHit:
    """Find the closest point where ray ``M + t * (1, 0)`` crosses ``outer``.

    Only edges ``[V_i, V_j]`` going upwards across ``M``'s Y coordinate are
    considered; on a counter-clockwise ring those are the edges whose
    interior side faces ``M``. A horizontal edge at ``M``'s height that lies
    entirely left of ``M`` cannot be hit and is ignored.

    Args:
        m: Ray origin
        outer: Outer boundary

    Returns:
        RayHit with the crossing point and the edge endpoints

    Raises:
        IntersectionUnresolvableError: If a horizontal candidate edge reaches
            ``M`` or lies to its right, or the intersection parameters are
            not finite
        NoVisibleVertexError: If the ray crosses no edge
    """
    best: RayHit | None = None
    best_t = math.inf

    n = len(outer)
    i = n - 1
    for j in range(n):
        vi, vj = outer[i], outer[j]

        if vi.y > m.y or vj.y < m.y:
            i = j
            continue

        v1 = m - vi
        v2 = vj - vi
        if v2.y == 0:
            if max(vi.x, vj.x) < m.x:
                i = j
                continue
            raise IntersectionUnresolvableError((i, j))

        t1 = v2.cross(v1) / v2.y
        t2 = v1.y / v2.y
        if not (math.isfinite(t1) and math.isfinite(t2)):
            raise IntersectionUnresolvableError((i, j))

        if t1 >= 0.0 and 0.0 <= t2 <= 1.0 and t1 < best_t:
            best_t = t1
            best = RayHit(k=Point(m.x + t1, m.y), k1=i, k2=j)

        i = j

    if best is None:
        raise NoVisibleVertexError(
            f"Ray from ({m.x}, {m.y}) does not cross the outer boundary"
        )

    return best


def are_all_outside(m: Point, k: Point, p_index: int, outer: Sequence[Point]) -> bool:
    """Check that no outer vertex except ``P`` lies inside ``[M, K, P]``.

    ``M`` belongs to the hole and ``K`` is not an outer vertex, so ``P`` is
    the only triangle corner that has to be skipped. Bridged boundaries
    repeat vertices, so every copy of ``P`` is skipped.
    """
    p = outer[p_index]
    for v in outer:
        if v == p:
            continue
        if is_inside_triangle(m, k, p, v):
            return False
    return True


def reflex_candidates(m: Point, k: Point, p_index: int, outer: Sequence[Point]) -> list[int]:
    """Indices of reflex outer vertices lying inside triangle ``[M, K, P]``."""
    n = len(outer)
    p = outer[p_index]
    candidates = []
    for i in range(n):
        if not is_inside_triangle(m, k, p, outer[i]):
            continue
        if not is_reflex(outer[cyclic(i - 1, n)], outer[i], outer[cyclic(i + 1, n)]):
            continue
        candidates.append(i)
    return candidates


def find_closest(m: Point, k: Point, p_index: int, outer: Sequence[Point]) -> int:
    """Pick the visible vertex among reflex vertices inside ``[M, K, P]``.

    Distances are measured against a running reference vertex (starting at
    index 0), not against ``M``. With no candidate the reference index 0 is
    returned.

    TODO: compare against distances to ``M`` once reference outputs for
    concave outer rings are available.
    """
    closest = 0
    max_dist = 0.0

    for i in reflex_candidates(m, k, p_index, outer):
        dist = outer[i].distance2(outer[closest])
        if dist > max_dist:
            closest = i
            max_dist = dist

    return closest


class VisibilityResolver:
    """Finds a bridge between a hole and the boundary that encloses it.

    Example:
        resolver = VisibilityResolver()
        result = resolver.resolve(outer, hole)
        bridge = (hole[result.m_index], outer[result.visible_index])
    """

    def resolve(self, outer: Sequence[Point], hole: Sequence[Point]) -> VisibilityResult:
        """Find mutually visible vertices of ``hole`` and ``outer``.

        Args:
            outer: Counter-clockwise boundary enclosing the hole
            hole: Clockwise hole boundary

        Returns:
            VisibilityResult with the hole and outer vertex indices

        Raises:
            IntersectionUnresolvableError: If the ray meets a degenerate edge
            NoVisibleVertexError: If no outer vertex can be reached
        """
        if not hole or len(outer) < 3:
            raise NoVisibleVertexError(
                f"Cannot bridge hole of {len(hole)} points into boundary of {len(outer)} points"
            )

        m_index = rightmost_index(hole)
        m = hole[m_index]

        hit = find_k(m, outer)

        # Bridged boundaries repeat vertices; the last match wins.
        visible_index = -1
        for i, v in enumerate(outer):
            if v == hit.k:
                visible_index = i

        if visible_index >= 0:
            return VisibilityResult(m_index=m_index, visible_index=visible_index)

        if outer[hit.k1].x > outer[hit.k2].x:
            p_index = hit.k1
        else:
            p_index = hit.k2

        if are_all_outside(m, hit.k, p_index, outer):
            return VisibilityResult(m_index=m_index, visible_index=p_index)

        visible_index = find_closest(m, hit.k, p_index, outer)
        return VisibilityResult(m_index=m_index, visible_index=visible_index)
