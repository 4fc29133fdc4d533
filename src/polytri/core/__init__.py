"""Core algorithms for polytri.

This module contains the core algorithms for:

- Geometric predicates (reflex test, point-in-triangle, signed area)
- Visibility search between a hole and its outer boundary
- Hole joining (splicing holes into the outer boundary through bridges)
- Ear clipping triangulation

All algorithms are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects, no logging)
- Deterministic (identical input gives identical triangles)

Key functions:
- join_holes: Merge an outer boundary and its holes into one boundary
- triangulate: Ear clip a simple counter-clockwise polygon
- triangulate_polygon: Join, clip and verify a Polygon
- is_reflex / is_inside_triangle: Shared predicates

Key classes:
- VisibilityResolver: Finds mutually visible hole/outer vertices
- HoleJoiner: Splices holes into the outer boundary
- EarClipper: Triangulates simple polygons
- PolygonProcessor: Triangulates boundary files
"""

from polytri.core.earclip import EarClipper, triangulate
from polytri.core.geometry import (
    cyclic,
    deviation,
    is_inside_triangle,
    is_reflex,
    signed_area,
    triangles_area,
)
from polytri.core.joiner import HoleJoiner, join_holes, sort_holes_by_max_x, splice_hole
from polytri.core.processor import PolygonProcessor, process_polygon, triangulate_polygon
from polytri.core.visibility import VisibilityResolver, VisibilityResult

__all__ = [
    # Triangulation classes
    "EarClipper",
    # Joining classes
    "HoleJoiner",
    # Processor classes
    "PolygonProcessor",
    "VisibilityResolver",
    "VisibilityResult",
    # Geometry functions
    "cyclic",
    "deviation",
    "is_inside_triangle",
    "is_reflex",
    "join_holes",
    "process_polygon",
    "signed_area",
    "sort_holes_by_max_x",
    "splice_hole",
    "triangles_area",
    "triangulate",
    "triangulate_polygon",
]
