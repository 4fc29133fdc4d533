"""Domain models for polytri.

This module contains the value types passed between the loader, the hole
joiner, the ear clipper and the writer. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of file formats

Key classes:
- Point: A 2D point with vector helpers
- Boundary: A closed ring of points
- Polygon: An outer boundary with its holes
- Triangulation: Flat triangle list produced for a polygon
"""

from polytri.domain.boundary import Boundary, Polygon, WindingDirection
from polytri.domain.point import Point
from polytri.domain.triangulation import Triangulation

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Boundary",
    "Polygon",
    "Triangulation",
]
