"""Boundary I/O layer for polytri.

This module handles reading boundary files and writing triangle lists. It
provides a clean abstraction layer between JSON documents and the domain
models.

Key responsibilities:
- Load polygons (outer ring plus holes) from JSON
- Convert coordinates (degrees to meters, offset, scale)
- Write triangulations with a predictable naming convention

Key classes:
- BoundaryReader: Load boundary files and extract polygons
- TriangulationWriter: Save triangle lists
"""

from polytri.io.converter import degrees_to_meters
from polytri.io.reader import BoundaryReader, load_boundaries
from polytri.io.writer import TriangulationWriter

__all__ = [
    "BoundaryReader",
    "TriangulationWriter",
    "degrees_to_meters",
    "load_boundaries",
]
