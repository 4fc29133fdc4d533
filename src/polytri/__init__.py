"""Polytri - Triangulate polygons with holes.

Polytri turns simple polygons, optionally containing holes, into flat lists of
counter-clockwise triangles. Holes are first spliced into the outer boundary
through zero-width visibility bridges, and the resulting single boundary is
triangulated with ear clipping.

Example:
    $ polytri lake.json

This will create lake-triangles.json with six coordinates per triangle.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
