"""Conversion between raw JSON data and domain models.

This module converts the nested coordinate lists found in boundary files into
Polygon models, and applies the optional coordinate conversion
(longitude/latitude degrees to Web Mercator meters, offset and scale).
"""

import math
from typing import Any

from polytri.config import InputConfig
from polytri.domain import Boundary, Point, Polygon

EARTH_RADIUS = 6378137.0
ORIGIN_SHIFT = math.pi * EARTH_RADIUS


def degrees_to_meters(point: Point) -> Point:
    """Project a (longitude, latitude) point to spherical Web Mercator meters.

    Args:
        point: Point with x = longitude and y = latitude, in degrees

    Returns:
        Projected point in meters

    Raises:
        ValueError: If the latitude is not strictly between -90 and 90
    """
    if not -90.0 < point.y < 90.0:
        raise ValueError(f"latitude {point.y} outside (-90, 90)")

    x = point.x * ORIGIN_SHIFT / 180.0
    y = math.log(math.tan((90.0 + point.y) * math.pi / 360.0)) / (math.pi / 180.0)
    y = y * ORIGIN_SHIFT / 180.0
    return Point(x, y)


def convert_point(point: Point, config: InputConfig) -> Point:
    """Apply the configured coordinate conversion to a single point."""
    if config.degrees:
        point = degrees_to_meters(point)
    return Point(
        (point.x - config.offset_x) * config.scale,
        (point.y - config.offset_y) * config.scale,
    )


def convert_polygon(polygon: Polygon, config: InputConfig) -> Polygon:
    """Apply the configured coordinate conversion to every ring of a polygon."""
    if config.is_identity():
        return polygon

    def _ring(boundary: Boundary) -> Boundary:
        return Boundary(points=[convert_point(p, config) for p in boundary.points])

    return Polygon(
        name=polygon.name,
        outer=_ring(polygon.outer),
        holes=[_ring(h) for h in polygon.holes],
    )


def ring_to_boundary(ring: Any) -> Boundary:
    """Convert a list of ``[x, y]`` pairs to a Boundary.

    A trailing point equal to the first one (GeoJSON style closing point) is
    dropped.

    Raises:
        ValueError: If the ring is not a list of coordinate pairs
    """
    if not isinstance(ring, list):
        raise ValueError(f"ring must be a list of points, got {type(ring).__name__}")

    points = []
    for raw in ring:
        if not isinstance(raw, (list, tuple)) or len(raw) < 2:
            raise ValueError(f"point must be an [x, y] pair, got {raw!r}")
        points.append(Point(float(raw[0]), float(raw[1])))

    if len(points) > 1 and points[0] == points[-1]:
        points.pop()

    return Boundary(points=points)


def rings_to_polygon(name: str, rings: Any) -> Polygon:
    """Build a Polygon from a list of rings, outer ring first.

    Raises:
        ValueError: If there are no rings or a ring is malformed
    """
    if not isinstance(rings, list) or not rings:
        raise ValueError(f"polygon '{name}' has no rings")

    boundaries = [ring_to_boundary(r) for r in rings]
    return Polygon(name=name, outer=boundaries[0], holes=boundaries[1:])


def data_to_polygons(data: Any, default_name: str = "polygon") -> list[Polygon]:
    """Convert decoded JSON to polygons.

    Accepted layouts:
    - ``[[[x, y], ...], ...]``: a single polygon given as rings
    - ``{"rings": [...]}``: a single polygon
    - ``{"polygons": [{"name": ..., "rings": [...]}, ...]}``: many polygons

    Raises:
        ValueError: If the data matches none of the layouts
    """
    if isinstance(data, list):
        return [rings_to_polygon(default_name, data)]

    if not isinstance(data, dict):
        raise ValueError(f"expected a list or an object, got {type(data).__name__}")

    if "rings" in data:
        return [rings_to_polygon(str(data.get("name", default_name)), data["rings"])]

    if "polygons" in data:
        entries = data["polygons"]
        if not isinstance(entries, list):
            raise ValueError("'polygons' must be a list")

        polygons = []
        for idx, entry in enumerate(entries):
            if not isinstance(entry, dict) or "rings" not in entry:
                raise ValueError(f"polygon #{idx} has no 'rings'")
            name = str(entry.get("name", f"{default_name}-{idx}"))
            polygons.append(rings_to_polygon(name, entry["rings"]))
        return polygons

    raise ValueError("object needs a 'rings' or 'polygons' key")


def polygon_to_rings(polygon: Polygon) -> list[list[list[float]]]:
    """Convert a polygon back to nested ``[x, y]`` lists, outer ring first."""
    return [
        [[p.x, p.y] for p in boundary.points]
        for boundary in [polygon.outer, *polygon.holes]
    ]
