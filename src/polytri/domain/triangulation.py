"""Triangulation result type."""

from dataclasses import dataclass, field
from typing import Any

from polytri.domain.point import Point


@dataclass
class Triangulation:
    """Triangles produced for one polygon.

    Triangles are stored as a flat list, six floats per triangle (three
    (x, y) pairs in counter-clockwise order).

    Attributes:
        name: Name of the source polygon
        coords: Flat triangle coordinates
        joined_vertex_count: Length of the boundary after hole joining
    """

    name: str
    coords: list[float] = field(default_factory=list)
    joined_vertex_count: int = 0

    @property
    def triangle_count(self) -> int:
        """Number of triangles."""
        return len(self.coords) // 6

    def triangles(self) -> list[tuple[Point, Point, Point]]:
        """Group the flat coordinates into point triples."""
        c = self.coords
        return [
            (Point(c[i], c[i + 1]), Point(c[i + 2], c[i + 3]), Point(c[i + 4], c[i + 5]))
            for i in range(0, len(c) - len(c) % 6, 6)
        ]

    def area(self) -> float:
        """Sum of the signed triangle areas."""
        total = 0.0
        for a, b, c in self.triangles():
            total += (b - a).cross(c - a) / 2.0
        return total

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC and output.

        Returns:
            Dictionary representation of the triangulation
        """
        return {
            "name": self.name,
            "triangles": list(self.coords),
            "count": self.triangle_count,
            "area": self.area(),
            "joined_vertex_count": self.joined_vertex_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Triangulation":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a triangulation

        Returns:
            Triangulation instance
        """
        return cls(
            name=data["name"],
            coords=[float(v) for v in data["triangles"]],
            joined_vertex_count=data.get("joined_vertex_count", 0),
        )
