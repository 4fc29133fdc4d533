"""Boundary and polygon types.

This module defines the closed rings fed into hole joining and ear clipping:
- Boundary: an implicitly closed ring of points
- Polygon: an outer boundary with its holes
- WindingDirection: Enum for ring orientation
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from polytri.domain.point import Point


class WindingDirection(Enum):
    """Boundary winding direction.

    Outer boundaries are expected to wind counter-clockwise and holes
    clockwise, so that splicing a hole into its outer boundary keeps the
    interior on the left of every edge.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass
class Boundary:
    """A closed ring of points.

    The last point connects back to the first; no duplicated closing point
    is stored.

    Attributes:
        points: List of points forming the ring
    """

    points: list[Point]
    _cached_area: float | None = field(default=None, repr=False, init=False, compare=False)

    def __len__(self) -> int:
        return len(self.points)

    def signed_area(self) -> float:
        """Calculate signed area of the ring.

        Positive area means counter-clockwise winding, negative means
        clockwise. Result is cached.

        Returns:
            Signed area of the boundary
        """
        if self._cached_area is None:
            from polytri.core.geometry import signed_area

            self._cached_area = signed_area(self.points)
        return self._cached_area

    @property
    def direction(self) -> WindingDirection:
        """Winding direction derived from the signed area."""
        if self.signed_area() < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    def reversed(self) -> "Boundary":
        """Return a copy with opposite winding."""
        return Boundary(points=list(reversed(self.points)))

    def oriented(self, direction: WindingDirection) -> "Boundary":
        """Return this boundary wound in ``direction``, reversing if needed."""
        if len(self.points) < 3 or self.direction == direction:
            return self
        return self.reversed()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the boundary
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Boundary":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a boundary

        Returns:
            Boundary instance
        """
        return cls(points=[Point.from_dict(p) for p in data["points"]])


@dataclass
class Polygon:
    """An outer boundary with zero or more holes.

    Attributes:
        name: Identifier used in logs and output
        outer: Outer boundary
        holes: Inner boundaries, each fully inside ``outer``
    """

    name: str
    outer: Boundary
    holes: list[Boundary] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        """Total number of vertices across all rings."""
        return len(self.outer) + sum(len(h) for h in self.holes)

    def boundaries(self) -> list[list[Point]]:
        """Return rings as point lists, outer first."""
        return [list(self.outer.points)] + [list(h.points) for h in self.holes]

    def area(self) -> float:
        """Area of the outer boundary minus the holes."""
        return abs(self.outer.signed_area()) - sum(abs(h.signed_area()) for h in self.holes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the polygon
        """
        return {
            "name": self.name,
            "outer": self.outer.to_dict(),
            "holes": [h.to_dict() for h in self.holes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            Polygon instance
        """
        return cls(
            name=data["name"],
            outer=Boundary.from_dict(data["outer"]),
            holes=[Boundary.from_dict(h) for h in data.get("holes", [])],
        )
