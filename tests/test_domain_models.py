"""Tests for domain models to verify they work correctly."""

import pytest

from polytri.core.geometry import signed_area
from polytri.domain import (
    Boundary,
    Point,
    Polygon,
    Triangulation,
    WindingDirection,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_subtraction(self) -> None:
        """Test vector subtraction."""
        assert Point(3.0, 5.0) - Point(1.0, 2.0) == Point(2.0, 3.0)

    def test_point_cross(self) -> None:
        """Test 2D cross product sign and value."""
        assert Point(1.0, 0.0).cross(Point(0.0, 1.0)) == 1.0
        assert Point(0.0, 1.0).cross(Point(1.0, 0.0)) == -1.0
        assert Point(2.0, 2.0).cross(Point(1.0, 1.0)) == 0.0

    def test_point_distance2(self) -> None:
        """Test squared distance."""
        assert Point(0.0, 0.0).distance2(Point(3.0, 4.0)) == 25.0

    def test_point_exact_equality(self) -> None:
        """Test that equality is exact."""
        assert Point(0.1 + 0.2, 0.0) != Point(0.3, 0.0)
        assert Point(1.0, 2.0) == Point(1.0, 2.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.5, -200.25)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestBoundary:
    """Tests for Boundary class."""

    @pytest.fixture
    def ccw_square(self) -> Boundary:
        """Counter-clockwise 4x4 square."""
        return Boundary(points=[Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)])

    def test_signed_area_ccw(self, ccw_square: Boundary) -> None:
        """Test CCW boundary has positive area."""
        assert ccw_square.signed_area() == 16.0
        assert ccw_square.direction == WindingDirection.COUNTER_CLOCKWISE

    def test_signed_area_cw(self, ccw_square: Boundary) -> None:
        """Test reversed boundary has negative area."""
        cw = ccw_square.reversed()
        assert cw.signed_area() == -16.0
        assert cw.direction == WindingDirection.CLOCKWISE

    def test_signed_area_degenerate(self) -> None:
        """Test boundaries with fewer than 3 points have zero area."""
        assert Boundary(points=[Point(0, 0), Point(1, 1)]).signed_area() == 0.0

    def test_signed_area_matches_geometry(self) -> None:
        """Test the cached area agrees with the shoelace helper."""
        points = [Point(2, 2), Point(11, 2), Point(9, 7), Point(4, 10)]
        boundary = Boundary(points=points)
        assert boundary.signed_area() == signed_area(points) == 45.5
        assert boundary.signed_area() == 45.5

    def test_oriented(self, ccw_square: Boundary) -> None:
        """Test orientation only reverses when needed."""
        assert ccw_square.oriented(WindingDirection.COUNTER_CLOCKWISE) is ccw_square
        cw = ccw_square.oriented(WindingDirection.CLOCKWISE)
        assert cw.points == list(reversed(ccw_square.points))

    def test_serialization(self, ccw_square: Boundary) -> None:
        """Test boundary round trip through dict."""
        restored = Boundary.from_dict(ccw_square.to_dict())
        assert restored.points == ccw_square.points


class TestPolygon:
    """Tests for Polygon class."""

    @pytest.fixture
    def polygon(self) -> Polygon:
        """Square with a square hole."""
        return Polygon(
            name="frame",
            outer=Boundary(points=[Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]),
            holes=[Boundary(points=[Point(1, 1), Point(1, 3), Point(3, 3), Point(3, 1)])],
        )

    def test_vertex_count(self, polygon: Polygon) -> None:
        """Test vertex count covers all rings."""
        assert polygon.vertex_count == 8

    def test_area_subtracts_holes(self, polygon: Polygon) -> None:
        """Test area is outer minus holes."""
        assert polygon.area() == 12.0

    def test_boundaries_outer_first(self, polygon: Polygon) -> None:
        """Test ring list starts with the outer boundary."""
        rings = polygon.boundaries()
        assert len(rings) == 2
        assert rings[0][0] == Point(0, 0)
        assert rings[1][0] == Point(1, 1)

    def test_serialization(self, polygon: Polygon) -> None:
        """Test polygon serialization keeps name and rings."""
        restored = Polygon.from_dict(polygon.to_dict())
        assert restored.name == "frame"
        assert restored.outer.points == polygon.outer.points
        assert restored.holes[0].points == polygon.holes[0].points


class TestTriangulation:
    """Tests for Triangulation class."""

    def test_triangle_grouping(self) -> None:
        """Test flat coordinates are grouped into point triples."""
        t = Triangulation(name="t", coords=[4, 4, 0, 0, 3, 0])
        assert t.triangle_count == 1
        assert t.triangles() == [(Point(4, 4), Point(0, 0), Point(3, 0))]

    def test_area(self) -> None:
        """Test area sums signed triangle areas."""
        t = Triangulation(name="t", coords=[0, 0, 1, 0, 1, 1, 0, 0, 1, 1, 0, 1])
        assert t.area() == pytest.approx(1.0)

    def test_serialization(self) -> None:
        """Test dict output carries count and coordinates."""
        t = Triangulation(name="t", coords=[0.0, 0.0, 1.0, 0.0, 1.0, 1.0], joined_vertex_count=3)
        data = t.to_dict()
        assert data["count"] == 1
        restored = Triangulation.from_dict(data)
        assert restored.coords == t.coords
        assert restored.joined_vertex_count == 3
