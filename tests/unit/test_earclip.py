"""Unit tests for ear clipping triangulation."""

import pytest

from polytri.core.earclip import EarClipper, VertexRing, triangulate
from polytri.core.geometry import signed_area, triangles_area
from polytri.domain import Point
from polytri.exceptions import StuckTriangulationError, TooFewVerticesError


def pts(*coords: tuple[float, float]) -> list[Point]:
    """Build a point list from coordinate pairs."""
    return [Point(float(x), float(y)) for x, y in coords]


SHAPES = {
    "fan": pts((0, 4), (3, 1), (8, 2), (9, 5), (4, 6)),
    "diamond": pts((0, 3), (1, 0), (4, 1), (3, 4)),
    "square": pts((0, 0), (1, 0), (1, 1), (0, 1)),
    "one reflex": pts((0, 6), (0, 1), (2, 2), (3, 2)),
    "shuriken": pts((0, 4), (2, 2), (2, 0), (4, 2), (6, 2), (4, 4), (4, 6), (2, 4)),
    "c letter": pts((0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (4, 4), (4, 6), (0, 6)),
    "t letter": pts((0, 0), (6, 0), (6, 2), (4, 2), (4, 6), (2, 6), (2, 2), (0, 2)),
    "double t": pts(
        (0, 0), (6, 0), (6, 2), (4, 2), (4, 4), (6, 4),
        (6, 6), (0, 6), (0, 4), (2, 4), (2, 2), (0, 2),
    ),
    "building": pts(
        (1, 0), (7, 0), (7, 1), (6, 1), (6, 10), (7, 10), (7, 11), (1, 11),
        (1, 10), (2, 10), (2, 7), (0, 7), (0, 4), (2, 4), (2, 1), (1, 1),
    ),
    "from the paper": pts(
        (50, 110), (150, 30), (240, 115), (320, 65), (395, 170),
        (305, 160), (265, 240), (190, 100), (95, 125), (100, 215),
    ),
}


class TestVertexRing:
    """Tests for the index-linked vertex ring."""

    def test_initial_links(self) -> None:
        """Test slots are linked circularly."""
        ring = VertexRing(pts((0, 0), (1, 0), (1, 1)))
        assert ring.prev == [2, 0, 1]
        assert ring.next == [1, 2, 0]
        assert ring.size == 3

    def test_remove_relinks_neighbours(self) -> None:
        """Test removing a slot joins its neighbours."""
        ring = VertexRing(pts((0, 0), (1, 0), (1, 1), (0, 1)))
        ring.remove(1)
        assert ring.next[0] == 2
        assert ring.prev[2] == 0
        assert ring.size == 3

    def test_is_ear_rejects_reflex(self) -> None:
        """Test a reflex vertex is never an ear."""
        ring = VertexRing(SHAPES["c letter"])
        # (2, 2) is the inner corner of the C.
        assert not ring.is_ear(3)

    def test_is_ear_rejects_containing_reflex(self) -> None:
        """Test a convex vertex whose triangle holds a reflex vertex."""
        ring = VertexRing(pts((0, 0), (4, 0), (4, 4), (3, 3), (3, 1), (1, 1), (1, 3), (3, 3), (4, 4), (0, 4)))
        assert not ring.is_ear(0)

    def test_is_ear_accepts_convex_corner(self) -> None:
        """Test square corners are ears."""
        ring = VertexRing(SHAPES["square"])
        assert all(ring.is_ear(i) for i in range(4))


class TestEarClipper:
    """Tests for EarClipper.triangulate."""

    @pytest.fixture
    def clipper(self) -> EarClipper:
        """Create ear clipper."""
        return EarClipper()

    @pytest.mark.parametrize("name", list(SHAPES))
    def test_area_conservation(self, clipper: EarClipper, name: str) -> None:
        """Test triangle areas add up to the polygon area."""
        shape = SHAPES[name]
        triangles = clipper.triangulate(shape)
        assert triangles_area(triangles) == pytest.approx(signed_area(shape), rel=1e-9)

    @pytest.mark.parametrize("name", list(SHAPES))
    def test_triangle_count_bound(self, clipper: EarClipper, name: str) -> None:
        """Test at most n - 2 triangles are produced."""
        shape = SHAPES[name]
        triangles = clipper.triangulate(shape)
        assert len(triangles) % 6 == 0
        assert len(triangles) // 6 <= len(shape) - 2

    @pytest.mark.parametrize("name", list(SHAPES))
    def test_vertices_come_from_input(self, clipper: EarClipper, name: str) -> None:
        """Test no coordinates are synthesized."""
        shape = SHAPES[name]
        allowed = {(p.x, p.y) for p in shape}
        triangles = clipper.triangulate(shape)
        for i in range(0, len(triangles), 2):
            assert (triangles[i], triangles[i + 1]) in allowed

    @pytest.mark.parametrize("name", list(SHAPES))
    def test_triangles_are_ccw(self, clipper: EarClipper, name: str) -> None:
        """Test every emitted triangle has positive area."""
        triangles = clipper.triangulate(SHAPES[name])
        for i in range(0, len(triangles), 6):
            assert triangles_area(triangles[i : i + 6]) > 0

    @pytest.mark.parametrize("name", ["fan", "diamond", "square"])
    def test_convex_gives_n_minus_2(self, clipper: EarClipper, name: str) -> None:
        """Test convex polygons give exactly n - 2 triangles."""
        shape = SHAPES[name]
        assert len(clipper.triangulate(shape)) // 6 == len(shape) - 2

    def test_single_triangle(self, clipper: EarClipper) -> None:
        """Test a triangle is emitted starting from its last vertex."""
        result = clipper.triangulate(pts((0, 0), (3, 0), (4, 4)))
        assert result == [4.0, 4.0, 0.0, 0.0, 3.0, 0.0]

    def test_collinear_vertex(self, clipper: EarClipper) -> None:
        """Test a straight angle does not block triangulation."""
        shape = pts((0, 0), (1, 0), (2, 0), (2, 2), (0, 2))
        triangles = clipper.triangulate(shape)
        assert triangles_area(triangles) == pytest.approx(4.0)

    def test_degenerate_ears_are_dropped(self, clipper: EarClipper) -> None:
        """Test zero-area ears on a bridged boundary are not emitted."""
        shape = pts((0, 0), (4, 2), (1, 1), (1, 3), (4, 2), (0, 0), (4, 0), (4, 4), (0, 4))
        triangles = clipper.triangulate(shape)
        assert len(triangles) // 6 < len(shape) - 2
        assert triangles_area(triangles) == pytest.approx(13.0)

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_too_few_vertices(self, clipper: EarClipper, count: int) -> None:
        """Test fewer than three points raise."""
        shape = pts((0, 0), (1, 0))[:count]
        with pytest.raises(TooFewVerticesError):
            clipper.triangulate(shape)

    def test_clockwise_triangle_is_stuck(self, clipper: EarClipper) -> None:
        """Test a clockwise ring has no ears."""
        with pytest.raises(StuckTriangulationError):
            clipper.triangulate(pts((0, 0), (0, 1), (1, 0)))

    def test_self_intersecting_is_stuck(self, clipper: EarClipper) -> None:
        """Test a bowtie stops with an error after clipping what it can."""
        with pytest.raises(StuckTriangulationError) as exc_info:
            clipper.triangulate(pts((0, 0), (2, 2), (2, 0), (0, 2)))
        assert exc_info.value.remaining == 3

    def test_deterministic(self, clipper: EarClipper) -> None:
        """Test identical input gives identical output."""
        shape = SHAPES["building"]
        assert clipper.triangulate(shape) == clipper.triangulate(list(shape))

    def test_triangulate_function(self) -> None:
        """Test module-level helper matches the class."""
        shape = SHAPES["shuriken"]
        assert triangulate(shape) == EarClipper().triangulate(shape)
