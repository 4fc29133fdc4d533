"""Unit tests for hole joining."""

import pytest

from polytri.core.earclip import triangulate
from polytri.core.geometry import deviation
from polytri.core.joiner import HoleJoiner, join_holes, sort_holes_by_max_x, splice_hole
from polytri.domain import Point
from polytri.exceptions import EmptyInputError, IntersectionUnresolvableError


def pts(*coords: tuple[float, float]) -> list[Point]:
    """Build a point list from coordinate pairs."""
    return [Point(float(x), float(y)) for x, y in coords]


class TestSortHoles:
    """Tests for hole ordering."""

    def test_sorts_by_max_x(self) -> None:
        """Test holes are ordered by their rightmost vertex."""
        right = pts((6, 1), (6, 2), (8, 2))
        left = pts((1, 1), (1, 2), (3, 2))
        assert sort_holes_by_max_x([right, left]) == [left, right]

    def test_single_point_holes(self) -> None:
        """Test degenerate one-point rings sort by their only X."""
        assert sort_holes_by_max_x([pts((1, 2)), pts((0, 0))]) == [pts((0, 0)), pts((1, 2))]

    def test_stable_on_ties(self) -> None:
        """Test holes with equal max X keep input order."""
        a = pts((1, 1), (2, 1), (2, 2))
        b = pts((0, 5), (2, 5), (2, 6))
        assert sort_holes_by_max_x([a, b]) == [a, b]
        assert sort_holes_by_max_x([b, a]) == [b, a]


class TestSpliceHole:
    """Tests for splice_hole."""

    def test_splice_layout(self) -> None:
        """Test the hole is inserted after V and the bridge is doubled."""
        outer = pts((0, 0), (4, 0), (4, 4), (0, 4))
        hole = pts((1, 1), (1, 3), (3, 3), (3, 1))

        result = splice_hole(outer, hole, m_index=2, visible_index=2)

        assert result == pts(
            (0, 0), (4, 0), (4, 4),
            (3, 3), (3, 1), (1, 1), (1, 3),
            (3, 3), (4, 4),
            (0, 4),
        )

    def test_splice_length(self) -> None:
        """Test output length is outer + hole + 2."""
        outer = pts((0, 0), (9, 0), (9, 9), (0, 9))
        hole = pts((1, 1), (1, 2), (2, 2), (2, 1), (1.5, 0.5))
        for v in range(len(outer)):
            for m in range(len(hole)):
                assert len(splice_hole(outer, hole, m, v)) == len(outer) + len(hole) + 2


class TestHoleJoiner:
    """Tests for HoleJoiner.join."""

    @pytest.fixture
    def joiner(self) -> HoleJoiner:
        """Create hole joiner."""
        return HoleJoiner()

    @pytest.fixture
    def square(self) -> list[Point]:
        """Counter-clockwise 4x4 square."""
        return pts((0, 0), (4, 0), (4, 4), (0, 4))

    def test_square_in_square(self, joiner: HoleJoiner, square: list[Point]) -> None:
        """Test joining a square hole into a square."""
        hole = pts((1, 1), (1, 3), (3, 3), (3, 1))

        result = joiner.join([square, hole])

        assert result == pts(
            (0, 0), (4, 0), (4, 4), (3, 3), (3, 1),
            (1, 1), (1, 3), (3, 3), (4, 4), (0, 4),
        )

        triangles = triangulate(result)
        expected, actual, dev = deviation(square, [hole], triangles)
        assert expected == 12.0
        assert actual == pytest.approx(12.0)
        assert len(triangles) // 6 == len(result) - 2

    def test_triangle_touching_edge(self, joiner: HoleJoiner, square: list[Point]) -> None:
        """Test a hole touching the outer edge with one vertex."""
        hole = pts((1, 1), (1, 3), (4, 2))

        result = joiner.join([square, hole])

        assert result == pts(
            (0, 0), (4, 2), (1, 1), (1, 3), (4, 2),
            (0, 0), (4, 0), (4, 4), (0, 4),
        )

        triangles = triangulate(result)
        _, actual, dev = deviation(square, [hole], triangles)
        assert actual == pytest.approx(13.0)
        assert dev == pytest.approx(0.0)

    def test_two_holes_processed_left_to_right(self, joiner: HoleJoiner) -> None:
        """Test holes are joined in ascending max-X order regardless of input order."""
        outer = pts((0, 0), (10, 0), (10, 2), (10, 4), (0, 4))
        left = pts((1, 1), (1, 3), (3, 3), (3, 1))
        right = pts((6, 0.5), (6, 1.5), (8, 1.5), (8, 0.5))

        result = joiner.join([outer, right, left])

        assert len(result) == len(outer) + len(left) + 2 + len(right) + 2
        assert result == pts(
            (0, 0), (10, 0), (10, 2),
            (8, 1.5), (8, 0.5), (6, 0.5), (6, 1.5),
            (8, 1.5), (10, 2),
            (10, 4),
            (3, 3), (3, 1), (1, 1), (1, 3),
            (3, 3), (10, 4),
            (0, 4),
        )

        triangles = triangulate(result)
        _, actual, _ = deviation(outer, [left, right], triangles)
        assert actual == pytest.approx(34.0)
        assert len(triangles) // 6 == len(result) - 2

    def test_equal_height_holes(self, joiner: HoleJoiner) -> None:
        """Test a hole whose ray runs along the top edge of a joined hole."""
        outer = pts((0, 0), (10, 0), (10, 4), (0, 4))
        left = pts((1, 1), (1, 3), (3, 3), (3, 1))
        right = pts((5, 1), (5, 3), (7, 3), (7, 1))

        result = joiner.join([outer, left, right])

        assert result == pts(
            (0, 0), (10, 0), (10, 4),
            (7, 3), (7, 1), (5, 1), (5, 3),
            (7, 3), (10, 4),
            (3, 3), (3, 1), (1, 1), (1, 3),
            (3, 3), (10, 4),
            (0, 4),
        )

        triangles = triangulate(result)
        expected, actual, dev = deviation(outer, [left, right], triangles)
        assert expected == 32.0
        assert actual == pytest.approx(32.0)
        assert dev == pytest.approx(0.0)
        assert len(triangles) // 6 <= len(result) - 2

    def test_empty(self, joiner: HoleJoiner) -> None:
        """Test empty input raises."""
        with pytest.raises(EmptyInputError):
            joiner.join([])

    def test_only_outer(self, joiner: HoleJoiner) -> None:
        """Test a single boundary is returned unchanged."""
        points = pts((0.0, 0.0), (1.0, 1.0))
        assert joiner.join([points]) is points

    def test_propagates_resolver_errors(self, joiner: HoleJoiner) -> None:
        """Test visibility errors abort the join."""
        outer = pts((0, 0), (4, 0), (4, 2), (6, 2), (6, 4), (0, 4))
        hole = pts((1, 1), (1, 3), (3, 2))
        with pytest.raises(IntersectionUnresolvableError):
            joiner.join([outer, hole])

    def test_does_not_mutate_input(self, joiner: HoleJoiner, square: list[Point]) -> None:
        """Test the input lists are left untouched."""
        hole = pts((1, 1), (1, 3), (3, 3), (3, 1))
        boundaries = [list(square), list(hole)]

        joiner.join(boundaries)

        assert boundaries == [square, hole]

    def test_join_holes_function(self, square: list[Point]) -> None:
        """Test module-level helper matches the class."""
        hole = pts((1, 1), (1, 3), (3, 3), (3, 1))
        assert join_holes([square, hole]) == HoleJoiner().join([square, hole])
