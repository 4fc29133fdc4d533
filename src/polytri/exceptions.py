"""Exception hierarchy for Polytri."""


class PolytriError(Exception):
    """Base exception for all Polytri errors."""

    pass


class InputError(PolytriError):
    """Errors related to loading boundary data."""

    pass


class BoundaryLoadError(InputError):
    """Error reading a boundary file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load boundaries '{path}': {reason}")


class BoundaryFormatError(InputError):
    """Boundary file content does not describe polygons."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid boundary data '{path}': {details}")


class OutputError(PolytriError):
    """Errors related to writing triangulation results."""

    pass


class TriangulationSaveError(OutputError):
    """Error saving triangulation results."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save triangles '{path}': {reason}")


class GeometryError(PolytriError):
    """Errors in hole joining or triangulation."""

    pass


class EmptyInputError(GeometryError):
    """No boundaries were given to join."""

    def __init__(self) -> None:
        super().__init__("Cannot process empty boundary list")


class IntersectionUnresolvableError(GeometryError):
    """The visibility ray met an edge it cannot intersect reliably."""

    def __init__(self, edge: tuple[int, int]) -> None:
        self.edge = edge
        super().__init__(
            f"Cannot calculate intersection with edge {edge[0]}-{edge[1]}, problematic data"
        )


class NoVisibleVertexError(GeometryError):
    """No outer vertex is visible from the hole."""

    def __init__(self, message: str = "Could not find visible vertex") -> None:
        super().__init__(message)


class TooFewVerticesError(GeometryError):
    """Boundary has fewer than three vertices."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Cannot triangulate less than three points (got {count})")


class StuckTriangulationError(GeometryError):
    """A full pass over the remaining vertices found no ear."""

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(
            f"Triangulation stuck with {remaining} vertices left, polygon is not simple"
        )


class AreaMismatchError(GeometryError):
    """Triangle areas do not add up to the polygon area."""

    def __init__(self, expected: float, actual: float, deviation: float) -> None:
        self.expected = expected
        self.actual = actual
        self.deviation = deviation
        super().__init__(
            f"Triangulated area {actual:.6g} differs from polygon area {expected:.6g} "
            f"(relative deviation {deviation:.3g})"
        )
