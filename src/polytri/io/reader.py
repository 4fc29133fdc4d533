"""Boundary reader for loading polygon files.

This module provides the BoundaryReader class for loading JSON boundary files
and extracting polygons into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path

from polytri.config import InputConfig
from polytri.domain import Polygon
from polytri.exceptions import BoundaryFormatError, BoundaryLoadError
from polytri.io.converter import convert_polygon, data_to_polygons


class BoundaryReader:
    """Loads boundary files and extracts polygons.

    Example:
        reader = BoundaryReader(Path("lake.json"))
        reader.load()
        for polygon in reader.iter_polygons():
            print(polygon.name)
    """

    def __init__(self, path: Path, config: InputConfig | None = None) -> None:
        """Initialize the boundary reader.

        Args:
            path: Path to the JSON boundary file
            config: Coordinate conversion to apply (default: none)
        """
        self._path = path
        self._config = config or InputConfig()
        self._polygons: list[Polygon] | None = None

    def load(self) -> None:
        """Load and parse the boundary file.

        Raises:
            FileNotFoundError: If the file does not exist
            BoundaryLoadError: If the file cannot be read
            BoundaryFormatError: If the content is not valid boundary data or
                its coordinates cannot be converted
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Boundary file not found: {self._path}")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise BoundaryFormatError(str(self._path), f"invalid JSON: {e}") from e
        except OSError as e:
            raise BoundaryLoadError(str(self._path), str(e)) from e

        try:
            polygons = data_to_polygons(data, default_name=self._path.stem)
            self._polygons = [convert_polygon(p, self._config) for p in polygons]
        except ValueError as e:
            raise BoundaryFormatError(str(self._path), str(e)) from e

    @property
    def polygon_count(self) -> int:
        """Return number of polygons in the file.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._polygons is None:
            raise RuntimeError("Boundaries not loaded. Call load() first.")

        return len(self._polygons)

    @property
    def hole_count(self) -> int:
        """Return total number of holes across all polygons.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._polygons is None:
            raise RuntimeError("Boundaries not loaded. Call load() first.")

        return sum(len(p.holes) for p in self._polygons)

    def iter_polygons(self) -> Iterator[Polygon]:
        """Iterate over polygons in file order.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._polygons is None:
            raise RuntimeError("Boundaries not loaded. Call load() first.")

        yield from self._polygons

    def __enter__(self) -> "BoundaryReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._polygons = None


def load_boundaries(path: Path, config: InputConfig | None = None) -> list[Polygon]:
    """Load all polygons from a boundary file."""
    with BoundaryReader(path, config) as reader:
        return list(reader.iter_polygons())
