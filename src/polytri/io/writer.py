"""Triangulation writer.

This module provides the TriangulationWriter class for saving triangle lists
as JSON, next to the input file by default.
"""

import json
from datetime import datetime
from pathlib import Path

from polytri import __version__
from polytri.domain import Triangulation
from polytri.exceptions import TriangulationSaveError


class TriangulationWriter:
    """Collects triangulations and saves them as a JSON document.

    Output layout::

        {
          "generator": "polytri 0.1.0",
          "created": "2025-01-01T12:00:00",
          "triangulations": [
            {"name": "lake", "triangles": [x1, y1, x2, y2, x3, y3, ...],
             "count": 42, "area": 1250.0, "joined_vertex_count": 44}
          ]
        }

    Example:
        writer = TriangulationWriter(Path("lake-triangles.json"))
        writer.add(triangulation)
        writer.save()
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the JSON document will be written
        """
        self.output_path = output_path
        self._results: list[Triangulation] = []

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Derive the default output path from an input path.

        "lake.json" becomes "lake-triangles.json" in the same directory.
        """
        return input_path.with_name(f"{input_path.stem}-triangles.json")

    def add(self, triangulation: Triangulation) -> None:
        """Queue a triangulation for output."""
        self._results.append(triangulation)

    @property
    def count(self) -> int:
        """Number of queued triangulations."""
        return len(self._results)

    def save(self) -> None:
        """Write queued triangulations, ordered by name.

        Raises:
            TriangulationSaveError: If the file cannot be written
        """
        document = {
            "generator": f"polytri {__version__}",
            "created": datetime.now().isoformat(timespec="seconds"),
            "triangulations": [
                t.to_dict() for t in sorted(self._results, key=lambda t: t.name)
            ],
        }

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(json.dumps(document), encoding="utf-8")
        except OSError as e:
            raise TriangulationSaveError(str(self.output_path), str(e)) from e
