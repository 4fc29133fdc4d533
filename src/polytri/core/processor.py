"""Processing orchestration for the triangulation pipeline.

This module runs hole joining and ear clipping over every polygon of a
boundary file, optionally in parallel using ProcessPoolExecutor.

Key components:
- triangulate_polygon: Join holes, clip ears and verify one polygon
- process_polygon: Top-level picklable function for parallel execution
- PolygonProcessor: Main orchestrator class for boundary files
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from polytri.config import PolytriSettings, TriangulationConfig
from polytri.core.earclip import EarClipper
from polytri.core.geometry import deviation
from polytri.core.joiner import HoleJoiner
from polytri.domain import Polygon, Triangulation, WindingDirection
from polytri.exceptions import AreaMismatchError
from polytri.io import BoundaryReader, TriangulationWriter
from polytri.utils import ProcessingLogger, ProcessingStats, configure_logging


def normalize_winding(polygon: Polygon) -> Polygon:
    """Orient the outer boundary counter-clockwise and holes clockwise."""
    return Polygon(
        name=polygon.name,
        outer=polygon.outer.oriented(WindingDirection.COUNTER_CLOCKWISE),
        holes=[h.oriented(WindingDirection.CLOCKWISE) for h in polygon.holes],
    )


def triangulate_polygon(
    polygon: Polygon,
    config: TriangulationConfig | None = None,
) -> Triangulation:
    """Triangulate a polygon with holes.

    Args:
        polygon: Outer boundary and holes
        config: Winding and verification options (default: TriangulationConfig())

    Returns:
        Triangulation of the polygon

    Raises:
        GeometryError: If joining or clipping fails, or if verification finds
            the triangle areas do not match the polygon area
    """
    config = config or TriangulationConfig()

    if config.normalize_winding:
        polygon = normalize_winding(polygon)

    rings = polygon.boundaries()
    joined = HoleJoiner().join(rings)
    coords = EarClipper().triangulate(joined)

    if config.verify_area:
        expected, actual, dev = deviation(rings[0], rings[1:], coords)
        if dev > config.area_tolerance:
            raise AreaMismatchError(expected, actual, dev)

    return Triangulation(name=polygon.name, coords=coords, joined_vertex_count=len(joined))


def process_polygon(
    polygon_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Triangulate a single serialized polygon.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Errors are returned, not raised, so one bad polygon
    does not stop the batch.

    Args:
        polygon_dict: Serialized polygon (from Polygon.to_dict())
        config_dict: Serialized triangulation configuration

    Returns:
        Dictionary containing either:
        - Success: {"triangulation": dict, "holes": int, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "polygon_name": str,
          "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        polygon = Polygon.from_dict(polygon_dict)
        config = TriangulationConfig(**config_dict)

        result = triangulate_polygon(polygon, config)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "triangulation": result.to_dict(),
            "holes": len(polygon.holes),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "polygon_name": polygon_dict.get("name", "unknown"),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class PolygonProcessor:
    """Orchestrates triangulation of boundary files.

    Manages the complete workflow:
    1. Load boundary file
    2. Skip polygons that cannot be triangulated
    3. Triangulate polygons, in worker processes if requested
    4. Collect results and update statistics
    5. Save triangle lists

    Example:
        settings = PolytriSettings()
        processor = PolygonProcessor(settings)
        stats = processor.process(
            input_path=Path("lake.json"),
            output_path=Path("lake-triangles.json"),
        )
    """

    def __init__(self, config: PolytriSettings, quiet: bool = False) -> None:
        """Initialize processor with configuration.

        Args:
            config: Polytri settings
            quiet: Suppress console log output except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def process(
        self,
        input_path: Path,
        output_path: Path | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ProcessingStats:
        """Triangulate every polygon of a boundary file.

        Args:
            input_path: Path to JSON boundary file
            output_path: Path for triangle output (auto-generated if None)
            max_workers: Worker processes (None = config value; None or 1
                processes in the current process)
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            FileNotFoundError: If the boundary file does not exist
            BoundaryFormatError: If the boundary file is malformed
            TriangulationSaveError: If the output cannot be written
        """
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        if output_path is None:
            output_path = TriangulationWriter.get_output_path(input_path)

        self.logger.info(
            "Starting boundary processing",
            input=str(input_path),
            output=str(output_path),
            max_workers=max_workers,
        )

        reader = BoundaryReader(input_path, self.config.input)
        reader.load()

        self.logger.info(
            "Boundaries loaded",
            polygons=reader.polygon_count,
            holes=reader.hole_count,
        )

        polygons: list[Polygon] = []
        for polygon in reader.iter_polygons():
            if len(polygon.outer) < 3:
                self.processing_logger.log_polygon_skipped(
                    polygon.name, f"outer boundary has {len(polygon.outer)} points"
                )
                continue
            polygons.append(polygon)

        writer = TriangulationWriter(output_path)

        if polygons:
            if max_workers is not None and max_workers > 1:
                results = self._process_parallel(polygons, max_workers, progress_callback)
            else:
                results = self._process_serial(polygons, progress_callback)
            for result in results:
                writer.add(result)
        else:
            self.logger.info("No polygons to process")

        writer.save()
        self.logger.info("Triangles saved", output=str(output_path), polygons=writer.count)

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            triangles=stats.triangles_emitted,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _handle_result(self, name: str, result: dict[str, Any]) -> Triangulation | None:
        """Record a worker result and return the triangulation on success."""
        stats = self.processing_logger.stats

        if "error" in result:
            self.processing_logger.log_polygon_error(
                name=result["polygon_name"],
                error=Exception(f"{result['error_type']}: {result['error']}"),
                traceback=result.get("traceback"),
            )
            return None

        triangulation = Triangulation.from_dict(result["triangulation"])
        duration_ms = result.get("duration_ms", 0.0)
        self.processing_logger.log_polygon_complete(
            name=name,
            triangle_count=triangulation.triangle_count,
            holes_joined=result["holes"],
            duration_ms=duration_ms,
        )
        stats.polygon_timings_ms.append(duration_ms)
        return triangulation

    def _process_serial(
        self,
        polygons: list[Polygon],
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> list[Triangulation]:
        """Triangulate polygons one after another in this process."""
        config_dict = self.config.triangulation.model_dump()
        results: list[Triangulation] = []
        total = len(polygons)

        for completed, polygon in enumerate(polygons, start=1):
            self.processing_logger.log_polygon_start(
                polygon.name, polygon.vertex_count, len(polygon.holes)
            )
            triangulation = self._handle_result(
                polygon.name, process_polygon(polygon.to_dict(), config_dict)
            )
            if triangulation is not None:
                results.append(triangulation)

            if progress_callback is not None:
                progress_callback(completed, total, polygon.name, triangulation is not None)

        return results

    def _process_parallel(
        self,
        polygons: list[Polygon],
        max_workers: int,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> list[Triangulation]:
        """Triangulate polygons in parallel using ProcessPoolExecutor.

        Args:
            polygons: Polygons to triangulate
            max_workers: Maximum worker processes
            progress_callback: Optional callback(completed, total, name, success)

        Returns:
            Successful triangulations, in completion order
        """
        stats = self.processing_logger.stats
        config_dict = self.config.triangulation.model_dump()
        results: list[Triangulation] = []

        self.logger.info(
            "Starting parallel processing",
            polygon_count=len(polygons),
            max_workers=max_workers,
        )

        total = len(polygons)
        completed = 0
        pending_futures: dict = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for polygon in polygons:
                future = executor.submit(process_polygon, polygon.to_dict(), config_dict)
                pending_futures[future] = polygon.name

            try:
                for future in as_completed(pending_futures):
                    name = pending_futures.pop(future)
                    triangulation = None

                    try:
                        triangulation = self._handle_result(name, future.result())
                    except Exception as e:
                        # Executor-level error
                        self.processing_logger.log_polygon_error(
                            name=name,
                            error=e,
                            traceback=traceback.format_exc(),
                        )

                    if triangulation is not None:
                        results.append(triangulation)

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, name, triangulation is not None)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return results
