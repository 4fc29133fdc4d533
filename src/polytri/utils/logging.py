"""Logging utilities for Polytri."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_ATTR = "_polytri_handler"


@dataclass
class ProcessingStats:
    """Statistics from processing run."""

    processed_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    triangles_emitted: int = 0
    holes_joined: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    polygon_timings_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None
    was_cancelled: bool = False
    cancelled_count: int = 0

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_polygon_time_ms(self) -> float | None:
        """Average time per processed polygon."""
        if not self.polygon_timings_ms:
            return None
        return sum(self.polygon_timings_ms) / len(self.polygon_timings_ms)


def _install(handler: logging.Handler, root_logger: logging.Logger) -> None:
    setattr(handler, _HANDLER_ATTR, True)
    root_logger.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by a previous call are replaced.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install(file_handler, root_logger)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _install(console_handler, root_logger)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polytri")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking processing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_polygon_start(self, name: str, vertex_count: int, hole_count: int) -> None:
        """Log start of polygon processing."""
        self._logger.debug(
            "Processing polygon",
            polygon=name,
            vertices=vertex_count,
            holes=hole_count,
        )

    def log_polygon_complete(
        self,
        name: str,
        triangle_count: int,
        holes_joined: int,
        duration_ms: float,
    ) -> None:
        """Log successful polygon triangulation."""
        self._logger.info(
            "Polygon triangulated",
            polygon=name,
            triangles=triangle_count,
            holes=holes_joined,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.processed_count += 1
        self._stats.triangles_emitted += triangle_count
        self._stats.holes_joined += holes_joined

    def log_polygon_skipped(self, name: str, reason: str) -> None:
        """Log skipped polygon."""
        self._logger.debug("Polygon skipped", polygon=name, reason=reason)
        self._stats.skipped_count += 1

    def log_polygon_error(
        self,
        name: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log polygon processing error."""
        self._logger.error(
            "Polygon triangulation failed",
            polygon=name,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((name, str(error)))

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
