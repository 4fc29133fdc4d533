"""Configuration settings for Polytri."""

from pathlib import Path

from pydantic import BaseModel, Field


class InputConfig(BaseModel):
    """Coordinate conversion applied to loaded boundaries.

    Conversion happens in this order: degrees to meters (if enabled), then
    offset, then scale.
    """

    degrees: bool = Field(
        default=False,
        description="Treat input as (longitude, latitude) degrees and project to meters",
    )
    offset_x: float = Field(
        default=0.0,
        description="Value subtracted from every X coordinate",
    )
    offset_y: float = Field(
        default=0.0,
        description="Value subtracted from every Y coordinate",
    )
    scale: float = Field(
        default=1.0,
        gt=0.0,
        description="Factor applied to coordinates after the offset",
    )

    def is_identity(self) -> bool:
        """Check if conversion leaves coordinates untouched."""
        return (
            not self.degrees
            and self.offset_x == 0.0
            and self.offset_y == 0.0
            and self.scale == 1.0
        )


class TriangulationConfig(BaseModel):
    """Configuration for hole joining and ear clipping."""

    normalize_winding: bool = Field(
        default=True,
        description="Reorient outer boundaries to CCW and holes to CW before joining",
    )
    verify_area: bool = Field(
        default=True,
        description="Check that triangle areas add up to the polygon area",
    )
    area_tolerance: float = Field(
        default=1e-6,
        ge=0.0,
        le=1.0,
        description="Maximum relative area deviation accepted by verification",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None or 1 = in process)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolytriSettings(BaseModel):
    """Main application settings."""

    input: InputConfig = Field(default_factory=InputConfig)
    triangulation: TriangulationConfig = Field(default_factory=TriangulationConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolytriSettings:
    """Get default application settings."""
    return PolytriSettings()
