"""Configuration management for polytri.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- InputConfig: Coordinate conversion for loaded boundaries
- TriangulationConfig: Winding normalization and area verification
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- PolytriSettings: Main application settings
"""

from polytri.config.settings import (
    InputConfig,
    LoggingConfig,
    PolytriSettings,
    ProcessingConfig,
    TriangulationConfig,
    get_default_settings,
)

__all__ = [
    "InputConfig",
    "LoggingConfig",
    "PolytriSettings",
    "ProcessingConfig",
    "TriangulationConfig",
    "get_default_settings",
]
