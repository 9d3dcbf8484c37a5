"""Configuration management for polyraster.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ParserConfig: Path data parsing settings
- RasterConfig: Scales to render
- ProcessingConfig: Rasterization loop settings
- PreviewConfig: Tinted preview settings
- LoggingConfig: Logging settings
- PolyRasterSettings: Main application settings
"""

from polyraster.config.settings import (
    LoggingConfig,
    ParserConfig,
    PolyRasterSettings,
    PreviewConfig,
    ProcessingConfig,
    RasterConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "ParserConfig",
    "PolyRasterSettings",
    "PreviewConfig",
    "ProcessingConfig",
    "RasterConfig",
    "get_default_settings",
]
