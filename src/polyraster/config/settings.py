"""Configuration settings for Polyraster."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

RGB = tuple[int, int, int]


class ParserConfig(BaseModel):
    """Configuration for path data parsing."""

    close_trailing_subpath: bool = Field(
        default=True,
        description="Close a final subpath that has no trailing Z (False drops it)",
    )


class RasterConfig(BaseModel):
    """Configuration for polygon building and rasterization scales."""

    scales: list[float] = Field(
        default_factory=lambda: [1.0, 3.0],
        min_length=1,
        description="Uniform scale factors to render, one bitmap per scale",
    )
    scale_x: float = Field(
        default=1.0,
        description="Extra horizontal multiplier applied on top of each scale",
    )
    scale_y: float = Field(
        default=1.0,
        description="Extra vertical multiplier applied on top of each scale",
    )

    @field_validator("scales")
    @classmethod
    def _drop_duplicate_scales(cls, value: list[float]) -> list[float]:
        # One bitmap per distinct scale, first occurrence wins
        return list(dict.fromkeys(value))

    def scale_pairs(self) -> list[tuple[float, float]]:
        """Get the (scale_x, scale_y) pair for every configured scale.

        Returns:
            List of per-axis scale factors in configuration order
        """
        return [(s * self.scale_x, s * self.scale_y) for s in self.scales]


class ProcessingConfig(BaseModel):
    """Configuration for the rasterization loop."""

    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Max worker processes for row bands (None or 1 = sequential)",
    )
    rows_per_task: int = Field(
        default=32,
        ge=1,
        le=4096,
        description="Number of bitmap rows handed to a worker at once",
    )


class PreviewConfig(BaseModel):
    """Configuration for the tinted preview image."""

    zoom: int = Field(
        default=4,
        ge=1,
        le=32,
        description="Nearest-neighbour upscale factor of the preview",
    )
    margin: int = Field(
        default=4,
        ge=0,
        le=256,
        description="Gap in bitmap pixels between images and around the border",
    )
    foreground: RGB = Field(
        default=(255, 255, 255),
        description="Color of fully covered pixels",
    )
    background: RGB = Field(
        default=(128, 128, 128),
        description="Color of uncovered pixels",
    )

    @field_validator("foreground", "background")
    @classmethod
    def _check_channels(cls, value: RGB) -> RGB:
        if any(not 0 <= channel <= 255 for channel in value):
            raise ValueError(f"color channels must be in 0..255, got {value}")
        return value


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


class PolyRasterSettings(BaseModel):
    """Main application settings."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    raster: RasterConfig = Field(default_factory=RasterConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyRasterSettings:
    """Get default application settings."""
    return PolyRasterSettings()
