"""Rendering orchestration for the parse, build and rasterize pipeline.

Key components:
- RenderResult: One rendered scale of a path
- ShapeRenderer: Main orchestrator class for rendering path data
"""

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from polyraster.config import PolyRasterSettings
from polyraster.core.builder import build
from polyraster.core.parser import parse_fragments
from polyraster.core.rasterizer import rasterize
from polyraster.domain import CoverageBitmap, RasterPolygon, ShapeSet
from polyraster.utils import RenderLogger, RenderStats, configure_logging


@dataclass(frozen=True)
class RenderResult:
    """Bitmap of a path rendered at one scale.

    Attributes:
        scale_x: Horizontal scale factor used
        scale_y: Vertical scale factor used
        polygon: Raster polygon the bitmap was rendered from
        bitmap: Rendered coverage bitmap
        duration_ms: Build and rasterization time in milliseconds
    """

    scale_x: float
    scale_y: float
    polygon: RasterPolygon
    bitmap: CoverageBitmap
    duration_ms: float


class ShapeRenderer:
    """Orchestrates rendering of path data at one or more scales.

    Manages the complete workflow:
    1. Parse the path data once into closed loops
    2. Build one raster polygon per configured scale
    3. Rasterize each polygon into a coverage bitmap
    4. Record timings and pixel counts

    Example:
        settings = PolyRasterSettings()
        renderer = ShapeRenderer(settings)
        results = renderer.render("M 0,0 H 32 V 32 H 0 Z")
        bitmap = results[0].bitmap
    """

    def __init__(self, config: PolyRasterSettings) -> None:
        """Initialize renderer with configuration.

        Args:
            config: Polyraster settings containing parser, raster and processing config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.render_logger = RenderLogger(self.logger)

    @property
    def stats(self) -> RenderStats:
        """Statistics accumulated over all render calls."""
        return self.render_logger.stats

    def parse(self, path_data: str | Sequence[str]) -> ShapeSet:
        """Parse path data with the configured trailing-subpath policy.

        Args:
            path_data: One path description, or several independent ones
                (such as the <path> elements of an SVG document), each
                parsed from a fresh cursor

        Raises:
            MalformedPathError: If the path data contains an invalid token
            InvalidStateError: If a coordinate precedes every command
        """
        fragments = [path_data] if isinstance(path_data, str) else path_data
        shape_set = parse_fragments(
            fragments,
            close_trailing=self.config.parser.close_trailing_subpath,
        )
        self.logger.info(
            "Path data parsed",
            fragments=len(fragments),
            shapes=len(shape_set),
            points=shape_set.point_count,
        )
        return shape_set

    def render(
        self,
        path_data: str | Sequence[str],
        progress_callback: Callable[[int, int, float], None] | None = None,
    ) -> list[RenderResult]:
        """Render path data at every configured scale.

        Args:
            path_data: Path description string, or independent fragments
            progress_callback: Optional callback(completed, total, scale)
                for progress updates

        Returns:
            One RenderResult per configured scale, in configuration order

        Raises:
            MalformedPathError: If the path data contains an invalid token
            InvalidStateError: If a coordinate precedes every command
        """
        stats = self.stats
        stats.start_time = time.time()

        shape_set = self.parse(path_data)
        results = self.render_shapes(shape_set, progress_callback=progress_callback)

        stats.end_time = time.time()
        self.logger.info(
            "Rendering complete",
            bitmaps=stats.rendered_count,
            pixels=stats.pixel_count,
            duration_seconds=round(stats.duration_seconds, 3),
        )
        return results

    def render_shapes(
        self,
        shape_set: ShapeSet,
        progress_callback: Callable[[int, int, float], None] | None = None,
    ) -> list[RenderResult]:
        """Render an already parsed shape set at every configured scale.

        Args:
            shape_set: Parsed closed loops
            progress_callback: Optional callback(completed, total, scale)

        Returns:
            One RenderResult per configured scale
        """
        raster = self.config.raster
        processing = self.config.processing
        scale_pairs = raster.scale_pairs()
        results: list[RenderResult] = []

        for index, (scale, (scale_x, scale_y)) in enumerate(
            zip(raster.scales, scale_pairs, strict=True), start=1
        ):
            start = time.perf_counter()
            self.render_logger.log_render_start(scale_x, scale_y)

            polygon = build(shape_set, scale_x, scale_y)
            bitmap = rasterize(
                polygon,
                max_workers=processing.max_workers,
                rows_per_task=processing.rows_per_task,
            )

            duration_ms = (time.perf_counter() - start) * 1000
            self.render_logger.log_render_complete(
                scale_x=scale_x,
                scale_y=scale_y,
                segments=len(polygon),
                width=bitmap.width,
                height=bitmap.height,
                duration_ms=duration_ms,
            )
            results.append(
                RenderResult(
                    scale_x=scale_x,
                    scale_y=scale_y,
                    polygon=polygon,
                    bitmap=bitmap,
                    duration_ms=duration_ms,
                )
            )

            if progress_callback is not None:
                progress_callback(index, len(scale_pairs), scale)

        return results
