"""Rasterization of a polygon into a coverage bitmap.

Every pixel inside the polygon's rounded extents is sampled independently,
so rows can be split into bands and rendered by worker processes without
any locking. Each band writes a disjoint slice of the output buffer.

Key components:
- rasterize_rows: Top-level picklable function for one band of rows
- rasterize: Render a whole polygon, sequentially or in parallel
"""

import logging
import math
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Any

from polyraster.core.sampler import sample_coverage
from polyraster.domain import CoverageBitmap, RasterPolygon

logger = logging.getLogger(__name__)

DEFAULT_ROWS_PER_TASK = 32


def coverage_to_byte(coverage: float) -> int:
    """Quantize a coverage value in [0, 1] to 0..255."""
    return math.floor(coverage * 255.0)


def _render_rows(
    polygon: RasterPolygon, width: int, row_start: int, row_end: int
) -> bytearray:
    band = bytearray(width * (row_end - row_start))
    offset = 0
    for y in range(row_start, row_end):
        for x in range(width):
            band[offset] = coverage_to_byte(sample_coverage(x, y, polygon))
            offset += 1
    return band


def rasterize_rows(
    polygon_dict: dict[str, Any], width: int, row_start: int, row_end: int
) -> bytes:
    """Render a band of rows of a serialized polygon.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        polygon_dict: Serialized polygon (from RasterPolygon.to_dict())
        width: Bitmap width in pixels
        row_start: First row to render
        row_end: Row after the last row to render

    Returns:
        Row-major coverage bytes for rows [row_start, row_end)
    """
    polygon = RasterPolygon.from_dict(polygon_dict)
    return bytes(_render_rows(polygon, width, row_start, row_end))


def rasterize(
    polygon: RasterPolygon,
    max_workers: int | None = None,
    rows_per_task: int = DEFAULT_ROWS_PER_TASK,
) -> CoverageBitmap:
    """Render a polygon into an 8-bit coverage bitmap.

    The bitmap covers x in [0, round(width)) and y in [0, round(height)),
    with each byte set to floor(coverage * 255).

    Args:
        polygon: Polygon to render
        max_workers: Worker processes for row bands (None or 1 = sequential)
        rows_per_task: Rows per band when rendering in parallel

    Returns:
        CoverageBitmap with the rendered pixels
    """
    width = polygon.pixel_width
    height = polygon.pixel_height

    if max_workers is None or max_workers <= 1 or height <= rows_per_task:
        data = _render_rows(polygon, width, 0, height)
    else:
        data = _rasterize_parallel(polygon, width, height, max_workers, rows_per_task)

    logger.debug(
        "Rasterized %dx%d bitmap from %d segments", width, height, len(polygon)
    )
    return CoverageBitmap(width=width, height=height, data=bytes(data))


def _rasterize_parallel(
    polygon: RasterPolygon,
    width: int,
    height: int,
    max_workers: int,
    rows_per_task: int,
) -> bytearray:
    """Render row bands in worker processes into one preallocated buffer."""
    data = bytearray(width * height)
    polygon_dict = polygon.to_dict()

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(
                rasterize_rows,
                polygon_dict,
                width,
                row_start,
                min(row_start + rows_per_task, height),
            ): row_start
            for row_start in range(0, height, rows_per_task)
        }

        try:
            for future in as_completed(futures):
                row_start = futures[future]
                band = future.result()
                offset = row_start * width
                data[offset : offset + len(band)] = band
        except KeyboardInterrupt:
            logger.info("Rasterization cancelled, dropping pending row bands")
            executor.shutdown(wait=True, cancel_futures=True)
            raise

    return data
