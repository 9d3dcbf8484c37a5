"""Core processing algorithms for polyraster.

This module contains the core algorithms for:

- Path data parsing (line-only SVG commands into closed loops)
- Segment building (scaled loops into directed edges and a bounding box)
- Coverage sampling (even-odd inside test plus nearest-edge distance)
- Rasterization (per-pixel sampling into an 8-bit buffer)

The parser, builder, sampler and rasterizer are pure functions, safe for
use in worker processes.

Key functions:
- parse: Parse path data into a ShapeSet
- build: Convert a ShapeSet at a scale into a RasterPolygon
- sample_coverage: Estimate the coverage of one pixel
- point_in_polygon: Even-odd inside test
- rasterize: Render a RasterPolygon into a CoverageBitmap

Key classes:
- ShapeRenderer: Renders path data at every configured scale
"""

from polyraster.core.builder import build, loop_segments
from polyraster.core.parser import parse, parse_fragments
from polyraster.core.rasterizer import rasterize, rasterize_rows
from polyraster.core.renderer import RenderResult, ShapeRenderer
from polyraster.core.sampler import (
    coverage_at,
    estimate_coverage,
    nearest_point_on_segment,
    point_in_polygon,
    sample_coverage,
)

__all__ = [
    # Renderer classes
    "RenderResult",
    "ShapeRenderer",
    # Pipeline functions
    "build",
    "coverage_at",
    "estimate_coverage",
    "loop_segments",
    "nearest_point_on_segment",
    "parse",
    "parse_fragments",
    "point_in_polygon",
    "rasterize",
    "rasterize_rows",
    "sample_coverage",
]
