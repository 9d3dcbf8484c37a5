"""Build the edge-segment form of a shape set.

Each closed loop of N points becomes N directed segments: the first runs
from the last point back to the first, the rest connect consecutive points.
Segments of all loops are concatenated into one flat tuple.
"""

import logging
from functools import reduce

from polyraster.domain import BoundingBox, Point, RasterPolygon, Segment, ShapeSet

logger = logging.getLogger(__name__)


def build(shape_set: ShapeSet, scale_x: float = 1.0, scale_y: float = 1.0) -> RasterPolygon:
    """Scale a shape set and convert it to a raster polygon.

    Zero or negative scales are accepted and give a degenerate or mirrored
    polygon.

    Args:
        shape_set: Parsed closed loops
        scale_x: Horizontal scale factor
        scale_y: Vertical scale factor

    Returns:
        RasterPolygon with all segments and the bounding box of the scaled points
    """
    segments: list[Segment] = []
    bbox = BoundingBox.empty()

    for shape in shape_set:
        scaled = [p.scaled(scale_x, scale_y) for p in shape]
        segments.extend(loop_segments(scaled))
        bbox = reduce(BoundingBox.extend, scaled, bbox)

    polygon = RasterPolygon(
        segments=tuple(segments),
        bbox=bbox,
        scale_x=scale_x,
        scale_y=scale_y,
    )
    logger.debug(
        "Built raster polygon: %d segments, extent %.2fx%.2f at scale (%g, %g)",
        len(polygon),
        polygon.width,
        polygon.height,
        scale_x,
        scale_y,
    )
    return polygon


def loop_segments(points: list[Point]) -> list[Segment]:
    """Connect the points of a closed loop into directed segments.

    Args:
        points: Loop points in order

    Returns:
        One segment per point, starting with last -> first
    """
    if not points:
        return []

    segments = []
    p0 = points[-1]
    for p1 in points:
        segments.append(Segment.between(p0, p1))
        p0 = p1
    return segments
