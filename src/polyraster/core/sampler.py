"""Antialiased coverage estimation for a single sample point.

Coverage is estimated without supersampling by combining two scans over
the polygon edges:

- An even-odd ray cast decides whether the sample is inside the polygon
- The distance to the nearest edge decides how far the pixel square
  overlaps that edge

A pixel is modelled as a unit square around the sample. Its "radius" is
half a side (0.5) towards a side and half a diagonal (0.5 * sqrt(2))
towards a corner, so the reference distance is blended between the two
using the slope of the vector from the nearest edge point to the sample.

All functions are pure and safe to call from worker processes.
"""

import math

from polyraster.domain import RasterPolygon, Segment

HALF_PIXEL = 0.5
DIAGONAL_OFFSET = math.sqrt(2.0) - 1.0


def sample_coverage(pixel_x: int, pixel_y: int, polygon: RasterPolygon) -> float:
    """Estimate the coverage of the polygon over one pixel.

    The pixel is sampled at its center, (pixel_x + 0.5, pixel_y + 0.5).

    Args:
        pixel_x: Pixel column
        pixel_y: Pixel row
        polygon: Polygon to sample

    Returns:
        Coverage in [0.0, 1.0]; 0.5 when the pixel center lies on an edge
    """
    return coverage_at(pixel_x + HALF_PIXEL, pixel_y + HALF_PIXEL, polygon)


def coverage_at(x: float, y: float, polygon: RasterPolygon) -> float:
    """Estimate the coverage of a pixel square centered on (x, y).

    Args:
        x: Sample x coordinate
        y: Sample y coordinate
        polygon: Polygon to sample

    Returns:
        Coverage in [0.0, 1.0], or 0.0 for a polygon without segments
    """
    if not polygon.segments:
        return 0.0

    inside, distance, slope = scan_segments(x, y, polygon.segments)
    return estimate_coverage(inside, distance, slope)


def point_in_polygon(x: float, y: float, polygon: RasterPolygon) -> bool:
    """Determine if a point is inside the polygon using the even-odd rule.

    Holes need no special handling: an inner loop in the same segment list
    adds a second crossing and flips the result back to outside.

    Args:
        x: X coordinate of the point
        y: Y coordinate of the point
        polygon: Polygon to test

    Returns:
        True if point is inside polygon, False otherwise
    """
    inside = False
    for segment in polygon.segments:
        if _crosses_ray(x, y, segment):
            inside = not inside
    return inside


def nearest_point_on_segment(x: float, y: float, segment: Segment) -> tuple[float, float]:
    """Find the closest point on a segment to (x, y).

    Projects the point onto the line through the segment and clamps the
    projection to the endpoints. A degenerate segment projects to p0.

    Args:
        x: X coordinate of the point
        y: Y coordinate of the point
        segment: Segment to project onto

    Returns:
        Tuple (nx, ny) of the nearest point on the segment
    """
    p0 = segment.p0
    vx, vy = segment.v

    if segment.length_sq == 0.0:
        return p0.x, p0.y

    t = ((x - p0.x) * vx + (y - p0.y) * vy) / segment.length_sq
    if t <= 0.0:
        return p0.x, p0.y
    if t >= 1.0:
        return segment.p1.x, segment.p1.y
    return p0.x + vx * t, p0.y + vy * t


def scan_segments(
    x: float, y: float, segments: tuple[Segment, ...]
) -> tuple[bool, float, float]:
    """Run the inside test and nearest-edge search in one pass.

    Args:
        x: Sample x coordinate
        y: Sample y coordinate
        segments: Polygon edges

    Returns:
        Tuple (inside, nearest_distance, slope) where slope is
        min(|dx|, |dy|) / max(|dx|, |dy|) of the offset from the nearest
        edge point to the sample, in [0, 1]
    """
    inside = False
    nearest_distance = math.inf
    slope = 0.0

    for segment in segments:
        if _crosses_ray(x, y, segment):
            inside = not inside

        nx, ny = nearest_point_on_segment(x, y, segment)
        dx = abs(x - nx)
        dy = abs(y - ny)
        distance = math.hypot(dx, dy)

        if distance < nearest_distance:
            nearest_distance = distance
            if dx > dy:
                slope = dy / dx
            else:
                slope = dx / dy if dy != 0.0 else 0.0

    return inside, nearest_distance, slope


def estimate_coverage(inside: bool, nearest_distance: float, slope: float) -> float:
    """Map an inside flag and nearest-edge distance to pixel coverage.

    Args:
        inside: Whether the sample is inside the polygon
        nearest_distance: Distance from the sample to the nearest edge
        slope: Direction weight, 0 towards a pixel side, 1 towards a corner

    Returns:
        Coverage clamped to [0.0, 1.0]
    """
    base_distance = HALF_PIXEL * (1.0 + DIAGONAL_OFFSET * slope)
    ratio = nearest_distance / base_distance

    if inside:
        coverage = (1.0 + ratio) / 2.0
    else:
        coverage = (1.0 - ratio) / 2.0

    return min(1.0, max(0.0, coverage))


def _crosses_ray(x: float, y: float, segment: Segment) -> bool:
    """Check if the rightward horizontal ray from (x, y) crosses the segment."""
    p0 = segment.p0
    if (p0.y > y) == (segment.p1.y > y):
        return False

    # Segment straddles y, so v[1] is never zero here
    vx, vy = segment.v
    intersect_x = p0.x + vx * ((y - p0.y) / vy)
    return x < intersect_x
