"""Domain models for polyraster.

This module contains the core domain models representing parsed paths,
their edge-segment form and the rendered bitmap. All models are:

- Immutable (using frozen dataclasses)
- Serializable for inter-process communication (parallel rasterization)

Key classes:
- Point: A 2D point
- Shape: A closed polygonal loop
- ShapeSet: All loops of one path description
- Segment: A directed edge with precomputed direction and squared length
- BoundingBox: Axis-aligned extents
- RasterPolygon: Flat segment list plus bounding box, ready to sample
- CoverageBitmap: 8-bit single-channel coverage image
"""

from polyraster.domain.bitmap import CoverageBitmap
from polyraster.domain.polygon import BoundingBox, RasterPolygon, Segment
from polyraster.domain.shape import Point, Shape, ShapeSet

__all__: list[str] = [
    # Path data
    "Point",
    "Shape",
    "ShapeSet",
    # Edge form
    "Segment",
    "BoundingBox",
    "RasterPolygon",
    # Output
    "CoverageBitmap",
]
