"""Edge-segment representation of a scaled shape set.

This module defines the types consumed by the coverage sampler:
- Segment: A directed polygon edge with its precomputed direction vector
- BoundingBox: Axis-aligned extents of all scaled points
- RasterPolygon: All edges of a shape set plus its bounding box
"""

import math
from dataclasses import dataclass
from typing import Any

from polyraster.domain.shape import Point


@dataclass(frozen=True, slots=True)
class Segment:
    """A directed edge from p0 to p1.

    Attributes:
        p0: Start point
        p1: End point
        v: Direction vector (p1 - p0)
        length_sq: Squared length of v, zero for degenerate edges
    """

    p0: Point
    p1: Point
    v: tuple[float, float]
    length_sq: float

    @classmethod
    def between(cls, p0: Point, p1: Point) -> "Segment":
        """Create a segment and precompute its direction and squared length.

        Args:
            p0: Start point
            p1: End point

        Returns:
            Segment instance
        """
        dx = p1.x - p0.x
        dy = p1.y - p0.y
        return cls(p0=p0, p1=p1, v=(dx, dy), length_sq=dx * dx + dy * dy)

    def is_degenerate(self) -> bool:
        """Check if both endpoints coincide."""
        return self.length_sq == 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Only the endpoints are stored; derived values are recomputed.
        """
        return {"p0": self.p0.to_dict(), "p1": self.p1.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary."""
        return cls.between(Point.from_dict(data["p0"]), Point.from_dict(data["p1"]))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Built by folding points into ``empty()`` with ``extend``. Each axis keeps its
    own min and max, and every point is compared against both.

    Attributes:
        min_x: Smallest x coordinate
        min_y: Smallest y coordinate
        max_x: Largest x coordinate
        max_y: Largest y coordinate
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def empty(cls) -> "BoundingBox":
        """Return the identity box that any point extends."""
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    def is_empty(self) -> bool:
        """Check if no point has been folded into the box."""
        return self.min_x > self.max_x or self.min_y > self.max_y

    def extend(self, point: Point) -> "BoundingBox":
        """Return the smallest box containing this box and the point."""
        return BoundingBox(
            min_x=min(self.min_x, point.x),
            min_y=min(self.min_y, point.y),
            max_x=max(self.max_x, point.x),
            max_y=max(self.max_y, point.y),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y), zeros when empty."""
        if self.is_empty():
            return (0.0, 0.0, 0.0, 0.0)
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class RasterPolygon:
    """Flat edge list of one shape set at one scale.

    Segments of all loops are concatenated without loop markers; the
    sampler only needs the union of edges.

    The raster size is taken from the maximum extents of the bounding box,
    not from max - min. Input coordinates are expected to be non-negative
    and anchored near the origin.

    Attributes:
        segments: All directed edges
        bbox: Bounding box of all scaled points
        scale_x: Horizontal scale the polygon was built with
        scale_y: Vertical scale the polygon was built with
    """

    segments: tuple[Segment, ...]
    bbox: BoundingBox
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def width(self) -> float:
        """Unrounded raster width (max x extent)."""
        return self.bbox.to_tuple()[2]

    @property
    def height(self) -> float:
        """Unrounded raster height (max y extent)."""
        return self.bbox.to_tuple()[3]

    @property
    def pixel_width(self) -> int:
        """Raster width rounded to the nearest whole pixel."""
        return _round_extent(self.width)

    @property
    def pixel_height(self) -> int:
        """Raster height rounded to the nearest whole pixel."""
        return _round_extent(self.height)

    def __len__(self) -> int:
        return len(self.segments)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the polygon
        """
        return {
            "segments": [s.to_dict() for s in self.segments],
            "bbox": list(self.bbox.to_tuple()) if not self.bbox.is_empty() else None,
            "scale_x": self.scale_x,
            "scale_y": self.scale_y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RasterPolygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a polygon

        Returns:
            RasterPolygon instance
        """
        bbox = (
            BoundingBox(*data["bbox"])
            if data["bbox"] is not None
            else BoundingBox.empty()
        )
        return cls(
            segments=tuple(Segment.from_dict(s) for s in data["segments"]),
            bbox=bbox,
            scale_x=data.get("scale_x", 1.0),
            scale_y=data.get("scale_y", 1.0),
        )


def _round_extent(value: float) -> int:
    return max(0, math.floor(value + 0.5))
