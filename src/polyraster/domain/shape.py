"""Core geometric types for parsed path data.

This module defines the types produced by the path parser:
- Point: A 2D point
- Shape: A closed polygonal loop
- ShapeSet: All loops of one path description, in order
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in path units
        y: Y coordinate in path units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def scaled(self, scale_x: float, scale_y: float) -> "Point":
        """Return a copy scaled componentwise."""
        return Point(self.x * scale_x, self.y * scale_y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True)
class Shape:
    """A closed polygonal loop.

    The last point is always treated as connected back to the first, so a
    triangle needs three points, not four.

    Attributes:
        points: Points of the loop in drawing order
    """

    points: tuple[Point, ...]

    @property
    def point_count(self) -> int:
        """Number of points (and therefore edges) in the loop."""
        return len(self.points)

    def is_empty(self) -> bool:
        """Check if the loop has no points."""
        return not self.points

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


@dataclass(frozen=True)
class ShapeSet:
    """Ordered collection of closed loops from one path description.

    Outer boundaries and holes are not distinguished; the even-odd rule
    resolves them when sampling.

    Attributes:
        shapes: Loops in the order their closing command was encountered
    """

    shapes: tuple[Shape, ...] = field(default_factory=tuple)

    @property
    def point_count(self) -> int:
        """Total number of points across all loops."""
        return sum(shape.point_count for shape in self.shapes)

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __getitem__(self, index: int) -> Shape:
        return self.shapes[index]
