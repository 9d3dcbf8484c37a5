"""Coverage bitmap produced by the rasterizer.

A coverage bitmap is a single-channel, row-major byte buffer where 0 means
the pixel is fully outside the polygon and 255 means fully inside.
"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class CoverageBitmap:
    """An 8-bit single-channel coverage image.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: Row-major pixel bytes, one byte per pixel
    """

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid bitmap size {self.width}x{self.height}")
        if len(self.data) != self.width * self.height:
            raise ValueError(
                f"Bitmap data has {len(self.data)} bytes, "
                f"expected {self.width * self.height}"
            )

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return (self.width, self.height)

    def is_empty(self) -> bool:
        """Check if the bitmap has no pixels."""
        return self.width == 0 or self.height == 0

    def pixel(self, x: int, y: int) -> int:
        """Get the coverage byte at (x, y).

        Raises:
            IndexError: If the coordinate is outside the bitmap
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} bitmap")
        return self.data[y * self.width + x]

    def rows(self) -> Iterator[bytes]:
        """Iterate over rows from top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield self.data[start : start + self.width]
