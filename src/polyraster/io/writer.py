"""Bitmap writer for saving rendered coverage bitmaps.

This module provides the BitmapWriter class for writing coverage bitmaps
as grayscale PNG files, and helpers to build a tinted preview. The preview
blends a foreground and a background color by coverage, the way a display
shader would map a single-channel texture to screen colors.
"""

from collections.abc import Sequence
from pathlib import Path

from PIL import Image

from polyraster.domain import CoverageBitmap
from polyraster.exceptions import BitmapSaveError

RGB = tuple[int, int, int]

HALF_GREY: RGB = (128, 128, 128)
WHITE: RGB = (255, 255, 255)


def to_image(bitmap: CoverageBitmap) -> Image.Image:
    """Convert a coverage bitmap to an 8-bit grayscale Pillow image."""
    return Image.frombytes("L", bitmap.size, bitmap.data)


def tint(
    bitmap: CoverageBitmap,
    foreground: RGB = WHITE,
    background: RGB = HALF_GREY,
) -> Image.Image:
    """Blend two colors by coverage into an RGB image.

    Each channel is background + (foreground - background) * coverage / 255.

    Args:
        bitmap: Coverage bitmap
        foreground: Color of fully covered pixels
        background: Color of uncovered pixels

    Returns:
        RGB Pillow image the size of the bitmap
    """
    gray = to_image(bitmap)
    channels = [
        gray.point([round(bg + (fg - bg) * a / 255.0) for a in range(256)])
        for fg, bg in zip(foreground, background, strict=True)
    ]
    return Image.merge("RGB", channels)


def compose_preview(
    bitmaps: Sequence[CoverageBitmap],
    zoom: int = 4,
    margin: int = 4,
    foreground: RGB = WHITE,
    background: RGB = HALF_GREY,
) -> Image.Image:
    """Lay out tinted bitmaps side by side and magnify the result.

    Bitmaps are placed left to right, top-aligned, separated from each other
    and from the border by ``margin`` pixels. The canvas is then scaled by
    ``zoom`` with nearest-neighbour filtering so single pixels stay sharp.

    Args:
        bitmaps: Bitmaps to show, in order
        zoom: Integer magnification factor
        margin: Gap in bitmap pixels
        foreground: Color of fully covered pixels
        background: Color of uncovered pixels and the canvas

    Returns:
        RGB Pillow image

    Raises:
        ValueError: If no bitmaps are given or zoom is less than 1
    """
    if not bitmaps:
        raise ValueError("At least one bitmap is required for a preview")
    if zoom < 1:
        raise ValueError(f"Zoom must be at least 1, got {zoom}")

    width = sum(b.width for b in bitmaps) + margin * (len(bitmaps) + 1)
    height = max(b.height for b in bitmaps) + margin * 2
    canvas = Image.new("RGB", (width, height), background)

    x = margin
    for bitmap in bitmaps:
        if not bitmap.is_empty():
            canvas.paste(tint(bitmap, foreground, background), (x, margin))
        x += bitmap.width + margin

    if zoom == 1:
        return canvas
    return canvas.resize((width * zoom, height * zoom), Image.Resampling.NEAREST)


class BitmapWriter:
    """Writes coverage bitmaps and previews as PNG files.

    Example:
        writer = BitmapWriter(Path("shape.png"))
        writer.save(bitmap)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the bitmap writer.

        Args:
            output_path: Path where the image will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Destination of the written image."""
        return self._output_path

    def save(self, bitmap: CoverageBitmap) -> None:
        """Save a bitmap as an 8-bit grayscale PNG.

        Raises:
            BitmapSaveError: If the bitmap is empty or cannot be written
        """
        if bitmap.is_empty():
            raise BitmapSaveError(str(self._output_path), "bitmap has no pixels")
        self._save_image(to_image(bitmap))

    def save_preview(
        self,
        bitmaps: Sequence[CoverageBitmap],
        zoom: int = 4,
        margin: int = 4,
        foreground: RGB = WHITE,
        background: RGB = HALF_GREY,
    ) -> None:
        """Save a tinted side-by-side preview of one or more bitmaps.

        Raises:
            BitmapSaveError: If the preview cannot be built or written
        """
        try:
            image = compose_preview(bitmaps, zoom, margin, foreground, background)
        except ValueError as e:
            raise BitmapSaveError(str(self._output_path), str(e)) from e
        self._save_image(image)

    def _save_image(self, image: Image.Image) -> None:
        try:
            image.save(self._output_path, format="PNG")
        except OSError as e:
            raise BitmapSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(source_path: Path, suffix: str = "-raster") -> Path:
        """Generate output path next to the source file.

        Converts: logo.svg -> logo-raster.png
                  shape.txt -> shape-raster.png

        Args:
            source_path: Path data source file
            suffix: Suffix appended to the file stem

        Returns:
            PNG path with the suffix before the extension
        """
        return source_path.parent / f"{source_path.stem}{suffix}.png"

    @staticmethod
    def get_scaled_path(output_path: Path, scale: float) -> Path:
        """Generate a per-scale output path.

        Converts: logo-raster.png, 3.0 -> logo-raster-x3.png
                  logo-raster.png, 0.5 -> logo-raster-x0.5.png
        """
        return output_path.parent / f"{output_path.stem}-x{scale:g}{output_path.suffix}"
