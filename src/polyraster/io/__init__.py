"""Path source and bitmap I/O layer for polyraster.

This module handles reading path descriptions from files and writing
rendered bitmaps using Pillow.

Key responsibilities:
- Load path data from text files or SVG documents
- Write coverage bitmaps as grayscale PNG
- Build tinted side-by-side previews

Key classes:
- PathReader: Load path data
- BitmapWriter: Save bitmaps and previews
"""

from polyraster.io.reader import PathReader, extract_svg_path_data
from polyraster.io.writer import BitmapWriter, compose_preview, tint, to_image

__all__ = [
    "BitmapWriter",
    "PathReader",
    "compose_preview",
    "extract_svg_path_data",
    "tint",
    "to_image",
]
