"""Polyraster - Rasterize straight-line vector paths into coverage bitmaps.

Polyraster is a library and CLI tool that parses the line-only subset of SVG
path data (M, L, H, V and Z commands, absolute or relative) into closed
polygons and renders them into antialiased single-channel bitmaps at any
scale, without supersampling.

Example:
    $ polyraster logo.svg --scale 1 --scale 3

This will create logo-raster.png with the shape rendered at 1x and 3x.
"""

__version__ = "0.1.0"
__author__ = "Polyraster contributors"

__all__ = ["__author__", "__version__"]
