"""Command-line interface for polyraster.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Path data from text files, SVG documents or inline
- Rendering at several scales in one run
- Tinted preview or raw grayscale output
- Detailed error reporting for malformed path data
"""

from polyraster.cli.app import cli, main

__all__ = ["cli", "main"]
