"""Path data reader for loading path descriptions from files.

This module provides the PathReader class for loading path data either
from a plain text file holding the path string, or from the "d" attributes
of the <path> elements of an SVG document.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from polyraster.exceptions import PathLoadError

SVG_SUFFIXES = frozenset({".svg"})


class PathReader:
    """Loads path data from text or SVG files.

    Example:
        reader = PathReader(Path("logo.svg"))
        reader.load()
        print(reader.fragments)
    """

    def __init__(self, source_path: Path) -> None:
        """Initialize the path reader.

        Args:
            source_path: Path to a text or SVG file
        """
        self._source_path = source_path
        self._fragments: list[str] | None = None

    def load(self) -> None:
        """Load the path data.

        Raises:
            FileNotFoundError: If the file does not exist
            PathLoadError: If the file cannot be decoded or holds no path data
        """
        if not self._source_path.exists():
            raise FileNotFoundError(f"Path file not found: {self._source_path}")

        try:
            text = self._source_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise PathLoadError(str(self._source_path), f"not UTF-8 text ({e})") from e

        if self.is_svg:
            fragments = extract_svg_path_data(text, str(self._source_path))
        else:
            fragments = [text] if text.strip() else []

        if not fragments:
            raise PathLoadError(str(self._source_path), "no path data found")
        self._fragments = fragments

    @property
    def is_svg(self) -> bool:
        """Whether the source is read as an SVG document."""
        return self._source_path.suffix.lower() in SVG_SUFFIXES

    @property
    def format(self) -> str:
        """Return source format.

        Returns:
            'SVG' for SVG documents, 'text' otherwise
        """
        return "SVG" if self.is_svg else "text"

    @property
    def fragments(self) -> list[str]:
        """Return the loaded path descriptions, one per <path> element.

        A text source yields a single fragment. Each fragment starts from
        its own cursor at the origin and must be parsed separately.

        Raises:
            RuntimeError: If the source has not been loaded yet
        """
        if self._fragments is None:
            raise RuntimeError("Path data not loaded. Call load() first.")
        return list(self._fragments)

    @property
    def path_data(self) -> str:
        """Return all fragments joined by newlines, for display or logging.

        Raises:
            RuntimeError: If the source has not been loaded yet
        """
        return "\n".join(self.fragments)

    @property
    def path_count(self) -> int:
        """Number of path elements the data was collected from.

        Raises:
            RuntimeError: If the source has not been loaded yet
        """
        return len(self.fragments)

    def close(self) -> None:
        """Release the loaded data."""
        self._fragments = None

    def __enter__(self) -> "PathReader":
        self.load()
        return self

    def __exit__(self, *_: object) -> None:
        self.close()


def extract_svg_path_data(document: str, source: str = "<string>") -> list[str]:
    """Collect the "d" attribute of every <path> element in an SVG document.

    Elements are visited in document order. Namespaced and plain tags are
    both accepted.

    Args:
        document: SVG document text
        source: Name used in error messages

    Returns:
        List of non-empty "d" attribute values

    Raises:
        PathLoadError: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise PathLoadError(source, f"invalid SVG document ({e})") from e

    fragments = []
    for element in root.iter():
        if element.tag.rsplit("}", 1)[-1] != "path":
            continue
        data = element.get("d", "").strip()
        if data:
            fragments.append(data)
    return fragments
