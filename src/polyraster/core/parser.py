"""Parser for the line-only subset of SVG path data.

Supports the drawing commands that describe straight edges:

- M/m: move to (starts a new subpath)
- L/l: line to
- H/h: horizontal line to (x only)
- V/v: vertical line to (y only)
- Z/z: close the current subpath

Uppercase commands take absolute coordinates, lowercase commands take
coordinates relative to the current cursor. Coordinates that follow a
command without a new command letter repeat the previous command, as in
SVG. Curve and arc commands are not supported; flatten them to lines
before parsing.

Tokens must be separated by whitespace. A coordinate token is either a
single number ("12.5") or a comma-joined pair ("12.5,-3").
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from polyraster.domain import Point, Shape, ShapeSet
from polyraster.exceptions import InvalidStateError, MalformedPathError

logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
COORDINATE_RE = re.compile(rf"^({_NUMBER})(?:,({_NUMBER}))?$")

DRAWING_COMMANDS = frozenset("MmLlHhVv")
CLOSE_COMMANDS = frozenset("Zz")


@dataclass
class _ParseState:
    """Accumulator threaded through a single parse call."""

    cursor_x: float = 0.0
    cursor_y: float = 0.0
    command: str | None = None
    current: list[Point] = field(default_factory=list)
    shapes: list[Shape] = field(default_factory=list)

    def close_subpath(self) -> None:
        if self.current:
            self.shapes.append(Shape(points=tuple(self.current)))
            self.current = []

    def emit_cursor(self) -> None:
        self.current.append(Point(self.cursor_x, self.cursor_y))


def parse(command_string: str, close_trailing: bool = True) -> ShapeSet:
    """Parse path data into closed polygonal loops.

    Args:
        command_string: Whitespace-separated path data (an SVG "d" attribute
            restricted to M, L, H, V and Z commands)
        close_trailing: Whether a final subpath without a closing Z is kept
            as a closed loop (True) or dropped (False)

    Returns:
        ShapeSet with one Shape per closed subpath, in input order

    Raises:
        MalformedPathError: If a token is not a supported command or
            coordinate, or a command gets the wrong number of coordinates
        InvalidStateError: If a coordinate appears before any command

    Examples:
        >>> shapes = parse("M 0,0 L 10,0 L 10,10 Z")
        >>> shapes[0].point_count
        3
        >>> parse("M 5,5 l 1,1 z")[0].points[1]
        Point(x=6.0, y=6.0)
    """
    state = _ParseState()

    for index, token in enumerate(command_string.split()):
        if token in DRAWING_COMMANDS:
            if token in "Mm":
                # Every subpath is filled as a closed loop, even without Z
                state.close_subpath()
            state.command = token
        elif token in CLOSE_COMMANDS:
            state.close_subpath()
        else:
            _apply_coordinates(state, token, index)

    if state.current:
        if close_trailing:
            logger.debug(
                "Closing trailing subpath without Z (%d points)", len(state.current)
            )
            state.close_subpath()
        else:
            logger.debug(
                "Dropping trailing subpath without Z (%d points)", len(state.current)
            )

    shape_set = ShapeSet(shapes=tuple(state.shapes))
    logger.debug(
        "Parsed path data: %d shapes, %d points", len(shape_set), shape_set.point_count
    )
    return shape_set


def parse_fragments(fragments: Iterable[str], close_trailing: bool = True) -> ShapeSet:
    """Parse several independent path descriptions into one shape set.

    Each fragment is parsed with a fresh cursor at the origin and no active
    command, the way every <path> element of an SVG document starts. A
    leading relative "m" in a fragment is therefore relative to (0, 0), and
    the trailing-subpath policy applies to the end of every fragment.

    Args:
        fragments: Path descriptions in drawing order
        close_trailing: Whether an unclosed final subpath of a fragment is
            kept as a closed loop (True) or dropped (False)

    Returns:
        ShapeSet with the shapes of all fragments, in order

    Raises:
        MalformedPathError: If a fragment contains an invalid token
        InvalidStateError: If a fragment has a coordinate before any command
    """
    shapes: list[Shape] = []
    for fragment in fragments:
        shapes.extend(parse(fragment, close_trailing=close_trailing))
    return ShapeSet(shapes=tuple(shapes))


def _apply_coordinates(state: _ParseState, token: str, index: int) -> None:
    """Apply one coordinate token under the active command."""
    match = COORDINATE_RE.match(token)
    if match is None:
        raise MalformedPathError(
            token,
            "unsupported command or invalid coordinate",
            command=state.command,
            index=index,
        )

    if state.command is None:
        raise InvalidStateError(token, index=index)

    first = float(match.group(1))
    second = float(match.group(2)) if match.group(2) is not None else None
    command = state.command
    relative = command.islower()
    kind = command.upper()

    if kind in ("M", "L"):
        if second is None:
            raise MalformedPathError(
                token, "expected an x,y coordinate pair", command=command, index=index
            )
        if relative:
            state.cursor_x += first
            state.cursor_y += second
        else:
            state.cursor_x = first
            state.cursor_y = second
    else:
        if second is not None:
            raise MalformedPathError(
                token, "expected a single coordinate", command=command, index=index
            )
        if kind == "H":
            state.cursor_x = state.cursor_x + first if relative else first
        else:
            state.cursor_y = state.cursor_y + first if relative else first

    state.emit_cursor()
