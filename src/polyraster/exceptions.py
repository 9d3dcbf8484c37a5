"""Exception hierarchy for Polyraster."""


class PolyRasterError(Exception):
    """Base exception for all Polyraster errors."""

    pass


class PathError(PolyRasterError):
    """Errors related to path data parsing."""

    pass


class MalformedPathError(PathError):
    """Unrecognized token or bad parameters for a drawing command."""

    def __init__(
        self,
        token: str,
        reason: str,
        command: str | None = None,
        index: int | None = None,
    ) -> None:
        self.token = token
        self.reason = reason
        self.command = command
        self.index = index
        context = f" under command '{command}'" if command else ""
        position = f" at token {index}" if index is not None else ""
        super().__init__(f"Malformed path token '{token}'{context}{position}: {reason}")


class InvalidStateError(PathError):
    """Coordinate token found before any drawing command was given."""

    def __init__(self, token: str, index: int | None = None) -> None:
        self.token = token
        self.index = index
        position = f" at token {index}" if index is not None else ""
        super().__init__(
            f"Coordinate token '{token}'{position} appears before any drawing command"
        )


class AssetError(PolyRasterError):
    """Errors related to reading path sources or writing bitmaps."""

    pass


class PathLoadError(AssetError):
    """Error loading path data from a file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load path data from '{path}': {reason}")


class BitmapSaveError(AssetError):
    """Error saving a rendered bitmap."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save bitmap '{path}': {reason}")
