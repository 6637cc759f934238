"""Exception hierarchy. Decode errors are ValueErrors, bounds errors IndexErrors."""

from __future__ import annotations


class PnmError(Exception):
    """Base class for every pnmkit error."""


class DecodeError(PnmError, ValueError):
    """A byte stream could not be decoded into a grid."""


class MalformedHeaderError(DecodeError):
    """Magic, width/height or max value token missing or not numeric."""


class UnsupportedMagicError(DecodeError):
    """The magic token names no known format."""

    def __init__(self, magic: str) -> None:
        super().__init__(f"Unsupported magic token: {magic!r}")
        self.magic = magic


class TruncatedDataError(DecodeError):
    """The raster holds fewer samples than the header declares."""

    def __init__(self, expected: int, actual: int, unit: str = "samples") -> None:
        super().__init__(f"Truncated raster: expected {expected} {unit}, got {actual}")
        self.expected = expected
        self.actual = actual


class MalformedSampleError(DecodeError):
    """A raster token is not a valid sample for the format."""


class OutOfBoundsError(PnmError, IndexError):
    """Direct pixel access outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Pixel ({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y
