"""Header tokenizer over an in-memory byte buffer."""

from __future__ import annotations

from pydantic import ValidationError

from pnmkit.errors import MalformedHeaderError
from pnmkit.models.formats import Format
from pnmkit.models.header import Header

WHITESPACE = b" \t\n\r\v\f"
_COMMENT = ord("#")


class TokenReader:
    """Cursor over a Netpbm byte buffer.

    Header tokens are whitespace separated and may be interleaved with
    ``#`` comments that run to the end of the line.
    """

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def next_token(self) -> bytes | None:
        """Next whitespace-delimited token, or None at end of buffer."""
        self._skip_blanks()
        start = self._pos
        data = self._data
        while self._pos < len(data) and data[self._pos] not in WHITESPACE and data[self._pos] != _COMMENT:
            self._pos += 1
        if self._pos == start:
            return None
        return data[start : self._pos]

    def skip_separator(self) -> None:
        """Consume the single whitespace byte between header and binary raster."""
        data = self._data
        if self._pos < len(data) and data[self._pos] == _COMMENT:
            self._skip_comment()
        elif self._pos < len(data) and data[self._pos] in WHITESPACE:
            self._pos += 1

    def remaining(self) -> bytes:
        return self._data[self._pos :]

    def _skip_blanks(self) -> None:
        data = self._data
        while self._pos < len(data):
            if data[self._pos] in WHITESPACE:
                self._pos += 1
            elif data[self._pos] == _COMMENT:
                self._skip_comment()
            else:
                break

    def _skip_comment(self) -> None:
        end = self._data.find(b"\n", self._pos)
        self._pos = len(self._data) if end < 0 else end + 1


def read_header(reader: TokenReader) -> Header:
    """Read magic, width, height and (gray/pixmap) max value in that order."""
    magic = reader.next_token()
    if magic is None:
        raise MalformedHeaderError("Missing magic token")
    fmt = Format.from_magic(magic.decode("ascii", errors="replace"))

    width = _read_int(reader, "width")
    height = _read_int(reader, "height")
    max_value = _read_int(reader, "max value") if fmt.kind.has_max_value else None

    try:
        return Header(format=fmt, width=width, height=height, max_value=max_value)
    except ValidationError as e:
        raise MalformedHeaderError(f"Invalid {fmt.magic} header: {e}") from e


def _read_int(reader: TokenReader, name: str) -> int:
    token = reader.next_token()
    if token is None:
        raise MalformedHeaderError(f"Missing {name}")
    if not token.isdigit():
        raise MalformedHeaderError(f"Non-numeric {name}: {token!r}")
    return int(token)
