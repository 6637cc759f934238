"""Tests for header parsing and the Header model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pnmkit import DecodeError, Format, MalformedHeaderError, UnsupportedMagicError, decode
from pnmkit.codec.tokens import TokenReader, read_header
from pnmkit.models.header import Header


def test_read_header_order():
    reader = TokenReader(b"P3\n4 5\n1000\nrest")
    header = read_header(reader)
    assert header == Header(format=Format.P3, width=4, height=5, max_value=1000)
    assert header.sample_count == 60


def test_bitmap_header_has_no_max_value():
    header = read_header(TokenReader(b"P4 7 3 \x00"))
    assert header.max_value is None
    assert header.to_bytes() == b"P4\n7 3\n"


def test_header_serialization():
    header = Header(format=Format.P2, width=2, height=1, max_value=15)
    assert header.to_bytes() == b"P2\n2 1\n15\n"


def test_header_model_rejects_missing_max_value():
    with pytest.raises(ValidationError):
        Header(format=Format.P2, width=2, height=1)


@pytest.mark.parametrize(
    "stream",
    [
        b"",
        b"   \n# only a comment\n",
        b"P1\n3\n",
        b"P1\nx 2\n1 0 1\n",
        b"P1\n-3 2\n",
        b"P2\n2 2\n",
        b"P2\n2 2\nmax\n",
        b"P1\n0 2\n",
        b"P2\n2 2\n0\n",
        b"P2\n2 2\n70000\n",
    ],
)
def test_malformed_header(stream):
    with pytest.raises(MalformedHeaderError):
        decode(stream)


@pytest.mark.parametrize("magic", [b"P7", b"PX", b"GIF89a", b"p1"])
def test_unsupported_magic(magic):
    with pytest.raises(UnsupportedMagicError) as exc:
        decode(magic + b"\n1 1\n1\n")
    assert exc.value.magic == magic.decode()


def test_decode_errors_share_a_base():
    for stream in (b"", b"P9\n", b"P1\n2 2\n1\n"):
        with pytest.raises(DecodeError):
            decode(stream)


def test_format_from_magic():
    assert Format.from_magic("P6") is Format.P6
    assert Format.P6.kind.channels == 3
    assert Format.P1.raw is Format.P4
    assert Format.P5.plain is Format.P2
    assert Format.P4.is_binary and not Format.P1.is_binary
