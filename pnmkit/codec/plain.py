"""ASCII rasters (P1, P2, P3) — whitespace-separated decimal tokens, row-major.

Decoding treats everything after the header as one flat token stream, so
rows may wrap or share physical lines. Encoding writes one grid row per line.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pnmkit.codec.registry import decoder, encoder
from pnmkit.codec.tokens import TokenReader
from pnmkit.core.grid import Grid
from pnmkit.errors import MalformedSampleError, TruncatedDataError
from pnmkit.models.formats import Format, SampleKind
from pnmkit.models.header import Header

logger = logging.getLogger(__name__)

_ZERO = ord("0")


@decoder(Format.P1)
def decode_plain_bitmap(header: Header, reader: TokenReader) -> NDArray[np.bool_]:
    """Read ``0``/``1`` digits. Digits may also be packed without spaces."""
    digits = b"".join(reader.remaining().split())
    count = header.sample_count
    if len(digits) < count:
        raise TruncatedDataError(count, len(digits))
    if len(digits) > count:
        logger.warning("Ignoring %d trailing bitmap digits", len(digits) - count)

    values = np.frombuffer(digits[:count], dtype=np.uint8) - _ZERO
    if np.any(values > 1):
        bad = digits[int(np.argmax(values > 1))]
        raise MalformedSampleError(f"Bitmap sample must be 0 or 1, got {chr(bad)!r}")
    return values.reshape(header.height, header.width).astype(np.bool_)


@decoder(Format.P2, Format.P3)
def decode_plain_samples(header: Header, reader: TokenReader) -> NDArray[np.int64]:
    """Read decimal samples; pixmaps take three tokens (R, G, B) per pixel."""
    tokens = reader.remaining().split()
    count = header.sample_count
    if len(tokens) < count:
        raise TruncatedDataError(count, len(tokens))
    if len(tokens) > count:
        logger.warning("Ignoring %d trailing sample tokens", len(tokens) - count)

    tokens = tokens[:count]
    for token in tokens:
        if not token.isdigit():
            raise MalformedSampleError(f"Non-numeric sample: {token!r}")
    values = np.array([int(t) for t in tokens], dtype=np.int64)
    if np.any(values > header.max_value):
        raise MalformedSampleError(f"Sample {int(values.max())} exceeds max value {header.max_value}")

    if header.format.kind is SampleKind.RGB:
        return values.reshape(header.height, header.width, 3)
    return values.reshape(header.height, header.width)


@encoder(Format.P1, Format.P2, Format.P3)
def encode_plain(grid: Grid) -> bytes:
    flat: NDArray[Any] = grid.data.reshape(grid.height, -1)
    if grid.kind is SampleKind.BIT:
        flat = flat.astype(np.uint8)
    lines = [" ".join(str(v) for v in row) for row in flat.tolist()]
    return ("\n".join(lines) + "\n").encode("ascii")
