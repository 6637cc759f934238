"""Binary rasters (P4, P5, P6).

P4 packs each row into ceil(width/8) bytes, most significant bit first,
1 = dark. P5/P6 store one byte per sample when max value < 256 and two
big-endian bytes otherwise.
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


def _take(reader: TokenReader, size: int) -> bytes:
    reader.skip_separator()
    body = reader.remaining()
    if len(body) < size:
        raise TruncatedDataError(size, len(body), unit="bytes")
    if len(body) > size:
        logger.warning("Ignoring %d trailing bytes after raster", len(body) - size)
    return body[:size]


def _wire_dtype(max_value: int) -> np.dtype:
    return np.dtype(np.uint8) if max_value < 256 else np.dtype(">u2")


@decoder(Format.P4)
def decode_raw_bitmap(header: Header, reader: TokenReader) -> NDArray[np.bool_]:
    row_bytes = (header.width + 7) // 8
    body = _take(reader, row_bytes * header.height)
    packed = np.frombuffer(body, dtype=np.uint8).reshape(header.height, row_bytes)
    # Padding bits past width are dropped.
    return np.unpackbits(packed, axis=1)[:, : header.width].astype(np.bool_)


@encoder(Format.P4)
def encode_raw_bitmap(grid: Grid) -> bytes:
    return np.packbits(grid.data, axis=1).tobytes()


@decoder(Format.P5, Format.P6)
def decode_raw_samples(header: Header, reader: TokenReader) -> NDArray[Any]:
    wire = _wire_dtype(header.max_value)
    body = _take(reader, header.sample_count * wire.itemsize)
    values = np.frombuffer(body, dtype=wire).copy()
    if values.size and int(values.max()) > header.max_value:
        raise MalformedSampleError(f"Sample {int(values.max())} exceeds max value {header.max_value}")

    if header.format.kind is SampleKind.RGB:
        return values.reshape(header.height, header.width, 3)
    return values.reshape(header.height, header.width)


@encoder(Format.P5, Format.P6)
def encode_raw_samples(grid: Grid) -> bytes:
    return grid.data.astype(_wire_dtype(grid.max_value)).tobytes()
