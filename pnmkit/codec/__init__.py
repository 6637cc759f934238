"""Netpbm codec — byte stream ⇄ Grid for P1 through P6.

The codec never opens or closes streams; callers hand in bytes or an
already-open binary stream.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Union

# Import raster modules so @decoder/@encoder decorators fire.
from pnmkit.codec import plain, raw  # noqa: F401
from pnmkit.codec.registry import get_registry
from pnmkit.codec.tokens import TokenReader, read_header
from pnmkit.core.grid import Grid

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, memoryview, BinaryIO]


def decode(source: Source) -> Grid:
    """Decode one Netpbm image. Raises a DecodeError subclass on bad input."""
    data = bytes(source) if isinstance(source, (bytes, bytearray, memoryview)) else source.read()
    reader = TokenReader(data)
    header = read_header(reader)
    raster = get_registry().decoder(header.format)(header, reader)
    grid = Grid(header.format, raster, header.max_value)
    logger.debug("Decoded %s %dx%d", header.format.magic, header.width, header.height)
    return grid


def encode(grid: Grid) -> bytes:
    """Header plus raster in the grid's own format."""
    raster = get_registry().encoder(grid.format)(grid)
    logger.debug("Encoded %s %dx%d (%d raster bytes)", grid.format.magic, grid.width, grid.height, len(raster))
    return grid.header.to_bytes() + raster


def write(grid: Grid, stream: BinaryIO) -> int:
    """Encode into a caller-owned binary stream. Returns bytes written."""
    payload = encode(grid)
    stream.write(payload)
    return len(payload)


__all__ = ["decode", "encode", "write", "get_registry"]
