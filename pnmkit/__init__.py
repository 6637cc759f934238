"""pnmkit — Netpbm codec and raster drawing engine."""

from pnmkit.codec import decode, encode, write
from pnmkit.core.grid import Grid
from pnmkit.core.transforms import flip, flop, invert, rotate90cw, to_bitmap, to_graymap
from pnmkit.draw.rasterizer import (
    draw_circle,
    draw_line,
    draw_polygon,
    draw_rectangle,
    draw_triangle,
    fill_circle,
    fill_polygon,
    fill_rectangle,
    fill_triangle,
)
from pnmkit.errors import (
    DecodeError,
    MalformedHeaderError,
    MalformedSampleError,
    OutOfBoundsError,
    PnmError,
    TruncatedDataError,
    UnsupportedMagicError,
)
from pnmkit.models.formats import Format, SampleKind
from pnmkit.utils.geometry import Point

__all__ = [
    "decode",
    "encode",
    "write",
    "Grid",
    "Format",
    "SampleKind",
    "Point",
    "invert",
    "flip",
    "flop",
    "rotate90cw",
    "to_graymap",
    "to_bitmap",
    "draw_line",
    "draw_rectangle",
    "fill_rectangle",
    "draw_circle",
    "fill_circle",
    "draw_triangle",
    "fill_triangle",
    "draw_polygon",
    "fill_polygon",
    "PnmError",
    "DecodeError",
    "MalformedHeaderError",
    "UnsupportedMagicError",
    "TruncatedDataError",
    "MalformedSampleError",
    "OutOfBoundsError",
]
