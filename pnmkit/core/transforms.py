"""Whole-grid transforms — invert, mirror, rotate, depth conversion.

invert/flip/flop mutate the grid they are given. rotate90cw and the
depth conversions return a new grid because the shape or sample kind
changes.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from pnmkit.core.grid import Grid, sample_dtype
from pnmkit.models.formats import Format, SampleKind

logger = logging.getLogger(__name__)

# Luminosity weights (ITU-R BT.601).
_LUMA_R = 0.299
_LUMA_G = 0.587
_LUMA_B = 0.114

# Pixmap → bitmap threshold, independent of the source max value.
_PIXMAP_DARK_THRESHOLD = 128


def invert(grid: Grid) -> None:
    """Negate every sample: ``max - v`` per channel, ``not v`` for bitmaps."""
    if grid.kind is SampleKind.BIT:
        np.logical_not(grid.data, out=grid.data)
    else:
        grid.data[...] = grid.max_value - grid.data


def flip(grid: Grid) -> None:
    """Mirror left-right (reverse every row)."""
    grid.data[...] = grid.data[:, ::-1].copy()


def flop(grid: Grid) -> None:
    """Mirror top-bottom (reverse the row order)."""
    grid.data[...] = grid.data[::-1].copy()


def rotate90cw(grid: Grid) -> Grid:
    """Rotate a quarter turn clockwise. Source (x, y) lands on (height-1-y, x)."""
    rotated = np.rot90(grid.data, k=-1).copy()
    return Grid(grid.format, rotated, grid.max_value)


def luminance(data: NDArray[np.integer]) -> NDArray[np.float64]:
    """0.299·R + 0.587·G + 0.114·B over an (h, w, 3) array."""
    rgb = data.astype(np.float64)
    return _LUMA_R * rgb[..., 0] + _LUMA_G * rgb[..., 1] + _LUMA_B * rgb[..., 2]


def to_graymap(grid: Grid) -> Grid:
    """Pixmap → ASCII graymap via the luminosity formula, truncated. Max value is kept."""
    if grid.kind is not SampleKind.RGB:
        raise ValueError(f"to_graymap expects a pixmap, got {grid.format.magic}")
    gray = np.floor(luminance(grid.data))
    # Weight rounding can push a max-valued pixel a hair above max.
    gray = np.minimum(gray, grid.max_value)
    data = gray.astype(sample_dtype(SampleKind.GRAY, grid.max_value))
    logger.debug("Converted %dx%d pixmap to graymap", grid.width, grid.height)
    return Grid(Format.P2, data, grid.max_value)


def to_bitmap(grid: Grid) -> Grid:
    """Threshold a graymap or pixmap to a bitmap (True = dark).

    Graymaps use ``sample > max_value // 2`` and come out as P4.
    Pixmaps use ``luminance > 128`` regardless of max value and come out as P1.
    """
    if grid.kind is SampleKind.GRAY:
        dark = grid.data.astype(np.int64) > (grid.max_value // 2)
        fmt = Format.P4
    elif grid.kind is SampleKind.RGB:
        dark = luminance(grid.data) > _PIXMAP_DARK_THRESHOLD
        fmt = Format.P1
    else:
        raise ValueError("Grid is already a bitmap")
    logger.debug("Converted %dx%d %s to bitmap", grid.width, grid.height, grid.kind.value)
    return Grid(fmt, dark)
