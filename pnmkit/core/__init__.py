"""Sample grid and whole-grid transforms."""

from pnmkit.core.grid import Grid
from pnmkit.core.transforms import flip, flop, invert, rotate90cw, to_bitmap, to_graymap

__all__ = ["Grid", "invert", "flip", "flop", "rotate90cw", "to_graymap", "to_bitmap"]
