"""Sample grid — 2D pixel storage shared by every Netpbm variant.

Bitmap grids hold a ``bool`` array of shape (height, width), graymaps an
unsigned integer array of the same shape, pixmaps an (height, width, 3)
array of RGB triplets. Indexing is always (x, y) at the API and
[row, col] internally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pnmkit.config import settings
from pnmkit.errors import OutOfBoundsError
from pnmkit.models.formats import Format, SampleKind
from pnmkit.models.header import MAX_SAMPLE_LIMIT, Header

Sample = Any  # bool | int | tuple[int, int, int]


def sample_dtype(kind: SampleKind, max_value: int | None) -> np.dtype:
    """Smallest numpy dtype that holds samples of ``kind`` up to ``max_value``."""
    if kind is SampleKind.BIT:
        return np.dtype(np.bool_)
    if max_value is not None and max_value > 255:
        return np.dtype(np.uint16)
    return np.dtype(np.uint8)


@dataclass(eq=False)
class Grid:
    """A width × height raster tagged with its Netpbm format."""

    format: Format
    data: NDArray[Any]
    max_value: int | None = None

    def __post_init__(self) -> None:
        kind = self.format.kind
        if kind.has_max_value:
            if self.max_value is None or not 1 <= self.max_value <= MAX_SAMPLE_LIMIT:
                raise ValueError(f"max_value must be in [1, {MAX_SAMPLE_LIMIT}], got {self.max_value}")
        elif self.max_value is not None:
            raise ValueError("Bitmap grids carry no max_value")

        data = np.asarray(self.data)
        expected_ndim = 3 if kind is SampleKind.RGB else 2
        if data.ndim != expected_ndim or (kind is SampleKind.RGB and data.shape[2] != 3):
            raise ValueError(f"{kind.value} grid needs {expected_ndim}-D data, got shape {data.shape}")
        if data.shape[0] < 1 or data.shape[1] < 1:
            raise ValueError(f"Grid dimensions must be positive, got {data.shape[1]}x{data.shape[0]}")
        if kind is not SampleKind.BIT and data.size:
            if np.min(data) < 0 or np.max(data) > self.max_value:
                raise ValueError(f"Samples outside [0, {self.max_value}]")
        self.data = data.astype(sample_dtype(kind, self.max_value), copy=False)

    # ── Construction ──

    @classmethod
    def blank(
        cls,
        format: Format,
        width: int,
        height: int,
        max_value: int | None = None,
    ) -> Grid:
        """All-zero grid (white bitmap, black gray/pixmap)."""
        kind = format.kind
        if kind.has_max_value and max_value is None:
            max_value = settings.pnmkit_default_max_value
        shape: tuple[int, ...] = (height, width, 3) if kind is SampleKind.RGB else (height, width)
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        return cls(format, np.zeros(shape, dtype=sample_dtype(kind, max_value)), max_value)

    @classmethod
    def from_rows(
        cls,
        format: Format,
        rows: Sequence[Sequence[Any]],
        max_value: int | None = None,
    ) -> Grid:
        """Build a grid from nested row lists (row-major, top row first)."""
        kind = format.kind
        if kind.has_max_value and max_value is None:
            max_value = settings.pnmkit_default_max_value
        if kind is SampleKind.BIT:
            data = np.array(rows, dtype=np.bool_)
        else:
            data = np.array(rows, dtype=np.int64)
        return cls(format, data, max_value)

    # ── Accessors ──

    @property
    def kind(self) -> SampleKind:
        return self.format.kind

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def header(self) -> Header:
        return Header(format=self.format, width=self.width, height=self.height, max_value=self.max_value)

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Sample:
        self._check_bounds(x, y)
        cell = self.data[y, x]
        if self.kind is SampleKind.BIT:
            return bool(cell)
        if self.kind is SampleKind.RGB:
            return tuple(int(c) for c in cell)
        return int(cell)

    def set(self, x: int, y: int, value: Sample) -> None:
        self._check_bounds(x, y)
        self.data[y, x] = self.normalize(value)

    def normalize(self, value: Sample) -> Sample:
        """Validate a pixel value against this grid's kind and max value."""
        kind = self.kind
        if kind is SampleKind.BIT:
            if isinstance(value, (bool, np.bool_, int, np.integer)) and value in (0, 1):
                return bool(value)
            raise ValueError(f"Bitmap sample must be a bool, got {value!r}")
        if kind is SampleKind.RGB:
            try:
                channels = tuple(int(c) for c in value)
            except TypeError:
                raise ValueError(f"Pixmap sample must be an (r, g, b) triplet, got {value!r}") from None
            if len(channels) != 3:
                raise ValueError(f"Pixmap sample must be an (r, g, b) triplet, got {value!r}")
            for c in channels:
                self._check_range(c)
            return channels
        try:
            sample = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Graymap sample must be an integer, got {value!r}") from None
        self._check_range(sample)
        return sample

    def rows(self) -> list[list[Sample]]:
        """Samples as nested Python lists (RGB cells become tuples)."""
        if self.kind is SampleKind.RGB:
            return [[tuple(int(c) for c in cell) for cell in row] for row in self.data]
        return self.data.tolist()

    # ── Metadata ──

    def set_format(self, format: Format) -> None:
        """Switch between the ASCII and binary encoding of the same sample kind."""
        if format.kind is not self.kind:
            raise ValueError(f"Cannot retag a {self.kind.value} grid as {format.magic}")
        self.format = format

    def set_max_value(self, max_value: int) -> None:
        if not self.kind.has_max_value:
            raise ValueError("Bitmap grids carry no max_value")
        if not 1 <= max_value <= MAX_SAMPLE_LIMIT:
            raise ValueError(f"max_value must be in [1, {MAX_SAMPLE_LIMIT}], got {max_value}")
        if int(np.max(self.data)) > max_value:
            raise ValueError(f"Existing samples exceed new max_value {max_value}")
        self.max_value = max_value
        self.data = self.data.astype(sample_dtype(self.kind, max_value))

    def copy(self) -> Grid:
        return Grid(self.format, self.data.copy(), self.max_value)

    # ── Transforms ──

    def invert(self) -> None:
        from pnmkit.core.transforms import invert

        invert(self)

    def flip(self) -> None:
        from pnmkit.core.transforms import flip

        flip(self)

    def flop(self) -> None:
        from pnmkit.core.transforms import flop

        flop(self)

    def rotate90cw(self) -> Grid:
        from pnmkit.core.transforms import rotate90cw

        return rotate90cw(self)

    def to_graymap(self) -> Grid:
        from pnmkit.core.transforms import to_graymap

        return to_graymap(self)

    def to_bitmap(self) -> Grid:
        from pnmkit.core.transforms import to_bitmap

        return to_bitmap(self)

    # ── Internals ──

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def _check_range(self, sample: int) -> None:
        if not 0 <= sample <= self.max_value:
            raise ValueError(f"Sample {sample} outside [0, {self.max_value}]")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.max_value == other.max_value
            and self.data.shape == other.data.shape
            and bool(np.array_equal(self.data, other.data))
        )

    def __repr__(self) -> str:
        extra = f", max_value={self.max_value}" if self.max_value is not None else ""
        return f"Grid({self.format.magic}, {self.width}x{self.height}{extra})"
