"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pnmkit import Format, Grid


# Sample streams, one per format

BITMAP_ASCII = b"P1\n3 2\n1 0 1\n0 1 0\n"

# Rows split and joined across physical lines on purpose
GRAYMAP_ASCII = b"P2\n3 2\n255\n0 10 20 30\n40\n50\n"

PIXMAP_ASCII = b"P3\n2 1\n255\n255 0 0 0 0 255\n"

# 10 wide: two bytes per row; row 1 has its padding bits set
BITMAP_BINARY = b"P4\n10 2\n" + bytes([0b11000000, 0b01000000, 0b00000000, 0b00111111])

GRAYMAP_BINARY = b"P5\n3 1\n255\n" + bytes([0, 128, 255])

PIXMAP_BINARY = b"P6\n1 2\n255\n" + bytes([1, 2, 3, 4, 5, 6])

COMMENTED_HEADER = b"P2\n# created by hand\n2 1 # width height\n# max below\n15\n1 2\n"


@pytest.fixture
def bitmap() -> Grid:
    return Grid.blank(Format.P1, 8, 6)


@pytest.fixture
def graymap() -> Grid:
    return Grid.from_rows(Format.P2, [[1, 2, 3], [4, 5, 6]], max_value=255)


@pytest.fixture
def pixmap() -> Grid:
    return Grid.from_rows(
        Format.P3,
        [[(255, 0, 0), (0, 255, 0)], [(0, 0, 255), (10, 20, 30)]],
        max_value=255,
    )
