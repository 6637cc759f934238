"""Tests for the sample grid."""

from __future__ import annotations

import numpy as np
import pytest

from pnmkit import Format, Grid, OutOfBoundsError, SampleKind


class TestConstruction:
    def test_blank_bitmap(self):
        grid = Grid.blank(Format.P1, 4, 3)
        assert grid.size() == (4, 3)
        assert grid.kind is SampleKind.BIT
        assert grid.max_value is None
        assert not grid.data.any()

    def test_blank_pixmap_shape(self):
        grid = Grid.blank(Format.P6, 4, 3, max_value=255)
        assert grid.data.shape == (3, 4, 3)
        assert grid.get(3, 2) == (0, 0, 0)

    def test_wide_max_value_uses_16_bit_storage(self):
        grid = Grid.blank(Format.P2, 2, 2, max_value=4095)
        assert grid.data.dtype == np.uint16

    def test_from_rows(self, graymap):
        assert graymap.size() == (3, 2)
        assert graymap.rows() == [[1, 2, 3], [4, 5, 6]]

    def test_zero_dimensions_rejected(self):
        with pytest.raises(ValueError):
            Grid.blank(Format.P1, 0, 3)

    def test_ragged_rows_rejected(self):
        with pytest.raises(ValueError):
            Grid.from_rows(Format.P2, [[1, 2, 3], [4, 5]])

    def test_samples_above_max_rejected(self):
        with pytest.raises(ValueError):
            Grid.from_rows(Format.P2, [[1, 20]], max_value=15)

    def test_bitmap_rejects_max_value(self):
        with pytest.raises(ValueError):
            Grid(Format.P1, np.zeros((2, 2), dtype=bool), max_value=1)


class TestAccess:
    def test_get_set_bitmap(self, bitmap):
        bitmap.set(2, 1, True)
        assert bitmap.get(2, 1) is True
        assert bitmap.get(1, 2) is False
        assert bitmap.data[1, 2]

    def test_get_set_pixmap(self, pixmap):
        pixmap.set(1, 1, (7, 8, 9))
        assert pixmap.get(1, 1) == (7, 8, 9)
        assert pixmap.get(0, 0) == (255, 0, 0)

    def test_x_is_column_y_is_row(self, graymap):
        assert graymap.get(2, 0) == 3
        assert graymap.get(0, 1) == 4

    @pytest.mark.parametrize("x,y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, graymap, x, y):
        with pytest.raises(OutOfBoundsError):
            graymap.get(x, y)
        with pytest.raises(IndexError):
            graymap.set(x, y, 0)

    def test_set_validates_range(self, graymap):
        with pytest.raises(ValueError):
            graymap.set(0, 0, 256)
        with pytest.raises(ValueError):
            graymap.set(0, 0, -1)

    def test_graymap_rejects_triplet(self, graymap):
        with pytest.raises(ValueError):
            graymap.set(0, 0, (1, 2, 3))
        with pytest.raises(ValueError):
            graymap.set(0, 0, "dark")

    def test_set_validates_kind(self, bitmap, pixmap):
        with pytest.raises(ValueError):
            bitmap.set(0, 0, 2)
        with pytest.raises(ValueError):
            pixmap.set(0, 0, 5)
        with pytest.raises(ValueError):
            pixmap.set(0, 0, (1, 2))

    def test_failed_set_leaves_cell_untouched(self, graymap):
        with pytest.raises(ValueError):
            graymap.set(0, 0, 999)
        assert graymap.get(0, 0) == 1


class TestMetadata:
    def test_set_format_same_kind(self, bitmap):
        bitmap.set_format(Format.P4)
        assert bitmap.format is Format.P4

    def test_set_format_other_kind_rejected(self, bitmap):
        with pytest.raises(ValueError):
            bitmap.set_format(Format.P2)

    def test_set_max_value(self, graymap):
        graymap.set_max_value(6)
        assert graymap.max_value == 6
        with pytest.raises(ValueError):
            graymap.set_max_value(5)

    def test_header(self, pixmap):
        header = pixmap.header
        assert header.format is Format.P3
        assert (header.width, header.height, header.max_value) == (2, 2, 255)


class TestEquality:
    def test_copy_is_equal_and_independent(self, graymap):
        dup = graymap.copy()
        assert dup == graymap
        dup.set(0, 0, 99)
        assert dup != graymap
        assert graymap.get(0, 0) == 1

    def test_encoding_does_not_affect_equality(self, graymap):
        raw = graymap.copy()
        raw.set_format(Format.P5)
        assert raw == graymap

    def test_max_value_affects_equality(self, graymap):
        other = Grid(Format.P2, graymap.data.copy(), max_value=100)
        assert other != graymap
