"""Tests for scanline trimming and coverage."""

import numpy as np

from geometrize.core.bitmap import Bitmap
from geometrize.core.color import Rgba
from geometrize.core.scanline import (
    Scanline,
    contains_transparent_pixels,
    coverage,
    pixel_count,
    trim_scanlines,
)


class TestTrim:
    def test_inside_is_unchanged(self):
        assert Scanline(2, 1, 5).trim(0, 0, 10, 10) == Scanline(2, 1, 5)

    def test_clamps_x_to_area(self):
        assert Scanline(2, -4, 20).trim(0, 0, 10, 10) == Scanline(2, 0, 9)

    def test_row_outside_is_dropped(self):
        assert Scanline(-1, 0, 5).trim(0, 0, 10, 10) is None
        assert Scanline(10, 0, 5).trim(0, 0, 10, 10) is None

    def test_reversed_line_is_dropped(self):
        assert Scanline(3, 6, 2).trim(0, 0, 10, 10) is None

    def test_line_left_or_right_of_area_is_dropped(self):
        assert Scanline(3, -8, -2).trim(0, 0, 10, 10) is None
        assert Scanline(3, 10, 14).trim(0, 0, 10, 10) is None

    def test_trim_scanlines_filters_list(self):
        lines = [Scanline(0, 0, 3), Scanline(20, 0, 3), Scanline(1, 5, 50)]
        assert trim_scanlines(lines, 0, 0, 10, 10) == [Scanline(0, 0, 3), Scanline(1, 5, 9)]


class TestCoverage:
    def test_empty(self):
        rows, cols = coverage([])
        assert rows.size == 0 and cols.size == 0

    def test_expands_runs_in_order(self):
        rows, cols = coverage([Scanline(1, 2, 4), Scanline(3, 0, 1), Scanline(0, 7, 7)])
        assert rows.tolist() == [1, 1, 1, 3, 3, 0]
        assert cols.tolist() == [2, 3, 4, 0, 1, 7]

    def test_pixel_count_matches_coverage(self):
        lines = [Scanline(0, 0, 9), Scanline(1, 3, 3), Scanline(2, 4, 6)]
        assert pixel_count(lines) == coverage(lines)[0].size == 14


class TestTransparentPixels:
    def test_detects_low_alpha(self):
        image = Bitmap(5, 5, Rgba(10, 10, 10, 255))
        image[3, 2] = Rgba(0, 0, 0, 10)
        assert contains_transparent_pixels([Scanline(2, 0, 4)], image, 128)
        assert not contains_transparent_pixels([Scanline(1, 0, 4)], image, 128)

    def test_ignores_pixels_outside_image(self):
        image = Bitmap(5, 5, Rgba(0, 0, 0, 255))
        assert not contains_transparent_pixels([Scanline(7, 0, 4)], image, 128)

    def test_fully_transparent_image(self):
        image = Bitmap.from_array(np.zeros((4, 4, 4), dtype=np.uint8))
        assert contains_transparent_pixels([Scanline(0, 0, 0)], image, 1)
