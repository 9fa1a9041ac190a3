"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from geometrize.core.bitmap import Bitmap
from geometrize.core.color import BLACK, WHITE


def gradient_bitmap(width: int = 32, height: int = 24) -> Bitmap:
    """Deterministic opaque image with structure in every channel."""
    ys, xs = np.mgrid[0:height, 0:width]
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[..., 0] = (xs * 255 // max(1, width - 1)).astype(np.uint8)
    pixels[..., 1] = (ys * 255 // max(1, height - 1)).astype(np.uint8)
    pixels[..., 2] = ((xs + ys) % 7 * 36).astype(np.uint8)
    pixels[..., 3] = 255
    return Bitmap.from_array(pixels)


def checker_bitmap(width: int = 32, height: int = 24, cell: int = 8) -> Bitmap:
    """Black and white checkerboard."""
    ys, xs = np.mgrid[0:height, 0:width]
    on = ((xs // cell + ys // cell) % 2).astype(bool)
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[on, :3] = 255
    pixels[..., 3] = 255
    return Bitmap.from_array(pixels)


@pytest.fixture
def black_10() -> Bitmap:
    return Bitmap(10, 10, BLACK)


@pytest.fixture
def white_10() -> Bitmap:
    return Bitmap(10, 10, WHITE)


@pytest.fixture
def gradient() -> Bitmap:
    return gradient_bitmap()


@pytest.fixture
def checker() -> Bitmap:
    return checker_bitmap()


@pytest.fixture
def make_gradient():
    return gradient_bitmap
