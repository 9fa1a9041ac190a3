"""Bitmap: fixed-size RGBA pixel buffer with alpha-compositing draw."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from geometrize.core.color import Rgba
from geometrize.core.scanline import Scanline, coverage


class Bitmap:
    """Row-major RGBA buffer backed by a ``(height, width, 4)`` uint8 array.

    Never resized after creation. ``draw`` and ``copy_lines`` are the only
    operations that touch a subset of pixels; both cost O(covered pixels).
    """

    def __init__(self, width: int, height: int, color: Rgba = Rgba(0, 0, 0, 0)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Bitmap must have a positive size, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: NDArray[np.uint8] = np.empty((height, width, 4), dtype=np.uint8)
        self.pixels[:] = color

    @classmethod
    def from_array(cls, pixels: NDArray[np.uint8]) -> Bitmap:
        """Wrap a copy of an ``(H, W, 4)`` or ``(H, W, 3)`` uint8 array."""
        arr = np.asarray(pixels)
        if arr.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {arr.dtype}")
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError(f"Expected (H, W, 3|4) pixels, got shape {arr.shape}")
        bitmap = cls(arr.shape[1], arr.shape[0])
        bitmap.pixels[..., :3] = arr[..., :3]
        bitmap.pixels[..., 3] = arr[..., 3] if arr.shape[2] == 4 else 255
        return bitmap

    def to_array(self) -> NDArray[np.uint8]:
        return self.pixels.copy()

    def copy(self) -> Bitmap:
        clone = Bitmap.__new__(Bitmap)
        clone.width = self.width
        clone.height = self.height
        clone.pixels = self.pixels.copy()
        return clone

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def __getitem__(self, xy: tuple[int, int]) -> Rgba:
        x, y = xy
        return Rgba(*(int(c) for c in self.pixels[y, x]))

    def __setitem__(self, xy: tuple[int, int], color: Rgba) -> None:
        x, y = xy
        self.pixels[y, x] = color

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.pixels, other.pixels))

    def __repr__(self) -> str:
        return f"Bitmap({self.width}x{self.height})"

    def average_color(self) -> Rgba:
        """Mean of every channel, rounded to the nearest integer."""
        mean = self.pixels.reshape(-1, 4).mean(axis=0)
        return Rgba(*(int(c) for c in np.rint(mean)))

    def fill(self, color: Rgba) -> None:
        self.pixels[:] = color

    def draw(self, lines: Sequence[Scanline], color: Rgba) -> None:
        """Composite ``color`` over every covered pixel: ``src*a + dst*(1-a)``."""
        rows, cols = coverage(lines)
        if rows.size == 0:
            return
        a = color.a / 255.0
        src = np.asarray(color, dtype=np.float64)
        dst = self.pixels[rows, cols].astype(np.float64)
        blended = src * a + dst * (1.0 - a)
        self.pixels[rows, cols] = np.clip(np.rint(blended), 0, 255).astype(np.uint8)

    def copy_lines(self, source: Bitmap, lines: Sequence[Scanline]) -> None:
        """Overwrite the covered pixels with the ones from ``source``."""
        rows, cols = coverage(lines)
        if rows.size == 0:
            return
        self.pixels[rows, cols] = source.pixels[rows, cols]
