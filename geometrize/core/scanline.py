"""Scanlines: horizontal pixel runs, the unit of coverage for drawing and scoring.

A scanline covers ``x1..x2`` inclusive on row ``y``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from geometrize.core.bitmap import Bitmap

_EMPTY_INDEX = np.empty(0, dtype=np.intp)


@dataclass(frozen=True, slots=True)
class Scanline:
    y: int
    x1: int
    x2: int

    @property
    def length(self) -> int:
        return max(0, self.x2 - self.x1 + 1)

    def trim(self, min_x: int, min_y: int, max_x: int, max_y: int) -> Scanline | None:
        """Clip to ``[min_x, max_x) x [min_y, max_y)``. None when nothing is left."""
        if self.y < min_y or self.y >= max_y:
            return None
        # Runs wholly left or right of the area are dropped, not clamped onto the edge column
        if self.x1 > self.x2 or self.x2 < min_x or self.x1 >= max_x:
            return None
        x1 = min(max(self.x1, min_x), max_x - 1)
        x2 = min(max(self.x2, min_x), max_x - 1)
        if x1 > x2:
            return None
        return Scanline(self.y, x1, x2)


def trim_scanlines(
    lines: Iterable[Scanline],
    min_x: int,
    min_y: int,
    max_x: int,
    max_y: int,
) -> list[Scanline]:
    """Trim every line to the given area, dropping the ones that fall outside."""
    trimmed = []
    for line in lines:
        t = line.trim(min_x, min_y, max_x, max_y)
        if t is not None:
            trimmed.append(t)
    return trimmed


def coverage(lines: Sequence[Scanline]) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
    """Expand scanlines into parallel (rows, cols) index arrays.

    The arrays index a ``(height, width, 4)`` pixel array directly.
    """
    if not lines:
        return _EMPTY_INDEX, _EMPTY_INDEX

    spans = np.array([(s.y, s.x1, s.x2) for s in lines], dtype=np.intp)
    lengths = np.maximum(spans[:, 2] - spans[:, 1] + 1, 0)
    rows = np.repeat(spans[:, 0], lengths)
    # Each run starts at its own x1, offset by the pixels emitted before it
    offsets = np.cumsum(lengths) - lengths
    cols = np.arange(int(lengths.sum()), dtype=np.intp) + np.repeat(spans[:, 1] - offsets, lengths)
    return rows, cols


def pixel_count(lines: Iterable[Scanline]) -> int:
    return sum(s.length for s in lines)


def contains_transparent_pixels(lines: Sequence[Scanline], image: Bitmap, min_alpha: int) -> bool:
    """True if any pixel covered by ``lines`` has alpha below ``min_alpha``."""
    trimmed = trim_scanlines(lines, 0, 0, image.width, image.height)
    rows, cols = coverage(trimmed)
    if rows.size == 0:
        return False
    return bool(np.any(image.pixels[rows, cols, 3] < min_alpha))
