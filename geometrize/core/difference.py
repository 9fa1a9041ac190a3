"""Difference metrics, optimal color solving and the default energy function.

Scores are root-mean-square channel errors normalized to ``[0, 1]``.
``difference_partial`` must agree with ``difference_full`` on the same pair
of images; it only looks at the pixels the scanlines cover.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Callable

import numpy as np

from geometrize.core.bitmap import Bitmap
from geometrize.core.color import Rgba
from geometrize.core.scanline import Scanline, coverage

EnergyFunction = Callable[[Sequence[Scanline], int, Bitmap, Bitmap, Bitmap, float], float]


def _channel_count(bitmap: Bitmap) -> int:
    return bitmap.width * bitmap.height * 4


def difference_full(first: Bitmap, second: Bitmap) -> float:
    """Normalized RMS difference over every channel of two equally sized bitmaps."""
    if first.size != second.size:
        raise ValueError(f"Bitmap sizes differ: {first.size} vs {second.size}")
    diff = first.pixels.astype(np.int64) - second.pixels.astype(np.int64)
    total = int(np.sum(diff * diff))
    return math.sqrt(total / _channel_count(first)) / 255.0


def difference_partial(
    before: Bitmap,
    after: Bitmap,
    target: Bitmap,
    score: float,
    lines: Sequence[Scanline],
) -> float:
    """Update ``score`` (the difference of target vs before) for target vs after.

    Only the pixels under ``lines`` may differ between ``before`` and ``after``.
    """
    count = _channel_count(target)
    total = (score * 255.0) ** 2 * count

    rows, cols = coverage(lines)
    if rows.size:
        t = target.pixels[rows, cols].astype(np.int64)
        b = t - before.pixels[rows, cols].astype(np.int64)
        a = t - after.pixels[rows, cols].astype(np.int64)
        total += float(np.sum(a * a) - np.sum(b * b))

    return math.sqrt(max(total, 0.0) / count) / 255.0


def compute_color(
    lines: Sequence[Scanline],
    target: Bitmap,
    current: Bitmap,
    alpha: int,
) -> Rgba:
    """Color that, drawn at ``alpha`` over ``current``, best matches ``target``.

    Solved per channel in closed form over the covered pixels. With no
    coverage or zero alpha the target's average color is used.
    """
    rows, cols = coverage(lines)
    if rows.size == 0 or alpha == 0:
        return target.average_color().with_alpha(alpha)

    a = alpha / 255.0
    t = target.pixels[rows, cols, :3].astype(np.float64)
    c = current.pixels[rows, cols, :3].astype(np.float64)
    mean = ((t - c * (1.0 - a)) / a).sum(axis=0) / rows.size

    r, g, b = (int(v) for v in np.clip(np.rint(mean), 0, 255))
    return Rgba(r, g, b, alpha)


def default_energy(
    lines: Sequence[Scanline],
    alpha: int,
    target: Bitmap,
    current: Bitmap,
    buffer: Bitmap,
    score: float,
) -> float:
    """Score of ``current`` after drawing ``lines`` in their optimal color.

    ``buffer`` is scratch space: the covered region is reset from ``current``
    before drawing, the rest of it is never read.
    """
    color = compute_color(lines, target, current, alpha)
    buffer.copy_lines(current, lines)
    buffer.draw(lines, color)
    return difference_partial(current, buffer, target, score, lines)
