"""Rasterization utilities: lines, point sets and polygons to scanlines.

All outputs are trimmed to the bounds and never cover a pixel twice.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from geometrize.core.scanline import Scanline, trim_scanlines
from geometrize.shapes.base import Bounds

Point = tuple[int, int]


def bresenham(x0: int, y0: int, x1: int, y1: int) -> list[Point]:
    """Integer points on the segment from (x0, y0) to (x1, y1), endpoints included."""
    points: list[Point] = []
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy
    return points


def path_points(vertices: Sequence[Point]) -> list[Point]:
    """Points along the open path through ``vertices``, in order, without repeats."""
    if not vertices:
        return []
    if len(vertices) == 1:
        return [vertices[0]]

    seen: set[Point] = set()
    points: list[Point] = []
    for (x0, y0), (x1, y1) in zip(vertices, vertices[1:]):
        for p in bresenham(x0, y0, x1, y1):
            if p not in seen:
                seen.add(p)
                points.append(p)
    return points


def points_to_scanlines(points: Iterable[Point], bounds: Bounds) -> list[Scanline]:
    """One single-pixel scanline per distinct point inside the bounds."""
    seen: set[Point] = set()
    lines: list[Scanline] = []
    for x, y in points:
        if (x, y) in seen:
            continue
        seen.add((x, y))
        lines.append(Scanline(y, x, x))
    return trim_bounds(lines, bounds)


def polygon_scanlines(vertices: Sequence[Point], bounds: Bounds) -> list[Scanline]:
    """Fill a closed polygon: one scanline per row between its outermost edge pixels.

    Rows are emitted top to bottom. Suited to convex polygons (triangles,
    rotated rectangles), where every row of the interior is a single run.
    """
    if not vertices:
        return []

    extents: dict[int, list[int]] = {}
    closed = list(vertices) + [vertices[0]]
    for (x0, y0), (x1, y1) in zip(closed, closed[1:]):
        for x, y in bresenham(x0, y0, x1, y1):
            span = extents.get(y)
            if span is None:
                extents[y] = [x, x]
            elif x < span[0]:
                span[0] = x
            elif x > span[1]:
                span[1] = x

    lines = [Scanline(y, span[0], span[1]) for y, span in sorted(extents.items())]
    return trim_bounds(lines, bounds)


def trim_bounds(lines: Iterable[Scanline], bounds: Bounds) -> list[Scanline]:
    """Trim to inclusive ``bounds``."""
    return trim_scanlines(lines, bounds.x_min, bounds.y_min, bounds.x_max + 1, bounds.y_max + 1)


def ellipse_scanlines(cx: int, cy: int, rx: int, ry: int, bounds: Bounds) -> list[Scanline]:
    """Fill an axis-aligned ellipse, one scanline per row from top to bottom."""
    if rx <= 0 or ry <= 0:
        return []
    aspect = rx / ry
    lines: list[Scanline] = []
    for dy in range(ry):
        s = int(math.sqrt(ry * ry - dy * dy) * aspect)
        lines.append(Scanline(cy - dy, cx - s, cx + s))
        if dy > 0:
            lines.append(Scanline(cy + dy, cx - s, cx + s))
    lines.sort(key=lambda line: line.y)
    return trim_bounds(lines, bounds)
