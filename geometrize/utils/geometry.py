"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math

# Samples along a quadratic Bezier; consecutive samples are joined by lines.
BEZIER_SAMPLES = 20


def rotate_point(x: float, y: float, cx: float, cy: float, degrees: float) -> tuple[float, float]:
    """Rotate (x, y) about (cx, cy), clockwise on screen for positive angles."""
    rad = math.radians(degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    dx = x - cx
    dy = y - cy
    return (cx + dx * c - dy * s, cy + dx * s + dy * c)


def rotated_rectangle_corners(
    x1: int, y1: int, x2: int, y2: int, degrees: float
) -> list[tuple[int, int]]:
    """Corners of the axis-aligned box (x1, y1)-(x2, y2) rotated about its center."""
    cx = (x1 + x2) / 2
    cy = (y1 + y2) / 2
    corners = [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]
    return [
        (int(round(px)), int(round(py)))
        for px, py in (rotate_point(x, y, cx, cy, degrees) for x, y in corners)
    ]


def quadratic_bezier_points(
    p0: tuple[int, int],
    control: tuple[int, int],
    p1: tuple[int, int],
    samples: int = BEZIER_SAMPLES,
) -> list[tuple[int, int]]:
    """Integer samples of B(t) = (1-t)^2 p0 + 2(1-t)t c + t^2 p1 for t in [0, 1]."""
    points = []
    for i in range(samples + 1):
        t = i / samples
        u = 1.0 - t
        x = u * u * p0[0] + 2 * u * t * control[0] + t * t * p1[0]
        y = u * u * p0[1] + 2 * u * t * control[1] + t * t * p1[1]
        points.append((int(round(x)), int(round(y))))
    return points
