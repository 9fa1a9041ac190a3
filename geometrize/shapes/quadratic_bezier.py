"""Quadratic Bezier curve."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from geometrize.core.scanline import Scanline
from geometrize.shapes.base import Bounds
from geometrize.shapes.registry import ShapeKind, shape
from geometrize.utils.geometry import quadratic_bezier_points
from geometrize.utils.rasterizer import path_points, points_to_scanlines

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64

_SETUP_SPREAD = 32
_MUTATION_DELTA = 8


@shape(kind=ShapeKind.QUADRATIC_BEZIER, description="One-pixel quadratic Bezier curve")
@dataclass
class QuadraticBezier:
    cx: int = 0
    cy: int = 0
    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0

    def setup(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _SETUP_SPREAD
        self.x1 = bounds.random_x(rng)
        self.y1 = bounds.random_y(rng)
        self.cx = bounds.clamp_x(self.x1 + rng.next_in_range(-d, d))
        self.cy = bounds.clamp_y(self.y1 + rng.next_in_range(-d, d))
        self.x2 = bounds.clamp_x(self.x1 + rng.next_in_range(-d, d))
        self.y2 = bounds.clamp_y(self.y1 + rng.next_in_range(-d, d))

    def mutate(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _MUTATION_DELTA
        r = rng.next_in_range(0, 2)
        dx = rng.next_in_range(-d, d)
        dy = rng.next_in_range(-d, d)
        if r == 0:
            self.cx = bounds.clamp_x(self.cx + dx)
            self.cy = bounds.clamp_y(self.cy + dy)
        elif r == 1:
            self.x1 = bounds.clamp_x(self.x1 + dx)
            self.y1 = bounds.clamp_y(self.y1 + dy)
        else:
            self.x2 = bounds.clamp_x(self.x2 + dx)
            self.y2 = bounds.clamp_y(self.y2 + dy)

    def rasterize(self, bounds: Bounds) -> list[Scanline]:
        samples = quadratic_bezier_points((self.x1, self.y1), (self.cx, self.cy), (self.x2, self.y2))
        return points_to_scanlines(path_points(samples), bounds)

    def clone(self) -> QuadraticBezier:
        return replace(self)
