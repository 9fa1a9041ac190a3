"""One-pixel-wide straight line."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from geometrize.core.scanline import Scanline
from geometrize.shapes.base import Bounds
from geometrize.shapes.registry import ShapeKind, shape
from geometrize.utils.rasterizer import bresenham, points_to_scanlines

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64

_MAX_INITIAL_OFFSET = 32
_MUTATION_DELTA = 16


@shape(kind=ShapeKind.LINE, description="Straight one-pixel line")
@dataclass
class Line:
    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0

    def setup(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _MAX_INITIAL_OFFSET
        x = bounds.random_x(rng)
        y = bounds.random_y(rng)
        self.x1 = bounds.clamp_x(x + rng.next_in_range(-d, d))
        self.y1 = bounds.clamp_y(y + rng.next_in_range(-d, d))
        self.x2 = bounds.clamp_x(x + rng.next_in_range(-d, d))
        self.y2 = bounds.clamp_y(y + rng.next_in_range(-d, d))

    def mutate(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _MUTATION_DELTA
        if rng.next_in_range(0, 1) == 0:
            self.x1 = bounds.clamp_x(self.x1 + rng.next_in_range(-d, d))
            self.y1 = bounds.clamp_y(self.y1 + rng.next_in_range(-d, d))
        else:
            self.x2 = bounds.clamp_x(self.x2 + rng.next_in_range(-d, d))
            self.y2 = bounds.clamp_y(self.y2 + rng.next_in_range(-d, d))

    def rasterize(self, bounds: Bounds) -> list[Scanline]:
        return points_to_scanlines(bresenham(self.x1, self.y1, self.x2, self.y2), bounds)

    def clone(self) -> Line:
        return replace(self)
