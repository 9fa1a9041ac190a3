"""Triangle with three free vertices."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from geometrize.core.scanline import Scanline
from geometrize.shapes.base import Bounds
from geometrize.shapes.registry import ShapeKind, shape
from geometrize.utils.rasterizer import polygon_scanlines

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64

_VERTEX_DELTA = 32


@shape(kind=ShapeKind.TRIANGLE, description="Filled triangle")
@dataclass
class Triangle:
    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0
    x3: int = 0
    y3: int = 0

    def setup(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _VERTEX_DELTA
        self.x1 = bounds.random_x(rng)
        self.y1 = bounds.random_y(rng)
        self.x2 = bounds.clamp_x(self.x1 + rng.next_in_range(-d, d))
        self.y2 = bounds.clamp_y(self.y1 + rng.next_in_range(-d, d))
        self.x3 = bounds.clamp_x(self.x1 + rng.next_in_range(-d, d))
        self.y3 = bounds.clamp_y(self.y1 + rng.next_in_range(-d, d))

    def mutate(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _VERTEX_DELTA
        r = rng.next_in_range(0, 2)
        dx = rng.next_in_range(-d, d)
        dy = rng.next_in_range(-d, d)
        if r == 0:
            self.x1 = bounds.clamp_x(self.x1 + dx)
            self.y1 = bounds.clamp_y(self.y1 + dy)
        elif r == 1:
            self.x2 = bounds.clamp_x(self.x2 + dx)
            self.y2 = bounds.clamp_y(self.y2 + dy)
        else:
            self.x3 = bounds.clamp_x(self.x3 + dx)
            self.y3 = bounds.clamp_y(self.y3 + dy)

    def vertices(self) -> list[tuple[int, int]]:
        return [(self.x1, self.y1), (self.x2, self.y2), (self.x3, self.y3)]

    def rasterize(self, bounds: Bounds) -> list[Scanline]:
        return polygon_scanlines(self.vertices(), bounds)

    def clone(self) -> Triangle:
        return replace(self)
