"""Axis-aligned ellipse."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from geometrize.core.scanline import Scanline
from geometrize.shapes.base import Bounds, clamp
from geometrize.shapes.registry import ShapeKind, shape
from geometrize.utils.rasterizer import ellipse_scanlines

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64

_MAX_INITIAL_RADIUS = 32
_MUTATION_DELTA = 16


@shape(kind=ShapeKind.ELLIPSE, description="Axis-aligned filled ellipse")
@dataclass
class Ellipse:
    x: int = 0
    y: int = 0
    rx: int = 1
    ry: int = 1

    def setup(self, bounds: Bounds, rng: SplitMix64) -> None:
        self.x = bounds.random_x(rng)
        self.y = bounds.random_y(rng)
        self.rx = rng.next_in_range(1, _MAX_INITIAL_RADIUS)
        self.ry = rng.next_in_range(1, _MAX_INITIAL_RADIUS)

    def mutate(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _MUTATION_DELTA
        r = rng.next_in_range(0, 2)
        if r == 0:
            self.x = bounds.clamp_x(self.x + rng.next_in_range(-d, d))
            self.y = bounds.clamp_y(self.y + rng.next_in_range(-d, d))
        elif r == 1:
            self.rx = clamp(self.rx + rng.next_in_range(-d, d), 1, max(1, bounds.x_max - bounds.x_min))
        else:
            self.ry = clamp(self.ry + rng.next_in_range(-d, d), 1, max(1, bounds.y_max - bounds.y_min))

    def rasterize(self, bounds: Bounds) -> list[Scanline]:
        return ellipse_scanlines(self.x, self.y, self.rx, self.ry, bounds)

    def clone(self) -> Ellipse:
        return replace(self)
