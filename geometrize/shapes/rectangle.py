"""Axis-aligned rectangle."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from geometrize.core.scanline import Scanline
from geometrize.shapes.base import Bounds
from geometrize.shapes.registry import ShapeKind, shape
from geometrize.utils.rasterizer import trim_bounds

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64

# Initial extent past the first corner, and per-mutation corner nudge.
_MAX_INITIAL_SIZE = 32
_MUTATION_DELTA = 16


@shape(kind=ShapeKind.RECTANGLE, description="Axis-aligned filled rectangle")
@dataclass
class Rectangle:
    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0

    def setup(self, bounds: Bounds, rng: SplitMix64) -> None:
        self.x1 = bounds.random_x(rng)
        self.y1 = bounds.random_y(rng)
        self.x2 = bounds.clamp_x(self.x1 + rng.next_in_range(1, _MAX_INITIAL_SIZE))
        self.y2 = bounds.clamp_y(self.y1 + rng.next_in_range(1, _MAX_INITIAL_SIZE))

    def mutate(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _MUTATION_DELTA
        if rng.next_in_range(0, 1) == 0:
            self.x1 = bounds.clamp_x(self.x1 + rng.next_in_range(-d, d))
            self.y1 = bounds.clamp_y(self.y1 + rng.next_in_range(-d, d))
        else:
            self.x2 = bounds.clamp_x(self.x2 + rng.next_in_range(-d, d))
            self.y2 = bounds.clamp_y(self.y2 + rng.next_in_range(-d, d))

    def rasterize(self, bounds: Bounds) -> list[Scanline]:
        x_lo, x_hi = sorted((self.x1, self.x2))
        y_lo, y_hi = sorted((self.y1, self.y2))
        return trim_bounds((Scanline(y, x_lo, x_hi) for y in range(y_lo, y_hi + 1)), bounds)

    def clone(self) -> Rectangle:
        return replace(self)
