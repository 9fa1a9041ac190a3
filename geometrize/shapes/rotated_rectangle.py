"""Rectangle rotated about its center."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from geometrize.core.scanline import Scanline
from geometrize.shapes.base import Bounds, clamp
from geometrize.shapes.registry import ShapeKind, shape
from geometrize.utils.geometry import rotated_rectangle_corners
from geometrize.utils.rasterizer import polygon_scanlines

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64

_MAX_INITIAL_SIZE = 32
_MUTATION_DELTA = 16
_ANGLE_DELTA = 4


@shape(kind=ShapeKind.ROTATED_RECTANGLE, description="Rectangle rotated about its center")
@dataclass
class RotatedRectangle:
    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0
    # Degrees, 0..360
    angle: int = 0

    def setup(self, bounds: Bounds, rng: SplitMix64) -> None:
        self.x1 = bounds.random_x(rng)
        self.y1 = bounds.random_y(rng)
        self.x2 = bounds.clamp_x(self.x1 + rng.next_in_range(1, _MAX_INITIAL_SIZE))
        self.y2 = bounds.clamp_y(self.y1 + rng.next_in_range(1, _MAX_INITIAL_SIZE))
        self.angle = rng.next_in_range(0, 360)

    def mutate(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _MUTATION_DELTA
        r = rng.next_in_range(0, 2)
        if r == 0:
            self.x1 = bounds.clamp_x(self.x1 + rng.next_in_range(-d, d))
            self.y1 = bounds.clamp_y(self.y1 + rng.next_in_range(-d, d))
        elif r == 1:
            self.x2 = bounds.clamp_x(self.x2 + rng.next_in_range(-d, d))
            self.y2 = bounds.clamp_y(self.y2 + rng.next_in_range(-d, d))
        else:
            self.angle = clamp(self.angle + rng.next_in_range(-_ANGLE_DELTA, _ANGLE_DELTA), 0, 360)

    def corners(self) -> list[tuple[int, int]]:
        return rotated_rectangle_corners(self.x1, self.y1, self.x2, self.y2, self.angle)

    def rasterize(self, bounds: Bounds) -> list[Scanline]:
        return polygon_scanlines(self.corners(), bounds)

    def clone(self) -> RotatedRectangle:
        return replace(self)
