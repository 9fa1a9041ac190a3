"""Open polyline through a list of points."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from geometrize.core.scanline import Scanline
from geometrize.shapes.base import Bounds
from geometrize.shapes.registry import ShapeKind, shape
from geometrize.utils.rasterizer import path_points, points_to_scanlines

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64

logger = logging.getLogger(__name__)

_POINT_COUNT = 4
_SETUP_SPREAD = 32
_MUTATION_DELTA = 64


@shape(kind=ShapeKind.POLYLINE, description="Open one-pixel polyline")
@dataclass
class Polyline:
    points: list[tuple[int, int]] = field(default_factory=list)

    def setup(self, bounds: Bounds, rng: SplitMix64) -> None:
        d = _SETUP_SPREAD
        x = bounds.random_x(rng)
        y = bounds.random_y(rng)
        self.points = [
            (
                bounds.clamp_x(x + rng.next_in_range(-d, d)),
                bounds.clamp_y(y + rng.next_in_range(-d, d)),
            )
            for _ in range(_POINT_COUNT)
        ]

    def mutate(self, bounds: Bounds, rng: SplitMix64) -> None:
        if not self.points:
            return
        d = _MUTATION_DELTA
        i = rng.next_in_range(0, len(self.points) - 1)
        x, y = self.points[i]
        self.points[i] = (
            bounds.clamp_x(x + rng.next_in_range(-d, d)),
            bounds.clamp_y(y + rng.next_in_range(-d, d)),
        )

    def rasterize(self, bounds: Bounds) -> list[Scanline]:
        lines = points_to_scanlines(path_points(self.points), bounds)
        if not lines:
            logger.debug("Polyline %s produced no scanlines", self.points)
        return lines

    def clone(self) -> Polyline:
        return Polyline(list(self.points))
