"""Shape protocol and canvas bounds shared by every shape variant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64
    from geometrize.core.scanline import Scanline


@dataclass(frozen=True)
class Bounds:
    """Inclusive pixel extents a shape is generated, mutated and clipped within."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    def __post_init__(self) -> None:
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError(f"Malformed bounds: {self}")

    @classmethod
    def of_size(cls, width: int, height: int) -> Bounds:
        return cls(0, 0, width - 1, height - 1)

    def clamp_x(self, x: int) -> int:
        return clamp(x, self.x_min, self.x_max)

    def clamp_y(self, y: int) -> int:
        return clamp(y, self.y_min, self.y_max)

    def random_x(self, rng: SplitMix64) -> int:
        return rng.next_in_range(self.x_min, self.x_max)

    def random_y(self, rng: SplitMix64) -> int:
        return rng.next_in_range(self.y_min, self.y_max)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class Shape(Protocol):
    """Capabilities every shape variant implements.

    Variants are dataclasses, so ``==`` compares kind and parameters.
    """

    def setup(self, bounds: Bounds, rng: SplitMix64) -> None: ...

    def mutate(self, bounds: Bounds, rng: SplitMix64) -> None: ...

    def rasterize(self, bounds: Bounds) -> list[Scanline]: ...

    def clone(self) -> Shape: ...
