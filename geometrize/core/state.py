"""Search state and committed step results."""

from __future__ import annotations

from dataclasses import dataclass

from geometrize.core.color import Rgba
from geometrize.shapes.base import Shape


@dataclass
class State:
    """A candidate under evaluation during hill climbing."""

    score: float
    alpha: int
    shape: Shape

    def clone(self) -> State:
        return State(self.score, self.alpha, self.shape.clone())


@dataclass(frozen=True)
class ShapeResult:
    """A shape committed to the model, with the score after drawing it."""

    score: float
    color: Rgba
    shape: Shape
