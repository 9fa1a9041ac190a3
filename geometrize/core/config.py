"""Step configuration: the knobs of one ``Model.step`` call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from geometrize.shapes.registry import ShapeCreator, ShapeKind, shape_creator

if TYPE_CHECKING:
    from geometrize.config import Settings


@dataclass
class StepConfig:
    """Controls the search performed by each step."""

    # Kinds to choose from; one is picked per candidate
    shape_kinds: list[ShapeKind] = field(default_factory=lambda: [ShapeKind.RECTANGLE])
    # Opacity of every added shape (0-255)
    alpha: int = 128
    # Random candidates per step; only the best is kept
    shape_count: int = 50
    # Consecutive failed mutations before a candidate's search stops
    max_shape_mutations: int = 100
    # Threads evaluating candidates; results do not depend on it
    max_workers: int = 1

    @classmethod
    def from_settings(cls, settings: Settings) -> StepConfig:
        return cls(
            shape_kinds=[ShapeKind(k) for k in settings.geometrize_shape_types],
            alpha=settings.geometrize_alpha,
            shape_count=settings.geometrize_shape_count,
            max_shape_mutations=settings.geometrize_max_shape_mutations,
            max_workers=settings.geometrize_max_workers,
        )

    def shape_creator(self) -> ShapeCreator:
        return shape_creator(*self.shape_kinds)
