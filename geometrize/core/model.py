"""Model: the stepping loop that adds one optimized shape at a time."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Callable

from geometrize.core.bitmap import Bitmap
from geometrize.core.color import Rgba
from geometrize.core.config import StepConfig
from geometrize.core.difference import (
    EnergyFunction,
    compute_color,
    default_energy,
    difference_full,
    difference_partial,
)
from geometrize.core.hill_climb import best_hill_climb_state
from geometrize.core.scanline import Scanline
from geometrize.core.state import ShapeResult
from geometrize.shapes.base import Bounds, Shape
from geometrize.shapes.registry import ShapeCreator

logger = logging.getLogger(__name__)

AcceptancePrecondition = Callable[
    [float, float, Shape, Sequence[Scanline], Rgba, Bitmap, Bitmap, Bitmap], bool
]


def default_acceptance_precondition(
    last_score: float,
    new_score: float,
    shape: Shape,
    lines: Sequence[Scanline],
    color: Rgba,
    before: Bitmap,
    after: Bitmap,
    target: Bitmap,
) -> bool:
    """Accept a shape only if it lowers the difference."""
    return new_score < last_score


class Model:
    """Approximates a target bitmap by compositing shapes onto a current bitmap.

    ``current`` and ``last_score`` are readable at any time; ``current`` is
    only changed by an accepted ``step``, ``draw`` or ``reset``, and always in
    place.
    """

    def __init__(self, target: Bitmap, initial: Bitmap | None = None) -> None:
        if initial is not None and initial.size != target.size:
            raise ValueError(
                f"Initial bitmap is {initial.width}x{initial.height}, "
                f"target is {target.width}x{target.height}"
            )
        self._target = target
        if initial is None:
            self.current = Bitmap(target.width, target.height, target.average_color())
        else:
            self.current = initial.copy()
        self.last_score = difference_full(target, self.current)
        self.base_seed = 0
        self.seed_offset = 0
        logger.info("Model %dx%d created, initial score %.6f", self.width, self.height, self.last_score)

    @property
    def width(self) -> int:
        return self._target.width

    @property
    def height(self) -> int:
        return self._target.height

    @property
    def target(self) -> Bitmap:
        return self._target

    def get_target(self) -> Bitmap:
        return self._target

    @property
    def bounds(self) -> Bounds:
        return Bounds.of_size(self.width, self.height)

    @property
    def step_count(self) -> int:
        return self.seed_offset

    def set_seed(self, seed: int) -> None:
        """Set the base seed; each step still advances its own offset."""
        self.base_seed = seed

    def reset(self, background: Rgba) -> None:
        self.current.fill(background)
        self.last_score = difference_full(self._target, self.current)

    def step(
        self,
        shape_creator: ShapeCreator,
        alpha: int,
        shape_count: int,
        max_shape_mutations: int,
        energy_function: EnergyFunction = default_energy,
        precondition: AcceptancePrecondition = default_acceptance_precondition,
        max_workers: int = 1,
    ) -> list[ShapeResult]:
        """Search for the best next shape and add it if the precondition accepts it.

        Returns a single result, or an empty list when the shape was rejected
        (``current`` is then unchanged).
        """
        if not 0 <= alpha <= 255:
            raise ValueError(f"alpha must be in 0..255, got {alpha}")
        if shape_count < 1:
            raise ValueError(f"shape_count must be at least 1, got {shape_count}")
        if max_shape_mutations < 0:
            raise ValueError(f"max_shape_mutations must be non-negative, got {max_shape_mutations}")
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

        seed = self.base_seed + self.seed_offset
        self.seed_offset += 1

        state = best_hill_climb_state(
            shape_creator,
            alpha,
            shape_count,
            max_shape_mutations,
            self._target,
            self.current,
            self.last_score,
            energy_function,
            seed,
            max_workers=max_workers,
        )

        shape = state.shape.clone()
        lines = shape.rasterize(self.bounds)
        if not lines:
            logger.debug("Step %d: winning %s covers no pixels", seed, type(shape).__name__)
        color = compute_color(lines, self._target, self.current, alpha)
        before = self.current.copy()
        self.current.draw(lines, color)
        new_score = difference_partial(before, self.current, self._target, self.last_score, lines)

        if not precondition(
            self.last_score, new_score, shape, lines, color, before, self.current, self._target
        ):
            self.current.copy_lines(before, lines)
            logger.debug("Step %d rejected: %.6f -> %.6f", seed, self.last_score, new_score)
            return []

        logger.debug("Step %d accepted: %.6f -> %.6f", seed, self.last_score, new_score)
        self.last_score = new_score
        return [ShapeResult(score=new_score, color=color, shape=shape)]

    def step_with(
        self,
        config: StepConfig,
        energy_function: EnergyFunction = default_energy,
        precondition: AcceptancePrecondition = default_acceptance_precondition,
    ) -> list[ShapeResult]:
        """Run ``step`` with the parameters held by ``config``."""
        return self.step(
            config.shape_creator(),
            config.alpha,
            config.shape_count,
            config.max_shape_mutations,
            energy_function=energy_function,
            precondition=precondition,
            max_workers=config.max_workers,
        )

    def draw(self, shape: Shape, color: Rgba) -> ShapeResult:
        """Composite ``shape`` unconditionally, e.g. to paint a background."""
        lines = shape.rasterize(self.bounds)
        before = self.current.copy()
        self.current.draw(lines, color)
        self.last_score = difference_partial(before, self.current, self._target, self.last_score, lines)
        return ShapeResult(score=self.last_score, color=color, shape=shape)
