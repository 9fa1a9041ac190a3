"""Hill climbing: greedy local search over one shape's parameters.

A candidate is mutated one parameter at a time; strictly better mutations
replace it, and the search stops after ``max_age`` consecutive failures.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from geometrize.core.bitmap import Bitmap
from geometrize.core.difference import EnergyFunction
from geometrize.core.rng import SplitMix64, derive_seed
from geometrize.core.state import State
from geometrize.shapes.base import Bounds
from geometrize.shapes.registry import ShapeCreator

logger = logging.getLogger(__name__)


def hill_climb(
    state: State,
    max_age: int,
    target: Bitmap,
    current: Bitmap,
    buffer: Bitmap,
    score: float,
    energy_function: EnergyFunction,
    rng: SplitMix64,
) -> State:
    """Improve ``state`` until ``max_age`` mutations in a row fail to lower its energy.

    ``state.score`` must already hold the energy of ``state.shape``; it is
    the first best. The input state is not modified.
    """
    bounds = Bounds.of_size(target.width, target.height)
    best = state.clone()
    age = 0
    while age < max_age:
        candidate = best.shape.clone()
        candidate.mutate(bounds, rng)
        lines = candidate.rasterize(bounds)
        energy = energy_function(lines, best.alpha, target, current, buffer, score)
        if energy < best.score:
            best = State(energy, best.alpha, candidate)
            age = 0
        else:
            age += 1
    return best


def random_state(
    shape_creator: ShapeCreator,
    alpha: int,
    target: Bitmap,
    current: Bitmap,
    buffer: Bitmap,
    score: float,
    energy_function: EnergyFunction,
    rng: SplitMix64,
) -> State:
    """A freshly set up random shape, scored."""
    bounds = Bounds.of_size(target.width, target.height)
    shape = shape_creator(rng)
    shape.setup(bounds, rng)
    lines = shape.rasterize(bounds)
    return State(energy_function(lines, alpha, target, current, buffer, score), alpha, shape)


def best_hill_climb_state(
    shape_creator: ShapeCreator,
    alpha: int,
    shape_count: int,
    max_age: int,
    target: Bitmap,
    current: Bitmap,
    score: float,
    energy_function: EnergyFunction,
    seed: int,
    max_workers: int = 1,
) -> State:
    """Run ``shape_count`` independent searches and return the lowest-energy result.

    Candidate ``i`` draws from its own generator seeded with
    ``derive_seed(seed, i)`` and works in its own scratch buffer, so the
    winner is the same for any ``max_workers``. Ties go to the lowest index.
    """

    def search(index: int, buffer: Bitmap) -> State:
        rng = SplitMix64(derive_seed(seed, index))
        initial = random_state(shape_creator, alpha, target, current, buffer, score, energy_function, rng)
        return hill_climb(initial, max_age, target, current, buffer, score, energy_function, rng)

    if max_workers <= 1 or shape_count == 1:
        # One scratch buffer serves every candidate in turn
        buffer = current.copy()
        states = [search(i, buffer) for i in range(shape_count)]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            states = list(pool.map(lambda i: search(i, current.copy()), range(shape_count)))

    best_index = min(range(len(states)), key=lambda i: states[i].score)
    best = states[best_index]
    logger.debug(
        "Best of %d candidates: #%d (%s) energy %.6f",
        shape_count,
        best_index,
        type(best.shape).__name__,
        best.score,
    )
    return best
