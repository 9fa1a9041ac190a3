"""Geometrize optimization core: bitmaps, scoring, hill climbing and the stepping model."""

from geometrize.core.bitmap import Bitmap
from geometrize.core.color import Rgba
from geometrize.core.config import StepConfig
from geometrize.core.difference import compute_color, default_energy, difference_full, difference_partial
from geometrize.core.hill_climb import best_hill_climb_state, hill_climb
from geometrize.core.model import Model, default_acceptance_precondition
from geometrize.core.rng import SplitMix64, derive_seed
from geometrize.core.scanline import Scanline, trim_scanlines
from geometrize.core.state import ShapeResult, State

__all__ = [
    "Bitmap",
    "Rgba",
    "StepConfig",
    "compute_color",
    "default_energy",
    "difference_full",
    "difference_partial",
    "best_hill_climb_state",
    "hill_climb",
    "Model",
    "default_acceptance_precondition",
    "SplitMix64",
    "derive_seed",
    "Scanline",
    "trim_scanlines",
    "ShapeResult",
    "State",
]
