"""Model factory and logging setup."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from geometrize.config import Settings, settings
from geometrize.core.bitmap import Bitmap
from geometrize.core.config import StepConfig
from geometrize.core.model import Model

load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(config: Settings | None = None) -> None:
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.geometrize_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_model(target: Bitmap, initial: Bitmap | None = None, config: Settings | None = None) -> Model:
    """Build a model seeded from settings."""
    config = config or settings
    model = Model(target, initial)
    model.set_seed(config.geometrize_seed)
    return model


def create_step_config(config: Settings | None = None) -> StepConfig:
    return StepConfig.from_settings(config or settings)


def run(target: Bitmap, steps: int, config: Settings | None = None) -> Model:
    """Build a model from settings and step it ``steps`` times.

    Rejected steps still count towards ``steps``.
    """
    config = config or settings
    model = create_model(target, config=config)
    step_config = create_step_config(config)
    accepted = 0
    for _ in range(steps):
        accepted += len(model.step_with(step_config))
    logger.info(
        "Ran %d steps, %d shapes accepted, score %.6f", steps, accepted, model.last_score
    )
    return model
