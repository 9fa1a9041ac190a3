"""Geometrize: approximate images with optimized geometric shapes."""

from geometrize.shapes import Bounds, ShapeKind, create_shape, shape_creator
from geometrize.core import Bitmap, Model, Rgba, ShapeResult, StepConfig
from geometrize.main import configure_logging, create_model, create_step_config, run

__all__ = [
    "Bounds",
    "ShapeKind",
    "create_shape",
    "shape_creator",
    "Bitmap",
    "Model",
    "Rgba",
    "ShapeResult",
    "StepConfig",
    "configure_logging",
    "create_model",
    "create_step_config",
    "run",
]
