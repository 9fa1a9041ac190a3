"""Shape registry: every shape variant is a dataclass registered via decorator.

Usage:
    @shape(kind=ShapeKind.CIRCLE, description="Filled circle")
    @dataclass
    class Circle:
        x: int = 0
        ...

The set of kinds is closed: ``ShapeKind`` enumerates every variant, and
registering a class under an existing kind is an error.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from geometrize.core.rng import SplitMix64
    from geometrize.shapes.base import Shape

logger = logging.getLogger(__name__)

ShapeCreator = Callable[["SplitMix64"], "Shape"]


class ShapeKind(str, enum.Enum):
    RECTANGLE = "rectangle"
    ROTATED_RECTANGLE = "rotated_rectangle"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYLINE = "polyline"
    QUADRATIC_BEZIER = "quadratic_bezier"


@dataclass
class ShapeSpec:
    kind: ShapeKind
    factory: Callable[[], "Shape"]
    description: str = ""


class ShapeRegistry:
    """Registry of shape constructors keyed by kind."""

    def __init__(self) -> None:
        self._shapes: dict[ShapeKind, ShapeSpec] = {}

    def register(self, spec: ShapeSpec) -> None:
        if spec.kind in self._shapes:
            raise ValueError(f"Duplicate shape kind: {spec.kind.value}")
        self._shapes[spec.kind] = spec
        logger.debug("Registered shape %s", spec.kind.value)

    def get(self, kind: ShapeKind) -> ShapeSpec:
        try:
            return self._shapes[ShapeKind(kind)]
        except (KeyError, ValueError):
            raise ValueError(f"Unknown shape kind: {kind!r}") from None

    def kind_of(self, shape: Shape) -> ShapeKind:
        for spec in self._shapes.values():
            if type(shape) is spec.factory:
                return spec.kind
        raise ValueError(f"Unregistered shape type: {type(shape).__name__}")

    def all(self) -> list[ShapeSpec]:
        order = list(ShapeKind)
        return sorted(self._shapes.values(), key=lambda s: order.index(s.kind))

    @property
    def count(self) -> int:
        return len(self._shapes)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape(*, kind: ShapeKind, description: str = ""):
    """Class decorator registering a shape variant under ``kind``."""

    def decorator(cls):
        _registry.register(ShapeSpec(kind=kind, factory=cls, description=description))
        return cls

    return decorator


def create_shape(kind: ShapeKind | str) -> Shape:
    """A fresh, not yet set up shape of the given kind."""
    return _registry.get(kind).factory()


def shape_creator(*kinds: ShapeKind | str, registry: ShapeRegistry | None = None) -> ShapeCreator:
    """Build a creator that picks one of ``kinds`` uniformly with the candidate's generator.

    A single kind never consumes randomness.
    """
    reg = registry or _registry
    specs = [reg.get(k) for k in kinds]
    if not specs:
        raise ValueError("At least one shape kind is required")

    if len(specs) == 1:
        factory = specs[0].factory
        return lambda rng: factory()

    def create(rng: SplitMix64) -> Shape:
        return rng.choice(specs).factory()

    return create
