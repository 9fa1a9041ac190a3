"""Tests for the shape registry."""

from dataclasses import dataclass

import pytest

from geometrize.core.rng import SplitMix64
from geometrize.shapes import Circle, Rectangle
from geometrize.shapes.registry import (
    ShapeKind,
    ShapeRegistry,
    ShapeSpec,
    create_shape,
    get_registry,
    shape_creator,
)


@dataclass
class _Dummy:
    pass


def test_every_kind_is_registered():
    reg = get_registry()
    assert reg.count == len(ShapeKind)
    assert [spec.kind for spec in reg.all()] == list(ShapeKind)


def test_register_and_get():
    reg = ShapeRegistry()
    spec = ShapeSpec(kind=ShapeKind.RECTANGLE, factory=_Dummy)
    reg.register(spec)
    assert reg.get(ShapeKind.RECTANGLE) is spec
    assert reg.get("rectangle") is spec
    assert reg.count == 1


def test_duplicate_kind_raises():
    reg = ShapeRegistry()
    reg.register(ShapeSpec(kind=ShapeKind.LINE, factory=_Dummy))
    with pytest.raises(ValueError):
        reg.register(ShapeSpec(kind=ShapeKind.LINE, factory=_Dummy))


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        create_shape("hexagon")
    with pytest.raises(ValueError):
        ShapeRegistry().get(ShapeKind.CIRCLE)


def test_kind_of():
    reg = get_registry()
    assert reg.kind_of(Circle()) is ShapeKind.CIRCLE
    with pytest.raises(ValueError):
        reg.kind_of(_Dummy())


def test_create_shape_returns_fresh_instances():
    a = create_shape(ShapeKind.RECTANGLE)
    b = create_shape("rectangle")
    assert isinstance(a, Rectangle)
    assert a == b and a is not b


class TestShapeCreator:
    def test_single_kind_consumes_no_randomness(self):
        rng = SplitMix64(1)
        state = rng.state
        assert isinstance(shape_creator(ShapeKind.CIRCLE)(rng), Circle)
        assert rng.state == state

    def test_multiple_kinds_are_all_reachable(self):
        create = shape_creator(ShapeKind.CIRCLE, ShapeKind.RECTANGLE)
        rng = SplitMix64(5)
        assert {type(create(rng)) for _ in range(50)} == {Circle, Rectangle}

    def test_requires_a_kind(self):
        with pytest.raises(ValueError):
            shape_creator()
