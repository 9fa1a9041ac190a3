"""Behaviour shared by every shape variant."""

import pytest

from geometrize.core.rng import SplitMix64
from geometrize.shapes import Bounds, ShapeKind, create_shape

BOUNDS = Bounds.of_size(64, 48)
ALL_KINDS = list(ShapeKind)


def _setup(kind, seed=1):
    shape = create_shape(kind)
    shape.setup(BOUNDS, SplitMix64(seed))
    return shape


def _assert_valid_scanlines(lines, bounds):
    pixels = set()
    for line in lines:
        assert bounds.y_min <= line.y <= bounds.y_max
        assert bounds.x_min <= line.x1 <= line.x2 <= bounds.x_max
        for x in range(line.x1, line.x2 + 1):
            assert (x, line.y) not in pixels, f"pixel {(x, line.y)} covered twice"
            pixels.add((x, line.y))


@pytest.mark.parametrize("kind", ALL_KINDS)
class TestEveryShape:
    def test_setup_is_deterministic(self, kind):
        assert _setup(kind, seed=5) == _setup(kind, seed=5)

    def test_rasterize_is_trimmed_and_duplicate_free(self, kind):
        rng = SplitMix64(21)
        shape = create_shape(kind)
        shape.setup(BOUNDS, rng)
        for _ in range(60):
            shape.mutate(BOUNDS, rng)
            _assert_valid_scanlines(shape.rasterize(BOUNDS), BOUNDS)

    def test_rasterize_covers_something_after_setup(self, kind):
        assert _setup(kind).rasterize(BOUNDS)

    def test_clone_is_equal_and_independent(self, kind):
        shape = _setup(kind)
        clone = shape.clone()
        assert clone == shape
        assert clone is not shape
        rng = SplitMix64(99)
        for _ in range(10):
            clone.mutate(BOUNDS, rng)
        assert shape == _setup(kind)

    def test_mutation_changes_parameters_eventually(self, kind):
        shape = _setup(kind)
        original = shape.clone()
        rng = SplitMix64(4)
        for _ in range(20):
            shape.mutate(BOUNDS, rng)
        assert shape != original

    def test_mutation_is_deterministic(self, kind):
        a, b = _setup(kind), _setup(kind)
        ra, rb = SplitMix64(8), SplitMix64(8)
        for _ in range(15):
            a.mutate(BOUNDS, ra)
            b.mutate(BOUNDS, rb)
        assert a == b

    def test_rasterize_on_tiny_canvas(self, kind):
        tiny = Bounds.of_size(1, 1)
        rng = SplitMix64(2)
        shape = create_shape(kind)
        shape.setup(tiny, rng)
        shape.mutate(tiny, rng)
        _assert_valid_scanlines(shape.rasterize(tiny), tiny)


def test_different_kinds_are_never_equal():
    shapes = [create_shape(kind) for kind in ALL_KINDS]
    for i, a in enumerate(shapes):
        for j, b in enumerate(shapes):
            assert (a == b) == (i == j)


def test_malformed_bounds_raise():
    with pytest.raises(ValueError):
        Bounds(5, 0, 4, 10)
