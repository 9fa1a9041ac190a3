"""SplitMix64: the only source of randomness in the engine.

Every search owns its own generator. Seeds for parallel candidates come from
``derive_seed`` so results never depend on scheduling order.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK64 = (1 << 64) - 1

# Golden-ratio increment and finalizer multipliers of SplitMix64.
_GAMMA = 0x9E3779B97F4A7C15
_MIX_1 = 0xBF58476D1CE4E5B9
_MIX_2 = 0x94D049BB133111EB


def _mix64(z: int) -> int:
    z = ((z ^ (z >> 30)) * _MIX_1) & _MASK64
    z = ((z ^ (z >> 27)) * _MIX_2) & _MASK64
    return z ^ (z >> 31)


def derive_seed(seed: int, index: int) -> int:
    """Seed for candidate ``index`` of a step seeded with ``seed``."""
    return _mix64((seed + (index + 1) * _GAMMA) & _MASK64)


class SplitMix64:
    """Seedable 64-bit generator with no hidden global state."""

    def __init__(self, seed: int = 0) -> None:
        self.state = seed & _MASK64

    def seed(self, seed: int) -> None:
        self.state = seed & _MASK64

    def next_u64(self) -> int:
        self.state = (self.state + _GAMMA) & _MASK64
        return _mix64(self.state)

    def next_in_range(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]`` (both inclusive).

        Lemire's multiply-shift: rejection only happens when the low half of
        the product falls under ``2**64 mod span``.
        """
        if low > high:
            raise ValueError(f"Empty range: [{low}, {high}]")
        span = high - low + 1
        if span > _MASK64:
            return low + self.next_u64()

        m = self.next_u64() * span
        if (m & _MASK64) < span:
            threshold = (-span & _MASK64) % span
            while (m & _MASK64) < threshold:
                m = self.next_u64() * span
        return low + (m >> 64)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.next_in_range(0, len(items) - 1)]

    def __repr__(self) -> str:
        return f"SplitMix64(state={self.state:#018x})"
