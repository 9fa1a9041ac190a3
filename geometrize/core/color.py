"""RGBA color value type."""

from __future__ import annotations

from typing import NamedTuple


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def with_alpha(self, a: int) -> Rgba:
        return self._replace(a=a)


BLACK = Rgba(0, 0, 0)
WHITE = Rgba(255, 255, 255)
