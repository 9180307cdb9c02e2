"""Random shapes that fit inside a window of a given size."""

from __future__ import annotations

import random
from typing import Protocol

from .console import ConsoleColor
from .shapes import Circle, Line, Point2D


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _source(rng: _RandomSource | None) -> _RandomSource:
    return rng if rng is not None else random.Random()


def random_point(
    width: int, height: int, rng: _RandomSource | None = None
) -> Point2D:
    """A point with 1 <= x < width and 1 <= y < height."""
    if width < 2 or height < 2:
        raise ValueError("window must be at least 2x2")
    rng = _source(rng)
    x = rng.randrange(width - 1) + 1
    y = rng.randrange(height - 1) + 1
    return Point2D(x, y)


def random_color(rng: _RandomSource | None = None) -> ConsoleColor:
    """Any colour from red to white; never black or the default."""
    rng = _source(rng)
    return ConsoleColor(rng.randrange(7) + 1)


def random_line(width: int, height: int, rng: _RandomSource | None = None) -> Line:
    rng = _source(rng)
    first = random_point(width, height, rng)
    second = random_point(width, height, rng)
    return Line(first, second, random_color(rng))


def random_circle(
    width: int, height: int, rng: _RandomSource | None = None
) -> Circle:
    """A circle of radius at least 2 lying strictly inside the window."""
    if width < 6 or height < 8:
        raise ValueError("window too small for a circle (need at least 6x8)")
    rng = _source(rng)
    x0 = rng.randrange(width - 5) + 3
    y0 = rng.randrange(height - 5) + 3
    while True:
        radius = rng.randrange((height - 6) // 2) + 2
        if x0 - radius > 0 and x0 + radius < width and y0 - radius > 0 and y0 + radius < height:
            break
    return Circle(radius, Point2D(x0, y0), random_color(rng))