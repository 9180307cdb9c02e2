"""Simple shapes drawn as coloured cells on a terminal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .console import Console, ConsoleColor


@dataclass(frozen=True)
class Point2D:
    x: int
    y: int


def line_points(x0: int, y0: int, x1: int, y1: int) -> list[Point2D]:
    """Cells of a line from (x0, y0) to (x1, y1), in drawing order."""
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    error = dx + dy
    points = []
    while True:
        points.append(Point2D(x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * error
        if e2 >= dy:
            if x0 == x1:
                break
            error += dy
            x0 += sx
        if e2 <= dx:
            if y0 == y1:
                break
            error += dx
            y0 += sy
    return points


def _octants(xc: int, yc: int, x: int, y: int) -> list[Point2D]:
    return [
        Point2D(xc + x, yc + y),
        Point2D(xc - x, yc + y),
        Point2D(xc + x, yc - y),
        Point2D(xc - x, yc - y),
        Point2D(xc + y, yc + x),
        Point2D(xc - y, yc + x),
        Point2D(xc + y, yc - x),
        Point2D(xc - y, yc - x),
    ]


def circle_points(xc: int, yc: int, r: int) -> list[Point2D]:
    """Cells of a circle, eight symmetric cells per step, repeats included."""
    x, y = 0, r
    d = 3 - 2 * r
    points = _octants(xc, yc, x, y)
    while y >= x:
        x += 1
        if d > 0:
            y -= 1
            d += 4 * (x - y) + 10
        else:
            d += 4 * x + 6
        points.extend(_octants(xc, yc, x, y))
    return points


class Shape(ABC):
    """A shape anchored at a location and drawn in one background colour."""

    def __init__(self, location: Point2D, color: ConsoleColor) -> None:
        self.location = location
        self.color = color

    def plot(self, console: Console, x: int, y: int) -> None:
        console.set_cursor_position(x, y)
        console.write(" ")

    @abstractmethod
    def points(self) -> list[Point2D]:
        """The cells the shape covers, in drawing order."""

    def draw(self, console: Console) -> None:
        console.set_background_color(self.color)
        for point in self.points():
            self.plot(console, point.x, point.y)
        console.reset()


class Line(Shape):
    def __init__(self, start: Point2D, end: Point2D, color: ConsoleColor) -> None:
        super().__init__(start, color)
        self.end = end

    def points(self) -> list[Point2D]:
        return line_points(self.location.x, self.location.y, self.end.x, self.end.y)

    def __repr__(self) -> str:
        return f"Line({self.location!r}, {self.end!r}, {self.color!r})"


class Circle(Shape):
    def __init__(self, radius: int, center: Point2D, color: ConsoleColor) -> None:
        super().__init__(center, color)
        self.radius = radius

    def points(self) -> list[Point2D]:
        return circle_points(self.location.x, self.location.y, self.radius)

    def __repr__(self) -> str:
        return f"Circle({self.radius!r}, {self.location!r}, {self.color!r})"


@dataclass
class Pixel:
    """A single coloured cell."""

    location: Point2D
    color: ConsoleColor

    def draw(self, console: Console) -> None:
        console.set_background_color(self.color)
        console.set_cursor_position(self.location.x, self.location.y)
        console.write(" ")
        console.reset()