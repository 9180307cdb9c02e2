"""Cartoon faces of suspects, built from simple shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .console import Console, ConsoleColor
from .shapes import Circle, Line, Pixel, Point2D

_EYE_COLORS = {
    "Blue": ConsoleColor.BLUE,
    "Brown": ConsoleColor.RED,
    "Green": ConsoleColor.GREEN,
}

_HAIR_COLORS = {
    "Blond": ConsoleColor.YELLOW,
    "Brown": ConsoleColor.RED,
    "Bald": ConsoleColor.WHITE,
}


class Drawable(Protocol):
    def draw(self, console: Console) -> None: ...


def eye_console_color(name: str) -> ConsoleColor:
    """The terminal colour used to draw eyes of the named colour."""
    try:
        return _EYE_COLORS[name]
    except KeyError:
        raise ValueError(f"unknown eye colour: {name!r}") from None


def hair_console_color(name: str) -> ConsoleColor:
    """The terminal colour used to draw hair of the named colour."""
    try:
        return _HAIR_COLORS[name]
    except KeyError:
        raise ValueError(f"unknown hair colour: {name!r}") from None


def _line(x0: int, y0: int, x1: int, y1: int, color: ConsoleColor) -> Line:
    return Line(Point2D(x0, y0), Point2D(x1, y1), color)


@dataclass
class Person:
    """A face: head, eyes, mouth and nose."""

    eye_color: str = "Blue"

    def shapes(self) -> list[Drawable]:
        """Everything drawn for this person, in drawing order."""
        eye = eye_console_color(self.eye_color)
        return [
            Circle(10, Point2D(60, 15), ConsoleColor.WHITE),
            Pixel(Point2D(57, 13), eye),
            Pixel(Point2D(63, 13), eye),
            _line(57, 19, 63, 19, ConsoleColor.RED),
            Pixel(Point2D(56, 20), ConsoleColor.RED),
            Pixel(Point2D(64, 20), ConsoleColor.RED),
            Pixel(Point2D(60, 16), ConsoleColor.WHITE),
        ]

    def draw(self, console: Console) -> None:
        for shape in self.shapes():
            shape.draw(console)


@dataclass
class Male(Person):
    """A face with short hair."""

    hair_color: str = "Blond"

    def shapes(self) -> list[Drawable]:
        hair = hair_console_color(self.hair_color)
        return super().shapes() + [
            _line(57, 5, 63, 5, hair),
            _line(57, 5, 57, 7, hair),
            _line(60, 5, 60, 7, hair),
            _line(63, 5, 63, 7, hair),
            _line(57, 5, 50, 11, hair),
            _line(63, 5, 70, 11, hair),
        ]


@dataclass
class Female(Person):
    """A face with long hair."""

    hair_color: str = "Blond"

    def shapes(self) -> list[Drawable]:
        hair = hair_console_color(self.hair_color)
        return super().shapes() + [
            _line(57, 4, 63, 4, hair),
            _line(49, 11, 49, 27, hair),
            _line(58, 4, 49, 11, hair),
            _line(71, 11, 71, 27, hair),
            _line(62, 4, 71, 11, hair),
        ]