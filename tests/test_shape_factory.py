import random

import pytest

from guesswho.console import ConsoleColor
from guesswho.shape_factory import (
    random_circle,
    random_color,
    random_line,
    random_point,
)
from guesswho.shapes import Circle, Line


@pytest.mark.parametrize("seed", range(50))
def test_random_point_in_window(seed):
    p = random_point(100, 50, random.Random(seed))
    assert 1 <= p.x <= 99
    assert 1 <= p.y <= 49


def test_random_point_smallest_window_is_fixed():
    p = random_point(2, 2, random.Random(0))
    assert (p.x, p.y) == (1, 1)


def test_random_point_rejects_tiny_window():
    with pytest.raises(ValueError):
        random_point(1, 10)


def test_random_color_never_black_or_default():
    rng = random.Random(3)
    colours = {random_color(rng) for _ in range(500)}
    assert ConsoleColor.BLACK not in colours
    assert ConsoleColor.DEFAULT not in colours
    assert colours == {
        ConsoleColor.RED,
        ConsoleColor.GREEN,
        ConsoleColor.YELLOW,
        ConsoleColor.BLUE,
        ConsoleColor.MAGENTA,
        ConsoleColor.CYAN,
        ConsoleColor.WHITE,
    }


def test_same_seed_same_shapes():
    a = random_line(100, 50, random.Random(11))
    b = random_line(100, 50, random.Random(11))
    assert a.points() == b.points()
    assert a.color == b.color


@pytest.mark.parametrize("seed", range(30))
def test_random_line_inside_window(seed):
    line = random_line(40, 20, random.Random(seed))
    assert isinstance(line, Line)
    for p in line.points():
        assert 1 <= p.x <= 39
        assert 1 <= p.y <= 19


@pytest.mark.parametrize("seed", range(50))
def test_random_circle_fits(seed):
    circle = random_circle(100, 50, random.Random(seed))
    assert isinstance(circle, Circle)
    assert circle.radius >= 2
    c = circle.location
    assert c.x - circle.radius > 0 and c.x + circle.radius < 100
    assert c.y - circle.radius > 0 and c.y + circle.radius < 50
    for p in circle.points():
        assert 0 < p.x < 100
        assert 0 < p.y < 50


def test_random_circle_minimum_window_gives_radius_two():
    circle = random_circle(6, 8, random.Random(5))
    assert circle.radius == 2
    assert circle.location.x == 3
    assert circle.location.y in (3, 4, 5)


@pytest.mark.parametrize("size", [(5, 50), (100, 7)])
def test_random_circle_rejects_small_window(size):
    with pytest.raises(ValueError):
        random_circle(*size)