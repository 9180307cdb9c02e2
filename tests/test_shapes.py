import io
import math

import pytest

from guesswho.console import Console, ConsoleColor
from guesswho.shapes import (
    Circle,
    Line,
    Pixel,
    Point2D,
    Shape,
    circle_points,
    line_points,
)


def adjacent(a, b):
    return max(abs(a.x - b.x), abs(a.y - b.y)) == 1


@pytest.mark.parametrize(
    "x0,y0,x1,y1",
    [(57, 19, 63, 19), (49, 11, 49, 27), (58, 4, 49, 11), (63, 5, 70, 11), (0, 0, 3, 9)],
)
def test_line_endpoints_and_continuity(x0, y0, x1, y1):
    pts = line_points(x0, y0, x1, y1)
    assert pts[0] == Point2D(x0, y0)
    assert pts[-1] == Point2D(x1, y1)
    assert len(pts) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    assert all(adjacent(a, b) for a, b in zip(pts, pts[1:]))


def test_horizontal_line_stays_on_row():
    pts = line_points(57, 19, 63, 19)
    assert {p.y for p in pts} == {19}
    assert [p.x for p in pts] == list(range(57, 64))


def test_single_point_line():
    assert line_points(4, 4, 4, 4) == [Point2D(4, 4)]


def test_line_reversed_covers_same_length():
    forward = line_points(1, 2, 9, 5)
    backward = line_points(9, 5, 1, 2)
    assert len(forward) == len(backward)


@pytest.mark.parametrize("r", [2, 5, 10])
def test_circle_points_near_radius(r):
    pts = circle_points(60, 15, r)
    for p in pts:
        assert abs(math.hypot(p.x - 60, p.y - 15) - r) <= 1


@pytest.mark.parametrize("r", [2, 7, 10])
def test_circle_is_symmetric(r):
    cells = set(circle_points(20, 20, r))
    for p in cells:
        assert Point2D(40 - p.x, p.y) in cells
        assert Point2D(p.x, 40 - p.y) in cells
        assert Point2D(20 + (p.y - 20), 20 + (p.x - 20)) in cells


def test_circle_points_come_in_eights():
    assert len(circle_points(0, 0, 6)) % 8 == 0


def test_circle_reaches_extremes():
    cells = set(circle_points(10, 10, 4))
    assert Point2D(10, 14) in cells
    assert Point2D(14, 10) in cells
    assert Point2D(6, 10) in cells


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape(Point2D(0, 0), ConsoleColor.RED)


def test_line_points_match_function():
    line = Line(Point2D(1, 1), Point2D(5, 3), ConsoleColor.RED)
    assert line.points() == line_points(1, 1, 5, 3)
    assert line.location == Point2D(1, 1)
    assert line.end == Point2D(5, 3)


def test_circle_points_match_function():
    circle = Circle(3, Point2D(8, 8), ConsoleColor.WHITE)
    assert circle.points() == circle_points(8, 8, 3)
    assert circle.radius == 3


def test_draw_wraps_plots_in_colour_and_reset():
    line = Line(Point2D(1, 1), Point2D(4, 1), ConsoleColor.YELLOW)
    stream = io.StringIO()
    line.draw(Console(stream))

    expected_stream = io.StringIO()
    expected = Console(expected_stream)
    expected.set_background_color(ConsoleColor.YELLOW)
    for p in line.points():
        expected.set_cursor_position(p.x, p.y)
        expected.write(" ")
    expected.reset()
    assert stream.getvalue() == expected_stream.getvalue()


def test_draw_writes_one_blank_per_point():
    circle = Circle(4, Point2D(10, 10), ConsoleColor.GREEN)
    stream = io.StringIO()
    circle.draw(Console(stream))
    assert stream.getvalue().count(" ") == len(circle.points())
    assert stream.getvalue().endswith("\x1b[0m")


def test_plot_positions_cursor_then_blank():
    line = Line(Point2D(0, 0), Point2D(0, 0), ConsoleColor.RED)
    stream = io.StringIO()
    line.plot(Console(stream), 7, 2)
    ref_stream = io.StringIO()
    Console(ref_stream).set_cursor_position(7, 2)
    assert stream.getvalue() == ref_stream.getvalue() + " "


def test_pixel_draw():
    pixel = Pixel(Point2D(57, 13), ConsoleColor.BLUE)
    stream = io.StringIO()
    pixel.draw(Console(stream))

    ref_stream = io.StringIO()
    ref = Console(ref_stream)
    ref.set_background_color(ConsoleColor.BLUE)
    ref.set_cursor_position(57, 13)
    ref.write(" ")
    ref.reset()
    assert stream.getvalue() == ref_stream.getvalue()


def test_pixel_fields_are_mutable():
    pixel = Pixel(Point2D(1, 1), ConsoleColor.RED)
    pixel.color = ConsoleColor.GREEN
    pixel.location = Point2D(2, 3)
    assert pixel == Pixel(Point2D(2, 3), ConsoleColor.GREEN)