"""ANSI escape-sequence output for a text terminal."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

ESC = "\x1b"


class ConsoleColor(IntEnum):
    """The eight standard terminal colours plus the terminal default."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    DEFAULT = 9


_PRINTABLE = (str, int, float)


def _check_printable(message: object) -> None:
    if not isinstance(message, _PRINTABLE):
        raise TypeError(
            f"cannot write a {type(message).__name__}; "
            "write the items inside it instead"
        )


class Console:
    """Writes text and control sequences to a stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        width: int = 100,
        height: int = 50,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.width = width
        self.height = height

    def _emit(self, text: str) -> None:
        self.stream.write(text)

    def resize_window(self, width: int, height: int) -> None:
        """Record the new window size and ask the terminal to resize."""
        self.width = width
        self.height = height
        self._emit(f"{ESC}[8;{height};{width}t")

    def reset(self) -> None:
        """Restore the default colours and attributes."""
        self._emit(f"{ESC}[0m")

    def clear(self) -> None:
        """Clear the screen and move the cursor to the top-left corner."""
        self._emit(f"{ESC}[2J{ESC}[H")

    def set_cursor_position(self, x: int, y: int) -> None:
        self._emit(f"{ESC}[{y};{x}H")

    def set_cursor_left(self, x: int) -> None:
        self._emit(f"{ESC}[{x}G")

    def set_foreground_color(self, color: ConsoleColor) -> None:
        self._emit(f"{ESC}[{int(color) + 30}m")

    def set_foreground_rgb(self, r: int, g: int, b: int) -> None:
        self._emit(f"{ESC}[38;2;{r};{g};{b}m")

    def set_background_color(self, color: ConsoleColor) -> None:
        self._emit(f"{ESC}[{int(color) + 40}m")

    def set_background_rgb(self, r: int, g: int, b: int) -> None:
        self._emit(f"{ESC}[48;2;{r};{g};{b}m")

    def write(
        self,
        message: str | int | float,
        fore_color: ConsoleColor | None = None,
        back_color: ConsoleColor = ConsoleColor.BLACK,
    ) -> None:
        """Write a message, coloured and followed by a reset when a colour is given."""
        _check_printable(message)
        if fore_color is None:
            self._emit(str(message))
            return
        self.set_foreground_color(fore_color)
        self.set_background_color(back_color)
        self._emit(str(message))
        self.reset()

    def write_line(
        self,
        message: str | int | float,
        fore_color: ConsoleColor | None = None,
        back_color: ConsoleColor = ConsoleColor.BLACK,
    ) -> None:
        """Like write, then end the line and flush."""
        self.write(message, fore_color, back_color)
        self._emit("\n")
        self.stream.flush()