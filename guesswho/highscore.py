"""High-score records and the ten-entry table kept on disk."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

TABLE_SIZE = 10
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read the integer at the start of text, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a score: {text!r}")
    return int(match.group(1))


def _fields(line: str, delimiter: str) -> list[str]:
    parts = line.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


@dataclass
class HighScore:
    name: str = ""
    score: int = 0

    @classmethod
    def from_line(cls, line: str, delimiter: str = "[") -> HighScore:
        """Parse 'name<delimiter>score'; fields alternate name, score, name, ..."""
        entry = cls()
        for index, field in enumerate(_fields(line, delimiter)):
            if index % 2 == 0:
                entry.name = field
            else:
                entry.score = _parse_int(field)
        return entry

    def to_line(self, delimiter: str = "[") -> str:
        return f"{self.name}{delimiter}{self.score}"


class HighScoreTable:
    """An ordered list of high scores, best first."""

    def __init__(self, scores: Iterable[HighScore] | None = None) -> None:
        self.scores = list(scores) if scores is not None else []

    @classmethod
    def load(cls, path: str | Path, delimiter: str = "[") -> HighScoreTable:
        """Read one score per line; raises OSError if the file cannot be read."""
        text = Path(path).read_text()
        return cls(HighScore.from_line(line, delimiter) for line in _fields(text, "\n"))

    def save(self, path: str | Path, delimiter: str = "[") -> None:
        Path(path).write_text(
            "".join(score.to_line(delimiter) + "\n" for score in self.scores)
        )

    def add(self, new_score: HighScore) -> bool:
        """Place a score that beats the tenth entry, dropping the last one.

        Returns True if the table changed.
        """
        if len(self.scores) < TABLE_SIZE:
            raise IndexError(f"high score table needs at least {TABLE_SIZE} entries")
        if new_score.score <= self.scores[TABLE_SIZE - 1].score:
            return False
        position = next(
            index
            for index, entry in enumerate(self.scores)
            if new_score.score > entry.score
        )
        self.scores.insert(position, new_score)
        self.scores.pop()
        return True

    def format(self) -> str:
        lines = "".join(f"{entry.name:<20}{entry.score}\n" for entry in self.scores)
        return f"\n-----HIGH SCORES-----\n{lines}\n"

    def __len__(self) -> int:
        return len(self.scores)

    def __iter__(self):
        return iter(self.scores)