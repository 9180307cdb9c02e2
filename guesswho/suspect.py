"""Suspects, the suspect board kept on disk, and the guessing game."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator, Protocol

NAMES = (
    "Albert", "Betty", "Chris", "Diane", "Eddy", "Fran", "Gary", "Helga",
    "Ian", "Jenny", "Kent", "Lakshmi", "Mike", "Nancy", "Oscar", "Patty",
    "Quincy", "Rita", "Steve", "Tina", "Umar", "Vanessa", "Walt", "Xena",
    "Yan", "Zelda",
)
SEXES = ("Male", "Female")
HEIGHTS = ("Tall", "Short")
HAIR_COLORS = ("Blond", "Brown", "Bald")
EYE_COLORS = ("Blue", "Brown", "Green")

BOARD_SIZE = 6
STARTING_SCORE = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _source(rng: _RandomSource | None) -> _RandomSource:
    return rng if rng is not None else random.Random()


class DuplicateSuspectError(KeyError):
    """A suspect with that name is already on the board."""


class UnknownSuspectError(KeyError):
    """No suspect with that name is on the board."""


def _capitalize_first(name: str) -> str:
    if not name:
        raise ValueError("a suspect needs a name")
    return name[0].upper() + name[1:]


@dataclass(frozen=True)
class Suspect:
    name: str = ""
    sex: str = ""
    height: str = ""
    hair_color: str = ""
    eye_color: str = ""

    @classmethod
    def from_line(cls, line: str, delimiter: str = "*") -> Suspect:
        """Parse 'name*sex*height*hair*eye'; missing fields are empty."""
        fields = line.split(delimiter)[:5]
        fields += [""] * (5 - len(fields))
        return cls(*fields)

    def to_line(self, delimiter: str = "*") -> str:
        return delimiter.join(
            (self.name, self.sex, self.height, self.hair_color, self.eye_color)
        )

    def same_traits(self, other: Suspect) -> bool:
        """True if every trait but the name matches."""
        return (
            self.sex == other.sex
            and self.height == other.height
            and self.hair_color == other.hair_color
            and self.eye_color == other.eye_color
        )


class SuspectBoard:
    """Suspects keyed by name, always listed in name order."""

    def __init__(self, suspects: Iterable[Suspect] | None = None) -> None:
        self._suspects: dict[str, Suspect] = {}
        for suspect in suspects or ():
            self._suspects[suspect.name] = suspect

    def __len__(self) -> int:
        return len(self._suspects)

    def __iter__(self) -> Iterator[Suspect]:
        return (self._suspects[name] for name in sorted(self._suspects))

    def __contains__(self, name: object) -> bool:
        return name in self._suspects

    def __getitem__(self, name: str) -> Suspect:
        try:
            return self._suspects[name]
        except KeyError:
            raise UnknownSuspectError(name) from None

    @classmethod
    def load(cls, path: str | Path, delimiter: str = "*") -> SuspectBoard:
        """Read one suspect per line; raises OSError if the file cannot be read."""
        text = Path(path).read_text()
        return cls(
            Suspect.from_line(line, delimiter) for line in text.splitlines() if line
        )

    def save(self, path: str | Path, delimiter: str = "*") -> None:
        Path(path).write_text(
            "".join(suspect.to_line(delimiter) + "\n" for suspect in self)
        )

    def add(self, name: str, sex: str, rng: _RandomSource | None = None) -> Suspect:
        """Add a suspect of the given sex with random height, hair and eyes."""
        name = _capitalize_first(name)
        if name in self._suspects:
            raise DuplicateSuspectError(name)
        if sex not in SEXES:
            raise ValueError(f"unknown sex: {sex!r}")
        rng = _source(rng)
        height = HEIGHTS[rng.randrange(len(HEIGHTS))]
        hair_color = HAIR_COLORS[rng.randrange(len(HAIR_COLORS))]
        eye_color = EYE_COLORS[rng.randrange(len(EYE_COLORS))]
        suspect = Suspect(name, sex, height, hair_color, eye_color)
        self._suspects[name] = suspect
        return suspect

    def remove(self, name: str) -> Suspect:
        name = _capitalize_first(name)
        try:
            return self._suspects.pop(name)
        except KeyError:
            raise UnknownSuspectError(name) from None

    def twins_of(self, name: str) -> list[Suspect]:
        """Other suspects sharing every trait with the named one."""
        target = self[name]
        return [
            other for other in self if other.name != target.name and other.same_traits(target)
        ]

    @classmethod
    def generate(cls, rng: _RandomSource | None = None) -> SuspectBoard:
        """Six suspects with distinct names and distinct trait combinations."""
        rng = _source(rng)
        board = cls()
        while len(board) < BOARD_SIZE:
            index = rng.randrange(len(NAMES))
            candidate = Suspect(
                NAMES[index],
                "Male" if index % 2 == 0 else "Female",
                HEIGHTS[rng.randrange(len(HEIGHTS))],
                HAIR_COLORS[rng.randrange(len(HAIR_COLORS))],
                EYE_COLORS[rng.randrange(len(EYE_COLORS))],
            )
            if candidate.name in board:
                continue
            if any(candidate.same_traits(other) for other in board):
                continue
            board._suspects[candidate.name] = candidate
        return board

    def format(self) -> str:
        """The printed suspect list.

        Only as many traits are shown per suspect as there are suspects,
        up to all four.
        """
        parts = ["\n-----SUSPECTS-----\n\n"]
        shown = len(self)
        for suspect in self:
            parts.append(f"Suspect name: {suspect.name}\n")
            traits = [
                f"Sex: {suspect.sex}\n",
                f"Height: {suspect.height}\n",
                f"Hair Color: {suspect.hair_color}\n",
                f"Eye Color: {suspect.eye_color}\n\n",
            ]
            parts.extend(traits[:shown])
        return "".join(parts)

    def choose_culprit(self, rng: _RandomSource | None = None) -> Suspect:
        if not self._suspects:
            raise ValueError("there are no suspects to choose from")
        rng = _source(rng)
        suspects = list(self)
        return suspects[rng.randrange(len(suspects))]


class Trait(Enum):
    SEX = ("sex", "sex")
    HEIGHT = ("height", "height")
    HAIR_COLOR = ("hair color", "hair_color")
    EYE_COLOR = ("eye color", "eye_color")

    def __init__(self, label: str, attribute: str) -> None:
        self.label = label
        self.attribute = attribute


class GuessGame:
    """Score keeping for one round of guessing a culprit."""

    def __init__(self, culprit: Suspect) -> None:
        self.culprit = culprit
        self.guesses = 1
        self.clues = 0
        self.score = STARTING_SCORE
        self.solved = False

    def guess(self, name: str) -> bool:
        """Check a guess, ignoring case; a wrong one costs a point."""
        if name.lower() == self.culprit.name.lower():
            self.solved = True
            return True
        self.guesses += 1
        self.score -= 1
        return False

    def clue(self, trait: Trait) -> str:
        """Reveal one trait of the culprit at the cost of a point."""
        self.clues += 1
        self.score -= 1
        return getattr(self.culprit, trait.attribute)


def _parse_choice(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    value = int(match.group(1))
    return value if _INT_MIN <= value <= _INT_MAX else 0


_GAME_MENU = (
    "Make a choice from the list below.\n"
    "1. Guess who committed the crime!\n"
    "2. Learn more about the suspect.\n"
    "3. Print the suspect list.\n"
    "4. Reveal the criminal!\n"
)

_CLUE_MENU = (
    "\nWhat do you want to know about the suspect?\n"
    "1. Sex\n"
    "2. Height\n"
    "3. Hair Color\n"
    "4. Eye Color\n"
)

_CLUE_CHOICES = {
    1: Trait.SEX,
    2: Trait.HEIGHT,
    3: Trait.HAIR_COLOR,
    4: Trait.EYE_COLOR,
}

_INVALID = "\nInvalid choice!\n\n"


def play_game(
    board: SuspectBoard,
    rng: _RandomSource | None = None,
    read: Callable[[], str] = input,
    write: Callable[[str], object] = print,
) -> GuessGame:
    """Run the interactive guessing round and return its final state."""
    game = GuessGame(board.choose_culprit(rng))
    culprit = game.culprit
    while True:
        write(_GAME_MENU)
        choice = _parse_choice(read())
        if choice == 1:
            write("\nWho do you think committed the crime? ")
            if game.guess(read()):
                tries = "try" if game.guesses == 1 else "tries"
                write(
                    "\nThat's right!\n"
                    f"The culprit is {culprit.name}!\n"
                    f"\nIt took you {game.guesses} {tries} to guess the culprit!\n"
                    f"Number of clues needed to guess culprit: {game.clues}\n"
                    f"\nTotal score: {max(game.score, 0)}\n"
                    "Score calculation: 11 - (number of guesses + number of clues)\n\n"
                )
                return game
            write(
                "\nI'm sorry, that's wrong.\n"
                f"Total guesses so far: {game.guesses - 1}\n\n"
            )
        elif choice == 2:
            write(_CLUE_MENU)
            trait = _CLUE_CHOICES.get(_parse_choice(read()))
            if trait is None:
                write(_INVALID)
            else:
                value = game.clue(trait)
                write(f"\nThe suspect's {trait.label}: {value}\n\n")
        elif choice == 3:
            write(board.format())
        elif choice == 4:
            write(f"\nThe culprit is {culprit.name}!\n\n")
            return game
        else:
            write(_INVALID)