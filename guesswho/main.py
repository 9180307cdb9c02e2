"""The interactive "Guess Who Did It?" menu."""

from __future__ import annotations

import argparse
import random
import re
import sys
from pathlib import Path
from typing import Callable

from .console import Console
from .highscore import HighScore, HighScoreTable
from .people import Female, Male, Person
from .suspect import (
    SuspectBoard,
    UnknownSuspectError,
    play_game,
)

SUSPECTS_FILE = "Suspects.csv"
TRAIT_DELIMITER = "*"
SCORES_FILE = "HighScores.csv"
SCORE_DELIMITER = "["

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

_MAIN_MENU = (
    "1. Print out suspect list.\n"
    "2. Add suspect to list.\n"
    "3. Remove a suspect from the list.\n"
    "4. Generate new list of suspects.\n"
    '5. Play "Guess Who!?"\n'
    "6. See High Scores\n"
    "7. Quit.\n"
)

_PAUSE = "Press any key to continue . . . "


def _parse_choice(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    value = int(match.group(1))
    return value if _INT_MIN <= value <= _INT_MAX else 0


def _capitalize_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _save_board(
    board: SuspectBoard, path: str | Path, write: Callable[[str], object]
) -> None:
    try:
        board.save(path, TRAIT_DELIMITER)
    except OSError:
        write("File is not open.\n\n")


def _add_suspect(
    board: SuspectBoard,
    path: str | Path,
    rng,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> None:
    write("\nWhat is your character's name? ")
    name = _capitalize_first(read())
    if name in board:
        write(f"\n{name} is already on the suspect list!\n\n")
        return
    write("\nWhat is your character's sex? (Type 1 for male, 2 for female.) ")
    sex_choice = read()
    if sex_choice not in ("1", "2"):
        write("\nInvalid input\n\n")
        return
    sex = "Male" if sex_choice == "1" else "Female"
    try:
        added = board.add(name, sex, rng)
    except ValueError:
        write("\nInvalid input\n\n")
        return
    write(f"\n{name} has been added to the suspect list!\n\n")
    twins = board.twins_of(added.name)
    if twins:
        write(f"{twins[0].name} has all the same characteristics as {name}!\n")
        write(
            "It is recommended that you remove one of these characters "
            "from the suspect list.\n\n"
        )
    _save_board(board, path, write)


def _remove_suspect(
    board: SuspectBoard,
    path: str | Path,
    read: Callable[[], str],
    write: Callable[[str], object],
) -> None:
    write("\nWhat character would you like to remove from suspect list? ")
    name = _capitalize_first(read())
    try:
        board.remove(name)
    except (UnknownSuspectError, ValueError):
        write(f"\n{name} is not on the suspect list!\n\n")
        return
    write(f"\n{name} has been removed from the suspect list!\n\n")
    _save_board(board, path, write)


def _pause(read: Callable[[], str], write: Callable[[str], object]) -> None:
    write(_PAUSE)
    read()


def run(
    board: SuspectBoard,
    scores: HighScoreTable,
    player: str,
    suspects_path: str | Path = SUSPECTS_FILE,
    scores_path: str | Path = SCORES_FILE,
    rng=None,
    read: Callable[[], str] = input,
    write: Callable[[str], object] = _write_stdout,
    console: Console | None = None,
) -> SuspectBoard:
    """Run the main menu until the player quits; return the final board.

    The high-score table is updated in place.
    """
    rng = rng if rng is not None else random.Random()
    console = console if console is not None else Console()
    last_score = 0
    while True:
        write(f"{player}, choose one of the following options.\n\n")
        write(_MAIN_MENU)
        choice = _parse_choice(read())
        if choice == 1:
            write(board.format())
        elif choice == 2:
            _add_suspect(board, suspects_path, rng, read, write)
        elif choice == 3:
            _remove_suspect(board, suspects_path, read, write)
        elif choice == 4:
            board = SuspectBoard.generate(rng)
            _save_board(board, suspects_path, write)
            write("\nNew suspect list generated!\n\n")
        elif choice == 5:
            game = play_game(board, rng, read, write)
            if game.solved:
                last_score = game.score
            culprit = game.culprit
            _pause(read, write)
            console.clear()
            person: Person
            if culprit.sex == "Male":
                person = Male(culprit.eye_color, culprit.hair_color)
            else:
                person = Female(culprit.eye_color, culprit.hair_color)
            person.draw(console)
            console.set_cursor_position(58, 26)
            console.write(culprit.name)
            console.set_cursor_position(1, 1)
            _pause(read, write)
            console.clear()
            if scores.add(HighScore(player, last_score)):
                try:
                    scores.save(scores_path, SCORE_DELIMITER)
                except OSError:
                    write(f"{scores_path} was not opened!\n\n")
                write(scores.format())
        elif choice == 6:
            write(scores.format())
        elif choice == 7:
            return board
        else:
            write("Invalid choice!\n\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Can you guess who did it?")
    parser.add_argument("--suspects", default=SUSPECTS_FILE, help="suspect list file")
    parser.add_argument("--scores", default=SCORES_FILE, help="high score file")
    args = parser.parse_args(argv)

    write = _write_stdout
    console = Console(sys.stdout)
    rng = random.Random()

    try:
        scores = HighScoreTable.load(args.scores, SCORE_DELIMITER)
    except OSError:
        write(f"{args.scores} could not be opened.\n\n")
        scores = HighScoreTable()

    try:
        board = SuspectBoard.load(args.suspects, TRAIT_DELIMITER)
    except OSError:
        write("File is not open.\n\n")
        board = SuspectBoard()

    write("Can you ..... Guess Who Did it??\n\n")
    write("What is your name? ")
    try:
        player = input()
        console.clear()
        run(
            board,
            scores,
            player,
            args.suspects,
            args.scores,
            rng,
            input,
            write,
            console,
        )
    except EOFError:
        write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())