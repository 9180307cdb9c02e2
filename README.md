# guesswho

A small detective game for the terminal. A culprit is picked at random from a
board of suspects. You can make guesses, or buy clues about the culprit's sex,
height, hair colour and eye colour. Each wrong guess and each clue costs a
point, and the best results go onto a high-score table. When the round is
over, the culprit's face is drawn in the terminal with ANSI colours.

## Installing

```
pip install .
```

## Playing

```
guesswho
guesswho --suspects my_suspects.csv --scores my_scores.csv
```

By default the game reads its suspects from `Suspects.csv` and its high
scores from `HighScores.csv` in the current directory. The `--suspects` and
`--scores` options choose other files. If a file cannot be read, the game
prints a message and starts with an empty board or an empty table.

The game asks for your name and then shows this menu:

1. Print out the suspect list.
2. Add a suspect. You choose the name and sex (1 for male, 2 for female), and
   the height, hair colour and eye colour are picked at random. The first
   letter of the name is capitalised. You get a warning if the new suspect has
   exactly the same traits as someone already on the board.
3. Remove a suspect.
4. Generate a new list of six suspects, each with a different name and a
   different set of traits.
5. Play a round.
6. See the high scores.
7. Quit.

Changes to the suspect list are written back to the suspect file straight
away. Any other input at the menu prints "Invalid choice!". Press end-of-file
(Ctrl-D) to leave at any prompt.

Note that when the list is printed, each suspect shows as many traits as
there are suspects on the board, up to all four.

### A round

Each round offers four choices: guess the culprit (case does not matter), ask
for a clue, print the suspect list, or reveal the culprit. After the round,
the game waits for Enter, draws the culprit's face, and waits for Enter again.

### Scoring

A round starts at 10 points. Each wrong guess and each clue takes one point
away. The score of your last solved round is offered to the high-score table.
A round ended by revealing the culprit does not give a new score. If the
score beats the tenth entry, it takes its place in the table, the last entry
drops off, and the table is saved and shown.

### File formats

Each line of the suspect file is one suspect, with its fields separated by
`*` in the order name, sex, height, hair colour, eye colour:

```
Albert*Male*Tall*Brown*Green
```

Each line of the high-score file is a name and a score separated by `[`, best
first:

```
Sam[9
```

## Limitations

- A round needs at least one suspect on the board. Playing with an empty
  board raises `ValueError`.
- Adding a score needs a table of at least ten entries. With fewer, the
  game stops with `IndexError` at the end of a round. New entries never
  lengthen the table. Start from a file with ten lines.
- Faces are drawn for the traits the game itself generates: eye colours
  Blue, Brown and Green, and hair colours Blond, Brown and Bald. Any other
  value raises `ValueError` when the face is drawn.

## Using it as a library

- `guesswho.console.Console` writes ANSI escape sequences, such as cursor
  moves, screen clears, window resizes and 8-colour or RGB colours, to any
  text stream. `ConsoleColor` lists the colours.
- `guesswho.shapes` has `Point2D` and the `Line`, `Circle` and `Pixel` shapes.
  It also has `line_points` and `circle_points`, which return the cells a
  line or circle covers.
- `guesswho.shape_factory` has `random_point`, `random_color`, `random_line`
  and `random_circle`. Each takes a window size and an optional random
  source, and the shapes it returns fit inside that window.
- `guesswho.people` has `Person`, `Male` and `Female`. Each one's `shapes()`
  returns the shapes of its face, and `draw(console)` draws them.
- `guesswho.suspect` has `Suspect` and `SuspectBoard`, which can load, save,
  add, remove, generate and format suspects. `GuessGame` keeps the score of
  one round, and `play_game` runs a round with any `read` and `write`
  functions. Missing or duplicate names raise `UnknownSuspectError` or
  `DuplicateSuspectError`.
- `guesswho.highscore` has `HighScore` and `HighScoreTable`, which loads,
  updates, formats and saves the table.
- `guesswho.main.run` runs the whole menu with injectable input, output,
  random source and console.