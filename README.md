# buglife

A small simulation of bugs living on a grid. Each bug has an id, a
position, a direction, a size, an alive flag and the path it has walked.
Every time the board is tapped, all living bugs move. When several living
bugs end up in the same cell, the biggest one eats the rest. On a tie, the
first of them in load order wins. Eaten bugs remember who ate them.

## Kinds of bug

The kinds of bug live in `buglife.bugs`:

- **`Crawler`** moves one cell a tap in its direction. While it faces an
  edge, it picks a new direction (north, east, south or west) at random.
- **`Hopper`** moves `hop_length` cells a tap. Whenever an edge blocks it,
  it picks a new direction at random.
- **`Bishop`** moves one cell diagonally a tap. `Bug.is_way_blocked`
  treats diagonal directions as never blocked, so a bishop keeps its
  direction and is not held back by the edges.

Edges are those of a 10 × 10 area, with cells 0 to 9 on each axis. This
holds whatever width and height the `Board` was given.

## Installing

```
pip install .
```

This also installs `pygame`, which the graphical view uses.

## Running

```
buglife [--data FILE] [--history FILE]
```

This starts an interactive menu on a 25 × 25 board. It reads choices from
standard input:

1. Load bugs from the data file. The default file is `crawler-bugs.txt`.
2. List all bugs: id, kind, position, size, direction and state.
3. Find a bug by id.
4. Tap the board: all bugs move, then fight.
5. Show the life history (path) of every bug.
6. List every occupied cell with its bugs.
7. Run a given number of taps, a tenth of a second apart.
8. Exit. This writes the life history of every bug to the history file.
   The default file is `bugs_life_history_.out`.
9. Show the board in a pygame window. The window taps the board every
   0.8 seconds and closes after 50 taps.

The menu also stops when its input runs out. In that case nothing is
written.

## Data file

The data file is plain text with one bug per line:

```
Crawler 101 0 0 N 10 true
Hopper 102 5 5 E 12 true 2
Bishop 103 9 0 SW 8 true
```

The fields are:

- type: `Crawler`, `Hopper` or `Bishop`
- id
- x
- y
- direction
- size
- alive: `true` or `false`

Hoppers have one more field, the number of cells they hop per tap.
Directions are `N`, `E`, `S`, `W`, `NE`, `NW`, `SE` and `SW`.

Blank lines are skipped. Lines that do not fit this format are rejected
and reported.

## Using it from Python

```python
from buglife.board import Board

board = Board(10, 10)
rejected = board.load_bugs("crawler-bugs.txt")
board.tap()
for line in board.path_lines():
    print(line)
```

Board methods:

- `Board.load_bugs(path)` adds the bugs from a file and returns the lines
  it rejected. It raises `OSError` if the file cannot be opened.
- `Board.bug_lines()`, `Board.path_lines()`, `Board.cell_lines()` and
  `Board.describe_bug(bug_id)` return the text the menu prints.
- `Board.save_paths(path)` writes the life histories to a file.

Other functions:

- `buglife.board.parse_bug_line(line)` builds a single bug from a line.
- `buglife.bugs.direction_from_code("NE")` turns a code into a
  `Direction`.

Both raise `ValueError` on bad input.

A `Board` and each bug accept an optional `random.Random`. Passing one
makes the random turns repeatable.

`buglife.visualizer.run(board, max_moves=50, delay_ms=800)` opens the
graphical view and returns the number of taps it made.

## Tests

```
pip install .[test]
pytest
```