"""Interactive menu for loading, tapping and inspecting the bug board."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections.abc import Iterable, Iterator
from typing import TextIO

from buglife.board import Board

DATA_FILE = "crawler-bugs.txt"
HISTORY_FILE = "bugs_life_history_.out"

_MENU = """
--- Bug Board Menu ---
1. Initialize Bug Board (load data from file)
2. Display all Bugs
3. Find a Bug (given an id)
4. Tap the Bug Board (cause all to move, then fight/eat)
5. Display Life History of all Bugs (path taken)
6. Display all Cells listing their Bugs
7. Run simulation (generates a Tap every tenth of a second)
8. Exit (write Life History of all Bugs to file)
9. Visualize Bug Board (SFML View)"""

_NUMBER = re.compile(r"\s*[+-]?\d+")


def _next_line(lines: Iterator[str]) -> str | None:
    line = next(lines, None)
    return None if line is None else line.rstrip("\r\n")


def read_choice(lines: Iterator[str], out: TextIO) -> int | None:
    """Prompt until a menu number 1 to 9 is entered; None at end of input."""
    while True:
        out.write("Enter your choice (1-9): ")
        line = _next_line(lines)
        if line is None:
            return None
        if _NUMBER.fullmatch(line) and 1 <= int(line) <= 9:
            return int(line)
        out.write("Invalid input. Please enter a number between 1 and 9.\n")


def _load(board: Board, data_file: str, out: TextIO) -> None:
    try:
        out.write(f"Loading bugs from {data_file}\n")
        rejected = board.load_bugs(data_file)
    except OSError:
        out.write(f"Could not open file: {data_file}\n")
        return
    for line in rejected:
        out.write(f"Failed to parse line: {line}\n")
    out.write(f"Done loading: {len(board.bugs)} bugs loaded.\n")


def _simulate(board: Board, lines: Iterator[str], out: TextIO) -> None:
    out.write("Running simulation. Type number of taps to simulate: ")
    answer = _next_line(lines) or ""
    match = re.match(r"\s*([+-]?\d+)", answer)
    taps = int(match.group(1)) if match else 0
    for number in range(1, taps + 1):
        board.tap()
        time.sleep(0.1)
        out.write(f"Tap {number} complete.\n")
    out.write("Simulation ended.\n")


def run_menu(
    board: Board,
    lines: Iterable[str],
    out: TextIO,
    data_file: str = DATA_FILE,
    history_file: str = HISTORY_FILE,
) -> None:
    """Run the menu until Exit is chosen or the input runs out."""
    source = iter(lines)
    while True:
        out.write(_MENU + "\n")
        choice = read_choice(source, out)
        if choice is None:
            return
        if choice == 1:
            _load(board, data_file, out)
            out.write("Bug board initialized.\n")
        elif choice == 2:
            for line in board.bug_lines():
                out.write(line + "\n")
        elif choice == 3:
            out.write("Enter bug ID to search: ")
            out.write(board.describe_bug(_next_line(source) or "") + "\n")
        elif choice == 4:
            board.tap()
            out.write("Board tapped. Bugs moved and resolved fights.\n")
        elif choice == 5:
            for line in board.path_lines():
                out.write(line + "\n")
        elif choice == 6:
            out.write("--- Board Cells with Bugs ---\n")
            for line in board.cell_lines():
                out.write(line + "\n")
        elif choice == 7:
            _simulate(board, source, out)
        elif choice == 8:
            board.save_paths(history_file)
            out.write(f"Life history saved to: {history_file}\n")
            out.write("Exiting.\n")
            return
        else:
            from buglife.visualizer import run

            run(board)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive bug board menu."""
    parser = argparse.ArgumentParser(prog="buglife", description="Bug board simulation")
    parser.add_argument("--data", default=DATA_FILE, help="file to load bugs from")
    parser.add_argument("--history", default=HISTORY_FILE, help="file for life histories")
    args = parser.parse_args(argv)
    board = Board(25, 25)
    run_menu(board, sys.stdin, sys.stdout, args.data, args.history)
    return 0


if __name__ == "__main__":
    sys.exit(main())