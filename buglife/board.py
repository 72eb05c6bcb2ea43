"""The bug board: loading bugs, tapping the board and reporting on it."""

from __future__ import annotations

import random
from collections import defaultdict
from pathlib import Path

from buglife.bugs import (
    CARDINAL,
    Bishop,
    Bug,
    Crawler,
    Hopper,
    direction_from_code,
)
from buglife.position import Position

_KINDS = (Crawler, Bishop, Hopper)
_BOOLS = {"true": True, "false": False}


def parse_bug_line(line: str, rng: random.Random | None = None) -> Bug:
    """Build a bug from one line of a bug file.

    The fields are ``type id x y direction size alive``, with a hop length
    after them for a Hopper. Raises ValueError for a line that does not fit.
    """
    fields = line.split()
    kind_names = {kind.__name__: kind for kind in _KINDS}
    if len(fields) < 7 or fields[0] not in kind_names:
        raise ValueError(f"Failed to parse line: {line}")
    kind_name, bug_id, x, y, code, size, alive = fields[:7]
    try:
        position = Position(int(x), int(y))
        size_value = int(size)
        alive_value = _BOOLS[alive]
    except (ValueError, KeyError):
        raise ValueError(f"Failed to parse line: {line}") from None
    direction = direction_from_code(code)

    if kind_name == "Hopper":
        if len(fields) < 8:
            raise ValueError(f"Failed to parse line: {line}")
        try:
            hop_length = int(fields[7])
        except ValueError:
            raise ValueError(f"Failed to parse line: {line}") from None
        return Hopper(
            bug_id, position, direction, size_value, hop_length,
            alive=alive_value, rng=rng,
        )

    kind = kind_names[kind_name]
    return kind(bug_id, position, direction, size_value, alive=alive_value, rng=rng)


def _kind_name(bug: Bug) -> str:
    for kind in _KINDS:
        if isinstance(bug, kind):
            return kind.__name__
    return "Unknown"


def _fate(bug: Bug) -> str:
    if bug.alive:
        return "Still alive"
    if bug.killer_id:
        return f"Eaten by {bug.killer_id}"
    return "Dead"


class Board:
    """A board holding bugs that move and eat each other."""

    def __init__(
        self, width: int, height: int, rng: random.Random | None = None
    ) -> None:
        self.width = width
        self.height = height
        self.bugs: list[Bug] = []
        self._rng = rng if rng is not None else random.Random()

    def load_bugs(self, path: str | Path) -> list[str]:
        """Add the bugs listed in ``path``; return the lines that were rejected.

        Raises OSError when the file cannot be opened.
        """
        rejected: list[str] = []
        with open(path, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.rstrip("\r\n")
                if not line.strip():
                    continue
                try:
                    self.bugs.append(parse_bug_line(line, self._rng))
                except ValueError:
                    rejected.append(line)
        return rejected

    def bug_lines(self) -> list[str]:
        """One line per bug: id, type, position, size, direction and state."""
        return [
            f"{bug.id} {_kind_name(bug)} {bug.position} {bug.size} "
            f"{bug.direction.label} {'Alive' if bug.alive else 'Dead'}"
            for bug in self.bugs
        ]

    def describe_bug(self, bug_id: str) -> str:
        """Describe the first bug with ``bug_id``, or say it was not found."""
        for bug in self.bugs:
            if bug.id == bug_id:
                heading = bug.direction.label if bug.direction in CARDINAL else ""
                state = "Alive" if bug.alive else "Dead"
                return f"{bug.id} {bug.position} {bug.size} {heading} {state}"
        return f"bug {bug_id} not found"

    def tap(self) -> None:
        """Move every living bug, then let the biggest in each cell eat the rest."""
        for bug in self.bugs:
            if bug.alive:
                bug.move()

        cells: dict[Position, list[Bug]] = defaultdict(list)
        for bug in self.bugs:
            if bug.alive:
                cells[bug.position].append(bug)

        for occupants in cells.values():
            if len(occupants) < 2:
                continue
            biggest = occupants[0]
            for bug in occupants:
                if bug.size > biggest.size:
                    biggest = bug
            for bug in occupants:
                if bug is not biggest:
                    bug.mark_dead(biggest.id)

    def path_lines(self) -> list[str]:
        """One line per bug giving its path and how it ended."""
        return [
            f"{bug.id} Path: {','.join(str(step) for step in bug.path)} {_fate(bug)}"
            for bug in self.bugs
        ]

    def save_paths(self, path: str | Path) -> None:
        """Write the life history of every bug to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            for line in self.path_lines():
                handle.write(line + "\n")

    def cell_lines(self) -> list[str]:
        """One line per occupied cell, in cell order, listing its bugs."""
        cells: dict[tuple[int, int], list[Bug]] = defaultdict(list)
        for bug in self.bugs:
            cells[(bug.position.x, bug.position.y)].append(bug)

        lines = []
        for (x, y), occupants in sorted(cells.items()):
            names = "".join(
                f"{bug.id}{'' if bug.alive else ' (Dead)'}  " for bug in occupants
            )
            lines.append(f"Cell ({x},{y}): {names}")
        return lines