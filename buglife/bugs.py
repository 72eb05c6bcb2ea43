"""Bug types that live and move on the board."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum

from buglife.position import Position

BOARD_WIDTH = 10
BOARD_HEIGHT = 10


class Direction(Enum):
    """Compass direction a bug faces."""

    NORTH = 1
    EAST = 2
    SOUTH = 3
    WEST = 4
    NORTH_EAST = 5
    NORTH_WEST = 6
    SOUTH_EAST = 7
    SOUTH_WEST = 8

    @property
    def label(self) -> str:
        """Name used in listings, such as ``NorthEast``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


_CODES = {
    "N": Direction.NORTH,
    "E": Direction.EAST,
    "S": Direction.SOUTH,
    "W": Direction.WEST,
    "NE": Direction.NORTH_EAST,
    "NW": Direction.NORTH_WEST,
    "SE": Direction.SOUTH_EAST,
    "SW": Direction.SOUTH_WEST,
}

CARDINAL = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)
DIAGONAL = (
    Direction.NORTH_EAST,
    Direction.NORTH_WEST,
    Direction.SOUTH_EAST,
    Direction.SOUTH_WEST,
)

_CARDINAL_STEPS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_DIAGONAL_STEPS = {
    Direction.NORTH_EAST: (1, -1),
    Direction.NORTH_WEST: (-1, -1),
    Direction.SOUTH_EAST: (1, 1),
    Direction.SOUTH_WEST: (-1, 1),
}


def direction_from_code(code: str) -> Direction:
    """Turn a short code such as ``"N"`` or ``"SW"`` into a Direction."""
    try:
        return _CODES[code]
    except KeyError:
        raise ValueError(f"Invalid direction string: {code}") from None


class Bug(ABC):
    """A bug with an identity, a place on the board and a recorded path."""

    def __init__(
        self,
        bug_id: str,
        position: Position,
        direction: Direction,
        size: int,
        alive: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.id = bug_id
        self.position = position
        self.direction = direction
        self.size = size
        self.alive = alive
        self.path: list[Position] = [position]
        self.killer_id = ""
        self._rng = rng if rng is not None else random.Random()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.id!r}, {self.position}, "
            f"{self.direction.label}, size={self.size}, alive={self.alive})"
        )

    @abstractmethod
    def move(self) -> None:
        """Advance the bug one turn."""

    def mark_dead(self, killer: str) -> None:
        """Kill the bug, remembering who ate it."""
        self.alive = False
        self.killer_id = killer

    def relocate(self, position: Position) -> None:
        """Place the bug on ``position`` and record it in the path."""
        self.position = position
        self.path.append(position)

    def is_way_blocked(self, board_width: int, board_height: int) -> bool:
        """Whether the bug faces an edge; diagonal directions never count."""
        x, y = self.position.x, self.position.y
        if self.direction is Direction.NORTH:
            return y == 0
        if self.direction is Direction.EAST:
            return x == board_width - 1
        if self.direction is Direction.SOUTH:
            return y == board_height - 1
        if self.direction is Direction.WEST:
            return x == 0
        return False

    def _step(self, steps: dict[Direction, tuple[int, int]]) -> None:
        dx, dy = steps.get(self.direction, (0, 0))
        self.relocate(self.position.moved(dx, dy))


class Crawler(Bug):
    """Moves one cell a turn, turning at random when it meets an edge."""

    def move(self) -> None:
        if not self.alive:
            return
        while self.is_way_blocked(BOARD_WIDTH, BOARD_HEIGHT):
            self.direction = self._rng.choice(CARDINAL)
        self._step(_CARDINAL_STEPS)


class Hopper(Bug):
    """Moves ``hop_length`` cells a turn, turning at random at edges."""

    def __init__(
        self,
        bug_id: str,
        position: Position,
        direction: Direction,
        size: int,
        hop_length: int,
        alive: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(bug_id, position, direction, size, alive, rng)
        self.hop_length = hop_length

    def move(self) -> None:
        if not self.alive:
            return
        hops = 0
        while hops < self.hop_length:
            if self.is_way_blocked(BOARD_WIDTH, BOARD_HEIGHT):
                self.direction = self._rng.choice(CARDINAL)
                continue
            self._step(_CARDINAL_STEPS)
            hops += 1


class Bishop(Bug):
    """Moves diagonally one cell a turn."""

    def move(self) -> None:
        if not self.alive:
            return
        if self.is_way_blocked(BOARD_WIDTH, BOARD_HEIGHT):
            self.direction = self._rng.choice(DIAGONAL)
        self._step(_DIAGONAL_STEPS)