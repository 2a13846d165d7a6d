"""Board state and move rules for the path-filling puzzle."""

from __future__ import annotations

import random
from enum import Enum, IntEnum

from cellconnect.settings import COL, ROW

Position = tuple[int, int]

START: Position = (0, 0)


class Cell(IntEnum):
    """Contents of one board cell."""

    EMPTY = 0
    PATH = 1
    END = 2
    START = 3


class Direction(Enum):
    """A step on the board as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Outcome(Enum):
    """State of a round after a move."""

    PLAYING = "playing"
    LOST = "lost"
    WON = "won"


def is_filled(board) -> bool:
    """Return True when no cell of the board is empty."""
    return all(cell != Cell.EMPTY for row in board for cell in row)


class Game:
    """One round: a path from the top-left corner that must cover the board
    and finish on the target cell."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self.position: Position = START
        self.path: list[Position] = [START]
        self.target: Position = self._random_target(row_first=True)
        self.board: list[list[Cell]] = []
        self._redraw()

    def _random_target(self, row_first: bool) -> Position:
        while True:
            if row_first:
                y = self._rng.randrange(ROW)
                x = self._rng.randrange(COL)
            else:
                x = self._rng.randrange(COL)
                y = self._rng.randrange(ROW)
            if (x, y) != START:
                return (x, y)

    def _redraw(self) -> None:
        self.board = [[Cell.EMPTY] * COL for _ in range(ROW)]
        for x, y in self.path:
            self.board[y][x] = Cell.PATH
        self.board[START[1]][START[0]] = Cell.START
        tx, ty = self.target
        self.board[ty][tx] = Cell.END

    def _restart_path(self) -> None:
        self.position = START
        self.path = [START]
        self._redraw()

    def reset(self) -> None:
        """Start a new round with a fresh target."""
        self.position = START
        self.path = [START]
        self.target = self._random_target(row_first=False)
        self._redraw()

    def is_filled(self) -> bool:
        return is_filled(self.board)

    def score(self, time_left: int) -> int:
        return time_left * 10

    def move(self, direction: Direction, time_left: int) -> Outcome:
        """Step in a direction; stepping back onto the path cuts it there."""
        x, y = self.position
        nx, ny = x + direction.dx, y + direction.dy
        if not (0 <= nx < COL and 0 <= ny < ROW):
            return Outcome.PLAYING

        step = (nx, ny)
        if self.board[ny][nx] == Cell.PATH:
            if step in self.path:
                del self.path[self.path.index(step) + 1:]
                self.position = step
        else:
            self.position = step
            self.path.append(step)

        self._redraw()

        if self.position == self.target and not self.is_filled():
            self._restart_path()

        if time_left <= 0:
            return Outcome.LOST
        if self.position == self.target and self.is_filled():
            return Outcome.WON
        return Outcome.PLAYING