"""The tic-tac-toe board kept by the client."""

from __future__ import annotations

import enum

from .players import GRID_SIZE, INFO_SIZE

__all__ = ["SIZE", "CELL_SIZE", "ROWS", "Mark", "Board", "cell_name", "cell_at"]

SIZE = 3
CELL_SIZE = GRID_SIZE // SIZE
ROWS = "ABC"


class Mark(enum.Enum):
    """What a cell holds, and whose turn it is."""

    NONE = 0
    CROSS = 1
    CIRCLE = 2


def cell_name(row: int, col: int) -> str:
    """Name a cell: rows A to C, columns 1 to 3."""
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"no cell at row {row}, column {col}")
    return f"{ROWS[row]}{col + 1}"


def _parse_cell(pos: str) -> tuple[int, int] | None:
    if len(pos) != 2 or pos[0] not in ROWS or pos[1] not in "123":
        return None
    return ROWS.index(pos[0]), int(pos[1]) - 1


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def cell_at(x: int, y: int) -> tuple[int, int] | None:
    """Return the (row, col) under a window point, or None off the grid."""
    col = _trunc_div(x - INFO_SIZE, CELL_SIZE)
    row = _trunc_div(y, CELL_SIZE)
    if 0 <= col < SIZE and 0 <= row < SIZE and x > INFO_SIZE:
        return row, col
    return None


class Board:
    """Nine cells and the mark whose turn it is."""

    def __init__(self) -> None:
        self.current = Mark.CROSS
        self.end = False
        self.last_move = ""
        self.cells: list[list[Mark]] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self.cells = [[Mark.NONE] * SIZE for _ in range(SIZE)]

    def switch_player(self) -> None:
        """Give the turn to the other mark."""
        self.current = Mark.CIRCLE if self.current is Mark.CROSS else Mark.CROSS

    def clear(self) -> None:
        """Empty the board after a win."""
        self.reset()

    def _lines(self):
        for i in range(SIZE):
            yield [self.cells[i][j] for j in range(SIZE)]
            yield [self.cells[j][i] for j in range(SIZE)]
        yield [self.cells[i][i] for i in range(SIZE)]
        yield [self.cells[i][SIZE - 1 - i] for i in range(SIZE)]

    def check_winner(self) -> bool:
        """Tell whether a line holds three equal marks; a win empties the board."""
        for line in self._lines():
            if line[0] is not Mark.NONE and all(mark is line[0] for mark in line):
                self.clear()
                return True
        return False

    def apply_move(self, pos: str, token: str) -> None:
        """Mark a named cell: token "1" is a cross, anything else a circle.

        Unknown cell names change nothing.
        """
        where = _parse_cell(pos)
        if where is None:
            return
        row, col = where
        self.cells[row][col] = Mark.CROSS if token == "1" else Mark.CIRCLE

    def place(self, row: int, col: int) -> tuple[str, bool] | None:
        """Put the current mark on an empty cell.

        Returns the cell's name and whether the move won, or None when the cell
        is off the board or taken.
        """
        if not (0 <= row < SIZE and 0 <= col < SIZE) or self.cells[row][col] is not Mark.NONE:
            return None
        self.cells[row][col] = self.current
        self.last_move = cell_name(row, col)
        self.switch_player()
        won = self.check_winner()
        if not self.end:
            self.switch_player()
        return self.last_move, won