"""Cell store for the guess board.

Rows are attempts, columns are letter positions. Cells are immutable values;
every mutation replaces the cell at its position.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Status(Enum):
    """Feedback revealed for a single cell."""

    RIGHT_PLACE = "right_place"
    WRONG_PLACE = "wrong_place"
    WRONG_LETTER = "wrong_letter"
    EMPTY = "empty"


class OutOfBounds(IndexError):
    """Raised when a row or column lies outside the grid."""


@dataclass(frozen=True, slots=True)
class Cell:
    """One letter position on the board."""

    letter: str = ""
    status: Status = Status.EMPTY


class Grid:
    """A ``num_rows`` x ``num_cols`` board of cells, all empty initially."""

    def __init__(self, num_rows: int, num_cols: int) -> None:
        if num_rows <= 0 or num_cols <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {num_rows}x{num_cols}"
            )
        self.num_rows = num_rows
        self.num_cols = num_cols
        self._cells: list[list[Cell]] = [
            [Cell() for _ in range(num_cols)] for _ in range(num_rows)
        ]

    def _check(self, row: int, col: int | None = None) -> None:
        if not 0 <= row < self.num_rows:
            raise OutOfBounds(f"row {row} outside 0..{self.num_rows - 1}")
        if col is not None and not 0 <= col < self.num_cols:
            raise OutOfBounds(f"column {col} outside 0..{self.num_cols - 1}")

    def cell(self, row: int, col: int) -> Cell:
        self._check(row, col)
        return self._cells[row][col]

    def write(self, row: int, col: int, letter: str) -> None:
        """Set the letter of a cell, keeping its status."""
        self._check(row, col)
        self._cells[row][col] = replace(self._cells[row][col], letter=letter)

    def clear(self, row: int, col: int) -> None:
        """Reset the letter of a cell to empty."""
        self.write(row, col, "")

    def set_status(self, row: int, col: int, status: Status) -> None:
        self._check(row, col)
        self._cells[row][col] = replace(self._cells[row][col], status=status)

    def read_row_text(self, row: int) -> str:
        """Return the row's letters in column order, stripped and lowercased.

        This is the canonical form of a guess handed to the evaluator and the
        dictionary.
        """
        self._check(row)
        return "".join(c.letter for c in self._cells[row]).strip().lower()

    def is_row_full(self, row: int) -> bool:
        self._check(row)
        return all(c.letter for c in self._cells[row])

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Return an immutable copy of every row."""
        return tuple(tuple(row) for row in self._cells)
