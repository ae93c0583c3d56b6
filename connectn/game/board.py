"""
board.py - Board representation for Connect N

This module implements the Board class, a bounds-checked grid of cells stored in a
numpy array. The board knows nothing about turns or winning; those rules live in
connectn.game.rules.
"""

import numbers
from typing import List, Sequence

import numpy as np

from connectn.debug import debug
from connectn.exceptions import InvalidDimensionsError
from connectn.utils import Cell, is_valid_position


def _check_dimension(name: str, value) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value <= 0:
        raise InvalidDimensionsError(f"Board {name} must be a positive integer, got {value!r}")
    return int(value)


class Board:
    """
    Represents a Connect N game board.

    Row 0 is the top of the board and column 0 is the leftmost column. Each cell holds
    the integer value of a Cell member.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an empty board.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidDimensionsError: If either dimension is not a positive integer
        """
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)
        debug.debug(f"Initializing new {self.width}x{self.height} Board", "board")
        self.reset()

    @classmethod
    def from_grid(cls, values: Sequence[Sequence]) -> 'Board':
        """
        Build a board from rows of cell values (Cell members or 0/1/2), top row first.

        Raises:
            InvalidDimensionsError: If the rows are empty or not all the same length
            ValueError: If a value is not a valid cell
        """
        rows = [list(row) for row in values]
        if not rows or not rows[0]:
            raise InvalidDimensionsError("Grid must have at least one row and one column")
        if any(len(row) != len(rows[0]) for row in rows):
            raise InvalidDimensionsError("All grid rows must have the same length")

        board = cls(len(rows[0]), len(rows))
        board.grid = np.array([[Cell(v).value for v in row] for row in rows], dtype=int)
        return board

    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.full((self.height, self.width), Cell.EMPTY.value, dtype=int)

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def _check_bounds(self, row: int, column: int):
        # numpy would silently wrap negative indices
        if not is_valid_position(row, column, self.height, self.width):
            raise IndexError(
                f"Position ({row}, {column}) outside {self.height}x{self.width} board")

    def get(self, row: int, column: int) -> Cell:
        """Return the cell at (row, column)."""
        self._check_bounds(row, column)
        return Cell(int(self.grid[row, column]))

    def set(self, row: int, column: int, value: Cell):
        """Overwrite the cell at (row, column)."""
        self._check_bounds(row, column)
        self.grid[row, column] = Cell(value).value

    def is_column_full(self, column: int) -> bool:
        """A column is full once its top cell is occupied."""
        return self.get(0, column) != Cell.EMPTY

    def landing_row(self, column: int) -> int:
        """
        Get the row where a piece dropped in the column would land.

        Returns:
            Lowest empty row index, or -1 if the column is full
        """
        for row in range(self.height - 1, -1, -1):
            if self.get(row, column) == Cell.EMPTY:
                return row
        return -1

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return not np.any(self.grid == Cell.EMPTY.value)

    def count(self, value: Cell) -> int:
        return int(np.count_nonzero(self.grid == Cell(value).value))

    def rows(self) -> List[List[Cell]]:
        """Cell-by-cell readout, top row first, for renderers."""
        return [[Cell(int(v)) for v in row] for row in self.grid]

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the underlying (height, width) array
        """
        return self.grid.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height})"
