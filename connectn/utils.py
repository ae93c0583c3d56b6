"""
utils.py - Constants, enumerations and helpers for Connect N

This module provides the cell and result enumerations, the direction vectors used
by the win scan, and the named board presets shared throughout the package.
"""

from enum import Enum, auto
from typing import Dict, Iterator, NamedTuple, Tuple


class Cell(Enum):
    """Enumeration representing cell states and the two players."""
    EMPTY = 0
    PLAYER_A = 1    # Moves on odd turns
    PLAYER_B = 2    # Moves on even turns

    def other(self) -> 'Cell':
        """Get the opposing player."""
        if self == Cell.PLAYER_A:
            return Cell.PLAYER_B
        elif self == Cell.PLAYER_B:
            return Cell.PLAYER_A
        return Cell.EMPTY


PLAYERS = (Cell.PLAYER_A, Cell.PLAYER_B)


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_A_WIN = auto()
    PLAYER_B_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self):
        """The winning Cell, or None for draws and unfinished games."""
        return {
            GameResult.PLAYER_A_WIN: Cell.PLAYER_A,
            GameResult.PLAYER_B_WIN: Cell.PLAYER_B,
        }.get(self)

    @classmethod
    def win_for(cls, player: Cell) -> 'GameResult':
        """Result for a game won by the given player."""
        if player == Cell.PLAYER_A:
            return cls.PLAYER_A_WIN
        if player == Cell.PLAYER_B:
            return cls.PLAYER_B_WIN
        raise ValueError(f"{player} cannot win a game")


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()     # Left to right
    VERTICAL = auto()       # Top to bottom
    DIAGONAL_UP = auto()    # Lower-left to upper-right
    DIAGONAL_DOWN = auto()  # Upper-left to lower-right


# Direction vectors (row, col) for each direction
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (-1, 1),
    Direction.DIAGONAL_DOWN: (1, 1)
}


class GamePreset(NamedTuple):
    """Board size and win rule for a named game type."""
    width: int
    height: int
    win_length: int

    def describe(self) -> str:
        """Menu text for the preset, e.g. "5 x 5 board, win length of 3"."""
        return f"{self.width} x {self.height} board, win length of {self.win_length}"


PRESETS: Dict[str, GamePreset] = {
    "tiny": GamePreset(width=5, height=5, win_length=3),
    "regular": GamePreset(width=7, height=6, win_length=4),
    "big": GamePreset(width=12, height=9, win_length=5),
}

DEFAULT_PRESET = "regular"


def is_valid_position(row: int, col: int, height: int, width: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        height: Number of rows on the board
        width: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < height and 0 <= col < width


def window_starts(direction: Direction, height: int, width: int,
                  win_length: int) -> Iterator[Tuple[int, int]]:
    """
    Yield every (row, col) a window of win_length cells can start at in a direction
    without running off the board. Bounds are inclusive, so windows flush against the
    far edge are included. Yields nothing when the window cannot fit at all.
    """
    dr, dc = DIRECTION_VECTORS[direction]

    if dr == 0:
        rows = range(height)
    elif dr > 0:
        rows = range(height - win_length + 1)
    else:
        rows = range(win_length - 1, height)

    cols = range(width - win_length + 1) if dc else range(width)

    for row in rows:
        for col in cols:
            yield row, col
