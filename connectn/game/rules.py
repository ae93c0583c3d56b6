"""
rules.py - Game state management for Connect N

This module provides ConnectNGame, the turn, gravity and win-detection state machine
for a game on any board size with any win length.
"""

import numbers
from typing import List, Optional, Tuple

from connectn.debug import debug
from connectn.exceptions import (ColumnFullError, ColumnOutOfRangeError, GameOverError,
                                 InvalidDimensionsError, UnknownPresetError)
from connectn.game.board import Board
from connectn.utils import (Cell, DIRECTION_VECTORS, Direction, GameResult,
                            PLAYERS, PRESETS, GamePreset, window_starts)

Position = Tuple[int, int]

DIAGONALS = (Direction.DIAGONAL_UP, Direction.DIAGONAL_DOWN)


def get_preset(name: str) -> GamePreset:
    """Look up a named game type."""
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name) from None


class ConnectNGame:
    """
    Two-player Connect N game.

    Player A moves on odd turns and player B on even turns. A move drops the current
    player's token to the lowest empty cell of a column; the game is won by the first
    run of win_length same-player tokens in any of the four directions and drawn when
    the board fills up without one.
    """

    def __init__(self, width: int, height: int, win_length: int):
        """
        Initialize a new game.

        Args:
            width: Number of columns
            height: Number of rows
            win_length: Tokens in a row needed to win

        Raises:
            InvalidDimensionsError: If the board size or win length is unusable
        """
        self.board = Board(width, height)
        if (not isinstance(win_length, numbers.Integral) or isinstance(win_length, bool)
                or not 1 <= win_length <= max(self.board.width, self.board.height)):
            raise InvalidDimensionsError(
                f"Win length must be between 1 and {max(self.board.width, self.board.height)}, "
                f"got {win_length!r}")
        self.win_length = int(win_length)
        debug.debug(f"Initializing ConnectNGame {self.width}x{self.height}, "
                    f"win length {self.win_length}", "game")
        self.reset()

    @classmethod
    def from_preset(cls, name: str) -> 'ConnectNGame':
        """Create a game from one of the named presets (tiny, regular, big)."""
        preset = get_preset(name)
        return cls(preset.width, preset.height, preset.win_length)

    @classmethod
    def from_board(cls, board: Board, win_length: int) -> 'ConnectNGame':
        """
        Create a game positioned on an existing board.

        The turn counter continues from the number of tokens already placed and the
        result reflects whatever the board shows. Move history is not known.
        """
        game = cls(board.width, board.height, win_length)
        game.board = board.copy()
        game.turn = game.board.count(Cell.PLAYER_A) + game.board.count(Cell.PLAYER_B) + 1

        found = game._find_winning_window()
        if found:
            game.result = GameResult.win_for(found[0])
        elif game.is_full():
            game.result = GameResult.DRAW
        return game

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board.reset()
        self.turn = 1
        self.moves_made: List[int] = []
        self.last_move: Optional[Position] = None
        self.result = GameResult.IN_PROGRESS

    def current_player(self) -> Cell:
        """Player to move: A on odd turns, B on even turns."""
        return Cell.PLAYER_A if self.turn % 2 == 1 else Cell.PLAYER_B

    @property
    def winner(self) -> Optional[Cell]:
        return self.result.winner

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a move is valid.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            True if the game is in progress, the column exists and is not full
        """
        if self.is_game_over():
            return False
        if not (0 <= column < self.width):
            return False
        return not self.board.is_column_full(column)

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of valid columns where a piece can be placed.

        Returns:
            List of valid column indices
        """
        if self.is_game_over():
            return []
        return [col for col in range(self.width) if not self.board.is_column_full(col)]

    def apply_move(self, column: int) -> int:
        """
        Drop the current player's token into a column.

        Args:
            column: The column to place a piece (0-indexed)

        Returns:
            Row index where the piece landed

        Raises:
            ColumnOutOfRangeError: If the column is not on the board
            GameOverError: If the game has already been won or drawn
            ColumnFullError: If the column has no empty cell; nothing changes and the
                turn is not consumed
        """
        if not (0 <= column < self.width):
            raise ColumnOutOfRangeError(column, self.width)
        if self.is_game_over():
            raise GameOverError(f"Game is already over ({self.result.name})")

        player = self.current_player()
        row = self.board.landing_row(column)
        if row < 0:
            debug.debug(f"Rejected move: column {column} is full", "game")
            raise ColumnFullError(column)

        debug.trace(f"Placing {player.name} at position ({row}, {column})", "game")
        self.board.set(row, column, player)
        self.last_move = (row, column)
        self.moves_made.append(column)

        debug.start_timer("win_check")
        if self.has_winner():
            self.result = GameResult.win_for(player)
            debug.info(f"{player.name} wins after move at {self.last_move}", "game")
        elif self.is_full():
            self.result = GameResult.DRAW
            debug.info("Game ends in a draw", "game")
        debug.end_timer("win_check", "game")

        self.turn += 1
        return row

    def _find_winning_window(self) -> Optional[Tuple[Cell, List[Position]]]:
        n = self.win_length
        diagonals_fit = self.width >= n and self.height >= n
        grid = self.board.grid

        for player in PLAYERS:
            for direction, (dr, dc) in DIRECTION_VECTORS.items():
                if direction in DIAGONALS and not diagonals_fit:
                    continue
                for row, col in window_starts(direction, self.height, self.width, n):
                    positions = [(row + i * dr, col + i * dc) for i in range(n)]
                    count = sum(1 for r, c in positions if grid[r, c] == player.value)
                    if count == n:
                        return player, positions
        return None

    def has_winner(self) -> bool:
        """True if any player has win_length tokens in a row anywhere on the board."""
        return self._find_winning_window() is not None

    def winning_line(self) -> List[Position]:
        """
        Get the positions of a winning run.

        Returns:
            List of (row, col) positions, or empty list if nobody has won
        """
        found = self._find_winning_window()
        return found[1] if found else []

    def is_full(self) -> bool:
        """True when every cell is occupied."""
        return self.board.is_full()

