"""
exceptions.py - Errors raised by the Connect N game core
"""


class ConnectNError(Exception):
    """Base class for all game errors."""


class InvalidDimensionsError(ConnectNError, ValueError):
    """Raised when a board or game is created with an unusable size or win length."""


class ColumnOutOfRangeError(ConnectNError, IndexError):
    """Raised when a move targets a column that does not exist on the board."""

    def __init__(self, column, width):
        self.column = column
        self.width = width
        super().__init__(f"Column {column} outside valid range 0-{width - 1}")


class ColumnFullError(ConnectNError, ValueError):
    """Raised when a move targets a column with no empty cell left."""

    def __init__(self, column):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameOverError(ConnectNError, RuntimeError):
    """Raised when a move is attempted after the game was won or drawn."""


class UnknownPresetError(ConnectNError, KeyError):
    """Raised when a preset name is not one of the known game types."""

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return f"Unknown game type: {self.name!r}"
