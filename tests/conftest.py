import pytest

from connectn.debug import debug, DebugLevel
from connectn.game.board import Board
from connectn.utils import Cell

A = Cell.PLAYER_A
B = Cell.PLAYER_B
E = Cell.EMPTY


@pytest.fixture(autouse=True)
def reset_debug():
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])


@pytest.fixture
def drawn_tiny_board():
    """Full 5x5 board without three in a row anywhere."""
    return Board.from_grid([
        [A, A, B, B, A],
        [B, B, A, A, B],
        [A, A, B, B, A],
        [B, B, A, A, B],
        [A, A, B, B, A],
    ])
