"""
connectn.game - Core game mechanics for Connect N

This package contains the board representation and the game state machine.
Nothing in here reads input or writes to the terminal.
"""

from connectn.game.board import Board
from connectn.game.rules import ConnectNGame, get_preset

__all__ = ["Board", "ConnectNGame", "get_preset"]
