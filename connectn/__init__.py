"""
connectn - Connect Four on any board size

This package provides a two-player, terminal-played Connect N game: a board
representation, the turn and win-detection rules for configurable board sizes and
win lengths, and a command-line interface for playing it.
"""

# Version number
__version__ = '0.1.0'
