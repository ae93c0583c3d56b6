"""
render.py - Terminal rendering for Connect N boards

Maps cells to glyphs and ANSI colours. The game core never prints; everything that
touches the terminal's appearance lives here.
"""

from connectn.utils import Cell

# ANSI escape codes for terminal output
RED = "\033[31m"
GREEN = "\033[32m"
RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[1;1H"

CELL_GLYPHS = {
    Cell.EMPTY: "-",
    Cell.PLAYER_A: "X",
    Cell.PLAYER_B: "O",
}

CELL_COLORS = {
    Cell.PLAYER_A: RED,
    Cell.PLAYER_B: GREEN,
}


def player_label(cell: Cell) -> str:
    """Glyph used to name a player in messages ("X won the game!")."""
    return CELL_GLYPHS[cell]


def render_cell(cell: Cell, color: bool = True) -> str:
    glyph = CELL_GLYPHS[cell]
    if color and cell in CELL_COLORS:
        return f"{CELL_COLORS[cell]}{glyph}{RESET}"
    return glyph


def render_board(board, color: bool = True) -> str:
    """
    Render the board as text.

    Args:
        board: The Board to render
        color: Wrap player glyphs in ANSI colour codes

    Returns:
        One line per row, top row first, followed by a line of column indices
    """
    # Pad every cell to the widest column index so big boards stay aligned
    cell_width = len(str(board.width - 1))
    pad = " " * (cell_width - 1)

    lines = []
    for row in board.rows():
        lines.append(" ".join(pad + render_cell(cell, color) for cell in row))
    lines.append(" ".join(str(col).rjust(cell_width) for col in range(board.width)))
    return "\n".join(lines)
