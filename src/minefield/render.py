"""
Text rendering of a board and parsing of typed coordinates.

Both use the save format's conventions: rows are lettered from 'A',
columns numbered from 1.
"""
from typing import Optional, Tuple

from .board import Board
from .cell import MINE_SYMBOL
from .persistence import row_label


def render_board(board: Board, reveal_mines: bool = False) -> str:
    """
    Render board as a text grid.

    Args:
        board: Board to render.
        reveal_mines: Show hidden and flagged mines as "X".

    Returns:
        Column header line followed by one line per row.
    """
    width = len(str(board.columns))
    header = " ".join(str(col + 1).rjust(width) for col in range(board.columns))
    lines = ["  " + header]

    for row in range(board.rows):
        symbols = []
        for col in range(board.columns):
            cell = board.get_cell(row, col)
            symbol = MINE_SYMBOL if reveal_mines and cell.is_mine else cell.symbol
            symbols.append(symbol.rjust(width))
        lines.append(f"{row_label(row)} " + " ".join(symbols))

    return "\n".join(lines)


def parse_coordinates(
    token: str, rows: int, columns: int
) -> Optional[Tuple[int, int]]:
    """
    Convert a token such as "B3" to a 0-based (row, col) pair.

    Returns:
        The position, or None if the token is malformed or off the board.
    """
    token = token.strip().upper()
    if len(token) < 2 or not token[0].isalpha() or not token[1:].isdigit():
        return None

    row = ord(token[0]) - ord("A")
    col = int(token[1:]) - 1
    if not (0 <= row < rows and 0 <= col < columns):
        return None
    return row, col
