"""
Reveal, flag and win rules applied to a board in place.
"""
import logging

from .board import Board

logger = logging.getLogger(__name__)


def reveal_cascade(board: Board, row: int, col: int) -> int:
    """
    Reveal a cell and spread through connected zero-count cells.

    Out-of-bounds and already revealed positions are ignored. A flag on a
    visited cell is cleared on the way. A mine is revealed and ends the
    cascade; so does any cell with a positive count. Zero-count cells push
    their neighbors. The revealed state doubles as the visited marker, so
    every cell is processed at most once.

    Args:
        board: Board to mutate.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        Number of flags removed, for the caller's flag counter.
    """
    flags_removed = 0
    revealed = 0
    pending = [(row, col)]

    while pending:
        current_row, current_col = pending.pop()
        cell = board.get_cell(current_row, current_col)
        if cell is None or cell.is_revealed:
            continue

        if cell.clear_flag():
            flags_removed += 1
        cell.reveal()
        revealed += 1

        if cell.is_mine or cell.adjacent_mines > 0:
            continue
        pending.extend(board.neighbors(current_row, current_col))

    if revealed:
        logger.debug(
            "Revealed %d cells from (%d, %d), %d flags removed",
            revealed, row, col, flags_removed,
        )
    return flags_removed


def toggle_flag(board: Board, row: int, col: int) -> bool:
    """
    Toggle flag on a cell.

    The board's flag counter is left to the caller, see
    :meth:`Board.increase_flag_count` and :meth:`Board.decrease_flag_count`.

    Returns:
        True if flag was toggled, False for invalid or revealed cells.
    """
    cell = board.get_cell(row, col)
    if cell is None:
        return False
    return cell.toggle_flag()


def is_won(board: Board) -> bool:
    """Check if all non-mine cells are revealed."""
    return all(cell.is_mine or cell.is_revealed for cell in board.cells())
