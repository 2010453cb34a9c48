"""
Mine layout for a board: random placement and adjacent-mine counts.
"""
from typing import TYPE_CHECKING, Protocol

from .errors import InvalidMineCount

if TYPE_CHECKING:
    from .board import Board


class RandomSource(Protocol):
    """Anything that yields uniform integers in ``[0, stop)``."""

    def randrange(self, stop: int) -> int:
        ...


def place_mines(board: "Board", total_mines: int, rng: RandomSource) -> None:
    """
    Place mines by rejection sampling.

    Samples a (row, col) pair until ``total_mines`` distinct cells carry a
    mine; samples landing on an existing mine are drawn again. Adjacent
    counts are left alone, call :func:`compute_adjacency` afterwards.

    Args:
        board: Board to mutate, normally freshly created.
        total_mines: Number of mines to add.
        rng: Random source; seed it for a reproducible layout.

    Raises:
        InvalidMineCount: if the board cannot keep a safe cell.
    """
    free_cells = sum(1 for cell in board.cells() if not cell.is_mine)
    if total_mines < 0 or total_mines >= free_cells:
        raise InvalidMineCount(
            f"Cannot place {total_mines} mines on {free_cells} free cells"
        )

    placed = 0
    while placed < total_mines:
        cell = board.get_cell(rng.randrange(board.rows), rng.randrange(board.columns))
        if cell.is_mine:
            continue
        cell.is_mine = True
        placed += 1


def compute_adjacency(board: "Board") -> None:
    """Calculate adjacent mine counts for all non-mine cells."""
    for cell in board.cells():
        if not cell.is_mine:
            cell.adjacent_mines = count_adjacent_mines(board, cell.row, cell.col)


def count_adjacent_mines(board: "Board", row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    count = 0
    for neighbor_row, neighbor_col in board.neighbors(row, col):
        if board.get_cell(neighbor_row, neighbor_col).is_mine:
            count += 1
    return count
