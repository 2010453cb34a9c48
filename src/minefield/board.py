"""
Board module for Minesweeper game.

Implements the game board: validated configuration, the cell grid,
neighbor utilities, the flag counter, and the factory that produces a
ready-to-play board.
"""
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import (
    FlagCountMismatch,
    FlagLimitExceeded,
    FlagUnderflow,
    InvalidDimension,
    InvalidMineCount,
)
from .generation import RandomSource, compute_adjacency, place_mines


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        total_mines: Total mines to place.
    """

    rows: int = 9
    columns: int = 9
    total_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise InvalidDimension(
                f"Board dimensions must be positive, got {self.rows}x{self.columns}"
            )
        if self.total_mines < 0:
            raise InvalidMineCount("Number of mines cannot be negative")
        max_mines = self.rows * self.columns - 1
        if self.total_mines > max_mines:
            raise InvalidMineCount(f"Too many mines (max {max_mines})")

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.rows * self.columns


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the running flag counter. Game rules that
    mutate the grid live in :mod:`minefield.reveal`; mine layout and
    counts come from :mod:`minefield.generation`.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    flag_count: int = 0
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    def _init_grid(self) -> None:
        """Create empty grid of cells, each tagged with its position."""
        self._grid = [
            [Cell(row=row, col=col) for col in range(self.config.columns)]
            for row in range(self.config.rows)
        ]

    # ========================================================================
    # Dimensions
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def total_mines(self) -> int:
        return self.config.total_mines

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Cell Access
    # ========================================================================

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for grid_row in self._grid:
            yield from grid_row

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Row-major list of mined positions."""
        return [(cell.row, cell.col) for cell in self.cells() if cell.is_mine]

    @property
    def has_exploded(self) -> bool:
        """True once any mine has been revealed."""
        return any(cell.is_mine and cell.is_revealed for cell in self.cells())

    def reveal_all(self) -> None:
        """Reveal every cell, flagged ones included. Used at game end."""
        for cell in self.cells():
            cell.state = CellState.REVEALED
        self.flag_count = 0

    # ========================================================================
    # Flag Counter
    # ========================================================================

    def count_flags(self) -> int:
        """Count flagged cells by scanning the grid."""
        return sum(1 for cell in self.cells() if cell.is_flagged)

    @property
    def flags_remaining(self) -> int:
        """Flags the player may still place."""
        return self.config.total_mines - self.flag_count

    def increase_flag_count(self) -> None:
        """Record one placed flag."""
        if self.flag_count >= self.config.total_mines:
            raise FlagLimitExceeded(
                f"Cannot place more than {self.config.total_mines} flags"
            )
        self.flag_count += 1

    def decrease_flag_count(self, amount: int = 1) -> None:
        """Record ``amount`` removed flags."""
        if amount > self.flag_count:
            raise FlagUnderflow(
                f"Cannot remove {amount} flags, only {self.flag_count} placed"
            )
        self.flag_count -= amount

    def check_flag_count(self) -> None:
        """Raise FlagCountMismatch unless the counter agrees with a scan."""
        scanned = self.count_flags()
        if scanned != self.flag_count:
            raise FlagCountMismatch(
                f"Flag counter is {self.flag_count} but {scanned} cells are flagged"
            )

    # ========================================================================
    # Array Views
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def mine_mask(self) -> np.ndarray:
        """Boolean array marking mined cells."""
        mask = np.zeros((self.config.rows, self.config.columns), dtype=bool)
        for row, col in self.mine_positions():
            mask[row, col] = True
        return mask

    def adjacency_counts(self) -> np.ndarray:
        """Adjacent-mine counts for every cell, -1 where a mine sits."""
        counts = np.full((self.config.rows, self.config.columns), -1, dtype=np.int8)
        for cell in self.cells():
            if not cell.is_mine:
                counts[cell.row, cell.col] = cell.adjacent_mines
        return counts


# ============================================================================
# Factory
# ============================================================================

def create_board(
    rows: int,
    columns: int,
    total_mines: int,
    rng: Optional[RandomSource] = None,
) -> Board:
    """
    Build a populated board ready for play.

    Args:
        rows: Number of rows.
        columns: Number of columns.
        total_mines: Mines to place, strictly fewer than the cell count.
        rng: Random source; a fresh ``random.Random`` when omitted.

    Returns:
        Board with mines placed and adjacency computed.

    Raises:
        InvalidDimension: rows or columns not positive.
        InvalidMineCount: mine count negative or not below the cell count.
    """
    board = Board(BoardConfig(rows, columns, total_mines))
    place_mines(board, total_mines, rng or random.Random())
    compute_adjacency(board)
    return board
