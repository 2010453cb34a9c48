"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    Board,
    BoardConfig,
    Cell,
    GameStateStore,
    compute_adjacency,
    create_board,
)


BoardBuilder = Callable[[int, int, Iterable[Tuple[int, int]]], Board]


def build_board(
    rows: int, columns: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Create a board with mines at fixed positions and counts computed."""
    mines = list(mines)
    board = Board(BoardConfig(rows, columns, len(mines)))
    for row, col in mines:
        board.get_cell(row, col).is_mine = True
    compute_adjacency(board)
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> BoardBuilder:
    """Factory for boards with a known mine layout."""
    return build_board


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible layouts."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return create_board(9, 9, 10, rng)


@pytest.fixture
def diagonal_board() -> Board:
    """3x3 board with mines in opposite corners."""
    return build_board(3, 3, [(0, 0), (2, 2)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return build_board(5, 5, [])


@pytest.fixture
def corner_mine_board() -> Board:
    """5x5 board with a single mine in the bottom-right corner."""
    return build_board(5, 5, [(4, 4)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Persistence Fixtures
# ============================================================================

@pytest.fixture
def store(tmp_path: Path) -> GameStateStore:
    """Save slot inside a temporary directory."""
    return GameStateStore(tmp_path / "state.csv")
