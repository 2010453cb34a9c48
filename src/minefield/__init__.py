"""
Minefield - Minesweeper board engine.

Provides board construction, reveal and flag rules, win detection and
a round-trip save format, plus a session layer that plays one game.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, create_board
from .generation import RandomSource, compute_adjacency, place_mines
from .reveal import is_won, reveal_cascade, toggle_flag
from .persistence import (
    GameStateStore,
    LoadResult,
    PersistedState,
    decode_state,
    encode_state,
)
from .render import parse_coordinates, render_board
from .session import GameSession, GameState, MoveResult, SessionConfig
from .errors import (
    DecodeError,
    FlagCountMismatch,
    FlagLimitExceeded,
    FlagUnderflow,
    InvalidDimension,
    InvalidMineCount,
    LogicError,
    MalformedState,
    MinefieldError,
    StateWriteError,
    ValidationError,
)

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "create_board",
    "RandomSource",
    "compute_adjacency",
    "place_mines",
    "is_won",
    "reveal_cascade",
    "toggle_flag",
    "GameStateStore",
    "LoadResult",
    "PersistedState",
    "decode_state",
    "encode_state",
    "parse_coordinates",
    "render_board",
    "GameSession",
    "GameState",
    "MoveResult",
    "SessionConfig",
    "DecodeError",
    "FlagCountMismatch",
    "FlagLimitExceeded",
    "FlagUnderflow",
    "InvalidDimension",
    "InvalidMineCount",
    "LogicError",
    "MalformedState",
    "MinefieldError",
    "StateWriteError",
    "ValidationError",
]
