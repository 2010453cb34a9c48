"""
Game session for Minesweeper.

Ties one board to a player and a save slot, applies the player-facing
rules on top of the engine, and saves after every move.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .board import Board, create_board
from .errors import DecodeError
from .generation import RandomSource
from .persistence import DEFAULT_STATE_PATH, GameStateStore
from .render import render_board
from .reveal import is_won, reveal_cascade, toggle_flag

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class MoveResult(Enum):
    """Outcome of a player move."""

    IGNORED = auto()
    REVEALED = auto()
    EXPLODED = auto()
    WON = auto()
    FLAGGED = auto()
    UNFLAGGED = auto()
    NO_FLAGS_LEFT = auto()


@dataclass
class SessionConfig:
    """
    Configuration for a game session.

    Attributes:
        state_path: CSV file holding the saved game.
        seed: Seed for mine placement, None for a random layout.
    """

    state_path: str = DEFAULT_STATE_PATH
    seed: Optional[int] = None

    def make_store(self) -> GameStateStore:
        return GameStateStore(self.state_path)

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


# ============================================================================
# Session
# ============================================================================

class GameSession:
    """
    One game in progress.

    Reveals of flagged cells are refused here; the engine cascade itself
    clears flags it runs into. Finished games clear the save slot.
    """

    def __init__(
        self,
        board: Board,
        player_name: str,
        store: Optional[GameStateStore] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            board: Board to play on.
            player_name: Name stored with every save.
            store: Save slot, or None to play without saving.
        """
        self.board = board
        self.player_name = player_name
        self.store = store
        self._game_state = self._derive_state()

    @classmethod
    def new(
        cls,
        player_name: str,
        rows: int,
        columns: int,
        total_mines: int,
        store: Optional[GameStateStore] = None,
        rng: Optional[RandomSource] = None,
    ) -> "GameSession":
        """Start a fresh game and save it."""
        board = create_board(rows, columns, total_mines, rng)
        session = cls(board, player_name, store)
        logger.info(
            "New %dx%d game with %d mines for %s",
            rows, columns, total_mines, player_name,
        )
        session.save()
        return session

    @classmethod
    def resume(cls, store: GameStateStore) -> Optional["GameSession"]:
        """
        Restore the saved game.

        Returns:
            The session, or None when nothing is saved.

        Raises:
            MalformedState: the save exists but is corrupt.
        """
        try:
            board, _, player_name = store.load()
        except DecodeError as error:
            logger.info("No game to resume: %s", error)
            return None
        return cls(board, player_name, store)

    def _derive_state(self) -> GameState:
        if self.board.has_exploded:
            return GameState.LOST
        if is_won(self.board):
            return GameState.WON
        return GameState.PLAYING

    # ========================================================================
    # Player Moves
    # ========================================================================

    def reveal(self, row: int, col: int) -> MoveResult:
        """
        Reveal a cell chosen by the player.

        Returns:
            IGNORED for finished games, invalid, revealed or flagged cells;
            EXPLODED on a mine; WON when the last safe cell opens;
            REVEALED otherwise.
        """
        cell = self.board.get_cell(row, col)
        if not self.is_playing or cell is None or not cell.is_hidden:
            return MoveResult.IGNORED

        flags_removed = reveal_cascade(self.board, row, col)
        self.board.decrease_flag_count(flags_removed)

        if cell.is_mine:
            self._finish(GameState.LOST)
            return MoveResult.EXPLODED
        if is_won(self.board):
            self._finish(GameState.WON)
            return MoveResult.WON

        self.save()
        return MoveResult.REVEALED

    def toggle_flag(self, row: int, col: int) -> MoveResult:
        """
        Place or remove a flag.

        Returns:
            IGNORED for finished games, invalid or revealed cells;
            NO_FLAGS_LEFT when every flag is already placed;
            FLAGGED or UNFLAGGED otherwise.
        """
        cell = self.board.get_cell(row, col)
        if not self.is_playing or cell is None or cell.is_revealed:
            return MoveResult.IGNORED

        if cell.is_flagged:
            toggle_flag(self.board, row, col)
            self.board.decrease_flag_count()
            result = MoveResult.UNFLAGGED
        elif self.board.flags_remaining == 0:
            return MoveResult.NO_FLAGS_LEFT
        else:
            self.board.increase_flag_count()
            toggle_flag(self.board, row, col)
            result = MoveResult.FLAGGED

        self.save()
        return result

    def _finish(self, state: GameState) -> None:
        """End the game and drop the save."""
        self._game_state = state
        self.board.reveal_all()
        logger.info("Game %s for %s", state.name.lower(), self.player_name)
        if self.store is not None:
            self.store.clear()

    # ========================================================================
    # Persistence
    # ========================================================================

    def save(self) -> None:
        """Write the board to the save slot, if any."""
        if self.store is None:
            return
        self.board.check_flag_count()
        self.store.save(self.board, self.player_name)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def flags_remaining(self) -> int:
        return self.board.flags_remaining

    def render(self) -> str:
        """Render the board for the player."""
        return render_board(self.board)
