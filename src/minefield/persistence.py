"""
Persistence module for Minesweeper game.

Converts a board to and from a flat list of text records, and keeps
those records in a CSV file between sessions.

Record layout::

    PlayerName, <name>
    Rows, <int>
    Columns, <int>
    TotalMines, <int>
    FlagCount, <int>
    MineLocation
    <RowLetter>, <ColumnNumber>      (one per mine)
    Row, 1, 2, ..., <Columns>
    <RowLetter>, <symbol>, ...       (one per row: X, F, ? or a digit)
"""
import csv
import logging
from pathlib import Path
from typing import Iterable, List, NamedTuple, Sequence, Set, Tuple, Union

import numpy as np

from .board import Board, BoardConfig
from .cell import FLAG_SYMBOL, HIDDEN_SYMBOL, MINE_SYMBOL
from .errors import DecodeError, MalformedState, StateWriteError, ValidationError
from .generation import compute_adjacency

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

PersistedState = List[List[str]]

PLAYER_NAME_KEY = "PlayerName"
ROWS_KEY = "Rows"
COLUMNS_KEY = "Columns"
TOTAL_MINES_KEY = "TotalMines"
FLAG_COUNT_KEY = "FlagCount"
MINE_LOCATION_HEADER = "MineLocation"
ROW_HEADER = "Row"

DEFAULT_STATE_PATH = "minesweeper_state.csv"


class LoadResult(NamedTuple):
    """A decoded board together with its ancillary fields."""

    board: Board
    flag_count: int
    player_name: str


# ============================================================================
# Coordinate Labels
# ============================================================================

def row_label(row: int) -> str:
    """Letter used for a 0-based row index ('A' for row 0)."""
    return chr(ord("A") + row)


def row_index(label: str) -> int:
    """Inverse of :func:`row_label`. Raises ValueError on bad labels."""
    if len(label) != 1:
        raise ValueError(f"Row label must be a single character: {label!r}")
    return ord(label) - ord("A")


# ============================================================================
# Encoding
# ============================================================================

def encode_state(board: Board, flag_count: int, player_name: str) -> PersistedState:
    """
    Serialize a board snapshot.

    Args:
        board: Board to encode.
        flag_count: Flag counter to store alongside the board.
        player_name: Player identifier.

    Returns:
        Ordered list of records.
    """
    records: PersistedState = [
        [PLAYER_NAME_KEY, player_name],
        [ROWS_KEY, str(board.rows)],
        [COLUMNS_KEY, str(board.columns)],
        [TOTAL_MINES_KEY, str(board.total_mines)],
        [FLAG_COUNT_KEY, str(flag_count)],
        [MINE_LOCATION_HEADER],
    ]
    for row, col in zip(*np.nonzero(board.mine_mask())):
        records.append([row_label(int(row)), str(col + 1)])

    records.append([ROW_HEADER] + [str(col + 1) for col in range(board.columns)])
    for row in range(board.rows):
        symbols = [board.get_cell(row, col).symbol for col in range(board.columns)]
        records.append([row_label(row)] + symbols)
    return records


# ============================================================================
# Decoding
# ============================================================================

def decode_state(records: Iterable[Sequence[str]]) -> LoadResult:
    """
    Rebuild a board from records produced by :func:`encode_state`.

    Mines are restored from the location list, the cell table restores
    revealed and flagged cells, and adjacent counts are recomputed from the
    mine layout instead of trusting the stored digits.

    Raises:
        DecodeError: no records at all.
        MalformedState: records present but inconsistent.
    """
    present = [
        list(record) for record in records
        if any(_strip(field) for field in record)
    ]
    if not present:
        raise DecodeError("No saved game state")

    reader = _RecordCursor(present)
    player_name = reader.field(PLAYER_NAME_KEY, keep_spaces=True)
    rows = reader.int_field(ROWS_KEY)
    columns = reader.int_field(COLUMNS_KEY)
    total_mines = reader.int_field(TOTAL_MINES_KEY)
    flag_count = reader.int_field(FLAG_COUNT_KEY)

    try:
        board = Board(BoardConfig(rows, columns, total_mines))
    except ValidationError as error:
        raise MalformedState(f"Invalid board metadata: {error}") from error
    if not 0 <= flag_count <= total_mines:
        raise MalformedState(
            f"{FLAG_COUNT_KEY} {flag_count} outside 0..{total_mines}"
        )

    mines = _read_mines(reader, board)
    _read_cell_table(reader, board, mines)

    revealed = board.get_observation() >= 0
    stored = board.adjacency_counts()
    compute_adjacency(board)
    actual = board.adjacency_counts()
    for row, col in zip(*np.nonzero(revealed & (stored != actual))):
        logger.debug(
            "Stored count %d at %s%d replaced by %d",
            stored[row, col], row_label(int(row)), col + 1, actual[row, col],
        )

    scanned = board.count_flags()
    if scanned != flag_count:
        raise MalformedState(
            f"{FLAG_COUNT_KEY} is {flag_count} but {scanned} cells are flagged"
        )
    board.flag_count = flag_count
    return LoadResult(board, flag_count, player_name)


def _strip(field: str) -> str:
    """Drop separator spaces only; row labels past 'Z' may be other whitespace."""
    return field.strip(" ")


class _RecordCursor:
    """Sequential reader over raw records, trimming separator spaces."""

    def __init__(self, records: List[List[str]]) -> None:
        self._records = records
        self._position = 0

    def _raw(self) -> List[str]:
        if self._position >= len(self._records):
            raise MalformedState("Saved game state ends unexpectedly")
        return self._records[self._position]

    def peek(self) -> List[str]:
        return [_strip(field) for field in self._raw()]

    def next(self) -> List[str]:
        record = self.peek()
        self._position += 1
        return record

    def remaining(self) -> List[List[str]]:
        records = [
            [_strip(field) for field in record]
            for record in self._records[self._position:]
        ]
        self._position = len(self._records)
        return records

    def field(self, key: str, keep_spaces: bool = False) -> str:
        """Read a `key, value` record. With keep_spaces the value is returned verbatim."""
        raw = self._raw()
        record = self.next()
        if len(record) != 2 or record[0] != key:
            raise MalformedState(f"Expected '{key}, <value>' but found {record}")
        return raw[1] if keep_spaces else record[1]

    def int_field(self, key: str) -> int:
        value = self.field(key)
        try:
            return int(value)
        except ValueError as error:
            raise MalformedState(f"{key} is not a number: {value!r}") from error


def _read_mines(reader: _RecordCursor, board: Board) -> Set[Tuple[int, int]]:
    """Consume the mine location block and mark the listed cells."""
    header = reader.next()
    if header != [MINE_LOCATION_HEADER]:
        raise MalformedState(f"Expected '{MINE_LOCATION_HEADER}' but found {header}")

    mines: Set[Tuple[int, int]] = set()
    while reader.peek()[0] != ROW_HEADER:
        record = reader.next()
        if len(record) != 2:
            raise MalformedState(f"Bad mine location record: {record}")
        try:
            position = (row_index(record[0]), int(record[1]) - 1)
        except ValueError as error:
            raise MalformedState(f"Bad mine location record: {record}") from error
        if not board.is_valid_position(*position):
            raise MalformedState(f"Mine location {record[0]}{record[1]} is off the board")
        if position in mines:
            raise MalformedState(f"Duplicate mine location {record[0]}{record[1]}")
        mines.add(position)
        board.get_cell(*position).is_mine = True

    if len(mines) != board.total_mines:
        raise MalformedState(
            f"{TOTAL_MINES_KEY} is {board.total_mines} but {len(mines)} mines are listed"
        )
    return mines


def _read_cell_table(
    reader: _RecordCursor, board: Board, mines: Set[Tuple[int, int]]
) -> None:
    """Consume the row header and one record per row of cell symbols."""
    expected_header = [ROW_HEADER] + [str(col + 1) for col in range(board.columns)]
    header = reader.next()
    if len(header) != len(expected_header):
        raise MalformedState(
            f"{COLUMNS_KEY} is {board.columns} but the row header has "
            f"{len(header) - 1} columns"
        )
    if header != expected_header:
        raise MalformedState(f"Bad row header: {header}")

    table = reader.remaining()
    if len(table) != board.rows:
        raise MalformedState(
            f"{ROWS_KEY} is {board.rows} but {len(table)} rows are stored"
        )

    for row, record in enumerate(table):
        if record[0] != row_label(row):
            raise MalformedState(f"Expected row {row_label(row)} but found {record[0]!r}")
        symbols = record[1:]
        if len(symbols) != board.columns:
            raise MalformedState(
                f"{COLUMNS_KEY} is {board.columns} but row {record[0]} has "
                f"{len(symbols)} cells"
            )
        for col, symbol in enumerate(symbols):
            _apply_symbol(board, row, col, symbol, (row, col) in mines)


def _apply_symbol(board: Board, row: int, col: int, symbol: str, is_mine: bool) -> None:
    """Restore one cell from its stored symbol."""
    cell = board.get_cell(row, col)
    location = f"{row_label(row)}{col + 1}"

    if symbol == HIDDEN_SYMBOL:
        return
    if symbol == FLAG_SYMBOL:
        cell.toggle_flag()
        return
    if symbol == MINE_SYMBOL:
        if not is_mine:
            raise MalformedState(f"Revealed mine at {location} is not a listed mine")
        cell.reveal()
        return
    if len(symbol) == 1 and symbol in "012345678":
        if is_mine:
            raise MalformedState(f"Listed mine at {location} is stored as a number")
        cell.adjacent_mines = int(symbol)
        cell.reveal()
        return
    raise MalformedState(f"Unknown cell symbol {symbol!r} at {location}")


# ============================================================================
# File Store
# ============================================================================

class GameStateStore:
    """
    Single save slot backed by a CSV file.

    Attributes:
        path: Location of the CSV file.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_STATE_PATH) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        """Check if a saved game is present."""
        return self.path.is_file()

    def save(self, board: Board, player_name: str) -> None:
        """
        Write the board using its own flag counter.

        Raises:
            StateWriteError: file could not be written.
        """
        records = encode_state(board, board.flag_count, player_name)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", newline="", encoding="utf-8") as f:
                csv.writer(f).writerows(records)
        except OSError as error:
            logger.error("Could not save game state to %s: %s", self.path, error)
            raise StateWriteError(f"Could not save game state: {error}") from error
        logger.debug("Saved game state to %s", self.path)

    def load(self) -> LoadResult:
        """
        Read and decode the saved game.

        Raises:
            DecodeError: no readable save file.
            MalformedState: save file is corrupt.
        """
        try:
            with open(self.path, newline="", encoding="utf-8") as f:
                records = list(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as error:
            raise DecodeError(f"No saved game state at {self.path}: {error}") from error

        result = decode_state(records)
        logger.info("Loaded game state for %s from %s", result.player_name, self.path)
        return result

    def clear(self) -> None:
        """Delete the saved game, if any."""
        self.path.unlink(missing_ok=True)
        logger.info("Cleared game state at %s", self.path)
