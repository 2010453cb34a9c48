"""
Unit tests for board rendering and coordinate parsing.
"""
import pytest
from minefield import Board, parse_coordinates, render_board, reveal_cascade, toggle_flag


# ============================================================================
# Render Tests
# ============================================================================

class TestRenderBoard:
    """Test the text grid."""

    def test_hidden_board(self, diagonal_board: Board) -> None:
        assert render_board(diagonal_board) == "\n".join([
            "  1 2 3",
            "A ? ? ?",
            "B ? ? ?",
            "C ? ? ?",
        ])

    def test_mixed_symbols(self, diagonal_board: Board) -> None:
        reveal_cascade(diagonal_board, 0, 2)
        toggle_flag(diagonal_board, 2, 2)
        assert render_board(diagonal_board).splitlines()[1:] == [
            "A ? 1 0",
            "B ? 2 1",
            "C ? ? F",
        ]

    def test_reveal_mines(self, diagonal_board: Board) -> None:
        toggle_flag(diagonal_board, 2, 2)
        lines = render_board(diagonal_board, reveal_mines=True).splitlines()
        assert lines[1] == "A X ? ?"
        assert lines[3] == "C ? ? X"

    def test_wide_board_aligns_columns(self, make_board) -> None:
        board = make_board(2, 11, [])
        lines = render_board(board).splitlines()
        assert lines[0].endswith(" 9 10 11")
        assert lines[1] == "A " + " ".join([" ?"] * 11)


# ============================================================================
# Coordinate Parsing Tests
# ============================================================================

class TestParseCoordinates:
    """Test typed coordinate tokens."""

    @pytest.mark.parametrize(
        "token, expected",
        [("A1", (0, 0)), ("b3", (1, 2)), (" C10 ", (2, 9)), ("E12", (4, 11))],
    )
    def test_valid_tokens(self, token: str, expected) -> None:
        assert parse_coordinates(token, 5, 12) == expected

    @pytest.mark.parametrize(
        "token", ["", "A", "1A", "AA1", "A-1", "A0", "F1", "A13", "?3"]
    )
    def test_invalid_tokens(self, token: str) -> None:
        assert parse_coordinates(token, 5, 12) is None
