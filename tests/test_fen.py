"""Unit tests for diagram/fen.py"""

import chess
import pytest

from diagram.fen import (
    EMPTY_PLACEMENT,
    STARTING_PLACEMENT,
    Board,
    parse_fen,
    placement_field,
)

KINGS_FEN = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"
STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def test_empty_placement_gives_empty_board() -> None:
    board = parse_fen(EMPTY_PLACEMENT)
    assert len(board) == 64
    assert board.is_empty()


def test_starting_position() -> None:
    """Black pieces fill the top two rows, white pieces the bottom two, the middle is empty."""
    board = parse_fen(STARTING_PLACEMENT)

    assert list(board[0:8]) == list("rnbqkbnr")
    assert list(board[8:16]) == ["p"] * 8
    assert all(cell is None for cell in board[16:48])
    assert list(board[48:56]) == ["P"] * 8
    assert list(board[56:64]) == list("RNBQKBNR")


@pytest.mark.parametrize("fen", ["", "!!??", "   ", "////////", "9999", "xyz/XYZ"])
def test_garbage_never_raises(fen: str) -> None:
    assert parse_fen(fen).is_empty()


def test_piece_letters_inside_garbage_are_placed() -> None:
    """Only the r and b of "garbage!!" are piece letters; they fill the first two squares."""
    board = parse_fen("garbage!!")
    pieces = [(index, cell) for index, cell in enumerate(board) if cell is not None]
    assert pieces == [(0, "r"), (1, "b")]


def test_only_placement_field_is_used() -> None:
    """Fields after the first space are ignored even when they make no sense."""
    assert parse_fen(KINGS_FEN) == parse_fen("4k3/8/8/8/8/8/8/4K3 ??? nonsense Q 9 x")
    assert placement_field(STARTING_FEN) == STARTING_PLACEMENT


def test_kings_land_on_e8_and_e1() -> None:
    board = parse_fen(KINGS_FEN)
    assert board[4] == "k"
    assert board[60] == "K"
    assert sum(cell is not None for cell in board) == 2


def test_unknown_characters_do_not_move_the_cursor() -> None:
    """'9' is not a valid skip and 'x' is not a piece: both are dropped in place."""
    board = parse_fen("9x k")
    assert board.is_empty()

    board = parse_fen("9xk")
    assert board[0] == "k"


def test_column_overflow_wraps_and_consumes_the_character() -> None:
    """A ninth piece in a row triggers a wrap; that piece itself is dropped."""
    board = parse_fen("ppppppppp/P")

    assert list(board[0:8]) == ["p"] * 8
    # the ninth 'p' moved the cursor to row 1, then '/' moved it on to row 2
    assert all(cell is None for cell in board[8:16])
    assert board[16] == "P"


def test_skip_past_the_last_file_wraps() -> None:
    board = parse_fen("44k")
    assert board.is_empty()

    board = parse_fen("44kq")
    assert board[8] == "q"


def test_parsing_stops_after_the_eighth_row() -> None:
    board = parse_fen("8/8/8/8/8/8/8/7k/K")
    assert board[63] == "k"
    assert "K" not in board

    assert parse_fen("8/8/8/8/8/8/8/8/kkkk").is_empty()
    assert parse_fen("8/8/8/8/8/8/8/8k").is_empty()


def test_short_placement_leaves_the_rest_empty() -> None:
    board = parse_fen("R")
    assert board[0] == "R"
    assert sum(cell is not None for cell in board) == 1


def test_board_requires_64_cells() -> None:
    with pytest.raises(ValueError):
        Board((None,) * 63)


def test_board_is_immutable() -> None:
    board = Board.empty()
    with pytest.raises(AttributeError):
        board.cells = ()  # type: ignore[misc]


def test_piece_at_and_to_chess() -> None:
    board = parse_fen(KINGS_FEN)

    assert board.piece_at(4) == chess.Piece(chess.KING, chess.BLACK)
    assert board.piece_at(60) == chess.Piece(chess.KING, chess.WHITE)
    assert board.piece_at(0) is None

    chess_board = board.to_chess()
    assert chess_board.piece_at(chess.E8) == chess.Piece(chess.KING, chess.BLACK)
    assert chess_board.piece_at(chess.E1) == chess.Piece(chess.KING, chess.WHITE)


@pytest.mark.parametrize(
    "fen, expected",
    [
        (STARTING_FEN, STARTING_PLACEMENT),
        (KINGS_FEN, "4k3/8/8/8/8/8/8/4K3"),
        ("", EMPTY_PLACEMENT),
        ("2r3k1/p4p2/3Rp2p/1p2P1pK/8/1P4P1/P3Q2P/1q6 b - - 0 1", "2r3k1/p4p2/3Rp2p/1p2P1pK/8/1P4P1/P3Q2P/1q6"),
        ("ppppppppp", "pppppppp/8/8/8/8/8/8/8"),
    ],
)
def test_placement_round_trip(fen: str, expected: str) -> None:
    assert parse_fen(fen).placement() == expected
