"""
FEN placement parsing.

A FEN string looks like this:

    2r3k1/p4p2/3Rp2p/1p2P1pK/8/1P4P1/P3Q2P/1q6 b - - 0 1

Only the first space-separated field (the piece placement) matters for a
diagram. Side to move, castling rights, en passant square and move counters
are ignored entirely, even when they are malformed.

The parser is forgiving. It never raises: characters it does not
understand are skipped, rows that overflow eight columns are wrapped, and
anything after the eighth row is dropped. Garbage in gives a partially or fully
empty board out, which still renders as a valid diagram.

Square indices run row-major from the top-left corner as seen by White:
index 0 is a8, index 7 is h8, index 56 is a1 and index 63 is h1.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

import chess

from diagram.constants import BOARD_FILES, BOARD_SQUARES, LAST_INDEX, PIECE_LETTERS

_log = logging.getLogger(__name__)

EMPTY_PLACEMENT = "8/8/8/8/8/8/8/8"
STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass(frozen=True)
class Board:
    """
    Immutable 64-cell board produced by parse_fen().

    Attributes:
        cells: One entry per square index. None for an empty square,
               otherwise the FEN piece letter (uppercase = white).
    """

    cells: tuple[str | None, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SQUARES:
            raise ValueError(f"board needs {BOARD_SQUARES} cells, got {len(self.cells)}")

    def __iter__(self) -> Iterator[str | None]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> str | None:
        return self.cells[index]

    @classmethod
    def empty(cls) -> "Board":
        return cls((None,) * BOARD_SQUARES)

    def is_empty(self) -> bool:
        return all(cell is None for cell in self.cells)

    def piece_at(self, index: int) -> chess.Piece | None:
        """Return the python-chess piece on a square index, or None."""
        symbol = self.cells[index]
        return chess.Piece.from_symbol(symbol) if symbol else None

    def to_chess(self) -> chess.BaseBoard:
        """
        Convert to a python-chess BaseBoard.

        python-chess numbers squares from a1 upwards, so the row is flipped:
        diagram index i lands on python-chess square i ^ 56.
        """
        board = chess.BaseBoard.empty()
        for index in range(BOARD_SQUARES):
            piece = self.piece_at(index)
            if piece is not None:
                board.set_piece_at(chess.square_mirror(index), piece)
        return board

    def placement(self) -> str:
        """Normalised placement field, e.g. '4k3/8/8/8/8/8/8/4K3'."""
        return self.to_chess().board_fen()


def placement_field(fen: str) -> str:
    """Return the part of a FEN string before the first space."""
    return fen.split(" ", 1)[0]


def parse_fen(fen: str) -> Board:
    """
    Expand the placement field of a FEN string into a 64-cell Board.

    Scanning keeps a (row, col) cursor starting at the top-left square:
        - '/' moves to the start of the next row.
        - A column cursor already past the last file also moves to the next
          row. The character that triggered the wrap is consumed.
        - Digits 1-8 skip that many empty squares.
        - Piece letters are written at the cursor, which then advances.
        - Anything else is ignored without moving the cursor.
    Scanning stops as soon as the cursor leaves the eighth row.

    Args:
        fen: A full FEN string or just its placement field.

    Returns:
        The parsed Board. Never raises for malformed input.
    """
    cells: list[str | None] = [None] * BOARD_SQUARES
    row = col = 0

    for char in placement_field(fen):
        if row > LAST_INDEX:
            _log.debug("placement runs past the last row, ignoring the rest: %r", fen)
            break

        if char == "/" or col > LAST_INDEX:
            row += 1
            col = 0
            continue

        if char in "12345678":
            col += int(char)
        elif char in PIECE_LETTERS:
            cells[row * BOARD_FILES + col] = char
            col += 1

    return Board(tuple(cells))
