"""
Piece renderer: draws piece glyphs from the Chess font on top of the board.

Every glyph is filled in its side's colour and outlined in the other one, so
white pieces stay visible on light squares and black pieces on dark squares.
"""

import chess
from PIL import ImageDraw

from diagram.constants import (
    BLACK_PIECE,
    BLANK_GLYPH,
    PIECE_FONT_SHRINK,
    PIECE_GLYPHS,
    PIECE_OUTLINE_WIDTH,
    PIECE_X_INSET,
    PIECE_Y_DIVISOR,
    TEXT_ANCHOR,
    WHITE_PIECE,
)
from diagram.fen import Board
from diagram.fonts import FontSet
from diagram.geometry import square_origin, square_xy


def is_white(symbol: str) -> bool:
    return symbol == symbol.upper()


def piece_colors(symbol: str) -> tuple[str, str]:
    """Return (fill, stroke) for a FEN piece letter; the two always differ."""
    if is_white(symbol):
        return WHITE_PIECE, BLACK_PIECE
    return BLACK_PIECE, WHITE_PIECE


def piece_glyph(symbol: str) -> str:
    """Map a FEN piece letter of either case to its Chess font character."""
    try:
        piece_type = chess.PIECE_SYMBOLS.index(symbol.lower())
    except ValueError:
        return BLANK_GLYPH
    return PIECE_GLYPHS.get(piece_type, BLANK_GLYPH)


def piece_font_size(square_size: float) -> float:
    return square_size - PIECE_FONT_SHRINK


def draw_pieces(
    draw: ImageDraw.ImageDraw,
    board: Board,
    reversed: bool,
    square_size: float,
    fonts: FontSet,
) -> None:
    """
    Draw every piece on the board.

    Pillow paints the stroke before the fill within a single text() call,
    so the outline never covers the glyph body.

    Args:
        draw:        Drawing surface for the target image.
        board:       Parsed board.
        reversed:    True to draw from Black's side.
        square_size: Square edge in pixels; may be fractional.
        fonts:       Loaded fonts; the Chess face is used for the glyphs.
    """
    font_size = piece_font_size(square_size)
    if font_size <= 0:
        return
    font = fonts.chess.at(font_size)

    for index, symbol in enumerate(board):
        if symbol is None:
            continue

        fill, stroke = piece_colors(symbol)
        row, col = square_origin(index, reversed)
        x, y = square_xy(row, col, square_size)

        draw.text(
            (x + PIECE_X_INSET, y + square_size / PIECE_Y_DIVISOR),
            piece_glyph(symbol),
            fill=fill,
            font=font,
            anchor=TEXT_ANCHOR,
            stroke_width=PIECE_OUTLINE_WIDTH // 2,
            stroke_fill=stroke,
        )
