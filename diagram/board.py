"""
Board renderer: the 64 squares and the rank/file coordinate labels.

Labels are drawn inside the edge squares rather than in a margin, so the
image is exactly size x size pixels:
    - rank digits in the top-left corner of every square in the left column;
    - file letters in the bottom-right corner of every square in the bottom row.
"""

import math

from PIL import ImageDraw

from diagram.constants import (
    BOARD_SQUARES,
    DARK_SQUARE,
    FILE_LABEL_X_FACTOR,
    FILE_LABEL_Y_FACTOR,
    FILE_NAMES,
    LABEL_COLOR,
    LABEL_SIZE_DIVISOR,
    LAST_INDEX,
    LIGHT_SQUARE,
    RANK_LABEL_INSET,
    TEXT_ANCHOR,
)
from diagram.fonts import FontSet
from diagram.geometry import square_box, square_origin, square_xy


def square_color(row: int, col: int) -> str:
    """Dark on odd parity, light on even; a1 comes out dark."""
    return DARK_SQUARE if (row + col) % 2 == 1 else LIGHT_SQUARE


def rank_label(row: int, reversed: bool) -> str:
    return str(row + 1 if reversed else 8 - row)


def file_label(col: int, reversed: bool) -> str:
    return FILE_NAMES[LAST_INDEX - col if reversed else col]


def label_font_size(square_size: float) -> int:
    return math.floor(square_size / LABEL_SIZE_DIVISOR)


def draw_board(
    draw: ImageDraw.ImageDraw,
    reversed: bool,
    square_size: float,
    fonts: FontSet,
) -> None:
    """
    Paint the checkerboard and its coordinate labels.

    Each square is filled first and its labels drawn straight after, so a
    label is never covered by a later fill.

    Args:
        draw:        Drawing surface for the target image.
        reversed:    True to draw from Black's side (rank 1 at the top).
        square_size: Square edge in pixels; may be fractional.
        fonts:       Loaded fonts; the Board face is used for the labels.
    """
    font_size = label_font_size(square_size)
    # Tiny boards have no room for labels.
    font = fonts.board.at(font_size) if font_size >= 1 else None

    for index in range(BOARD_SQUARES):
        row, col = square_origin(index, reversed)
        x, y = square_xy(row, col, square_size)

        draw.rectangle(square_box(row, col, square_size), fill=square_color(row, col))

        if font is None:
            continue

        if col == 0:
            draw.text(
                (x + RANK_LABEL_INSET, y + RANK_LABEL_INSET),
                rank_label(row, reversed),
                fill=LABEL_COLOR,
                font=font,
                anchor=TEXT_ANCHOR,
            )

        if row == LAST_INDEX:
            draw.text(
                (
                    x + square_size - font_size * FILE_LABEL_X_FACTOR,
                    y + square_size - font_size * FILE_LABEL_Y_FACTOR,
                ),
                file_label(col, reversed),
                fill=LABEL_COLOR,
                font=font,
                anchor=TEXT_ANCHOR,
            )
