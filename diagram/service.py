"""
Diagram entry point: FEN in, PNG bytes out.

This module defines the interface that web/app.py and interface/cli.py call.
It owns nothing between calls: every render builds its own board, image and
drawing surface, and only reads from the FontSet it is handed.
"""

import io
from dataclasses import dataclass

from PIL import Image, ImageDraw

from diagram.board import draw_board
from diagram.constants import BOARD_FILES
from diagram.fen import parse_fen
from diagram.fonts import FontSet
from diagram.pieces import draw_pieces


@dataclass(frozen=True)
class RenderConfig:
    """
    Per-request rendering options.

    Attributes:
        size:     Edge of the square image in pixels. Bounds are enforced by
                  the caller (the HTTP layer rejects anything out of range).
        reversed: True to draw the board from Black's side.
    """

    size: int
    reversed: bool = False

    @property
    def square_size(self) -> float:
        # Kept fractional: a 100px board has 12.5px squares.
        return self.size / BOARD_FILES


def render_image(fen: str, config: RenderConfig, fonts: FontSet) -> Image.Image:
    """
    Render a FEN position onto a new RGB image.

    Squares and labels go down first, pieces on top.

    Args:
        fen:    FEN string; only the placement field is used.
        config: Image size and orientation.
        fonts:  Fonts loaded at startup by diagram.fonts.load_fonts().

    Returns:
        A config.size x config.size Pillow image.
    """
    board = parse_fen(fen)
    image = Image.new("RGB", (config.size, config.size))
    draw = ImageDraw.Draw(image)

    draw_board(draw, config.reversed, config.square_size, fonts)
    draw_pieces(draw, board, config.reversed, config.square_size, fonts)

    return image


def render_diagram(fen: str, reversed: bool, size: int, fonts: FontSet) -> bytes:
    """Render a FEN position and return the PNG-encoded image."""
    image = render_image(fen, RenderConfig(size=size, reversed=reversed), fonts)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
