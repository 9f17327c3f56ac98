"""
Diagram constants: palette, glyph table, offsets, and font file names.

Every number that shapes the rendered image is defined here so that the
renderers never carry magic values of their own. The board palette and the
glyph table are fixed: the service draws exactly one theme.
"""

import chess

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------

BOARD_SQUARES: int = 64
BOARD_FILES: int = 8
LAST_INDEX: int = BOARD_FILES - 1

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
# Square parity is anchored so that a1 (bottom-left from White's side) is dark.

DARK_SQUARE: str = "#b5876b"
LIGHT_SQUARE: str = "#f0dec7"
LABEL_COLOR: str = "#000"

WHITE_PIECE: str = "#fff"
BLACK_PIECE: str = "#000"

# ---------------------------------------------------------------------------
# Coordinate labels
# ---------------------------------------------------------------------------

# Label font size is square_size / LABEL_SIZE_DIVISOR, floored to whole pixels.
LABEL_SIZE_DIVISOR: int = 4

# Rank digits sit this far in from the square's top-left corner.
RANK_LABEL_INSET: int = 2

# File letters are pulled back from the bottom-right corner by a multiple of
# the label font size.
FILE_LABEL_X_FACTOR: float = 1 / 1.4
FILE_LABEL_Y_FACTOR: float = 1.4

# File letters from White's side, left to right.
FILE_NAMES: tuple[str, ...] = tuple(chess.FILE_NAMES)

# ---------------------------------------------------------------------------
# Pieces
# ---------------------------------------------------------------------------

# FEN letters the parser accepts. Lowercase = black, uppercase = white.
PIECE_LETTERS: str = "kqrnbpKQRNBP"

# Character drawn from the "Chess" font for each piece kind.
PIECE_GLYPHS: dict[int, str] = {
    chess.PAWN:   "o",
    chess.KNIGHT: "m",
    chess.BISHOP: "v",
    chess.ROOK:   "t",
    chess.QUEEN:  "w",
    chess.KING:   "l",
}
BLANK_GLYPH: str = " "

# Glyph font size is square_size - PIECE_FONT_SHRINK.
PIECE_FONT_SHRINK: int = 4

# Horizontal inset in pixels; the vertical inset is square_size / PIECE_Y_DIVISOR.
# Both are tuned to the metrics of the piece font.
PIECE_X_INSET: int = 2
PIECE_Y_DIVISOR: int = 6

# Outline width as a centred line. Pillow strokes grow outwards from the
# glyph contour and the fill covers the inner half, so half of this is used.
PIECE_OUTLINE_WIDTH: int = 2

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------

BOARD_FONT_FAMILY: str = "Board"
CHESS_FONT_FAMILY: str = "Chess"

BOARD_FONT_FILE: str = "roboto.ttf"
CHESS_FONT_FILE: str = "casefont.ttf"

# Pillow's "la" anchor puts the top of the font's ascent at the y coordinate,
# matching a top text baseline.
TEXT_ANCHOR: str = "la"
