"""
FEN diagram package.

Turns the placement field of a FEN string into a PNG chessboard diagram.

Modules:
    constants - Palette, glyph table, label offsets, font file names
    fen       - Forgiving FEN placement parser and the 64-cell Board
    geometry  - Square index to canvas row/column, including reversal
    board     - Square fills and rank/file labels
    pieces    - Piece glyphs with contrasting outlines
    fonts     - One-time font loading and the FontSet handle
    service   - render_image() / render_diagram(): the public entry points
"""

from diagram.fen import Board, parse_fen
from diagram.fonts import FontLoadError, FontSet, directory_resolver, load_fonts
from diagram.service import RenderConfig, render_diagram, render_image

__all__ = [
    "Board",
    "FontLoadError",
    "FontSet",
    "RenderConfig",
    "directory_resolver",
    "load_fonts",
    "parse_fen",
    "render_diagram",
    "render_image",
]
