"""
Square geometry shared by the board and piece renderers.

Both renderers walk square indices 0..63 and need the same answer to "where
on the canvas does this square go?". Keeping the transform in one place
guarantees that a piece always lands on the square painted for it.

Reversal is a point reflection through the board centre (row -> 7-row and
col -> 7-col together), which is exactly how the board looks from Black's
side: a8 moves to the bottom-right corner, h1 to the top-left.
"""

from diagram.constants import BOARD_FILES, LAST_INDEX


def square_origin(index: int, reversed: bool) -> tuple[int, int]:
    """
    Convert a square index to the (row, col) it occupies on the canvas.

    Args:
        index:    Square index in [0, 63], a8 = 0, h1 = 63.
        reversed: True to view the board from Black's side.

    Returns:
        (row, col), both in [0, 7]. Row 0 is the top of the image.
    """
    col = index % BOARD_FILES
    row = (index - col) // BOARD_FILES

    if reversed:
        row = LAST_INDEX - row
        col = LAST_INDEX - col

    return row, col


def square_xy(row: int, col: int, square_size: float) -> tuple[float, float]:
    """Top-left pixel corner of the square at (row, col)."""
    return col * square_size, row * square_size


def square_box(row: int, col: int, square_size: float) -> tuple[float, float, float, float]:
    """
    Pixel box (x0, y0, x1, y1) covering the square at (row, col).

    Pillow fills rectangles inclusive of both corners, so the box stops one
    pixel short of the neighbouring square's origin. Squares narrower than a
    pixel collapse to their origin.
    """
    x, y = square_xy(row, col, square_size)
    span = max(square_size - 1, 0)
    return x, y, x + span, y + span
