"""
Font handles for the renderers.

Two font families are involved:
    Board - an ordinary text face used for the rank and file labels.
    Chess - a symbol face whose letters o/m/v/t/w/l are drawn as pieces.

Fonts are loaded once, before any diagram is rendered, by load_fonts(). The
file bytes are kept in an immutable FontSet that the caller passes into every
render call. Sized Pillow fonts are created from those bytes per render, so
concurrent renders never share a FreeType face.

Where the font files live is up to the caller: load_fonts() takes a resolver
that maps a file name to a path. directory_resolver() covers the common case
of a single font directory.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from PIL import ImageFont

from diagram.constants import (
    BOARD_FONT_FAMILY,
    BOARD_FONT_FILE,
    CHESS_FONT_FAMILY,
    CHESS_FONT_FILE,
)

_log = logging.getLogger(__name__)

PathResolver = Callable[[str], Path]


class FontLoadError(RuntimeError):
    """A font file is missing or cannot be read as a font."""


@dataclass(frozen=True)
class FontFace:
    """
    A scalable font face held in memory.

    Attributes:
        family: Family name, used in log and error messages.
        data:   Raw TrueType/OpenType bytes, or None for Pillow's bundled
                default face.
    """

    family: str
    data: bytes | None = None

    def at(self, size: float) -> ImageFont.FreeTypeFont:
        """Return a font of this face at the given pixel size."""
        if self.data is None:
            return ImageFont.load_default(size)
        return ImageFont.truetype(io.BytesIO(self.data), size)


@dataclass(frozen=True)
class FontSet:
    """The two faces a diagram needs."""

    board: FontFace
    chess: FontFace

    @classmethod
    def builtin(cls) -> "FontSet":
        """
        Both families backed by Pillow's bundled face.

        Labels render normally; pieces come out as their plain glyph letters.
        Useful for development and tests when the real font files are absent.
        """
        return cls(
            board=FontFace(BOARD_FONT_FAMILY),
            chess=FontFace(CHESS_FONT_FAMILY),
        )


def directory_resolver(directory: Path | str) -> PathResolver:
    """Resolve font file names inside a single directory."""
    root = Path(directory)

    def resolve(filename: str) -> Path:
        return root / filename

    return resolve


def load_face(family: str, path: Path) -> FontFace:
    """
    Read a font file and check that Pillow can open it.

    Raises:
        FontLoadError: The file is missing, unreadable, or not a font.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FontLoadError(f"Cannot read {family} font at {path}: {exc}") from exc

    try:
        ImageFont.truetype(io.BytesIO(data), 12)
    except OSError as exc:
        raise FontLoadError(f"{path} is not a usable {family} font: {exc}") from exc

    _log.info("Loaded %s font from %s (%d bytes)", family, path, len(data))
    return FontFace(family, data)


def load_fonts(resolve: PathResolver) -> FontSet:
    """
    Load the Board and Chess faces through the given path resolver.

    Call this once at startup and hand the result to every render call.

    Args:
        resolve: Maps a font file name (e.g. "roboto.ttf") to its path.

    Returns:
        FontSet with both faces loaded.

    Raises:
        FontLoadError: Either font could not be loaded.
    """
    return FontSet(
        board=load_face(BOARD_FONT_FAMILY, resolve(BOARD_FONT_FILE)),
        chess=load_face(CHESS_FONT_FAMILY, resolve(CHESS_FONT_FILE)),
    )
