"""
Command-line front end for the diagram renderer.

Commands:
    render FEN   - write the diagram to a PNG file
    show FEN     - print the parsed board as text

The same rendering path as the web service is used, so a diagram written
here is byte-for-byte what GET /diagram would return for the same options.

Usage:
    fen-diagram render "4k3/8/8/8/8/8/8/4K3 w - - 0 1" --size 400 -o kings.png
    fen-diagram show "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR" --reverse
"""

import logging
import time
from pathlib import Path

import chess
import click

from diagram import FontLoadError, FontSet, directory_resolver, load_fonts, parse_fen, render_diagram
from web.config import settings

_log = logging.getLogger(__name__)


def _load(font_dir: Path, builtin: bool) -> FontSet:
    """Load fonts for a CLI run, turning load failures into a clean exit."""
    if builtin:
        return FontSet.builtin()
    try:
        return load_fonts(directory_resolver(font_dir))
    except FontLoadError as exc:
        raise click.ClickException(f"{exc} (use --builtin-fonts to render without font files)") from exc


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """Render chess diagrams from FEN strings."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING)


@cli.command()
@click.argument("fen")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="PNG file to write (default: <epoch-ms>.png).")
@click.option("--size", type=click.IntRange(1, settings.MAX_SIZE), default=settings.DEFAULT_SIZE,
              show_default=True, help="Image edge in pixels.")
@click.option("--reverse", is_flag=True, help="Draw the board from Black's side.")
@click.option("--font-dir", type=click.Path(file_okay=False, path_type=Path), default=settings.FONT_DIR,
              show_default=True, help="Directory holding roboto.ttf and casefont.ttf.")
@click.option("--builtin-fonts", is_flag=True, help="Use Pillow's bundled font instead of font files.")
def render(fen: str, output: Path | None, size: int, reverse: bool, font_dir: Path, builtin_fonts: bool) -> None:
    """Render FEN to a PNG file."""
    fonts = _load(font_dir, builtin_fonts)

    if output is None:
        output = Path(f"{int(time.time() * 1000)}.png")

    png = render_diagram(fen, reverse, size, fonts)
    output.write_bytes(png)
    _log.info("Wrote %d bytes to %s", len(png), output)
    click.echo(str(output))


@cli.command()
@click.argument("fen")
@click.option("--reverse", is_flag=True, help="Print the board from Black's side.")
def show(fen: str, reverse: bool) -> None:
    """Print the board parsed from FEN."""
    board = parse_fen(fen).to_chess()
    click.echo(board.board_fen())
    if reverse:
        # Rotate half a turn: the view from Black's side.
        board = board.transform(chess.flip_vertical).transform(chess.flip_horizontal)
    click.echo(str(board))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
