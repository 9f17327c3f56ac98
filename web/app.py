"""
FastAPI web application for the FEN diagram renderer.

Exposes GET /diagram, which takes a FEN position as a query parameter and
returns the board as a PNG image, plus GET /health for deployment probes.

Architecture notes:
- Sync endpoint (not async): FastAPI runs sync handlers in a thread pool,
  so rasterising a board never blocks the event loop.
- Fonts are loaded once in the lifespan handler and kept on app.state. A
  missing or broken font file aborts startup instead of failing requests.
- Stateless per request: every call parses its own board and draws on its
  own image; only the immutable FontSet is shared.
- Error bodies are plain text, not JSON.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from diagram import FontSet, directory_resolver, load_fonts, render_diagram
from web.config import settings

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=settings.LOG_LEVEL)
_log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the Board and Chess fonts before the first request is served."""
    app.state.fonts = load_fonts(directory_resolver(settings.FONT_DIR))
    _log.info("Fonts loaded from %s", settings.FONT_DIR)
    yield


app = FastAPI(title="FEN Diagram", version="1.0.0", lifespan=lifespan)


def get_fonts(request: Request) -> FontSet:
    """Dependency returning the FontSet loaded at startup."""
    return request.app.state.fonts


@app.exception_handler(StarletteHTTPException)
async def plain_text_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Send HTTP errors as bare text messages."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Liveness probe payload."""

    status: str


# ---------------------------------------------------------------------------
# Request validation
# ---------------------------------------------------------------------------


def parse_size(raw: str | None) -> int:
    """
    Validate the size query parameter.

    Args:
        raw: The raw query value, or None when the parameter is absent.

    Returns:
        The board size in pixels, DEFAULT_SIZE when absent.

    Raises:
        HTTPException 400: Not an integer, or outside [1, MAX_SIZE].
    """
    if raw is None:
        return settings.DEFAULT_SIZE

    # ASCII digits only: int() alone also takes "1_000" and other scripts' digits.
    value = raw.strip()
    if not (value.isascii() and value.lstrip("+-").isdigit()):
        raise HTTPException(status_code=400, detail="Size should be a positive integer")

    try:
        size = int(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Size should be a positive integer") from exc

    if not 1 <= size <= settings.MAX_SIZE:
        raise HTTPException(status_code=400, detail="Size should be a positive integer")

    return size


def content_disposition(inline: bool) -> str:
    """Inline display, or a download named after the current epoch milliseconds."""
    if inline:
        return "inline"
    return f'attachment; filename="{int(time.time() * 1000)}.png"'


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/diagram")
def diagram(
    fen: str | None = None,
    rev: str | None = None,
    inline: str | None = None,
    size: str | None = None,
    fonts: FontSet = Depends(get_fonts),
) -> Response:
    """
    Render a FEN position as a PNG diagram.

    Query parameters:
        fen:    FEN string (required). Only the placement field is used.
        rev:    "1" to draw the board from Black's side.
        inline: "1" for inline display, otherwise served as an attachment.
        size:   Image edge in pixels, default 800, at most MAX_SIZE.

    Returns:
        200 with an image/png body.

    Raises:
        HTTPException 400: Missing FEN or invalid size.
        HTTPException 500: Rendering failed unexpectedly.
    """
    if not fen:
        raise HTTPException(status_code=400, detail="Invalid FEN")

    board_size = parse_size(size)
    reversed_ = rev == "1"

    start = time.monotonic()
    try:
        png = render_diagram(fen, reversed_, board_size, fonts)
    except Exception as exc:
        _log.exception("Render failed for FEN=%s", fen)
        raise HTTPException(status_code=500, detail="Render error") from exc
    elapsed_ms = int((time.monotonic() - start) * 1000)

    _log.info(
        "Diagram size=%d rev=%s bytes=%d time=%dms fen=%s",
        board_size,
        reversed_,
        len(png),
        elapsed_ms,
        fen[:40],
    )

    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": content_disposition(inline == "1")},
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")
