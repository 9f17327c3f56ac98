"""HTTP tests for web/app.py"""

import io
import re
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from PIL import Image, ImageFont

from diagram.constants import BOARD_FONT_FILE, CHESS_FONT_FILE
from diagram.fonts import FontLoadError, FontSet
from web.app import app, get_fonts
from web.config import settings

KINGS_FEN = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Client without the startup font load; fonts come from Pillow's bundled face."""
    app.dependency_overrides[get_fonts] = FontSet.builtin
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _png_size(content: bytes) -> tuple[int, int]:
    image = Image.open(io.BytesIO(content))
    assert image.format == "PNG"
    return image.size


def test_default_diagram(client: TestClient) -> None:
    response = client.get("/diagram", params={"fen": KINGS_FEN})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert int(response.headers["content-length"]) == len(response.content)
    assert _png_size(response.content) == (800, 800)
    assert re.fullmatch(r'attachment; filename="\d+\.png"', response.headers["content-disposition"])


def test_inline_and_reversed(client: TestClient) -> None:
    response = client.get("/diagram", params={"fen": KINGS_FEN, "inline": "1", "rev": "1", "size": "240"})

    assert response.status_code == 200
    assert response.headers["content-disposition"] == "inline"
    assert _png_size(response.content) == (240, 240)


def test_only_literal_one_means_inline(client: TestClient) -> None:
    response = client.get("/diagram", params={"fen": KINGS_FEN, "inline": "true", "size": "64"})
    assert response.headers["content-disposition"].startswith("attachment")


def test_orientation_changes_the_image(client: TestClient) -> None:
    normal = client.get("/diagram", params={"fen": KINGS_FEN, "size": "160"})
    flipped = client.get("/diagram", params={"fen": KINGS_FEN, "size": "160", "rev": "1"})
    assert normal.content != flipped.content


@pytest.mark.parametrize("params", [{}, {"fen": ""}, {"size": "100"}])
def test_missing_fen(client: TestClient, params: dict) -> None:
    response = client.get("/diagram", params=params)

    assert response.status_code == 400
    assert response.text == "Invalid FEN"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.parametrize("size", ["abc", "-1", "0", "2001", "12.5", "", "1_000", "٨٠", "+-5"])
def test_bad_size(client: TestClient, size: str) -> None:
    response = client.get("/diagram", params={"fen": KINGS_FEN, "size": size})

    assert response.status_code == 400
    assert response.text == "Size should be a positive integer"


def test_max_size_is_accepted(client: TestClient) -> None:
    response = client.get("/diagram", params={"fen": KINGS_FEN, "size": str(settings.MAX_SIZE)})
    assert response.status_code == 200


def test_garbage_fen_is_not_an_error(client: TestClient) -> None:
    response = client.get("/diagram", params={"fen": "garbage!!", "size": "80"})
    assert response.status_code == 200


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_startup_fails_without_fonts(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "FONT_DIR", tmp_path)
    with pytest.raises(FontLoadError):
        with TestClient(app):
            pass


def test_startup_loads_fonts(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    font_bytes = ImageFont.load_default(12).font_bytes
    (tmp_path / BOARD_FONT_FILE).write_bytes(font_bytes)
    (tmp_path / CHESS_FONT_FILE).write_bytes(font_bytes)
    monkeypatch.setattr(settings, "FONT_DIR", tmp_path)

    with TestClient(app) as client:
        assert app.state.fonts.board.data == font_bytes
        response = client.get("/diagram", params={"fen": KINGS_FEN, "size": "120"})

    assert response.status_code == 200
    assert _png_size(response.content) == (120, 120)
