"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures shared by the renderer, service and HTTP tests.
"""

from unittest.mock import MagicMock

import pytest
from PIL import ImageDraw

from diagram.fonts import FontSet


@pytest.fixture
def fonts() -> FontSet:
    """Pillow's bundled face for both families, so no font files are needed."""
    return FontSet.builtin()


@pytest.fixture
def draw() -> MagicMock:
    """Stand-in drawing surface that records every rectangle() and text() call."""
    return MagicMock(spec=ImageDraw.ImageDraw)
