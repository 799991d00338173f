"""Shared pytest fixtures."""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from boxmenu.render import MenuRenderer
from boxmenu.utils.config import Config
from boxmenu.utils.debug import reload_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_boxmenu_dir(temp_dir, monkeypatch):
    """Point BOXMENU_DIR at a fresh directory for every test."""
    boxmenu_dir = temp_dir / ".boxmenu"
    boxmenu_dir.mkdir()
    monkeypatch.setenv("BOXMENU_DIR", str(boxmenu_dir))
    reload_config()
    yield boxmenu_dir
    reload_config()


@pytest.fixture
def plain_console():
    """Console writing uncolored text to a buffer."""
    return Console(
        file=io.StringIO(), force_terminal=False, color_system=None, width=200
    )


@pytest.fixture
def color_console():
    """Console writing ANSI colors to a buffer."""
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="standard",
        no_color=False,
        width=200,
    )


@pytest.fixture
def renderer(plain_console, mock_boxmenu_dir):
    return MenuRenderer(plain_console, config=Config(mock_boxmenu_dir))
