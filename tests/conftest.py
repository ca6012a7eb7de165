"""
Global pytest configuration and fixtures for Console Game Hub testing.
"""
import io
import logging
import os
import random
import tempfile
from pathlib import Path
from typing import Iterable

import pytest

from src.core.console import Console
from tests.utils import ScriptedInput


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_console():
    """Factory for a console fed by scripted lines, with captured output and no delays."""
    def factory(lines: Iterable[str] = (), **kwargs) -> Console:
        options = dict(
            color=False,
            clear_screen=False,
            delay_scale=0,
            input_func=ScriptedInput(lines),
            output=io.StringIO(),
        )
        options.update(kwargs)
        return Console(**options)
    return factory


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way it was after a test initializes logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_gamehub_env(monkeypatch):
    """Keep GAMEHUB_* variables from the host environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("GAMEHUB_"):
            monkeypatch.delenv(name)
