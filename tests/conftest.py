"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path
from typing import Callable

from charsim.logger import reset_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    """Each test gets its own global logger bound to the current stderr."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep a developer's .env and CHARSIM_* variables out of the tests."""
    monkeypatch.delenv("CHARSIM_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHARSIM_LOG_DIR", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_text(tmp_path) -> Callable[[str, str], Path]:
    """Write text to a file under tmp_path without newline translation."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path
    return _write


@pytest.fixture
def sample_pair(write_text):
    """The "aab" / "abb" pair, whose similarity is exactly 4/5."""
    return write_text("a.txt", "aab"), write_text("b.txt", "abb")
