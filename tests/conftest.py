"""Shared pytest fixtures for mailkit test suite."""

from __future__ import annotations

# Disable Rich colors before any imports, Rich checks these at import time
import os

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from mailkit.config import clear_config

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def reset_global_config() -> Iterator[None]:
    """Start and end every test without a loaded global configuration."""
    clear_config()
    yield
    clear_config()


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Build a helper writing files under the temporary directory."""

    def _make(name: str, content: bytes = b"payload") -> Path:
        """Write *content* to ``tmp_path / name`` and return the path."""
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _make
