"""Shared pytest fixtures for the confbind test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Keep `loguru` sinks and the package enable flag isolated per test."""

    yield
    logger.remove()
    logger.disable("confbind")


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes config text to a file under `tmp_path`."""

    def _write(text: str, name: str = "app.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
