"""Deterministic `loguru` event logging for CLI runs.

Responsibilities:
- Install one plain-text `loguru` sink and enable the `confbind` logger.
- Emit `[confbind] level=... event=...` lines with sorted, shell-safe context.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


_SAFE_PUNCTUATION = frozenset("-_.:/")


def _sanitize_context_value(value: object) -> str:
    """Render a context value as a single token without spaces or quotes."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(c if c.isalnum() or c in _SAFE_PUNCTUATION else "_" for c in raw)


def _format_context(context: dict[str, object]) -> str:
    return "".join(
        f" {key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


def configure_logging(sink: TextIO | None = None, verbose: bool = False) -> None:
    """Route `confbind` logs to `sink` (stderr by default).

    With `verbose`, library debug messages are shown as well.
    """

    def _write(message: str) -> None:
        (sink if sink is not None else sys.stderr).write(message)

    logger.remove()
    logger.add(
        _write,
        format="{message}",
        level="DEBUG" if verbose else "INFO",
        colorize=False,
    )
    logger.enable("confbind")


def log_event(level: str, event: str, **context: object) -> None:
    """Emit one structured event line."""

    logger.log(level, f"[confbind] level={level} event={event}{_format_context(context)}")
