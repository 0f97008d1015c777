"""Stream parser producing a flat key/value mapping.

Key public functions:
- `parse`: parse a text stream or string into a `dict[str, str]`.
- `parse_file`: parse a UTF-8 file from disk.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TextIO

from loguru import logger

from .errors import ConfigSyntaxError
from .lexer import LexerError, tokenize_line


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _split_lines(source: TextIO | str) -> list[str]:
    text = source if isinstance(source, str) else source.read()
    return _LINE_BREAK.split(text)


def parse(path: str, source: TextIO | str) -> dict[str, str]:
    """Parse configuration text into a mapping of keys to values.

    Args:
        path: Label used in error messages, usually the file path.
        source: Open text stream or the configuration text itself.

    Returns:
        Mapping of trimmed keys to trimmed values. A key assigned more than
        once keeps its last value.

    Raises:
        ConfigSyntaxError: On the first malformed line.
    """

    result: dict[str, str] = {}
    for line_no, raw_line in enumerate(_split_lines(source), start=1):
        text = raw_line.strip()
        if not text:
            continue

        try:
            pair = tokenize_line(text)
        except LexerError as exc:
            raise ConfigSyntaxError(path=path, line=line_no, detail=str(exc)) from exc

        if pair.skip:
            continue

        left = pair.left.strip()
        right = pair.right.strip()
        if not left:
            raise ConfigSyntaxError(
                path=path,
                line=line_no,
                detail="left side of assignment empty",
            )
        result[left] = right

    logger.debug("parsed {} entries from {}", len(result), path)
    return result


def parse_file(path: str | Path) -> dict[str, str]:
    """Parse a UTF-8 configuration file."""

    file_path = Path(path)
    with file_path.open("r", encoding="utf-8", newline="") as handle:
        return parse(str(file_path), handle)
