"""Unit tests for stream parsing into key/value mappings."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from confbind.errors import ConfigSyntaxError
from confbind.parser import parse, parse_file


def test_parse_empty_input_returns_empty_mapping() -> None:
    """Blank input should parse into an empty mapping."""

    assert parse("<input>", io.StringIO("\n\t\n")) == {}


def test_parse_comment_only_input_returns_empty_mapping() -> None:
    """Comment lines, indented or not, contribute nothing."""

    assert parse("<input>", "\n\t# comment\n# another\n") == {}


def test_parse_trims_keys_and_values() -> None:
    """Both sides of an assignment are whitespace-trimmed."""

    values = parse("<input>", "\n\tcool   =   beans  \n")

    assert values == {"cool": "beans"}


def test_parse_drops_trailing_comment() -> None:
    """A trailing comment does not change the parsed value."""

    assert parse("<input>", "cool = beans # comment\n") == {"cool": "beans"}


def test_parse_quoted_value_keeps_comment_character() -> None:
    """Only quoted values keep a `#`."""

    values = parse("<input>", "quoted = 'a#b'\nbare = a#b\n")

    assert values == {"quoted": "a#b", "bare": "a"}


def test_parse_quoted_value_is_trimmed_after_unquoting() -> None:
    """Quoted whitespace is trimmed like any other value."""

    assert parse("<input>", 'padded = "  spaced  "\n') == {"padded": "spaced"}


def test_parse_last_duplicate_key_wins() -> None:
    """A key assigned twice keeps the later value."""

    assert parse("<input>", "mode = a\nmode = b\n") == {"mode": "b"}


@pytest.mark.parametrize("text", ["a = 1\r\nb = 2\r\n", "a = 1\rb = 2", "a = 1\nb = 2"])
def test_parse_accepts_common_line_endings(text: str) -> None:
    """LF, CRLF and CR line endings all separate lines."""

    assert parse("<input>", text) == {"a": "1", "b": "2"}


def test_parse_reports_path_and_line_for_missing_assignment() -> None:
    """A key with no `=` fails with the path and 1-based line number."""

    with pytest.raises(ConfigSyntaxError) as exc_info:
        parse("app.conf", "ok = yes\n\njustakey\n")

    error = exc_info.value
    assert error.path == "app.conf"
    assert error.line == 3
    assert error.detail == "unexpected identifier"
    assert str(error) == "error:app.conf:3: unexpected identifier"


def test_parse_rejects_comment_character_inside_key() -> None:
    """A `#` before `=` is only valid at the start of a line."""

    with pytest.raises(ConfigSyntaxError, match="unexpected identifier"):
        parse("<input>", "ke#y = value\n")


def test_parse_rejects_empty_left_side() -> None:
    """An assignment whose key trims to nothing is a syntax error."""

    with pytest.raises(ConfigSyntaxError, match=r"error:<input>:2: left side of assignment empty"):
        parse("<input>", "a = 1\n  = value\n")


def test_parse_file_reads_utf8_file(write_config: Callable[..., Path]) -> None:
    """File parsing should decode UTF-8 and label errors with the file path."""

    path = write_config("greeting = 'ahoj světe'\n")

    assert parse_file(path) == {"greeting": "ahoj světe"}


def test_parse_file_labels_errors_with_file_path(write_config: Callable[..., Path]) -> None:
    """Syntax errors from files carry the file path."""

    path = write_config("broken\n")

    with pytest.raises(ConfigSyntaxError) as exc_info:
        parse_file(path)

    assert exc_info.value.path == str(path)


def test_parse_file_missing_file_raises(tmp_path: Path) -> None:
    """A missing file is reported as `FileNotFoundError`."""

    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "missing.conf")
