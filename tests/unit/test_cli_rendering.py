"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import json

import pytest
import typer

from confbind.cli_rendering import echo_mapping, echo_mapping_json, exit_with_command_error
from confbind.errors import ConfigSyntaxError, RequiredFieldMissingError


def test_exit_with_command_error_renders_syntax_error_location(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Syntax errors are reported with their path and line."""

    error = ConfigSyntaxError(path="app.conf", line=4, detail="unexpected identifier")

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("parse", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "parse failed at `app.conf` line 4: unexpected identifier" in captured.err


def test_exit_with_command_error_renders_field_error_and_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Field errors name the key and print the hint."""

    error = RequiredFieldMissingError(
        path="app.conf",
        field="port",
        detail="required value port not present",
        hint="Set `port`.",
    )

    with pytest.raises(typer.Exit):
        exit_with_command_error("check", error)

    captured = capsys.readouterr()
    assert "check failed at `app.conf` key `port`: required value port not present" in captured.err
    assert "Hint: Set `port`." in captured.err


def test_exit_with_command_error_renders_non_config_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Other exceptions print their message."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("get", RuntimeError("disk on fire"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "get failed: disk on fire" in captured.err


def test_echo_mapping_sorts_rows(capsys: pytest.CaptureFixture[str]) -> None:
    """Rows are printed in key order."""

    echo_mapping({"b": "2", "a": "1"})

    assert capsys.readouterr().out == "a = 1\nb = 2\n"


def test_echo_mapping_json_prints_object(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output round-trips to the same mapping."""

    echo_mapping_json({"b": "2", "a": "#1"})

    assert json.loads(capsys.readouterr().out) == {"a": "#1", "b": "2"}
