"""CLI output and error rendering helpers.

This module centralizes user-facing presentation of parsed mappings and of
command failures.
"""

from __future__ import annotations

import json
from typing import Mapping, NoReturn

import typer

from .errors import ConfigError, ConfigSyntaxError, FieldError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConfigSyntaxError):
        location = f"`{exc.path}` line {exc.line}"
    elif isinstance(exc, FieldError):
        location = f"`{exc.path}` key `{exc.field}`"
    elif isinstance(exc, ConfigError):
        location = f"`{exc.path}`"
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    typer.secho(
        f"{command_name} failed at {location}: {exc.detail}",
        fg=typer.colors.RED,
        err=True,
    )
    if exc.hint:
        typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_mapping(values: Mapping[str, str]) -> None:
    """Print `key = value` rows sorted by key."""

    for key in sorted(values):
        typer.echo(f"{key} = {values[key]}")


def echo_mapping_json(values: Mapping[str, str]) -> None:
    """Print the mapping as one JSON object with sorted keys."""

    typer.echo(json.dumps(dict(values), indent=2, sort_keys=True, ensure_ascii=False))
