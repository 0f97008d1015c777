"""Command-line interface for confbind.

Responsibilities:
- Inspect and validate `key = value` config files from the shell.
- Check that required environment variables are set before a deployment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_mapping, echo_mapping_json, exit_with_command_error
from .environment import env_name, ensure_set, load_env_file
from .errors import ConfigError
from .parser import parse_file
from .telemetry import configure_logging, log_event

app = typer.Typer(
    name="confbind",
    no_args_is_help=True,
    help="Inspect and validate flat key = value config files.",
)


def _read_failure(path: Path, exc: OSError | UnicodeDecodeError) -> ConfigError:
    """Describe why a file could not be read as UTF-8 text."""

    if isinstance(exc, FileNotFoundError):
        return ConfigError(
            path=str(path),
            detail="config file not found",
            hint="Pass the path of an existing config file.",
        )
    if isinstance(exc, UnicodeDecodeError):
        return ConfigError(
            path=str(path),
            detail=f"file is not valid UTF-8 (byte offset {exc.start})",
            hint="Save the file with UTF-8 encoding.",
        )
    return ConfigError(
        path=str(path),
        detail=f"cannot read file: {exc.strerror or exc}",
        hint="Pass the path of a readable regular file.",
    )


def _parse_config_file(command_name: str, config_path: Path) -> dict[str, str]:
    """Parse a config file and map failures to CLI diagnostics."""

    log_event("DEBUG", "start", command=command_name, path=config_path)
    try:
        values = parse_file(config_path)
    except (OSError, UnicodeDecodeError) as exc:
        exit_with_command_error(command_name, _read_failure(config_path, exc))
    except ConfigError as exc:
        exit_with_command_error(command_name, exc)
    log_event("DEBUG", "complete", command=command_name, entries=len(values))
    return values


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logs on stderr."),
    ] = False,
    env_file: Annotated[
        Path | None,
        typer.Option(
            "--env-file",
            envvar="CONFBIND_ENV_FILE",
            help="`.env` file to load into the environment before running.",
        ),
    ] = None,
) -> None:
    """Configure logging and preload environment variables."""

    configure_logging(verbose=verbose)
    if env_file is None:
        return
    if not env_file.is_file():
        exit_with_command_error(
            "env-file",
            ConfigError(
                path=str(env_file),
                detail="env file not found",
                hint="Pass the path of an existing `.env` file.",
            ),
        )
    try:
        load_env_file(env_file)
    except (OSError, UnicodeDecodeError) as exc:
        exit_with_command_error("env-file", _read_failure(env_file, exc))
    except ConfigError as exc:
        exit_with_command_error("env-file", exc)


@app.command("parse")
def parse_command(
    config_path: Annotated[Path, typer.Argument(help="Config file to parse.")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the parsed mapping as a JSON object."),
    ] = False,
) -> None:
    """Print every key and value of a config file."""

    values = _parse_config_file("parse", config_path)
    if as_json:
        echo_mapping_json(values)
    else:
        echo_mapping(values)


@app.command("check")
def check_command(
    config_path: Annotated[Path, typer.Argument(help="Config file to validate.")],
    require: Annotated[
        list[str] | None,
        typer.Option(
            "--require",
            "-r",
            help="Key that must be set in the file or its upper-case environment variable.",
        ),
    ] = None,
) -> None:
    """Validate syntax and the presence of required keys."""

    values = _parse_config_file("check", config_path)
    for key in require or []:
        if key in values or env_name(key) in os.environ:
            continue
        exit_with_command_error(
            "check",
            ConfigError(
                path=str(config_path),
                detail=f"required value {key} not present",
                hint=f"Add `{key} = ...` to the file or export `{env_name(key)}`.",
            ),
        )
    typer.echo(f"OK: {len(values)} keys")


@app.command("get")
def get_command(
    config_path: Annotated[Path, typer.Argument(help="Config file to read.")],
    key: Annotated[str, typer.Argument(help="Key to print.")],
    no_env: Annotated[
        bool,
        typer.Option("--no-env", help="Ignore environment variable overrides."),
    ] = False,
) -> None:
    """Print the resolved value of one key."""

    values = _parse_config_file("get", config_path)
    variable = env_name(key)
    if not no_env and variable in os.environ:
        typer.echo(os.environ[variable])
        return
    if key not in values:
        exit_with_command_error(
            "get",
            ConfigError(path=str(config_path), detail=f"key {key} not present"),
        )
    typer.echo(values[key])


@app.command("ensure-env")
def ensure_env_command(
    names: Annotated[list[str], typer.Argument(help="Environment variables to require.")],
) -> None:
    """Exit with code 1 unless every named environment variable is set."""

    ensure_set(*names)
    typer.echo("OK")


def main() -> None:
    """Run the confbind CLI."""

    app()


if __name__ == "__main__":
    main()
