"""Environment variable overrides and `.env` helpers.

Every config key can be overridden by an environment variable named after the
upper-cased key: a field read from `port` is overridden by `PORT`.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, MutableMapping

from loguru import logger

from .binder import RecordDescriptor
from .parser import parse_file


def env_name(external_name: str) -> str:
    """Return the environment variable that overrides `external_name`."""

    return external_name.upper()


def apply_environment_overrides(
    values: Mapping[str, str],
    descriptors: RecordDescriptor,
    env: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Overlay environment values onto parsed file values.

    Returns:
        A new mapping where every described field present in the environment
        takes the environment value. Keys not described by a field are kept
        as parsed.
    """

    env_map: Mapping[str, str] = os.environ if env is None else env
    merged = dict(values)
    for descriptor in descriptors:
        variable = env_name(descriptor.external_name)
        if variable in env_map:
            merged[descriptor.external_name] = env_map[variable]
            logger.debug("environment override {} -> {}", variable, descriptor.external_name)
    return merged


def ensure_set(*names: str, env: Mapping[str, str] | None = None) -> None:
    """Exit the process unless every named environment variable is set.

    The message is logged as critical and also carried by the `SystemExit`,
    so the interpreter prints it to stderr even when logging is disabled.

    Raises:
        SystemExit: Naming the first missing variable; the process exits with
            status 1.
    """

    env_map: Mapping[str, str] = os.environ if env is None else env
    for name in names:
        if name not in env_map:
            message = f"'{name}' not set in .env or environment"
            logger.critical(message)
            raise SystemExit(message)


def load_env_file(
    dotenv_path: str | Path = ".env",
    environ: MutableMapping[str, str] | None = None,
) -> dict[str, str]:
    """Populate the environment from a `.env` file written in config syntax.

    Existing variables always win, so shell exports are never replaced by file
    entries. A missing file is not an error.

    Returns:
        The entries that were actually added.
    """

    target: MutableMapping[str, str] = os.environ if environ is None else environ
    path = Path(dotenv_path)
    if not path.exists():
        return {}

    applied: dict[str, str] = {}
    for key, value in parse_file(path).items():
        if key in target:
            continue
        target[key] = value
        applied[key] = value
    logger.debug("loaded {} variables from {}", len(applied), path)
    return applied
