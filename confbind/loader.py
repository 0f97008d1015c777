"""Entry points that parse configuration and bind it onto a record.

Precedence for each field is: environment variable > config file value >
the record's current value (optional fields only).
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, TextIO, TypeVar

from .binder import bind, describe, ensure_bindable
from .environment import apply_environment_overrides
from .parser import parse


T = TypeVar("T")


def read(
    path: str,
    source: TextIO | str,
    target: T,
    env: Mapping[str, str] | None = None,
) -> T:
    """Parse `source` and bind the result onto `target`.

    Args:
        path: Label used in error messages.
        source: Open text stream or the configuration text itself.
        target: Mutable dataclass instance to populate in place.
        env: Environment mapping used for overrides; defaults to `os.environ`.

    Returns:
        `target`, for call chaining.
    """

    values = parse(path, source)
    ensure_bindable(path, target)
    merged = apply_environment_overrides(values, describe(type(target), path=path), env)
    bind(path, merged, target)
    return target


def load(
    path: str | Path,
    target: T,
    env: Mapping[str, str] | None = None,
) -> T:
    """Read a UTF-8 config file from disk into `target`."""

    file_path = Path(path)
    with file_path.open("r", encoding="utf-8", newline="") as handle:
        return read(str(file_path), handle, target, env=env)
