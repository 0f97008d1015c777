"""Field naming conventions and `config` tag handling.

A record field is looked up under the snake_case form of its identifier unless
its `config` tag renames it. The tag is a comma-separated list where the token
`optional` marks the field optional and any other token is the external name:

    port: int = setting("listen_port,optional", default=8080)
"""

from __future__ import annotations

import dataclasses
from typing import Any


TAG_KEY = "config"
OPTIONAL_MARKER = "optional"


def to_snake_case(identifier: str) -> str:
    """Convert `CamelCase` identifiers to `snake_case`.

    The first character is only lowercased. Every later uppercase character is
    prefixed with an underscore. Identifiers already in snake_case are returned
    unchanged.
    """

    parts: list[str] = []
    for index, char in enumerate(identifier):
        if char.isupper():
            if index > 0:
                parts.append("_")
            parts.append(char.lower())
        else:
            parts.append(char)
    return "".join(parts)


def parse_tag(identifier: str, tag: str | None) -> tuple[str, bool]:
    """Resolve the external name and optional flag for one field.

    Returns:
        `(external_name, optional)`.
    """

    name = to_snake_case(identifier)
    optional = False
    if tag:
        for token in tag.split(","):
            if token == OPTIONAL_MARKER:
                optional = True
            else:
                name = token
    return name, optional


def setting(tag: str, **field_kwargs: Any) -> Any:
    """Declare a dataclass field carrying a `config` tag.

    Extra keyword arguments are passed to `dataclasses.field`.
    """

    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(metadata=metadata, **field_kwargs)
