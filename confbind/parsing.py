"""Literal parsing helpers for integer, float and boolean config values."""

from __future__ import annotations

import math
import re


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_LEGACY_OCTAL = re.compile(r"0[0-7_]+")


def parse_boolean(value: str) -> bool:
    """Parse one of the canonical boolean spellings.

    Raises:
        ValueError: If the token is not `1`/`t`/`true` or `0`/`f`/`false`
            (in the accepted capitalizations).
    """

    if value in _TRUE_BOOLEAN_TOKENS:
        return True
    if value in _FALSE_BOOLEAN_TOKENS:
        return False
    raise ValueError(f"invalid boolean literal {value!r}")


def parse_integer(value: str, *, signed: bool = True) -> int:
    """Parse an integer literal honoring base prefixes.

    Accepts `0x`/`0o`/`0b` prefixes, a bare leading `0` for octal, and single
    `_` digit separators. Unsigned parsing rejects any sign. Surrounding
    whitespace is not trimmed.

    Raises:
        ValueError: If the literal is malformed.
    """

    if not value.isascii() or value != value.strip() or "__" in value:
        raise ValueError(f"invalid integer literal {value!r}")

    sign = ""
    digits = value
    if digits[:1] in {"+", "-"}:
        if not signed:
            raise ValueError(f"invalid unsigned integer literal {value!r}")
        sign, digits = digits[0], digits[1:]

    try:
        if _LEGACY_OCTAL.fullmatch(digits) and digits.strip("0_"):
            return int(sign + digits[1:].lstrip("_"), 8)
        return int(sign + digits, 0)
    except ValueError as exc:
        raise ValueError(f"invalid integer literal {value!r}") from exc


def parse_float(value: str) -> float:
    """Parse a floating point literal.

    Raises:
        ValueError: If the literal is malformed, or too large for a 64-bit
            float without being spelled as an infinity. Surrounding
            whitespace counts as malformed.
    """

    if not value.isascii() or value != value.strip():
        raise ValueError(f"invalid float literal {value!r}")
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"invalid float literal {value!r}") from exc
    if math.isinf(parsed) and "inf" not in value.lower():
        raise ValueError(f"float literal {value!r} out of range")
    return parsed
