"""Domain exceptions for parsing and binding diagnostics.

Every error carries the source `path` label so the caller can locate the
failure; syntax errors add the 1-based line number and field errors add the
external key name.
"""

from __future__ import annotations


class ConfigError(RuntimeError):
    """Base class for all configuration failures."""

    def __init__(
        self,
        *,
        path: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a path-scoped configuration error."""

        super().__init__(self._format(path, detail))
        self.path = path
        self.detail = detail
        self.hint = hint

    def _format(self, path: str, detail: str) -> str:
        return f"error parsing config '{path}': {detail}"


class ConfigSyntaxError(ConfigError):
    """Raised when one line of the input is malformed."""

    def __init__(
        self,
        *,
        path: str,
        line: int,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a syntax error pointing at one source line."""

        self.line = line
        super().__init__(path=path, detail=detail, hint=hint)

    def _format(self, path: str, detail: str) -> str:
        return f"error:{path}:{self.line}: {detail}"


class InvalidTargetError(ConfigError):
    """Raised when the bind target is not a mutable dataclass instance."""


class FieldError(ConfigError):
    """Raised when one record field cannot be populated."""

    def __init__(
        self,
        *,
        path: str,
        field: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize an error scoped to one external field name."""

        super().__init__(path=path, detail=detail, hint=hint)
        self.field = field


class RequiredFieldMissingError(FieldError):
    """Raised when a non-optional field has no value in any source."""


class ValueParseError(FieldError):
    """Raised when a value cannot be coerced to its field's type."""


class ValueOverflowError(FieldError):
    """Raised when a numeric value does not fit the field's declared width."""


class UnsupportedTypeError(FieldError):
    """Raised when a field type has neither a built-in kind nor a value parser."""
