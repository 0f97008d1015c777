"""Top-level package for confbind.

confbind reads a flat `key = value` configuration format and binds it onto a
dataclass instance, letting upper-cased environment variables override file
values. `#` starts a comment; quote a value with `'` or `"` to keep a `#` in it.

The main entry points are `parse` (text to mapping) and `read`/`load`
(text or file to populated dataclass).
"""

from loguru import logger

from .binder import FieldDescriptor, FieldKind, bind, describe
from .environment import apply_environment_overrides, ensure_set, load_env_file
from .errors import (
    ConfigError,
    ConfigSyntaxError,
    FieldError,
    InvalidTargetError,
    RequiredFieldMissingError,
    UnsupportedTypeError,
    ValueOverflowError,
    ValueParseError,
)
from .loader import load, read
from .naming import setting, to_snake_case
from .parser import parse, parse_file
from .fieldtypes import ValueParser

logger.disable("confbind")

__all__ = [
    "ConfigError",
    "ConfigSyntaxError",
    "FieldDescriptor",
    "FieldError",
    "FieldKind",
    "InvalidTargetError",
    "RequiredFieldMissingError",
    "UnsupportedTypeError",
    "ValueOverflowError",
    "ValueParseError",
    "ValueParser",
    "__version__",
    "apply_environment_overrides",
    "bind",
    "describe",
    "ensure_set",
    "load",
    "load_env_file",
    "parse",
    "parse_file",
    "read",
    "setting",
    "to_snake_case",
]

__version__ = "0.1.0"
