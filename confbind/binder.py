"""Bind parsed key/value mappings onto dataclass records.

Responsibilities:
- Describe a dataclass as an ordered list of config field descriptors.
- Coerce string values to each field's declared kind with width checks.
- Fail on the first missing, malformed or unsupported field.

Key types:
- `FieldKind`: the coercion path chosen for one field.
- `FieldDescriptor`: resolved name, optionality and type of one field.
- `RecordDescriptor`: the ordered descriptors of one record type.
"""

from __future__ import annotations

import dataclasses
import enum
import struct
import types
import typing
from dataclasses import dataclass
from typing import Any, Mapping, Union

from loguru import logger

from .errors import (
    InvalidTargetError,
    RequiredFieldMissingError,
    UnsupportedTypeError,
    ValueOverflowError,
    ValueParseError,
)
from .fieldtypes import DEFAULT_FLOAT_WIDTH, DEFAULT_INT_WIDTH, FloatWidth, IntWidth
from .naming import TAG_KEY, parse_tag
from .parsing import parse_boolean, parse_float, parse_integer


class FieldKind(enum.Enum):
    """Coercion path for one record field."""

    SIGNED_INT = "signed-integer"
    UNSIGNED_INT = "unsigned-integer"
    STRING = "string"
    FLOAT = "float"
    BOOL = "boolean"
    CUSTOM = "custom-parseable"


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Config view of one dataclass field.

    Attributes:
        identifier: Attribute name on the record.
        external_name: Key looked up in the parsed mapping.
        optional: Whether the key may be absent.
        kind: Coercion path for the value.
        field_type: The underlying annotated type, with `None` unions removed.
        width: Integer or float width for numeric kinds, otherwise `None`.
    """

    identifier: str
    external_name: str
    optional: bool
    kind: FieldKind
    field_type: Any
    width: IntWidth | FloatWidth | None = None


RecordDescriptor = tuple[FieldDescriptor, ...]


def _strip_optional(annotation: Any) -> Any:
    """Return `X` for `X | None`, otherwise the annotation unchanged."""

    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _classify(annotation: Any) -> tuple[FieldKind, Any, IntWidth | FloatWidth | None]:
    annotation = _strip_optional(annotation)
    width: IntWidth | FloatWidth | None = None
    if typing.get_origin(annotation) is typing.Annotated:
        base, *extras = typing.get_args(annotation)
        width = next((x for x in extras if isinstance(x, (IntWidth, FloatWidth))), None)
        annotation = _strip_optional(base)

    # bool is checked before int because it subclasses int.
    if annotation is bool:
        return FieldKind.BOOL, bool, None
    if annotation is str:
        return FieldKind.STRING, str, None
    if annotation is int:
        int_width = width if isinstance(width, IntWidth) else DEFAULT_INT_WIDTH
        kind = FieldKind.SIGNED_INT if int_width.signed else FieldKind.UNSIGNED_INT
        return kind, int, int_width
    if annotation is float:
        float_width = width if isinstance(width, FloatWidth) else DEFAULT_FLOAT_WIDTH
        return FieldKind.FLOAT, float, float_width
    return FieldKind.CUSTOM, annotation, None


def _resolve_hints(record_type: type, path: str) -> dict[str, Any]:
    """Resolve field annotations, falling back to already evaluated field types."""

    try:
        return typing.get_type_hints(record_type, include_extras=True)
    except NameError as exc:
        unresolved = exc

    # Postponed annotations naming function-local types cannot be evaluated
    # from the module namespace; fall back to the raw field types.
    hints: dict[str, Any] = {}
    for record_field in dataclasses.fields(record_type):
        if record_field.name.startswith("_"):
            continue
        if isinstance(record_field.type, str):
            raise InvalidTargetError(
                path=path,
                detail=(
                    f"cannot resolve annotation {record_field.type!r} of field "
                    f"`{record_field.name}` on `{record_type.__qualname__}`: {unresolved}"
                ),
                hint="Define the record and its field types at module level.",
            ) from unresolved
        hints[record_field.name] = record_field.type
    return hints


def describe(record_type: type, *, path: str = "<record>") -> RecordDescriptor:
    """Build the ordered field descriptors for a dataclass type.

    Fields whose names start with an underscore are not configurable and are
    skipped. `path` labels the error raised for unresolvable annotations.

    Raises:
        InvalidTargetError: If a field annotation names a type that cannot be
            resolved from the record's module.
    """

    hints = _resolve_hints(record_type, path)
    descriptors: list[FieldDescriptor] = []
    for record_field in dataclasses.fields(record_type):
        if record_field.name.startswith("_"):
            continue
        name, optional = parse_tag(record_field.name, record_field.metadata.get(TAG_KEY))
        kind, field_type, width = _classify(hints.get(record_field.name, record_field.type))
        descriptors.append(
            FieldDescriptor(
                identifier=record_field.name,
                external_name=name,
                optional=optional,
                kind=kind,
                field_type=field_type,
                width=width,
            )
        )
    return tuple(descriptors)


def ensure_bindable(path: str, target: object) -> None:
    """Reject targets that are not mutable dataclass instances.

    Raises:
        InvalidTargetError: If `target` is a class, not a dataclass, or frozen.
    """

    if isinstance(target, type) or not dataclasses.is_dataclass(target):
        raise InvalidTargetError(
            path=path,
            detail="bind target must be a dataclass instance",
            hint="Pass an instance such as `Settings()`, not the class itself.",
        )
    params = getattr(type(target), "__dataclass_params__", None)
    if params is not None and params.frozen:
        raise InvalidTargetError(
            path=path,
            detail=f"bind target `{type(target).__name__}` is frozen",
            hint="Declare the config dataclass without `frozen=True`.",
        )


def _type_name(field_type: Any) -> str:
    return field_type.__qualname__ if isinstance(field_type, type) else repr(field_type)


def _coerce_integer(path: str, descriptor: FieldDescriptor, value: str) -> int:
    width = typing.cast(IntWidth, descriptor.width)
    try:
        parsed = parse_integer(value, signed=width.signed)
    except ValueError as exc:
        raise ValueParseError(
            path=path, field=descriptor.external_name, detail=str(exc)
        ) from exc
    if width.overflows(parsed):
        raise ValueOverflowError(
            path=path,
            field=descriptor.external_name,
            detail=f"value '{parsed}' would overflow type",
        )
    return parsed


def _coerce_float(path: str, descriptor: FieldDescriptor, value: str) -> float:
    width = typing.cast(FloatWidth, descriptor.width)
    try:
        parsed = parse_float(value)
    except ValueError as exc:
        raise ValueParseError(
            path=path, field=descriptor.external_name, detail=str(exc)
        ) from exc
    if width.overflows(parsed):
        raise ValueOverflowError(
            path=path,
            field=descriptor.external_name,
            detail=f"value '{parsed}' would overflow type",
        )
    if width.bits == 32:
        parsed = struct.unpack("f", struct.pack("f", parsed))[0]
    return parsed


def _coerce_custom(path: str, descriptor: FieldDescriptor, value: str, current: Any) -> Any:
    field_type = descriptor.field_type
    if not isinstance(field_type, type) or not callable(
        getattr(field_type, "parse_config_value", None)
    ):
        raise UnsupportedTypeError(
            path=path,
            field=descriptor.external_name,
            detail=(
                f"attempted to parse unsupported type '{_type_name(field_type)}' "
                "(hint: it doesn't implement ValueParser)"
            ),
        )

    try:
        instance = current if isinstance(current, field_type) else field_type()
        instance.parse_config_value(value)
    except Exception as exc:
        raise ValueParseError(
            path=path, field=descriptor.external_name, detail=str(exc)
        ) from exc
    return instance


def coerce(path: str, descriptor: FieldDescriptor, value: str, current: Any = None) -> Any:
    """Convert one raw string to the value stored on the record."""

    kind = descriptor.kind
    if kind is FieldKind.STRING:
        return value
    if kind in (FieldKind.SIGNED_INT, FieldKind.UNSIGNED_INT):
        return _coerce_integer(path, descriptor, value)
    if kind is FieldKind.FLOAT:
        return _coerce_float(path, descriptor, value)
    if kind is FieldKind.BOOL:
        try:
            return parse_boolean(value)
        except ValueError as exc:
            raise ValueParseError(
                path=path, field=descriptor.external_name, detail=str(exc)
            ) from exc
    return _coerce_custom(path, descriptor, value, current)


def bind(path: str, values: Mapping[str, str], target: object) -> None:
    """Populate `target` fields from `values`.

    Optional fields missing from `values` keep their current value. The first
    failure aborts the bind; fields processed before it stay written.

    Raises:
        InvalidTargetError: If `target` is not a mutable dataclass instance.
        RequiredFieldMissingError: If a required key is absent.
        ValueParseError: If a value is malformed for its field.
        ValueOverflowError: If a number exceeds the field's width.
        UnsupportedTypeError: If a field type cannot be parsed from text.
    """

    ensure_bindable(path, target)
    for descriptor in describe(type(target), path=path):
        if descriptor.external_name not in values:
            if descriptor.optional:
                continue
            raise RequiredFieldMissingError(
                path=path,
                field=descriptor.external_name,
                detail=f"required value {descriptor.external_name} not present",
            )

        current = getattr(target, descriptor.identifier, None)
        value = coerce(path, descriptor, values[descriptor.external_name], current)
        setattr(target, descriptor.identifier, value)
        logger.debug(
            "bound {} from key {} ({})",
            descriptor.identifier,
            descriptor.external_name,
            descriptor.kind.value,
        )
