"""Recursive validation of untyped values against schemas."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, NoReturn

from .errors import IndexSegment, ValidationError
from .model import (
    MISSING,
    STRING,
    UNDEFINED,
    ArraySchema,
    Primitive,
    PrimitiveKind,
    RecordSchema,
    Schema,
    UnionMember,
    UnionSchema,
)

_NUMBER_TYPES = (int, float, Decimal)
_SEQUENCE_TYPES = (list, tuple)


def type_name(value: Any) -> str:
    """Name the dynamic type of a parser-produced value."""
    if value is MISSING:
        return PrimitiveKind.UNDEFINED.value
    if value is None:
        return PrimitiveKind.NULL.value
    if isinstance(value, str):
        return PrimitiveKind.STRING.value
    if isinstance(value, bool):
        return PrimitiveKind.BOOLEAN.value
    if isinstance(value, _NUMBER_TYPES):
        return PrimitiveKind.NUMBER.value
    if isinstance(value, _SEQUENCE_TYPES):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def validate(schema: Schema, value: Any) -> None:
    """Validate ``value`` against ``schema``.

    Raises ``ValidationError`` describing the first mismatch. Once this returns,
    the value has the shape the schema describes.
    """
    _validate(schema, value, ())


def check(schema: Schema, value: Any) -> ValidationError | None:
    """Return the first mismatch of ``value`` against ``schema``, or ``None``."""
    try:
        _validate(schema, value, ())
    except ValidationError as exc:
        return exc
    return None


def is_valid(schema: Schema, value: Any) -> bool:
    return check(schema, value) is None


def _fail(path: tuple[str, ...], message: str) -> NoReturn:
    raise ValidationError(path, message)


def _validate(schema: Schema, value: Any, path: tuple[str, ...]) -> None:
    if value is MISSING and schema != UNDEFINED:
        _fail(path, "missing")

    if isinstance(schema, Primitive):
        _validate_primitive(schema.kind, value, path)
        return

    if isinstance(schema, ArraySchema):
        if not isinstance(value, _SEQUENCE_TYPES):
            _fail(path, f"expected an array, got {type_name(value)}")
        for index, item in enumerate(value):
            _validate(schema.element, item, path + (IndexSegment(index),))
        return

    if not isinstance(schema, (UnionSchema, UnionMember, RecordSchema)):
        raise TypeError(f"unsupported schema type: {type(schema).__name__}")

    if not isinstance(value, Mapping):
        _fail(path, f"expected an object, got {type_name(value)}")

    if isinstance(schema, UnionSchema):
        key_path = path + (schema.discriminator_key,)
        discriminator = value.get(schema.discriminator_key, MISSING)
        _validate(STRING, discriminator, key_path)
        member = schema.members.get(discriminator)
        if member is None:
            expected = " | ".join(schema.members)
            _fail(key_path, f"expected one of {expected}, got {discriminator}")
        _validate(member, value, path)
        return

    if isinstance(schema, UnionMember):
        key_path = path + (schema.discriminator_key,)
        discriminator = value.get(schema.discriminator_key, MISSING)
        _validate(STRING, discriminator, key_path)
        if discriminator != schema.discriminator_value:
            _fail(key_path, f"expected {schema.discriminator_value}, got {discriminator}")
        _validate(schema.schema, value, path)
        return

    for name, field_schema in schema.fields.items():
        _validate(field_schema, value.get(name, MISSING), path + (name,))


def _validate_primitive(kind: PrimitiveKind, value: Any, path: tuple[str, ...]) -> None:
    if kind is PrimitiveKind.NULL:
        if value is not None:
            _fail(path, f"expected a null, got {type_name(value)}")
        return
    actual = type_name(value)
    if actual != kind.value:
        _fail(path, f"expected a {kind.value}, got {actual}")
