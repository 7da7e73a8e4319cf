"""Schema shapes for plain, parser-produced values.

A schema is one of five frozen variants: ``Primitive``, ``ArraySchema``,
``RecordSchema``, ``UnionSchema`` and ``UnionMember``. Schemas are written by
hand once and shared read-only afterwards.

Example for a discriminated union of two record types::

    foo = UnionMember("kind", "foo", RecordSchema({"a": NUMBER}))
    bar = UnionMember("kind", "bar", RecordSchema({"b": STRING, "c": BOOLEAN}))
    foo_or_bar = UnionSchema("kind", {"foo": foo, "bar": bar})
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Union

from .errors import SchemaDefinitionError


class _Missing:
    """Marker type for a value that is absent, as opposed to an explicit ``None``."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class PrimitiveKind(str, Enum):
    """Leaf kinds a ``Primitive`` schema can require."""

    UNDEFINED = "undefined"
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Primitive:
    """Leaf schema matched by the dynamic type of a value."""

    kind: PrimitiveKind

    def __post_init__(self) -> None:
        try:
            kind = PrimitiveKind(self.kind)
        except ValueError as exc:
            allowed = ", ".join(k.value for k in PrimitiveKind)
            raise SchemaDefinitionError(
                f"unknown primitive kind {self.kind!r}, expected one of: {allowed}"
            ) from exc
        object.__setattr__(self, "kind", kind)


@dataclass(frozen=True)
class ArraySchema:
    """Schema of a sequence whose every element conforms to ``element``."""

    element: "Schema"

    def __post_init__(self) -> None:
        _require_schema(self.element, "array element")


@dataclass(frozen=True, eq=False)
class RecordSchema:
    """Schema of a mapping with a mandatory entry per declared field."""

    fields: Mapping[str, "Schema"]

    def __post_init__(self) -> None:
        fields = dict(self.fields)
        for name, schema in fields.items():
            if not isinstance(name, str):
                raise SchemaDefinitionError(f"record field names must be strings, got {name!r}")
            _require_schema(schema, f"field {name!r}")
        object.__setattr__(self, "fields", MappingProxyType(fields))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordSchema):
            return NotImplemented
        return dict(self.fields) == dict(other.fields)

    def __hash__(self) -> int:
        return hash(tuple(self.fields.items()))


@dataclass(frozen=True)
class UnionMember:
    """Schema of one variant of a discriminated union of records.

    The value must carry ``discriminator_key`` set to exactly
    ``discriminator_value``; its other fields are checked against ``schema``
    as siblings of the discriminator. A member also works as a stand-alone
    schema.
    """

    discriminator_key: str
    discriminator_value: str
    schema: "Schema"

    def __post_init__(self) -> None:
        _require_key(self.discriminator_key)
        if not isinstance(self.discriminator_value, str) or not self.discriminator_value:
            raise SchemaDefinitionError(
                f"discriminator value must be a non-empty string, got {self.discriminator_value!r}"
            )
        _require_schema(self.schema, f"member {self.discriminator_value!r}")
        if isinstance(self.schema, (Primitive, ArraySchema)):
            raise SchemaDefinitionError(
                f"member {self.discriminator_value!r} must describe a record, "
                f"got {type(self.schema).__name__}"
            )


@dataclass(frozen=True, eq=False)
class UnionSchema:
    """Schema of records discriminated by the string field ``discriminator_key``.

    ``members`` maps each discriminator value to the ``UnionMember`` for that
    variant. Its order is the order unknown values are reported in.
    """

    discriminator_key: str
    members: Mapping[str, UnionMember]

    def __post_init__(self) -> None:
        _require_key(self.discriminator_key)
        members = dict(self.members)
        if not members:
            raise SchemaDefinitionError("union must declare at least one member")
        for value, member in members.items():
            if not isinstance(member, UnionMember):
                raise SchemaDefinitionError(
                    f"union member {value!r} must be a UnionMember, got {type(member).__name__}"
                )
            if member.discriminator_key != self.discriminator_key:
                raise SchemaDefinitionError(
                    f"union member {value!r} is keyed by {member.discriminator_key!r}, "
                    f"expected {self.discriminator_key!r}"
                )
            if member.discriminator_value != value:
                raise SchemaDefinitionError(
                    f"union member registered as {value!r} declares "
                    f"discriminator value {member.discriminator_value!r}"
                )
        object.__setattr__(self, "members", MappingProxyType(members))

    @classmethod
    def from_members(cls, discriminator_key: str, *members: UnionMember) -> "UnionSchema":
        """Build a union keyed by each member's own discriminator value."""
        by_value: dict[str, UnionMember] = {}
        for member in members:
            if member.discriminator_value in by_value:
                raise SchemaDefinitionError(
                    f"duplicate union member {member.discriminator_value!r}"
                )
            by_value[member.discriminator_value] = member
        return cls(discriminator_key, by_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnionSchema):
            return NotImplemented
        return (
            self.discriminator_key == other.discriminator_key
            and dict(self.members) == dict(other.members)
        )

    def __hash__(self) -> int:
        return hash((self.discriminator_key, tuple(self.members.items())))


Schema = Union[Primitive, ArraySchema, RecordSchema, UnionSchema, UnionMember]
SCHEMA_TYPES = (Primitive, ArraySchema, RecordSchema, UnionSchema, UnionMember)

UNDEFINED = Primitive(PrimitiveKind.UNDEFINED)
NULL = Primitive(PrimitiveKind.NULL)
STRING = Primitive(PrimitiveKind.STRING)
NUMBER = Primitive(PrimitiveKind.NUMBER)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)


def _require_schema(value: Any, label: str) -> None:
    if not isinstance(value, SCHEMA_TYPES):
        raise SchemaDefinitionError(f"{label}: expected a schema, got {type(value).__name__}")


def _require_key(key: Any) -> None:
    if not isinstance(key, str) or not key:
        raise SchemaDefinitionError(f"discriminator key must be a non-empty string, got {key!r}")
