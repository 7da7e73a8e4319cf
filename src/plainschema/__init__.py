"""Shape validation for plain values produced by JSON and YAML parsers."""

from .errors import IndexSegment, SchemaDefinitionError, ValidationError
from .model import (
    BOOLEAN,
    MISSING,
    NULL,
    NUMBER,
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
from .validator import check, is_valid, type_name, validate

__all__ = [
    "ArraySchema",
    "BOOLEAN",
    "IndexSegment",
    "MISSING",
    "NULL",
    "NUMBER",
    "Primitive",
    "PrimitiveKind",
    "RecordSchema",
    "STRING",
    "Schema",
    "SchemaDefinitionError",
    "UNDEFINED",
    "UnionMember",
    "UnionSchema",
    "ValidationError",
    "check",
    "is_valid",
    "type_name",
    "validate",
]
