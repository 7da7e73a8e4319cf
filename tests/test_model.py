"""Unit tests for schema construction."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
import unittest

from plainschema import (
    MISSING,
    NUMBER,
    STRING,
    ArraySchema,
    Primitive,
    PrimitiveKind,
    RecordSchema,
    SchemaDefinitionError,
    UnionMember,
    UnionSchema,
)


class PrimitiveTests(unittest.TestCase):
    def test_plain_string_kind_is_normalized(self) -> None:
        schema = Primitive("number")
        self.assertIs(schema.kind, PrimitiveKind.NUMBER)
        self.assertEqual(schema, NUMBER)

    def test_unknown_kind_is_rejected(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "unknown primitive kind 'float'"):
            Primitive("float")

    def test_schemas_are_frozen(self) -> None:
        with self.assertRaises(FrozenInstanceError):
            STRING.kind = PrimitiveKind.NUMBER  # type: ignore[misc]


class ContainerTests(unittest.TestCase):
    def test_array_element_must_be_a_schema(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "array element: expected a schema"):
            ArraySchema("string")  # type: ignore[arg-type]

    def test_record_fields_are_copied_and_read_only(self) -> None:
        source = {"name": STRING}
        schema = RecordSchema(source)
        source["age"] = NUMBER

        self.assertEqual(list(schema.fields), ["name"])
        with self.assertRaises(TypeError):
            schema.fields["age"] = NUMBER  # type: ignore[index]

    def test_record_field_values_must_be_schemas(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "field 'name': expected a schema"):
            RecordSchema({"name": "string"})  # type: ignore[dict-item]

    def test_record_field_names_must_be_strings(self) -> None:
        with self.assertRaises(SchemaDefinitionError):
            RecordSchema({1: STRING})  # type: ignore[dict-item]

    def test_equal_records_hash_equally(self) -> None:
        first = ArraySchema(RecordSchema({"a": STRING, "b": NUMBER}))
        second = ArraySchema(RecordSchema({"a": STRING, "b": NUMBER}))
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))


class UnionConstructionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.foo = UnionMember("kind", "foo", RecordSchema({"a": NUMBER}))
        self.bar = UnionMember("kind", "bar", RecordSchema({"b": STRING}))

    def test_member_requires_non_empty_value(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "non-empty string"):
            UnionMember("kind", "", RecordSchema({}))

    def test_member_requires_non_empty_key(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "discriminator key"):
            UnionMember("", "foo", RecordSchema({}))

    def test_member_must_describe_a_record(self) -> None:
        for inner in (STRING, ArraySchema(STRING)):
            with self.subTest(inner=inner):
                with self.assertRaisesRegex(SchemaDefinitionError, "must describe a record"):
                    UnionMember("kind", "foo", inner)

    def test_union_members_mapping_is_read_only(self) -> None:
        union = UnionSchema("kind", {"foo": self.foo, "bar": self.bar})
        self.assertEqual(list(union.members), ["foo", "bar"])
        with self.assertRaises(TypeError):
            union.members["baz"] = self.foo  # type: ignore[index]

    def test_union_rejects_member_with_other_key(self) -> None:
        other = UnionMember("type", "baz", RecordSchema({}))
        with self.assertRaisesRegex(SchemaDefinitionError, "keyed by 'type'"):
            UnionSchema("kind", {"foo": self.foo, "baz": other})

    def test_union_rejects_mismatched_registration(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "registered as 'bar'"):
            UnionSchema("kind", {"bar": self.foo})

    def test_union_rejects_non_member_values(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "must be a UnionMember"):
            UnionSchema("kind", {"foo": RecordSchema({"a": NUMBER})})  # type: ignore[dict-item]

    def test_union_requires_members(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "at least one member"):
            UnionSchema("kind", {})

    def test_from_members_keeps_given_order(self) -> None:
        union = UnionSchema.from_members("kind", self.bar, self.foo)
        self.assertEqual(list(union.members), ["bar", "foo"])
        self.assertEqual(union, UnionSchema("kind", {"bar": self.bar, "foo": self.foo}))

    def test_from_members_rejects_duplicates(self) -> None:
        with self.assertRaisesRegex(SchemaDefinitionError, "duplicate union member 'foo'"):
            UnionSchema.from_members("kind", self.foo, self.foo)


class MissingSentinelTests(unittest.TestCase):
    def test_missing_is_distinct_from_none(self) -> None:
        self.assertIsNot(MISSING, None)
        self.assertFalse(MISSING)
        self.assertEqual(repr(MISSING), "MISSING")

    def test_missing_is_a_singleton(self) -> None:
        self.assertIs(type(MISSING)(), MISSING)


if __name__ == "__main__":
    unittest.main()
