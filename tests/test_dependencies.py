"""Tests for dependency extraction."""

import pytest

from grammar.dependencies import dependencies
from grammar.nodes import (
    Alias,
    Case,
    Empty,
    Enum,
    Field,
    Fields,
    Max,
    ReferenceToType,
    Select,
    Struct,
    Value,
)
from grammar.parser import parse


def only(text):
    """Parse text holding exactly one definition."""
    definitions = parse(text)
    assert len(definitions) == 1
    return definitions[0]


class TestDependencies:
    """Tests for the dependencies() extractor."""

    def test_alias(self):
        """Test that an alias depends on its type."""
        definition = only("opaque variable<V>;")

        assert dependencies(definition) == ["opaque"]

    def test_optional_alias_depends_on_inner_type(self):
        """Test that the optional<> wrapper is never a dependency."""
        definition = only("optional<LeafNode> leaf;")

        assert dependencies(definition) == ["LeafNode"]

    def test_struct_with_select(self):
        """Test that the discriminant and empty cases contribute nothing."""
        definition = only(
            "struct { uint8 present; select (present) { case 0: struct{}; case 1: T value; }; } optional<T>;"
        )

        assert dependencies(definition) == ["T", "uint8"]

    def test_sorted_and_deduplicated(self):
        """Test that repeated types appear once, in sorted order."""
        definition = only(
            "struct { uint8 a; opaque b<V>; uint8 c; Zeta d; Alpha e; } S;"
        )

        assert dependencies(definition) == ["Alpha", "Zeta", "opaque", "uint8"]

    def test_enum_has_no_dependencies(self):
        """Test that enum items are not type references."""
        definition = only("enum { reserved(0), mls10(1), (255) } ProtocolVersion;")

        assert dependencies(definition) == []

    def test_field_list_case(self):
        """Test a case whose body is an inline field."""
        definition = only(
            "struct { select (x) { case x509: Certificate chain<V>; }; } Credential;"
        )

        assert dependencies(definition) == ["Certificate"]

    def test_reference_case(self):
        """Test a case whose body is a bare type reference."""
        definition = only("struct { select (x) { case all: All; }; } Proposal;")

        assert dependencies(definition) == ["All"]

    def test_idempotent(self):
        """Test that repeated calls give identical results."""
        definition = only(
            "struct { CredentialType t; select (t) { case a: opaque i<V>; case b: Certificate c<V>; }; } Credential;"
        )

        first = dependencies(definition)
        second = dependencies(definition)

        assert first == second == ["Certificate", "CredentialType", "opaque"]

    def test_hand_built_tree(self):
        """Test extraction over nodes built directly."""
        definition = Struct(
            name="Outer",
            items=(
                Field(type_name="uint16", name="kind"),
                Select(
                    over="kind",
                    cases=(
                        Case(left="1", right=Empty()),
                        Case(left="2", right=ReferenceToType("Inner")),
                        Case(left="3", right=Fields((
                            Field(type_name="uint16", name="a"),
                            Field(type_name="Other", name="b", optional=True),
                        ))),
                    ),
                ),
            ),
        )

        assert dependencies(definition) == ["Inner", "Other", "uint16"]

    def test_empty_definitions(self):
        """Test definitions that reference nothing."""
        assert dependencies(Struct(name="Nothing")) == []
        assert dependencies(Enum(name="E", items=(Value("a", "1"), Max("2")))) == []
        assert dependencies(Alias(Field(type_name="uint8", name="b"))) == ["uint8"]

    def test_rejects_non_definition(self):
        """Test that other nodes are not accepted as definitions."""
        with pytest.raises(TypeError):
            dependencies(Field(type_name="uint8", name="a"))
