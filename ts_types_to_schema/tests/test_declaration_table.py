"""
Tests for declaration registration and forward-reference backfill.
"""

from __future__ import annotations

import logging

import pytest

from ts_types_to_schema.errors import DuplicateDeclaration, UnresolvedReference, UnsupportedConstruct
from ts_types_to_schema.pipeline.analyzer import DeclarationResolver, SchemaKind, flatten_schemas
from ts_types_to_schema.pipeline.config import DuplicateDeclarationMode, ExtractorConfig
from ts_types_to_schema.pipeline.type_ast import (
    Identifier,
    InterfaceDeclaration,
    KeywordType,
    OpaqueDeclaration,
    PropertySignature,
    Span,
    TypeAliasDeclaration,
    TypeLiteral,
    TypeReference,
    UnionType,
)


def prop(name, annotation):
    return PropertySignature(key=Identifier(name), annotation=annotation)


def ref(name):
    return TypeReference(type_name=Identifier(name))


def alias(name, annotation, start=0, end=0):
    return TypeAliasDeclaration(name=name, annotation=annotation, span=Span(start, end))


def object_alias(name, *members, start=0, end=0):
    return alias(name, TypeLiteral(members=tuple(members)), start, end)


class TestDeclarationResolver:
    def test_interface_members_become_children(self):
        interface = InterfaceDeclaration(
            name="User",
            members=(prop("id", KeywordType(keyword="number")), prop("name", KeywordType(keyword="string"))),
            span=Span(0, 50),
        )
        table = DeclarationResolver().resolve([interface])

        user = table.get("User")
        assert user.kind is SchemaKind.DECLARATION
        assert user.name == "User"
        assert [c.name for c in user.children] == ["id", "name"]
        assert user.source_range.start == 0

    def test_object_alias_members_become_children(self):
        table = DeclarationResolver().resolve([object_alias("A", prop("a", KeywordType(keyword="string")))])
        assert [(c.name, c.kind) for c in table.get("A").children] == [("a", SchemaKind.STRING)]

    def test_non_object_alias_has_single_child_named_after_declaration(self):
        union = UnionType(types=(KeywordType(keyword="string"), KeywordType(keyword="number")))
        table = DeclarationResolver().resolve([alias("Id", union, 0, 30)])

        declaration = table.get("Id")
        assert len(declaration.children) == 1
        child = declaration.children[0]
        assert child.name == "Id"
        assert child.kind is SchemaKind.UNION
        assert child.source_range == declaration.source_range

    def test_backward_reference_resolves_eagerly(self):
        table = DeclarationResolver().resolve(
            [
                object_alias("A", prop("a", KeywordType(keyword="string"))),
                object_alias("B", prop("owner", ref("A"))),
            ]
        )
        owner = table.get("B").children[0]
        assert owner.kind is SchemaKind.REFERENCE
        assert owner.target is table.get("A")

    def test_forward_reference_is_backfilled(self):
        table = DeclarationResolver().resolve(
            [
                object_alias("B", prop("owner", ref("A"))),
                object_alias("A", prop("a", KeywordType(keyword="string"))),
            ]
        )
        owner = table.get("B").children[0]
        assert owner.kind is SchemaKind.REFERENCE
        assert owner.children == [table.get("A")]
        assert owner.pending_reference_name is None

    def test_nested_forward_references_are_backfilled(self):
        nested = TypeLiteral(members=(prop("value", UnionType(types=(ref("Later"), KeywordType(keyword="null")))),))
        table = DeclarationResolver().resolve(
            [
                object_alias("Holder", prop("inner", nested)),
                object_alias("Later", prop("x", KeywordType(keyword="number"))),
            ]
        )
        nodes = flatten_schemas(table.declarations())
        assert not [n for n in nodes if n.kind is SchemaKind.UNRESOLVED_REFERENCE]
        union = table.get("Holder").children[0].children[0]
        assert union.children[0].target is table.get("Later")

    def test_unknown_reference_raises(self):
        with pytest.raises(UnresolvedReference) as exc_info:
            DeclarationResolver().resolve([object_alias("A", prop("b", ref("Missing")))])
        assert exc_info.value.name == "Missing"
        assert "Missing" in str(exc_info.value)

    def test_self_reference_resolves(self):
        table = DeclarationResolver().resolve([object_alias("X", prop("next", ref("X")))])
        x = table.get("X")
        assert x.children[0].kind is SchemaKind.REFERENCE
        assert x.children[0].target is x
        # The walk stops at references, so it terminates
        assert [n.name for n in flatten_schemas(table.declarations())] == ["X", "next"]

    def test_mutual_references_resolve(self):
        table = DeclarationResolver().resolve(
            [
                object_alias("Tree", prop("root", ref("Leaf"))),
                object_alias("Leaf", prop("parent", ref("Tree"))),
            ]
        )
        assert table.get("Tree").children[0].target is table.get("Leaf")
        assert table.get("Leaf").children[0].target is table.get("Tree")

    def test_duplicate_declaration_last_wins(self, caplog):
        first = object_alias("A", prop("old", KeywordType(keyword="string")))
        user = object_alias("B", prop("a", ref("A")))
        second = object_alias("A", prop("new", KeywordType(keyword="number")))

        with caplog.at_level(logging.WARNING):
            table = DeclarationResolver().resolve([first, user, second])

        assert len(table) == 2
        assert [c.name for c in table.get("A").children] == ["new"]
        # The eager reference is re-linked to the surviving declaration
        assert table.get("B").children[0].target is table.get("A")
        assert "overrides" in caplog.text

    def test_duplicate_declaration_can_be_rejected(self):
        config = ExtractorConfig(duplicate_declarations=DuplicateDeclarationMode.ERROR)
        with pytest.raises(DuplicateDeclaration):
            DeclarationResolver(config).resolve(
                [
                    object_alias("A", prop("a", KeywordType(keyword="string"))),
                    object_alias("A", prop("a", KeywordType(keyword="string")), start=40, end=60),
                ]
            )

    def test_generic_declarations_are_unsupported(self):
        generic = TypeAliasDeclaration(name="Box", annotation=KeywordType(keyword="string"), has_type_parameters=True)
        with pytest.raises(UnsupportedConstruct):
            DeclarationResolver().resolve([generic])

    def test_interface_extends_is_unsupported(self):
        interface = InterfaceDeclaration(name="B", members=(), extends=("A",))
        with pytest.raises(UnsupportedConstruct) as exc_info:
            DeclarationResolver().resolve([interface])
        assert "extends A" in str(exc_info.value)

    def test_other_statements_are_unsupported(self):
        with pytest.raises(UnsupportedConstruct) as exc_info:
            DeclarationResolver().resolve([OpaqueDeclaration(kind="ImportDeclaration")])
        assert exc_info.value.node_kind == "ImportDeclaration"

    def test_runs_do_not_share_tables(self):
        DeclarationResolver().resolve([object_alias("A", prop("a", KeywordType(keyword="string")))])
        with pytest.raises(UnresolvedReference):
            DeclarationResolver().resolve([object_alias("B", prop("a", ref("A")))])
