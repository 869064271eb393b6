"""
swc JSON parser that builds the input AST.

Phase 1 of the pipeline: read the JSON program emitted by swc (and the
comment list emitted alongside it) into typed input nodes. Nothing is
rejected here; node kinds outside the grammar are kept as opaque nodes
and rejected by the translator.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .nodes import (
    ArrayType,
    BooleanLiteral,
    Comment,
    Declaration,
    Identifier,
    InterfaceDeclaration,
    IntersectionType,
    KeywordType,
    Literal,
    LiteralType,
    NumberLiteral,
    OpaqueDeclaration,
    OpaqueMember,
    OpaqueType,
    OtherKey,
    OtherLiteral,
    ParenthesizedType,
    PropertySignature,
    QualifiedName,
    Span,
    StringLiteral,
    TypeAliasDeclaration,
    TypeLiteral,
    TypeMember,
    TypeNode,
    TypeReference,
    UnionType,
)


class SwcAstParser:
    """Parses swc program JSON into the input AST."""

    def parse_program(self, program: dict[str, Any]) -> list[Declaration]:
        """
        Parse a swc ``Module`` or ``Script`` into top-level declarations.

        Args:
            program: The program dictionary as produced by swc

        Returns:
            Declarations in source order
        """
        declarations = []
        for item in program.get("body", []):
            # export type A = ... / export interface A { ... }
            if item.get("type") == "ExportDeclaration":
                item = item["declaration"]
            declarations.append(self._parse_declaration(item))
        return declarations

    def parse_comments(self, records: Iterable[dict[str, Any] | None]) -> list[Comment]:
        """
        Parse comment records, skipping records without text.

        Accepts both the swc-napi shape ``{text, spanLo, spanHi}`` and the
        ``{text, span: {start, end}}`` shape.
        """
        comments = []
        for record in records:
            if not record or not record.get("text"):
                continue
            if "span" in record:
                span = self._parse_span(record["span"])
            else:
                span = Span(start=record.get("spanLo", 0), end=record.get("spanHi", 0))
            comments.append(Comment(text=record["text"], span=span))
        return comments

    def _parse_span(self, span: dict[str, Any] | None) -> Span:
        if not span:
            return Span()
        return Span(start=span.get("start", 0), end=span.get("end", 0))

    def _parse_declaration(self, item: dict[str, Any]) -> Declaration:
        kind = item.get("type", "")
        span = self._parse_span(item.get("span"))

        if kind == "TsTypeAliasDeclaration":
            return TypeAliasDeclaration(
                name=item["id"]["value"],
                annotation=self._parse_type(item["typeAnnotation"]),
                has_type_parameters=bool(item.get("typeParams")),
                span=span,
            )

        if kind == "TsInterfaceDeclaration":
            body = item.get("body") or {}
            return InterfaceDeclaration(
                name=item["id"]["value"],
                members=tuple(self._parse_member(m) for m in body.get("body", [])),
                has_type_parameters=bool(item.get("typeParams")),
                extends=tuple(self._heritage_name(h) for h in item.get("extends") or []),
                span=span,
            )

        return OpaqueDeclaration(kind=kind, span=span)

    def _heritage_name(self, heritage: dict[str, Any]) -> str:
        expr = heritage.get("expression") or {}
        return expr.get("value", expr.get("type", ""))

    def _parse_member(self, member: dict[str, Any]) -> TypeMember:
        kind = member.get("type", "")
        span = self._parse_span(member.get("span"))

        if kind != "TsPropertySignature":
            return OpaqueMember(kind=kind, span=span)

        annotation = None
        wrapper = member.get("typeAnnotation")
        if wrapper:
            annotation = self._parse_type(wrapper["typeAnnotation"])

        return PropertySignature(
            key=self._parse_key(member.get("key"), computed=member.get("computed", False)),
            annotation=annotation,
            optional=member.get("optional", False),
            span=span,
        )

    def _parse_key(self, key: dict[str, Any] | None, computed: bool) -> Identifier | OtherKey | None:
        if key is None:
            return None
        span = self._parse_span(key.get("span"))
        if key.get("type") == "Identifier" and not computed:
            return Identifier(value=key["value"], span=span)
        return OtherKey(kind=key.get("type", ""), span=span)

    def _parse_type(self, node: dict[str, Any]) -> TypeNode:
        """
        Parse a type node recursively.

        Args:
            node: The swc ``TsType`` dictionary

        Returns:
            Appropriate TypeNode subclass
        """
        kind = node.get("type", "")
        span = self._parse_span(node.get("span"))

        if kind == "TsKeywordType":
            return KeywordType(keyword=node["kind"], span=span)

        if kind == "TsArrayType":
            return ArrayType(element=self._parse_type(node["elemType"]), span=span)

        if kind == "TsTypeLiteral":
            return TypeLiteral(members=tuple(self._parse_member(m) for m in node.get("members", [])), span=span)

        if kind == "TsUnionType":
            return UnionType(types=tuple(self._parse_type(t) for t in node["types"]), span=span)

        if kind == "TsIntersectionType":
            return IntersectionType(types=tuple(self._parse_type(t) for t in node["types"]), span=span)

        if kind == "TsParenthesizedType":
            return ParenthesizedType(inner=self._parse_type(node["typeAnnotation"]), span=span)

        if kind == "TsLiteralType":
            return LiteralType(literal=self._parse_literal(node["literal"]), span=span)

        if kind == "TsTypeReference":
            return TypeReference(
                type_name=self._parse_type_name(node["typeName"]),
                has_type_arguments=bool(node.get("typeParams")),
                span=span,
            )

        return OpaqueType(kind=kind, span=span)

    def _parse_literal(self, literal: dict[str, Any]) -> Literal:
        kind = literal.get("type", "")
        if kind == "StringLiteral":
            return StringLiteral(value=literal["value"])
        if kind == "NumericLiteral":
            value = literal["value"]
            # swc writes numbers as JSON floats (1.0)
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            return NumberLiteral(value=value)
        if kind == "BooleanLiteral":
            return BooleanLiteral(value=literal["value"])
        return OtherLiteral(kind=kind)

    def _parse_type_name(self, type_name: dict[str, Any]) -> Identifier | QualifiedName:
        span = self._parse_span(type_name.get("span"))
        if type_name.get("type") == "Identifier":
            return Identifier(value=type_name["value"], span=span)
        return QualifiedName(value=self._qualified_value(type_name), span=span)

    def _qualified_value(self, type_name: dict[str, Any]) -> str:
        # TsQualifiedName nests as {left: <name>, right: Identifier}
        if type_name.get("type") == "Identifier":
            return type_name["value"]
        left = self._qualified_value(type_name.get("left", {}))
        right = type_name.get("right", {}).get("value", "")
        return f"{left}.{right}"
