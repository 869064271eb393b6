"""
Type-node translator.

Converts one input type node into one schema (sub)tree. References to
names that are not declared yet become unresolved-reference markers,
rewritten later by the declaration resolver's backfill pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...errors import MalformedDeclaration, UnsupportedConstruct
from ..config import ExtractorConfig
from ..type_ast.nodes import (
    ArrayType,
    BooleanLiteral,
    Identifier,
    IntersectionType,
    KeywordType,
    LiteralType,
    NumberLiteral,
    OpaqueMember,
    OpaqueType,
    OtherKey,
    OtherLiteral,
    ParenthesizedType,
    PropertySignature,
    Span,
    StringLiteral,
    TypeLiteral,
    TypeMember,
    TypeNode,
    TypeReference,
    UnionType,
)
from .schema_nodes import SchemaKind, SchemaNode, SourceRange

if TYPE_CHECKING:
    from .declaration_table import DeclarationTable


# Keyword types that have a schema counterpart
KEYWORD_KINDS = {
    "string": SchemaKind.STRING,
    "number": SchemaKind.NUMBER,
    "boolean": SchemaKind.BOOLEAN,
    "null": SchemaKind.NULL,
}


def _range(span: Span) -> SourceRange:
    return SourceRange(start=span.start, end=span.end)


class TypeTranslator:
    """Translates input type nodes into schema nodes."""

    def __init__(self, table: DeclarationTable, config: ExtractorConfig | None = None):
        """
        Initialize the translator.

        Args:
            table: Declaration table used to look up referenced names
            config: Extraction configuration
        """
        self.table = table
        self.config = config or ExtractorConfig()

    def translate(self, name: str, node: TypeNode, source_range: SourceRange) -> SchemaNode:
        """
        Translate a type node occupying the position called ``name``.

        Args:
            name: Semantic name of the position (field name or declared name)
            node: The type node to translate
            source_range: Range recorded on the produced node

        Returns:
            Exactly one schema node

        Raises:
            UnsupportedConstruct: If the node is outside the supported grammar
        """
        if isinstance(node, KeywordType):
            return SchemaNode(name=name, kind=self._keyword_kind(node), source_range=source_range)

        if isinstance(node, ArrayType):
            return self._translate_array(name, node, source_range)

        if isinstance(node, TypeLiteral):
            return SchemaNode(
                name=name,
                kind=SchemaKind.OBJECT,
                children=self.translate_members(node.members),
                source_range=source_range,
            )

        # Variants share the name of the union/intersection itself
        if isinstance(node, UnionType):
            return SchemaNode(
                name=name,
                kind=SchemaKind.UNION,
                children=[self.translate(name, t, source_range) for t in node.types],
                source_range=source_range,
            )

        if isinstance(node, IntersectionType):
            return SchemaNode(
                name=name,
                kind=SchemaKind.INTERSECTION,
                children=[self.translate(name, t, source_range) for t in node.types],
                source_range=source_range,
            )

        if isinstance(node, ParenthesizedType):
            return self.translate(name, node.inner, source_range)

        if isinstance(node, LiteralType):
            return self._translate_literal(name, node, source_range)

        if isinstance(node, TypeReference):
            return self._translate_reference(name, node, source_range)

        if isinstance(node, OpaqueType):
            raise UnsupportedConstruct(node.kind, node.span)

        raise UnsupportedConstruct(type(node).__name__, getattr(node, "span", None))

    def translate_members(self, members: tuple[TypeMember, ...]) -> list[SchemaNode]:
        """Translate the members of an interface body or type literal."""
        return [self.translate_member(member) for member in members]

    def translate_member(self, member: TypeMember) -> SchemaNode:
        """
        Translate a property signature into a schema node named by its key.

        Raises:
            UnsupportedConstruct: For non-property members and non-identifier keys
            MalformedDeclaration: When the key or the type annotation is missing
        """
        if isinstance(member, OpaqueMember):
            raise UnsupportedConstruct(member.kind, member.span)
        if not isinstance(member, PropertySignature):
            raise UnsupportedConstruct(type(member).__name__, member.span)

        if member.key is None:
            raise MalformedDeclaration("Property signature has no name", member.span)
        if isinstance(member.key, OtherKey):
            raise UnsupportedConstruct(member.key.kind, member.span, detail="property key must be an identifier")
        if member.annotation is None:
            raise MalformedDeclaration(f"Property '{member.key.value}' has no type annotation", member.span)

        node = self.translate(member.key.value, member.annotation, _range(member.span))
        node.optional = member.optional
        return node

    def _keyword_kind(self, node: KeywordType) -> SchemaKind:
        kind = KEYWORD_KINDS.get(node.keyword)
        if kind is None:
            raise UnsupportedConstruct(f"TsKeywordType:{node.keyword}", node.span)
        return kind

    def _translate_array(self, name: str, node: ArrayType, source_range: SourceRange) -> SchemaNode:
        element = node.element
        if not isinstance(element, KeywordType):
            element_kind = getattr(element, "kind", None) or type(element).__name__
            raise UnsupportedConstruct("TsArrayType", node.span, detail=f"element must be a keyword type, got {element_kind}")

        item = SchemaNode(
            name=self.config.array_item_name,
            kind=self._keyword_kind(element),
            source_range=_range(element.span),
        )
        return SchemaNode(name=name, kind=SchemaKind.ARRAY, children=[item], source_range=source_range)

    def _translate_literal(self, name: str, node: LiteralType, source_range: SourceRange) -> SchemaNode:
        literal = node.literal
        if isinstance(literal, StringLiteral):
            kind = SchemaKind.STRING_LITERAL
        elif isinstance(literal, BooleanLiteral):
            kind = SchemaKind.BOOLEAN_LITERAL
        elif isinstance(literal, NumberLiteral):
            kind = SchemaKind.NUMBER_LITERAL
        elif isinstance(literal, OtherLiteral):
            raise UnsupportedConstruct(literal.kind, node.span)
        else:
            raise UnsupportedConstruct("TsLiteralType", node.span)

        return SchemaNode(name=name, kind=kind, literal_value=literal.value, source_range=source_range)

    def _translate_reference(self, name: str, node: TypeReference, source_range: SourceRange) -> SchemaNode:
        if not isinstance(node.type_name, Identifier):
            raise UnsupportedConstruct("TsQualifiedName", node.span)
        if node.has_type_arguments:
            raise UnsupportedConstruct("TsTypeReference", node.span, detail="generic references are not supported")

        reference_name = node.type_name.value
        declaration = self.table.get(reference_name)

        # Forward reference: resolved by the backfill pass
        if declaration is None:
            return SchemaNode(
                name=name,
                kind=SchemaKind.UNRESOLVED_REFERENCE,
                pending_reference_name=reference_name,
                source_range=source_range,
            )

        return SchemaNode(
            name=name,
            kind=SchemaKind.REFERENCE,
            children=[declaration],
            source_range=source_range,
        )
