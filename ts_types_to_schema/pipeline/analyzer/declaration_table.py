"""
Declaration table and reference resolver.

Top-level declarations are translated in source order and registered by
name. References to names declared later are left as markers and
rewritten by a single backfill pass once every declaration is known.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ...errors import DuplicateDeclaration, UnresolvedReference, UnsupportedConstruct
from ..config import DuplicateDeclarationMode, ExtractorConfig
from ..type_ast.nodes import (
    Declaration,
    InterfaceDeclaration,
    OpaqueDeclaration,
    Span,
    TypeAliasDeclaration,
    TypeLiteral,
)
from .flattener import iter_schema_nodes
from .schema_nodes import SchemaKind, SchemaNode, SourceRange
from .translator import TypeTranslator

logger = logging.getLogger(__name__)


class DeclarationTable:
    """Declared type name -> ``declaration`` schema node, for one run."""

    def __init__(self) -> None:
        self._declarations: dict[str, SchemaNode] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def get(self, name: str) -> SchemaNode | None:
        """Get a declaration by name."""
        return self._declarations.get(name)

    def register(self, declaration: SchemaNode) -> SchemaNode | None:
        """
        Register a declaration under its name.

        Returns:
            The declaration it replaced, if any
        """
        previous = self._declarations.get(declaration.name)
        self._declarations[declaration.name] = declaration
        return previous

    def declarations(self) -> list[SchemaNode]:
        """Registered declarations, in first-registration order."""
        return list(self._declarations.values())

    def as_dict(self) -> dict[str, SchemaNode]:
        return dict(self._declarations)


class DeclarationResolver:
    """Builds the declaration table and resolves references."""

    def __init__(self, config: ExtractorConfig | None = None, table: DeclarationTable | None = None):
        """
        Initialize the resolver.

        Args:
            config: Extraction configuration
            table: Table to populate (a fresh one by default)
        """
        self.config = config or ExtractorConfig()
        self.table = table if table is not None else DeclarationTable()
        self.translator = TypeTranslator(self.table, self.config)

    def resolve(self, declarations: Iterable[Declaration]) -> DeclarationTable:
        """
        Translate all declarations and backfill forward references.

        Args:
            declarations: Top-level declarations in source order

        Returns:
            The populated declaration table

        Raises:
            UnresolvedReference: If a referenced name is never declared
        """
        for declaration in declarations:
            self.register(declaration)
        logger.debug("Registered %d declarations", len(self.table))

        self.backfill()
        return self.table

    def register(self, declaration: Declaration) -> SchemaNode:
        """Translate one top-level declaration and insert it into the table."""
        node = self.translate_declaration(declaration)

        if node.name in self.table:
            if self.config.duplicate_declarations is DuplicateDeclarationMode.ERROR:
                raise DuplicateDeclaration(node.name, declaration.span)
            logger.warning("Declaration '%s' overrides an earlier declaration with the same name", node.name)

        self.table.register(node)
        return node

    def translate_declaration(self, declaration: Declaration) -> SchemaNode:
        """
        Translate a top-level declaration into a ``declaration`` node.

        Interfaces and object-literal aliases get one child per member;
        any other alias gets a single child translated under the declared name.
        """
        source_range = SourceRange(start=declaration.span.start, end=declaration.span.end)

        if isinstance(declaration, InterfaceDeclaration):
            self._check_declaration(declaration.name, declaration.span, declaration.has_type_parameters)
            if declaration.extends:
                raise UnsupportedConstruct(
                    "TsInterfaceDeclaration",
                    declaration.span,
                    detail=f"'{declaration.name}' extends {', '.join(declaration.extends)}",
                )
            children = self.translator.translate_members(declaration.members)

        elif isinstance(declaration, TypeAliasDeclaration):
            self._check_declaration(declaration.name, declaration.span, declaration.has_type_parameters)
            if isinstance(declaration.annotation, TypeLiteral):
                children = self.translator.translate_members(declaration.annotation.members)
            else:
                children = [self.translator.translate(declaration.name, declaration.annotation, source_range)]

        elif isinstance(declaration, OpaqueDeclaration):
            raise UnsupportedConstruct(declaration.kind, declaration.span)

        else:
            raise UnsupportedConstruct(type(declaration).__name__, declaration.span)

        return SchemaNode(
            name=declaration.name,
            kind=SchemaKind.DECLARATION,
            children=children,
            source_range=source_range,
        )

    def _check_declaration(self, name: str, span: Span, has_type_parameters: bool) -> None:
        if has_type_parameters:
            raise UnsupportedConstruct("TsTypeParameterDeclaration", span, detail=f"'{name}' is generic")

    def backfill(self) -> int:
        """
        Rewrite every unresolved-reference marker into a resolved reference.

        References resolved eagerly are re-linked as well, so that a
        declaration overridden by a later duplicate is never left as a target.

        Returns:
            Number of markers resolved
        """
        resolved = 0
        for node in iter_schema_nodes(self.table.declarations()):
            if node.kind is SchemaKind.UNRESOLVED_REFERENCE:
                declaration = self.table.get(node.pending_reference_name)
                if declaration is None:
                    raise UnresolvedReference(
                        node.pending_reference_name,
                        Span(start=node.source_range.start, end=node.source_range.end),
                    )
                node.resolve_to(declaration)
                resolved += 1

            elif node.kind is SchemaKind.REFERENCE:
                current = self.table.get(node.target.name)
                if current is not node.target:
                    node.resolve_to(current)

        logger.debug("Backfilled %d forward references", resolved)
        return resolved
