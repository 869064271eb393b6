"""
Input AST node definitions for type declarations.

These nodes describe the output of the external parser: top-level
interfaces and type aliases built from a fixed grammar of type nodes,
plus the free-floating comments found in the source. Every node kind
outside the grammar is carried as an ``Opaque*`` node so that the
translator can reject it by kind name.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Span:
    """Byte-offset span ``[start, end)`` in the original source."""

    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class TypeNode:
    """Base class for all type nodes."""

    span: Span = field(default_factory=Span)


@dataclass(frozen=True)
class KeywordType(TypeNode):
    """A keyword type such as ``string`` or ``any``."""

    keyword: str = ""


@dataclass(frozen=True)
class ArrayType(TypeNode):
    """``T[]``"""

    element: TypeNode | None = None


@dataclass(frozen=True)
class Identifier:
    """A plain identifier (type name or property key)."""

    value: str = ""
    span: Span = field(default_factory=Span)


@dataclass(frozen=True)
class QualifiedName:
    """A dotted name such as ``ns.Type``."""

    value: str = ""
    span: Span = field(default_factory=Span)


@dataclass(frozen=True)
class OtherKey:
    """A property key that is not an identifier (string, numeric, computed)."""

    kind: str = ""
    span: Span = field(default_factory=Span)


@dataclass(frozen=True)
class TypeMember:
    """Base class for members of an interface body or type literal."""

    span: Span = field(default_factory=Span)


@dataclass(frozen=True)
class PropertySignature(TypeMember):
    """``key: annotation`` (``key?: annotation`` when optional)."""

    key: Identifier | OtherKey | None = None
    annotation: TypeNode | None = None
    optional: bool = False


@dataclass(frozen=True)
class OpaqueMember(TypeMember):
    """Any member kind outside the grammar (methods, index signatures...)."""

    kind: str = ""


@dataclass(frozen=True)
class TypeLiteral(TypeNode):
    """``{ a: string; b: number }``"""

    members: tuple[TypeMember, ...] = ()


@dataclass(frozen=True)
class UnionType(TypeNode):
    """``A | B``"""

    types: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class IntersectionType(TypeNode):
    """``A & B``"""

    types: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class ParenthesizedType(TypeNode):
    """``(T)``"""

    inner: TypeNode | None = None


@dataclass(frozen=True)
class Literal:
    """Base class for literal values inside a literal type."""


@dataclass(frozen=True)
class StringLiteral(Literal):
    value: str = ""


@dataclass(frozen=True)
class NumberLiteral(Literal):
    value: int | float = 0


@dataclass(frozen=True)
class BooleanLiteral(Literal):
    value: bool = False


@dataclass(frozen=True)
class OtherLiteral(Literal):
    """Big-integer, template or any other literal form."""

    kind: str = ""


@dataclass(frozen=True)
class LiteralType(TypeNode):
    """A literal type such as ``"a"``, ``1`` or ``true``."""

    literal: Literal | None = None


@dataclass(frozen=True)
class TypeReference(TypeNode):
    """A reference to a named type."""

    type_name: Identifier | QualifiedName | None = None
    has_type_arguments: bool = False


@dataclass(frozen=True)
class OpaqueType(TypeNode):
    """Any type kind outside the grammar (function, mapped, conditional...)."""

    kind: str = ""


@dataclass(frozen=True)
class Declaration:
    """Base class for top-level statements."""

    span: Span = field(default_factory=Span)


@dataclass(frozen=True)
class InterfaceDeclaration(Declaration):
    """``interface Name { ... }``"""

    name: str = ""
    members: tuple[TypeMember, ...] = ()
    has_type_parameters: bool = False
    extends: tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeAliasDeclaration(Declaration):
    """``type Name = T``"""

    name: str = ""
    annotation: TypeNode | None = None
    has_type_parameters: bool = False


@dataclass(frozen=True)
class OpaqueDeclaration(Declaration):
    """Any top-level statement that is not an interface or a type alias."""

    kind: str = ""


@dataclass(frozen=True)
class Comment:
    """A comment with its text payload (delimiters stripped)."""

    text: str = ""
    span: Span = field(default_factory=Span)
