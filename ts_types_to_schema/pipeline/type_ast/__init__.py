"""
Input AST module.

Contains the type-declaration node definitions and the swc JSON parser.
"""

from __future__ import annotations

from .nodes import (
    ArrayType,
    BooleanLiteral,
    Comment,
    Declaration,
    Identifier,
    InterfaceDeclaration,
    IntersectionType,
    KeywordType,
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
    TypeNode,
    TypeReference,
    UnionType,
)
from .parser import SwcAstParser

__all__ = [
    "Span",
    "TypeNode",
    "KeywordType",
    "ArrayType",
    "TypeLiteral",
    "PropertySignature",
    "Identifier",
    "QualifiedName",
    "OtherKey",
    "UnionType",
    "IntersectionType",
    "ParenthesizedType",
    "LiteralType",
    "StringLiteral",
    "NumberLiteral",
    "BooleanLiteral",
    "OtherLiteral",
    "TypeReference",
    "OpaqueType",
    "OpaqueMember",
    "Declaration",
    "InterfaceDeclaration",
    "TypeAliasDeclaration",
    "OpaqueDeclaration",
    "Comment",
    "SwcAstParser",
]
