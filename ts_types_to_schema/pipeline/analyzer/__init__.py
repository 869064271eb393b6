"""
Analyzer module.

Contains type translation, the declaration table, reference resolution
and flattening of the schema forest.
"""

from __future__ import annotations

from .declaration_table import DeclarationResolver, DeclarationTable
from .flattener import flatten_schemas, iter_schema_nodes
from .schema_nodes import SchemaKind, SchemaNode, SourceRange
from .translator import TypeTranslator

__all__ = [
    "SchemaKind",
    "SchemaNode",
    "SourceRange",
    "TypeTranslator",
    "DeclarationTable",
    "DeclarationResolver",
    "iter_schema_nodes",
    "flatten_schemas",
]
