"""
Flat traversal of the schema forest.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .schema_nodes import SchemaKind, SchemaNode


def iter_schema_nodes(forest: Iterable[SchemaNode]) -> Iterator[SchemaNode]:
    """
    Yield every node reachable from ``forest``, parents before children.

    A resolved reference does not own its linked declaration, so the
    traversal stops at the reference node itself. This keeps the walk
    finite for self- and mutually-referential declarations, and each
    declaration is still visited once as a root of the forest.

    Each call returns a fresh generator.
    """
    for node in forest:
        yield node
        if node.kind is not SchemaKind.REFERENCE:
            yield from iter_schema_nodes(node.children)


def flatten_schemas(forest: Iterable[SchemaNode]) -> list[SchemaNode]:
    """Materialized form of :func:`iter_schema_nodes`."""
    return list(iter_schema_nodes(forest))
