"""
Schema node definitions.

These nodes are the output of the pipeline: a uniform tree per top-level
declaration, enriched with documentation recovered from comments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# Decoded annotation value
AnnotationValue = Union[str, int, float, bool, list[str]]


class SchemaKind(str, Enum):
    """Kind of a schema node."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"
    UNION = "union"
    INTERSECTION = "intersection"
    STRING_LITERAL = "stringLiteral"
    NUMBER_LITERAL = "numberLiteral"
    BOOLEAN_LITERAL = "booleanLiteral"
    REFERENCE = "reference"
    UNRESOLVED_REFERENCE = "unresolved-reference"  # Transient, removed by the backfill pass
    DECLARATION = "declaration"

    @property
    def is_literal(self) -> bool:
        return self in LITERAL_KINDS

    @property
    def is_primitive(self) -> bool:
        return self in PRIMITIVE_KINDS


PRIMITIVE_KINDS = frozenset({SchemaKind.STRING, SchemaKind.NUMBER, SchemaKind.BOOLEAN, SchemaKind.NULL})

LITERAL_KINDS = frozenset({SchemaKind.STRING_LITERAL, SchemaKind.NUMBER_LITERAL, SchemaKind.BOOLEAN_LITERAL})


@dataclass(frozen=True)
class SourceRange:
    """Byte offsets ``[start, end)``; only ``start`` is used, for ordering."""

    start: int = 0
    end: int = 0


@dataclass(eq=False)
class SchemaNode:
    """A node of the schema forest.

    Nodes compare by identity: a ``reference`` node links to the very
    declaration node held by the declaration table.
    """

    name: str = ""
    kind: SchemaKind = SchemaKind.OBJECT

    # Owned children, except for a resolved reference whose single child
    # is a link to a declaration owned by the declaration table
    children: list[SchemaNode] = field(default_factory=list)

    # Only for literal kinds
    literal_value: str | int | float | bool | None = None

    # Only while kind is UNRESOLVED_REFERENCE
    pending_reference_name: str | None = None

    # Property declared with `?`
    optional: bool = False

    source_range: SourceRange = field(default_factory=SourceRange)

    # Documentation
    raw_comment: str | None = None
    annotations: dict[str, AnnotationValue] | None = None

    @property
    def target(self) -> SchemaNode | None:
        """The linked declaration of a resolved reference."""
        if self.kind is SchemaKind.REFERENCE and self.children:
            return self.children[0]
        return None

    def resolve_to(self, declaration: SchemaNode) -> None:
        """Rewrite an unresolved-reference marker into a resolved reference."""
        self.kind = SchemaKind.REFERENCE
        self.children = [declaration]
        self.pending_reference_name = None
