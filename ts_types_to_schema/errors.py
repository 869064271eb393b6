"""
Errors raised by the extraction pipeline.

Every error aborts the whole run; there is no partial-result mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pipeline.type_ast.nodes import Span


class ExtractionError(Exception):
    """Base class for all extraction failures.

    Attributes:
        span: Location of the offending construct in the source, if known
    """

    def __init__(self, message: str, span: Span | None = None):
        self.span = span
        if span is not None:
            message = f"{message} at [{span.start}, {span.end})"
        super().__init__(message)


class UnsupportedConstruct(ExtractionError):
    """Raised when a node falls outside the supported type grammar."""

    def __init__(self, node_kind: str, span: Span | None = None, detail: str = ""):
        self.node_kind = node_kind
        message = f"Unsupported construct: {node_kind}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, span)


class UnresolvedReference(ExtractionError):
    """Raised when a referenced type name is never declared."""

    def __init__(self, name: str, span: Span | None = None):
        self.name = name
        super().__init__(f"Reference not found: {name}", span)


class OrphanComment(ExtractionError):
    """Raised when a comment has no schema node declared after it."""

    def __init__(self, text: str, span: Span | None = None):
        self.text = text
        preview = " ".join(text.split())[:40]
        super().__init__(f"Comment has nothing to document: {preview!r}", span)


class MalformedDeclaration(ExtractionError):
    """Raised when a member is missing its name or type annotation."""


class DuplicateDeclaration(ExtractionError):
    """Raised when a type name is declared twice and duplicates are rejected."""

    def __init__(self, name: str, span: Span | None = None):
        self.name = name
        super().__init__(f"Duplicate declaration: {name}", span)
