"""Type Declarations to Schema

A Python package for extracting a documented, serializable schema from
interface and type alias declarations, as parsed by swc. Documentation
comments are attached to the nodes they precede and their ``@tag``
annotations are decoded into typed values.
"""

__version__ = "0.1.0"

from .errors import (
    DuplicateDeclaration,
    ExtractionError,
    MalformedDeclaration,
    OrphanComment,
    UnresolvedReference,
    UnsupportedConstruct,
)
from .pipeline import (
    DuplicateDeclarationMode,
    ExtractorConfig,
    SchemaExtractor,
    forest_to_dict,
    forest_to_json,
    to_dict,
)
from .pipeline.analyzer import SchemaKind, SchemaNode
from .render import render_tree

__all__ = [
    "SchemaExtractor",
    "ExtractorConfig",
    "DuplicateDeclarationMode",
    "SchemaKind",
    "SchemaNode",
    "to_dict",
    "forest_to_dict",
    "forest_to_json",
    "render_tree",
    "ExtractionError",
    "UnsupportedConstruct",
    "UnresolvedReference",
    "OrphanComment",
    "MalformedDeclaration",
    "DuplicateDeclaration",
]
