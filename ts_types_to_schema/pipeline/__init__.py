"""
Pipeline - type declarations to documented schema.

This module extracts a schema forest from type declarations in phases:

1. Phase 1 (Parser): Read the swc program and comments into the input AST
2. Phase 2 (Analyzer): Translate declarations, register them by name and
   backfill forward references
3. Phase 3 (Docs): Attach each comment to the node it documents and decode
   its annotation tags
4. Phase 4 (Serialization): Convert the forest to plain nested structures
"""

from __future__ import annotations

from .config import DuplicateDeclarationMode, ExtractorConfig
from .extractor import SchemaExtractor
from .serialization import forest_to_dict, forest_to_json, to_dict

__all__ = [
    "SchemaExtractor",
    "ExtractorConfig",
    "DuplicateDeclarationMode",
    "to_dict",
    "forest_to_dict",
    "forest_to_json",
]
