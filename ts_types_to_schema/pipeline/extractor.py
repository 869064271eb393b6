"""
Schema extractor: runs every phase of one extraction run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .analyzer.declaration_table import DeclarationResolver
from .analyzer.flattener import flatten_schemas
from .analyzer.schema_nodes import SchemaNode
from .config import ExtractorConfig
from .docs.comment_associator import CommentAssociator
from .type_ast.nodes import Comment, Declaration
from .type_ast.parser import SwcAstParser

logger = logging.getLogger(__name__)


class SchemaExtractor:
    """
    Extracts a schema forest from type declarations and their comments.

    Each call to :meth:`extract` is an independent run with its own
    declaration table.
    """

    def __init__(self, config: ExtractorConfig | None = None):
        self.config = config or ExtractorConfig()

    def extract(self, declarations: Iterable[Declaration], comments: Iterable[Comment] = ()) -> dict[str, SchemaNode]:
        """
        Run translation, reference backfill, comment association and
        annotation decoding.

        Args:
            declarations: Top-level declarations in source order
            comments: Comments in source order

        Returns:
            Mapping from declared name to its ``declaration`` node

        Raises:
            ExtractionError: On the first failure; no partial result is returned
        """
        # Phase 1: translate and resolve
        resolver = DeclarationResolver(self.config)
        table = resolver.resolve(declarations)

        # Phase 2: documentation
        nodes = flatten_schemas(table.declarations())
        logger.debug("Flattened %d schema nodes", len(nodes))

        associator = CommentAssociator()
        associator.attach_comments(nodes, [c for c in comments if c.text])
        associator.decode_annotations(nodes)

        return table.as_dict()

    def extract_swc(self, program: dict[str, Any], comments: Iterable[dict[str, Any] | None] = ()) -> dict[str, SchemaNode]:
        """
        Run an extraction from swc JSON output.

        Args:
            program: The swc program dictionary
            comments: The swc comment records
        """
        parser = SwcAstParser()
        return self.extract(parser.parse_program(program), parser.parse_comments(comments))
