"""
Positional association of comments to schema nodes.

A documentation comment is assumed to sit right before the construct it
documents, so each comment goes to the node starting nearest after it.
Only relative order is checked, not the distance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ...errors import OrphanComment
from ..analyzer.schema_nodes import SchemaNode
from ..type_ast.nodes import Comment
from .annotations import decode_annotations

logger = logging.getLogger(__name__)


def find_documented_node(nodes: Sequence[SchemaNode], comment: Comment) -> SchemaNode | None:
    """
    Find the node a comment documents.

    Among nodes starting strictly after the comment's end, returns the one
    with the smallest start offset. Ties go to the node listed first.
    """
    candidates = [node for node in nodes if node.source_range.start > comment.span.end]
    if not candidates:
        return None
    return min(candidates, key=lambda node: node.source_range.start)


def match_comments(nodes: Sequence[SchemaNode], comments: Iterable[Comment]) -> list[tuple[Comment, SchemaNode]]:
    """
    Pair each comment with the node it documents, without touching the nodes.

    Raises:
        OrphanComment: If a comment has no node after it
    """
    snapshot = tuple(nodes)
    pairs = []
    for comment in comments:
        node = find_documented_node(snapshot, comment)
        if node is None:
            raise OrphanComment(comment.text, comment.span)
        pairs.append((comment, node))
    return pairs


class CommentAssociator:
    """Attaches comments and their decoded annotations to schema nodes."""

    def attach_comments(self, nodes: Sequence[SchemaNode], comments: Iterable[Comment]) -> int:
        """
        Set ``raw_comment`` on the documented nodes.

        When several comments document the same node, the last one in
        source order wins.

        Returns:
            Number of comments attached
        """
        pairs = match_comments(nodes, comments)
        for comment, node in pairs:
            node.raw_comment = comment.text
        logger.debug("Attached %d comments", len(pairs))
        return len(pairs)

    def decode_annotations(self, nodes: Iterable[SchemaNode]) -> None:
        """Decode annotations for every node that carries a comment."""
        for node in nodes:
            if node.raw_comment:
                node.annotations = decode_annotations(node.raw_comment)
