"""
Documentation module.

Contains comment association and annotation tag decoding.
"""

from __future__ import annotations

from .annotations import coerce_tag, decode_annotations, extract_tags
from .comment_associator import CommentAssociator, find_documented_node, match_comments

__all__ = [
    "CommentAssociator",
    "find_documented_node",
    "match_comments",
    "extract_tags",
    "coerce_tag",
    "decode_annotations",
]
