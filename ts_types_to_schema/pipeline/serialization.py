"""
Conversion of the schema forest to plain nested structures.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

from .analyzer.schema_nodes import SchemaKind, SchemaNode
from .config import ExtractorConfig


def to_dict(node: SchemaNode, config: ExtractorConfig | None = None) -> dict[str, Any]:
    """
    Convert one schema node (and its subtree) to a dictionary.

    Reference targets are expanded inline. A declaration that recurs on
    its own expansion path is emitted as a stub marked ``recursive``.
    """
    return _node_to_dict(node, config or ExtractorConfig(), expanding=())


def _node_to_dict(node: SchemaNode, config: ExtractorConfig, expanding: tuple[SchemaNode, ...]) -> dict[str, Any]:
    result: dict[str, Any] = {
        "name": node.name,
        "kind": node.kind.value,
    }

    if node.kind is SchemaKind.REFERENCE:
        target = node.target
        if not config.expand_references or any(target is seen for seen in expanding):
            result["children"] = [_stub(target, recursive=config.expand_references)]
        else:
            result["children"] = [_node_to_dict(target, config, expanding)]
    else:
        if node.kind is SchemaKind.DECLARATION:
            expanding = expanding + (node,)
        result["children"] = [_node_to_dict(child, config, expanding) for child in node.children]

    if node.kind.is_literal:
        result["literalValue"] = node.literal_value
    if node.kind is SchemaKind.UNRESOLVED_REFERENCE:
        result["pendingReferenceName"] = node.pending_reference_name
    if node.optional:
        result["optional"] = True
    if node.raw_comment is not None and config.include_raw_comment:
        result["rawComment"] = node.raw_comment
    if node.annotations is not None:
        result["annotations"] = dict(node.annotations)
    if config.include_source_range:
        result["sourceRange"] = [node.source_range.start, node.source_range.end]

    return result


def _stub(declaration: SchemaNode, recursive: bool) -> dict[str, Any]:
    stub: dict[str, Any] = {
        "name": declaration.name,
        "kind": declaration.kind.value,
        "children": [],
    }
    if recursive:
        stub["recursive"] = True
    return stub


def forest_to_dict(forest: Mapping[str, SchemaNode], config: ExtractorConfig | None = None) -> dict[str, Any]:
    """Convert a name -> declaration mapping to a dictionary."""
    return {name: to_dict(node, config) for name, node in forest.items()}


def forest_to_json(forest: Mapping[str, SchemaNode], config: ExtractorConfig | None = None, indent: int = 4) -> str:
    """
    Serialize a name -> declaration mapping to JSON.

    Non-finite numbers (NaN, Infinity) are written as ``null``.
    """
    return json.dumps(_finite_only(forest_to_dict(forest, config)), indent=indent, allow_nan=False)


def _finite_only(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite_only(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite_only(v) for v in value]
    return value
