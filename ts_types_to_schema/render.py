"""
Text rendering of the schema forest as an indented tree.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

import click
import jinja2

from .pipeline.analyzer.schema_nodes import AnnotationValue, SchemaKind, SchemaNode

CURRENT_DIR = Path(__file__).parent.resolve().absolute()

INDENT = " " * 4


@dataclass
class TreeRow:
    """One node line of the tree, with the annotation lines above it."""

    indent: str
    label: str
    annotations: list[tuple[str, AnnotationValue]]


def format_annotation_value(value: AnnotationValue) -> str:
    """Format a decoded annotation value for display."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, list):
        return ",".join(value)
    return str(value)


def iter_tree_rows(node: SchemaNode, level: int = 0) -> Iterator[TreeRow]:
    """Yield the rows of a subtree; references are shown, not expanded."""
    label = f"{node.name}: {node.kind.value}"
    if node.kind is SchemaKind.REFERENCE:
        label = f"{label} -> {node.target.name}"

    yield TreeRow(
        indent=INDENT * level,
        label=label,
        annotations=list((node.annotations or {}).items()),
    )

    if node.kind is not SchemaKind.REFERENCE:
        for child in node.children:
            yield from iter_tree_rows(child, level + 1)


class TreeRenderer:
    """Renders declarations with the tree template."""

    def __init__(self, color: bool = True):
        self.color = color
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
        self.jinja_env.filters["style"] = self._style
        self.jinja_env.filters["annotation"] = format_annotation_value
        self.template = self.jinja_env.from_string((CURRENT_DIR / "templates" / "tree.txt.jinja2").read_text(encoding="utf-8"))

    def _style(self, text: str, **styles) -> str:
        if not self.color:
            return text
        return click.style(text, **styles)

    def render(self, declarations: Iterable[SchemaNode]) -> str:
        trees = [list(iter_tree_rows(declaration)) for declaration in declarations]
        return self.template.render(trees=trees)


def render_tree(declarations: Iterable[SchemaNode], color: bool = True) -> str:
    """Render declarations as an indented tree, one block per declaration."""
    return TreeRenderer(color=color).render(declarations)
