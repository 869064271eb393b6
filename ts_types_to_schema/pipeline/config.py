"""
Configuration for the extraction pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DuplicateDeclarationMode(str, Enum):
    """What to do when a type name is declared more than once."""

    OVERWRITE = "overwrite"  # Default: the later declaration wins
    ERROR = "error"  # Raise DuplicateDeclaration


@dataclass
class ExtractorConfig:
    """Configuration options for schema extraction."""

    # Name given to the single child of an array node
    array_item_name: str = "ofString"

    # Handling of duplicate declaration names
    duplicate_declarations: DuplicateDeclarationMode = DuplicateDeclarationMode.OVERWRITE

    # Serialize reference targets inline (recursive targets become stubs)
    expand_references: bool = True

    # Include sourceRange in serialized output (diagnostics only)
    include_source_range: bool = False

    # Include rawComment in serialized output
    include_raw_comment: bool = True

    @staticmethod
    def from_dict(d: dict) -> ExtractorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = ExtractorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        config.duplicate_declarations = DuplicateDeclarationMode(config.duplicate_declarations)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "array_item_name": self.array_item_name,
            "duplicate_declarations": self.duplicate_declarations.value,
            "expand_references": self.expand_references,
            "include_source_range": self.include_source_range,
            "include_raw_comment": self.include_raw_comment,
        }
