"""
Annotation tag decoding.

Extracts ``@tag value`` pairs from documentation comments and coerces each
value according to the meaning of its tag. Decoding is total: unknown tags
pass through and malformed numbers become NaN.
"""

from __future__ import annotations

import math
import re

from ..analyzer.schema_nodes import AnnotationValue

# @tag followed by whitespace or end of text; the value is the rest of the line
_TAG_PATTERN = re.compile(r"@([\w-]+)(?=\s|$)[ \t]*([^\r\n]*)")

# JavaScript Number() accepts these after trimming
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_RADIX_PATTERN = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

NUMERIC_TAGS = frozenset(
    {
        "maximum",
        "exclusiveMaximum",
        "minimum",
        "exclusiveMinimum",
        "maxLength",
        "minLength",
        "multipleOf",
        "maxItems",
        "minItems",
        "maxProperties",
        "minProperties",
    }
)

ALWAYS_TRUE_TAGS = frozenset({"readOnly", "writeOnly", "ignore"})

TRUTHY_TAGS = frozenset({"deprecated", "uniqueItems"})


def extract_tags(comment: str) -> dict[str, str | bool]:
    """
    Extract raw tag values from a comment.

    A tag without a value on its line maps to ``True``. When a tag is
    repeated, the last occurrence wins.
    """
    tags: dict[str, str | bool] = {}
    for match in _TAG_PATTERN.finditer(comment):
        key, value = match.group(1), match.group(2).strip()
        tags[key] = value if value else True
    return tags


def to_number(text: str) -> int | float:
    """Convert text to a number the way JavaScript ``Number()`` does."""
    text = text.strip()
    if not text:
        return 0

    sign = 1
    unsigned = text
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        unsigned = text[1:]

    if unsigned == "Infinity":
        return sign * math.inf

    if _RADIX_PATTERN.fullmatch(text):
        return int(text, 0)

    if not _DECIMAL_PATTERN.fullmatch(text):
        return math.nan

    value = float(text)
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def coerce_tag(key: str, value: str | bool) -> AnnotationValue:
    """
    Coerce a raw tag value according to the tag's meaning.

    Args:
        key: The tag name
        value: Raw value text, or ``True`` for a tag without a value

    Returns:
        The decoded value
    """
    if key in ALWAYS_TRUE_TAGS:
        return True

    if key in TRUTHY_TAGS:
        return bool(value)

    if key == "examples":
        if value is True:
            return []
        return [example.strip() for example in value.split("\n")]

    if key in NUMERIC_TAGS:
        if value is True:
            return math.nan
        return to_number(value)

    if key == "default":
        if value is True or value == "true":
            return True
        if value == "false":
            return False
        number = to_number(value)
        return value if isinstance(number, float) and math.isnan(number) else number

    return value


def decode_annotations(comment: str) -> dict[str, AnnotationValue]:
    """Decode every annotation tag found in a comment."""
    return {key: coerce_tag(key, value) for key, value in extract_tags(comment).items()}
