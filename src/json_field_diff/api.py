"""Public API functions for json-field-diff.

This module provides the user-facing functions: compare, compare_text,
is_identical and mismatched_paths.  Each call creates a fresh TreeComparator
to guarantee zero global state between calls.
"""

from __future__ import annotations

import json
from typing import Any

from json_field_diff.comparator import TreeComparator
from json_field_diff.config import CompareConfig
from json_field_diff.report import mismatches
from json_field_diff.tree.nodes import ComparisonNode
from json_field_diff.tree.values import reject_constant

__all__ = ["compare", "compare_text", "is_identical", "mismatched_paths"]


def compare(
    doc1: Any,
    doc2: Any,
    config: CompareConfig | None = None,
) -> list[ComparisonNode]:
    """Compare two JSON objects and return the field-by-field comparison tree.

    Args:
        doc1:   Side-1 document, a dict decoded from JSON.
        doc2:   Side-2 document, a dict decoded from JSON.
        config: Comparison options.  Defaults to ``CompareConfig()`` when None.

    Returns:
        The ordered top-level ``ComparisonNode`` list.

    Raises:
        InvalidRootTypeError: If either document is not a JSON object.
    """
    return TreeComparator(config=config).compare(doc1, doc2)


def compare_text(
    text1: str | bytes,
    text2: str | bytes,
    config: CompareConfig | None = None,
) -> list[ComparisonNode]:
    """Decode two JSON texts with ``json.loads`` and compare them.

    Decoding errors are the parser's: ``json.JSONDecodeError`` propagates
    unchanged and no comparison is attempted.  ``NaN``, ``Infinity`` and
    ``-Infinity`` are rejected with ``ValueError``.
    """
    doc1 = json.loads(text1, parse_constant=reject_constant)
    doc2 = json.loads(text2, parse_constant=reject_constant)
    return compare(doc1, doc2, config=config)


def is_identical(
    doc1: Any,
    doc2: Any,
    config: CompareConfig | None = None,
) -> bool:
    """Return True if every field of the two JSON objects matches."""
    return all(node.matched for node in compare(doc1, doc2, config=config))


def mismatched_paths(
    doc1: Any,
    doc2: Any,
    config: CompareConfig | None = None,
) -> list[str]:
    """Return the JSON Pointers of every mismatched leaf, in tree order.

    Example::

        mismatched_paths({"x": [1, 2]}, {"x": [1]})   # ["/x/1"]
    """
    return [pointer for pointer, _ in mismatches(compare(doc1, doc2, config=config))]
