"""JSON field diff - hierarchical field-by-field comparison of JSON documents."""

from __future__ import annotations

from json_field_diff.api import (
    compare,
    compare_text,
    is_identical,
    mismatched_paths,
)
from json_field_diff.comparator import TreeComparator
from json_field_diff.config import CompareConfig, ContainerRendering, NumericEquality
from json_field_diff.errors import InvalidRootTypeError, JsonFieldDiffError
from json_field_diff.result import ComparisonSummary, summarize
from json_field_diff.tree.nodes import ComparisonNode, DiffStatus, JsonKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompareConfig",
    "ComparisonNode",
    "ComparisonSummary",
    "ContainerRendering",
    "DiffStatus",
    "InvalidRootTypeError",
    "JsonFieldDiffError",
    "JsonKind",
    "NumericEquality",
    "TreeComparator",
    "compare",
    "compare_text",
    "is_identical",
    "mismatched_paths",
    "summarize",
]
