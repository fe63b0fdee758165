"""Helpers that walk a comparison tree for machine or human consumption.

Full field paths are reconstructed from tree position as JSON Pointers
(RFC 6901): root fields are "/name", array elements "/items/0".
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from json_field_diff.tree.nodes import ComparisonNode

__all__ = [
    "format_table",
    "iter_nodes",
    "json_pointer",
    "mismatches",
    "to_jsonable",
]

_ABSENT = "-"
_HEADERS = ("Field", "Value 1", "Value 2", "Match")
_INDENT = "  "


def json_pointer(segments: Iterable[str]) -> str:
    """Join path segments into an RFC 6901 JSON Pointer.

    ``~`` is escaped as ``~0`` before ``/`` is escaped as ``~1``.
    """
    return "".join(
        "/" + segment.replace("~", "~0").replace("/", "~1") for segment in segments
    )


def iter_nodes(
    nodes: Sequence[ComparisonNode],
) -> Iterator[tuple[str, ComparisonNode]]:
    """Yield ``(pointer, node)`` for every node, depth-first pre-order."""
    for top in nodes:
        for segments, node in top.walk():
            yield json_pointer(segments), node


def mismatches(
    nodes: Sequence[ComparisonNode],
) -> list[tuple[str, ComparisonNode]]:
    """Return ``(pointer, node)`` for every mismatched leaf.

    Container nodes whose mismatch comes from their children are not listed;
    their offending descendants are.
    """
    return [
        (pointer, node)
        for pointer, node in iter_nodes(nodes)
        if node.is_leaf and not node.matched
    ]


def to_jsonable(nodes: Sequence[ComparisonNode]) -> list[dict[str, Any]]:
    """Return the comparison as plain lists and dicts, ready for ``json.dumps``."""
    return [node.to_dict() for node in nodes]


def format_table(
    nodes: Sequence[ComparisonNode], only_mismatches: bool = False
) -> str:
    """Render a comparison as an indented plain-text table.

    Nested fields are indented under their parent.  Absent values show as
    ``-``.  With ``only_mismatches=True``, matched subtrees are skipped but
    the ancestors of every mismatch are kept for context.

    Args:
        nodes:           Top-level nodes returned by ``compare``.
        only_mismatches: Hide matched nodes.

    Returns:
        The table as a single string without a trailing newline.
    """
    rows: list[tuple[str, str, str, str]] = [_HEADERS]
    for top in nodes:
        for segments, node in top.walk():
            # Everything beneath a matched node is matched too.
            if only_mismatches and node.matched:
                continue
            rows.append(
                (
                    _INDENT * (len(segments) - 1) + node.field_path,
                    _ABSENT if node.value1 is None else node.value1,
                    _ABSENT if node.value2 is None else node.value2,
                    "yes" if node.matched else "no",
                )
            )

    widths = [max(len(row[col]) for row in rows) for col in range(len(_HEADERS))]
    lines = []
    for i, row in enumerate(rows):
        cells = (cell.ljust(width) for cell, width in zip(row, widths, strict=True))
        lines.append("  ".join(cells).rstrip())
        if i == 0:
            lines.append("  ".join("-" * width for width in widths))
    return "\n".join(lines)
