"""ComparisonSummary dataclass: aggregate counts over a comparison tree.

This module provides the summary type returned by summarize() calls.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from json_field_diff.tree.nodes import ComparisonNode, DiffStatus

__all__ = ["ComparisonSummary", "summarize"]


@dataclass(frozen=True, slots=True)
class ComparisonSummary:
    """Counts derived from one comparison tree.

    Leaf counters partition ``leaf_count``: every leaf is exactly one of
    equal, changed, type_changed, only_left or only_right.  A container node
    with no children (two empty containers) counts as an equal leaf.

    Attributes:
        total_nodes:  Number of nodes at every depth.
        leaf_count:   Number of nodes without children.
        equal:        Leaves whose two sides agree.
        changed:      Leaves with the same scalar kind and different values.
        type_changed: Leaves whose two sides have different JSON kinds.
        only_left:    Leaves present on side 1 only.
        only_right:   Leaves present on side 2 only.
        max_depth:    Deepest nesting level; top-level fields are depth 1,
                      0 for an empty comparison.
    """

    total_nodes: int
    leaf_count: int
    equal: int
    changed: int
    type_changed: int
    only_left: int
    only_right: int
    max_depth: int

    @property
    def mismatched(self) -> int:
        return self.leaf_count - self.equal

    @property
    def all_matched(self) -> bool:
        return self.mismatched == 0


def summarize(nodes: Sequence[ComparisonNode]) -> ComparisonSummary:
    """Return a ComparisonSummary for the top-level nodes of a comparison.

    Args:
        nodes: Top-level nodes returned by ``compare``.

    Returns:
        A ``ComparisonSummary`` with all counters populated.
    """
    total = 0
    max_depth = 0
    leaves: Counter[DiffStatus] = Counter()
    for top in nodes:
        for segments, node in top.walk():
            total += 1
            max_depth = max(max_depth, len(segments))
            if node.is_leaf:
                leaves[node.status] += 1

    return ComparisonSummary(
        total_nodes=total,
        leaf_count=sum(leaves.values()),
        equal=leaves[DiffStatus.EQUAL],
        changed=leaves[DiffStatus.CHANGED],
        type_changed=leaves[DiffStatus.TYPE_CHANGED],
        only_left=leaves[DiffStatus.ONLY_LEFT],
        only_right=leaves[DiffStatus.ONLY_RIGHT],
        max_depth=max_depth,
    )
