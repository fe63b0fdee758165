"""ComparisonNode dataclass plus the JsonKind and DiffStatus StrEnums.

Provides the output representation produced by TreeComparator: one node per
field path, nested the same way the compared documents are nested.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = ["ComparisonNode", "DiffStatus", "JsonKind"]


class JsonKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : int, float or Decimal (never bool)
    - STRING  -> "string"
    - ARRAY   -> "array"   : JSON array []
    - OBJECT  -> "object"  : JSON object {}
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (JsonKind.ARRAY, JsonKind.OBJECT)


class DiffStatus(StrEnum):
    """Why a node matched or did not match.

    - EQUAL:           Both sides present and equal (transitively for containers).
    - CHANGED:         Same scalar kind on both sides, different value.
    - TYPE_CHANGED:    Both sides present with different JSON kinds.
    - ONLY_LEFT:       Present on side 1 only.
    - ONLY_RIGHT:      Present on side 2 only.
    - CHILDREN_DIFFER: Same container kind, at least one child did not match.
    """

    EQUAL = auto()
    CHANGED = auto()
    TYPE_CHANGED = auto()
    ONLY_LEFT = auto()
    ONLY_RIGHT = auto()
    CHILDREN_DIFFER = auto()


@dataclass(frozen=True, slots=True)
class ComparisonNode:
    """One field path in a comparison tree.

    Attributes:
        field_path: Key (object member) or index rendered as a string (array
                    element) at this level.  Full paths come from tree position.
        value1:     Rendering of the value on side 1; None when absent there.
                    Container nodes carry the container rendering, never a
                    serialised blob.
        value2:     Same for side 2.
        matched:    True iff this node and every node beneath it agree.
        status:     The DiffStatus behind ``matched``.
        kind1:      JSON kind on side 1; None when absent.
        kind2:      JSON kind on side 2; None when absent.
        children:   Child nodes in deterministic order.  Empty for leaves.
    """

    field_path: str
    value1: str | None
    value2: str | None
    matched: bool
    status: DiffStatus
    kind1: JsonKind | None = None
    kind2: JsonKind | None = None
    children: tuple[ComparisonNode, ...] = field(default_factory=tuple)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_container(self) -> bool:
        """True when both sides hold the same container kind."""
        return (
            self.kind1 is not None
            and self.kind1 == self.kind2
            and self.kind1.is_container
        )

    def walk(
        self, prefix: tuple[str, ...] = ()
    ) -> Iterator[tuple[tuple[str, ...], ComparisonNode]]:
        """Yield ``(path_segments, node)`` for this node and its descendants.

        Depth-first pre-order; ``path_segments`` ends with this node's
        ``field_path``.  Iterative, so arbitrarily deep trees can be walked.
        """
        stack: list[tuple[tuple[str, ...], ComparisonNode]] = [
            ((*prefix, self.field_path), self)
        ]
        while stack:
            segments, node = stack.pop()
            yield segments, node
            for child in reversed(node.children):
                stack.append(((*segments, child.field_path), child))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable dict of this node and its children."""
        root = self._shallow_dict()
        stack = [(self, root)]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                child_out = child._shallow_dict()
                out["children"].append(child_out)
                stack.append((child, child_out))
        return root

    def _shallow_dict(self) -> dict[str, Any]:
        return {
            "field_path": self.field_path,
            "value1": self.value1,
            "value2": self.value2,
            "matched": self.matched,
            "status": str(self.status),
            "children": [],
        }
