"""TreeComparator: field-by-field hierarchical comparison of two JSON objects.

Architecture:
- compare() validates that both roots are JSON objects, then walks both
  documents in lock-step and returns one ComparisonNode per top-level field.
- The walk keeps an explicit stack of open containers rather than recursing,
  so any depth the JSON parser accepts can be compared.
- Object levels iterate the ordered key union: side-1 keys in their own order,
  then side-2-only keys in side-2 order.  Array levels iterate positions
  0..max(len1, len2) - 1; a position past one side's end is absent there.
  With null_equals_missing, null object members count as absent.
- A missing counterpart or a JSON kind mismatch produces a leaf and stops the
  descent.  Same-kind containers descend; same-kind scalars compare by value.
- The comparator holds only its immutable config.  Every call builds a fresh
  tree owned by the caller, so one instance may serve concurrent callers.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from json_field_diff.config import CompareConfig, NumericEquality
from json_field_diff.errors import InvalidRootTypeError
from json_field_diff.tree.nodes import ComparisonNode, DiffStatus, JsonKind
from json_field_diff.tree.values import kind_of, render_container, render_value

__all__ = ["TreeComparator"]

logger = logging.getLogger(__name__)

# Marks a field or array position that does not exist on one side.
_MISSING: Any = object()

# (field_path, side-1 value, side-2 value); either value may be _MISSING.
_Pair = tuple[str, Any, Any]


@dataclass(slots=True)
class _Frame:
    """A container whose children are still being compared."""

    label: str
    kind: JsonKind
    pending: Iterator[_Pair]
    children: list[ComparisonNode] = field(default_factory=list)


class TreeComparator:
    """Compares two decoded JSON objects into a tree of ComparisonNode.

    The inputs are assumed to be well-formed trees as produced by
    ``json.loads``; decoding and its failures belong to the caller.  The only
    error this class raises for well-formed input is ``InvalidRootTypeError``,
    when either root is not a JSON object.

    Example::

        from json_field_diff.comparator import TreeComparator

        cmp = TreeComparator()
        nodes = cmp.compare({"x": {"y": 1, "z": 2}}, {"x": {"y": 1, "z": 3}})
        x = nodes[0]
        print(x.matched)                             # False
        print([c.field_path for c in x.children])    # ["y", "z"]
        print(x.children[1].value1, x.children[1].value2)   # 2 3
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison options.  Defaults to ``CompareConfig()``.
        """
        self._config: CompareConfig = config if config is not None else CompareConfig()

    @property
    def config(self) -> CompareConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, doc1: Any, doc2: Any) -> list[ComparisonNode]:
        """Compare two JSON objects field by field.

        Args:
            doc1: Side-1 document; must be a dict.
            doc2: Side-2 document; must be a dict.

        Returns:
            One ComparisonNode per field of the ordered key union.  Two empty
            objects produce an empty list.

        Raises:
            InvalidRootTypeError: If either document is not a JSON object.
            TypeError: If either document contains a non-JSON Python value.
        """
        t0 = time.perf_counter()

        for side, doc in ((1, doc1), (2, doc2)):
            kind = kind_of(doc)
            if kind is not JsonKind.OBJECT:
                raise InvalidRootTypeError(side, kind)

        nodes = self._walk(self._object_pairs(doc1, doc2))

        if logger.isEnabledFor(logging.DEBUG):
            total = sum(1 for node in nodes for _ in node.walk())
            mismatched = sum(1 for node in nodes if not node.matched)
            logger.debug(
                "compared %d top-level fields (%d nodes, %d mismatched) in %.3f ms",
                len(nodes),
                total,
                mismatched,
                (time.perf_counter() - t0) * 1000.0,
            )
        return nodes

    # ------------------------------------------------------------------
    # Tree walk
    # ------------------------------------------------------------------

    def _walk(self, pairs: Iterator[_Pair]) -> list[ComparisonNode]:
        """Compare every pair and everything nested beneath them.

        Keeps an explicit stack of open containers; nesting depth is not
        limited by the interpreter recursion limit.  A container's node is
        built once all of its children are.
        """
        root = _Frame("", JsonKind.OBJECT, pairs)
        stack = [root]
        while stack:
            frame = stack[-1]
            pair = next(frame.pending, None)
            if pair is None:
                stack.pop()
                if stack:
                    stack[-1].children.append(
                        self._container(frame.label, frame.kind, frame.children)
                    )
                continue

            label, v1, v2 = pair
            outcome = self._compare_field(label, v1, v2)
            if isinstance(outcome, ComparisonNode):
                frame.children.append(outcome)
            elif outcome is JsonKind.OBJECT:
                stack.append(_Frame(label, outcome, self._object_pairs(v1, v2)))
            else:
                stack.append(_Frame(label, outcome, _array_pairs(v1, v2)))
        return root.children

    def _object_pairs(
        self, obj1: dict[str, Any], obj2: dict[str, Any]
    ) -> Iterator[_Pair]:
        """Yield ``(key, v1, v2)`` over the ordered key union.

        With null_equals_missing, null members are treated as absent.  The
        filtered dicts are shallow copies; input is never mutated.
        """
        if self._config.null_equals_missing:
            obj1 = {k: v for k, v in obj1.items() if v is not None}
            obj2 = {k: v for k, v in obj2.items() if v is not None}
        for key, v1 in obj1.items():
            yield key, v1, obj2.get(key, _MISSING)
        for key, v2 in obj2.items():
            if key not in obj1:
                yield key, _MISSING, v2

    # ------------------------------------------------------------------
    # Per-field comparison
    # ------------------------------------------------------------------

    def _compare_field(self, label: str, v1: Any, v2: Any) -> ComparisonNode | JsonKind:
        """Compare the values found under one key or index on each side.

        Returns the finished leaf node, or the shared container kind when both
        sides hold the same kind of container and the walk must descend.
        """
        # Both absent cannot happen: labels come from the union of both sides.
        if v1 is _MISSING:
            return ComparisonNode(
                field_path=label,
                value1=None,
                value2=render_value(v2),
                matched=False,
                status=DiffStatus.ONLY_RIGHT,
                kind2=kind_of(v2),
            )
        if v2 is _MISSING:
            return ComparisonNode(
                field_path=label,
                value1=render_value(v1),
                value2=None,
                matched=False,
                status=DiffStatus.ONLY_LEFT,
                kind1=kind_of(v1),
            )

        kind1 = kind_of(v1)
        kind2 = kind_of(v2)
        if kind1 is not kind2:
            return ComparisonNode(
                field_path=label,
                value1=render_value(v1),
                value2=render_value(v2),
                matched=False,
                status=DiffStatus.TYPE_CHANGED,
                kind1=kind1,
                kind2=kind2,
            )

        if kind1.is_container:
            return kind1

        equal = self._scalars_equal(kind1, v1, v2)
        return ComparisonNode(
            field_path=label,
            value1=render_value(v1),
            value2=render_value(v2),
            matched=equal,
            status=DiffStatus.EQUAL if equal else DiffStatus.CHANGED,
            kind1=kind1,
            kind2=kind2,
        )

    def _container(
        self, label: str, kind: JsonKind, children: list[ComparisonNode]
    ) -> ComparisonNode:
        matched = all(child.matched for child in children)
        rendering = render_container(kind, self._config.container_rendering)
        return ComparisonNode(
            field_path=label,
            value1=rendering,
            value2=rendering,
            matched=matched,
            status=DiffStatus.EQUAL if matched else DiffStatus.CHILDREN_DIFFER,
            kind1=kind,
            kind2=kind,
            children=tuple(children),
        )

    def _scalars_equal(self, kind: JsonKind, v1: Any, v2: Any) -> bool:
        """Exact value equality for two scalars of the same JSON kind."""
        if (
            kind is JsonKind.NUMBER
            and self._config.numeric_equality is NumericEquality.STRICT
            and type(v1) is not type(v2)
        ):
            return False
        return bool(v1 == v2)


def _array_pairs(arr1: list[Any], arr2: list[Any]) -> Iterator[_Pair]:
    """Yield ``(index, v1, v2)`` for positions 0..max(len1, len2) - 1."""
    n1 = len(arr1)
    n2 = len(arr2)
    for idx in range(max(n1, n2)):
        yield (
            str(idx),
            arr1[idx] if idx < n1 else _MISSING,
            arr2[idx] if idx < n2 else _MISSING,
        )
