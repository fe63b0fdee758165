"""JSON kind classification and value rendering.

``kind_of`` is the single dispatch point that maps a decoded JSON value onto
its JsonKind.  ``render_value`` and ``render_container`` produce the display
strings stored in ComparisonNode.value1 / value2; they carry no comparison
semantics of their own.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, NoReturn

from json_field_diff.config import ContainerRendering
from json_field_diff.tree.nodes import JsonKind

__all__ = [
    "JsonValue",
    "kind_of",
    "reject_constant",
    "render_container",
    "render_value",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | Decimal | bool | None

_MARKERS = {JsonKind.OBJECT: "{...}", JsonKind.ARRAY: "[...]"}


def kind_of(value: Any) -> JsonKind:
    """Classify a decoded JSON value.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Args:
        value: Any value produced by ``json.loads``.

    Returns:
        The JsonKind of ``value``.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def render_value(value: JsonValue) -> str:
    """Return a human-readable rendering of a JSON value.

    Strings render as their raw text, ``true``/``false``/``null`` as JSON
    literals and numbers via ``str()``.  Containers only reach this function
    when they sit on a leaf (missing counterpart or type mismatch); they
    render as compact JSON.
    """
    match kind_of(value):
        case JsonKind.NULL:
            return "null"
        case JsonKind.BOOLEAN:
            return "true" if value else "false"
        case JsonKind.NUMBER | JsonKind.STRING:
            return str(value)
        case JsonKind.ARRAY | JsonKind.OBJECT:
            return json.dumps(
                value, ensure_ascii=False, separators=(",", ":"), default=str
            )


def render_container(kind: JsonKind, mode: ContainerRendering) -> str:
    """Return the rendering of a container node (same container kind on both sides)."""
    if mode is ContainerRendering.MARKER:
        return _MARKERS[kind]
    return ""


def reject_constant(name: str) -> NoReturn:
    """``parse_constant`` hook for ``json.loads`` that refuses non-finite numbers.

    ``NaN``, ``Infinity`` and ``-Infinity`` are not valid JSON; the standard
    library accepts them unless told otherwise.

    Raises:
        ValueError: Always.
    """
    raise ValueError(f"non-finite number {name} is not valid JSON")
