"""Exception types raised by json-field-diff.

Malformed JSON text is not represented here: decoding belongs to the
``json`` module and its ``json.JSONDecodeError`` propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_field_diff.tree.nodes import JsonKind

__all__ = ["InvalidRootTypeError", "JsonFieldDiffError"]


class JsonFieldDiffError(Exception):
    """Base class for all json-field-diff errors."""


class InvalidRootTypeError(JsonFieldDiffError, TypeError):
    """A document handed to ``compare`` is not a JSON object at the top level.

    Attributes:
        side: Which input was rejected, 1 or 2.
        kind: The JSON kind found at that root.
    """

    def __init__(self, side: int, kind: JsonKind) -> None:
        self.side = side
        self.kind = kind
        super().__init__(f"document {side} must be a JSON object at the root, got {kind}")
