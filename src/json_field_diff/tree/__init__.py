"""Tree subpackage for comparison-tree primitives.

Re-exports the public API for the tree module:
- ComparisonNode: frozen dataclass representing one field path in a comparison
- DiffStatus: StrEnum explaining why a node matched or not
- JsonKind: StrEnum of the six JSON value kinds
- kind_of / render_value / render_container: classification and rendering helpers
"""

from json_field_diff.tree.nodes import ComparisonNode, DiffStatus, JsonKind
from json_field_diff.tree.values import (
    JsonValue,
    kind_of,
    render_container,
    render_value,
)

__all__ = [
    "ComparisonNode",
    "DiffStatus",
    "JsonKind",
    "JsonValue",
    "kind_of",
    "render_container",
    "render_value",
]
