"""CompareConfig and its option enums.

CompareConfig is a frozen (immutable) dataclass holding the comparison
options.  NumericEquality selects how two JSON numbers are judged equal;
ContainerRendering selects what a container node shows in value1/value2.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["CompareConfig", "ContainerRendering", "NumericEquality"]


class NumericEquality(StrEnum):
    """How two JSON numbers are compared.

    - VALUE:  By numeric value.  ``1`` and ``1.0`` are equal.
    - STRICT: By value AND representation.  An integer literal never equals a
              float literal, so ``1`` and ``1.0`` differ.
    """

    VALUE = auto()
    STRICT = auto()


class ContainerRendering(StrEnum):
    """What a container node (object/array on both sides) renders as.

    - EMPTY:  Empty string.
    - MARKER: A type marker, ``{...}`` for objects and ``[...]`` for arrays.
    """

    EMPTY = auto()
    MARKER = auto()


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Immutable configuration for TreeComparator.

    Attributes:
        numeric_equality: How numbers are compared.  Default ``VALUE``.
        container_rendering: Rendering for container nodes.  Default ``EMPTY``.
        null_equals_missing: When True, object members whose value is JSON null
            are dropped before comparison, so ``{"x": null}`` equals ``{}``.
            Default False.
    """

    numeric_equality: NumericEquality = NumericEquality.VALUE
    container_rendering: ContainerRendering = ContainerRendering.EMPTY
    null_equals_missing: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.numeric_equality, NumericEquality):
            msg = f"numeric_equality must be a NumericEquality, got {self.numeric_equality!r}"
            raise ValueError(msg)
        if not isinstance(self.container_rendering, ContainerRendering):
            msg = (
                "container_rendering must be a ContainerRendering, "
                f"got {self.container_rendering!r}"
            )
            raise ValueError(msg)
        if not isinstance(self.null_equals_missing, bool):
            msg = f"null_equals_missing must be a bool, got {self.null_equals_missing!r}"
            raise ValueError(msg)
