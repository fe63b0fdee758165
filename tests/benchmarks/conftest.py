"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible objects. No random values.
Three tiers: 10-key flat, 100-key nested, 500-key deeply nested.
Each tier provides both "identical" and "drifted" pair generators; drifted
pairs change every third leaf, drop one key per group and shorten arrays.
"""

from __future__ import annotations

from typing import Any

import pytest


def _flat(num_keys: int) -> dict[str, Any]:
    return {f"field_{i}": f"value_{i}" for i in range(num_keys)}


def _nested_100() -> dict[str, Any]:
    """10 sections x (8 leaf keys + one 1-element array) = 100 keys."""
    return {
        f"section_{i}": {
            **{f"field_{i}_{j}": j * 1.5 for j in range(8)},
            "items": [{"id": i}],
        }
        for i in range(10)
    }


def _nested_500() -> dict[str, Any]:
    """5 sections x 5 groups x (12 leaves + details object + tags array) = ~500 keys."""
    doc: dict[str, Any] = {}
    for i in range(5):
        section: dict[str, Any] = {}
        for j in range(5):
            group: dict[str, Any] = {f"leaf_{k}": f"v_{i}_{j}_{k}" for k in range(12)}
            group["details"] = {f"detail_{k}": k for k in range(4)}
            group["tags"] = [f"t{k}" for k in range(3)]
            section[f"group_{j}"] = group
        doc[f"section_{i}"] = section
    return doc


def _drift(value: Any, depth: int = 0) -> Any:
    """Return a copy of ``value`` with deterministic edits at every level."""
    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for n, (k, v) in enumerate(value.items()):
            if n == 1 and depth > 0:
                continue
            out[k] = _drift(v, depth + 1)
            if n % 3 == 0 and not isinstance(v, (dict, list)):
                out[k] = f"{v}!"
        return out
    if isinstance(value, list):
        return [_drift(v, depth + 1) for v in value[:-1]]
    return value


@pytest.fixture
def pair_10key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return _flat(10), _flat(10)


@pytest.fixture
def pair_10key_drifted() -> tuple[dict[str, Any], dict[str, Any]]:
    return _flat(10), _drift(_flat(10))


@pytest.fixture
def pair_100key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return _nested_100(), _nested_100()


@pytest.fixture
def pair_100key_drifted() -> tuple[dict[str, Any], dict[str, Any]]:
    return _nested_100(), _drift(_nested_100())


@pytest.fixture
def pair_500key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return _nested_500(), _nested_500()


@pytest.fixture
def pair_500key_drifted() -> tuple[dict[str, Any], dict[str, Any]]:
    return _nested_500(), _drift(_nested_500())
