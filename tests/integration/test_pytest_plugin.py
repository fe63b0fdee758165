"""Integration tests for the json-field-diff pytest plugin.

These tests verify that the assert_json_fields_match fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-field-diff to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_field_diff import CompareConfig, NumericEquality


def test_fixture_passes_matching_docs(assert_json_fields_match: Any) -> None:
    """Documents that agree on every field pass, including 1 vs 1.0."""
    assert_json_fields_match({"id": 1, "tags": ["a", "b"]}, {"id": 1.0, "tags": ["a", "b"]})


def test_fixture_fails_on_changed_value(assert_json_fields_match: Any) -> None:
    with pytest.raises(AssertionError, match=r"/id: '1' != '2' \(changed\)"):
        assert_json_fields_match({"id": 1}, {"id": 2})


def test_fixture_reports_every_mismatch(assert_json_fields_match: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_fields_match({"a": [1, 2], "b": "x"}, {"a": [1], "c": "y"})

    message = str(exc_info.value)
    assert "differ in 3 field(s)" in message
    assert "/a/1: '2' != None (only_left)" in message
    assert "/b:" in message
    assert "/c:" in message


def test_fixture_custom_config(assert_json_fields_match: Any) -> None:
    """Custom CompareConfig parameter should be forwarded to compare()."""
    with pytest.raises(AssertionError, match=r"/x"):
        assert_json_fields_match(
            {"x": 1},
            {"x": 1.0},
            config=CompareConfig(numeric_equality=NumericEquality.STRICT),
        )


def test_fixture_returns_callable(assert_json_fields_match: Any) -> None:
    """The fixture should return a callable, not None or a direct assertion result."""
    assert callable(assert_json_fields_match)


def test_plugin_discovery() -> None:
    """Verify assert_json_fields_match appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).parent.parent.parent),
    )
    assert "assert_json_fields_match" in result.stdout, (
        f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
    )
