"""pytest plugin for json-field-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_field_diff import CompareConfig, compare
from json_field_diff.report import mismatches


@pytest.fixture(scope="session")
def assert_json_fields_match() -> Any:
    """Fixture that returns a callable field-by-field JSON asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh TreeComparator per call).

    Usage in tests::

        def test_payload(assert_json_fields_match):
            assert_json_fields_match({"id": 1, "tags": ["a"]}, {"id": 1.0, "tags": ["a"]})

        def test_drift(assert_json_fields_match):
            with pytest.raises(AssertionError, match=r"/id"):
                assert_json_fields_match({"id": 1}, {"id": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when any field differs.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: CompareConfig | None = None,
    ) -> None:
        """Assert that two JSON objects agree on every field.

        Args:
            actual:   The JSON object produced by the code under test (side 1).
            expected: The expected/reference JSON object (side 2).
            config:   Optional CompareConfig for custom comparison options.

        Raises:
            AssertionError: When any field mismatches, with one line per
                mismatched JSON Pointer showing both renderings and the status.
        """
        found = mismatches(compare(actual, expected, config=config))
        if found:
            lines = [
                f"  {pointer}: {node.value1!r} != {node.value2!r} ({node.status})"
                for pointer, node in found
            ]
            raise AssertionError(
                f"JSON documents differ in {len(found)} field(s):\n" + "\n".join(lines)
            )

    return _assert
