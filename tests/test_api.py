"""Unit tests for the public API functions: compare, compare_text, is_identical, mismatched_paths."""

from __future__ import annotations

import json

import pytest

from json_field_diff import (
    CompareConfig,
    ComparisonNode,
    InvalidRootTypeError,
    NumericEquality,
    compare,
    compare_text,
    is_identical,
    mismatched_paths,
)


class TestCompare:
    """Tests for the compare() function."""

    def test_returns_list_of_nodes(self) -> None:
        nodes = compare({"a": 1}, {"a": 1})
        assert isinstance(nodes, list)
        assert all(isinstance(n, ComparisonNode) for n in nodes)

    def test_missing_field_example(self) -> None:
        (x,) = compare({"x": 1}, {})
        assert x.field_path == "x"
        assert x.matched is False
        assert x.value1 == "1"
        assert x.value2 is None

    def test_config_passthrough_strict_numbers(self) -> None:
        (node,) = compare({"k": 1}, {"k": 1.0}, config=CompareConfig(numeric_equality=NumericEquality.STRICT))
        assert node.matched is False

    def test_config_passthrough_null_equals_missing(self) -> None:
        assert compare({"x": None}, {}, config=CompareConfig(null_equals_missing=True)) == []

    def test_invalid_root_propagates(self) -> None:
        with pytest.raises(InvalidRootTypeError):
            compare([1], {"a": 1})

    def test_no_global_state_between_calls(self) -> None:
        assert compare({"a": [1]}, {"a": [2]}) == compare({"a": [1]}, {"a": [2]})


class TestCompareText:
    """Tests for the compare_text() function."""

    def test_decodes_and_compares(self) -> None:
        (x,) = compare_text('{"x": {"y": 1}}', '{"x": 5}')
        assert x.matched is False
        assert x.children == ()

    def test_accepts_bytes(self) -> None:
        (x,) = compare_text(b'{"x": 1}', b'{"x": 1.0}')
        assert x.matched is True

    def test_preserves_document_key_order(self) -> None:
        nodes = compare_text('{"b": 1, "a": 2}', '{"c": 0, "a": 2}')
        assert [n.field_path for n in nodes] == ["b", "a", "c"]

    def test_malformed_json_raises_decode_error(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            compare_text('{"a": ', "{}")

    def test_non_object_root_raises(self) -> None:
        with pytest.raises(InvalidRootTypeError) as exc_info:
            compare_text("{}", "[1, 2]")
        assert exc_info.value.side == 2

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_numbers_rejected(self, literal: str) -> None:
        with pytest.raises(ValueError, match="non-finite number"):
            compare_text(f'{{"x": {literal}}}', "{}")

    def test_non_finite_number_in_second_document_rejected(self) -> None:
        with pytest.raises(ValueError, match="NaN"):
            compare_text("{}", '{"x": [1, NaN]}')


class TestIsIdentical:
    """Tests for the is_identical() function."""

    def test_identical_documents(self) -> None:
        doc = {"a": [1, {"b": None}], "c": "x"}
        assert is_identical(doc, doc) is True

    def test_empty_documents(self) -> None:
        assert is_identical({}, {}) is True

    def test_differing_documents(self) -> None:
        assert is_identical({"a": [1, 2]}, {"a": [1]}) is False

    def test_int_float_identical_by_default(self) -> None:
        assert is_identical({"a": 1}, {"a": 1.0}) is True

    def test_int_float_not_identical_when_strict(self) -> None:
        config = CompareConfig(numeric_equality=NumericEquality.STRICT)
        assert is_identical({"a": 1}, {"a": 1.0}, config=config) is False


class TestMismatchedPaths:
    """Tests for the mismatched_paths() function."""

    def test_no_mismatches(self) -> None:
        assert mismatched_paths({"a": 1}, {"a": 1}) == []

    def test_array_length_skew(self) -> None:
        assert mismatched_paths({"x": [1, 2]}, {"x": [1]}) == ["/x/1"]

    def test_nested_and_missing(self) -> None:
        paths = mismatched_paths(
            {"x": {"y": 1, "z": 2}, "only1": True},
            {"x": {"y": 1, "z": 3}, "only2": False},
        )
        assert paths == ["/x/z", "/only1", "/only2"]

    def test_type_mismatch_reported_once(self) -> None:
        assert mismatched_paths({"x": {"y": 1}}, {"x": 5}) == ["/x"]

    def test_pointer_escaping(self) -> None:
        assert mismatched_paths({"a/b": 1, "m~n": 1}, {"a/b": 2, "m~n": 2}) == [
            "/a~1b",
            "/m~0n",
        ]
