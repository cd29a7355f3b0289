"""Integration tests for the json-tree-diff pytest plugin.

These tests check that the assert_json_* fixtures are auto-discovered via
the pytest11 entry point and behave correctly.

NOTE: These tests require json-tree-diff to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixtures.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_tree_diff import DiffConfig, NumericMode


def test_eq_fixture_passes_identical_docs(assert_json_eq: Any) -> None:
    assert_json_eq({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]})


def test_eq_fixture_fails_with_path(assert_json_eq: Any) -> None:
    with pytest.raises(AssertionError, match=r'path "\.a\[1\]" is missing from rhs'):
        assert_json_eq({"a": [1, 2]}, {"a": [1]})


def test_eq_fixture_numeric_mode(assert_json_eq: Any) -> None:
    assert_json_eq({"x": 1}, {"x": 1.0}, numeric_mode=NumericMode.ASSUME_FLOAT)


def test_include_fixture_allows_superset(assert_json_include: Any) -> None:
    assert_json_include({"id": 1, "name": "x"}, {"id": 1})


def test_include_fixture_reports_missing(assert_json_include: Any) -> None:
    with pytest.raises(AssertionError, match="is missing from actual"):
        assert_json_include({"id": 1}, {"id": 1, "name": "x"})


def test_contains_fixture_ignores_order(assert_json_contains: Any) -> None:
    assert_json_contains({"tags": ["b", "a", "c"]}, {"tags": ["a", "b"]})


def test_contains_fixture_reports_unmatched(assert_json_contains: Any) -> None:
    with pytest.raises(AssertionError, match=r"at indices \[1\]"):
        assert_json_contains({"tags": ["b", "a"]}, {"tags": ["a", "z"]})


def test_matches_fixture_forwards_config(assert_json_matches: Any) -> None:
    assert_json_matches([3, 1, 2], [1, 2], DiffConfig.contains())
    with pytest.raises(AssertionError, match="does not contain"):
        assert_json_matches([3, 1, 2], [1, 1], DiffConfig.contains())


def test_fixtures_return_callables(
    assert_json_eq: Any,
    assert_json_include: Any,
    assert_json_contains: Any,
    assert_json_matches: Any,
) -> None:
    assert callable(assert_json_eq)
    assert callable(assert_json_include)
    assert callable(assert_json_contains)
    assert callable(assert_json_matches)


def test_plugin_discovery() -> None:
    """Verify the fixtures appear in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    for name in (
        "assert_json_eq",
        "assert_json_include",
        "assert_json_contains",
        "assert_json_matches",
    ):
        assert name in result.stdout, (
            f"{name} not found in pytest --fixtures output.\n"
            f"stdout:\n{result.stdout}\n"
            f"stderr:\n{result.stderr}"
        )
