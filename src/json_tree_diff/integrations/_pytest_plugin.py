"""Fixtures exposing the ``assert_json_*`` helpers to test functions.

Registered under the ``pytest11`` entry-point group, so any environment that
has json-tree-diff installed gets the fixtures without touching conftest.py.
Each fixture is session-scoped and hands back the matching function from
``json_tree_diff.api`` unchanged.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_diff import api


@pytest.fixture(scope="session")
def assert_json_eq() -> Any:
    """Fixture returning the strict JSON asserter.

    Usage in tests::

        def test_payload(assert_json_eq):
            assert_json_eq(response.json(), {"id": 1, "tags": ["a"]})

    Returns:
        ``assert_json_eq(lhs, rhs, numeric_mode=NumericMode.STRICT) -> None``,
        raising ``JsonMismatchError`` (an ``AssertionError``) listing every
        difference with its path.
    """
    return api.assert_json_eq


@pytest.fixture(scope="session")
def assert_json_include() -> Any:
    """Fixture returning the inclusive JSON asserter.

    The expected value may omit object keys and trailing array elements that
    the actual value has::

        def test_partial(assert_json_include):
            assert_json_include({"id": 1, "name": "x"}, {"id": 1})
    """
    return api.assert_json_include


@pytest.fixture(scope="session")
def assert_json_contains() -> Any:
    """Fixture returning the containment JSON asserter.

    Arrays in the expected value match any distinct elements of the actual
    array, in any order::

        def test_tags(assert_json_contains):
            assert_json_contains({"tags": ["b", "a", "c"]}, {"tags": ["a", "b"]})
    """
    return api.assert_json_contains


@pytest.fixture(scope="session")
def assert_json_matches() -> Any:
    """Fixture returning the configurable JSON asserter.

    Usage::

        def test_unordered(assert_json_matches):
            assert_json_matches([3, 1, 2], [1, 2], DiffConfig.contains())
    """
    return api.assert_json_matches
