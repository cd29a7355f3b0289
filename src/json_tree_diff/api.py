"""Public API functions for json-tree-diff.

``compare``, ``is_equal`` and ``contains`` operate on tree values and never
raise on a mismatch: differences are returned as data.  The ``assert_json_*``
helpers are the presentation layer on top: they convert their inputs with
``TreeBuilder`` and raise ``JsonMismatchError`` when differences are found.
Each call builds what it needs afresh, so there is no global state between
calls.
"""

from __future__ import annotations

from typing import Any

from json_tree_diff.algorithm.config import DiffConfig, NumericMode
from json_tree_diff.algorithm.engine import diff, matches
from json_tree_diff.comparator import JsonComparator
from json_tree_diff.errors import JsonMismatchError
from json_tree_diff.result import Difference

__all__ = [
    "assert_json_contains",
    "assert_json_eq",
    "assert_json_include",
    "assert_json_matches",
    "compare",
    "contains",
    "diff_message",
    "is_equal",
]


def compare(
    lhs: Any,
    rhs: Any,
    config: DiffConfig | None = None,
) -> list[Difference]:
    """Return the structural differences between two tree values.

    Args:
        lhs:    Left-hand tree value ("actual" in inclusive/contains modes).
        rhs:    Right-hand tree value ("expected" in inclusive/contains modes).
        config: Comparison policies.  Defaults to ``DiffConfig()`` when None.

    Returns:
        Differences in discovery order; an empty list when the values match.
    """
    return diff(lhs, rhs, config)


def is_equal(lhs: Any, rhs: Any, config: DiffConfig | None = None) -> bool:
    """Return True if *lhs* and *rhs* have no difference under *config*."""
    return matches(lhs, rhs, config)


def contains(
    container: Any,
    contained: Any,
    numeric_mode: NumericMode = NumericMode.STRICT,
) -> bool:
    """Return True if *contained* embeds into *container*.

    Arrays are compared as multisets (order-independent, duplicates must be
    matched one-to-one) and objects inclusively, at every depth.

    Example::

        contains([1, 2, 3, 1, 4], [3, 1, 2, 1, 4])   # True
        contains([1, 2, 3], [2, 3, 1, 1])            # False: one 1 available
    """
    return matches(container, contained, DiffConfig.contains(numeric_mode))


def diff_message(lhs: Any, rhs: Any, config: DiffConfig | None = None) -> str | None:
    """Return the rendered differences, or None when the values match.

    Raises:
        TreeConversionError: If either input cannot be represented as a
            tree value.
    """
    result = JsonComparator(config).compare(lhs, rhs)
    return None if result.matches else result.message


def assert_json_matches(lhs: Any, rhs: Any, config: DiffConfig | None = None) -> None:
    """Assert that *lhs* and *rhs* have no difference under *config*.

    Raises:
        JsonMismatchError: When differences are found.  The message lists
            every difference, separated by blank lines.
        TreeConversionError: If either input cannot be represented as a
            tree value.
    """
    result = JsonComparator(config).compare(lhs, rhs)
    if not result.matches:
        raise JsonMismatchError(result.message, list(result.differences))


def assert_json_eq(
    lhs: Any,
    rhs: Any,
    numeric_mode: NumericMode = NumericMode.STRICT,
) -> None:
    """Assert that *lhs* and *rhs* are structurally identical."""
    assert_json_matches(lhs, rhs, DiffConfig.strict(numeric_mode))


def assert_json_include(
    actual: Any,
    expected: Any,
    numeric_mode: NumericMode = NumericMode.STRICT,
) -> None:
    """Assert that *actual* includes everything in *expected*.

    Extra object keys and trailing array elements in *actual* are ignored.
    """
    assert_json_matches(actual, expected, DiffConfig.inclusive(numeric_mode))


def assert_json_contains(
    actual: Any,
    expected: Any,
    numeric_mode: NumericMode = NumericMode.STRICT,
) -> None:
    """Assert that *actual* contains *expected*, with arrays compared as multisets."""
    assert_json_matches(actual, expected, DiffConfig.contains(numeric_mode))
