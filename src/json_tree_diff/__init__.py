"""json-tree-diff - path-qualified structural differences between JSON values."""

from __future__ import annotations

import logging

from json_tree_diff.algorithm.config import CompareMode, DiffConfig, NumericMode
from json_tree_diff.algorithm.path import ROOT, Path
from json_tree_diff.api import (
    assert_json_contains,
    assert_json_eq,
    assert_json_include,
    assert_json_matches,
    compare,
    contains,
    diff_message,
    is_equal,
)
from json_tree_diff.comparator import JsonComparator
from json_tree_diff.errors import JsonMismatchError, TreeConversionError
from json_tree_diff.formatter import render, render_all
from json_tree_diff.result import ABSENT, ComparisonResult, DiffKind, Difference

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ABSENT",
    "ROOT",
    "CompareMode",
    "ComparisonResult",
    "DiffConfig",
    "DiffKind",
    "Difference",
    "JsonComparator",
    "JsonMismatchError",
    "NumericMode",
    "Path",
    "TreeConversionError",
    "assert_json_contains",
    "assert_json_eq",
    "assert_json_include",
    "assert_json_matches",
    "compare",
    "contains",
    "diff_message",
    "is_equal",
    "render",
    "render_all",
]
