"""Tests for the Difference and ComparisonResult frozen dataclasses.

Covers:
- Derived kind for each combination of present/absent sides
- The both-sides-absent invariant
- Frozen (immutable) enforcement
- ComparisonResult.matches / message
"""

from __future__ import annotations

import copy
import pickle
from dataclasses import FrozenInstanceError

import pytest

from json_tree_diff.algorithm.config import CompareMode, DiffConfig
from json_tree_diff.algorithm.path import ROOT
from json_tree_diff.result import ABSENT, ComparisonResult, DiffKind, Difference

# ---------------------------------------------------------------------------
# Difference
# ---------------------------------------------------------------------------


class TestDifferenceKind:
    def test_not_equal(self) -> None:
        assert Difference(ROOT, 1, 2).kind is DiffKind.NOT_EQUAL

    def test_null_is_a_present_value(self) -> None:
        assert Difference(ROOT, None, 2).kind is DiffKind.NOT_EQUAL

    def test_missing_from_left(self) -> None:
        assert Difference(ROOT, rhs=1).kind is DiffKind.MISSING_FROM_LEFT

    def test_missing_from_right(self) -> None:
        assert Difference(ROOT, lhs=1).kind is DiffKind.MISSING_FROM_RIGHT

    def test_both_absent_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one side"):
            Difference(ROOT)


class TestDifferenceValue:
    def test_defaults(self) -> None:
        difference = Difference(ROOT, 1, 2)
        assert difference.mode is CompareMode.STRICT
        assert difference.unmatched == ()

    def test_frozen(self) -> None:
        difference = Difference(ROOT, 1, 2)
        with pytest.raises(FrozenInstanceError):
            difference.lhs = 3  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Difference(ROOT.field("a"), 1, 2) == Difference(ROOT.field("a"), 1, 2)
        assert Difference(ROOT.field("a"), 1, 2) != Difference(ROOT.field("b"), 1, 2)

    def test_str_renders(self) -> None:
        assert str(Difference(ROOT.field("a"), ABSENT, 1, CompareMode.INCLUSIVE)) == (
            'json atom at path ".a" is missing from actual'
        )


class TestAbsent:
    def test_repr(self) -> None:
        assert repr(ABSENT) == "ABSENT"

    def test_identity_survives_copy_and_pickle(self) -> None:
        assert copy.deepcopy(ABSENT) is ABSENT
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


# ---------------------------------------------------------------------------
# ComparisonResult
# ---------------------------------------------------------------------------


class TestComparisonResult:
    def test_empty_matches(self) -> None:
        result = ComparisonResult(differences=())
        assert result.matches
        assert result.message == ""
        assert result.config == DiffConfig()

    def test_with_differences(self) -> None:
        result = ComparisonResult(
            differences=(
                Difference(ROOT.field("a"), lhs=1),
                Difference(ROOT.field("b"), rhs=1),
            ),
            config=DiffConfig.strict(),
            computation_time_ms=0.5,
        )
        assert not result.matches
        assert result.message == (
            'json atom at path ".a" is missing from rhs\n\n'
            'json atom at path ".b" is missing from lhs'
        )

    def test_frozen(self) -> None:
        result = ComparisonResult(differences=())
        with pytest.raises(FrozenInstanceError):
            result.computation_time_ms = 1.0  # type: ignore[misc]
