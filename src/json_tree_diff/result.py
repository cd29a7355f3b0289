"""Difference and ComparisonResult dataclasses for diff output.

``Difference`` is the record emitted by the diff engine, one per
irreconcilable location.  ``ComparisonResult`` is the richer value returned
by ``JsonComparator.compare()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any, Final

from json_tree_diff.algorithm.config import CompareMode, DiffConfig
from json_tree_diff.algorithm.path import Path

__all__ = ["ABSENT", "ComparisonResult", "DiffKind", "Difference"]


class _Absent:
    """Marker for a side that has no value at a path (JSON null is a value)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


class DiffKind(StrEnum):
    """What kind of disagreement a ``Difference`` describes.

    - NOT_EQUAL:          Both sides have a value and they disagree.
    - MISSING_FROM_LEFT:  Only the right-hand side has a value at the path.
    - MISSING_FROM_RIGHT: Only the left-hand side has a value at the path.
    """

    NOT_EQUAL = auto()
    MISSING_FROM_LEFT = auto()
    MISSING_FROM_RIGHT = auto()


@dataclass(frozen=True, slots=True)
class Difference:
    """One path-qualified disagreement between two tree values.

    Attributes:
        path:      Where the disagreement was found.
        lhs:       Left-hand value at *path*, or ``ABSENT``.
        rhs:       Right-hand value at *path*, or ``ABSENT``.
        mode:      The compare mode that produced this record.  Only affects
                   how the record is labelled when rendered.
        unmatched: For a failed array containment check, the indices of
                   right-hand elements that found no partner on the left.
    """

    path: Path
    lhs: Any = ABSENT
    rhs: Any = ABSENT
    mode: CompareMode = CompareMode.STRICT
    unmatched: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.lhs is ABSENT and self.rhs is ABSENT:
            msg = f"Difference at {self.path} must have at least one side present"
            raise ValueError(msg)

    @property
    def kind(self) -> DiffKind:
        if self.lhs is ABSENT:
            return DiffKind.MISSING_FROM_LEFT
        if self.rhs is ABSENT:
            return DiffKind.MISSING_FROM_RIGHT
        return DiffKind.NOT_EQUAL

    def __str__(self) -> str:
        from json_tree_diff.formatter import render

        return render(self)


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a ``JsonComparator.compare()`` call.

    Attributes:
        differences: Every ``Difference`` found, in discovery order
            (depth-first, left to right).
        config: The configuration the comparison ran under.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds.
    """

    differences: tuple[Difference, ...]
    config: DiffConfig = field(default_factory=DiffConfig)
    computation_time_ms: float = 0.0

    @property
    def matches(self) -> bool:
        return not self.differences

    @property
    def message(self) -> str:
        """Rendered differences joined by blank lines; ``""`` when matching."""
        from json_tree_diff.formatter import render_all

        return render_all(self.differences)
