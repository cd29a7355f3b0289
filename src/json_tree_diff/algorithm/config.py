"""DiffConfig, CompareMode and NumericMode for diff engine configuration.

DiffConfig is a frozen (immutable) dataclass holding the two comparison
policies.  It is passed explicitly through every step of a comparison and
is never stored as module-level state, so comparisons under different
configurations can run side by side.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum, auto


class CompareMode(StrEnum):
    """How composite (array / object) children are reconciled.

    - STRICT:    Symmetric.  Both sides must have exactly the same keys/indices.
    - INCLUSIVE: The right-hand ("expected") side may be a subset of the
                 left-hand ("actual") side.  Extra lhs keys/elements are ignored.
    - CONTAINS:  Like INCLUSIVE for objects; arrays are compared as multisets
                 (order-independent, multiplicity-respecting embedding).
    """

    STRICT = auto()
    INCLUSIVE = auto()
    CONTAINS = auto()


class NumericMode(StrEnum):
    """Whether integer- and float-typed numbers of equal magnitude are equal.

    - STRICT:       ``1`` and ``1.0`` differ.
    - ASSUME_FLOAT: Both operands are converted to ``float`` before comparing.
    """

    STRICT = auto()
    ASSUME_FLOAT = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for one comparison.

    Attributes:
        compare_mode: How arrays and objects are reconciled.  Plain strings
            such as ``"inclusive"`` are coerced to ``CompareMode``.
        numeric_mode: How numbers are compared.  Plain strings such as
            ``"assume_float"`` are coerced to ``NumericMode``.
    """

    compare_mode: CompareMode = CompareMode.STRICT
    numeric_mode: NumericMode = NumericMode.STRICT

    def __post_init__(self) -> None:
        try:
            compare_mode = CompareMode(self.compare_mode)
        except ValueError:
            allowed = [m.value for m in CompareMode]
            msg = f"compare_mode must be one of {allowed}, got {self.compare_mode!r}"
            raise ValueError(msg) from None
        try:
            numeric_mode = NumericMode(self.numeric_mode)
        except ValueError:
            allowed = [m.value for m in NumericMode]
            msg = f"numeric_mode must be one of {allowed}, got {self.numeric_mode!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "compare_mode", compare_mode)
        object.__setattr__(self, "numeric_mode", numeric_mode)

    @classmethod
    def strict(cls, numeric_mode: NumericMode = NumericMode.STRICT) -> DiffConfig:
        return cls(CompareMode.STRICT, numeric_mode)

    @classmethod
    def inclusive(cls, numeric_mode: NumericMode = NumericMode.STRICT) -> DiffConfig:
        return cls(CompareMode.INCLUSIVE, numeric_mode)

    @classmethod
    def contains(cls, numeric_mode: NumericMode = NumericMode.STRICT) -> DiffConfig:
        return cls(CompareMode.CONTAINS, numeric_mode)

    def with_numeric_mode(self, numeric_mode: NumericMode) -> DiffConfig:
        """Return a copy of this config using *numeric_mode*."""
        return replace(self, numeric_mode=numeric_mode)
