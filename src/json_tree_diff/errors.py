"""Exception types for json-tree-diff.

Two failure classes are kept apart on purpose:

- ``TreeConversionError``: the inputs could not even be turned into tree
  values, so no comparison took place.
- ``JsonMismatchError``: the comparison ran and found differences.  Raised
  only by the assertion helpers; the diff engine itself returns differences
  as data and never raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_tree_diff.result import Difference

__all__ = ["JsonMismatchError", "TreeConversionError"]


class TreeConversionError(TypeError):
    """A value cannot be represented as a JSON-shaped tree value.

    Attributes:
        path: Rendered location of the offending value (``(root)`` when the
            top-level value itself is unsupported), or ``None`` when unknown.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message if path is None else f"{message} at path {path!r}")
        self.path = path


class JsonMismatchError(AssertionError):
    """Two tree values differ.

    Attributes:
        differences: The ``Difference`` records found, in discovery order.
    """

    def __init__(self, message: str, differences: list[Difference]) -> None:
        super().__init__(message)
        self.differences = differences
