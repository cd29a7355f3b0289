"""ValueKind StrEnum and kind classification for JSON-shaped tree values.

Tree values are plain Python values: ``None``, ``bool``, ``int``, ``float``,
``str``, ``list`` and ``dict`` with string keys.  The diff engine dispatches
on ``value_kind`` instead of a class hierarchy.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

from json_tree_diff.errors import TreeConversionError

# Type alias for valid tree values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names:
    - NULL   -> "null"
    - BOOL   -> "bool"
    - NUMBER -> "number" : int-typed or float-typed
    - STRING -> "string"
    - ARRAY  -> "array"  : ordered list
    - OBJECT -> "object" : string-keyed mapping, key order not significant
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_composite(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def value_kind(value: Any) -> ValueKind:
    """Return the ``ValueKind`` of a tree value.

    Raises:
        TreeConversionError: If *value* is not one of the six tree kinds.
    """
    # bool MUST be checked before int -- bool subclasses int
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TreeConversionError(f"Unsupported tree value type: {type(value)!r}")
