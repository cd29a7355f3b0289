"""TreeBuilder: converts arbitrary Python values into JSON-shaped tree values.

This is the adapter that sits in front of the diff engine.  It produces
plain ``None``/``bool``/``int``/``float``/``str``/``list``/``dict`` values:

- ``Mapping``          -> ``dict`` (keys must be ``str``)
- ``list`` / ``tuple`` -> ``list``
- dataclass instance   -> ``dict`` of its fields
- numpy scalar         -> Python scalar via ``.item()``
- numpy array          -> nested ``list`` via ``.tolist()``

Anything else, non-string keys and non-finite floats (NaN / inf have no JSON
representation) raise ``TreeConversionError`` carrying the rendered path of
the offending value.

Containers are created empty and filled from a work stack, so nesting depth
is not limited by the interpreter's recursion limit.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from json_tree_diff.algorithm.path import ROOT, Path
from json_tree_diff.errors import TreeConversionError
from json_tree_diff.tree.nodes import JsonValue

# (value, path, container to store into, key or index within it)
_Slot = tuple[Any, Path, Any, str | int]


@dataclass
class TreeBuilder:
    """Converts a Python value into a tree value.

    The dispatch order matters: bool MUST be checked before int because bool
    is a subclass of int in Python (isinstance(True, int) is True).

    Example::
        builder = TreeBuilder()
        builder.build({"ids": (1, 2)})       # {"ids": [1, 2]}
        builder.build({1: "x"})              # TreeConversionError
    """

    def build(self, value: Any, path: Path = ROOT) -> JsonValue:
        """Convert *value* to a tree value.

        Args:
            value: The value to convert.
            path:  Location of *value*, used in error messages.  Defaults to
                   the root path.

        Returns:
            An equivalent tree value built from fresh containers.

        Raises:
            TreeConversionError: If any part of *value* cannot be represented.
        """
        root: list[JsonValue] = [None]
        pending: list[_Slot] = [(value, path, root, 0)]
        while pending:
            item, here, parent, slot = pending.pop()
            parent[slot] = self._convert(item, here, pending)
        return root[0]

    def _convert(self, value: Any, path: Path, pending: list[_Slot]) -> JsonValue:
        """Convert one value; a container comes back empty with its children queued."""
        if isinstance(value, np.generic):
            value = value.item()
        elif isinstance(value, np.ndarray):
            value = value.tolist()
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}

        if value is None or isinstance(value, (bool, str)):
            return value

        if isinstance(value, int):
            return int(value)

        if isinstance(value, float):
            if not math.isfinite(value):
                raise TreeConversionError(f"Non-finite float {value!r}", str(path))
            return float(value)

        if isinstance(value, Mapping):
            obj: dict[str, Any] = {}
            children: list[_Slot] = []
            for key, val in value.items():
                if not isinstance(key, str):
                    raise TreeConversionError(
                        f"Object key {key!r} is not a string", str(path)
                    )
                # reserve the key so insertion order follows the source
                obj[key] = None
                children.append((val, path.field(key), obj, key))
            pending.extend(reversed(children))
            return obj

        if isinstance(value, (list, tuple)):
            items: list[Any] = [None] * len(value)
            pending.extend(
                (value[idx], path.index(idx), items, idx)
                for idx in reversed(range(len(value)))
            )
            return items

        raise TreeConversionError(f"Unsupported value type: {type(value)!r}", str(path))
