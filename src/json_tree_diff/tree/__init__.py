"""Tree subpackage for the JSON-shaped value model.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the six value kinds (NULL, BOOL, NUMBER, STRING, ARRAY, OBJECT)
- value_kind: classifies a tree value
- TreeBuilder: converts arbitrary Python values into tree values
"""

from json_tree_diff.tree.builder import TreeBuilder
from json_tree_diff.tree.nodes import JsonValue, ValueKind, value_kind

__all__ = ["JsonValue", "TreeBuilder", "ValueKind", "value_kind"]
