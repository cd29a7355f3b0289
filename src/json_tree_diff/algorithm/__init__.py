"""algorithm subpackage -- configuration and path primitives of the diff engine.

The engine (``json_tree_diff.algorithm.engine``) and the containment matcher
(``json_tree_diff.algorithm.matcher``) are imported from their modules
directly; this module only re-exports the lightweight value types so it can
be imported from anywhere in the package without import cycles.

Example::

    from json_tree_diff.algorithm import DiffConfig, CompareMode, ROOT
    from json_tree_diff.algorithm.engine import diff

    diff({"a": 1}, {"a": 2}, DiffConfig(CompareMode.INCLUSIVE))
"""

from __future__ import annotations

from json_tree_diff.algorithm.config import CompareMode, DiffConfig, NumericMode
from json_tree_diff.algorithm.path import ROOT, Field, Index, Path

__all__ = ["ROOT", "CompareMode", "DiffConfig", "Field", "Index", "NumericMode", "Path"]
