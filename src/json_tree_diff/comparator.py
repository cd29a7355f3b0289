"""JsonComparator: orchestrator that wires TreeBuilder + the diff engine.

This is the layer between the raw engine and the public API.  It turns
arbitrary Python inputs into tree values, runs the engine under a fixed
configuration and wraps the output in a ``ComparisonResult`` with timing
data.

Architecture:
- compare() starts a wall-clock timer, converts both inputs with
  ``TreeBuilder`` (a conversion failure raises ``TreeConversionError`` and no
  comparison happens), delegates to ``engine.diff()`` and returns a
  ``ComparisonResult``.
- The comparator holds only its immutable ``DiffConfig`` and a stateless
  builder, so one instance can be shared between threads.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from json_tree_diff.algorithm.config import DiffConfig
from json_tree_diff.algorithm.engine import diff
from json_tree_diff.result import ComparisonResult
from json_tree_diff.tree.builder import TreeBuilder

logger = logging.getLogger(__name__)

__all__ = ["JsonComparator"]


class JsonComparator:
    """Orchestrator for structural JSON comparison.

    Example::

        from json_tree_diff.comparator import JsonComparator
        from json_tree_diff import DiffConfig

        cmp = JsonComparator(DiffConfig.inclusive())
        result = cmp.compare({"a": 1, "b": 2}, {"a": 1})
        print(result.matches)   # True
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison policies.  Defaults to ``DiffConfig()``
                (strict compare, strict numbers).
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._builder = TreeBuilder()

    @property
    def config(self) -> DiffConfig:
        return self._config

    def compare(self, lhs: Any, rhs: Any) -> ComparisonResult:
        """Compare two values and return a ``ComparisonResult``.

        Args:
            lhs: Left-hand value ("actual" in inclusive/contains modes).
            rhs: Right-hand value ("expected" in inclusive/contains modes).

        Returns:
            A ``ComparisonResult`` holding every difference found.

        Raises:
            TreeConversionError: If either input cannot be represented as a
                tree value.
        """
        t0 = time.perf_counter()

        left_tree = self._builder.build(lhs)
        right_tree = self._builder.build(rhs)
        differences = diff(left_tree, right_tree, self._config)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "compared under %s/%s: %d difference(s) in %.3f ms",
            self._config.compare_mode,
            self._config.numeric_mode,
            len(differences),
            elapsed_ms,
        )

        return ComparisonResult(
            differences=tuple(differences),
            config=self._config,
            computation_time_ms=elapsed_ms,
        )
