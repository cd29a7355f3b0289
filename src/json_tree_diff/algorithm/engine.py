"""Diff engine: walks two tree values in lock-step and yields differences.

Dispatch is on ``ValueKind``:

- null / bool / string: plain equality.
- number:  equality under the configured ``NumericMode``.
- kinds differ: one NOT_EQUAL covering the whole location, no descent.
- array:   STRICT walks the union of indices; INCLUSIVE walks the right-hand
           indices only; CONTAINS hands the pair to the containment matcher.
- object:  STRICT walks the union of keys; INCLUSIVE and CONTAINS walk the
           right-hand keys only.

A location is reported once, at the shallowest point of disagreement.

The walk keeps its pending work on an explicit stack rather than recursing,
so deeply nested input cannot exhaust the interpreter stack.  Children are
pushed in reverse so they are popped, and reported, left to right.

Containment needs a yes/no answer for every (container, contained) element
pair, and those answers may themselves involve containment further down.
Each such check is a generator that yields the sub-pairs it needs and
receives their results; ``_evaluate`` drives the generators from a list, so
nesting depth costs list entries, not interpreter frames.

The config is passed in by the caller on every call; nothing is kept
between calls, and concurrent use from several threads needs no locking.
"""

from __future__ import annotations

from collections.abc import Generator, Iterator
from typing import Any, TypeVar

from json_tree_diff.algorithm.config import CompareMode, DiffConfig, NumericMode
from json_tree_diff.algorithm.matcher import Embedding, embed_steps
from json_tree_diff.algorithm.path import ROOT, Path
from json_tree_diff.result import ABSENT, Difference
from json_tree_diff.tree.nodes import ValueKind, value_kind

__all__ = ["diff", "iter_diff", "matches", "numbers_equal"]

# (lhs, rhs, path) -- either side may be ABSENT
_Task = tuple[Any, Any, Path]
# (lhs, rhs) sub-comparison requested by a check
_Pair = tuple[Any, Any]
_R = TypeVar("_R")


def diff(lhs: Any, rhs: Any, config: DiffConfig | None = None) -> list[Difference]:
    """Return every difference between *lhs* and *rhs*.

    Args:
        lhs:    Left-hand tree value ("actual" in inclusive/contains modes).
        rhs:    Right-hand tree value ("expected" in inclusive/contains modes).
        config: Comparison policies.  Defaults to ``DiffConfig()``
                (strict compare, strict numbers).

    Returns:
        Differences in discovery order: depth-first, left to right over the
        keys/indices as iterated.  Empty when the values match.
    """
    return list(iter_diff(lhs, rhs, config))


def matches(lhs: Any, rhs: Any, config: DiffConfig | None = None) -> bool:
    """Return True when *lhs* and *rhs* have no difference under *config*.

    Stops at the first difference found.
    """
    return next(iter_diff(lhs, rhs, config), None) is None


def numbers_equal(lhs: int | float, rhs: int | float, numeric_mode: NumericMode) -> bool:
    """Compare two numbers under *numeric_mode*.

    STRICT requires both operands to be int-typed or both float-typed.
    ASSUME_FLOAT converts both to ``float`` first, so ``1 == 1.0``.
    """
    if numeric_mode is NumericMode.ASSUME_FLOAT:
        try:
            return float(lhs) == float(rhs)
        except OverflowError:
            # int too large for a float: fall back to exact comparison
            return lhs == rhs
    return isinstance(lhs, float) == isinstance(rhs, float) and lhs == rhs


def iter_diff(
    lhs: Any,
    rhs: Any,
    config: DiffConfig | None = None,
    path: Path = ROOT,
) -> Iterator[Difference]:
    """Lazily yield the differences between *lhs* and *rhs*.

    Same contract as ``diff``; *path* is the location the two values sit at
    (the root by default) and prefixes every emitted path.
    """
    config = config if config is not None else DiffConfig()
    mode = config.compare_mode
    stack: list[_Task] = [(lhs, rhs, path)]

    while stack:
        left, right, here = stack.pop()

        if left is ABSENT or right is ABSENT:
            yield Difference(here, left, right, mode)
            continue

        kind = value_kind(left)
        if kind is not value_kind(right):
            yield Difference(here, left, right, mode)
            continue

        if kind is ValueKind.NUMBER:
            if not numbers_equal(left, right, config.numeric_mode):
                yield Difference(here, left, right, mode)
        elif kind is ValueKind.ARRAY:
            if mode is CompareMode.CONTAINS:
                outcome: Embedding = _evaluate(embed_steps(left, right), config)
                if not outcome.found:
                    yield Difference(here, left, right, mode, outcome.unmatched)
            else:
                stack.extend(
                    (a, b, here.index(idx))
                    for idx, a, b in reversed(_array_children(left, right, mode))
                )
        elif kind is ValueKind.OBJECT:
            stack.extend(
                (a, b, here.field(key))
                for key, a, b in reversed(_object_children(left, right, mode))
            )
        elif left != right:
            yield Difference(here, left, right, mode)


def _evaluate(root: Generator[_Pair, bool, _R], config: DiffConfig) -> _R:
    """Run *root* to completion, answering each pair it yields with ``_check``."""
    pending: list[Generator[_Pair, bool, Any]] = [root]
    result: Any = None
    while pending:
        try:
            pair = pending[-1].send(result)
        except StopIteration as stop:
            pending.pop()
            result = stop.value
            continue
        pending.append(_check(pair[0], pair[1], config))
        result = None
    return result  # type: ignore[no-any-return]


def _check(lhs: Any, rhs: Any, config: DiffConfig) -> Generator[_Pair, bool, bool]:
    """Decide whether *lhs* matches *rhs*, yielding child pairs to decide first."""
    kind = value_kind(lhs)
    if kind is not value_kind(rhs):
        return False
    if kind is ValueKind.NUMBER:
        return numbers_equal(lhs, rhs, config.numeric_mode)

    mode = config.compare_mode
    if kind is ValueKind.ARRAY:
        if mode is CompareMode.CONTAINS:
            outcome = yield from embed_steps(lhs, rhs)
            return outcome.found
        children = _array_children(lhs, rhs, mode)
    elif kind is ValueKind.OBJECT:
        children = _object_children(lhs, rhs, mode)
    else:
        return bool(lhs == rhs)

    for _, left, right in children:
        if left is ABSENT or right is ABSENT:
            return False
        if not (yield left, right):
            return False
    return True


def _array_children(
    lhs: list[Any], rhs: list[Any], mode: CompareMode
) -> list[tuple[int, Any, Any]]:
    if mode is CompareMode.STRICT:
        length = max(len(lhs), len(rhs))
    else:
        length = len(rhs)
    return [
        (
            idx,
            lhs[idx] if idx < len(lhs) else ABSENT,
            rhs[idx] if idx < len(rhs) else ABSENT,
        )
        for idx in range(length)
    ]


def _object_children(
    lhs: dict[str, Any], rhs: dict[str, Any], mode: CompareMode
) -> list[tuple[str, Any, Any]]:
    if mode is CompareMode.STRICT:
        keys = [*lhs, *(key for key in rhs if key not in lhs)]
    else:
        keys = list(rhs)
    return [(key, lhs.get(key, ABSENT), rhs.get(key, ABSENT)) for key in keys]
