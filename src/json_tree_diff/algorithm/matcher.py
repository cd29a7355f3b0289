"""Containment matcher: order-independent, multiplicity-respecting embedding.

Decides whether every element of a *contained* array can be paired with a
distinct element of a *container* array such that each pair is compatible.
Compatibility is decided by the caller: ``embed_steps`` yields each
(container, contained) pair and is sent back the answer, which lets the diff
engine run nested comparisons on its own work stack; ``embed`` wraps the same
steps around a plain predicate.  Equal-looking elements are not assumed
interchangeable and no hashing or sorting is involved.

The pairing is a maximum bipartite matching over the boolean compatibility
matrix, computed with scipy's ``linear_sum_assignment`` on a 0/1 cost
matrix: compatible cells cost 0, incompatible cells cost 1.  A minimum-cost
assignment therefore uses as many compatible cells as possible, and the
embedding exists iff every contained row lands on a compatible cell.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

__all__ = ["Embedding", "embed", "embed_steps", "saturating_match"]


@dataclass(frozen=True, slots=True)
class Embedding:
    """Outcome of a containment check.

    Attributes:
        found:      True when every contained element has a distinct partner.
        assignment: Contained index -> container index for every matched pair.
        unmatched:  Contained indices left without a partner by a maximum
                    matching.  Empty when ``found`` is True, and also empty
                    when the check was short-circuited on length.
    """

    found: bool
    assignment: dict[int, int]
    unmatched: tuple[int, ...] = ()


def saturating_match(compatible: np.ndarray) -> tuple[dict[int, int], tuple[int, ...]]:
    """Compute a maximum matching of rows to distinct columns.

    Args:
        compatible: 2-D boolean matrix of shape ``(m, n)``.  Rows are the
            contained elements, columns the container elements.

    Returns:
        Tuple ``(assignment, unmatched_rows)``.  ``assignment`` maps each
        matched row to its column; ``unmatched_rows`` lists the rows a
        maximum matching could not cover, in ascending order.
    """
    rows, cols = compatible.shape
    if rows == 0:
        return {}, ()
    if cols == 0 or not compatible.any():
        return {}, tuple(range(rows))

    cost = np.where(compatible, 0.0, 1.0)
    row_ind, col_ind = linear_sum_assignment(cost)

    assignment = {
        int(r): int(c)
        for r, c in zip(row_ind.tolist(), col_ind.tolist(), strict=True)
        if compatible[r, c]
    }
    unmatched = tuple(r for r in range(rows) if r not in assignment)
    return assignment, unmatched


def embed_steps(
    container: Sequence[Any],
    contained: Sequence[Any],
) -> Generator[tuple[Any, Any], bool, Embedding]:
    """Decide containment, asking the caller for each compatibility result.

    Yields ``(container_elem, contained_elem)`` pairs; the caller sends back
    True when the pair is compatible.  The generator's return value is the
    ``Embedding``.  Driving it this way lets the diff engine evaluate nested
    comparisons on its own work stack.

    An empty *contained* always embeds; a *contained* longer than
    *container* never does and is rejected without yielding any pair.
    """
    if not contained:
        return Embedding(found=True, assignment={})
    if len(contained) > len(container):
        logger.debug(
            "containment rejected on length: %d expected elements, %d available",
            len(contained),
            len(container),
        )
        return Embedding(found=False, assignment={})

    # rows: contained elements, columns: container elements
    compatible = np.zeros((len(contained), len(container)), dtype=bool)
    for i, wanted in enumerate(contained):
        for j, candidate in enumerate(container):
            compatible[i, j] = yield candidate, wanted

    assignment, unmatched = saturating_match(compatible)
    if unmatched:
        logger.debug("containment failed: no partner for elements %s", list(unmatched))
    return Embedding(found=not unmatched, assignment=assignment, unmatched=unmatched)


def embed(
    container: Sequence[Any],
    contained: Sequence[Any],
    is_match: Callable[[Any, Any], bool],
) -> Embedding:
    """Decide whether *contained* embeds into *container* as a multiset.

    Args:
        container: The array that must supply the elements (left-hand side).
        contained: The array whose every element must be matched (right-hand side).
        is_match:  ``is_match(container_elem, contained_elem)`` compatibility test.

    Returns:
        An ``Embedding`` (see ``embed_steps`` for the edge cases).
    """
    steps = embed_steps(container, contained)
    try:
        pair = next(steps)
        while True:
            pair = steps.send(is_match(*pair))
    except StopIteration as stop:
        outcome: Embedding = stop.value
        return outcome
