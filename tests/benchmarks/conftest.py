"""Deterministic object generators for performance benchmarks.

All generators produce fixed, reproducible objects. No random values.
Tiers: 100-key flat, 500-key nested, and a containment check over arrays
of records (where the O(n*m) compatibility matrix dominates).
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested_500(change_every: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Generate a 500-leaf nested pair: 20 sections x 25 records.

    Every *change_every*-th leaf differs in the right-hand document.
    """
    left: dict[str, Any] = {}
    right: dict[str, Any] = {}
    leaf = 0
    for s in range(20):
        left_section: list[dict[str, Any]] = []
        right_section: list[dict[str, Any]] = []
        for r in range(25):
            left_section.append({"id": leaf, "name": f"item_{leaf}"})
            changed = change_every and leaf % change_every == 0
            right_section.append(
                {"id": leaf, "name": f"other_{leaf}" if changed else f"item_{leaf}"}
            )
            leaf += 1
        left[f"section_{s}"] = left_section
        right[f"section_{s}"] = right_section
    return left, right


def _make_records(count: int) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Generate a container of *count* records and its reversed subset."""
    container = [{"id": i, "tags": [i % 3, i % 5], "name": f"n{i}"} for i in range(count)]
    contained = [{"id": i, "tags": [i % 5]} for i in reversed(range(0, count, 2))]
    return container, contained


@pytest.fixture
def pair_100key_flat() -> tuple[dict[str, Any], dict[str, Any]]:
    return generate_flat_object(100), generate_flat_object(100)


@pytest.fixture
def pair_500_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_nested_500(change_every=0)


@pytest.fixture
def pair_500_dissimilar() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_nested_500(change_every=7)


@pytest.fixture
def records_50() -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    return _make_records(50)
