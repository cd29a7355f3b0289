"""Human-readable rendering of ``Difference`` records.

Labels depend on the compare mode that produced a record: strict
comparisons are symmetric and say ``lhs``/``rhs``; inclusive and contains
comparisons treat the right-hand side as the reference and say
``expected``/``actual``.  Example::

    json atoms at path ".a[2]" are not equal:
        expected:
            4
        actual:
            3
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from json_tree_diff.algorithm.config import CompareMode
from json_tree_diff.result import DiffKind, Difference

__all__ = ["indent", "pretty", "render", "render_all"]

_LABEL_INDENT = 4
_VALUE_INDENT = 8


def indent(text: str, spaces: int) -> str:
    """Prefix every line of *text* with *spaces* spaces."""
    pad = " " * spaces
    return "\n".join(f"{pad}{line}" for line in text.splitlines())


def pretty(value: Any) -> str:
    """Pretty-print a tree value as two-space indented JSON.

    Output matches ``json.dumps(value, indent=2, ensure_ascii=False)``, but
    containers are laid out from a work stack so any nesting depth renders.
    """
    parts: list[str] = []
    # literal text, or a (value, depth) pair still to be laid out
    stack: list[str | tuple[Any, int]] = [(value, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        node, depth = item
        if not (isinstance(node, (list, dict)) and node):
            parts.append(json.dumps(node, ensure_ascii=False))
            continue

        inner = "\n" + "  " * (depth + 1)
        entries: list[str | tuple[Any, int]] = []
        if isinstance(node, list):
            parts.append("[")
            for idx, elem in enumerate(node):
                entries.append(inner if idx == 0 else "," + inner)
                entries.append((elem, depth + 1))
            entries.append("\n" + "  " * depth + "]")
        else:
            parts.append("{")
            for idx, (key, elem) in enumerate(node.items()):
                lead = inner if idx == 0 else "," + inner
                entries.append(lead + json.dumps(key, ensure_ascii=False) + ": ")
                entries.append((elem, depth + 1))
            entries.append("\n" + "  " * depth + "}")
        stack.extend(reversed(entries))
    return "".join(parts)


def render(difference: Difference) -> str:
    """Render one difference as text (multi-line for NOT_EQUAL)."""
    strict = difference.mode is CompareMode.STRICT
    kind = difference.kind

    if kind is DiffKind.MISSING_FROM_LEFT:
        side = "lhs" if strict else "actual"
        return f'json atom at path "{difference.path}" is missing from {side}'
    if kind is DiffKind.MISSING_FROM_RIGHT:
        side = "rhs" if strict else "expected"
        return f'json atom at path "{difference.path}" is missing from {side}'

    if strict:
        blocks = [("lhs", difference.lhs), ("rhs", difference.rhs)]
    else:
        blocks = [("expected", difference.rhs), ("actual", difference.lhs)]

    lines = [_header(difference)]
    for label, value in blocks:
        lines.append(indent(f"{label}:", _LABEL_INDENT))
        lines.append(indent(pretty(value), _VALUE_INDENT))
    return "\n".join(lines)


def render_all(differences: Iterable[Difference]) -> str:
    """Render differences in order, separated by a blank line."""
    return "\n\n".join(render(difference) for difference in differences)


def _header(difference: Difference) -> str:
    path = difference.path
    failed_containment = (
        difference.mode is CompareMode.CONTAINS
        and isinstance(difference.lhs, list)
        and isinstance(difference.rhs, list)
    )
    if not failed_containment:
        return f'json atoms at path "{path}" are not equal:'
    if difference.unmatched:
        indices = ", ".join(str(i) for i in difference.unmatched)
        return (
            f'json array at path "{path}" does not contain expected elements '
            f"at indices [{indices}]:"
        )
    return f'json array at path "{path}" does not contain all expected elements:'
