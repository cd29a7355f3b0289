"""Tests for the immutable Path accumulator and its rendering."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from json_tree_diff.algorithm.path import ROOT, Field, Index, Path


class TestRendering:
    def test_root_renders_marker(self) -> None:
        assert str(ROOT) == "(root)"

    def test_field_renders_with_leading_dot(self) -> None:
        assert str(ROOT.field("a")) == ".a"

    def test_index_renders_in_brackets(self) -> None:
        assert str(ROOT.index(2)) == "[2]"

    def test_nested_path(self) -> None:
        path = ROOT.field("data").field("users").index(1).field("id")
        assert str(path) == ".data.users[1].id"

    def test_index_at_root_then_field(self) -> None:
        assert str(ROOT.index(0).field("name")) == "[0].name"


class TestImmutability:
    def test_append_does_not_mutate(self) -> None:
        parent = ROOT.field("a")
        parent.field("b")
        assert str(parent) == ".a"

    def test_sibling_branches_are_independent(self) -> None:
        parent = ROOT.field("obj")
        left = parent.field("x")
        right = parent.field("y")
        assert str(left) == ".obj.x"
        assert str(right) == ".obj.y"
        assert str(parent) == ".obj"

    def test_components_cannot_be_reassigned(self) -> None:
        with pytest.raises(FrozenInstanceError):
            ROOT.components = (Field("a"),)  # type: ignore[misc]


class TestStructure:
    def test_root_is_root(self) -> None:
        assert ROOT.is_root
        assert not ROOT.field("a").is_root

    def test_components(self) -> None:
        path = ROOT.field("a").index(3)
        assert path.components == (Field("a"), Index(3))
        assert len(path) == 2

    def test_append_equivalent_to_helpers(self) -> None:
        assert ROOT.append(Field("a")).append(Index(0)) == ROOT.field("a").index(0)

    def test_paths_are_hashable(self) -> None:
        assert {ROOT.field("a"), Path((Field("a"),))} == {ROOT.field("a")}
