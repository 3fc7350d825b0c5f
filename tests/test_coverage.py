"""Tests for the coverage resolver."""

from __future__ import annotations

import pytest

from cattree.coverage import covered_ids, covered_leaves, is_covered
from cattree.exceptions import UnknownIdError
from cattree.tree_index import TreeIndex


class TestIsCovered:
    """Tests for is_covered."""

    def test_explicit_member(self, index: TreeIndex) -> None:
        assert is_covered("laptops", frozenset({"laptops"}), index)

    def test_covered_through_grandparent(self, index: TreeIndex) -> None:
        assert is_covered("android", frozenset({"electronics"}), index)

    def test_sibling_does_not_cover(self, index: TreeIndex) -> None:
        assert not is_covered("android", frozenset({"iphone"}), index)

    def test_descendant_does_not_cover_ancestor(self, index: TreeIndex) -> None:
        assert not is_covered("phones", frozenset({"android"}), index)

    def test_empty_selection(self, index: TreeIndex) -> None:
        assert not is_covered("books", frozenset(), index)

    def test_unknown_id_raises(self, index: TreeIndex) -> None:
        with pytest.raises(UnknownIdError):
            is_covered("shoes", frozenset({"shoes"}), index)


class TestCoveredIds:
    """Tests for covered_ids and covered_leaves."""

    def test_expands_subtrees(self, index: TreeIndex) -> None:
        assert covered_ids({"phones", "men"}, index) == frozenset({"phones", "android", "iphone", "men"})

    def test_ignores_unknown_ids(self, index: TreeIndex) -> None:
        assert covered_ids({"shoes", "books"}, index) == frozenset({"books"})

    def test_agrees_with_is_covered(self, index: TreeIndex) -> None:
        selection = frozenset({"phones", "fashion"})
        covered = covered_ids(selection, index)
        assert {node_id for node_id in index.ids if is_covered(node_id, selection, index)} == covered

    def test_covered_leaves(self, index: TreeIndex) -> None:
        assert covered_leaves({"electronics", "men"}, index) == frozenset({"android", "iphone", "laptops", "men"})
