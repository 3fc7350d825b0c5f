"""Multi-select facade over the category tree engine."""

from __future__ import annotations

from typing import Iterable, Sequence

from cattree.coverage import covered_ids, is_covered
from cattree.normalize import normalize_selection
from cattree.schemas import CategoryNode
from cattree.toggle import toggle_candidate
from cattree.tree_index import TreeIndex, build_index


class SelectionEngine:
    """Toggle and coverage operations bound to one indexed forest.

    The engine holds no selection state. Every call takes the current
    selection and returns a new one, so callers must apply successive toggles
    to the latest returned value.
    """

    def __init__(self, index: TreeIndex) -> None:
        self.index = index

    @classmethod
    def from_forest(cls, forest: Iterable[CategoryNode]) -> SelectionEngine:
        return cls(build_index(forest))

    def toggle(
        self,
        target_id: str,
        selection: Iterable[str],
        parent_id: str | None = None,
    ) -> list[str]:
        """Toggle one node and return the canonical selection in forest order.

        Raises:
            UnknownIdError: If ``target_id`` or ``parent_id`` is not indexed.
        """
        candidate = toggle_candidate(target_id, frozenset(selection), self.index, parent_id)
        return self.index.in_forest_order(normalize_selection(candidate, self.index))

    def normalize(self, selection: Iterable[str]) -> list[str]:
        return self.index.in_forest_order(normalize_selection(selection, self.index))

    def is_covered(self, node_id: str, selection: Iterable[str]) -> bool:
        return is_covered(node_id, frozenset(selection), self.index)

    def covered_ids(self, selection: Iterable[str]) -> frozenset[str]:
        return covered_ids(selection, self.index)


def toggle_selection(
    target_id: str,
    current: Iterable[str],
    forest: Sequence[CategoryNode],
    parent_id: str | None = None,
) -> list[str]:
    """Return the canonical selection after clicking ``target_id``.

    Pure function: the forest is indexed on every call and nothing is cached.
    Use :class:`SelectionEngine` to reuse one index across clicks.

    Raises:
        IntegrityError: If the forest has duplicate ids or a cycle.
        UnknownIdError: If ``target_id`` or ``parent_id`` is not in the forest.
    """
    return SelectionEngine.from_forest(forest).toggle(target_id, current, parent_id)


def selection_label(selection: Sequence[str]) -> str:
    """Summarize a selection for a collapsed picker button."""
    count = len(selection)
    if not count:
        return "Select categories..."
    return f"{count} categor{'y' if count == 1 else 'ies'} selected"
