"""Decide whether nodes are covered by a selection."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from cattree.tree_index import TreeIndex


def is_covered(node_id: str, selection: AbstractSet[str], index: TreeIndex) -> bool:
    """Return True if the node is selected itself or through an ancestor.

    Coverage only flows top-down, so checking the precomputed ancestor chain
    against the selection is equivalent to comparing leaf sets.

    Raises:
        UnknownIdError: If ``node_id`` is not in the index.
    """
    ancestors = index.ancestors_of(node_id)
    if node_id in selection:
        return True
    return not selection.isdisjoint(ancestors)


def covered_ids(selection: Iterable[str], index: TreeIndex) -> frozenset[str]:
    """Return every indexed id covered by the selection.

    Used to resolve the checkbox state of a whole tree in one pass. Ids that
    are not in the index are ignored.
    """
    covered: set[str] = set()
    for node_id in selection:
        if node_id not in index or node_id in covered:
            continue
        covered.add(node_id)
        covered.update(index.descendants_of(node_id))
    return frozenset(covered)


def covered_leaves(selection: Iterable[str], index: TreeIndex) -> frozenset[str]:
    """Return the union of the leaf sets of all indexed ids in the selection."""
    leaves: set[str] = set()
    for node_id in selection:
        if node_id in index:
            leaves.update(index.leaves_of(node_id))
    return frozenset(leaves)
