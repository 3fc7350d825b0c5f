"""Compute the raw selection produced by clicking a single node."""

from __future__ import annotations

from typing import AbstractSet

from cattree.exceptions import InvalidParentError
from cattree.tree_index import TreeIndex


def toggle_candidate(
    target_id: str,
    selection: AbstractSet[str],
    index: TreeIndex,
    parent_id: str | None = None,
) -> frozenset[str]:
    """Apply a click on ``target_id`` to ``selection``.

    The result may still contain redundant ids (for example every child of a
    node next to the node itself); pass it through
    :func:`cattree.normalize.normalize_selection` before exposing it.

    Membership is exact: a node covered only through an ancestor is not "in"
    the selection for the purpose of choosing a case.

    Args:
        target_id: Id of the clicked node.
        selection: Current selection. Not modified.
        index: Index of the forest the ids belong to.
        parent_id: Parent of the target when the caller already knows it.

    Returns:
        The candidate selection.

    Raises:
        UnknownIdError: If ``target_id`` or ``parent_id`` is not indexed.
        InvalidParentError: If ``parent_id`` is not the parent of ``target_id``.
    """
    actual_parent = index.parent_of(target_id)
    if parent_id is not None:
        index.require(parent_id)
        if parent_id != actual_parent:
            raise InvalidParentError(f"{parent_id!r} is not the parent of {target_id!r}")

    selected = set(selection)
    descendants = index.descendants_of(target_id)

    if descendants:
        # Internal node: selecting it makes its descendants redundant, and
        # deselecting it clears the whole subtree.
        selected.difference_update(descendants)
        if target_id in selection:
            selected.discard(target_id)
        else:
            selected.add(target_id)
        return frozenset(selected)

    if target_id in selected:
        selected.discard(target_id)
        return frozenset(selected)

    if actual_parent is not None and actual_parent in selected:
        # Split the parent's blanket selection into everything but the target.
        selected.discard(actual_parent)
        for sibling_id in index.children_of(actual_parent):
            if sibling_id != target_id:
                selected.update(index.leaves_of(sibling_id))
        return frozenset(selected)

    selected.add(target_id)
    return frozenset(selected)
