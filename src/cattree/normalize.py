"""Reduce selections to their canonical antichain form."""

from __future__ import annotations

import logging
from typing import Iterable

from cattree.tree_index import TreeIndex

logger = logging.getLogger(__name__)


def normalize_selection(candidate: Iterable[str], index: TreeIndex) -> frozenset[str]:
    """Return the canonical form of a candidate selection.

    Each root is visited bottom-up. A node that is itself selected absorbs its
    whole subtree. A node whose children are all covered replaces its
    descendants (merge-up). Any other node keeps whatever its children
    reduced to.

    The result is an antichain: no member is an ancestor of another. The
    operation is idempotent.

    Ids that are not in the index (for example categories removed since the
    selection was stored) are dropped.

    Args:
        candidate: Selection to normalize, in any order, possibly redundant.
        index: Index of the forest the ids belong to.

    Returns:
        The canonical selection.
    """
    working: set[str] = set()
    stale: list[str] = []
    for node_id in candidate:
        if node_id in index:
            working.add(node_id)
        else:
            stale.append(node_id)
    if stale:
        logger.warning("Dropping %d unknown category id(s) from selection: %s", len(stale), sorted(set(stale)))

    covered: dict[str, bool] = {}
    stack: list[tuple[str, bool]] = [(root_id, False) for root_id in reversed(index.roots)]
    while stack:
        node_id, exiting = stack.pop()
        child_ids = index.children[node_id]

        if exiting:
            if all(covered[child_id] for child_id in child_ids):
                working.difference_update(index.descendants[node_id])
                working.add(node_id)
                covered[node_id] = True
            else:
                covered[node_id] = False
            continue

        if node_id in working:
            working.difference_update(index.descendants[node_id])
            covered[node_id] = True
        elif not child_ids:
            covered[node_id] = False
        else:
            stack.append((node_id, True))
            stack.extend((child_id, False) for child_id in reversed(child_ids))

    return frozenset(working)
