"""Expand/collapse state for tree pickers.

Kept apart from the selection: expanding a node never changes what is
selected, and selecting never changes what is expanded.
"""

from __future__ import annotations

from typing import AbstractSet


def toggle_expanded(expanded: AbstractSet[str], node_id: str) -> frozenset[str]:
    """Return a new expanded set with ``node_id`` flipped."""
    if node_id in expanded:
        return frozenset(expanded - {node_id})
    return frozenset(expanded | {node_id})


def is_expanded(expanded: AbstractSet[str], node_id: str) -> bool:
    return node_id in expanded
