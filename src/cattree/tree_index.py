"""Precomputed lookup maps over a category forest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

from cattree.exceptions import IntegrityError, UnknownIdError
from cattree.schemas import CategoryNode


@dataclass(frozen=True, eq=False)
class TreeIndex:
    """Read-only structural index of a category forest.

    Every query is a dictionary lookup; the forest is walked exactly once, in
    :func:`build_index`. Ids are unique across the forest, so all maps are keyed
    by id.

    Attributes:
        roots: Root ids in forest order.
        parents: Parent id per node (``None`` for roots).
        children: Direct child ids per node, in forest order.
        descendants: Strict descendant ids per node, in pre-order.
        leaves: Leaf descendant ids per node; a leaf is its own sole leaf.
        ancestors: Ancestor ids per node, nearest first.
        positions: Pre-order position of every node across the whole forest.
        titles: Display title per node.
    """

    roots: tuple[str, ...]
    parents: Mapping[str, str | None]
    children: Mapping[str, tuple[str, ...]]
    descendants: Mapping[str, tuple[str, ...]]
    leaves: Mapping[str, frozenset[str]]
    ancestors: Mapping[str, tuple[str, ...]]
    positions: Mapping[str, int]
    titles: Mapping[str, str]

    @classmethod
    def from_forest(cls, forest: Iterable[CategoryNode]) -> TreeIndex:
        return build_index(forest)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.parents

    def __len__(self) -> int:
        return len(self.parents)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids)

    @property
    def ids(self) -> tuple[str, ...]:
        """All ids in forest pre-order."""
        return tuple(sorted(self.positions, key=self.positions.__getitem__))

    def require(self, node_id: str) -> str:
        """Return ``node_id`` unchanged, raising if it is not indexed."""
        if node_id not in self.parents:
            raise UnknownIdError(node_id)
        return node_id

    def parent_of(self, node_id: str) -> str | None:
        return self.parents[self.require(node_id)]

    def children_of(self, node_id: str) -> tuple[str, ...]:
        return self.children[self.require(node_id)]

    def descendants_of(self, node_id: str) -> tuple[str, ...]:
        return self.descendants[self.require(node_id)]

    def leaves_of(self, node_id: str) -> frozenset[str]:
        return self.leaves[self.require(node_id)]

    def ancestors_of(self, node_id: str) -> tuple[str, ...]:
        return self.ancestors[self.require(node_id)]

    def depth_of(self, node_id: str) -> int:
        """Number of ancestors; roots have depth 0."""
        return len(self.ancestors_of(node_id))

    def is_leaf(self, node_id: str) -> bool:
        return not self.children_of(node_id)

    def in_forest_order(self, node_ids: Iterable[str]) -> list[str]:
        """Sort known ids by pre-order position, dropping duplicates."""
        return sorted(set(node_ids), key=lambda node_id: self.positions[self.require(node_id)])


def build_index(forest: Iterable[CategoryNode]) -> TreeIndex:
    """Walk a category forest once and build its :class:`TreeIndex`.

    The walk uses an explicit stack, so tree depth is not bounded by the
    interpreter recursion limit. The node objects on the current root-to-node
    path are tracked; meeting one of them again (or an id already on the path)
    is reported as a cycle instead of being followed.

    Args:
        forest: Root nodes of the forest.

    Returns:
        The populated index. Nothing is published if the walk fails.

    Raises:
        IntegrityError: If two nodes share an id or a cycle is found.
    """
    roots: list[str] = []
    parents: dict[str, str | None] = {}
    children: dict[str, tuple[str, ...]] = {}
    descendants: dict[str, tuple[str, ...]] = {}
    leaves: dict[str, frozenset[str]] = {}
    ancestors: dict[str, tuple[str, ...]] = {}
    positions: dict[str, int] = {}
    titles: dict[str, str] = {}

    path_ids: list[str] = []
    path_nodes: set[int] = set()

    # (node, parent id, exiting) events; exiting events finalize post-order maps.
    stack: list[tuple[CategoryNode, str | None, bool]] = [
        (root, None, False) for root in reversed(list(forest))
    ]
    while stack:
        node, parent_id, exiting = stack.pop()
        node_id = node.id

        if exiting:
            path_ids.pop()
            path_nodes.discard(id(node))
            child_ids = children[node_id]
            subtree: list[str] = []
            for child_id in child_ids:
                subtree.append(child_id)
                subtree.extend(descendants[child_id])
            descendants[node_id] = tuple(subtree)
            if child_ids:
                leaves[node_id] = frozenset().union(*(leaves[child_id] for child_id in child_ids))
            else:
                leaves[node_id] = frozenset((node_id,))
            continue

        if id(node) in path_nodes or node_id in path_ids:
            cycle = " -> ".join([*path_ids, node_id])
            raise IntegrityError(f"Cycle detected in category forest: {cycle}")
        if node_id in parents:
            raise IntegrityError(f"Duplicate category id in forest: {node_id!r}")

        if parent_id is None:
            roots.append(node_id)
        parents[node_id] = parent_id
        children[node_id] = tuple(child.id for child in node.children)
        ancestors[node_id] = tuple(reversed(path_ids))
        positions[node_id] = len(positions)
        titles[node_id] = node.title

        path_ids.append(node_id)
        path_nodes.add(id(node))
        stack.append((node, parent_id, True))
        for child in reversed(node.children):
            stack.append((child, node_id, False))

    return TreeIndex(
        roots=tuple(roots),
        parents=parents,
        children=children,
        descendants=descendants,
        leaves=leaves,
        ancestors=ancestors,
        positions=positions,
        titles=titles,
    )
