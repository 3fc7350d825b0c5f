"""Shared helpers for the API routers."""

from __future__ import annotations

from typing import Any

from fastapi import Depends

from cattree.fetch import ForestProvider
from cattree.schemas import CategoryNode
from cattree.selection import SelectionEngine

COMMON_SELECTION_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"description": "Unknown category id"},
    422: {"description": "Invalid request or category forest"},
    502: {"description": "Category tree could not be fetched"},
}

_forest_provider = ForestProvider()


def get_forest_provider() -> ForestProvider:
    """Dependency returning the process-wide forest provider."""
    return _forest_provider


async def resolve_engine(
    forest: list[CategoryNode] | None,
    provider: ForestProvider,
) -> SelectionEngine:
    """Build an engine over the inline forest, or the provider's cached one."""
    if forest is not None:
        return SelectionEngine.from_forest(forest)
    loaded = await provider.get()
    return SelectionEngine(loaded.index)


ProviderDep = Depends(get_forest_provider)
