"""Category tree endpoints for the API."""

from fastapi import APIRouter, status

from cattree.fetch import ForestProvider
from server.models import TreeResponse
from server.routers_utils import COMMON_SELECTION_RESPONSES, ProviderDep

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("/tree", response_model=TreeResponse, responses=COMMON_SELECTION_RESPONSES)
async def get_tree(provider: ForestProvider = ProviderDep) -> TreeResponse:
    """Return the cached category forest with basic statistics."""
    loaded = await provider.get()
    index = loaded.index
    leaf_count = sum(1 for node_id in index.ids if index.is_leaf(node_id))
    max_depth = max((index.depth_of(node_id) + 1 for node_id in index.ids), default=0)
    return TreeResponse(
        forest=loaded.forest,
        node_count=len(index),
        leaf_count=leaf_count,
        max_depth=max_depth,
    )


@router.post("/tree/refresh", status_code=status.HTTP_204_NO_CONTENT)
async def refresh_tree(provider: ForestProvider = ProviderDep) -> None:
    """Drop the in-memory forest so the next request fetches it again."""
    provider.invalidate()
