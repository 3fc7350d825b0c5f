"""Selection endpoints for the API."""

from fastapi import APIRouter

from cattree.fetch import ForestProvider
from cattree.selection import selection_label
from server.models import CoverageRequest, CoverageResponse, NormalizeRequest, SelectionResponse, ToggleRequest
from server.routers_utils import COMMON_SELECTION_RESPONSES, ProviderDep, resolve_engine

router = APIRouter(prefix="/api/selection", tags=["selection"])


@router.post("/toggle", response_model=SelectionResponse, responses=COMMON_SELECTION_RESPONSES)
async def toggle(
    toggle_request: ToggleRequest,
    provider: ForestProvider = ProviderDep,
) -> SelectionResponse:
    """Apply one click to a selection and return the canonical result.

    **Parameters**

    - **toggle_request** (`ToggleRequest`): clicked id, current selection, optional forest

    **Returns**

    - **SelectionResponse**: canonical selection in forest order and its summary label

    """
    engine = await resolve_engine(toggle_request.forest, provider)
    selection = engine.toggle(
        toggle_request.target_id,
        toggle_request.selection,
        parent_id=toggle_request.parent_id,
    )
    return SelectionResponse(selection=selection, label=selection_label(selection))


@router.post("/normalize", response_model=SelectionResponse, responses=COMMON_SELECTION_RESPONSES)
async def normalize(
    normalize_request: NormalizeRequest,
    provider: ForestProvider = ProviderDep,
) -> SelectionResponse:
    """Reduce a stored selection to canonical form, dropping unknown ids."""
    engine = await resolve_engine(normalize_request.forest, provider)
    selection = engine.normalize(normalize_request.selection)
    return SelectionResponse(selection=selection, label=selection_label(selection))


@router.post("/coverage", response_model=CoverageResponse, responses=COMMON_SELECTION_RESPONSES)
async def coverage(
    coverage_request: CoverageRequest,
    provider: ForestProvider = ProviderDep,
) -> CoverageResponse:
    """Resolve the checked state of categories under a selection.

    Without ``node_ids`` every category in the forest is resolved in one
    pass; with them, each requested id must exist.
    """
    engine = await resolve_engine(coverage_request.forest, provider)
    selection = frozenset(coverage_request.selection)

    if coverage_request.node_ids is None:
        covered = engine.covered_ids(selection)
        return CoverageResponse(covered={node_id: node_id in covered for node_id in engine.index.ids})

    return CoverageResponse(
        covered={node_id: engine.is_covered(node_id, selection) for node_id in coverage_request.node_ids}
    )
