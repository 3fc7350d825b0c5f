"""Pydantic models for the selection API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from cattree.schemas import CategoryNode
from server.server_config import MAX_SELECTION_IDS


def _clean_ids(v: str | list[str] | None) -> list[str]:
    """Normalize id inputs from comma-separated strings or lists, keeping first occurrences."""
    if not v:
        return []
    if isinstance(v, str):
        items = v.split(",")
    elif isinstance(v, list):
        items = v
    else:
        err = "ids must be a list of strings or a comma-separated string"
        raise ValueError(err)
    seen: dict[str, None] = {}
    for item in items:
        if not isinstance(item, str):
            err = f"ids must be strings, got {type(item).__name__}"
            raise ValueError(err)
        item = item.strip()
        if item:
            seen.setdefault(item, None)
    return list(seen)


class SelectionRequest(BaseModel):
    """Fields shared by every selection request.

    Attributes
    ----------
    selection : list[str]
        Current selection as category ids, in any order.
    forest : list[CategoryNode] | None
        Category forest to evaluate against. When omitted, the server's
        cached category tree is used.

    """

    selection: list[str] = Field(
        default_factory=list,
        max_length=MAX_SELECTION_IDS,
        description="Current selection as category ids",
    )
    forest: list[CategoryNode] | None = Field(
        default=None,
        description="Inline category forest; defaults to the cached tree",
    )

    @field_validator("selection", mode="before")
    @classmethod
    def normalize_selection_ids(cls, v: str | list[str] | None) -> list[str]:
        """Strip, de-duplicate and drop empty ids."""
        return _clean_ids(v)


class ToggleRequest(SelectionRequest):
    """Request model for the /api/selection/toggle endpoint.

    Attributes
    ----------
    target_id : str
        Id of the clicked category.
    parent_id : str | None
        Parent of the clicked category, if the client already knows it.

    """

    target_id: str = Field(..., description="Id of the clicked category")
    parent_id: str | None = Field(default=None, description="Parent of the clicked category")

    @field_validator("target_id")
    @classmethod
    def validate_target_id(cls, v: str) -> str:
        """Validate that ``target_id`` is not empty."""
        if not v.strip():
            err = "target_id cannot be empty"
            raise ValueError(err)
        return v.strip()


class NormalizeRequest(SelectionRequest):
    """Request model for the /api/selection/normalize endpoint."""


class CoverageRequest(SelectionRequest):
    """Request model for the /api/selection/coverage endpoint.

    Attributes
    ----------
    node_ids : list[str] | None
        Ids to resolve. When omitted, every id in the forest is resolved.

    """

    node_ids: list[str] | None = Field(
        default=None,
        max_length=MAX_SELECTION_IDS,
        description="Ids to resolve; defaults to the whole forest",
    )

    @field_validator("node_ids", mode="before")
    @classmethod
    def normalize_node_ids(cls, v: str | list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return _clean_ids(v)


class SelectionResponse(BaseModel):
    """Canonical selection returned by toggle and normalize.

    Attributes
    ----------
    selection : list[str]
        Canonical selection in forest pre-order.
    label : str
        Summary label for a collapsed picker.

    """

    selection: list[str] = Field(..., description="Canonical selection")
    label: str = Field(..., description="Summary label for the picker")


class CoverageResponse(BaseModel):
    """Coverage state per requested id."""

    covered: dict[str, bool] = Field(..., description="Whether each id is covered by the selection")


class TreeResponse(BaseModel):
    """Cached category forest with basic statistics."""

    forest: list[CategoryNode]
    node_count: int = Field(..., ge=0)
    leaf_count: int = Field(..., ge=0)
    max_depth: int = Field(..., ge=0)


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
