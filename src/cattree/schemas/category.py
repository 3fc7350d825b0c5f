"""Category tree models."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CategoryNode(BaseModel):
    """A node of the category forest as served by the category API.

    The API names the identifier ``_id``; ``id`` is accepted as well so that
    forests built in Python code do not need the wire alias.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
    )
    title: str = ""
    slug: str | None = None
    children: list["CategoryNode"] = Field(default_factory=list)
