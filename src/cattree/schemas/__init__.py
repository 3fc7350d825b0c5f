"""Shared schemas for cattree."""

from cattree.schemas.category import CategoryNode

__all__ = ["CategoryNode"]
