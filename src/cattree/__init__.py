"""cattree: canonical multi-select over category trees."""

from cattree.coverage import covered_ids, covered_leaves, is_covered
from cattree.exceptions import (
    CattreeError,
    FetchError,
    IntegrityError,
    InvalidParentError,
    ParseError,
    RateLimitError,
    TreeNotAvailableError,
    UnknownIdError,
)
from cattree.expansion import is_expanded, toggle_expanded
from cattree.fetch import ForestProvider, LoadedForest, fetch_category_forest, parse_forest_payload
from cattree.normalize import normalize_selection
from cattree.schemas import CategoryNode
from cattree.selection import SelectionEngine, selection_label, toggle_selection
from cattree.toggle import toggle_candidate
from cattree.tree_index import TreeIndex, build_index

__all__ = [
    "CategoryNode",
    "CattreeError",
    "FetchError",
    "ForestProvider",
    "IntegrityError",
    "InvalidParentError",
    "LoadedForest",
    "ParseError",
    "RateLimitError",
    "SelectionEngine",
    "TreeIndex",
    "TreeNotAvailableError",
    "UnknownIdError",
    "build_index",
    "covered_ids",
    "covered_leaves",
    "fetch_category_forest",
    "is_covered",
    "is_expanded",
    "normalize_selection",
    "parse_forest_payload",
    "selection_label",
    "toggle_candidate",
    "toggle_expanded",
    "toggle_selection",
]
