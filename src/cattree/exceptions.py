"""Custom exceptions for cattree."""


class CattreeError(Exception):
    """Base exception for cattree operations."""


class IntegrityError(CattreeError):
    """Category forest is structurally invalid (duplicate id or cycle)."""


class UnknownIdError(CattreeError, KeyError):
    """A node id is not present in the tree index."""

    def __init__(self, node_id: str) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Unknown category id: {self.node_id!r}"


class FetchError(CattreeError):
    """Error during category tree fetching."""


class TreeNotAvailableError(FetchError):
    """The category tree endpoint returned 404."""


class RateLimitError(FetchError):
    """Rate limited by the category API."""


class ParseError(CattreeError):
    """Category tree payload could not be parsed."""


class InvalidParentError(CattreeError, ValueError):
    """A caller-supplied parent id is not the parent of the target node."""
