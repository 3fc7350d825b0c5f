"""Fetch and cache the category forest from the category API."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from cattree.cache_utils import (
    cache_file_for,
    discard_async,
    is_cache_fresh,
    mkdir_async,
    read_text_async,
    replace_text_async,
)
from cattree.config import CATTREE_CACHE_PATH, CATTREE_CACHE_TTL_SECONDS, tree_url
from cattree.exceptions import IntegrityError, ParseError, TreeNotAvailableError
from cattree.http_utils import fetch_with_retries
from cattree.schemas import CategoryNode
from cattree.tree_index import TreeIndex, build_index

logger = logging.getLogger(__name__)

_FOREST_ADAPTER = TypeAdapter(list[CategoryNode])

_404_MESSAGE = "The category API does not expose a category tree at this URL."


@dataclass(frozen=True, eq=False)
class LoadedForest:
    """A validated forest together with its index."""

    forest: list[CategoryNode]
    index: TreeIndex
    url: str


def parse_forest_payload(payload: str | bytes | list[Any] | dict[str, Any]) -> list[CategoryNode]:
    """Validate a category tree payload.

    Accepts either a bare list of nodes or the API envelope
    ``{"data": [...]}``. Raw JSON text is decoded first.

    Raises:
        ParseError: If the payload is not valid JSON or not a list of nodes.
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Category tree is not valid JSON: {exc}") from exc

    if isinstance(payload, dict):
        if "data" not in payload:
            raise ParseError("Category tree envelope has no 'data' field")
        payload = payload["data"]
    if payload is None:
        return []

    try:
        return _FOREST_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise ParseError(f"Invalid category tree: {exc.error_count()} validation error(s)") from exc


def dump_forest(forest: list[CategoryNode]) -> str:
    return _FOREST_ADAPTER.dump_json(forest, by_alias=True).decode("utf-8")


async def _read_cached_forest(cache_file: Path) -> tuple[list[CategoryNode], TreeIndex] | None:
    """Load a cached forest, or return None if the cache file is unusable.

    An unreadable or invalid cache file is removed so that the next fetch
    replaces it.
    """
    try:
        forest = parse_forest_payload(await read_text_async(cache_file))
        return forest, build_index(forest)
    except (OSError, ParseError, IntegrityError) as exc:
        logger.warning("Ignoring unusable category tree cache %s: %s", cache_file, exc)
    try:
        await discard_async(cache_file)
    except OSError as exc:
        logger.warning("Could not remove category tree cache %s: %s", cache_file, exc)
    return None


async def fetch_category_forest(
    url: str | None = None,
    *,
    use_cache: bool = True,
    cache_path: Path | None = None,
    ttl_seconds: int | None = None,
) -> tuple[list[CategoryNode], TreeIndex]:
    """Fetch the category forest, validate it, and cache it locally.

    The forest is indexed before it is written to the cache, so a forest that
    fails its integrity check is never cached. A fresh cache file that cannot
    be read or validated is discarded and the forest is fetched again.

    Args:
        url: Category tree URL. Defaults to the configured API endpoint.
        use_cache: Whether to serve a fresh cached copy if available.
        cache_path: Cache directory. Defaults to ``CATTREE_CACHE_PATH``.
        ttl_seconds: Cache freshness window. Defaults to
            ``CATTREE_CACHE_TTL_SECONDS``.

    Returns:
        Tuple of (forest, index).

    Raises:
        TreeNotAvailableError: If the endpoint returns 404.
        FetchError: If a network error occurs.
        ParseError: If the payload is not a category forest.
        IntegrityError: If the forest has duplicate ids or a cycle.
    """
    url = url or tree_url()
    ttl = CATTREE_CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
    cache_file = cache_file_for(url, cache_path or CATTREE_CACHE_PATH)

    if use_cache and is_cache_fresh(cache_file, ttl):
        cached = await _read_cached_forest(cache_file)
        if cached is not None:
            logger.debug("Serving category tree for %s from %s", url, cache_file)
            return cached

    text = await fetch_with_retries(
        url,
        on_404=TreeNotAvailableError,
        on_404_message=_404_MESSAGE,
    )
    forest = parse_forest_payload(text)
    index = build_index(forest)
    logger.debug("Fetched %d categories (%d roots) from %s", len(index), len(index.roots), url)

    await mkdir_async(cache_file.parent, parents=True, exist_ok=True)
    await replace_text_async(cache_file, dump_forest(forest))
    return forest, index


class ForestProvider:
    """In-memory holder for the current forest with single-flight refresh.

    Concurrent callers that find the held forest stale wait on one shared
    fetch instead of each issuing their own.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        ttl_seconds: int = CATTREE_CACHE_TTL_SECONDS,
        use_cache: bool = True,
        cache_path: Path | None = None,
    ) -> None:
        self.url = url or tree_url()
        self.ttl_seconds = ttl_seconds
        self.use_cache = use_cache
        self.cache_path = cache_path
        self._lock = asyncio.Lock()
        self._loaded: LoadedForest | None = None
        self._loaded_at = 0.0

    def _fresh(self) -> LoadedForest | None:
        if self._loaded is None:
            return None
        if self.ttl_seconds > 0 and time.monotonic() - self._loaded_at > self.ttl_seconds:
            return None
        return self._loaded

    async def get(self) -> LoadedForest:
        """Return the held forest, fetching it if missing or stale."""
        loaded = self._fresh()
        if loaded is not None:
            return loaded

        async with self._lock:
            loaded = self._fresh()
            if loaded is not None:
                return loaded
            forest, index = await fetch_category_forest(
                self.url,
                use_cache=self.use_cache,
                cache_path=self.cache_path,
                ttl_seconds=self.ttl_seconds,
            )
            self._loaded = LoadedForest(forest=forest, index=index, url=self.url)
            self._loaded_at = time.monotonic()
            return self._loaded

    def invalidate(self) -> None:
        """Forget the held forest; the next :meth:`get` fetches again."""
        self._loaded = None
