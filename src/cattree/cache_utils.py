"""On-disk cache for fetched category forests."""

from __future__ import annotations

import asyncio
import hashlib
import os
import threading
from datetime import datetime, timezone
from pathlib import Path


def is_cache_fresh(path: Path, ttl_seconds: int) -> bool:
    """Check if a cached file is still fresh based on its modification time.

    Args:
        path: Path to the cached file.
        ttl_seconds: Time-to-live in seconds. If <= 0, cache is considered
            fresh indefinitely (cache forever mode).

    Returns:
        True if the cache is fresh and usable, False otherwise.
    """
    if not path.exists():
        return False
    if ttl_seconds <= 0:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    age_seconds = (datetime.now(timezone.utc) - mtime).total_seconds()
    return age_seconds <= ttl_seconds


def cache_file_for(url: str, base_path: Path) -> Path:
    """Get the cache file path for a category tree URL.

    Different API hosts get different files, so switching
    ``CATTREE_API_URL`` never serves another backend's forest.

    Args:
        url: The category tree URL.
        base_path: The base cache directory path.

    Returns:
        Path to the JSON cache file for this URL.
    """
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]
    return base_path / f"tree_{digest}.json"


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file asynchronously using a thread pool."""
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def replace_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Replace ``path`` with ``content`` without exposing a partial file.

    The text goes to a sibling temporary file first, which is then renamed
    over ``path``. Readers see either the old cache or the new one.
    """
    await asyncio.to_thread(_replace_text, path, content, encoding)


def _replace_text(path: Path, content: str, encoding: str) -> None:
    tmp = path.with_name(f".{path.name}.{os.getpid()}.{threading.get_ident()}.tmp")
    try:
        tmp.write_text(content, encoding=encoding)
        tmp.replace(path)
    finally:
        tmp.unlink(missing_ok=True)


async def discard_async(path: Path) -> None:
    """Remove a cache file if it exists."""
    await asyncio.to_thread(path.unlink, missing_ok=True)


async def mkdir_async(
    path: Path, parents: bool = False, exist_ok: bool = False
) -> None:
    """Create a directory asynchronously using a thread pool."""
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)
