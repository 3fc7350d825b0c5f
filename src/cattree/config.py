"""Local configuration for cattree."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_API_URL = "http://localhost:5000/api/v1"
DEFAULT_TREE_PATH = "/categories/tree"
DEFAULT_CACHE_DIR = ".cattree_cache"
DEFAULT_CACHE_TTL_SECONDS = 10 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "cattree/0.1"
DEFAULT_LOG_LEVEL = "INFO"

CATTREE_API_URL = os.getenv("CATTREE_API_URL", DEFAULT_API_URL).rstrip("/")
CATTREE_TREE_PATH = os.getenv("CATTREE_TREE_PATH", DEFAULT_TREE_PATH)
# Local-only cache directory for the last fetched category forest.
CATTREE_CACHE_PATH = Path(os.getenv("CATTREE_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
CATTREE_CACHE_TTL_SECONDS = int(os.getenv("CATTREE_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
CATTREE_FETCH_TIMEOUT_S = float(os.getenv("CATTREE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
CATTREE_FETCH_MAX_RETRIES = int(os.getenv("CATTREE_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
CATTREE_FETCH_BACKOFF_S = float(os.getenv("CATTREE_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
CATTREE_USER_AGENT = os.getenv("CATTREE_USER_AGENT", DEFAULT_USER_AGENT)
CATTREE_LOG_LEVEL = os.getenv("CATTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def tree_url() -> str:
    """Return the full URL of the category tree endpoint."""
    return f"{CATTREE_API_URL}{CATTREE_TREE_PATH}"
