"""Run the selection API with ``python -m server``."""

from __future__ import annotations

import os

import uvicorn

from cattree.config import CATTREE_CACHE_PATH, CATTREE_CACHE_TTL_SECONDS, CATTREE_LOG_LEVEL, tree_url
from cattree.utils.logging_config import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Start uvicorn with the app's logging and the HOST/PORT/RELOAD settings."""
    host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        "Starting cattree server",
        extra={
            "host": host,
            "port": port,
            "tree_url": tree_url(),
            "cache_dir": str(CATTREE_CACHE_PATH),
            "cache_ttl_s": CATTREE_CACHE_TTL_SECONDS,
        },
    )

    # uvicorn must not replace the handler installed by configure_logging
    uvicorn.run(
        "server.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
        log_level=CATTREE_LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
