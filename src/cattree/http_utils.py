"""HTTP utilities for fetching the category tree with retry logic."""

from __future__ import annotations

import asyncio
import logging
from typing import Final

import httpx

from cattree.config import (
    CATTREE_FETCH_BACKOFF_S,
    CATTREE_FETCH_MAX_RETRIES,
    CATTREE_FETCH_TIMEOUT_S,
    CATTREE_USER_AGENT,
)
from cattree.exceptions import FetchError, RateLimitError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """Fetch text from a URL, retrying transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        on_404: Custom exception class to raise on 404. Defaults to FetchError.
        on_404_message: Custom error message for 404 responses.

    Returns:
        The response body as text.

    Raises:
        RateLimitError: If the last attempt was answered with 429.
        FetchError (or custom on_404 exception): If the fetch fails after all
            retries or returns 404.
    """
    timeout = httpx.Timeout(CATTREE_FETCH_TIMEOUT_S)
    headers = {"User-Agent": CATTREE_USER_AGENT, "Accept": "application/json"}
    not_found_exc_class = on_404 or FetchError

    async def do_fetch(http_client: httpx.AsyncClient) -> str:
        last_exc: Exception | None = None
        last_status: int | None = None

        for attempt in range(CATTREE_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    message = on_404_message or f"Resource not found at {url}"
                    raise not_found_exc_class(message)

                if response.status_code in RETRY_STATUS_CODES:
                    last_status = response.status_code
                    last_exc = FetchError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_status = None
                last_exc = exc

            if attempt < CATTREE_FETCH_MAX_RETRIES:
                backoff = CATTREE_FETCH_BACKOFF_S * (2**attempt)
                logger.debug("Retrying %s in %.2fs after: %s", url, backoff, last_exc)
                await asyncio.sleep(backoff)

        if last_status == 429:
            raise RateLimitError(f"Rate limited by {url}")
        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
