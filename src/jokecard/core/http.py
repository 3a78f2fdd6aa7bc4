"""Shared HTTP client for jokecard."""

from contextlib import asynccontextmanager

import httpx

from jokecard import __version__
from jokecard.config.settings import get_config

USER_AGENT = f"jokecard/{__version__} (https://github.com/jokecard/jokecard)"

# Global HTTP client
_client: httpx.AsyncClient | None = None


def get_timeout_config() -> httpx.Timeout:
    """Get timeout configuration from settings."""
    config = get_config()
    return httpx.Timeout(config.fetch.timeout, connect=5.0)


@asynccontextmanager
async def get_http_client():
    """Get or create the shared HTTP client.

    Usage:
        async with get_http_client() as client:
            response = await client.get(...)
    """
    global _client

    if _client is None:
        _client = httpx.AsyncClient(
            timeout=get_timeout_config(),
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
        )

    # Kept open for reuse; cleanup() closes it
    yield _client


async def cleanup() -> None:
    """Close the HTTP client.

    Should be called on application shutdown.
    """
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
