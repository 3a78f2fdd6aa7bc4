"""Retry-with-exponential-backoff JSON fetcher.

The fetcher knows nothing about jokes: it issues one request per attempt,
accepts only 2xx responses, decodes the body as JSON and, on any failure
before the last attempt, sleeps ``base_delay_ms * 2**attempt`` before trying
again. Delays therefore run 1x, 2x, 4x, 8x... the base delay.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
import msgspec

from jokecard.core.http import get_http_client
from jokecard.errors.classify import describe_exception
from jokecard.errors.exceptions import FetchExhaustedError
from jokecard.errors.exceptions import HttpStatusError

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[Any]]

# Failures that consume one backoff attempt. ValueError covers JSON decoding.
RETRYABLE_ERRORS: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    HttpStatusError,
    ValueError,
)


class FetchAttemptConfig(msgspec.Struct, frozen=True):
    """Everything one backoff fetch needs."""

    url: str
    request_options: dict[str, Any] = msgspec.field(default_factory=dict)
    max_retries: int = 5
    base_delay_ms: int = 1000
    method: str = "GET"


class BackoffPolicy(msgspec.Struct, frozen=True):
    """Transport-level retry budget, shared by every request to a source."""

    max_retries: int = 5
    base_delay_ms: int = 1000

    def attempt_config(
        self,
        url: str,
        request_options: dict[str, Any] | None = None,
        method: str = "GET",
    ) -> FetchAttemptConfig:
        return FetchAttemptConfig(
            url=url,
            request_options=dict(request_options or {}),
            max_retries=self.max_retries,
            base_delay_ms=self.base_delay_ms,
            method=method,
        )


def calculate_backoff_delay(attempt: int, base_delay_ms: int) -> float:
    """Calculate delay before the next attempt.

    Args:
        attempt: Which attempt just failed (0-indexed)
        base_delay_ms: Base delay in milliseconds

    Returns:
        Delay in seconds
    """
    return base_delay_ms * (2**attempt) / 1000.0


async def _request_json(client: httpx.AsyncClient, config: FetchAttemptConfig) -> Any:
    response = await client.request(
        config.method, config.url, **config.request_options
    )
    if not response.is_success:
        raise HttpStatusError(response.status_code, url=config.url)
    return response.json()


async def fetch_with_backoff(
    config: FetchAttemptConfig,
    *,
    client: httpx.AsyncClient | None = None,
    sleep: Sleep = asyncio.sleep,
) -> Any:
    """Fetch and decode a JSON resource, retrying with exponential backoff.

    Args:
        config: URL, request options and retry budget
        client: HTTP client to use (the shared client if None)
        sleep: Awaitable delay function, injectable for tests

    Returns:
        The decoded JSON body of the first successful response

    Raises:
        The last failure once all attempts are exhausted, or
        FetchExhaustedError if no attempt was allowed at all
    """
    if client is None:
        async with get_http_client() as shared:
            return await fetch_with_backoff(config, client=shared, sleep=sleep)

    for attempt in range(config.max_retries):
        try:
            return await _request_json(client, config)
        except RETRYABLE_ERRORS as e:
            if attempt >= config.max_retries - 1:
                logger.warning(
                    "Fetch of %s failed after %d attempts: %s",
                    config.url,
                    config.max_retries,
                    describe_exception(e),
                )
                raise

            delay = calculate_backoff_delay(attempt, config.base_delay_ms)
            logger.debug(
                "Attempt %d/%d for %s failed (%s), retrying in %.2fs",
                attempt + 1,
                config.max_retries,
                config.url,
                describe_exception(e),
                delay,
            )
            await sleep(delay)

    raise FetchExhaustedError()
