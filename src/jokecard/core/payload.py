"""Payload-shape retry, layered over the backoff fetcher.

Transport retries live in ``fetch_with_backoff``; this policy only repeats
the whole fetch when the upstream returned valid JSON that is not a usable
joke. Upstream-signalled application errors are never retried.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import msgspec

from jokecard.core.backoff import Sleep
from jokecard.errors.exceptions import MalformedPayloadError

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXHAUSTED_MESSAGE = "Failed to fetch a complete joke after multiple retries."


class ShapeRetryPolicy(msgspec.Struct, frozen=True):
    """Fixed-delay retry budget for malformed payloads."""

    max_attempts: int = 5
    delay_ms: int = 500


async def retry_malformed(
    fetch: Callable[[], Awaitable[Any]],
    parse: Callable[[Any], T],
    policy: ShapeRetryPolicy | None = None,
    *,
    sleep: Sleep = asyncio.sleep,
    label: str = "payload",
) -> T:
    """Fetch and parse, repeating on MalformedPayloadError.

    Args:
        fetch: Zero-argument coroutine factory returning a decoded body
        parse: Turns a body into a value, or raises MalformedPayloadError
        policy: Attempt budget and fixed delay (defaults if None)
        sleep: Awaitable delay function, injectable for tests
        label: Name used in log messages

    Returns:
        The first successfully parsed value

    Raises:
        MalformedPayloadError once the attempt budget is used up; any other
        exception from fetch or parse propagates immediately
    """
    if policy is None:
        policy = ShapeRetryPolicy()

    for attempt in range(1, policy.max_attempts + 1):
        data = await fetch()
        try:
            return parse(data)
        except MalformedPayloadError as e:
            if attempt >= policy.max_attempts:
                raise MalformedPayloadError(EXHAUSTED_MESSAGE) from e
            logger.warning(
                "Malformed %s received (attempt %d/%d), retrying...",
                label,
                attempt,
                policy.max_attempts,
            )
            await sleep(policy.delay_ms / 1000.0)

    raise MalformedPayloadError(EXHAUSTED_MESSAGE)
