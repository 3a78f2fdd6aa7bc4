"""Core fetching and acquisition for jokecard."""

from jokecard.core.acquire import JokeAcquirer, build_acquirer
from jokecard.core.backoff import (
    BackoffPolicy,
    FetchAttemptConfig,
    calculate_backoff_delay,
    fetch_with_backoff,
)
from jokecard.core.http import cleanup, get_http_client, get_timeout_config
from jokecard.core.payload import ShapeRetryPolicy, retry_malformed

__all__ = [
    # http
    "get_http_client",
    "cleanup",
    "get_timeout_config",
    # backoff
    "FetchAttemptConfig",
    "BackoffPolicy",
    "calculate_backoff_delay",
    "fetch_with_backoff",
    # payload
    "ShapeRetryPolicy",
    "retry_malformed",
    # acquire
    "JokeAcquirer",
    "build_acquirer",
]
