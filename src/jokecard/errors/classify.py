"""Exception classification for joke acquisition failures."""

from __future__ import annotations

import httpx

from jokecard.errors.exceptions import ApplicationError
from jokecard.errors.exceptions import EmptyPayloadError
from jokecard.errors.exceptions import MalformedPayloadError
from jokecard.errors.types import FailureKind


def classify_exception(e: Exception) -> FailureKind:
    """Map a fetch or parse exception onto a failure kind.

    Anything that is not a payload-level error is a transport failure:
    network errors, non-2xx statuses and undecodable bodies all surface
    from the backoff fetcher once its retries are exhausted.
    """
    if isinstance(e, ApplicationError):
        return FailureKind.APPLICATION_ERROR

    if isinstance(e, (MalformedPayloadError, EmptyPayloadError)):
        return FailureKind.MALFORMED_PAYLOAD

    return FailureKind.TRANSPORT


def describe_exception(e: Exception) -> str:
    """Short human-readable description of an exception for logs."""
    if isinstance(e, httpx.TimeoutException):
        return "Request timed out"
    if isinstance(e, httpx.ConnectError):
        return "Failed to connect to server"
    message = str(e)
    return message or type(e).__name__
