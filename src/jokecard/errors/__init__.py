"""Error handling for jokecard."""

from jokecard.errors.classify import classify_exception, describe_exception
from jokecard.errors.exceptions import (
    ApplicationError,
    EmptyPayloadError,
    FetchExhaustedError,
    HttpStatusError,
    JokecardError,
    MalformedPayloadError,
)
from jokecard.errors.types import FailureKind

__all__ = [
    # Core types
    "FailureKind",
    # Exceptions
    "JokecardError",
    "HttpStatusError",
    "FetchExhaustedError",
    "MalformedPayloadError",
    "EmptyPayloadError",
    "ApplicationError",
    # Classification functions
    "classify_exception",
    "describe_exception",
]
