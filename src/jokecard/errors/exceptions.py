"""Exceptions raised while fetching and parsing jokes."""

from __future__ import annotations


class JokecardError(Exception):
    """Base class for jokecard errors."""


class HttpStatusError(JokecardError):
    """Upstream answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP error! Status: {status_code}")


class FetchExhaustedError(JokecardError):
    """No fetch attempt could be made or completed."""

    def __init__(self, message: str = "Fetch failed after all retries."):
        super().__init__(message)


class MalformedPayloadError(JokecardError):
    """The body decoded, but does not look like a joke."""


class EmptyPayloadError(JokecardError):
    """The body decoded to JSON null."""


class ApplicationError(JokecardError):
    """The upstream API explicitly reported an error."""
