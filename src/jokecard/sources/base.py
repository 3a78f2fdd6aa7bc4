"""Base joke source and metadata for jokecard."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

import httpx
from msgspec import Struct

from jokecard.config.settings import Config, get_config
from jokecard.core.backoff import RETRYABLE_ERRORS
from jokecard.core.backoff import BackoffPolicy
from jokecard.core.backoff import FetchAttemptConfig
from jokecard.core.backoff import Sleep
from jokecard.core.backoff import fetch_with_backoff
from jokecard.core.payload import ShapeRetryPolicy
from jokecard.errors.classify import classify_exception
from jokecard.errors.classify import describe_exception
from jokecard.errors.exceptions import JokecardError
from jokecard.models import JokeFailure, JokeResult, JokeSuccess

logger = logging.getLogger(__name__)

# Everything a source can raise that acquire() turns into a JokeFailure
ACQUISITION_ERRORS: tuple[type[Exception], ...] = (JokecardError, *RETRYABLE_ERRORS)


class SourceMetadata(Struct, frozen=True):
    """Metadata about a joke source."""

    id: str
    name: str
    homepage: str
    endpoint: str


class JokeSource(ABC):
    """Abstract base class for joke sources.

    Each source must:
    1. Define metadata as a ClassVar
    2. Implement fetch_text() to return joke text or raise
    """

    # Subclasses must define this
    metadata: ClassVar[SourceMetadata]

    def __init__(
        self,
        config: Config | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        config = config or get_config()
        self.client = client
        self.sleep = sleep
        self.backoff = BackoffPolicy(
            max_retries=config.fetch.max_retries,
            base_delay_ms=config.fetch.base_delay_ms,
        )
        self.shape_retry = ShapeRetryPolicy(
            max_attempts=config.payload.max_attempts,
            delay_ms=config.payload.retry_delay_ms,
        )

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def failure_message(self) -> str:
        """User-facing message shown for any failure of this source."""
        return f"Failed to load a joke from {self.name}."

    def attempt_config(self) -> FetchAttemptConfig:
        """Backoff fetch settings for this source's endpoint."""
        return self.backoff.attempt_config(self.metadata.endpoint)

    async def fetch_json(self) -> Any:
        """One backoff-protected fetch of the source endpoint."""
        return await fetch_with_backoff(
            self.attempt_config(), client=self.client, sleep=self.sleep
        )

    @abstractmethod
    async def fetch_text(self) -> str:
        """Fetch a joke and return its text.

        Raises a JokecardError (or a transport error) on failure.
        """

    async def acquire(self) -> JokeResult:
        """Fetch a joke, converting every failure into a JokeFailure."""
        try:
            text = await self.fetch_text()
        except ACQUISITION_ERRORS as e:
            kind = classify_exception(e)
            logger.error(
                "Failed to fetch joke from %s (%s): %s",
                self.name,
                kind,
                describe_exception(e),
            )
            return JokeFailure(
                source_label=self.name,
                message=self.failure_message,
                kind=kind,
                detail=describe_exception(e),
            )

        logger.debug("Got joke from %s", self.name)
        return JokeSuccess(text=text, source_label=self.name)
