"""Joke acquisition: pick a source, fetch, and publish the outcome."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Sequence

import httpx

from jokecard.config.settings import Config, get_config
from jokecard.core.backoff import Sleep
from jokecard.models import AcquisitionOutcome, JokeResult
from jokecard.sources import create_source, list_source_ids
from jokecard.sources.base import JokeSource

logger = logging.getLogger(__name__)


class JokeAcquirer:
    """Owns the outcome slot and runs acquisition calls against it.

    Each call contacts exactly one source, chosen uniformly at random, and
    never falls back to another. Calls are expected to run one at a time;
    if they overlap, a call that was superseded while in flight drops its
    result instead of overwriting the newer call's outcome.
    """

    def __init__(
        self,
        sources: Sequence[JokeSource],
        rng: random.Random | None = None,
    ) -> None:
        if not sources:
            raise ValueError("At least one joke source is required")
        self._sources = list(sources)
        self._rng = rng or random.Random()
        self._outcome = AcquisitionOutcome.loading()
        self._last_result: JokeResult | None = None
        self._generation = 0

    @property
    def sources(self) -> list[JokeSource]:
        return list(self._sources)

    @property
    def outcome(self) -> AcquisitionOutcome:
        """Latest outcome, for the display layer."""
        return self._outcome

    @property
    def last_result(self) -> JokeResult | None:
        """Result of the latest completed call, with its failure kind."""
        return self._last_result

    def choose_source(self) -> JokeSource:
        return self._sources[self._rng.randrange(len(self._sources))]

    async def acquire(self) -> AcquisitionOutcome:
        """Run one acquisition call and return its terminal outcome."""
        self._generation += 1
        generation = self._generation
        self._outcome = AcquisitionOutcome.loading()

        source = self.choose_source()
        logger.debug("Acquisition %d using %s", generation, source.name)
        result = await source.acquire()
        outcome = AcquisitionOutcome.from_result(result)

        if generation != self._generation:
            logger.debug(
                "Discarding result of superseded acquisition %d (current %d)",
                generation,
                self._generation,
            )
            return outcome

        self._last_result = result
        self._outcome = outcome
        return outcome


def build_acquirer(
    config: Config | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    rng: random.Random | None = None,
    source_ids: Sequence[str] | None = None,
    sleep: Sleep = asyncio.sleep,
) -> JokeAcquirer:
    """Create an acquirer over the enabled (or explicitly named) sources.

    Raises:
        ValueError: If a source id is unknown or no source is left
    """
    config = config or get_config()

    if source_ids is None:
        source_ids = [sid for sid in list_source_ids() if config.is_source_enabled(sid)]

    sources = [
        create_source(sid, config=config, client=client, sleep=sleep)
        for sid in source_ids
    ]
    if not sources:
        raise ValueError("No joke sources are enabled")
    return JokeAcquirer(sources, rng=rng)
