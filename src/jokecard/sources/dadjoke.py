"""icanhazdadjoke.com source."""

from __future__ import annotations

from typing import Any

from jokecard.core.backoff import FetchAttemptConfig
from jokecard.errors.exceptions import MalformedPayloadError
from jokecard.sources import register_source
from jokecard.sources.base import JokeSource
from jokecard.sources.base import SourceMetadata

HEADERS = {"Accept": "application/json"}


def parse_dadjoke_payload(data: Any) -> str:
    """Extract the joke text from an icanhazdadjoke body."""
    if isinstance(data, dict):
        joke = data.get("joke")
        if isinstance(joke, str) and joke:
            return joke
    raise MalformedPayloadError("Dad Joke API returned an invalid response structure.")


@register_source
class DadJokeSource(JokeSource):
    """Dad jokes; the API returns HTML unless JSON is asked for."""

    metadata = SourceMetadata(
        id="dadjoke",
        name="Dad Joke API",
        homepage="https://icanhazdadjoke.com",
        endpoint="https://icanhazdadjoke.com/",
    )

    def attempt_config(self) -> FetchAttemptConfig:
        return self.backoff.attempt_config(
            self.metadata.endpoint, {"headers": dict(HEADERS)}
        )

    async def fetch_text(self) -> str:
        # Single fetch, no payload-shape retry
        return parse_dadjoke_payload(await self.fetch_json())
