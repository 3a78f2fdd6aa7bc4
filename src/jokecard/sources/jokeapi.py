"""JokeAPI (v2.jokeapi.dev) source.

JokeAPI sometimes answers with a two-part joke or an incomplete body even when
``type=single`` is requested, so bodies are checked and refetched through the
payload-shape retry. A body carrying ``"error": true`` is final.
"""

from __future__ import annotations

from typing import Any

from jokecard.core.payload import retry_malformed
from jokecard.errors.exceptions import ApplicationError
from jokecard.errors.exceptions import EmptyPayloadError
from jokecard.errors.exceptions import MalformedPayloadError
from jokecard.sources import register_source
from jokecard.sources.base import JokeSource
from jokecard.sources.base import SourceMetadata

BLACKLIST_FLAGS = ("nsfw", "religious", "political", "racist", "sexist", "explicit")

ENDPOINT = (
    "https://v2.jokeapi.dev/joke/Any"
    f"?blacklistFlags={','.join(BLACKLIST_FLAGS)}&type=single"
)


def parse_jokeapi_payload(data: Any) -> str:
    """Extract the joke text from a JokeAPI body.

    Raises:
        EmptyPayloadError: The body is JSON null; not retried
        ApplicationError: The body sets the error flag
        MalformedPayloadError: The body is not a complete single joke
    """
    if data is None:
        raise EmptyPayloadError("API returned an empty body.")

    if not isinstance(data, dict):
        raise MalformedPayloadError(f"Expected a JSON object, got {type(data).__name__}")

    if data.get("error"):
        raise ApplicationError(data.get("message") or "API reported an internal error.")

    joke = data.get("joke")
    if data.get("type") == "single" and isinstance(joke, str) and joke:
        return joke

    raise MalformedPayloadError("Malformed joke data received")


@register_source
class JokeApiSource(JokeSource):
    """Single-part jokes from JokeAPI, with unsafe categories excluded."""

    metadata = SourceMetadata(
        id="jokeapi",
        name="JokeAPI",
        homepage="https://jokeapi.dev",
        endpoint=ENDPOINT,
    )

    async def fetch_text(self) -> str:
        return await retry_malformed(
            self.fetch_json,
            parse_jokeapi_payload,
            self.shape_retry,
            sleep=self.sleep,
            label="joke data",
        )
