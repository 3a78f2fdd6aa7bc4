"""Pytest configuration and shared fixtures for jokecard tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Generator

import httpx
import pytest

from jokecard.config import settings
from jokecard.config.settings import Config
from jokecard.config.settings import FetchConfig
from jokecard.config.settings import PayloadConfig


class SleepRecorder:
    """Stand-in for asyncio.sleep that records delays instead of waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class ScriptedHandler:
    """MockTransport handler that replays a script of upstream answers.

    Script items:
        dict/list: 200 response with that JSON body
        (status, body): response with that status and JSON body
        str: 200 response with that raw (non-JSON) text
        Exception: raised as the transport error

    The last item repeats once the script runs out.
    """

    def __init__(self, script: list[Any]) -> None:
        self.script = list(script)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.script.pop(0) if len(self.script) > 1 else self.script[0]

        if isinstance(item, Exception):
            raise item
        if isinstance(item, tuple):
            status, body = item
            return httpx.Response(status, json=body)
        if isinstance(item, str):
            return httpx.Response(200, text=item)
        return httpx.Response(200, json=item)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """Keep every test away from the real user config."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("JOKECARD_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("JOKECARD_ENABLED_SOURCES", raising=False)
    settings._config = None
    yield config_dir
    settings._config = None


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def scripted_client():
    """Factory returning (client, handler) for a script of upstream answers."""

    def factory(*script: Any) -> tuple[httpx.AsyncClient, ScriptedHandler]:
        handler = ScriptedHandler(list(script))
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return client, handler

    return factory


@pytest.fixture
def default_config() -> Config:
    """Config with the stock retry budgets."""
    return Config(
        fetch=FetchConfig(max_retries=5, base_delay_ms=1000),
        payload=PayloadConfig(max_attempts=5, retry_delay_ms=500),
    )


@pytest.fixture
def single_joke() -> dict:
    """Well-formed JokeAPI single-joke body."""
    return {
        "error": False,
        "category": "Programming",
        "type": "single",
        "joke": "I've got a really good UDP joke to tell you but I don't know if you'll get it.",
        "flags": {"nsfw": False, "religious": False, "political": False},
        "id": 0,
        "safe": True,
        "lang": "en",
    }


@pytest.fixture
def twopart_joke() -> dict:
    """JokeAPI two-part body, which the single-joke parser rejects."""
    return {
        "error": False,
        "category": "Pun",
        "type": "twopart",
        "setup": "What do you call a fake noodle?",
        "delivery": "An impasta.",
        "id": 1,
    }


@pytest.fixture
def jokeapi_error() -> dict:
    """JokeAPI body with the error flag set."""
    return {
        "error": True,
        "internalError": False,
        "code": 106,
        "message": "No matching joke found",
        "causedBy": ["No jokes were found that match your provided filter(s)."],
    }


@pytest.fixture
def dad_joke() -> dict:
    """icanhazdadjoke JSON body."""
    return {
        "id": "R7UfaahVfFd",
        "joke": "My dog used to chase people on a bike a lot. It got so bad I had to take his bike away.",
        "status": 200,
    }
