"""Tests for core/payload.py (malformed-payload retry)."""

from __future__ import annotations

import httpx
import pytest

from jokecard.core.payload import EXHAUSTED_MESSAGE
from jokecard.core.payload import ShapeRetryPolicy
from jokecard.core.payload import retry_malformed
from jokecard.errors.exceptions import ApplicationError
from jokecard.errors.exceptions import MalformedPayloadError


class Script:
    """Coroutine factory returning canned bodies, counting calls."""

    def __init__(self, *bodies):
        self.bodies = list(bodies)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        body = self.bodies.pop(0)
        if isinstance(body, Exception):
            raise body
        return body


def parse(data):
    if data.get("error"):
        raise ApplicationError(data["message"])
    if not data.get("joke"):
        raise MalformedPayloadError("missing joke")
    return data["joke"]


class TestRetryMalformed:
    """Tests for retry_malformed function."""

    @pytest.mark.asyncio
    async def test_returns_first_parsed_value(self, sleep_recorder):
        fetch = Script({"joke": "hi"})

        result = await retry_malformed(fetch, parse, sleep=sleep_recorder)

        assert result == "hi"
        assert fetch.calls == 1
        assert sleep_recorder.delays == []

    @pytest.mark.asyncio
    async def test_retries_malformed_with_fixed_delay(self, sleep_recorder):
        """Four malformed bodies then a good one: 5 attempts, 4 waits."""
        fetch = Script({}, {}, {"joke": ""}, {"type": "twopart"}, {"joke": "hi"})

        result = await retry_malformed(
            fetch, parse, ShapeRetryPolicy(max_attempts=5, delay_ms=500),
            sleep=sleep_recorder,
        )

        assert result == "hi"
        assert fetch.calls == 5
        assert sleep_recorder.delays == [0.5, 0.5, 0.5, 0.5]

    @pytest.mark.asyncio
    async def test_exhausted_attempts_raise(self, sleep_recorder):
        fetch = Script({}, {}, {})

        with pytest.raises(MalformedPayloadError) as exc_info:
            await retry_malformed(
                fetch, parse, ShapeRetryPolicy(max_attempts=3, delay_ms=100),
                sleep=sleep_recorder,
            )

        assert str(exc_info.value) == EXHAUSTED_MESSAGE
        assert isinstance(exc_info.value.__cause__, MalformedPayloadError)
        assert fetch.calls == 3
        assert sleep_recorder.delays == [0.1, 0.1]

    @pytest.mark.asyncio
    async def test_application_error_is_not_retried(self, sleep_recorder):
        fetch = Script({"error": True, "message": "No matching joke found"})

        with pytest.raises(ApplicationError, match="No matching joke found"):
            await retry_malformed(fetch, parse, sleep=sleep_recorder)

        assert fetch.calls == 1
        assert sleep_recorder.delays == []

    @pytest.mark.asyncio
    async def test_fetch_error_is_not_retried(self, sleep_recorder):
        """Transport errors already went through backoff and are final here."""
        fetch = Script(httpx.ConnectError("down"), {"joke": "unreached"})

        with pytest.raises(httpx.ConnectError):
            await retry_malformed(fetch, parse, sleep=sleep_recorder)

        assert fetch.calls == 1

    @pytest.mark.asyncio
    async def test_zero_attempts_raise_without_fetching(self, sleep_recorder):
        fetch = Script({"joke": "unreached"})

        with pytest.raises(MalformedPayloadError):
            await retry_malformed(
                fetch, parse, ShapeRetryPolicy(max_attempts=0), sleep=sleep_recorder
            )

        assert fetch.calls == 0
