"""Tests for core/http.py (shared HTTP client)."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

import jokecard.core.http
from jokecard.config.settings import Config
from jokecard.config.settings import FetchConfig
from jokecard.core.http import USER_AGENT
from jokecard.core.http import cleanup
from jokecard.core.http import get_http_client
from jokecard.core.http import get_timeout_config


@pytest.fixture(autouse=True)
def reset_client():
    jokecard.core.http._client = None
    yield
    jokecard.core.http._client = None


class TestGetTimeoutConfig:
    """Tests for get_timeout_config function."""

    def test_uses_config_timeout_value(self):
        """The configured timeout is used for reads, connects are capped."""
        with patch("jokecard.core.http.get_config") as mock_get_config:
            mock_get_config.return_value = Config(fetch=FetchConfig(timeout=45.0))

            timeout = get_timeout_config()

            assert isinstance(timeout, httpx.Timeout)
            assert timeout.read == 45.0
            assert timeout.write == 45.0
            assert timeout.connect == 5.0


class TestGetHttpClient:
    """Tests for get_http_client context manager."""

    @pytest.mark.asyncio
    async def test_creates_new_client_on_first_call(self):
        async with get_http_client() as client:
            assert isinstance(client, httpx.AsyncClient)
            assert jokecard.core.http._client is client

    @pytest.mark.asyncio
    async def test_reuses_existing_client(self):
        async with get_http_client() as client1:
            async with get_http_client() as client2:
                assert client1 is client2

    @pytest.mark.asyncio
    async def test_client_configuration(self):
        """Client follows redirects and identifies itself."""
        async with get_http_client() as client:
            assert client.follow_redirects is True
            assert client.headers["user-agent"] == USER_AGENT

    @pytest.mark.asyncio
    async def test_does_not_close_client_on_exit(self):
        async with get_http_client() as client1:
            pass

        assert not client1.is_closed
        async with get_http_client() as client2:
            assert client2 is client1


class TestCleanup:
    """Tests for cleanup function."""

    @pytest.mark.asyncio
    async def test_closes_existing_client(self):
        async with get_http_client() as client:
            pass

        await cleanup()

        assert client.is_closed
        assert jokecard.core.http._client is None

    @pytest.mark.asyncio
    async def test_cleanup_when_no_client_exists(self):
        await cleanup()

        assert jokecard.core.http._client is None

    @pytest.mark.asyncio
    async def test_can_create_new_client_after_cleanup(self):
        async with get_http_client() as first:
            pass
        await cleanup()

        async with get_http_client() as second:
            assert second is not first
