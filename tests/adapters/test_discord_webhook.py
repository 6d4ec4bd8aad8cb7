"""Unit tests for DiscordWebhookNotifier."""

import asyncio

import aiohttp
import pytest
from unittest.mock import patch

from home_alarm.adapters.discord.webhook import DISCORD_CONTENT_LIMIT, DiscordWebhookNotifier
from home_alarm.ports.outbound import NotificationPort

WEBHOOK = "https://discord.test/api/webhooks/1/token"


def _mock_aiohttp_session(status=204, error=None, calls=None):
    """Return a class replacing aiohttp.ClientSession.

    Each post() records (url, json) into `calls` and answers with `status`,
    or raises `error` when given.
    """
    if calls is None:
        calls = []

    class FakeResponse:
        def __init__(self, status):
            self.status = status

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, **kwargs):
            self.kwargs = kwargs

        def post(self, url, **kwargs):
            calls.append((url, kwargs.get("json")))
            if error is not None:
                raise error
            return FakeResponse(status)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


class TestTruncateText:
    def test_short_text(self):
        assert DiscordWebhookNotifier.truncate_text("hello") == "hello"

    def test_exact_limit(self):
        text = "a" * DISCORD_CONTENT_LIMIT
        assert DiscordWebhookNotifier.truncate_text(text) == text

    def test_over_limit(self):
        result = DiscordWebhookNotifier.truncate_text("a" * 2500)
        assert len(result) == DISCORD_CONTENT_LIMIT
        assert result.endswith("...")


class TestNotify:
    def test_conforms_to_port(self):
        assert isinstance(DiscordWebhookNotifier(), NotificationPort)

    @pytest.mark.asyncio
    async def test_success_posts_content(self):
        calls = []
        notifier = DiscordWebhookNotifier()
        with patch("home_alarm.adapters.discord.webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(status=204, calls=calls)):
            result = await notifier.notify(WEBHOOK, "Activated 🔑")
        assert result.success is True
        assert result.status == 204
        assert calls == [(WEBHOOK, {"content": "Activated 🔑"})]

    @pytest.mark.asyncio
    async def test_any_2xx_is_success(self):
        notifier = DiscordWebhookNotifier()
        with patch("home_alarm.adapters.discord.webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(status=200)):
            result = await notifier.notify(WEBHOOK, "hi")
        assert result.success is True

    @pytest.mark.asyncio
    async def test_non_2xx_is_failure(self):
        notifier = DiscordWebhookNotifier()
        with patch("home_alarm.adapters.discord.webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(status=429)):
            result = await notifier.notify(WEBHOOK, "hi")
        assert result.success is False
        assert result.status == 429
        assert "429" in result.error

    @pytest.mark.asyncio
    async def test_network_error_is_swallowed(self):
        notifier = DiscordWebhookNotifier()
        error = aiohttp.ClientConnectionError("connection refused")
        with patch("home_alarm.adapters.discord.webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(error=error)):
            result = await notifier.notify(WEBHOOK, "hi")
        assert result.success is False
        assert "connection refused" in result.error

    @pytest.mark.asyncio
    async def test_timeout_is_swallowed(self):
        notifier = DiscordWebhookNotifier(timeout_seconds=0.01)
        with patch("home_alarm.adapters.discord.webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(error=asyncio.TimeoutError())):
            result = await notifier.notify(WEBHOOK, "hi")
        assert result.success is False
        assert result.error == "timeout"

    @pytest.mark.asyncio
    async def test_unconfigured_destination(self):
        calls = []
        notifier = DiscordWebhookNotifier()
        with patch("home_alarm.adapters.discord.webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(calls=calls)):
            result = await notifier.notify("", "hi")
        assert result.success is False
        assert "not configured" in result.error
        assert calls == []

    @pytest.mark.asyncio
    async def test_long_message_truncated(self):
        calls = []
        notifier = DiscordWebhookNotifier()
        with patch("home_alarm.adapters.discord.webhook.aiohttp.ClientSession",
                   _mock_aiohttp_session(calls=calls)):
            await notifier.notify(WEBHOOK, "x" * 3000)
        assert len(calls[0][1]["content"]) == DISCORD_CONTENT_LIMIT
