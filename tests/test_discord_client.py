"""Tests for the follow-up client."""

import httpx
import pytest

from infrastructure.api.discord_client import MAX_CONTENT_LENGTH, DiscordClient, truncate_content


def test_truncate_short_message_untouched():
    assert truncate_content("hello") == "hello"


def test_truncate_long_message():
    text = truncate_content("x" * 2500)
    assert len(text) == MAX_CONTENT_LENGTH
    assert text.endswith("…")


class TestDiscordClient:
    @pytest.mark.asyncio
    async def test_bot_token_header(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"id": "1"})

        client = DiscordClient(bot_token="secret", api_base="https://discord.test/api/v10",
                               transport=httpx.MockTransport(handler))
        async with client:
            result = await client.send_followup("app", "tok", "hi")

        assert result == {"id": "1"}
        assert seen[0].headers["Authorization"] == "Bot secret"
        assert seen[0].method == "POST"

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = DiscordClient(bot_token="", api_base="https://discord.test/api/v10",
                               transport=httpx.MockTransport(lambda r: httpx.Response(404, json={})))
        async with client:
            with pytest.raises(httpx.HTTPStatusError):
                await client.send_followup("app", "tok", "hi")
