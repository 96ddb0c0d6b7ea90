"""Discord interaction follow-up client."""
import logging
from typing import Optional, Dict, Any

import httpx

from config import settings

logger = logging.getLogger(__name__)

MAX_CONTENT_LENGTH = 2000
USER_AGENT = "DiscordBot (https://github.com/demacia-bot, 1.0.0)"


def truncate_content(content: str, limit: int = MAX_CONTENT_LENGTH) -> str:
    """Cut a message down to Discord's content limit, ending with an ellipsis."""
    if len(content) <= limit:
        return content
    return content[: limit - 1] + "…"


class DiscordClient:
    """Sends follow-up messages through the interaction webhook."""

    def __init__(
        self,
        bot_token: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.bot_token = bot_token if bot_token is not None else settings.DISCORD_TOKEN
        self.api_base  = (api_base or settings.DISCORD_API_BASE).rstrip("/")
        self.timeout   = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json; charset=UTF-8",
            "User-Agent": USER_AGENT,
        }
        if self.bot_token:
            headers["Authorization"] = f"Bot {self.bot_token}"
        return headers

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers=self._headers(),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def send_followup(self, application_id: str, token: str, content: str) -> Dict[str, Any]:
        """
        POST a follow-up message for a deferred interaction.

        Raises:
            httpx.HTTPError: on transport failure or a non-2xx answer
        """
        if self.session is None:
            raise RuntimeError("DiscordClient must be used as an async context manager")

        url = f"{self.api_base}/webhooks/{application_id}/{token}"
        response = await self.session.post(url, json={"content": truncate_content(content)})
        response.raise_for_status()
        logger.debug(f"Follow-up delivered ({response.status_code})")
        try:
            return response.json()
        except ValueError:
            return {}
