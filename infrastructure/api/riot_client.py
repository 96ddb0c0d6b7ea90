"""Riot Games API client."""
import logging
from typing import Optional, Dict, Any, List, Type
from urllib.parse import quote

import httpx

from config import settings
from domain.enums import Region
from domain.errors import (
    NetworkError,
    NotInGameError,
    PlayerNotFoundError,
    RateLimitedError,
    RiotAPIError,
    UpstreamError,
    error_from_status,
)

logger = logging.getLogger(__name__)


class RiotAPIClient:
    """Asynchronous Riot API client.

    One call per request, no retries: every non-2xx status is raised as a
    typed RiotAPIError so callers know exactly what went wrong.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        region: Optional[Region] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key  = api_key if api_key is not None else settings.RIOT_API_KEY
        self.region   = region or settings.region
        self.timeout  = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key, "Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def _get_platform_url(self) -> str:
        return f"https://{self.region.platform_route}.api.riotgames.com"

    def _get_regional_url(self) -> str:
        return f"https://{self.region.regional_route}.api.riotgames.com"

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.reason_phrase or ""
        if isinstance(data, dict):
            status = data.get("status")
            if isinstance(status, dict):
                return str(status.get("message") or "")
        return ""

    async def _make_request(
        self,
        url: str,
        what: str,
        params: Optional[Dict[str, Any]] = None,
        not_found: Optional[Type[RiotAPIError]] = None,
    ) -> Any:
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        try:
            response = await self.session.get(url, params=params)
        except httpx.TimeoutException as exc:
            logger.error(f"Timeout after {self.timeout}s for {what}: {exc}")
            raise NetworkError(f"Network error: request timed out ({what})") from exc
        except httpx.HTTPError as exc:
            logger.error(f"Network error for {what}: {exc}")
            raise NetworkError(f"Network error: {exc}") from exc


        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                raise UpstreamError(f"Invalid JSON from Riot API for {what}", response.status_code) from exc

        error = error_from_status(response.status_code, what, self._error_detail(response), not_found)
        if isinstance(error, RateLimitedError):
            retry_after = response.headers.get("Retry-After")
            error.retry_after = int(retry_after) if retry_after and retry_after.isdigit() else None
            logger.warning(f"429 rate-limited on {what} (Retry-After={retry_after})")
        elif response.status_code in (401, 403):
            logger.error(f"{response.status_code} from Riot API, check RIOT_API_KEY")
        elif response.status_code != 404 or not_found is None:
            logger.warning(f"HTTP {response.status_code} for {url}")
        raise error

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> Dict[str, Any]:
        gn = quote(game_name, safe="")
        tl = quote(tag_line, safe="")
        url = f"{self._get_regional_url()}/riot/account/v1/accounts/by-riot-id/{gn}/{tl}"
        return await self._make_request(url, f'Riot ID "{game_name}#{tag_line}"', not_found=PlayerNotFoundError)

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_puuid(self, puuid: str) -> Dict[str, Any]:
        url = f"{self._get_platform_url()}/lol/summoner/v4/summoners/by-puuid/{puuid}"
        return await self._make_request(url, "Summoner", not_found=PlayerNotFoundError)

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        puuid: str,
        start_time: Optional[int] = None,
        count: int = 20,
    ) -> List[str]:
        url = f"{self._get_regional_url()}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        params: Dict[str, Any] = {"count": min(count, 100)}
        if start_time is not None:
            params["startTime"] = start_time
        result = await self._make_request(url, "Match history", params=params)
        return result if isinstance(result, list) else []

    async def get_match_by_id(self, match_id: str) -> Dict[str, Any]:
        url = f"{self._get_regional_url()}/lol/match/v5/matches/{match_id}"
        return await self._make_request(url, f"Match {match_id}")

    # ── Spectator API ──────────────────────────────────────────────────

    async def get_active_game_by_summoner(self, summoner_id: str) -> Dict[str, Any]:
        url = f"{self._get_platform_url()}/lol/spectator/v5/active-games/by-summoner/{summoner_id}"
        return await self._make_request(url, "Active game", not_found=NotInGameError)

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_summoner(self, summoner_id: str) -> List[Dict[str, Any]]:
        url = f"{self._get_platform_url()}/lol/league/v4/entries/by-summoner/{summoner_id}"
        result = await self._make_request(url, "League entries")
        return result if isinstance(result, list) else []
