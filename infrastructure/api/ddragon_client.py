"""Data Dragon client (static champion data)."""
import logging
from typing import Dict, Optional, Tuple

import httpx

from config import settings
from domain.errors import PartialDataUnavailableError

logger = logging.getLogger(__name__)

# (base_url, locale, version) -> champion names, shared by every client
_CHAMPION_CACHE: Dict[Tuple[str, str, str], Dict[int, str]] = {}


def clear_champion_cache() -> None:
    _CHAMPION_CACHE.clear()


class DataDragonClient:
    """Best-effort champion id → name lookup.

    The spectator API only returns champion ids. Only the version list is
    fetched per client; champion.json is loaded once per patch and kept
    in a process-wide cache. A failure raises PartialDataUnavailableError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        locale: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.DDRAGON_BASE).rstrip("/")
        self.locale   = locale or settings.DDRAGON_LOCALE
        self.timeout  = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport
        self._champions: Optional[Dict[int, str]] = None

    async def __aenter__(self):
        self.session = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _get_json(self, url: str):
        if self.session is None:
            raise RuntimeError("DataDragonClient must be used as an async context manager")
        try:
            response = await self.session.get(url)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise PartialDataUnavailableError(f"Data Dragon unavailable: {exc}") from exc

    async def get_latest_version(self) -> str:
        versions = await self._get_json(f"{self.base_url}/api/versions.json")
        if not versions:
            raise PartialDataUnavailableError("Data Dragon returned no versions")
        return versions[0]

    async def get_champion_names(self) -> Dict[int, str]:
        """
        Returns mapping: championKey(int) -> display name
        """
        if self._champions is not None:
            return self._champions

        version = await self.get_latest_version()
        key = (self.base_url, self.locale, version)
        if key in _CHAMPION_CACHE:
            self._champions = _CHAMPION_CACHE[key]
            return self._champions

        url = f"{self.base_url}/cdn/{version}/data/{self.locale}/champion.json"
        payload = await self._get_json(url)
        try:
            data = payload["data"]
            self._champions = {int(champ["key"]): champ["name"] for champ in data.values()}
        except (KeyError, TypeError, ValueError) as exc:
            raise PartialDataUnavailableError(f"Unexpected champion.json layout: {exc}") from exc
        _CHAMPION_CACHE[key] = self._champions
        logger.debug(f"Loaded {len(self._champions)} champion names (ddragon {version})")
        return self._champions
