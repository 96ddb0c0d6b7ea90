"""Match repository implementation."""
import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


def start_of_today(now: Optional[datetime] = None) -> int:
    """Epoch seconds of local midnight of the current day."""
    now = now or datetime.now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp())


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_match_ids_since(self, puuid: str, since: int, count: int = 20) -> List[str]:
        """Get match IDs newer than `since` (epoch seconds), newest first."""
        return await self.api_client.get_match_ids_by_puuid(
            puuid=puuid,
            start_time=since,
            count=count,
        )

    async def fetch_recent_matches(
        self,
        puuid: str,
        since: Optional[int] = None,
        max_count: int = 20
    ) -> List[Dict[str, Any]]:
        """
        Get full match details played since a cutoff.

        Args:
            puuid: Player UUID
            since: Cutoff in epoch seconds (default: start of today, local time)
            max_count: Maximum number of matches

        Returns:
            Raw match details, in the order of the match id list.
            Empty list when nothing was played since the cutoff.

        Raises:
            RiotAPIError: if the id list or any single match detail fails;
            no partial result is returned.
        """
        if since is None:
            since = start_of_today()

        match_ids = await self.get_match_ids_since(puuid, since, max_count)
        if not match_ids:
            return []

        logger.debug(f"Fetching {len(match_ids)} match details")
        results = await asyncio.gather(
            *(self.api_client.get_match_by_id(match_id) for match_id in match_ids),
            return_exceptions=True,
        )
        # wait for every request to settle, then fail the batch on the first error
        for match_id, res in zip(match_ids, results):
            if isinstance(res, BaseException):
                logger.error(f"Match {match_id} failed, dropping batch of {len(match_ids)}: {res}")
                raise res
        return list(results)
