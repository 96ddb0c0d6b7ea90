"""Use case: today's ranked stats of a player."""
from __future__ import annotations

import logging
from typing import Optional

from application.services import aggregate
from config import settings
from domain.entities import RiotId, StatsReport
from domain.interfaces import IAccountRepository, IMatchRepository
from infrastructure import RiotAPIClient, AccountRepository, MatchRepository

logger = logging.getLogger(__name__)


class DailyStatsUseCase:
    """
    Riot ID → identity → today's matches → ranked report.

    The client must already be open (async with RiotAPIClient() as client).
    """

    def __init__(
        self,
        api_client: RiotAPIClient,
        account_repo: Optional[IAccountRepository] = None,
        match_repo: Optional[IMatchRepository] = None,
        max_count: Optional[int] = None,
    ):
        self.api_client   = api_client
        self.account_repo = account_repo or AccountRepository(api_client)
        self.match_repo   = match_repo or MatchRepository(api_client)
        self.max_count    = max_count or settings.MATCH_HISTORY_COUNT

    async def execute(self, riot_id: RiotId, since: Optional[int] = None) -> StatsReport:
        player = await self.account_repo.resolve_riot_id(riot_id)
        matches = await self.match_repo.fetch_recent_matches(
            player.puuid, since=since, max_count=self.max_count
        )
        report = aggregate(player.puuid, player.display_name, matches)
        logger.info(
            f"stats {player.display_name}: solo={report.solo_record.wins}W/{report.solo_record.losses}L "
            f"flex={report.flex_record.wins}W/{report.flex_record.losses}L"
        )
        return report
