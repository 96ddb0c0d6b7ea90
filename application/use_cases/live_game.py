"""Use case: the active game of a player."""
from __future__ import annotations

import logging
from typing import Optional

from domain.entities import LiveGameView, RiotId
from domain.interfaces import ILiveGameRepository
from infrastructure import RiotAPIClient, DataDragonClient, AccountRepository, LiveGameRepository

logger = logging.getLogger(__name__)


class LiveGameUseCase:
    """Riot ID → identity → active game with both teams ranked."""

    def __init__(
        self,
        api_client: RiotAPIClient,
        ddragon: Optional[DataDragonClient] = None,
        live_repo: Optional[ILiveGameRepository] = None,
    ):
        self.api_client = api_client
        self.live_repo  = live_repo or LiveGameRepository(
            api_client, AccountRepository(api_client), ddragon
        )

    async def execute(self, riot_id: RiotId) -> LiveGameView:
        view = await self.live_repo.fetch_live_game(riot_id.game_name, riot_id.tag_line)
        logger.info(f"live {riot_id}: {view.queue_name}, {len(view.participants)} players")
        return view
