"""Live game repository implementation."""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from domain.entities import BanCounts, LiveGameView, ParticipantView, PlayerIdentity, UNRANKED
from domain.enums import QueueType
from domain.errors import RiotAPIError
from domain.interfaces import IAccountRepository, ILiveGameRepository
from infrastructure.api import RiotAPIClient, DataDragonClient

logger = logging.getLogger(__name__)

BLUE_TEAM_ID = 100
RED_TEAM_ID = 200


def format_league_entry(entry: Dict[str, Any]) -> str:
    """'GOLD II 45LP (20W 18L - 53%)' for one league entry."""
    wins = entry.get('wins', 0)
    losses = entry.get('losses', 0)
    total = wins + losses
    win_rate = round(wins / total * 100) if total else 0
    return (
        f"{entry.get('tier', '')} {entry.get('rank', '')} {entry.get('leaguePoints', 0)}LP "
        f"({wins}W {losses}L - {win_rate}%)"
    )


def rank_from_entries(entries: List[Dict[str, Any]]) -> Tuple[str, bool]:
    """
    Pick the label shown for a player: Solo/Duo first, then Flex.

    Returns:
        (rank label, hot streak flag of the chosen entry)
    """
    by_queue = {entry.get('queueType'): entry for entry in entries}
    chosen = None
    for queue in (QueueType.RANKED_SOLO_5x5, QueueType.RANKED_FLEX_SR):
        chosen = by_queue.get(queue.api_queue_name)
        if chosen is not None:
            break
    if chosen is None:
        return UNRANKED, False
    return format_league_entry(chosen), bool(chosen.get('hotStreak'))


def count_bans(banned: Optional[List[Dict[str, Any]]]) -> Optional[BanCounts]:
    """Real bans per side; empty ban slots (championId -1) are skipped."""
    if not banned:
        return None
    blue = sum(1 for b in banned if b.get('teamId') == BLUE_TEAM_ID and b.get('championId') != -1)
    red = sum(1 for b in banned if b.get('teamId') == RED_TEAM_ID and b.get('championId') != -1)
    return BanCounts(blue=blue, red=red)


class LiveGameRepository(ILiveGameRepository):
    """Repository for active games using the spectator API.

    The active game itself is required data; per-player rank and champion
    names are enrichment and fall back to placeholders when their lookup fails.
    """

    def __init__(
        self,
        api_client: RiotAPIClient,
        account_repo: IAccountRepository,
        ddragon: Optional[DataDragonClient] = None,
    ):
        """
        Initialize live game repository.

        Args:
            api_client: Riot API client instance
            account_repo: Resolver used to find the searched player
            ddragon: Optional Data Dragon client for champion names
        """
        self.api_client = api_client
        self.account_repo = account_repo
        self.ddragon = ddragon

    async def fetch_live_game(self, game_name: str, tag_line: str) -> LiveGameView:
        """
        Get the active game of gameName#tagLine.

        Raises:
            NotInGameError: the player is not in a game right now
            RiotAPIError: resolution or spectator lookup failed
        """
        player = await self.account_repo.resolve(game_name, tag_line)
        game = await self.api_client.get_active_game_by_summoner(player.summoner_id)
        return await self.build_view(game, player)

    async def build_view(self, game: Dict[str, Any], player: PlayerIdentity) -> LiveGameView:
        participants = game.get('participants') or []
        champions = await self._champion_names()

        # all rank lookups run together, a roster is at most ten players
        ranks = await asyncio.gather(
            *(self.get_rank(p.get('summonerId')) for p in participants)
        )

        blue: List[ParticipantView] = []
        red: List[ParticipantView] = []
        for raw, (rank_label, hot_streak) in zip(participants, ranks):
            view = ParticipantView(
                champion_name=self._champion_name(raw, champions),
                player_label=raw.get('riotId') or raw.get('summonerName') or "Unknown",
                is_searched_player=self._is_searched(raw, player),
                rank_label=rank_label,
                rune_style=(raw.get('perks') or {}).get('perkStyle'),
                hot_streak=hot_streak,
            )
            if raw.get('teamId') == BLUE_TEAM_ID:
                blue.append(view)
            elif raw.get('teamId') == RED_TEAM_ID:
                red.append(view)

        return LiveGameView(
            queue_id=game.get('gameQueueConfigId', 0),
            duration_seconds=max(0, int(game.get('gameLength') or 0)),
            map_id=game.get('mapId', 0),
            blue_team=tuple(blue),
            red_team=tuple(red),
            bans=count_bans(game.get('bannedChampions')),
        )

    async def get_rank(self, summoner_id: Optional[str]) -> Tuple[str, bool]:
        """Rank label and hot streak of one player; 'Unranked' if the lookup fails."""
        if not summoner_id:
            return UNRANKED, False
        try:
            entries = await self.api_client.get_league_entries_by_summoner(summoner_id)
        except RiotAPIError as exc:
            logger.warning(f"partial_data_unavailable: rank lookup failed ({exc.kind.value}): {exc}")
            return UNRANKED, False
        return rank_from_entries(entries)

    async def _champion_names(self) -> Dict[int, str]:
        if self.ddragon is None:
            return {}
        try:
            return await self.ddragon.get_champion_names()
        except RiotAPIError as exc:
            logger.warning(f"partial_data_unavailable: {exc}")
            return {}

    @staticmethod
    def _champion_name(raw: Dict[str, Any], champions: Dict[int, str]) -> str:
        champion_id = raw.get('championId')
        if champion_id in champions:
            return champions[champion_id]
        return raw.get('championName') or f"Champion {champion_id}"

    @staticmethod
    def _is_searched(raw: Dict[str, Any], player: PlayerIdentity) -> bool:
        if raw.get('summonerId'):
            return raw['summonerId'] == player.summoner_id
        return bool(raw.get('puuid')) and raw.get('puuid') == player.puuid
