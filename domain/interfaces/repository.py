"""Repository interfaces for Riot data access."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..entities import PlayerIdentity, RiotId, LiveGameView


class IAccountRepository(ABC):
    """Interface for resolving Riot IDs to players."""

    @abstractmethod
    async def resolve(self, game_name: str, tag_line: str) -> PlayerIdentity:
        """Resolve gameName#tagLine to a player identity."""
        pass

    async def resolve_riot_id(self, riot_id: RiotId) -> PlayerIdentity:
        return await self.resolve(riot_id.game_name, riot_id.tag_line)


class IMatchRepository(ABC):
    """Interface for match history data."""

    @abstractmethod
    async def fetch_recent_matches(
        self,
        puuid: str,
        since: Optional[int] = None,
        max_count: int = 20
    ) -> List[Dict[str, Any]]:
        """Get raw match details played since a cutoff (default: midnight)."""
        pass


class ILiveGameRepository(ABC):
    """Interface for active game data."""

    @abstractmethod
    async def fetch_live_game(self, game_name: str, tag_line: str) -> LiveGameView:
        """Get the active game of a player."""
        pass
