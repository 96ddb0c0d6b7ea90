"""Account repository implementation."""
import logging

from domain.entities import PlayerIdentity
from domain.interfaces import IAccountRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class AccountRepository(IAccountRepository):
    """Resolves Riot IDs to players using the account and summoner APIs."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize account repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def resolve(self, game_name: str, tag_line: str) -> PlayerIdentity:
        """
        Resolve gameName#tagLine to a player identity.

        Two dependent lookups: account-v1 gives the PUUID, summoner-v4 on
        the platform gives the summoner id. Any failure aborts.

        Raises:
            RiotAPIError: the typed error of whichever lookup failed
        """
        account = await self.api_client.get_account_by_riot_id(game_name, tag_line)
        puuid = account['puuid']

        summoner = await self.api_client.get_summoner_by_puuid(puuid)

        display_name = (
            f"{account.get('gameName') or game_name}#{account.get('tagLine') or tag_line}"
        )
        logger.debug(f"Resolved {display_name} → {puuid[:8]}…")
        return PlayerIdentity(
            puuid=puuid,
            summoner_id=summoner.get('id', ''),
            display_name=display_name,
        )
