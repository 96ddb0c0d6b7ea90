"""Resolved player identity."""
from dataclasses import dataclass


@dataclass(frozen=True)
class PlayerIdentity:
    """A player resolved from a Riot ID, valid for one command."""

    puuid: str
    summoner_id: str
    display_name: str  # gameName#tagLine as returned by the account API
