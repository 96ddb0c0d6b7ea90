"""Infrastructure layer - API clients and repositories."""
from .api import RiotAPIClient, DiscordClient, DataDragonClient
from .repositories import AccountRepository, MatchRepository, LiveGameRepository

__all__ = [
    'RiotAPIClient',
    'DiscordClient',
    'DataDragonClient',
    'AccountRepository',
    'MatchRepository',
    'LiveGameRepository',
]
