"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .discord_client import DiscordClient, truncate_content
from .ddragon_client import DataDragonClient, clear_champion_cache

__all__ = [
    'RiotAPIClient',
    'DiscordClient',
    'truncate_content',
    'DataDragonClient',
    'clear_champion_cache',
]
