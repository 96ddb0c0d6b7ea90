"""Infrastructure repositories module."""
from .account_repository import AccountRepository
from .match_repository import MatchRepository, start_of_today
from .live_game_repository import LiveGameRepository, rank_from_entries, count_bans

__all__ = [
    'AccountRepository',
    'MatchRepository',
    'start_of_today',
    'LiveGameRepository',
    'rank_from_entries',
    'count_bans',
]
