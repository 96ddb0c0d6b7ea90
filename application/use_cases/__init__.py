"""Application use cases."""
from .daily_stats import DailyStatsUseCase
from .live_game import LiveGameUseCase

__all__ = [
    'DailyStatsUseCase',
    'LiveGameUseCase',
]
