"""Application layer - Services and use cases."""
from .services import aggregate, format_stats, format_live_game, format_error
from .use_cases import DailyStatsUseCase, LiveGameUseCase

__all__ = [
    'aggregate',
    'format_stats',
    'format_live_game',
    'format_error',
    'DailyStatsUseCase',
    'LiveGameUseCase',
]
