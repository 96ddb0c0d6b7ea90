"""Application services root exports."""
from .stats_aggregator import aggregate, summarize_match
from .message_formatter import format_stats, format_live_game, format_error, ACTION_STATS, ACTION_LIVE

__all__ = [
    "aggregate",
    "summarize_match",
    "format_stats",
    "format_live_game",
    "format_error",
    "ACTION_STATS",
    "ACTION_LIVE",
]
