"""Domain entities."""
from .kda import format_kda, PERFECT_KDA
from .riot_id import RiotId
from .player_identity import PlayerIdentity
from .match_summary import MatchSummary
from .stats_report import QueueRecord, KdaTotals, StatsReport
from .live_game import ParticipantView, BanCounts, LiveGameView, UNRANKED

__all__ = [
    'format_kda',
    'PERFECT_KDA',
    'RiotId',
    'PlayerIdentity',
    'MatchSummary',
    'QueueRecord',
    'KdaTotals',
    'StatsReport',
    'ParticipantView',
    'BanCounts',
    'LiveGameView',
    'UNRANKED',
]
