"""Daily ranked stats report."""
from dataclasses import dataclass, field
from typing import Tuple

from ..enums import QueueType
from .kda import format_kda
from .match_summary import MatchSummary


@dataclass(frozen=True)
class QueueRecord:
    """Wins and losses in one ranked queue."""

    wins: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def has_games(self) -> bool:
        return self.games > 0


@dataclass(frozen=True)
class KdaTotals:
    """Kills, deaths and assists summed over the day."""

    kills: int = 0
    deaths: int = 0
    assists: int = 0

    @property
    def kda(self) -> str:
        return format_kda(self.kills, self.deaths, self.assists)


@dataclass(frozen=True)
class StatsReport:
    """Aggregated ranked results of one player since midnight.

    `matches` keeps the order of the match API (newest first).
    A report built with `no_games_today` carries only the display name.
    """

    display_name: str
    solo_record: QueueRecord = field(default_factory=QueueRecord)
    flex_record: QueueRecord = field(default_factory=QueueRecord)
    totals: KdaTotals = field(default_factory=KdaTotals)
    matches: Tuple[MatchSummary, ...] = ()
    no_games: bool = False

    @classmethod
    def no_games_today(cls, display_name: str) -> 'StatsReport':
        return cls(display_name=display_name, no_games=True)

    @property
    def overall_kda(self) -> str:
        return self.totals.kda

    def record_for(self, queue: QueueType) -> QueueRecord:
        return self.solo_record if queue is QueueType.RANKED_SOLO_5x5 else self.flex_record

    def to_dict(self) -> dict:
        """Convert report to dictionary."""
        if self.no_games:
            return {'summoner_name': self.display_name, 'no_games': True}
        return {
            'summoner_name': self.display_name,
            'solo': {'wins': self.solo_record.wins, 'losses': self.solo_record.losses},
            'flex': {'wins': self.flex_record.wins, 'losses': self.flex_record.losses},
            'total_kills': self.totals.kills,
            'total_deaths': self.totals.deaths,
            'total_assists': self.totals.assists,
            'overall_kda': self.overall_kda,
            'match_history': [m.to_dict() for m in self.matches],
        }
