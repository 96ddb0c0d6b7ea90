"""Per-match summary derived from raw match detail."""
from dataclasses import dataclass

from ..enums import QueueType
from .kda import format_kda


@dataclass(frozen=True)
class MatchSummary:
    """One ranked match from the searched player's point of view."""

    match_id: str
    queue_kind: QueueType
    win: bool
    kills: int
    deaths: int
    assists: int
    champion_name: str
    duration_minutes: int

    @property
    def kda(self) -> str:
        return format_kda(self.kills, self.deaths, self.assists)

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'queue': self.queue_kind.short_name,
            'win': self.win,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kda': self.kda,
            'champion': self.champion_name,
            'duration_minutes': self.duration_minutes,
        }
