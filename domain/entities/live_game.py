"""Live game view entities."""
from dataclasses import dataclass
from typing import Optional, Tuple

from ..enums import queue_display_name

SUMMONERS_RIFT_MAP_ID = 11
UNRANKED = "Unranked"


@dataclass(frozen=True)
class ParticipantView:
    """One player in an active game, with best-effort rank enrichment."""

    champion_name: str
    player_label: str
    is_searched_player: bool = False
    rank_label: str = UNRANKED

    # Optional enrichment, omitted from messages when missing
    rune_style: Optional[int] = None
    hot_streak: bool = False

    def to_dict(self) -> dict:
        return {
            'champion': self.champion_name,
            'player': self.player_label,
            'searched': self.is_searched_player,
            'rank': self.rank_label,
            'rune_style': self.rune_style,
            'hot_streak': self.hot_streak,
        }


@dataclass(frozen=True)
class BanCounts:
    """Number of real bans per side (empty ban slots excluded)."""

    blue: int = 0
    red: int = 0

    @property
    def any(self) -> bool:
        return self.blue > 0 or self.red > 0


@dataclass(frozen=True)
class LiveGameView:
    """An active game, split into blue side (team 100) and red side (team 200)."""

    queue_id: int
    duration_seconds: int
    map_id: int
    blue_team: Tuple[ParticipantView, ...] = ()
    red_team: Tuple[ParticipantView, ...] = ()
    bans: Optional[BanCounts] = None

    @property
    def queue_name(self) -> str:
        return queue_display_name(self.queue_id)

    @property
    def map_name(self) -> str:
        if self.map_id == SUMMONERS_RIFT_MAP_ID:
            return "Summoner's Rift"
        return f"Map {self.map_id}"

    @property
    def participants(self) -> Tuple[ParticipantView, ...]:
        return self.blue_team + self.red_team

    def to_dict(self) -> dict:
        """Convert live game to dictionary."""
        return {
            'queue_id': self.queue_id,
            'queue_name': self.queue_name,
            'duration_seconds': self.duration_seconds,
            'map': self.map_name,
            'blue_team': [p.to_dict() for p in self.blue_team],
            'red_team': [p.to_dict() for p in self.red_team],
            'bans': {'blue': self.bans.blue, 'red': self.bans.red} if self.bans else None,
        }
