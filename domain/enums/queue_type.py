"""Queue type enumeration and the display names of every queue."""
from enum import Enum
from typing import Optional

QUEUE_NAMES = {
    0: "Custom",
    400: "Normal Draft",
    420: "Ranked Solo/Duo",
    430: "Normal Blind",
    440: "Ranked Flex",
    450: "ARAM",
    700: "Clash",
    720: "ARAM Clash",
    830: "Co-op vs AI Intro",
    840: "Co-op vs AI Beginner",
    850: "Co-op vs AI Intermediate",
    900: "URF",
    1020: "One For All",
    1300: "Nexus Blitz",
    1400: "Ultimate Spellbook",
    1700: "Arena",
    1900: "Pick URF",
}


def queue_display_name(queue_id: int) -> str:
    """Display name of any queue, falling back to 'Queue <code>'."""
    return QUEUE_NAMES.get(queue_id, f"Queue {queue_id}")


class QueueType(Enum):
    """Ranked queue types counted in daily stats.

    Provides:
    - queue_id: numeric queue id found in match info
    - short_name: label used in the match history lines
    - api_queue_name: string used by league endpoints
    """

    RANKED_SOLO_5x5 = 420  # Solo/Duo Queue
    RANKED_FLEX_SR = 440   # Flex 5v5 Queue

    @property
    def queue_id(self) -> int:
        """Get queue ID for API calls."""
        return self.value

    @property
    def short_name(self) -> str:
        """Get short queue name for chat messages."""
        return "Solo/Duo" if self == QueueType.RANKED_SOLO_5x5 else "Flex"

    @property
    def api_queue_name(self) -> str:
        """Get queue name string used in /league endpoints."""
        return "RANKED_SOLO_5x5" if self == QueueType.RANKED_SOLO_5x5 else "RANKED_FLEX_SR"

    @classmethod
    def from_queue_id(cls, queue_id: Optional[int]) -> Optional['QueueType']:
        """Ranked queue for a queue id, or None for every other queue."""
        for queue in cls:
            if queue.value == queue_id:
                return queue
        return None
