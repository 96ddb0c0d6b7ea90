"""Error kinds raised by the Riot lookups."""
from enum import Enum


class ErrorKind(Enum):
    """Why a lookup failed. Carried on every RiotAPIError."""

    NOT_FOUND = "not_found"
    NOT_IN_GAME = "not_in_game"
    AUTH_FAILURE = "auth_failure"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_ERROR = "upstream_error"
    NETWORK_ERROR = "network_error"
    PARTIAL_DATA_UNAVAILABLE = "partial_data_unavailable"

    @property
    def is_fault(self) -> bool:
        """False for outcomes that are expected, like a player not in game."""
        return self is not ErrorKind.NOT_IN_GAME
