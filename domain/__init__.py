"""Domain layer - Entities, enums, errors and interfaces."""
from .enums import Region, QueueType, ErrorKind
from .errors import (
    RiotAPIError, PlayerNotFoundError, InvalidRiotIdError, NotInGameError,
    AuthFailureError, RateLimitedError, UpstreamError, NetworkError,
    PartialDataUnavailableError,
)
from .entities import (
    RiotId, PlayerIdentity, MatchSummary, StatsReport,
    ParticipantView, LiveGameView,
)
from .interfaces import IAccountRepository, IMatchRepository, ILiveGameRepository

__all__ = [
    # Enums
    'Region',
    'QueueType',
    'ErrorKind',
    # Errors
    'RiotAPIError',
    'PlayerNotFoundError',
    'InvalidRiotIdError',
    'NotInGameError',
    'AuthFailureError',
    'RateLimitedError',
    'UpstreamError',
    'NetworkError',
    'PartialDataUnavailableError',
    # Entities
    'RiotId',
    'PlayerIdentity',
    'MatchSummary',
    'StatsReport',
    'ParticipantView',
    'LiveGameView',
    # Interfaces
    'IAccountRepository',
    'IMatchRepository',
    'ILiveGameRepository',
]
