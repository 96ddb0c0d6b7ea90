"""Domain interfaces."""
from .repository import IAccountRepository, IMatchRepository, ILiveGameRepository

__all__ = [
    'IAccountRepository',
    'IMatchRepository',
    'ILiveGameRepository',
]
