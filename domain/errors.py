"""Typed errors for Riot lookups.

Each error carries its ErrorKind from the point of failure, so callers never
have to guess the cause from the message text.
"""
from typing import Optional, Type

from .enums import ErrorKind


class RiotAPIError(Exception):
    """Base class for every failed Riot lookup."""

    kind: ErrorKind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, status_code={self.status_code!r}, message={self.message!r})"


class PlayerNotFoundError(RiotAPIError):
    kind = ErrorKind.NOT_FOUND


class InvalidRiotIdError(PlayerNotFoundError):
    """The typed Riot ID can never resolve (e.g. empty game name)."""


class NotInGameError(RiotAPIError):
    kind = ErrorKind.NOT_IN_GAME


class AuthFailureError(RiotAPIError):
    kind = ErrorKind.AUTH_FAILURE


class RateLimitedError(RiotAPIError):
    kind = ErrorKind.RATE_LIMITED

    def __init__(self, message: str, status_code: Optional[int] = 429, retry_after: Optional[int] = None):
        super().__init__(message, status_code)
        self.retry_after = retry_after


class UpstreamError(RiotAPIError):
    kind = ErrorKind.UPSTREAM_ERROR


class NetworkError(RiotAPIError):
    kind = ErrorKind.NETWORK_ERROR


class PartialDataUnavailableError(RiotAPIError):
    """Best-effort enrichment failed; callers substitute a placeholder."""

    kind = ErrorKind.PARTIAL_DATA_UNAVAILABLE


def error_from_status(
    status_code: int,
    what: str,
    detail: str = "",
    not_found: Optional[Type[RiotAPIError]] = None,
) -> RiotAPIError:
    """
    Map an HTTP status from Riot to the matching error.

    A 404 only means something to lookups that pass `not_found` (the Riot ID
    and summoner lookups); anywhere else it is an upstream failure.
    """
    suffix = f". {detail}" if detail else ""
    if status_code == 404 and not_found is not None:
        return not_found(f"{what} not found", status_code)
    if status_code == 401:
        return AuthFailureError(f"Unauthorized - Invalid API Key (HTTP {status_code}){suffix}", status_code)
    if status_code == 403:
        return AuthFailureError(
            f"API Key invalid, expired, or lacks permissions (HTTP {status_code}){suffix}", status_code
        )
    if status_code == 429:
        return RateLimitedError(f"Rate limit exceeded (HTTP {status_code}). Please try again later", status_code)
    return UpstreamError(f"Failed to fetch {what}: HTTP {status_code}{suffix}", status_code)
