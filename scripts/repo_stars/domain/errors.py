"""
Domain Layer: Error taxonomy
-----------------------------
Every way a search attempt can fail maps onto exactly one ErrorKind.
No retries happen anywhere: the first SearchError raised ends the attempt.
"""

from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    NETWORK_ERROR          = "network_error"
    INVALID_RESPONSE       = "invalid_response"
    RATE_LIMIT_UNAVAILABLE = "rate_limit_unavailable"
    INTERNAL_ERROR         = "internal_error"


class SearchError(Exception):
    """Base class for every failure that terminates a search attempt."""

    kind: ErrorKind = ErrorKind.NETWORK_ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.kind.value)
        self.message = message or self.kind.value


class NetworkError(SearchError):
    """Transport failure: timeout, refused connection or non-2xx status."""
    kind = ErrorKind.NETWORK_ERROR


class InvalidResponseError(SearchError):
    """Body was not JSON, had the wrong shape, or lacked a required field."""
    kind = ErrorKind.INVALID_RESPONSE


class RateLimitUnavailableError(SearchError):
    """A rate-limit header was missing or not a non-negative integer."""
    kind = ErrorKind.RATE_LIMIT_UNAVAILABLE


class InternalError(SearchError):
    """An unexpected exception ended the attempt; the original is re-raised."""
    kind = ErrorKind.INTERNAL_ERROR
