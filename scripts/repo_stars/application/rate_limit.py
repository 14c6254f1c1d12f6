from __future__ import annotations

from typing import Mapping

from repo_stars.domain.entities import RateLimitStatus
from repo_stars.domain.errors import RateLimitUnavailableError

LIMIT_HEADER     = "x-ratelimit-limit"
REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER     = "x-ratelimit-reset"


def _read_int(headers: Mapping[str, str], name: str) -> int:
    raw = headers.get(name)
    if raw is None:
        raise RateLimitUnavailableError(f"header {name!r} is missing")
    text = str(raw).strip()
    # plain ASCII digits only; int() would also take "6_0", "+5" or "５"
    if not (text.isascii() and text.isdigit()):
        raise RateLimitUnavailableError(f"header {name!r} is not a non-negative integer: {raw!r}")
    return int(text)


def read_rate_limit(headers: Mapping[str, str], now: float) -> RateLimitStatus:
    """
    Build a RateLimitStatus from response headers.

    No defaults are substituted: a missing or unparseable header raises
    RateLimitUnavailableError. A reset time already in the past clamps to 0.
    """
    lowered = {str(k).lower(): v for k, v in headers.items()}

    limit     = _read_int(lowered, LIMIT_HEADER)
    remaining = _read_int(lowered, REMAINING_HEADER)
    reset_at  = _read_int(lowered, RESET_HEADER)

    return RateLimitStatus(
        limit            = limit,
        remaining        = remaining,
        reset_in_seconds = max(0, reset_at - int(now)),
    )
