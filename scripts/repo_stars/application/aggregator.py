from __future__ import annotations

from typing import Iterable

from repo_stars.domain.entities import RateLimitStatus, Repository, SearchResult, UserProfile


def sort_by_stars(repos: Iterable[Repository]) -> list[Repository]:
    """
    Most-starred first. sorted() is stable even with reverse=True,
    so ties keep the order the API returned them in.
    """
    return sorted(repos, key=lambda r: r.star_count, reverse=True)


def build_result(
    repos: Iterable[Repository],
    profile: UserProfile,
    avatar_bytes: bytes,
    rate_limit: RateLimitStatus,
) -> SearchResult:
    return SearchResult(
        repositories = tuple(repos),
        profile      = profile,
        avatar_bytes = avatar_bytes,
        rate_limit   = rate_limit,
    )
