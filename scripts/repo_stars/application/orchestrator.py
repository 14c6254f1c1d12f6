from __future__ import annotations

import logging
import time
from typing import Callable
from urllib.parse import quote

from repo_stars.application.aggregator import build_result, sort_by_stars
from repo_stars.application.config import SearchConfig
from repo_stars.application.decoder import decode_profile, decode_repositories
from repo_stars.application.rate_limit import read_rate_limit
from repo_stars.domain.entities import SearchResult
from repo_stars.domain.interfaces import IHttpClient

log = logging.getLogger(__name__)


class SearchOrchestrator:
    """
    Runs one search attempt as an ordered pipeline of network calls:

        repos GET → decode → sort → profile GET → rate limit → decode
              → avatar GET → assemble

    Every step can raise a SearchError, which ends the attempt; no partial
    SearchResult is ever returned. The calls are strictly sequential so the
    profile's rate-limit headers reflect the quota after the repos call.

    Collaborators come in through the constructor; no state survives a call:
      - IHttpClient  → how to talk to GitHub
      - SearchConfig → where, as whom, and the default username
      - clock        → wall clock in unix seconds (time.time)
    """

    def __init__(self, http: IHttpClient, config: SearchConfig | None = None, clock: Callable[[], float] = time.time) -> None:
        self._http   = http
        self._config = config or SearchConfig()
        self._clock  = clock

    def normalize(self, query: str) -> str:
        query = query.strip()
        return query or self._config.default_username

    def _api_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._config.user_agent,
            "Accept":     "application/vnd.github+json",
        }

    def repos_url(self, username: str) -> str:
        return f"{self._config.base_url}/users/{quote(username, safe='')}/repos?per_page={self._config.per_page}"

    def profile_url(self, username: str) -> str:
        return f"{self._config.base_url}/users/{quote(username, safe='')}"

    async def search(self, query: str) -> SearchResult:
        username = self.normalize(query)
        log.info("Searching repositories for %s", username)

        response = await self._http.get(self.repos_url(username), headers=self._api_headers())
        repos    = sort_by_stars(decode_repositories(response.body))

        response   = await self._http.get(self.profile_url(username), headers=self._api_headers())
        rate_limit = read_rate_limit(response.headers, now=self._clock())
        profile    = decode_profile(response.body)

        # avatars are served from a CDN and need no identifying header
        avatar = await self._http.get(profile.avatar_url)

        log.info(
            "Found %d repositories for %s | rate limit %d/%d, resets in %ds",
            len(repos), profile.login,
            rate_limit.remaining, rate_limit.limit, rate_limit.reset_in_seconds,
        )
        return build_result(repos, profile, avatar.body, rate_limit)
