from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

GITHUB_API_URL     = "https://api.github.com"
DEFAULT_USERNAME   = "Dot32IsCool"
DEFAULT_USER_AGENT = "repo_list"
DEFAULT_TIMEOUT    = 30.0
# GitHub REST API max page size. Only one page is ever fetched.
MAX_PER_PAGE       = 100


@dataclass(frozen=True)
class SearchConfig:
    """
    Settings shared by every search attempt.

    GitHub rejects API requests without a User-Agent, so an empty one is
    a configuration error, not something to discover at request time.
    """
    base_url:         str   = GITHUB_API_URL
    default_username: str   = DEFAULT_USERNAME
    user_agent:       str   = DEFAULT_USER_AGENT
    timeout:          float = DEFAULT_TIMEOUT
    per_page:         int   = MAX_PER_PAGE

    def __post_init__(self) -> None:
        if not self.user_agent.strip():
            raise ValueError("user_agent must be non-empty")
        if not self.default_username.strip():
            raise ValueError("default_username must be non-empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not 1 <= self.per_page <= MAX_PER_PAGE:
            raise ValueError(f"per_page must be between 1 and {MAX_PER_PAGE}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SearchConfig":
        """
        Read overrides from environment variables.
        Unset variables fall back to the defaults above.
        """
        env = os.environ if environ is None else environ
        try:
            return cls(
                base_url         = env.get("GITHUB_API_URL", GITHUB_API_URL),
                default_username = env.get("REPO_STARS_DEFAULT_USER", DEFAULT_USERNAME),
                user_agent       = env.get("REPO_STARS_USER_AGENT", DEFAULT_USER_AGENT),
                timeout          = float(env.get("REPO_STARS_TIMEOUT", DEFAULT_TIMEOUT)),
                per_page         = int(env.get("REPO_STARS_PER_PAGE", MAX_PER_PAGE)),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid configuration: {exc}") from exc
