from __future__ import annotations
from dataclasses import dataclass

NO_DESCRIPTION = "No description"


@dataclass(frozen=True)
class Repository:
    """
    Immutable domain entity representing one of the user's repositories.

    description is None when GitHub sent null or omitted the field.
    The placeholder text is applied only when rendering, never here.
    """
    name:        str
    description: str | None
    star_count:  int
    url:         str | None = None

    @property
    def display_description(self) -> str:
        return self.description if self.description is not None else NO_DESCRIPTION


@dataclass(frozen=True)
class UserProfile:
    login:      str
    avatar_url: str
    html_url:   str | None = None


@dataclass(frozen=True)
class RateLimitStatus:
    """
    Snapshot of the unauthenticated API quota, taken once per search
    from the profile response headers.
    """
    limit:            int
    remaining:        int
    reset_in_seconds: int


@dataclass(frozen=True)
class SearchResult:
    """
    Everything needed to render a successful search.
    Replaced wholesale by the next search, never mutated in place.
    """
    repositories: tuple[Repository, ...]
    profile:      UserProfile
    avatar_bytes: bytes
    rate_limit:   RateLimitStatus

    @property
    def top_repository(self) -> Repository | None:
        return self.repositories[0] if self.repositories else None


# Commands sent in by the UI layer

@dataclass(frozen=True)
class SearchCommand:
    username: str


@dataclass(frozen=True)
class OpenLinkCommand:
    url: str
