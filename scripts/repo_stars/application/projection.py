"""Plain-text projection of ApplicationState for the console front end."""

from __future__ import annotations

from repo_stars.application.state import ApplicationState, AwaitingInput, Errored, Loaded, Loading

APP_NAME     = "Repo Stars"
FAILURE_TEXT = "Whoops! Something went wrong..."


def window_title(state: ApplicationState) -> str:
    if isinstance(state, AwaitingInput):
        subtitle = "Search"
    elif isinstance(state, Loading):
        subtitle = "Loading"
    elif isinstance(state, Loaded):
        subtitle = state.result.profile.login
    elif isinstance(state, Errored):
        subtitle = "Whoops!"
    else:
        raise TypeError(f"unknown application state: {state!r}")
    return f"{subtitle} - {APP_NAME}"


def render_lines(state: ApplicationState, limit: int | None = None) -> list[str]:
    """
    Lines to print for a state. Every error kind renders the same generic
    failure text; the kind itself stays available on the Errored state.
    """
    if isinstance(state, AwaitingInput):
        return ["Enter a GitHub username to search."]
    if isinstance(state, Loading):
        return [f"Searching repositories for {state.query}..."]
    if isinstance(state, Errored):
        return [FAILURE_TEXT, "Try again."]
    if not isinstance(state, Loaded):
        raise TypeError(f"unknown application state: {state!r}")

    if limit is not None and limit < 0:
        raise ValueError(f"limit must be 0 or more, got {limit}")

    result = state.result
    repos  = result.repositories if limit is None else result.repositories[:limit]
    width  = max((len(r.name) for r in repos), default=0)

    lines = [f"{result.profile.login}: {len(result.repositories)} repositories"]
    for repo in repos:
        lines.append(f"  {repo.name.ljust(width)}  {repo.star_count:>6} stars  {repo.display_description}")

    rate = result.rate_limit
    lines.append(f"Rate limit: {rate.remaining}/{rate.limit} remaining, resets in {rate.reset_in_seconds}s")
    return lines
