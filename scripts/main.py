"""
Console front end for repo_stars
--------------------------------
Usage:  python scripts/main.py [username] [--limit N] [--open-top]

Builds the object graph for a single run: SearchConfig from the
environment (CLI flags win), one httpx.AsyncClient for every request,
and a StateStore that this script renders once the search settles.
An empty username falls back to REPO_STARS_DEFAULT_USER. Exit status
is 0 when the store ends in Loaded, 1 otherwise.

How the pieces hang together:
                         main.py
                            │
              ┌─────────────┼──────────────┐
              ▼             ▼              ▼
  SearchApplicationService  │         StateStore
              │             │
              ▼             ▼
     SearchOrchestrator  HttpxClient
              │
    ┌─────────┼──────────┬────────────┐
    ▼         ▼          ▼            ▼
 decoder  rate_limit  aggregator  SearchConfig
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
import webbrowser

import httpx

# Application layer
from repo_stars.application.config import SearchConfig
from repo_stars.application.orchestrator import SearchOrchestrator
from repo_stars.application.projection import render_lines, window_title
from repo_stars.application.search_service import SearchApplicationService
from repo_stars.application.state import Errored, Loaded, StateStore
from repo_stars.domain.entities import OpenLinkCommand, SearchCommand

# Infrastructure layer
from repo_stars.infrastructure.http_client import HttpxClient

log = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def _read_config(args: argparse.Namespace) -> SearchConfig:
    """
    Environment first, then CLI flags on top.
    Fails fast with a clear error if anything is invalid.
    """
    try:
        config = SearchConfig.from_env()
        overrides = {
            key: value
            for key, value in (("base_url", args.base_url), ("user_agent", args.user_agent), ("timeout", args.timeout))
            if value is not None
        }
        if overrides:
            config = dataclasses.replace(config, **overrides)
    except ValueError as exc:
        log.error("Configuration error: %s", exc)
        sys.exit(1)
    return config


async def build_and_run(config: SearchConfig, username: str, limit: int | None = None, open_top: bool = False) -> int:
    """
    Wires all dependencies together and executes one search.
    Returns the process exit code.
    """
    async with httpx.AsyncClient() as client:
        http         = HttpxClient(client=client, timeout=config.timeout)
        orchestrator = SearchOrchestrator(http=http, config=config)
        store        = StateStore()
        service      = SearchApplicationService(
            orchestrator = orchestrator,
            store        = store,
            link_opener  = webbrowser.open,
        )
        store.subscribe(lambda state: log.debug("State → %s", window_title(state)))

        await service.dispatch(SearchCommand(username=username))

    state = store.state
    print(window_title(state))
    for line in render_lines(state, limit=limit):
        print(line)

    if isinstance(state, Loaded):
        log.debug("Avatar for %s: %d bytes", state.result.profile.login, len(state.result.avatar_bytes))
        top = state.result.top_repository
        if open_top and top is not None and top.url:
            await service.dispatch(OpenLinkCommand(url=top.url))
        return 0

    if isinstance(state, Errored):
        log.debug("Search failed with %s: %s", state.kind.value, state.message)
    return 1


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="List a GitHub user's repositories, most starred first"
    )
    parser.add_argument("username", nargs="?", default="", help="GitHub username (default: configured user)")
    parser.add_argument("--limit",      type=_non_negative_int, default=None, help="Show at most N repositories")
    parser.add_argument("--base-url",   default=None, help="GitHub API base URL")
    parser.add_argument("--user-agent", default=None, help="User-Agent sent to the GitHub API")
    parser.add_argument("--timeout",    type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--open-top",   action="store_true", help="Open the most starred repository in a browser")
    parser.add_argument("--verbose",    action="store_true", help="Debug logging")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    _configure_logging(args.verbose)
    config = _read_config(args)

    sys.exit(asyncio.run(build_and_run(config, args.username, args.limit, args.open_top)))
