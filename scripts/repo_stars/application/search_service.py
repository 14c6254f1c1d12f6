from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union
from urllib.parse import urlparse

from repo_stars.application.orchestrator import SearchOrchestrator
from repo_stars.application.state import StateStore
from repo_stars.domain.entities import OpenLinkCommand, SearchCommand, SearchResult
from repo_stars.domain.errors import InternalError, SearchError

log = logging.getLogger(__name__)

Command = Union[SearchCommand, OpenLinkCommand]


@dataclass(frozen=True)
class SearchResolved:
    """
    Emitted once per completed search attempt.
    applied is False when a newer search had already taken over the state.
    """
    generation: int
    query:      str
    outcome:    SearchResult | SearchError
    applied:    bool

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, SearchResult)


EventListener = Callable[[SearchResolved], None]
LinkOpener    = Callable[[str], object]


class SearchApplicationService:
    """
    The top-level use case: take commands from the UI, run searches,
    and feed the outcomes back into the state store.

    The orchestrator, store and link opener are passed in by the caller;
    the opener launches the OS browser (webbrowser.open in main.py).
    """

    def __init__(self, orchestrator: SearchOrchestrator, store: StateStore, link_opener: LinkOpener | None = None) -> None:
        self._orchestrator = orchestrator
        self._store        = store
        self._link_opener  = link_opener
        self._listeners: list[EventListener] = []

    @property
    def store(self) -> StateStore:
        return self._store

    def on_resolved(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    async def dispatch(self, command: Command) -> SearchResolved | bool | None:
        if isinstance(command, SearchCommand):
            return await self.search(command.username)
        if isinstance(command, OpenLinkCommand):
            return self.open_link(command.url)
        raise TypeError(f"unknown command: {command!r}")

    async def search(self, username: str) -> SearchResolved | None:
        """
        Run one search attempt. Returns None when an identical search is
        already in flight, otherwise the SearchResolved event.
        """
        query      = self._orchestrator.normalize(username)
        generation = self._store.begin(query)
        if generation is None:
            return None

        outcome: SearchResult | SearchError
        try:
            outcome = await self._orchestrator.search(query)
        except SearchError as exc:
            log.error("Search #%d for %s failed (%s): %s", generation, query, exc.kind.value, exc.message)
            outcome = exc
        except BaseException as exc:
            # leave Loading before propagating, or every retry of this query is refused
            log.exception("Search #%d for %s crashed", generation, query)
            self._store.resolve(generation, InternalError(f"{type(exc).__name__}: {exc}"))
            raise

        applied = self._store.resolve(generation, outcome)
        event   = SearchResolved(generation=generation, query=query, outcome=outcome, applied=applied)
        for listener in self._listeners:
            listener(event)
        return event

    def open_link(self, url: str) -> bool:
        if urlparse(url).scheme not in ("http", "https"):
            log.warning("Refusing to open non-web link: %s", url)
            return False
        if self._link_opener is None:
            log.warning("No link opener configured; cannot open %s", url)
            return False

        log.info("Opening %s", url)
        self._link_opener(url)
        return True
