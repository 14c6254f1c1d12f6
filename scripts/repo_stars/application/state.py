"""
Application state
-----------------
Exactly one ApplicationState is live at a time. Transitions replace the
whole value; nothing is ever patched in place, so no observer can see a
half-updated state.

    AwaitingInput ──begin──▶ Loading ──resolve──▶ Loaded | Errored
                                ▲                        │
                                └─────────begin──────────┘

Every begin() hands out a new generation number. resolve() only applies an
outcome whose generation is still current, so a slow earlier search can
never overwrite a faster later one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from repo_stars.domain.entities import SearchResult
from repo_stars.domain.errors import ErrorKind, SearchError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AwaitingInput:
    pass


@dataclass(frozen=True)
class Loading:
    query:      str
    generation: int


@dataclass(frozen=True)
class Loaded:
    result:     SearchResult
    generation: int


@dataclass(frozen=True)
class Errored:
    kind:       ErrorKind
    message:    str
    generation: int


ApplicationState = Union[AwaitingInput, Loading, Loaded, Errored]
StateListener    = Callable[[ApplicationState], None]


class StateStore:
    """Single-slot owner of the ApplicationState plus the generation counter."""

    def __init__(self, initial: ApplicationState | None = None) -> None:
        self._state: ApplicationState = initial or AwaitingInput()
        self._generation = self._state.generation if isinstance(self._state, Loading) else 0
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ApplicationState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def _replace(self, new_state: ApplicationState) -> None:
        self._state = new_state
        for listener in self._listeners:
            listener(new_state)

    def begin(self, query: str) -> int | None:
        """
        Move to Loading and return the new generation.

        Returns None (and changes nothing) when the same query is already
        loading. A different query supersedes the in-flight one.
        """
        current = self._state
        if isinstance(current, Loading):
            if current.query == query:
                log.debug("Search for %r already in flight (generation %d)", query, current.generation)
                return None
            log.info("Superseding search %r (generation %d) with %r", current.query, current.generation, query)
        elif not isinstance(current, (AwaitingInput, Loaded, Errored)):
            raise TypeError(f"unknown application state: {current!r}")

        self._generation += 1
        self._replace(Loading(query=query, generation=self._generation))
        return self._generation

    def resolve(self, generation: int, outcome: SearchResult | SearchError) -> bool:
        """
        Apply a finished search. Returns False when the outcome is stale
        (its generation is no longer the one being waited on).
        """
        current = self._state
        if not isinstance(current, Loading) or current.generation != generation:
            log.debug("Discarding stale resolution (generation %d, current %d)", generation, self._generation)
            return False

        if isinstance(outcome, SearchResult):
            self._replace(Loaded(result=outcome, generation=generation))
        elif isinstance(outcome, SearchError):
            self._replace(Errored(kind=outcome.kind, message=outcome.message, generation=generation))
        else:
            raise TypeError(f"unknown search outcome: {outcome!r}")
        return True
