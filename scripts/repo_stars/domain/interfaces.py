"""
Domain Layer: Interfaces (Abstract Contracts)
-----------------------------------------------
The application layer talks to the network only through IHttpClient.
The concrete httpx adapter lives in the infrastructure layer, and tests
substitute a scripted fake without touching the orchestrator.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class HttpResponse:
    """Raw body plus response metadata, as returned by a successful GET."""
    body:        bytes
    headers:     Mapping[str, str] = field(default_factory=dict)
    status_code: int = 200


class IHttpClient(ABC):
    """
    The one network operation the orchestrator needs: a plain GET.

    Implementations raise NetworkError for every transport failure;
    callers never see library-specific exceptions.
    """

    @abstractmethod
    async def get(self, url: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        """Issue a GET request and return the body and headers."""
        ...
