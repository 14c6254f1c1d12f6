from __future__ import annotations

import logging
from typing import Mapping

import httpx

from repo_stars.domain.errors import NetworkError
from repo_stars.domain.interfaces import HttpResponse, IHttpClient

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class HttpxClient(IHttpClient):
    """
    IHttpClient backed by a shared httpx.AsyncClient.

    The AsyncClient is opened and closed by main.py; this adapter only
    borrows it, which is also how tests plug in httpx.MockTransport.

    Any failure to get a 2xx response surfaces as NetworkError: timeouts,
    refused connections, error statuses, and URLs httpx cannot parse
    (the avatar URL comes straight from a response body).
    """

    def __init__(self, client: httpx.AsyncClient, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client  = client
        self._timeout = timeout

    async def get(self, url: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        log.debug("GET %s", url)
        try:
            response = await self._client.get(
                url,
                headers=dict(headers or {}),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except (httpx.HTTPStatusError, httpx.RequestError, httpx.InvalidURL) as exc:
            log.warning("GET %s failed: %s", url, exc)
            raise NetworkError(f"GET {url} failed: {exc}") from exc

        return HttpResponse(
            body        = response.content,
            headers     = response.headers,
            status_code = response.status_code,
        )
