"""Tests for the httpx adapter using httpx.MockTransport."""
import asyncio

import httpx
import pytest

from fakes import rate_headers
from repo_stars.application.orchestrator import SearchOrchestrator
from repo_stars.application.search_service import SearchApplicationService
from repo_stars.application.state import Errored, StateStore
from repo_stars.domain.errors import ErrorKind, NetworkError
from repo_stars.infrastructure.http_client import HttpxClient


def _get(handler, url="https://api.test/users/octo", headers=None):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await HttpxClient(client=client, timeout=5.0).get(url, headers=headers)
    return asyncio.run(run())


def test_returns_body_and_headers_and_sends_given_headers():
    seen = {}

    def handler(request):
        seen["ua"] = request.headers.get("user-agent")
        return httpx.Response(200, content=b'{"login": "octo"}', headers={"X-RateLimit-Limit": "60"})

    response = _get(handler, headers={"User-Agent": "repo_list"})

    assert seen["ua"] == "repo_list"
    assert response.body == b'{"login": "octo"}'
    assert response.headers["x-ratelimit-limit"] == "60"
    assert response.status_code == 200


def test_binary_bodies_pass_through_untouched():
    response = _get(lambda request: httpx.Response(200, content=b"\x89PNG\r\n"), url="https://avatars.test/1")

    assert response.body == b"\x89PNG\r\n"


@pytest.mark.parametrize("exc", [
    httpx.ConnectError("refused"),
    httpx.ReadTimeout("slow"),
    httpx.ConnectTimeout("slow"),
])
def test_transport_failures_become_network_error(exc):
    def handler(request):
        raise exc

    with pytest.raises(NetworkError) as exc_info:
        _get(handler)

    assert exc_info.value.kind is ErrorKind.NETWORK_ERROR
    assert isinstance(exc_info.value.__cause__, httpx.RequestError)


@pytest.mark.parametrize("status", [403, 404, 500])
def test_error_statuses_become_network_error(status):
    with pytest.raises(NetworkError):
        _get(lambda request: httpx.Response(status, json={"message": "nope"}))


def test_unparseable_url_becomes_network_error():
    def handler(request):
        raise AssertionError("no request should be sent")

    with pytest.raises(NetworkError) as exc_info:
        _get(handler, url="http://[::1")

    assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)


def test_broken_avatar_url_in_profile_ends_in_errored_state(config, clock):
    def handler(request):
        if request.url.path.endswith("/repos"):
            return httpx.Response(200, json=[{"name": "r", "stargazers_count": 1}])
        return httpx.Response(
            200,
            json={"login": "octo", "avatar_url": "http://[::1"},
            headers=rate_headers(),
        )

    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            orchestrator = SearchOrchestrator(http=HttpxClient(client=client), config=config, clock=clock)
            service = SearchApplicationService(orchestrator=orchestrator, store=StateStore())
            first = await service.search("octo")
            retry = await service.search("octo")
            return service, first, retry

    service, first, retry = asyncio.run(run())

    assert isinstance(service.store.state, Errored)
    assert service.store.state.kind is ErrorKind.NETWORK_ERROR
    assert not first.ok
    assert retry is not None
