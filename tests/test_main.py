"""End-to-end tests for the composition root against a mocked GitHub."""
import asyncio
import json
from unittest.mock import Mock

import httpx
import pytest

import main
from fakes import NOW, rate_headers
from repo_stars.application.config import SearchConfig

REAL_ASYNC_CLIENT = httpx.AsyncClient


def _github(request):
    path = request.url.path
    if request.url.host == "avatars.test":
        return httpx.Response(200, content=b"img")
    if path == "/users/octo/repos":
        assert request.url.params["per_page"] == "100"
        return httpx.Response(200, json=[
            {"name": "tiny", "description": None, "stargazers_count": 1, "html_url": "https://github.com/octo/tiny"},
            {"name": "huge", "description": "popular", "stargazers_count": 900, "html_url": "https://github.com/octo/huge"},
        ])
    if path == "/users/octo":
        return httpx.Response(
            200,
            content=json.dumps({"login": "octo", "avatar_url": "https://avatars.test/octo"}).encode(),
            headers=rate_headers(reset=NOW + 60),
        )
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def mocked_github(monkeypatch):
    monkeypatch.setattr(
        main.httpx, "AsyncClient",
        lambda *args, **kwargs: REAL_ASYNC_CLIENT(transport=httpx.MockTransport(_github)),
    )


@pytest.fixture
def browser(monkeypatch):
    opener = Mock()
    monkeypatch.setattr(main.webbrowser, "open", opener)
    return opener


def test_successful_run_prints_sorted_repositories(mocked_github, browser, capsys):
    config = SearchConfig(base_url="https://api.test", default_username="octo")

    code = asyncio.run(main.build_and_run(config, "", open_top=True))

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0] == "octo - Repo Stars"
    assert "huge" in out[2]
    assert "tiny" in out[3] and "No description" in out[3]
    browser.assert_called_once_with("https://github.com/octo/huge")


def test_unknown_user_exits_with_failure(mocked_github, browser, capsys):
    config = SearchConfig(base_url="https://api.test")

    code = asyncio.run(main.build_and_run(config, "ghost"))

    out = capsys.readouterr().out
    assert code == 1
    assert "Whoops! Something went wrong..." in out
    browser.assert_not_called()


def test_cli_flags_override_environment(monkeypatch):
    monkeypatch.setenv("REPO_STARS_USER_AGENT", "from-env")
    monkeypatch.setenv("REPO_STARS_TIMEOUT", "9")

    config = main._read_config(main.parse_args(["octo", "--user-agent", "from-cli"]))

    assert config.user_agent == "from-cli"
    assert config.timeout == 9.0


def test_invalid_configuration_exits(monkeypatch):
    monkeypatch.setenv("REPO_STARS_TIMEOUT", "never")

    with pytest.raises(SystemExit) as exc_info:
        main._read_config(main.parse_args([]))

    assert exc_info.value.code == 1


def test_negative_limit_is_rejected_by_the_cli():
    with pytest.raises(SystemExit) as exc_info:
        main.parse_args(["octo", "--limit", "-1"])

    assert exc_info.value.code == 2


def test_limit_accepts_zero():
    assert main.parse_args(["--limit", "0"]).limit == 0
