import pytest

from fakes import BASE, NOW
from repo_stars.application.config import SearchConfig


@pytest.fixture
def config():
    return SearchConfig(base_url=BASE, default_username="octo", user_agent="repo-stars-tests")


@pytest.fixture
def clock():
    return lambda: float(NOW)
