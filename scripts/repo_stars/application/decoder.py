"""
Response Decoder
----------------
Anti-corruption layer: translates GitHub's raw JSON into our domain
objects.

JSON field:               Entity field:
  "stargazers_count"  →   star_count
  "avatar_url"        →   avatar_url
  "html_url"          →   url / html_url

Unlike a crawler, nothing is skipped here: one malformed element fails the
whole body with InvalidResponseError. Unknown fields are ignored.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from repo_stars.domain.entities import Repository, UserProfile
from repo_stars.domain.errors import InvalidResponseError

log = logging.getLogger(__name__)


def _load_json(body: bytes) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidResponseError(f"body is not valid JSON: {exc}") from exc


def _require_str(obj: dict, key: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise InvalidResponseError(f"field {key!r} missing or not a string")
    return value


def _optional_str(obj: dict, key: str) -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidResponseError(f"field {key!r} is not a string or null")
    return value


def _require_count(obj: dict, key: str) -> int:
    value = obj.get(key)
    # bool is a subclass of int; true/false is not a star count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidResponseError(f"field {key!r} missing or not a non-negative integer")
    return value


def _parse_repository(node: Any) -> Repository:
    if not isinstance(node, dict):
        raise InvalidResponseError("repository element is not an object")
    return Repository(
        name        = _require_str(node, "name"),
        description = _optional_str(node, "description"),
        star_count  = _require_count(node, "stargazers_count"),
        url         = _optional_str(node, "html_url"),
    )


def decode_repositories(body: bytes) -> list[Repository]:
    """Decode a `/users/{name}/repos` body into Repository entities, in API order."""
    data = _load_json(body)
    if not isinstance(data, list):
        raise InvalidResponseError("repository listing is not a JSON array")

    repos = [_parse_repository(node) for node in data]
    log.debug("Decoded %d repositories", len(repos))
    return repos


def decode_profile(body: bytes) -> UserProfile:
    """Decode a `/users/{name}` body into a UserProfile."""
    data = _load_json(body)
    if not isinstance(data, dict):
        raise InvalidResponseError("user profile is not a JSON object")

    return UserProfile(
        login      = _require_str(data, "login"),
        avatar_url = _require_str(data, "avatar_url"),
        html_url   = _optional_str(data, "html_url"),
    )
