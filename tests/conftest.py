"""
Shared fixtures for the OpenAlex MCP server tests.

No test talks to the real OpenAlex API: the `openalex` fixture replaces
urllib.request.urlopen with a recorder that answers with a canned payload
(or raises a canned error).
"""

import io
import json
import urllib.error
import urllib.request
from typing import Any, Optional
from urllib.parse import parse_qs, urlsplit

import pytest

from core.config import Settings


class FakeOpenAlex:
    """Stands in for urlopen and records every outgoing request."""

    def __init__(self):
        self.requests: list[tuple[urllib.request.Request, Optional[float]]] = []
        self.payload: Any = {"meta": {"count": 0}, "results": []}
        self.error: Optional[BaseException] = None

    def __call__(self, request, timeout=None):
        self.requests.append((request, timeout))
        if self.error is not None:
            raise self.error
        return io.BytesIO(json.dumps(self.payload).encode("utf-8"))

    def fail_with_status(self, status: int, reason: str) -> None:
        self.error = urllib.error.HTTPError(
            "https://api.openalex.org", status, reason, hdrs=None, fp=io.BytesIO(b"")
        )

    @property
    def last_request(self) -> urllib.request.Request:
        return self.requests[-1][0]

    @property
    def last_timeout(self) -> Optional[float]:
        return self.requests[-1][1]

    @property
    def last_path(self) -> str:
        return urlsplit(self.last_request.full_url).path

    @property
    def last_query(self) -> dict[str, list[str]]:
        return parse_qs(urlsplit(self.last_request.full_url).query)

    def header(self, name: str) -> Optional[str]:
        # urllib stores header names capitalize()d: "User-agent"
        return self.last_request.get_header(name.capitalize())


@pytest.fixture
def openalex(monkeypatch):
    """Fake OpenAlex backend patched into urllib.request.urlopen."""
    fake = FakeOpenAlex()
    monkeypatch.setattr(urllib.request, "urlopen", fake)
    return fake


@pytest.fixture
def settings():
    """Settings with no environment defaults at all."""
    return Settings()


@pytest.fixture
def env_settings():
    """Settings as if OPENALEX_DEFAULT_EMAIL / OPENALEX_BEARER_TOKEN were set."""
    return Settings(default_email="team@example.org", bearer_token="env-token")


@pytest.fixture
def works_page():
    """A /works response with long authorship and concept lists."""
    return {
        "meta": {"count": 42, "db_response_time_ms": 17, "page": 1, "per_page": 2},
        "results": [
            {
                "id": "https://openalex.org/W1",
                "display_name": "Big collaboration",
                "authorships": [{"author": {"id": f"A{i}"}} for i in range(8)],
                "concepts": [{"id": f"C{i}", "score": 1 - i / 10} for i in range(5)],
                "topics": [{"id": f"T{i}"} for i in range(4)],
            },
            {
                "id": "https://openalex.org/W2",
                "display_name": "Small paper",
                "authorships": [{"author": {"id": "A100"}}, {"author": {"id": "A101"}}],
                "concepts": [{"id": "C100"}],
            },
        ],
    }
