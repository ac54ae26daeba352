"""Shared fixtures: canned API payloads and logging isolation."""

import json
from pathlib import Path

import pytest
import structlog

from profilegen.exceptions import TransportError


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_payload(name: str):
    """Load an API payload fixture."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def api_payload():
    """Loader for the canned API payloads in tests/fixtures."""
    return load_payload


@pytest.fixture(autouse=True)
def reset_structlog():
    """Loggers configured by one test must not write to another test's streams."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_api():
    """
    Factory for a fetch_json replacement that routes by URL.

    Each argument is a fixture name, a literal payload, or None to raise
    TransportError for that endpoint.
    """
    def build(github="github_user", leetcode="leetcode_success", search="search_commits"):
        routes = {"/users/": github, "/search/commits": search, "/CTp4b4787R": leetcode}

        def fetch(session, url, headers=None, user_agent=None):
            for fragment, name in routes.items():
                if fragment in url:
                    if name is None:
                        raise TransportError(f"cannot reach {url}")
                    return load_payload(name) if isinstance(name, str) else name
            raise AssertionError(f"unexpected URL {url}")

        return fetch

    return build
