"""Shared fixtures for portallib tests."""

import json

import httpx
import pytest

from portallib.api import LibraryClient
from portallib.models import Library

TEST_URL = "https://example.test/MyPortalLibrary.json"


def make_document() -> dict:
    """Build a library document with three categories."""
    return {
        "Categorys": [
            {
                "Category": "Chill",
                "Worlds": [
                    {
                        "ID": "wrld_123",
                        "Name": "Midnight Rooftop",
                        "Description": "Quiet city views",
                        "RecommendedCapacity": 8,
                        "Capacity": 16,
                        "Platform": {"PC": True, "Android": False},
                    },
                    {
                        "ID": "wrld_456",
                        "Platform": {"PC": "true", "Android": "true"},
                    },
                ],
            },
            {
                "Category": "Games",
                "Worlds": [
                    {"ID": "wrld_game", "Name": "Murder 4", "Platform": {"pc": True}},
                ],
            },
            {
                "Category": "Horror",
                "Worlds": [
                    {"ID": "wrld_h1", "Name": "Shadows"},
                    {"ID": "wrld_h2", "Name": "Hollow"},
                    {"ID": "wrld_h3", "Name": "Ward"},
                ],
            },
        ]
    }


def make_transport(
    status_code: int = 200,
    body: str | None = None,
    requests: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a transport that answers every request the same way.

    Args:
        status_code: Response status
        body: Raw response body (defaults to the sample document)
        requests: If given, every request is appended to it
    """
    content = json.dumps(make_document()) if body is None else body

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, text=content)

    return httpx.MockTransport(handler)


@pytest.fixture
def document() -> dict:
    return make_document()


@pytest.fixture
def library(document: dict) -> Library:
    return Library.from_api_response(document)


@pytest.fixture
def client() -> LibraryClient:
    """Client that serves the sample document."""
    return LibraryClient(url=TEST_URL, transport=make_transport())
