"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from hookrelay.config import HookRelaySettings

TEST_SECRET = "hr_sec_test_secret"


@pytest.fixture(autouse=True)
def clean_hookrelay_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient HOOKRELAY_* variables out of every test."""
    for name in (
        "HOOKRELAY_SECRET",
        "HOOKRELAY_API_URL",
        "HOOKRELAY_OUTCOME_TIMEOUT_SECONDS",
        "HOOKRELAY_LOG_LEVEL",
        "HOOKRELAY_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def secret() -> str:
    """Shared secret used to sign test deliveries."""
    return TEST_SECRET


@pytest.fixture
def settings(secret: str) -> HookRelaySettings:
    """Explicit settings that do not depend on the environment."""
    return HookRelaySettings(_env_file=None, secret=secret, api_url="https://api.hookrelay.io")


@pytest.fixture
def stripe_payload() -> dict[str, object]:
    """A minimal Stripe event payload."""
    return {
        "id": "evt_stripe_123",
        "object": "event",
        "type": "checkout.session.completed",
        "data": {"object": {"id": "cs_123"}},
    }


@pytest.fixture
def stripe_body(stripe_payload: dict[str, object]) -> str:
    """Stripe payload serialized exactly as the relay forwards it."""
    return json.dumps(stripe_payload)


def make_response(status_code: int = 200, reason_phrase: str = "OK") -> MagicMock:
    """Create a fake httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason_phrase
    return response


@pytest.fixture
def http_response() -> Callable[..., MagicMock]:
    """Factory for fake httpx responses."""
    return make_response


@pytest.fixture
def mock_http() -> Iterator[AsyncMock]:
    """Patch the outcome reporter's httpx.AsyncClient.

    Yields the client mock; ``mock_http.post`` records outcome reports and
    returns a 200 response unless reconfigured.
    """
    with patch("hookrelay.outcome.httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.post = AsyncMock(return_value=make_response())
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=None)
        mock_client_class.return_value = mock_client
        mock_client.client_class = mock_client_class
        yield mock_client
