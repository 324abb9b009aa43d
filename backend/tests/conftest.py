"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so the environment must be ready first.
os.environ.setdefault("STORE_HASH", "abc123")
os.environ.setdefault("CHANNEL_ID", "1")
os.environ.setdefault("STOREFRONT_TOKEN", "storefront-test-token")
os.environ.setdefault("SESSION_SECRET", "test-session-secret-with-enough-length-0123")
# Session cookies are only marked Secure outside DEBUG; the test client talks plain http
os.environ.setdefault("DEBUG", "true")
os.environ.pop("B2B_API_TOKEN", None)

import json
from typing import Callable, Optional

import httpx
import pytest

from storefront_auth.config import AuthConfig
from storefront_auth.schemas.auth import SessionClaims
from storefront_auth.services.session_store import SessionStore


class InMemorySessionStore(SessionStore):
    """Session store that keeps claims on the instance."""

    def __init__(self, claims: Optional[SessionClaims] = None) -> None:
        self.claims = claims
        self.saves = 0
        self.cleared = False

    def load(self) -> Optional[SessionClaims]:
        return self.claims

    def save(self, claims: SessionClaims) -> None:
        self.claims = claims
        self.saves += 1

    def clear(self) -> None:
        self.claims = None
        self.cleared = True


@pytest.fixture
def auth_config() -> AuthConfig:
    """Config with the B2B backend disabled."""
    return AuthConfig(
        store_hash="abc123",
        default_channel_id="1",
        storefront_token="storefront-test-token",
    )


@pytest.fixture
def b2b_config() -> AuthConfig:
    """Config with the B2B backend enabled."""
    return AuthConfig(
        store_hash="abc123",
        default_channel_id="1",
        storefront_token="storefront-test-token",
        b2b_api_token="b2b-shared-secret",
    )


@pytest.fixture
def memory_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def store_factory() -> Callable[..., InMemorySessionStore]:
    return InMemorySessionStore


@pytest.fixture
def recorded_transport():
    """Build an httpx.MockTransport that records requests and replies from a handler.

    Usage: ``transport, calls = recorded_transport(lambda request: httpx.Response(...))``
    """

    def _build(reply: Callable[[httpx.Request], httpx.Response]):
        calls: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return reply(request)

        return httpx.MockTransport(handler), calls

    return _build


@pytest.fixture
def request_json() -> Callable[[httpx.Request], dict]:
    """Decode the JSON body of a recorded request."""

    def _decode(request: httpx.Request) -> dict:
        return json.loads(request.content)

    return _decode


def customer_login_payload(field: str = "login", email: str = "jane@example.com") -> dict:
    return {
        "data": {
            field: {
                "customerAccessToken": {
                    "value": "cat-123",
                    "expiresAt": "2030-01-01T00:00:00Z",
                },
                "customer": {
                    "entityId": 42,
                    "firstName": "Jane",
                    "lastName": "Doe",
                    "email": email,
                },
            }
        }
    }


@pytest.fixture
def login_payload() -> Callable[..., dict]:
    """Successful storefront login response body."""
    return customer_login_payload
