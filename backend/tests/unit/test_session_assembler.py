"""Unit tests for session claim assembly and merging."""

import pytest

from storefront_auth.schemas.auth import SessionClaims
from storefront_auth.services.identity.base import AuthenticatedCustomer
from storefront_auth.services.identity.session import build_claims, session_view, update_claims


def _customer(**overrides):
    values = dict(
        name="Jane Doe",
        email="jane@example.com",
        customer_access_token="cat-new",
        impersonator_id=None,
        b2b_token=None,
    )
    values.update(overrides)
    return AuthenticatedCustomer(**values)


@pytest.mark.unit
class TestBuildClaims:

    def test_copies_identity_and_tokens(self):
        claims = build_claims(_customer(b2b_token="b2b-1", impersonator_id="7"))

        assert claims == SessionClaims(
            name="Jane Doe",
            email="jane@example.com",
            customer_access_token="cat-new",
            b2b_token="b2b-1",
            impersonator_id="7",
        )

    def test_no_b2b_token_field_without_b2b(self):
        claims = build_claims(_customer())

        assert claims.b2b_token is None
        assert "b2b_token" not in claims.model_dump(exclude_none=True)


@pytest.mark.unit
class TestUpdateClaims:

    def test_without_login_is_idempotent(self):
        original = SessionClaims(
            name="Jane Doe",
            email="jane@example.com",
            customer_access_token="cat-old",
            b2b_token="b2b-old",
        )

        claims = original
        for _ in range(3):
            claims = update_claims(claims)

        assert claims == original
        assert claims.customer_access_token == "cat-old"
        assert claims.b2b_token == "b2b-old"

    def test_login_overwrites_tokens_and_identity(self):
        original = SessionClaims(name="Old", email="old@example.com", customer_access_token="cat-old")

        claims = update_claims(original, _customer(b2b_token="b2b-new"))

        assert claims.name == "Jane Doe"
        assert claims.email == "jane@example.com"
        assert claims.customer_access_token == "cat-new"
        assert claims.b2b_token == "b2b-new"
        # Input is untouched
        assert original.customer_access_token == "cat-old"

    def test_login_without_b2b_drops_stale_b2b_token(self):
        original = SessionClaims(customer_access_token="cat-old", b2b_token="b2b-old")

        claims = update_claims(original, _customer())

        assert claims.b2b_token is None


@pytest.mark.unit
class TestSessionView:

    def test_none_without_primary_token(self):
        assert session_view(None) is None
        assert session_view(SessionClaims(name="Jane", b2b_token="b2b")) is None

    def test_exposes_tokens_and_display_fields(self):
        view = session_view(
            SessionClaims(
                name="Jane Doe",
                email="jane@example.com",
                customer_access_token="cat-1",
                b2b_token="b2b-1",
                impersonator_id="9",
            )
        )

        assert view.customer_access_token == "cat-1"
        assert view.b2b_token == "b2b-1"
        assert view.user.name == "Jane Doe"
        assert view.user.email == "jane@example.com"
        assert "impersonator_id" not in view.model_dump()

    def test_no_user_block_without_display_fields(self):
        view = session_view(SessionClaims(customer_access_token="cat-1"))

        assert view.user is None
        assert view.b2b_token is None
