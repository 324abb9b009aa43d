"""Unit tests for persisted-session signing."""

from datetime import timedelta

import pytest
from jose import JWTError, jwt

from storefront_auth.config import settings
from storefront_auth.core.security import decode_session, encode_session
from storefront_auth.schemas.auth import SessionClaims


@pytest.mark.unit
class TestSessionEncoding:

    def test_decode_returns_encoded_claims(self):
        claims = SessionClaims(
            name="Jane Doe",
            email="jane@example.com",
            customer_access_token="cat-1",
            impersonator_id="42",
        )

        assert decode_session(encode_session(claims)) == claims

    def test_payload_carries_expiry_and_omits_empty_fields(self):
        token = encode_session(SessionClaims(customer_access_token="cat-1"))
        payload = jwt.get_unverified_claims(token)

        assert payload["customer_access_token"] == "cat-1"
        assert payload["exp"] > payload["iat"]
        assert "b2b_token" not in payload

    def test_tampered_token_rejected(self):
        forged = jwt.encode(
            {"customer_access_token": "stolen"}, "some-other-secret", algorithm=settings.SESSION_ALGORITHM
        )

        with pytest.raises(JWTError):
            decode_session(forged)

    def test_expired_token_rejected(self):
        token = encode_session(
            SessionClaims(customer_access_token="cat-1"), expires_delta=timedelta(seconds=-10)
        )

        with pytest.raises(JWTError):
            decode_session(token)
