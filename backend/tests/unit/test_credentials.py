"""Unit tests for credential validation."""

import pytest

from storefront_auth.exceptions import CredentialValidationError
from storefront_auth.schemas.auth import JwtCredentials, PasswordCredentials
from storefront_auth.services.identity.credentials import parse_credentials


@pytest.mark.unit
class TestParseCredentials:
    """Discriminated parsing of login payloads."""

    def test_password_payload(self):
        creds = parse_credentials(
            {"type": "password", "email": "jane@example.com", "password": "hunter2"}
        )

        assert isinstance(creds, PasswordCredentials)
        assert creds.email == "jane@example.com"
        assert creds.password == "hunter2"

    def test_jwt_payload(self):
        creds = parse_credentials({"type": "jwt", "jwt": "a.b.c"})

        assert isinstance(creds, JwtCredentials)
        assert creds.jwt == "a.b.c"

    def test_tag_selects_variant_not_field_presence(self):
        """A jwt field on a password payload does not turn it into a jwt login."""
        creds = parse_credentials(
            {"type": "password", "email": "jane@example.com", "password": "x", "jwt": "a.b.c"}
        )

        assert isinstance(creds, PasswordCredentials)

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "jane@example.com", "password": "hunter2"},
            {"type": "oauth", "token": "abc"},
            {"type": "password", "email": "not-an-email", "password": "hunter2"},
            {"type": "password", "email": "jane@example.com", "password": ""},
            {"type": "password", "email": "jane@example.com"},
            {"type": "jwt", "jwt": ""},
            {"type": "jwt"},
            {"type": "jwt", "jwt": 123},
            None,
            "password",
            [],
        ],
    )
    def test_malformed_payload_raises(self, payload):
        with pytest.raises(CredentialValidationError) as exc_info:
            parse_credentials(payload)

        assert exc_info.value.errors

    def test_errors_do_not_echo_password(self):
        with pytest.raises(CredentialValidationError) as exc_info:
            parse_credentials({"type": "password", "email": "bad", "password": "s3cret-value"})

        assert "s3cret-value" not in str(exc_info.value.errors)
