"""Credential validation: untyped login payload to a typed credential."""

from typing import Any

from pydantic import ValidationError

from storefront_auth.exceptions import CredentialValidationError
from storefront_auth.schemas.auth import Credentials, credentials_adapter


def parse_credentials(raw: Any) -> Credentials:
    """
    Validate a raw login payload.

    The ``type`` field selects the variant (``password`` or ``jwt``); fields
    belonging to the other variant are ignored.

    Args:
        raw: Decoded request body (normally a dict)

    Returns:
        PasswordCredentials or JwtCredentials

    Raises:
        CredentialValidationError: If the tag is missing or unknown, or a
            required field is absent or malformed
    """
    try:
        return credentials_adapter.validate_python(raw)
    except ValidationError as exc:
        errors = [
            {"loc": list(err["loc"]), "type": err["type"], "msg": err["msg"]}
            for err in exc.errors()
        ]
        raise CredentialValidationError("Invalid credentials payload", errors) from exc
