"""Error taxonomy for the authentication core.

Credential rejection by the storefront is *not* an exception: exchangers
return ``None`` for it. The classes below cover malformed input and the
fault conditions that must abort a login.
"""

from typing import Any, Optional


class AuthError(Exception):
    """Base class for authentication errors."""


class CredentialValidationError(AuthError, ValueError):
    """Credential payload is malformed; raised before any network call."""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class ConfigurationError(AuthError):
    """A required setting (e.g. B2B_API_TOKEN) is missing at call time."""


class UpstreamProtocolError(AuthError):
    """An upstream response could not be used (bad status, bad schema, no token)."""


class InfrastructureError(AuthError):
    """Network or transport failure talking to an upstream backend."""
