"""Identity package: storefront and B2B exchanges and session assembly."""

from storefront_auth.services.identity.b2b import B2BTokenExchanger
from storefront_auth.services.identity.base import AuthenticatedCustomer, CustomerSession
from storefront_auth.services.identity.credentials import parse_credentials
from storefront_auth.services.identity.service import (
    AuthService,
    get_auth_service,
)
from storefront_auth.services.identity.session import build_claims, session_view, update_claims
from storefront_auth.services.identity.storefront import StorefrontIdentityExchanger

__all__ = [
    "AuthenticatedCustomer",
    "AuthService",
    "B2BTokenExchanger",
    "CustomerSession",
    "StorefrontIdentityExchanger",
    "build_claims",
    "get_auth_service",
    "parse_credentials",
    "session_view",
    "update_claims",
]
