"""Session claim assembly and the per-request merge rules."""

from typing import Optional

from storefront_auth.schemas.auth import SessionClaims, SessionUser, SessionView
from storefront_auth.services.identity.base import AuthenticatedCustomer


def build_claims(customer: AuthenticatedCustomer) -> SessionClaims:
    """Fresh claims for a customer who has just logged in."""
    return SessionClaims(
        name=customer.name,
        email=customer.email,
        customer_access_token=customer.customer_access_token,
        b2b_token=customer.b2b_token,
        impersonator_id=customer.impersonator_id,
    )


def update_claims(
    claims: SessionClaims, customer: Optional[AuthenticatedCustomer] = None
) -> SessionClaims:
    """
    Claims to persist for the next request.

    Without a login event the existing claims are returned as-is, so the call
    is idempotent and safe on overlapping requests. After a login every token
    and identity field is replaced, including clearing a B2B token the new
    login did not produce.
    """
    if customer is None:
        return claims

    return build_claims(customer)


def session_view(claims: Optional[SessionClaims]) -> Optional[SessionView]:
    """Externally visible session; ``None`` when there is no customer access token."""
    if claims is None or not claims.customer_access_token:
        return None

    user = None
    if claims.name or claims.email:
        user = SessionUser(name=claims.name, email=claims.email)

    return SessionView(
        user=user,
        customer_access_token=claims.customer_access_token,
        b2b_token=claims.b2b_token or None,
    )
