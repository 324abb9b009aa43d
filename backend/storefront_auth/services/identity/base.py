"""Shared types for the identity exchangers."""

from dataclasses import dataclass
from typing import Optional

from storefront_auth.schemas.storefront import Customer, CustomerAccessToken


@dataclass(frozen=True)
class CustomerSession:
    """Successful primary exchange: the customer and their storefront token."""

    customer: Customer
    customer_access_token: CustomerAccessToken
    impersonator_id: Optional[str] = None


@dataclass(frozen=True)
class AuthenticatedCustomer:
    """Normalized result of ``authorize`` after every exchange has succeeded.

    ``b2b_token`` is only set when the B2B backend is configured; in that case
    it is always set, since a failed B2B exchange aborts the login.
    """

    name: str
    email: str
    customer_access_token: str
    impersonator_id: Optional[str] = None
    b2b_token: Optional[str] = None
