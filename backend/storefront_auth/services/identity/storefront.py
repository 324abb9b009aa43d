"""Primary identity exchange against the storefront GraphQL API."""

import logging
from typing import Any, Optional

from jose import JWTError, jwt as jose_jwt
from pydantic import ValidationError

from storefront_auth.config import AuthConfig
from storefront_auth.schemas.storefront import CustomerLogin, GraphQLResponse
from storefront_auth.services.identity.base import CustomerSession
from storefront_auth.services.storefront.client import StorefrontClient
from storefront_auth.services.storefront.documents import (
    LOGIN_MUTATION,
    LOGIN_WITH_JWT_MUTATION,
)
from storefront_auth.utils.logging_utils import redact_email

logger = logging.getLogger(__name__)


def peek_login_jwt_claims(token: str) -> tuple[Optional[str], Optional[str]]:
    """Read ``channel_id`` and ``impersonator_id`` from a login JWT without verifying it.

    These are routing hints only. The storefront verifies the token during
    the exchange.

    Raises:
        JWTError: If the token cannot be decoded
    """
    claims = jose_jwt.get_unverified_claims(token)
    channel_id = claims.get("channel_id")
    impersonator_id = claims.get("impersonator_id")
    return (
        str(channel_id) if channel_id is not None else None,
        str(impersonator_id) if impersonator_id is not None else None,
    )


class StorefrontIdentityExchanger:
    """Exchanges validated credentials for a customer and customer access token.

    A rejected login (GraphQL errors, or a payload without a customer or a
    non-empty token) is returned as ``None``. Transport failures propagate
    from the client as ``InfrastructureError``.
    """

    def __init__(self, config: AuthConfig, client: Optional[StorefrontClient] = None) -> None:
        self.config = config
        self.client = client or StorefrontClient(config)

    async def login_with_password(
        self, email: str, password: str, cart_id: Optional[str] = None
    ) -> Optional[CustomerSession]:
        response = await self.client.fetch(
            LOGIN_MUTATION,
            variables={"email": email, "password": password, "cartEntityId": cart_id},
        )
        session = self._extract(response, "login")
        if session is None:
            logger.info("Password login rejected for %s", redact_email(email))
        return session

    async def login_with_jwt(
        self, token: str, cart_id: Optional[str] = None
    ) -> Optional[CustomerSession]:
        try:
            channel_id, impersonator_id = peek_login_jwt_claims(token)
        except JWTError as exc:
            logger.info("JWT login rejected: token could not be decoded (%s)", exc)
            return None

        channel_id = channel_id or self.config.default_channel_id
        response = await self.client.fetch(
            LOGIN_WITH_JWT_MUTATION,
            variables={"jwt": token, "cartEntityId": cart_id},
            channel_id=channel_id,
        )
        session = self._extract(response, "loginWithCustomerLoginJwt")
        if session is None:
            logger.info("JWT login rejected on channel %s", channel_id)
            return None

        return CustomerSession(
            customer=session.customer,
            customer_access_token=session.customer_access_token,
            impersonator_id=impersonator_id,
        )

    @staticmethod
    def _extract(response: GraphQLResponse, field: str) -> Optional[CustomerSession]:
        if response.errors:
            logger.debug("Storefront %s returned %d error(s)", field, len(response.errors))
            return None

        payload: Any = (response.data or {}).get(field)
        if not isinstance(payload, dict):
            return None

        try:
            result = CustomerLogin.model_validate(payload)
        except ValidationError:
            logger.warning("Storefront %s payload did not match the expected shape", field)
            return None

        if result.customer is None or result.customer_access_token is None:
            return None

        return CustomerSession(
            customer=result.customer,
            customer_access_token=result.customer_access_token,
        )
