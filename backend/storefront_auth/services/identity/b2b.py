"""Secondary token exchange against the B2B API."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from storefront_auth.config import AuthConfig
from storefront_auth.exceptions import (
    ConfigurationError,
    InfrastructureError,
    UpstreamProtocolError,
)
from storefront_auth.schemas.storefront import (
    B2BTokenResponse,
    Customer,
    CustomerAccessToken,
)

logger = logging.getLogger(__name__)


class B2BTokenExchanger:
    """Trades a customer id + customer access token for a B2B token.

    Every failure here is a fault, not a rejection: the caller must abort the
    login rather than fall back to a storefront-only session.
    """

    def __init__(
        self,
        config: AuthConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self._transport = transport

    async def exchange(
        self, customer: Customer, customer_access_token: CustomerAccessToken
    ) -> str:
        """
        Request a B2B token for a freshly logged-in customer.

        Returns:
            The first token in the response

        Raises:
            ConfigurationError: B2B_API_TOKEN is not configured
            UpstreamProtocolError: Bad status, malformed body or empty token list
            InfrastructureError: The request could not be sent
        """
        if not self.config.b2b_api_token:
            raise ConfigurationError("Environment variable B2B_API_TOKEN is not set")

        payload = {
            "channelId": self.config.default_channel_id,
            "customerId": customer.entity_id,
            "customerAccessToken": customer_access_token.model_dump(by_alias=True),
        }
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "authToken": self.config.b2b_api_token,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.config.b2b_token_url, json=payload, headers=headers
                )
        except httpx.HTTPError as exc:
            logger.error("B2B token request failed: %s", type(exc).__name__)
            raise InfrastructureError(f"B2B token request failed: {exc}") from exc

        if response.is_error:
            raise UpstreamProtocolError(
                f"B2B API returned HTTP {response.status_code}"
            )

        try:
            parsed = B2BTokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise UpstreamProtocolError("B2B API returned an unexpected response") from exc

        if not parsed.data.token or not parsed.data.token[0]:
            raise UpstreamProtocolError("No token returned from B2B API")

        logger.debug("B2B token issued for customer %s", customer.entity_id)
        return parsed.data.token[0]
