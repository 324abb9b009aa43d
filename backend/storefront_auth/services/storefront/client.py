"""Minimal GraphQL client for the storefront API."""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from storefront_auth.config import AuthConfig
from storefront_auth.exceptions import (
    ConfigurationError,
    InfrastructureError,
    UpstreamProtocolError,
)
from storefront_auth.schemas.storefront import GraphQLResponse

logger = logging.getLogger(__name__)

CUSTOMER_ACCESS_TOKEN_HEADER = "X-Bc-Customer-Access-Token"


class StorefrontClient:
    """Sends GraphQL documents to the channel-specific storefront endpoint.

    GraphQL ``errors`` are returned to the caller untouched. A 401 or 403 means
    the storefront token is wrong and raises ``ConfigurationError``. Transport
    failures and other non-2xx statuses raise ``InfrastructureError``; a body
    that is not a GraphQL envelope raises ``UpstreamProtocolError``.
    """

    def __init__(
        self,
        config: AuthConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self._transport = transport

    async def fetch(
        self,
        document: str,
        variables: Optional[dict[str, Any]] = None,
        channel_id: Optional[str] = None,
        customer_access_token: Optional[str] = None,
    ) -> GraphQLResponse:
        url = self.config.graphql_url(channel_id)
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.storefront_token}",
        }
        if customer_access_token:
            headers[CUSTOMER_ACCESS_TOKEN_HEADER] = customer_access_token

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    url,
                    json={"query": document, "variables": variables or {}},
                    headers=headers,
                )
                if response.status_code in (401, 403):
                    raise ConfigurationError(
                        f"Storefront rejected STOREFRONT_TOKEN (HTTP {response.status_code})"
                    )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            logger.warning("Storefront request to %s failed: %s", url, type(exc).__name__)
            raise InfrastructureError(f"Storefront request failed: {exc}") from exc
        except ValueError as exc:
            # Body was not JSON
            raise UpstreamProtocolError("Storefront returned a non-JSON response") from exc

        if not isinstance(payload, dict):
            raise UpstreamProtocolError("Storefront returned an unexpected payload")

        try:
            return GraphQLResponse.model_validate(payload)
        except ValidationError as exc:
            raise UpstreamProtocolError("Storefront response envelope is malformed") from exc
