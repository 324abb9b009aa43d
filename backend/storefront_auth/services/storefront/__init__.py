"""Storefront GraphQL API access."""

from storefront_auth.services.storefront.client import StorefrontClient

__all__ = ["StorefrontClient"]
