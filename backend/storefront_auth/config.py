"""Application configuration using Pydantic settings."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Storefront Auth"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Storefront (primary identity backend)
    STORE_HASH: str
    CHANNEL_ID: str  # Default channel when a login JWT carries no channel_id claim
    STOREFRONT_TOKEN: str
    STOREFRONT_API_HOST: str = "mybigcommerce.com"

    # B2B (secondary identity backend) - disabled when B2B_API_TOKEN is unset
    B2B_API_TOKEN: Optional[str] = None
    B2B_API_HOST: str = "https://api-b2b.bigcommerce.com"

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Session
    SESSION_SECRET: str
    SESSION_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "session_token"
    SESSION_MAX_AGE_DAYS: int = 30
    CART_COOKIE_NAME: str = "cartId"

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    # Monitoring
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # 'text' or 'json' (json for production)
    ENVIRONMENT: str = "development"  # development, staging, production

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("SESSION_SECRET")
    @classmethod
    def validate_session_secret(cls, v: str) -> str:
        """Validate SESSION_SECRET is not using insecure defaults in production."""
        insecure_defaults = [
            "dev-session-secret-change-in-production",
            "your-secret-here",
            "change-me",
            "secret",
        ]

        # Get ENVIRONMENT from environment variable directly (before Settings is fully initialized)
        import os

        environment = os.getenv("ENVIRONMENT", "development")

        if environment == "production" and (v in insecure_defaults or len(v) < 32):
            raise ValueError(
                "Insecure SESSION_SECRET detected in production! "
                "Generate a secure key with: openssl rand -hex 32"
            )

        return v

    @field_validator("STORE_HASH", "CHANNEL_ID")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Strip whitespace; empty values are treated as unset by the B2B bootstrap."""
        return v.strip()


@dataclass(frozen=True)
class AuthConfig:
    """Process-wide configuration handed to the identity exchangers.

    Built once from ``Settings`` at startup and passed explicitly, so the
    exchangers never read the environment at call time.
    """

    store_hash: str
    default_channel_id: str
    storefront_token: str
    storefront_api_host: str = "mybigcommerce.com"
    b2b_api_token: Optional[str] = None
    b2b_api_host: str = "https://api-b2b.bigcommerce.com"
    timeout: float = 10.0

    @property
    def b2b_enabled(self) -> bool:
        return bool(self.b2b_api_token)

    def graphql_url(self, channel_id: Optional[str] = None) -> str:
        """Storefront GraphQL endpoint for a channel (default channel when omitted)."""
        channel = channel_id or self.default_channel_id
        return f"https://store-{self.store_hash}-{channel}.{self.storefront_api_host}/graphql"

    @property
    def b2b_token_url(self) -> str:
        return f"{self.b2b_api_host.rstrip('/')}/api/io/auth/customers/storefront"

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthConfig":
        return cls(
            store_hash=settings.STORE_HASH,
            default_channel_id=settings.CHANNEL_ID,
            storefront_token=settings.STOREFRONT_TOKEN,
            storefront_api_host=settings.STOREFRONT_API_HOST,
            b2b_api_token=settings.B2B_API_TOKEN or None,
            b2b_api_host=settings.B2B_API_HOST,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache()
def get_auth_config() -> AuthConfig:
    """Get the immutable exchanger configuration derived from settings."""
    return AuthConfig.from_settings(get_settings())


settings = get_settings()
