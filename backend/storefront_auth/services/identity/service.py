"""AuthService: login, per-request refresh, token access and logout."""

import logging
from typing import Any, Optional

from storefront_auth.config import AuthConfig, get_auth_config
from storefront_auth.exceptions import CredentialValidationError
from storefront_auth.schemas.auth import JwtCredentials, PasswordCredentials, SessionClaims
from storefront_auth.services.error_logging_service import error_logging_service
from storefront_auth.services.identity.b2b import B2BTokenExchanger
from storefront_auth.services.identity.base import AuthenticatedCustomer, CustomerSession
from storefront_auth.services.identity.credentials import parse_credentials
from storefront_auth.services.identity.session import build_claims, update_claims
from storefront_auth.services.identity.storefront import StorefrontIdentityExchanger
from storefront_auth.services.session_store import SessionStore
from storefront_auth.services.storefront.client import StorefrontClient
from storefront_auth.services.storefront.documents import LOGOUT_MUTATION
from storefront_auth.utils.logging_utils import redact_email

logger = logging.getLogger(__name__)

# Module-level singleton (built lazily on first request)
_service: Optional["AuthService"] = None


class AuthService:
    """Orchestrates the storefront and B2B exchanges around a session store.

    Two result channels: a rejected login returns ``None``; configuration,
    protocol and infrastructure faults raise and abort the whole attempt.
    """

    def __init__(
        self,
        config: AuthConfig,
        client: Optional[StorefrontClient] = None,
        b2b: Optional[B2BTokenExchanger] = None,
    ) -> None:
        self.config = config
        self.client = client or StorefrontClient(config)
        self.storefront = StorefrontIdentityExchanger(config, self.client)
        self.b2b = b2b or B2BTokenExchanger(config)

    async def authorize(
        self, raw_credentials: Any, cart_id: Optional[str] = None
    ) -> Optional[AuthenticatedCustomer]:
        """Validate credentials and run every exchange.

        Raises:
            CredentialValidationError: Malformed payload (no network call made)
            ConfigurationError, UpstreamProtocolError, InfrastructureError:
                Faults that abort the login
        """
        credentials = parse_credentials(raw_credentials)

        if isinstance(credentials, PasswordCredentials):
            session = await self.storefront.login_with_password(
                credentials.email, credentials.password, cart_id
            )
        elif isinstance(credentials, JwtCredentials):
            session = await self.storefront.login_with_jwt(credentials.jwt, cart_id)
        else:  # pragma: no cover - the union has exactly two members
            raise CredentialValidationError(
                f"Unsupported credential type {type(credentials).__name__}"
            )

        if session is None:
            return None

        b2b_token = None
        if self.config.b2b_enabled:
            b2b_token = await self.b2b.exchange(session.customer, session.customer_access_token)

        return self._to_authenticated(session, b2b_token)

    async def authenticate(
        self, raw_credentials: Any, cart_id: Optional[str], store: SessionStore
    ) -> Optional[SessionClaims]:
        """Log in and persist the new session.

        Returns ``None`` (nothing saved) for malformed or rejected credentials.
        Faults propagate and nothing is saved.
        """
        try:
            customer = await self.authorize(raw_credentials, cart_id)
        except CredentialValidationError as exc:
            logger.info("Login payload rejected: %s", exc.errors)
            return None

        if customer is None:
            return None

        claims = build_claims(customer)
        store.save(claims)
        logger.info(
            "Customer logged in: email=%s b2b=%s impersonated=%s",
            redact_email(customer.email),
            customer.b2b_token is not None,
            customer.impersonator_id is not None,
        )
        return claims

    def refresh(self, store: SessionStore) -> Optional[SessionClaims]:
        """Per-request update: reload, merge (no login event) and re-save."""
        claims = self._load(store)
        if claims is None or not claims.customer_access_token:
            return None

        claims = update_claims(claims)
        store.save(claims)
        return claims

    def get_session_token(self, store: SessionStore) -> Optional[str]:
        """Current customer access token, or ``None``. Never raises."""
        claims = self._load(store)
        if claims is None:
            return None
        return claims.customer_access_token or None

    async def logout(self, store: SessionStore) -> None:
        """Invalidate the token upstream (best effort) and always clear the session."""
        token = self.get_session_token(store)

        try:
            if token:
                await self.client.fetch(LOGOUT_MUTATION, customer_access_token=token)
        except Exception as exc:
            error_logging_service.log_error(
                logger=logger, error=exc, context={"operation": "storefront_logout"}
            )
        finally:
            store.clear()

    @staticmethod
    def _load(store: SessionStore) -> Optional[SessionClaims]:
        try:
            return store.load()
        except Exception as exc:
            # Corrupt or unreadable session counts as anonymous
            logger.debug("Session could not be loaded: %s", type(exc).__name__)
            return None

    @staticmethod
    def _to_authenticated(
        session: CustomerSession, b2b_token: Optional[str]
    ) -> AuthenticatedCustomer:
        return AuthenticatedCustomer(
            name=session.customer.full_name,
            email=session.customer.email,
            customer_access_token=session.customer_access_token.value,
            impersonator_id=session.impersonator_id,
            b2b_token=b2b_token,
        )


def get_auth_service() -> AuthService:
    """Return the singleton service, building it on first call."""
    global _service
    if _service is None:
        _service = AuthService(get_auth_config())
    return _service

