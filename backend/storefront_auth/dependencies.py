"""FastAPI dependencies for the session and the auth service."""

from typing import Optional

from fastapi import Depends, Request, Response

from storefront_auth.schemas.auth import SessionClaims
from storefront_auth.services.identity.service import AuthService, get_auth_service
from storefront_auth.services.session_store import CookieSessionStore, SessionStore


def get_session_store(request: Request, response: Response) -> SessionStore:
    """Cookie-backed store bound to the current request/response pair."""
    return CookieSessionStore(request, response)


def get_service() -> AuthService:
    return get_auth_service()


def get_current_session(
    store: SessionStore = Depends(get_session_store),
    service: AuthService = Depends(get_service),
) -> Optional[SessionClaims]:
    """
    Current session claims, refreshed for this request.

    Returns ``None`` for anonymous shoppers (no cookie, or an unreadable one).
    """
    return service.refresh(store)
