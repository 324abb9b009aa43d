"""Authentication API endpoints."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from storefront_auth.dependencies import get_current_session, get_service, get_session_store
from storefront_auth.schemas.auth import SessionClaims, SessionView
from storefront_auth.services.cart import get_cart_id
from storefront_auth.services.identity.service import AuthService
from storefront_auth.services.identity.session import session_view
from storefront_auth.services.session_store import SessionStore

router = APIRouter()


@router.post("/login", response_model=SessionView)
async def login(
    request: Request,
    credentials: Any = Body(None),
    store: SessionStore = Depends(get_session_store),
    service: AuthService = Depends(get_service),
):
    """
    Log in with ``{"type": "password", "email", "password"}`` or ``{"type": "jwt", "jwt"}``.

    Malformed and rejected credentials both return 401 so callers can simply
    redisplay the login form. Backend faults surface through the exception
    handlers registered in ``main``.
    """
    claims = await service.authenticate(credentials, get_cart_id(request), store)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed",
        )

    return session_view(claims)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    store: SessionStore = Depends(get_session_store),
    service: AuthService = Depends(get_service),
):
    """
    Log out. Always succeeds; the upstream token invalidation is best effort.
    """
    await service.logout(store)
    return None


@router.get("/session", response_model=Optional[SessionView])
async def get_session(
    claims: Optional[SessionClaims] = Depends(get_current_session),
):
    """
    Current session, or ``null`` for anonymous shoppers.
    """
    return session_view(claims)
