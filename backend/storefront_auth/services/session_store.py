"""Persisted-session collaborators."""

from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Request, Response

from storefront_auth.config import settings
from storefront_auth.core.security import decode_session, encode_session
from storefront_auth.schemas.auth import SessionClaims


class SessionStore(ABC):
    """Loads and saves session claims; transport is up to the implementation."""

    @abstractmethod
    def load(self) -> Optional[SessionClaims]:
        """Return the stored claims, or ``None`` when there is no session.

        May raise if the stored session is corrupt or the backend fails.
        """

    @abstractmethod
    def save(self, claims: SessionClaims) -> None:
        """Persist claims, replacing any existing session."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored session."""


class CookieSessionStore(SessionStore):
    """Stores claims as a signed JWT in an httpOnly cookie.

    Reads come from the incoming request; writes go to the outgoing response.
    """

    def __init__(self, request: Request, response: Response) -> None:
        self.request = request
        self.response = response
        self.cookie_name = settings.SESSION_COOKIE_NAME

    def load(self) -> Optional[SessionClaims]:
        raw = self.request.cookies.get(self.cookie_name)
        if not raw:
            return None
        return decode_session(raw)

    def save(self, claims: SessionClaims) -> None:
        self.response.set_cookie(
            key=self.cookie_name,
            value=encode_session(claims),
            httponly=True,
            secure=not settings.DEBUG,  # False in dev (http), True in prod (https)
            samesite="lax",
            max_age=settings.SESSION_MAX_AGE_DAYS * 86400,
            path="/",
        )

    def clear(self) -> None:
        self.response.delete_cookie(key=self.cookie_name, path="/")
