"""Signing and verification of the persisted session."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import jwt

from storefront_auth.config import settings
from storefront_auth.schemas.auth import SessionClaims


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def encode_session(claims: SessionClaims, expires_delta: Optional[timedelta] = None) -> str:
    """
    Encode session claims as a signed JWT.

    Args:
        claims: Claims to persist
        expires_delta: Optional custom lifetime (defaults to SESSION_MAX_AGE_DAYS)

    Returns:
        Encoded JWT
    """
    now = utc_now()
    expire = now + (expires_delta or timedelta(days=settings.SESSION_MAX_AGE_DAYS))

    to_encode: dict[str, Any] = claims.model_dump(exclude_none=True)
    to_encode.update({"iat": now, "exp": expire})

    return jwt.encode(to_encode, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGORITHM)


def decode_session(token: str) -> SessionClaims:
    """
    Decode and verify a session JWT.

    Raises:
        JWTError: If the token is invalid, tampered with, or expired
    """
    payload = jwt.decode(token, settings.SESSION_SECRET, algorithms=[settings.SESSION_ALGORITHM])
    return SessionClaims.model_validate(payload)
