"""B2B storefront bootstrap endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends

from storefront_auth.config import settings
from storefront_auth.dependencies import get_current_session
from storefront_auth.exceptions import ConfigurationError
from storefront_auth.schemas.auth import B2BBootstrapResponse, SessionClaims
from storefront_auth.services.identity.session import session_view

router = APIRouter()


@router.get("/config", response_model=B2BBootstrapResponse)
async def get_b2b_config(
    claims: Optional[SessionClaims] = Depends(get_current_session),
):
    """
    Settings and session tokens for the B2B storefront bundle.

    Raises ConfigurationError (HTTP 500) when STORE_HASH or CHANNEL_ID is blank.
    """
    if not settings.STORE_HASH or not settings.CHANNEL_ID:
        raise ConfigurationError("STORE_HASH or CHANNEL_ID is not set")

    return B2BBootstrapResponse(
        store_hash=settings.STORE_HASH,
        channel_id=settings.CHANNEL_ID,
        session=session_view(claims),
    )
