"""Guest cart context."""

from typing import Optional

from fastapi import Request

from storefront_auth.config import settings


def get_cart_id(request: Request) -> Optional[str]:
    """Guest cart id from the cart cookie, if the shopper has one."""
    return request.cookies.get(settings.CART_COOKIE_NAME) or None
