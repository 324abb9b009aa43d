"""Schemas for upstream storefront and B2B API payloads."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Upstream(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Customer(_Upstream):
    """Customer identity as returned by the storefront. Never modified locally."""

    entity_id: int = Field(..., alias="entityId")
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class CustomerAccessToken(_Upstream):
    """Bearer credential for the storefront, scoped to a customer and cart."""

    value: str = Field(..., min_length=1)
    expires_at: Optional[str] = Field(None, alias="expiresAt")


class CustomerLogin(_Upstream):
    """Result of a login mutation; either field may be null upstream."""

    customer: Optional[Customer] = None
    customer_access_token: Optional[CustomerAccessToken] = Field(
        None, alias="customerAccessToken"
    )


class GraphQLResponse(BaseModel):
    """Envelope of a storefront GraphQL response."""

    data: Optional[dict[str, Any]] = None
    errors: Optional[list[dict[str, Any]]] = None


class B2BTokenData(BaseModel):
    token: list[str]


class B2BTokenResponse(BaseModel):
    """Response of ``POST /api/io/auth/customers/storefront``."""

    data: B2BTokenData
