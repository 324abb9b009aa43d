"""Authentication Pydantic schemas."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter


class PasswordCredentials(BaseModel):
    """Email + password login."""

    type: Literal["password"]
    email: EmailStr
    password: str = Field(..., min_length=1)


class JwtCredentials(BaseModel):
    """Login with a pre-issued customer login JWT."""

    type: Literal["jwt"]
    jwt: str = Field(..., min_length=1)


Credentials = Annotated[
    Union[PasswordCredentials, JwtCredentials],
    Field(discriminator="type"),
]

credentials_adapter: TypeAdapter[Credentials] = TypeAdapter(Credentials)


class SessionClaims(BaseModel):
    """Claims persisted in the session cookie.

    A claims object without ``customer_access_token`` is equivalent to no session.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None
    customer_access_token: Optional[str] = None
    b2b_token: Optional[str] = None
    impersonator_id: Optional[str] = None


class SessionUser(BaseModel):
    """Display fields exposed with the session."""

    name: Optional[str] = None
    email: Optional[str] = None


class SessionView(BaseModel):
    """Session as seen by other subsystems."""

    user: Optional[SessionUser] = None
    customer_access_token: Optional[str] = None
    b2b_token: Optional[str] = None


class B2BBootstrapResponse(BaseModel):
    """Settings the B2B storefront bundle needs to start."""

    store_hash: str
    channel_id: str
    platform: str = "catalyst"
    cart_url: str = "/cart"
    session: Optional[SessionView] = None
