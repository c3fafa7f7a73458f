"""Authentication schemas."""

from pydantic import BaseModel, EmailStr, Field

from src.schemas.member import MemberResponse


class MemberSignup(BaseModel):
    """Member signup request.

    Login name rules are checked by the member service so that every broken
    rule can be reported at once.
    """

    login_name: str = Field(..., max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=72)
    tos_agreement: bool = False
    location: str | None = Field(None, max_length=255)
    show_email: bool = False
    bio: str | None = Field(None, max_length=5000)


class MemberLogin(BaseModel):
    """Member login request."""

    login_name: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=72)


class AuthResponse(BaseModel):
    """Authentication response with token and member info."""

    access_token: str
    token_type: str = "bearer"  # noqa: S105
    member: MemberResponse
