"""Member schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class MemberProfileUpdate(BaseModel):
    """Update the current member's profile."""

    email: EmailStr | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    show_email: bool | None = None
    bio: str | None = Field(None, max_length=5000)


class MemberResponse(BaseModel):
    """Public member information."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    login_name: str
    slug: str
    show_email: bool
    location: str | None
    latitude: float | None
    longitude: float | None
    bio: str | None
    confirmed_at: datetime | None
    created_at: datetime
    updated_at: datetime


class MemberDetailResponse(MemberResponse):
    """Member profile with association counts."""

    public_email: str | None = None
    role_names: list[str] = []
    garden_count: int = 0
    planting_count: int = 0
    post_count: int = 0
    comment_count: int = 0
    forum_count: int = 0


class RoleAssign(BaseModel):
    """Assign a role to a member."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)


class RoleResponse(BaseModel):
    """Role response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
